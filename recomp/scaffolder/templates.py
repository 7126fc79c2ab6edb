"""Jinja2 fragment rendering for artifact scaffolding.

Provides the TemplateRenderer class which renders the named fragments from
:mod:`recomp.scaffolder.fragments` and assembles them into complete file
contents.  A file is described as an ordered list of *blocks*; each block is
an ordered list of fragment names.  Fragments inside a block are joined by a
newline (import groups), blocks are separated by a blank line.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, select_autoescape

from .fragments import FRAGMENTS

Block = Sequence[str]


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders fragment templates into generated file contents.

    Fragments are loaded from an in-memory table so the renderer never
    touches the filesystem.  Undefined template variables raise instead of
    rendering as empty strings.
    """

    def __init__(self, fragments: Mapping[str, str] | None = None) -> None:
        if fragments is None:
            fragments = FRAGMENTS
        self.env = Environment(
            loader=DictLoader(dict(fragments)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=False,
            undefined=StrictUndefined,
        )
        # Register custom filter
        self.env.filters["hook_name"] = _hook_name_filter

    # -- Single fragment rendering -----------------------------------------

    def render(self, fragment: str, context: dict[str, Any]) -> str:
        """Render a single fragment with the provided context.

        Args:
            fragment: Fragment key, e.g. ``"component/main/export"``.
            context: Variables available inside the fragment.

        Returns:
            The rendered text, without a trailing newline.
        """
        template = self.env.get_template(fragment)
        return template.render(**context)

    # -- File assembly -----------------------------------------------------

    def compose(self, blocks: Sequence[Block], context: dict[str, Any]) -> str:
        """Render *blocks* and join them into the text of one file.

        Empty blocks are dropped.  The result always ends with exactly one
        newline.
        """
        rendered = [
            "\n".join(self.render(name, context) for name in block)
            for block in blocks
            if block
        ]
        return "\n\n".join(rendered) + "\n"

    # -- Utility -----------------------------------------------------------

    def list_fragments(self, prefix: str = "") -> list[str]:
        """Return a sorted list of fragment keys starting with *prefix*."""
        return sorted(
            name for name in self.env.list_templates() if name.startswith(prefix)
        )


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _hook_name_filter(value: str) -> str:
    """Convert a hook PascalName ``Debounce`` to its function name ``useDebounce``."""
    return f"use{value}"
