"""React context file generation.

A context lives in ``<Name>Context/`` and always has ``<Name>Context.tsx``
with the context object, a provider, and a ``use<Name>`` accessor.  The
state and context-value types are declared in exactly one place: the
optional ``<Name>Context.types.ts`` file, or inline in the main file.
"""

from __future__ import annotations

from recomp.config import FileSelection

from .models import GeneratedFile
from .naming import context_folder_name
from .templates import Block, TemplateRenderer

_TYPE_DECLARATIONS: Block = ["context/types/state"]
_VALUE_DECLARATION: Block = ["context/types/value"]


# ---------------------------------------------------------------------------
# Fragment selection
# ---------------------------------------------------------------------------


def index_blocks(selection: FileSelection) -> list[Block]:
    lines = ["context/index/main"]
    if selection.include_types:
        lines.append("context/index/types")
    return [lines]


def types_blocks(selection: FileSelection) -> list[Block]:
    return [["context/types/import_react"], _TYPE_DECLARATIONS, _VALUE_DECLARATION]


def main_blocks(selection: FileSelection) -> list[Block]:
    """Imports, type declarations (inline only), state, context, provider, accessor."""
    if selection.include_types:
        blocks: list[Block] = [["context/main/import_react", "context/main/import_types"]]
    else:
        blocks = [["context/main/import_react_inline"], _TYPE_DECLARATIONS, _VALUE_DECLARATION]

    blocks.extend([
        ["context/main/initial_state"],
        ["context/main/context"],
        ["context/main/provider"],
        ["context/main/accessor"],
        ["context/main/export"],
    ])
    return blocks


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ContextGenerator:
    """Composes the files of a React context with provider and accessor hook."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def folder_name(self, name: str) -> str:
        return context_folder_name(name)

    def build_files(self, name: str, selection: FileSelection) -> list[GeneratedFile]:
        """Return the context's files in progress-report order.

        ``selection.include_css`` is ignored.
        """
        context = {"name": name}
        module = context_folder_name(name)
        files: list[GeneratedFile] = []

        if selection.include_index:
            files.append(self._file("index.ts", index_blocks(selection), context))
        if selection.include_types:
            files.append(self._file(f"{module}.types.ts", types_blocks(selection), context))
        files.append(self._file(f"{module}.tsx", main_blocks(selection), context))
        return files

    def _file(self, path: str, blocks: list[Block], context: dict[str, str]) -> GeneratedFile:
        return GeneratedFile(path=path, content=self.renderer.compose(blocks, context))
