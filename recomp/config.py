"""recomp configuration.

There is no configuration file and no environment lookup.  The command line
is parsed once into an immutable :class:`GenerateRequest`; everything below
the CLI receives plain values built from it.  Default-resolution helpers are
pure functions so they can be tested without touching ``argv``.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from recomp.errors import UnknownTypeError


class ArtifactKind(str, Enum):
    """The category of artifact to scaffold."""
    COMPONENT = "component"
    CONTEXT = "context"
    HOOK = "hook"

    @classmethod
    def from_token(cls, token: str) -> "ArtifactKind":
        """Resolve a command-line token (case-insensitive) to an ArtifactKind.

        Raises:
            UnknownTypeError: If *token* does not name a kind.
        """
        try:
            return cls(token.strip().lower())
        except ValueError:
            raise UnknownTypeError(token) from None

    @property
    def label(self) -> str:
        """Capitalised display name, e.g. ``"Component"``."""
        return self.value.capitalize()


DEFAULT_BASE_DIRS: dict[ArtifactKind, Path] = {
    ArtifactKind.COMPONENT: Path("./src/components"),
    ArtifactKind.CONTEXT: Path("./src/contexts"),
    ArtifactKind.HOOK: Path("./src/hooks"),
}


def default_base_dir(kind: ArtifactKind) -> Path:
    """Return the base directory used when no directory is given."""
    return DEFAULT_BASE_DIRS[kind]


class FileSelection(BaseModel):
    """Which optional files to emit alongside the main source file."""

    model_config = ConfigDict(frozen=True)

    include_types: bool = Field(default=True, description="Emit a separate types file")
    include_css: bool = Field(default=True, description="Emit a CSS module (components only)")
    include_index: bool = Field(default=True, description="Emit an index.ts barrel")


def resolve_selection(
    kind: ArtifactKind,
    *,
    no_types: bool = False,
    no_css: bool = False,
    no_index: bool = False,
    no_all: bool = False,
) -> FileSelection:
    """Turn the ``--no-*`` flags into a FileSelection for *kind*.

    ``no_all`` wins over the individual flags.  The CSS flag only applies to
    components; for contexts and hooks ``include_css`` is always ``False``.
    """
    if no_all:
        return FileSelection(include_types=False, include_css=False, include_index=False)
    return FileSelection(
        include_types=not no_types,
        include_css=kind is ArtifactKind.COMPONENT and not no_css,
        include_index=not no_index,
    )


class GenerateRequest(BaseModel):
    """A fully parsed ``recomp gen`` invocation."""

    model_config = ConfigDict(frozen=True)

    kind: ArtifactKind
    name: str = Field(..., description="Raw hyphen-delimited name, e.g. 'user-profile'")
    directory: Optional[Path] = Field(
        default=None, description="Base directory; None means the kind's default"
    )
    selection: FileSelection = Field(default_factory=FileSelection)

    @property
    def base_dir(self) -> Path:
        """The explicit directory, or the kind-specific default."""
        return self.directory if self.directory is not None else default_base_dir(self.kind)
