"""Pydantic v2 models describing one scaffolding run.

A :class:`GenerationPlan` is resolved once from the command line and expands
into an ordered list of :class:`GeneratedFile` values.  Both are frozen.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from recomp.config import ArtifactKind, FileSelection


class GeneratedFile(BaseModel):
    """One unit of output, relative to the artifact directory.

    The artifact directory itself is represented with ``path="."`` and
    ``content=None``.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Path relative to the artifact directory")
    content: Optional[str] = Field(default=None, description="File text; None for a directory")

    @property
    def is_directory(self) -> bool:
        return self.content is None


class GenerationPlan(BaseModel):
    """Fully resolved description of what to create for one invocation."""

    model_config = ConfigDict(frozen=True)

    kind: ArtifactKind
    raw_name: str = Field(..., description="Name as typed, e.g. 'use-toggle'")
    name: str = Field(..., description="PascalName used inside generated files")
    folder_name: str = Field(..., description="Artifact directory name")
    base_dir: Path = Field(..., description="Directory the artifact folder is created in")
    selection: FileSelection = Field(default_factory=FileSelection)

    @property
    def target_dir(self) -> Path:
        """``base_dir / folder_name``."""
        return self.base_dir / self.folder_name
