"""Custom React hook file generation.

A hook lives in ``<Name>/`` (no ``use`` prefix, no ``Hook`` suffix) and
always has ``use<Name>.ts``.  With a types file the hook is annotated with
``use<Name>Options`` and ``use<Name>Return``; without one its parameters are
left to inference.
"""

from __future__ import annotations

from recomp.config import FileSelection

from .models import GeneratedFile
from .templates import Block, TemplateRenderer


# ---------------------------------------------------------------------------
# Fragment selection
# ---------------------------------------------------------------------------


def index_blocks(selection: FileSelection) -> list[Block]:
    lines = ["hook/index/main"]
    if selection.include_types:
        lines.append("hook/index/types")
    return [lines]


def types_blocks(selection: FileSelection) -> list[Block]:
    return [["hook/types/options"], ["hook/types/return"]]


def main_blocks(selection: FileSelection) -> list[Block]:
    if selection.include_types:
        return [["hook/main/import_types"], ["hook/main/body_typed"], ["hook/main/export"]]
    return [["hook/main/body_untyped"], ["hook/main/export"]]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class HookGenerator:
    """Composes the files of a custom hook."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def folder_name(self, name: str) -> str:
        return name

    def build_files(self, name: str, selection: FileSelection) -> list[GeneratedFile]:
        """Return the hook's files in progress-report order.

        Args:
            name: The hook's PascalName without the ``use`` prefix.
            selection: Which optional files to emit (``include_css`` ignored).
        """
        context = {"name": name}
        module = f"use{name}"
        files: list[GeneratedFile] = []

        if selection.include_index:
            files.append(self._file("index.ts", index_blocks(selection), context))
        if selection.include_types:
            files.append(self._file(f"{module}.types.ts", types_blocks(selection), context))
        files.append(self._file(f"{module}.ts", main_blocks(selection), context))
        return files

    def _file(self, path: str, blocks: list[Block], context: dict[str, str]) -> GeneratedFile:
        return GeneratedFile(path=path, content=self.renderer.compose(blocks, context))
