"""React component file generation.

A component lives in ``<Name>/`` and always has ``<Name>.tsx``.  The CSS
module, the props types file, and the ``index.ts`` barrel are optional; the
main file and the barrel only reference the optional files that are actually
emitted.
"""

from __future__ import annotations

from recomp.config import FileSelection

from .models import GeneratedFile
from .templates import Block, TemplateRenderer


# ---------------------------------------------------------------------------
# Fragment selection
# ---------------------------------------------------------------------------


def index_blocks(selection: FileSelection) -> list[Block]:
    """Barrel re-exports: the component, then styles and props when emitted."""
    lines = ["component/index/main"]
    if selection.include_css:
        lines.append("component/index/styles")
    if selection.include_types:
        lines.append("component/index/types")
    return [lines]


def types_blocks(selection: FileSelection) -> list[Block]:
    return [["component/types/props"]]


def styles_blocks(selection: FileSelection) -> list[Block]:
    return [["component/styles/root"]]


def main_blocks(selection: FileSelection) -> list[Block]:
    """Imports, props declaration (inline without a types file), body, export."""
    imports = ["component/main/import_react"]
    if selection.include_css:
        imports.append("component/main/import_styles")
    if selection.include_types:
        imports.append("component/main/import_types")

    blocks: list[Block] = [imports]
    if not selection.include_types:
        blocks.append(["component/main/inline_props"])
    if selection.include_css:
        blocks.append(["component/main/body_styled"])
    else:
        blocks.append(["component/main/body_plain"])
    blocks.append(["component/main/export"])
    return blocks


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ComponentGenerator:
    """Composes the files of a React function component."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def folder_name(self, name: str) -> str:
        return name

    def build_files(self, name: str, selection: FileSelection) -> list[GeneratedFile]:
        """Return the component's files in progress-report order.

        Args:
            name: The component's PascalName.
            selection: Which optional files to emit.
        """
        context = {"name": name}
        files: list[GeneratedFile] = []

        if selection.include_index:
            files.append(self._file("index.ts", index_blocks(selection), context))
        if selection.include_types:
            files.append(self._file(f"{name}.types.ts", types_blocks(selection), context))
        if selection.include_css:
            files.append(self._file(f"{name}.module.css", styles_blocks(selection), context))
        files.append(self._file(f"{name}.tsx", main_blocks(selection), context))
        return files

    def _file(self, path: str, blocks: list[Block], context: dict[str, str]) -> GeneratedFile:
        return GeneratedFile(path=path, content=self.renderer.compose(blocks, context))
