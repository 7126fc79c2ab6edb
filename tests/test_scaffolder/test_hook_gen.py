"""Tests for custom hook file generation."""

from __future__ import annotations

import pytest

from recomp.config import FileSelection
from recomp.scaffolder.hook_gen import HookGenerator, index_blocks, main_blocks
from recomp.scaffolder.templates import TemplateRenderer

pytestmark = pytest.mark.unit


@pytest.fixture
def hook_gen(renderer: TemplateRenderer) -> HookGenerator:
    return HookGenerator(renderer)


class TestFragmentSelection:
    def test_index_blocks(self):
        assert index_blocks(FileSelection()) == [["hook/index/main", "hook/index/types"]]
        assert index_blocks(FileSelection(include_types=False)) == [["hook/index/main"]]

    def test_main_blocks(self):
        typed = [n for block in main_blocks(FileSelection()) for n in block]
        untyped = [n for block in main_blocks(FileSelection(include_types=False)) for n in block]
        assert typed[0] == "hook/main/import_types"
        assert "hook/main/import_types" not in untyped
        assert "hook/main/body_untyped" in untyped


class TestBuildFiles:
    def test_default_file_set(self, hook_gen: HookGenerator):
        files = hook_gen.build_files("Debounce", FileSelection(include_css=False))
        assert [f.path for f in files] == ["index.ts", "useDebounce.types.ts", "useDebounce.ts"]

    def test_folder_has_no_prefix_or_suffix(self, hook_gen: HookGenerator):
        assert hook_gen.folder_name("Debounce") == "Debounce"

    def test_typed_hook(self, hook_gen: HookGenerator):
        files = {f.path: f.content for f in hook_gen.build_files("Debounce", FileSelection())}
        main = files["useDebounce.ts"]
        assert main.startswith(
            "import type { useDebounceOptions, useDebounceReturn } from './useDebounce.types';\n"
        )
        assert (
            "export function useDebounce(options: useDebounceOptions = {}): useDebounceReturn {"
            in main
        )
        assert main.endswith("export default useDebounce;\n")

        types = files["useDebounce.types.ts"]
        assert "export interface useDebounceOptions {" in types
        assert "export interface useDebounceReturn {" in types

    def test_untyped_hook_with_barrel(self, hook_gen: HookGenerator):
        files = hook_gen.build_files("Debounce", FileSelection(include_types=False))
        assert [f.path for f in files] == ["index.ts", "useDebounce.ts"]

        barrel, main = files[0].content, files[1].content
        assert barrel == (
            "export { default } from './useDebounce';\n"
            "export * from './useDebounce';\n"
        )
        assert "import" not in main
        assert "export function useDebounce(options = {}) {" in main

    def test_barrel_with_types(self, hook_gen: HookGenerator):
        files = {f.path: f.content for f in hook_gen.build_files("Toggle", FileSelection())}
        assert "export * from './useToggle.types';" in files["index.ts"]
