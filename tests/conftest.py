"""Shared pytest fixtures for the recomp test suite.

Provides reusable fixtures for:
- Temporary base directories for generated artifacts
- A TemplateRenderer and a quiet ArtifactGenerator
- FileSelection variants
"""

from __future__ import annotations

from pathlib import Path

import pytest

from recomp.config import FileSelection
from recomp.scaffolder import ArtifactGenerator, TemplateRenderer


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """Base directory artifacts are generated into (not created up front)."""
    return tmp_path / "src" / "components"


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def generator(renderer: TemplateRenderer) -> ArtifactGenerator:
    """An ArtifactGenerator that does not print progress."""
    return ArtifactGenerator(renderer, verbose=False)


# ---------------------------------------------------------------------------
# File selections
# ---------------------------------------------------------------------------

@pytest.fixture
def all_files() -> FileSelection:
    return FileSelection()


@pytest.fixture
def no_optional_files() -> FileSelection:
    return FileSelection(include_types=False, include_css=False, include_index=False)
