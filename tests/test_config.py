"""Unit tests for recomp.config.

Tests cover:
- ArtifactKind token resolution and labels
- default_base_dir per kind
- resolve_selection flag handling (--no-all umbrella, css only for components)
- FileSelection / GenerateRequest immutability and defaults
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from recomp.config import (
    DEFAULT_BASE_DIRS,
    ArtifactKind,
    FileSelection,
    GenerateRequest,
    default_base_dir,
    resolve_selection,
)
from recomp.errors import UnknownTypeError


# ---------------------------------------------------------------------------
# ArtifactKind
# ---------------------------------------------------------------------------


class TestArtifactKind:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("component", ArtifactKind.COMPONENT),
            ("context", ArtifactKind.CONTEXT),
            ("hook", ArtifactKind.HOOK),
            ("Component", ArtifactKind.COMPONENT),
            ("HOOK", ArtifactKind.HOOK),
        ],
    )
    def test_from_token(self, token: str, expected: ArtifactKind):
        assert ArtifactKind.from_token(token) is expected

    @pytest.mark.unit
    def test_unknown_token(self):
        with pytest.raises(UnknownTypeError) as exc_info:
            ArtifactKind.from_token("service")
        assert exc_info.value.token == "service"
        assert "service" in str(exc_info.value)

    @pytest.mark.unit
    def test_label(self):
        assert ArtifactKind.CONTEXT.label == "Context"


# ---------------------------------------------------------------------------
# Default directories
# ---------------------------------------------------------------------------


class TestDefaultBaseDir:
    @pytest.mark.unit
    def test_defaults(self):
        assert default_base_dir(ArtifactKind.COMPONENT) == Path("src/components")
        assert default_base_dir(ArtifactKind.CONTEXT) == Path("src/contexts")
        assert default_base_dir(ArtifactKind.HOOK) == Path("src/hooks")

    @pytest.mark.unit
    def test_every_kind_has_a_default(self):
        assert set(DEFAULT_BASE_DIRS) == set(ArtifactKind)


# ---------------------------------------------------------------------------
# FileSelection resolution
# ---------------------------------------------------------------------------


class TestResolveSelection:
    @pytest.mark.unit
    def test_defaults_include_everything_for_component(self):
        assert resolve_selection(ArtifactKind.COMPONENT) == FileSelection()

    @pytest.mark.unit
    def test_individual_flags(self):
        selection = resolve_selection(ArtifactKind.COMPONENT, no_types=True, no_index=True)
        assert selection.include_types is False
        assert selection.include_css is True
        assert selection.include_index is False

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", list(ArtifactKind))
    def test_no_all_equals_every_flag(self, kind: ArtifactKind):
        combined = resolve_selection(kind, no_types=True, no_css=True, no_index=True)
        assert resolve_selection(kind, no_all=True) == combined

    @pytest.mark.unit
    def test_no_all_overrides_absent_flags(self):
        selection = resolve_selection(ArtifactKind.COMPONENT, no_all=True, no_css=False)
        assert not (selection.include_types or selection.include_css or selection.include_index)

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", [ArtifactKind.CONTEXT, ArtifactKind.HOOK])
    def test_css_never_selected_outside_components(self, kind: ArtifactKind):
        assert resolve_selection(kind).include_css is False
        assert resolve_selection(kind, no_css=True) == resolve_selection(kind)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class TestModels:
    @pytest.mark.unit
    def test_file_selection_is_frozen(self):
        selection = FileSelection()
        with pytest.raises(ValidationError):
            selection.include_css = False

    @pytest.mark.unit
    def test_request_base_dir_defaults_by_kind(self):
        request = GenerateRequest(kind=ArtifactKind.HOOK, name="debounce")
        assert request.base_dir == Path("src/hooks")

    @pytest.mark.unit
    def test_request_explicit_directory(self):
        request = GenerateRequest(kind=ArtifactKind.HOOK, name="debounce", directory="lib")
        assert request.base_dir == Path("lib")
