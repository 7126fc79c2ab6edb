"""Tests for name transformation (recomp.scaffolder.naming)."""

from __future__ import annotations

import pytest

from recomp.scaffolder.naming import (
    context_folder_name,
    derive_hook_name,
    hook_base_name,
    strip_hook_prefix,
    to_pascal_case,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("user-profile", "UserProfile"),
        ("Foo-Bar", "FooBar"),
        ("foo-bar", "FooBar"),
        ("card", "Card"),
        ("user-ID", "UserID"),
        ("a--b", "AB"),
        ("", ""),
    ],
)
def test_to_pascal_case(raw: str, expected: str):
    assert to_pascal_case(raw) == expected


def test_to_pascal_case_is_stable_on_its_output():
    once = to_pascal_case("multi-word-name")
    assert "-" not in once
    assert to_pascal_case(once) == once


def test_strip_hook_prefix():
    assert strip_hook_prefix("use-toggle") == "toggle"
    assert strip_hook_prefix("toggle") == "toggle"
    # Only the exact, lowercase literal is stripped.
    assert strip_hook_prefix("Use-toggle") == "Use-toggle"
    assert strip_hook_prefix("user-list") == "user-list"


def test_hook_names_agree_with_and_without_prefix():
    assert derive_hook_name("use-toggle") == derive_hook_name("toggle") == "useToggle"
    assert hook_base_name("use-local-storage") == "LocalStorage"


def test_context_folder_name():
    assert context_folder_name("UserSettings") == "UserSettingsContext"
