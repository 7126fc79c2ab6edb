"""Name transformation for generated artifacts.

A raw name is the hyphen-delimited identifier typed on the command line
(``user-profile``).  Every identifier written into generated files is derived
from it here; nothing in this module validates input, empty names are
rejected by the planner.
"""

from __future__ import annotations

HOOK_PREFIX = "use-"


def to_pascal_case(raw: str) -> str:
    """Convert ``some-thing`` to ``SomeThing``.

    The first character of each hyphen-delimited segment is upper-cased and the
    rest of the segment is passed through unchanged, so ``user-ID`` becomes
    ``UserID``.  Empty segments (``a--b``) contribute nothing.

    Examples::

        to_pascal_case("user-profile") -> "UserProfile"
        to_pascal_case("Foo-Bar")      -> "FooBar"
        to_pascal_case("")             -> ""
    """
    return "".join(segment[:1].upper() + segment[1:] for segment in raw.split("-"))


def strip_hook_prefix(raw: str) -> str:
    """Remove a leading literal ``use-`` so ``use-toggle`` and ``toggle`` agree."""
    if raw.startswith(HOOK_PREFIX):
        return raw[len(HOOK_PREFIX):]
    return raw


def hook_base_name(raw: str) -> str:
    """PascalName of a hook without the ``use`` prefix (``use-toggle`` -> ``Toggle``)."""
    return to_pascal_case(strip_hook_prefix(raw))


def derive_hook_name(raw: str) -> str:
    """Exported hook function name (``debounce`` -> ``useDebounce``)."""
    return "use" + hook_base_name(raw)


def context_folder_name(pascal_name: str) -> str:
    """Directory name for a context (``UserSettings`` -> ``UserSettingsContext``)."""
    return f"{pascal_name}Context"
