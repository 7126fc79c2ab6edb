"""Command-line entry point for ``recomp``.

Usage::

    recomp gen <type> <name> [directory] [--no-types] [--no-css] [--no-index] [--no-all]
    recomp -h | --help

The argument vector is parsed once into a :class:`~recomp.config.GenerateRequest`;
every failure is reported as a :class:`~recomp.errors.RecompError` and turned
into exit code 1 here.
"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn, Optional, Sequence

from recomp.config import ArtifactKind, GenerateRequest, resolve_selection
from recomp.errors import (
    MissingArgumentError,
    RecompError,
    UnknownCommandError,
    UsageError,
)
from recomp.scaffolder import ArtifactGenerator
from recomp.utils import display_path, print_error, print_info, print_summary_table

GENERATE_COMMANDS = ("gen", "generate")
HELP_FLAGS = ("-h", "--help")

HELP_TEXT = """
recomp - A React Component Generator

Usage:
  recomp gen <type> <name> [directory] [options]
  recomp --help

Commands:
  gen         Generates a new component, context, or hook.
              <type> is one of: component, context, hook.
              <name> is required (e.g., 'user-profile').
              [directory] is optional. Defaults to './src/components',
              './src/contexts', or './src/hooks' depending on <type>.

Options:
  --no-types  Do not create a separate types file.
  --no-css    Do not create a CSS module (components only).
  --no-index  Do not create an index.ts barrel file.
  --no-all    Skip every optional file (same as all three flags above).
  -h, --help  Show this help message.

Examples:
  recomp gen component user-profile
  recomp gen component card ./src/common --no-css
  recomp gen context user-settings
  recomp gen hook use-debounce --no-types
"""


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting with code 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message[:1].upper() + message[1:] + ".")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="recomp", add_help=False)
    parser.add_argument("command", nargs="?")
    parser.add_argument("type", nargs="?")
    parser.add_argument("name", nargs="?")
    parser.add_argument("directory", nargs="?")
    parser.add_argument("--no-types", action="store_true", help="Skip the types file")
    parser.add_argument("--no-css", action="store_true", help="Skip the CSS module")
    parser.add_argument("--no-index", action="store_true", help="Skip the index.ts barrel")
    parser.add_argument("--no-all", action="store_true", help="Skip all optional files")
    return parser


def parse_request(argv: Sequence[str]) -> GenerateRequest:
    """Parse ``argv`` (without the program name) into a GenerateRequest.

    Raises:
        UnknownCommandError: No command, or a command other than ``gen``.
        MissingArgumentError: No type or no name after ``gen``.
        UnknownTypeError: The type is not component, context, or hook.
        UsageError: Unrecognised flags or extra positional arguments.
    """
    args = build_parser().parse_intermixed_args(list(argv))

    if args.command is None:
        raise UnknownCommandError(None)
    if args.command not in GENERATE_COMMANDS:
        raise UnknownCommandError(args.command)
    if not args.type:
        raise MissingArgumentError("type", "No artifact type provided.")

    kind = ArtifactKind.from_token(args.type)
    if not args.name:
        raise MissingArgumentError("name", f"{kind.label} name is required.")

    return GenerateRequest(
        kind=kind,
        name=args.name,
        directory=args.directory,
        selection=resolve_selection(
            kind,
            no_types=args.no_types,
            no_css=args.no_css,
            no_index=args.no_index,
            no_all=args.no_all,
        ),
    )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def show_help() -> None:
    print_info(HELP_TEXT)


def run(request: GenerateRequest, generator: Optional[ArtifactGenerator] = None) -> int:
    """Generate the artifact described by *request* and print a summary."""
    generator = generator or ArtifactGenerator()
    plan = generator.plan(request.kind, request.name, request.base_dir, request.selection)
    written = generator.generate(plan)

    print_summary_table(
        {
            display_path(path.relative_to(plan.base_dir)): (
                "directory" if path == plan.target_dir else "file"
            )
            for path in written
        },
        title=f"Created {plan.kind.value} '{plan.name}'",
    )
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point for ``recomp`` and ``python -m recomp``."""
    if argv is None:
        argv = sys.argv[1:]

    if any(arg in HELP_FLAGS for arg in argv):
        show_help()
        return 0

    try:
        request = parse_request(argv)
        return run(request)
    except RecompError as exc:
        print_error(str(exc))
        if exc.show_help:
            show_help()
        return exc.exit_code


if __name__ == "__main__":
    sys.exit(main())
