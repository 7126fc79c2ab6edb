"""Exceptions raised by recomp.

Every error a user can trigger derives from :class:`RecompError`.  The CLI
catches that base class, prints the message, and exits with ``exit_code``.
"""

from __future__ import annotations

from pathlib import Path


class RecompError(Exception):
    """Base class for all recomp failures."""

    exit_code: int = 1
    show_help: bool = False


class UsageError(RecompError):
    """Raised when the command line cannot be turned into a request."""

    show_help = True


class MissingArgumentError(UsageError):
    """Raised when a required positional argument (type or name) is absent."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or f"Missing required argument: <{argument}>.")


class UnknownTypeError(UsageError):
    """Raised when the artifact type token is not a known ArtifactKind."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(
            f"Unknown type '{token}'. Expected one of: component, context, hook."
        )


class UnknownCommandError(UsageError):
    """Raised when the command keyword is missing or not recognised."""

    def __init__(self, command: str | None) -> None:
        self.command = command
        if command is None:
            message = "No command provided."
        else:
            message = f"Unknown command '{command}'."
        super().__init__(message)


class TargetAlreadyExistsError(RecompError):
    """Raised when the artifact directory is already present on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Directory '{self.path}' already exists.")


class GenerationError(RecompError):
    """Raised when writing the generated files fails part-way through."""

    def __init__(self, path: str | Path, cause: OSError) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to generate '{self.path}': {cause}")
