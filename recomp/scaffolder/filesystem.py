"""Filesystem access used by the artifact generator.

Generation writes into a hidden staging directory beside the target and
renames it into place once every file is on disk, so a failed run never
leaves a half-populated artifact directory behind.
"""

from __future__ import annotations

import secrets
import shutil
from pathlib import Path


class FileSystem:
    """Thin wrapper over :mod:`pathlib` so tests can inject failures."""

    def exists(self, path: str | Path) -> bool:
        return Path(path).exists()

    def create_dir(self, path: str | Path) -> Path:
        """Create a directory (and parents) if it does not exist."""
        dir_path = Path(path)
        dir_path.mkdir(parents=True, exist_ok=True)
        return dir_path

    def write_file(self, path: str | Path, content: str) -> Path:
        file_path = Path(path)
        file_path.write_text(content, encoding="utf-8")
        return file_path

    # -- Staging -----------------------------------------------------------

    def make_staging_dir(self, parent: str | Path, label: str) -> Path:
        """Create an empty hidden directory inside *parent*.

        Created with a plain ``mkdir`` so the process umask applies and the
        committed artifact directory gets the same mode as any other.
        """
        while True:
            staging = Path(parent) / f".recomp-{label}-{secrets.token_hex(4)}"
            try:
                staging.mkdir()
            except FileExistsError:
                continue
            return staging

    def commit(self, staging: str | Path, target: str | Path) -> Path:
        """Move *staging* to *target*.

        The OS silently replaces an empty *target* directory, so callers must
        check that *target* is absent right before committing.
        """
        return Path(staging).rename(target)

    def discard(self, staging: str | Path) -> None:
        shutil.rmtree(staging, ignore_errors=True)
