"""Filesystem helpers: temporary paths, directory walking and path checks."""

from __future__ import annotations

import os
import random
import shutil
import tempfile
import uuid
from pathlib import Path
from typing import BinaryIO


class FSError(Exception):
    """Raised for filesystem problems, including unexpected I/O errors."""


class _PathError(FSError):
    _template = "{}"

    def __init__(self, path: os.PathLike | str) -> None:
        self.path = Path(path)
        super().__init__(self._template.format(self.path))


class PathNotDirectoryError(_PathError):
    """The path exists but is not a directory."""

    _template = "provided path {} is not a directory"


class PathNotFileError(_PathError):
    """The path exists but is not a regular file."""

    _template = "provided path {} is not a file"


class PathDoesNotExistError(_PathError):
    """The path does not exist."""

    _template = "provided path {} does not exist"


class PathInsufficientPermissionError(_PathError):
    """The path's metadata cannot be read."""

    _template = "insufficient permission for provided path {}"


def _unexpected(exc: OSError) -> FSError:
    return FSError(f"got an unexpected error {exc}")


class TempDirectory:
    """A freshly created directory under the system temp dir, removed on cleanup."""

    def __init__(self) -> None:
        seed = random.randint(0, 0xFFFF)
        self.path = Path(tempfile.gettempdir()) / f"sam-temp-dir-{seed}"
        try:
            self.path.mkdir()
        except OSError as exc:
            raise _unexpected(exc) from exc

    def cleanup(self) -> None:
        """Remove the directory and everything below it."""
        if self.path.exists():
            shutil.rmtree(self.path)

    def __enter__(self) -> TempDirectory:
        return self

    def __exit__(self, *args) -> None:
        self.cleanup()


class TempFile:
    """A new empty file with a random name under the system temp dir."""

    def __init__(self) -> None:
        self.path = Path(tempfile.gettempdir()) / f"{uuid.uuid4()}.tmp"
        try:
            self.file: BinaryIO = self.path.open("wb")
        except OSError as exc:
            raise _unexpected(exc) from exc

    def cleanup(self) -> None:
        """Close the handle and delete the file."""
        self.file.close()
        self.path.unlink(missing_ok=True)

    def __enter__(self) -> TempFile:
        return self

    def __exit__(self, *args) -> None:
        self.cleanup()


def walk_dir(path: os.PathLike | str) -> list[Path]:
    """List files in ``path`` plus the entries of its immediate subdirectories."""
    found: list[Path] = []
    try:
        for entry in Path(path).iterdir():
            if entry.is_dir():
                found.extend(entry.iterdir())
            if entry.is_file():
                found.append(entry)
    except OSError as exc:
        raise _unexpected(exc) from exc
    return found


def replace_home_variable(path: str) -> str:
    """Replace every ``$HOME`` in ``path`` with the user's home directory."""
    try:
        home = str(Path.home())
    except (RuntimeError, KeyError):
        return path
    if "$HOME" in path:
        return path.replace("$HOME", home)
    return path


def ensure_exists(path: os.PathLike | str) -> Path:
    path = Path(path)
    if not path.exists():
        raise PathDoesNotExistError(path)
    return path


def ensure_is_directory(path: os.PathLike | str) -> Path:
    path = Path(path)
    if not path.is_dir():
        raise PathNotDirectoryError(path)
    return path


def ensure_is_file(path: os.PathLike | str) -> Path:
    path = Path(path)
    if not path.is_file():
        raise PathNotFileError(path)
    return path


def ensure_sufficient_permissions(path: os.PathLike | str) -> Path:
    path = Path(path)
    try:
        os.stat(path)
    except OSError as exc:
        raise PathInsufficientPermissionError(path) from exc
    return path