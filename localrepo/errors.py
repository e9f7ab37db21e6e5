"""
Error types raised by localrepo.

Commands raise these and ``localrepo.main`` turns them into a message and a
non-zero exit status.
"""

import os
from pathlib import Path
from typing import Optional, Union


class LocalRepoError(Exception):
    """Base class for all localrepo errors."""


class UsageError(LocalRepoError):
    """Bad command line usage; the command's help text is shown."""

    def __init__(self, message: str, command: Optional[str] = None):
        super().__init__(message)
        self.command = command


class InvalidPathError(LocalRepoError):
    """A path given on the command line is not what the command needs."""

    def __init__(self, path: Union[str, Path], kind: str):
        self.path = str(path)
        self.kind = kind
        self.cwd = os.getcwd()
        super().__init__(
            f"ERROR: '{self.path}' is not a {kind}, current directory is: {self.cwd}"
        )


class CoordinateGuessError(LocalRepoError, ValueError):
    """A filename does not follow the ``<artifact>-<version>.<ext>`` naming."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"Cannot guess coordinates from filename: {filename}")


def require_directory(path: Union[str, Path]) -> Path:
    """Return ``path`` as a Path if it is a directory, else raise InvalidPathError."""
    candidate = Path(path)
    if not candidate.is_dir():
        raise InvalidPathError(path, "directory")
    return candidate


def require_file(path: Union[str, Path]) -> Path:
    """Return ``path`` as a Path if it is a regular file, else raise InvalidPathError."""
    candidate = Path(path)
    if not candidate.is_file():
        raise InvalidPathError(path, "file")
    return candidate
