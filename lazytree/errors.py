"""Exception types raised by file-tree operations.

Load failures never surface here: the directory lister swallows them and
returns an empty listing. These errors signal misuse of the tree API.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class FileTreeError(Exception):
    """Base error carrying a stable ``code`` plus a human message."""

    code: str
    message: str
    path: Path | None = None

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.message} ({self.path})"
        return self.message


@dataclass
class TreeInvariantError(FileTreeError):
    """A structural operation found the tree in an impossible state."""


__all__ = [
    "FileTreeError",
    "TreeInvariantError",
]
