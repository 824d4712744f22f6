"""Filesystem listing and display helpers for file/directory nodes."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryChild:
    """One visible directory child as reported by a directory lister."""

    name: str
    path: Path
    is_dir: bool


DirectoryLister = Callable[[Path, bool], list[DirectoryChild]]


def child_sort_key(name: str, is_dir: bool) -> tuple[bool, str]:
    """Sort directories before files and then by lowercase name."""
    return (not is_dir, name.lower())


def _require_utf8(name: str) -> None:
    """Raise ``UnicodeEncodeError`` for names decoded with surrogate escapes."""
    name.encode("utf-8")


def list_directory_children(directory: Path, show_hidden: bool = False) -> list[DirectoryChild]:
    """List visible children of ``directory`` in display order.

    Symlinks are always skipped and dot entries are skipped unless
    ``show_hidden``. Any failure while reading, including an entry name that
    is not valid UTF-8, yields an empty list.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                _require_utf8(name)
                if not show_hidden and name.startswith("."):
                    continue
                if child.is_symlink():
                    continue
                children.append(
                    DirectoryChild(
                        name=name,
                        path=Path(child.path),
                        is_dir=child.is_dir(follow_symlinks=False),
                    )
                )
    except (OSError, UnicodeError) as exc:
        logger.debug("listing %s failed: %s", directory, exc)
        return []

    children.sort(key=lambda item: child_sort_key(item.name, item.is_dir))
    return children


def fold_home_dir(path: Path, home: Path | None = None) -> str:
    """Return ``path`` as text with a leading home directory shown as ``~``."""
    if home is None:
        try:
            home = Path.home()
        except RuntimeError:
            return str(path)
    if path == home:
        return "~"
    if path.is_relative_to(home):
        return str(Path("~") / path.relative_to(home))
    return str(path)


__all__ = [
    "DirectoryChild",
    "DirectoryLister",
    "child_sort_key",
    "list_directory_children",
    "fold_home_dir",
]
