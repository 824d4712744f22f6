"""Pre-order projections of a node tree into display rows.

Nothing here caches: every call walks the live tree, so the result always
matches the current expansion state.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..file_tree_model import Node


def flatten_with_depth(root: Node, depth: int = 0) -> Iterator[tuple[Node, int]]:
    """Yield ``(node, depth)`` pairs in pre-order, ``root`` at ``depth``."""
    yield root, depth
    for child in root.children:
        yield from flatten_with_depth(child, depth + 1)


def flatten(root: Node) -> Iterator[Node]:
    """Yield nodes in pre-order starting at ``root``."""
    for node, _depth in flatten_with_depth(root):
        yield node


def clamp_index(index: int, count: int) -> int:
    """Clamp ``index`` into ``[0, count - 1]`` (``0`` when ``count`` is empty)."""
    if count <= 0:
        return 0
    return max(0, min(index, count - 1))


def node_at_index(root: Node, index: int) -> tuple[Node, int]:
    """Return ``(node, depth)`` at pre-order ``index``.

    Descends using subtree row counts instead of building the row list.
    Out-of-range indexes are clamped to the first or last row.
    """
    remaining = clamp_index(index, root.visible_count())
    node = root
    depth = 0
    while remaining > 0:
        remaining -= 1
        for child in node.children:
            size = child.visible_count()
            if remaining < size:
                node = child
                depth += 1
                break
            remaining -= size
        else:
            # counts above guarantee a match; stop at the last row otherwise
            break
    return node, depth


def index_of_path(root: Node, path: Path) -> int | None:
    """Return pre-order index of the visible row for ``path``, if any."""
    for idx, node in enumerate(flatten(root)):
        if node.path == path:
            return idx
    return None


__all__ = [
    "flatten",
    "flatten_with_depth",
    "clamp_index",
    "node_at_index",
    "index_of_path",
]
