"""Path-keyed lookup and detach helpers over a node tree.

Nodes keep no parent references; a parent is found again by searching for
``node.path.parent``.
"""

from __future__ import annotations

from pathlib import Path

from ..errors import TreeInvariantError
from ..file_tree_model import Node


def find_with_path(root: Node, path: Path) -> Node | None:
    """Return the first node depth-first whose ``path`` equals ``path``."""
    if root.path == path:
        return root
    for child in root.children:
        # children of a directory all live under it
        if child.is_dir and not path.is_relative_to(child.path):
            continue
        found = find_with_path(child, path)
        if found is not None:
            return found
    return None


def find_parent(root: Node, path: Path) -> Node | None:
    """Return the loaded node that directly contains ``path``."""
    if path == root.path:
        return None
    parent = find_with_path(root, path.parent)
    if parent is None or not parent.is_dir:
        return None
    return parent


def detach(root: Node, node: Node) -> Node:
    """Remove ``node`` from its parent's children and return it.

    Raises :class:`TreeInvariantError` for the root or when no loaded parent
    holds ``node``.
    """
    if node is root or node.path == root.path:
        raise TreeInvariantError(
            code="detach_root",
            message="Cannot detach the tree root",
            path=root.path,
        )
    parent = find_parent(root, node.path)
    if parent is None:
        raise TreeInvariantError(
            code="parent_not_found",
            message="Parent of node is not loaded in the tree",
            path=node.path,
        )
    try:
        parent.children.remove(node)
    except ValueError:
        raise TreeInvariantError(
            code="child_not_found",
            message="Node is not a child of its parent directory",
            path=node.path,
        ) from None
    return node


__all__ = [
    "find_with_path",
    "find_parent",
    "detach",
]
