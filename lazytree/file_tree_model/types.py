"""Domain node type for lazily-loaded file trees."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .fs import DirectoryChild, DirectoryLister, child_sort_key, list_directory_children

logger = logging.getLogger(__name__)


@dataclass
class Node:
    """One file or directory with children loaded only while expanded.

    ``children`` stays sorted by :func:`node_sort_key` and is empty unless
    the node is an expanded directory. Collapsing drops the children so a
    later expand always reflects the disk.
    """

    name: str
    path: Path
    is_dir: bool
    is_expanded: bool = False
    children: list["Node"] = field(default_factory=list)

    @classmethod
    def from_child(cls, child: DirectoryChild) -> Node:
        """Build an unexpanded node from one lister entry."""
        return cls(name=child.name, path=child.path, is_dir=child.is_dir)

    def expand(
        self,
        lister: DirectoryLister = list_directory_children,
        show_hidden: bool = False,
    ) -> None:
        """Mark expanded and replace ``children`` with a fresh listing."""
        if not self.is_dir:
            return
        listing = lister(self.path, show_hidden)
        self.children = sorted((Node.from_child(child) for child in listing), key=node_sort_key)
        self.is_expanded = True
        logger.debug("expanded %s (%d children)", self.path, len(self.children))

    def collapse(self) -> None:
        """Mark collapsed and discard the loaded subtree."""
        if not self.is_dir:
            return
        self.is_expanded = False
        self.children = []
        logger.debug("collapsed %s", self.path)

    def visible_count(self) -> int:
        """Number of pre-order rows this node occupies, itself included."""
        return 1 + sum(child.visible_count() for child in self.children)


def node_sort_key(node: Node) -> tuple[bool, str]:
    """Sort directories before files and then by lowercase name."""
    return child_sort_key(node.name, node.is_dir)


def compare_nodes(left: Node, right: Node) -> int:
    """Return -1, 0 or 1 comparing ``left`` and ``right`` in display order."""
    left_key = node_sort_key(left)
    right_key = node_sort_key(right)
    if left_key < right_key:
        return -1
    if left_key > right_key:
        return 1
    return 0


__all__ = [
    "Node",
    "node_sort_key",
    "compare_nodes",
]
