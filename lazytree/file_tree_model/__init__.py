"""Domain model for lazily-loaded filesystem trees.

This package contains non-UI tree primitives:
- the ``Node`` type with its display ordering rule
- the reference directory lister used to populate expanded nodes
- home-directory folding for the root display name
"""

from __future__ import annotations

from .fs import DirectoryChild, DirectoryLister, child_sort_key, fold_home_dir, list_directory_children
from .types import Node, compare_nodes, node_sort_key

__all__ = [
    "Node",
    "node_sort_key",
    "compare_nodes",
    "DirectoryChild",
    "DirectoryLister",
    "child_sort_key",
    "list_directory_children",
    "fold_home_dir",
]
