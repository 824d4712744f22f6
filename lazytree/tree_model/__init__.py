"""Derived views and lookups over a node tree.

Flattens nested nodes into display rows, resolves rows and paths back to
nodes, and formats rows for terminal output.
"""

from __future__ import annotations

from .flatten import clamp_index, flatten, flatten_with_depth, index_of_path, node_at_index
from .lookup import detach, find_parent, find_with_path
from .navigation import Row, next_directory_row_index, parent_row_index
from .rendering import file_color_for, format_tree_row, render_tree_lines, visible_window

__all__ = [
    "Row",
    "flatten",
    "flatten_with_depth",
    "clamp_index",
    "node_at_index",
    "index_of_path",
    "find_with_path",
    "find_parent",
    "detach",
    "next_directory_row_index",
    "parent_row_index",
    "format_tree_row",
    "file_color_for",
    "render_tree_lines",
    "visible_window",
]
