"""Row-index navigation helpers over flattened ``(node, depth)`` rows."""

from __future__ import annotations

from ..file_tree_model import Node

Row = tuple[Node, int]


def next_directory_row_index(
    rows: list[Row],
    selected_idx: int,
    direction: int,
) -> int | None:
    """Return next directory row index in the requested direction."""
    if not rows or direction == 0:
        return None
    step = 1 if direction > 0 else -1
    idx = selected_idx + step
    while 0 <= idx < len(rows):
        if rows[idx][0].is_dir:
            return idx
        idx += step
    return None


def parent_row_index(rows: list[Row], selected_idx: int) -> int | None:
    """Return row index of the directory containing ``selected_idx``."""
    if not rows or selected_idx <= 0 or selected_idx >= len(rows):
        return None
    depth = rows[selected_idx][1]
    idx = selected_idx - 1
    while idx >= 0:
        if rows[idx][1] < depth:
            return idx
        idx -= 1
    return None


__all__ = [
    "Row",
    "next_directory_row_index",
    "parent_row_index",
]
