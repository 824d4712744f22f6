"""Formatting helpers for flattened tree rows."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..file_tree_model import Node
from ..ui_theme import DEFAULT_THEME, UITheme


def file_color_for(path: Path, theme: UITheme | None = None) -> str:
    """Return ANSI color used for file names based on suffix."""
    active_theme = theme or DEFAULT_THEME
    suffix = path.suffix.lower()
    if suffix in {".py", ".pyi", ".pyw"}:
        return active_theme.tree_file_python
    return active_theme.tree_file_default


def format_tree_row(
    node: Node,
    depth: int,
    *,
    selected: bool = False,
    theme: UITheme | None = None,
) -> str:
    """Render one tree row as ANSI-styled display text."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    marker_color = active_theme.tree_marker
    select = active_theme.reverse if selected else ""

    if depth == 0:
        return f"{select}{active_theme.tree_root}{node.name}/{reset}"

    indent = "  " * (depth - 1)
    if node.is_dir:
        marker = "▾ " if node.is_expanded else "▸ "
        name_color = active_theme.tree_dir
        name = f"{node.name}/"
    else:
        # files line up under the parent directory's marker column
        marker = "  "
        name_color = file_color_for(node.path, active_theme)
        name = node.name
    return f"{indent}{marker_color}{marker}{reset}{select}{name_color}{name}{reset}"


def visible_window(count: int, selected_idx: int, height: int | None) -> tuple[int, int]:
    """Return ``[start, end)`` of a ``height``-row window showing ``selected_idx``."""
    if height is None or height <= 0 or count <= height:
        return 0, count
    start = max(0, min(selected_idx - height // 2, count - height))
    return start, start + height


def render_tree_lines(
    rows: Iterable[tuple[Node, int]],
    selected_idx: int,
    *,
    theme: UITheme | None = None,
    height: int | None = None,
) -> list[str]:
    """Render flattened rows, optionally limited to a window around the selection."""
    materialized = list(rows)
    start, end = visible_window(len(materialized), selected_idx, height)
    return [
        format_tree_row(node, depth, selected=(idx == selected_idx), theme=theme)
        for idx, (node, depth) in enumerate(materialized[start:end], start=start)
    ]


__all__ = [
    "file_color_for",
    "format_tree_row",
    "visible_window",
    "render_tree_lines",
]
