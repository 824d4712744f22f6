"""Tests for tree row formatting and window selection."""

from __future__ import annotations

import unittest
from pathlib import Path

from lazytree.file_tree_model import Node
from lazytree.tree_model import flatten_with_depth, format_tree_row, render_tree_lines, visible_window
from lazytree.ui_theme import DEFAULT_THEME, PLAIN_THEME, resolve_theme


def _tree() -> Node:
    root = Path("/proj")
    src = Node(
        name="src",
        path=root / "src",
        is_dir=True,
        is_expanded=True,
        children=[Node(name="app.py", path=root / "src" / "app.py", is_dir=False)],
    )
    docs = Node(name="docs", path=root / "docs", is_dir=True)
    readme = Node(name="README.md", path=root / "README.md", is_dir=False)
    return Node(name="~/proj", path=root, is_dir=True, is_expanded=True, children=[docs, src, readme])


class FormatTreeRowTests(unittest.TestCase):
    def test_plain_rows_show_markers_and_indentation(self) -> None:
        lines = render_tree_lines(flatten_with_depth(_tree()), -1, theme=PLAIN_THEME)
        self.assertEqual(
            lines,
            [
                "~/proj/",
                "▸ docs/",
                "▾ src/",
                "    app.py",
                "  README.md",
            ],
        )

    def test_selected_row_uses_reverse_video(self) -> None:
        node = Node(name="docs", path=Path("/proj/docs"), is_dir=True)
        row = format_tree_row(node, 1, selected=True, theme=DEFAULT_THEME)
        self.assertIn(DEFAULT_THEME.reverse, row)
        self.assertNotIn(DEFAULT_THEME.reverse, format_tree_row(node, 1, selected=False, theme=DEFAULT_THEME))

    def test_python_files_use_python_color(self) -> None:
        node = Node(name="app.py", path=Path("/proj/app.py"), is_dir=False)
        self.assertIn(DEFAULT_THEME.tree_file_python, format_tree_row(node, 1, theme=DEFAULT_THEME))


class VisibleWindowTests(unittest.TestCase):
    def test_small_views_are_not_windowed(self) -> None:
        self.assertEqual(visible_window(5, 4, 10), (0, 5))
        self.assertEqual(visible_window(5, 4, None), (0, 5))

    def test_window_keeps_selection_visible(self) -> None:
        self.assertEqual(visible_window(100, 50, 10), (45, 55))
        self.assertEqual(visible_window(100, 0, 10), (0, 10))
        self.assertEqual(visible_window(100, 99, 10), (90, 100))

    def test_render_respects_height(self) -> None:
        lines = render_tree_lines(flatten_with_depth(_tree()), 4, theme=PLAIN_THEME, height=2)
        self.assertEqual(lines, ["    app.py", "  README.md"])


class ThemeResolutionTests(unittest.TestCase):
    def test_no_color_forces_plain(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)

    def test_unknown_theme_falls_back_to_default(self) -> None:
        self.assertIs(resolve_theme("nope"), DEFAULT_THEME)
        self.assertEqual(resolve_theme(" Ocean ").name, "ocean")


if __name__ == "__main__":
    unittest.main()
