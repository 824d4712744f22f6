"""Tests for pre-order flattening, index resolution, and path lookup."""

from __future__ import annotations

import unittest
from pathlib import Path

from lazytree.errors import TreeInvariantError
from lazytree.file_tree_model import Node
from lazytree.tree_model import (
    detach,
    find_parent,
    find_with_path,
    flatten,
    flatten_with_depth,
    index_of_path,
    next_directory_row_index,
    node_at_index,
    parent_row_index,
)

ROOT = Path("/proj")


def _file(path: Path) -> Node:
    return Node(name=path.name, path=path, is_dir=False)


def _dir(path: Path, *children: Node, expanded: bool | None = None) -> Node:
    is_expanded = bool(children) if expanded is None else expanded
    return Node(name=path.name, path=path, is_dir=True, is_expanded=is_expanded, children=list(children))


def _sample_tree() -> Node:
    """proj/ -> closed/ docs/(img/ guide.md) src/(app.py) README.md"""
    return _dir(
        ROOT,
        _dir(ROOT / "closed", expanded=False),
        _dir(ROOT / "docs", _dir(ROOT / "docs" / "img", expanded=False), _file(ROOT / "docs" / "guide.md")),
        _dir(ROOT / "src", _file(ROOT / "src" / "app.py")),
        _file(ROOT / "README.md"),
    )


class FlattenTests(unittest.TestCase):
    def test_preorder_with_depths(self) -> None:
        rows = [(node.path, depth) for node, depth in flatten_with_depth(_sample_tree())]
        self.assertEqual(
            rows,
            [
                (ROOT, 0),
                (ROOT / "closed", 1),
                (ROOT / "docs", 1),
                (ROOT / "docs" / "img", 2),
                (ROOT / "docs" / "guide.md", 2),
                (ROOT / "src", 1),
                (ROOT / "src" / "app.py", 2),
                (ROOT / "README.md", 1),
            ],
        )

    def test_first_row_is_root_at_depth_zero(self) -> None:
        root = _sample_tree()
        first, depth = next(flatten_with_depth(root))
        self.assertIs(first, root)
        self.assertEqual(depth, 0)

    def test_flatten_reflects_live_tree_on_each_call(self) -> None:
        root = _sample_tree()
        before = len(list(flatten(root)))
        root.children[1].collapse()
        after = len(list(flatten(root)))
        self.assertEqual(before - after, 2)

    def test_node_at_index_matches_flatten_for_every_index(self) -> None:
        root = _sample_tree()
        rows = list(flatten_with_depth(root))
        for idx, (node, depth) in enumerate(rows):
            resolved, resolved_depth = node_at_index(root, idx)
            self.assertIs(resolved, node)
            self.assertEqual(resolved_depth, depth)

    def test_node_at_index_clamps_out_of_range(self) -> None:
        root = _sample_tree()
        self.assertIs(node_at_index(root, -5)[0], root)
        self.assertEqual(node_at_index(root, 99)[0].path, ROOT / "README.md")

    def test_index_of_path(self) -> None:
        root = _sample_tree()
        self.assertEqual(index_of_path(root, ROOT / "src" / "app.py"), 6)
        self.assertIsNone(index_of_path(root, ROOT / "closed" / "hidden.txt"))


class RowNavigationTests(unittest.TestCase):
    def test_parent_row_index(self) -> None:
        rows = list(flatten_with_depth(_sample_tree()))
        self.assertEqual(parent_row_index(rows, 4), 2)
        self.assertEqual(parent_row_index(rows, 5), 0)
        self.assertIsNone(parent_row_index(rows, 0))

    def test_next_directory_row_index_both_directions(self) -> None:
        rows = list(flatten_with_depth(_sample_tree()))
        self.assertEqual(next_directory_row_index(rows, 3, 1), 5)
        self.assertEqual(next_directory_row_index(rows, 5, -1), 3)
        self.assertIsNone(next_directory_row_index(rows, 6, 1))
        self.assertIsNone(next_directory_row_index(rows, 3, 0))


class LookupTests(unittest.TestCase):
    def test_find_with_path_locates_nested_and_root_nodes(self) -> None:
        root = _sample_tree()
        self.assertIs(find_with_path(root, ROOT), root)
        found = find_with_path(root, ROOT / "docs" / "guide.md")
        self.assertIsNotNone(found)
        assert found is not None
        self.assertEqual(found.name, "guide.md")
        self.assertIsNone(find_with_path(root, ROOT / "missing"))
        self.assertIsNone(find_with_path(root, Path("/elsewhere/file")))

    def test_find_parent(self) -> None:
        root = _sample_tree()
        parent = find_parent(root, ROOT / "src" / "app.py")
        self.assertIsNotNone(parent)
        assert parent is not None
        self.assertEqual(parent.path, ROOT / "src")
        self.assertIsNone(find_parent(root, ROOT))

    def test_detach_removes_one_child_and_keeps_order(self) -> None:
        root = _sample_tree()
        docs = root.children[1]
        img = docs.children[0]

        taken = detach(root, img)

        self.assertIs(taken, img)
        self.assertEqual([child.name for child in docs.children], ["guide.md"])

    def test_detach_root_raises(self) -> None:
        root = _sample_tree()
        with self.assertRaises(TreeInvariantError) as ctx:
            detach(root, root)
        self.assertEqual(ctx.exception.code, "detach_root")

    def test_detach_without_loaded_parent_raises(self) -> None:
        root = _sample_tree()
        orphan = _file(ROOT / "closed" / "inside.txt")
        with self.assertRaises(TreeInvariantError) as ctx:
            detach(root, orphan)
        self.assertEqual(ctx.exception.code, "child_not_found")

        stray = _file(ROOT / "nowhere" / "x.txt")
        with self.assertRaises(TreeInvariantError) as ctx:
            detach(root, stray)
        self.assertEqual(ctx.exception.code, "parent_not_found")


if __name__ == "__main__":
    unittest.main()
