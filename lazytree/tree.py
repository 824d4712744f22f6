"""Interactive file tree: lazily-loaded nodes plus a selection cursor.

``FileTree`` owns one root ``Node`` and every node reachable from it. The
selection is an index into the pre-order flattening of the root and is
clamped into range after every operation. Nodes handed out by ``selected``
or ``find_with_path`` are only valid until the next mutating call.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

from .errors import TreeInvariantError
from .file_tree_model import DirectoryLister, Node, compare_nodes, fold_home_dir, list_directory_children
from .tree_model import (
    clamp_index,
    detach,
    find_with_path,
    flatten,
    flatten_with_depth,
    index_of_path,
    next_directory_row_index,
    node_at_index,
    parent_row_index,
)

logger = logging.getLogger(__name__)


class FileTree:
    def __init__(
        self,
        root_dir: Path | None = None,
        *,
        show_hidden: bool = False,
        lister: DirectoryLister = list_directory_children,
        fold_name: Callable[[Path], str] = fold_home_dir,
    ) -> None:
        self.root_dir = root_dir
        self.show_hidden = show_hidden
        self.lister = lister
        self.fold_name = fold_name
        self.root = self._load_root()
        self.selection = 0
        self.open = False
        self.focused = False
        self.copied: Node | None = None

    def _base_dir(self) -> Path:
        base = self.root_dir if self.root_dir is not None else Path.cwd()
        return base.resolve()

    def _load_root(self) -> Node:
        base = self._base_dir()
        root = Node(name=self.fold_name(base), path=base, is_dir=True)
        root.expand(self.lister, self.show_hidden)
        return root

    def __len__(self) -> int:
        return self.root.visible_count()

    def flatten(self) -> Iterator[Node]:
        """Yield visible nodes in display order."""
        return flatten(self.root)

    def flatten_with_depth(self) -> Iterator[tuple[Node, int]]:
        """Yield visible ``(node, depth)`` rows in display order."""
        return flatten_with_depth(self.root)

    def _clamp_selection(self) -> None:
        self.selection = clamp_index(self.selection, len(self))

    def _index_of_node(self, target: Node) -> int | None:
        for idx, node in enumerate(self.flatten()):
            if node is target:
                return idx
        return None

    def selected_row(self) -> tuple[Node, int]:
        """Return ``(node, depth)`` for the selection, clamped into range."""
        return node_at_index(self.root, self.selection)

    def selected(self) -> Node:
        return self.selected_row()[0]

    selected_mut = selected

    def move_up(self) -> None:
        self.selection = clamp_index(self.selection - 1, len(self))

    def move_down(self) -> None:
        self.selection = clamp_index(self.selection + 1, len(self))

    def goto_start(self) -> None:
        self.selection = 0

    def goto_end(self) -> None:
        self.selection = len(self) - 1

    def goto_parent(self) -> bool:
        """Select the directory containing the selected row."""
        rows = list(self.flatten_with_depth())
        parent_idx = parent_row_index(rows, clamp_index(self.selection, len(rows)))
        if parent_idx is None:
            return False
        self.selection = parent_idx
        return True

    def next_directory(self, direction: int = 1) -> bool:
        """Select the next directory row forward (``direction > 0``) or backward."""
        rows = list(self.flatten_with_depth())
        target = next_directory_row_index(rows, clamp_index(self.selection, len(rows)), direction)
        if target is None:
            return False
        self.selection = target
        return True

    def select_path(self, path: Path) -> bool:
        """Select the visible row for ``path``; leave selection alone otherwise."""
        idx = index_of_path(self.root, path)
        if idx is None:
            return False
        self.selection = idx
        return True

    def reveal(self, path: Path) -> bool:
        """Expand every collapsed ancestor of ``path`` and select it.

        Returns ``False`` when ``path`` is outside the root or missing from
        the listing of one of its ancestors.
        """
        path = Path(path).resolve()
        if not path.is_relative_to(self.root.path):
            return False
        node = self.root
        for part in path.relative_to(self.root.path).parts:
            if not node.is_dir:
                return False
            if not node.is_expanded:
                node.expand(self.lister, self.show_hidden)
            child_path = node.path / part
            child = next((item for item in node.children if item.path == child_path), None)
            if child is None:
                return False
            node = child
        return self.select_path(node.path)

    def expand(self) -> None:
        self.selected().expand(self.lister, self.show_hidden)

    def collapse(self) -> None:
        node = self.selected()
        if node is self.root or not node.is_expanded:
            return
        node.collapse()
        self._clamp_selection()

    def toggle(self) -> None:
        """Expand a collapsed directory or collapse an expanded one."""
        node = self.selected()
        if not node.is_dir:
            return
        if node.is_expanded:
            self.collapse()
        else:
            self.expand()

    def find_with_path(self, path: Path) -> Node | None:
        return find_with_path(self.root, path)

    def take_selected(self) -> Node:
        """Detach the selected node from its parent and return it.

        The selection index is kept (clamped if the view got shorter), so
        it now points at whatever row followed the taken subtree.
        """
        node = self.selected()
        taken = detach(self.root, node)
        self._clamp_selection()
        logger.debug("took %s", taken.path)
        return taken

    def cut_selected(self) -> Node:
        """Take the selected node and hold it in ``copied``."""
        self.copied = self.take_selected()
        return self.copied

    def insert_and_adjust(self, node: Node) -> None:
        """Insert ``node`` as a sibling of the selection, keeping sort order.

        With the root selected the node becomes a child of the root. An
        existing sibling with the same path is replaced. The selection is
        moved so it still points at the previously selected node. Raises
        ``TreeInvariantError`` when ``node.path`` does not sit directly under
        that parent directory.
        """
        rows = list(self.flatten_with_depth())
        selected_idx = clamp_index(self.selection, len(rows))
        selected_node, depth = rows[selected_idx]
        if depth == 0:
            parent = self.root
        else:
            parent_idx = parent_row_index(rows, selected_idx)
            if parent_idx is None:
                raise TreeInvariantError(
                    code="parent_not_found",
                    message="Selected node has no parent row",
                    path=selected_node.path,
                )
            parent = rows[parent_idx][0]

        if node.path.parent != parent.path:
            raise TreeInvariantError(
                code="parent_mismatch",
                message=f"Node does not belong under {parent.path}",
                path=node.path,
            )

        anchor = selected_node
        for idx, child in enumerate(parent.children):
            if child.path == node.path:
                replaced = parent.children.pop(idx)
                if replaced is selected_node:
                    anchor = node
                break

        position = next(
            (idx for idx, child in enumerate(parent.children) if compare_nodes(child, node) > 0),
            len(parent.children),
        )
        parent.children.insert(position, node)
        logger.debug("inserted %s under %s at %d", node.path, parent.path, position)

        new_idx = self._index_of_node(anchor)
        if new_idx is None:
            self._clamp_selection()
        else:
            self.selection = new_idx

    def reload(self) -> None:
        """Rebuild the whole tree from disk and reset the selection."""
        self.root = self._load_root()
        self.selection = 0
        self.open = True
        logger.debug("reloaded tree at %s", self.root.path)

    def set_show_hidden(self, show_hidden: bool) -> None:
        """Change hidden-file visibility, reload, and keep the selected path."""
        previous = self.selected().path
        self.show_hidden = show_hidden
        self.reload()
        self.reveal(previous)

    def toggle_hidden(self) -> None:
        self.set_show_hidden(not self.show_hidden)


__all__ = ["FileTree"]
