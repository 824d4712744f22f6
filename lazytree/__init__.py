"""Public package surface for lazytree.

Exports ``FileTree`` and ``Node`` for embedding applications and ``main``
for programmatic CLI invocation.
"""

from __future__ import annotations

from .errors import FileTreeError, TreeInvariantError
from .file_tree_model import Node
from .tree import FileTree


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["FileTree", "Node", "FileTreeError", "TreeInvariantError", "main"]
