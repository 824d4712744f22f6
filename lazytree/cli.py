"""Command-line front door for lazytree.

Builds a file tree for a directory, expands the requested subdirectories,
and prints the rendered rows.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_show_hidden, load_theme_name, save_show_hidden, save_theme_name
from .logging import configure_logging, default_log_level
from .tree import FileTree
from .tree_model import render_tree_lines
from .ui_theme import available_theme_names, resolve_theme


def render_tree_view(tree: FileTree, theme_name: str | None, no_color: bool, show_selection: bool = False) -> str:
    """Render every visible row of ``tree`` as newline-terminated text."""
    theme = resolve_theme(theme_name, no_color=no_color)
    selected_idx = tree.selection if show_selection else -1
    lines = render_tree_lines(tree.flatten_with_depth(), selected_idx, theme=theme)
    return "".join(f"{line}\n" for line in lines)


def expand_paths(tree: FileTree, paths: list[str]) -> list[Path]:
    """Reveal and expand each directory in ``paths``; return the ones not found."""
    missing: list[Path] = []
    for raw in paths:
        target = Path(raw)
        if not target.is_absolute():
            target = tree.root.path / target
        if not tree.reveal(target):
            missing.append(target)
            continue
        tree.expand()
    return missing


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the tree for a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(description="Print a directory tree with lazily expanded folders.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to show. Defaults to current directory.")
    parser.add_argument(
        "--expand",
        action="append",
        default=[],
        metavar="DIR",
        help="Expand DIR (relative to the tree root); may be repeated.",
    )
    parser.add_argument(
        "--show-hidden",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include dot entries (default: saved preference).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--save-preferences",
        action="store_true",
        help="Remember the effective --show-hidden and --theme values as defaults.",
    )
    parser.add_argument("--log-level", default=None, help="Log level for the log file.")
    parser.add_argument("--log-dir", type=Path, default=None, help="Write logs to DIR/lazytree.log.")
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level or default_log_level(), log_dir=args.log_dir)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    show_hidden = load_show_hidden() if args.show_hidden is None else args.show_hidden
    tree = FileTree(path, show_hidden=show_hidden)
    missing = expand_paths(tree, args.expand)
    for target in missing:
        print(f"lazytree: not found in tree: {target}", file=sys.stderr)

    theme_name = args.theme if args.theme is not None else load_theme_name()
    if args.save_preferences:
        save_show_hidden(show_hidden)
        save_theme_name(theme_name)
    no_color = args.no_color or not sys.stdout.isatty()
    sys.stdout.write(render_tree_view(tree, theme_name, no_color))


if __name__ == "__main__":
    main()
