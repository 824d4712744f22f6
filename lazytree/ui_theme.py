"""UI theme definitions and selection helpers.

Themes are ANSI palettes for tree rows only.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the tree row renderer."""

    name: str
    reverse: str
    reset: str
    tree_marker: str
    tree_root: str
    tree_dir: str
    tree_file_python: str
    tree_file_default: str


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    reset="\033[0m",
    tree_marker="\033[38;5;44m",
    tree_root="\033[1;38;5;81m",
    tree_dir="\033[1;34m",
    tree_file_python="\033[38;5;110m",
    tree_file_default="\033[38;5;252m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reverse="\033[7m",
    reset="\033[0m",
    tree_marker="\033[38;5;39m",
    tree_root="\033[1;38;5;39m",
    tree_dir="\033[1;38;5;45m",
    tree_file_python="\033[38;5;117m",
    tree_file_default="\033[38;5;252m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reverse="",
    reset="",
    tree_marker="",
    tree_root="",
    tree_dir="",
    tree_file_python="",
    tree_file_default="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
