"""UI theme definitions and selection helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reverse: str
    reset: str
    tree_marker: str
    tree_branch: str
    tree_dir: str
    tree_leaf: str
    scrollbar_track: str
    scrollbar_thumb: str


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    reset="\033[0m",
    tree_marker="\033[38;5;44m",
    tree_branch="\033[2m",
    tree_dir="\033[1;34m",
    tree_leaf="\033[38;5;252m",
    scrollbar_track="\033[2m",
    scrollbar_thumb="\033[38;5;44m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reverse="\033[7m",
    reset="\033[0m",
    tree_marker="\033[38;5;39m",
    tree_branch="\033[2;38;5;31m",
    tree_dir="\033[1;38;5;45m",
    tree_leaf="\033[38;5;153m",
    scrollbar_track="\033[2;38;5;31m",
    scrollbar_thumb="\033[38;5;45m",
)

MONO_THEME = UITheme(
    name="mono",
    reverse="\033[7m",
    reset="\033[0m",
    tree_marker="",
    tree_branch="",
    tree_dir="",
    tree_leaf="",
    scrollbar_track="",
    scrollbar_thumb="",
)

THEMES: dict[str, UITheme] = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME, MONO_THEME)}


def available_theme_names() -> tuple[str, ...]:
    return tuple(THEMES)


def resolve_theme(name: str | None) -> UITheme:
    """Return theme by case-insensitive name, falling back to the default."""
    if not name:
        return DEFAULT_THEME
    return THEMES.get(name.strip().lower(), DEFAULT_THEME)
