"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the terminal sidebar and views. Code-block
highlighting inside rendered pages is handled separately by Pygments.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    divider: str
    reset: str
    tree_marker: str
    tree_dir: str
    tree_active: str
    tree_file_default: str
    tree_error: str
    breadcrumb: str
    breadcrumb_separator: str
    heading: str
    action: str
    dim: str


DEFAULT_THEME = UITheme(
    name="default",
    divider="\033[2m",
    reset="\033[0m",
    tree_marker="\033[38;5;44m",
    tree_dir="\033[1;34m",
    tree_active="\033[7;1m",
    tree_file_default="\033[38;5;252m",
    tree_error="\033[38;5;203m",
    breadcrumb="\033[38;5;81m",
    breadcrumb_separator="\033[2;38;5;250m",
    heading="\033[1;38;5;81m",
    action="\033[38;5;229m",
    dim="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    divider="\033[2;38;5;31m",
    reset="\033[0m",
    tree_marker="\033[38;5;39m",
    tree_dir="\033[1;38;5;45m",
    tree_active="\033[7;38;5;117m",
    tree_file_default="\033[38;5;252m",
    tree_error="\033[38;5;209m",
    breadcrumb="\033[38;5;45m",
    breadcrumb_separator="\033[2;38;5;110m",
    heading="\033[1;38;5;45m",
    action="\033[38;5;153m",
    dim="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    divider="",
    reset="",
    tree_marker="",
    tree_dir="",
    tree_active="",
    tree_file_default="",
    tree_error="",
    breadcrumb="",
    breadcrumb_separator="",
    heading="",
    action="",
    dim="",
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
