"""UI theme definitions and selection helpers.

Themes are ANSI palettes for pane chrome, entry glyph rows, and the status row.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    border: str
    title: str
    entry_dir: str
    entry_file: str
    highlight: str
    status: str
    status_message: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[38;5;250m",
    title="\033[1;38;5;255m",
    entry_dir="\033[1;34m",
    entry_file="\033[38;5;252m",
    highlight="\033[1;30;102m",
    status="\033[7m",
    status_message="\033[7;38;5;214m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    title="\033[1;38;5;45m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;153m",
    highlight="\033[1;38;5;16;48;5;45m",
    status="\033[38;5;153;48;5;24m",
    status_message="\033[38;5;215;48;5;24m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    title="",
    entry_dir="",
    entry_file="",
    highlight="",
    status="",
    status_message="",
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
