"""Frame composition for the two-pane view.

Builds full-screen frames as lists of ANSI-styled rows from navigation state.
Rendering reads the filesystem but never mutates the state it is given.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .ansi import clip_ansi_line, display_width, fit_ansi_line, sanitize_terminal_text
from .listing import DirectoryEntry
from .state import NavigationState
from .ui_theme import UITheme

DIR_GLYPH = "📁 "
FILE_GLYPH = "📄 "
HIGHLIGHT_SYMBOL = ">> "
LEFT_PANE_TITLE = "Current Directory"
RIGHT_PANE_TITLE = "Selected Directory"
KEY_HINTS = "q quit │ ↑/↓ move │ ⏎ open │ ⌫ parent"


@dataclass(frozen=True)
class PaneView:
    title: str
    entries: list[DirectoryEntry]
    selected: int | None


def entry_label(entry: DirectoryEntry) -> str:
    return f"{DIR_GLYPH if entry.is_dir else FILE_GLYPH}{sanitize_terminal_text(entry.name)}"


def valid_selection(selected: int | None, count: int) -> int | None:
    """Return ``selected`` when it indexes a list of ``count`` items."""
    if selected is None or not 0 <= selected < count:
        return None
    return selected


def preview_entries(
    state: NavigationState,
    entries: list[DirectoryEntry],
    list_entries: Callable[[Path], list[DirectoryEntry]],
) -> list[DirectoryEntry]:
    """List the selected left-pane directory, or nothing for files/no selection."""
    index = valid_selection(state.left_selected, len(entries))
    if index is None or not entries[index].is_dir:
        return []
    return list_entries(state.current_dir / entries[index].name)


def list_viewport_start(selected: int | None, rows: int) -> int:
    """First visible list row that keeps ``selected`` on screen."""
    if selected is None or rows <= 0:
        return 0
    return max(0, selected - rows + 1)


def _border_top(title: str, width: int, theme: UITheme) -> str:
    inner = width - 2
    label = clip_ansi_line(title, inner)
    fill = "─" * (inner - display_width(label))
    return (
        f"{theme.border}┌{theme.reset}{theme.title}{label}{theme.reset}"
        f"{theme.border}{fill}┐{theme.reset}"
    )


def render_pane(pane: PaneView, width: int, height: int, theme: UITheme) -> list[str]:
    """Render one bordered, titled list pane as exactly ``height`` rows of ``width`` columns."""
    if width < 2 or height < 2:
        return [" " * max(0, width) for _ in range(max(0, height))]

    inner = width - 2
    rows = height - 2
    reset = theme.reset
    edge = f"{theme.border}│{reset}"
    out = [_border_top(pane.title, width, theme)]

    # Unselected rows are indented by the marker width whenever a selection exists.
    indent = " " * len(HIGHLIGHT_SYMBOL) if pane.selected is not None else ""
    start = list_viewport_start(pane.selected, rows)
    for row in range(rows):
        index = start + row
        if index >= len(pane.entries):
            out.append(edge + " " * inner + edge)
            continue
        entry = pane.entries[index]
        if index == pane.selected:
            text = fit_ansi_line(HIGHLIGHT_SYMBOL + entry_label(entry), inner)
            out.append(edge + theme.highlight + text + reset + edge)
            continue
        color = theme.entry_dir if entry.is_dir else theme.entry_file
        text = fit_ansi_line(indent + entry_label(entry), inner)
        out.append(edge + color + text + reset + edge)

    out.append(theme.border + "└" + "─" * inner + "┘" + reset)
    return out


def build_status_line(left_text: str, width: int, right_text: str = KEY_HINTS) -> str:
    usable = max(1, width - 1)
    right_width = display_width(right_text)
    if usable <= right_width:
        return fit_ansi_line(right_text, usable)
    left = fit_ansi_line(left_text, max(0, usable - right_width - 1)).rstrip()
    gap = " " * (usable - display_width(left) - right_width)
    return f"{left}{gap}{right_text}"


def build_frame(
    state: NavigationState,
    width: int,
    height: int,
    theme: UITheme,
    list_entries: Callable[[Path], list[DirectoryEntry]],
) -> list[str]:
    """Compose one full frame of ``height`` rows for a ``width``-column terminal.

    Layout is a blank margin row, the two panes side by side with one margin
    column either side, then a status row.
    """
    width = max(1, width)
    height = max(1, height)
    entries = list_entries(state.current_dir)
    right_entries = preview_entries(state, entries, list_entries)

    pane_rows = max(0, height - 2)
    inner_width = max(0, width - 2)
    left_width = inner_width // 2
    right_width = inner_width - left_width
    left_pane = render_pane(
        PaneView(LEFT_PANE_TITLE, entries, valid_selection(state.left_selected, len(entries))),
        left_width,
        pane_rows,
        theme,
    )
    right_pane = render_pane(
        PaneView(RIGHT_PANE_TITLE, right_entries, valid_selection(state.right_selected, len(right_entries))),
        right_width,
        pane_rows,
        theme,
    )

    lines: list[str] = []
    if height >= 2:
        lines.append("")
    for left_row, right_row in zip(left_pane, right_pane):
        lines.append(" " + left_row + right_row)

    if state.status_message:
        status_style = theme.status_message
        status = build_status_line(sanitize_terminal_text(state.status_message), width)
    else:
        status_style = theme.status
        status = build_status_line(sanitize_terminal_text(str(state.current_dir)), width)
    lines.append(status_style + status + theme.reset)
    return lines
