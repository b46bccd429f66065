"""Shell hand-off line printed after the browser exits.

A wrapping shell function evaluates the line, e.g.
``dp() { eval "$(command dirpick "$@")"; }``, so the shell changes directory
while ``dirpick`` itself never does.
"""

from __future__ import annotations

from pathlib import Path

from .state import NavigationState

_DOUBLE_QUOTE_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"', "$": "\\$", "`": "\\`"})


def format_cd_line(path: Path) -> str:
    """Return ``cd "<path>"`` quoted for POSIX double-quote evaluation."""
    return f'cd "{str(path).translate(_DOUBLE_QUOTE_ESCAPES)}"'


def shell_handoff_line(state: NavigationState) -> str | None:
    """Return the hand-off line when the last selection is a directory."""
    selected = state.selected_path
    if selected is None or not selected.is_dir():
        return None
    return format_cd_line(selected)
