"""Key handling for the two-pane navigator.

Each handled key re-lists the current directory so selection bounds reflect
the filesystem at the moment of the key press, not the last drawn frame.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..listing import DirectoryEntry, list_directory
from ..log import get_logger
from ..state import NavigationState
from .key_registry import KeyBinding, KeyMap

QUIT_KEYS = ("q",)
DOWN_KEYS = ("DOWN", "j")
UP_KEYS = ("UP", "k")
ACTIVATE_KEYS = ("ENTER",)
PARENT_KEYS = ("BACKSPACE",)

logger = get_logger(__name__)


@dataclass(frozen=True)
class NavigationContext:
    """State and bound operations required for key handling.

    ``open_path`` returns an error message on failure; ``None`` disables
    opening selections with the OS handler.
    """

    state: NavigationState
    list_entries: Callable[[Path], list[DirectoryEntry]] = list_directory
    open_path: Callable[[Path], str | None] | None = None


def handle_key(key: str, context: NavigationContext) -> bool:
    """Apply one key token to the navigation state; return ``True`` to quit."""
    state = context.state
    state.status_message = ""

    def quit_browser() -> bool:
        return True

    def move_selection(delta: int) -> Callable[[], bool]:
        def action() -> bool:
            if state.left_selected is None:
                return False
            count = len(context.list_entries(state.current_dir))
            if count == 0:
                return False
            state.left_selected = (state.left_selected + delta) % count
            state.right_selected = None
            return False

        return action

    def open_selected(target: Path) -> None:
        if context.open_path is None:
            return
        error = context.open_path(target)
        if error:
            logger.warning(error)
            state.status_message = error

    def activate_selection() -> bool:
        index = state.left_selected
        if index is None:
            return False
        entries = context.list_entries(state.current_dir)
        if not 0 <= index < len(entries):
            return False
        entry = entries[index]
        target = state.current_dir / entry.name
        if entry.is_dir:
            state.current_dir = target
            state.left_selected = 0
            state.right_selected = None
        open_selected(target)
        state.selected_path = target
        return False

    def go_to_parent() -> bool:
        parent = state.current_dir.parent
        if parent == state.current_dir:
            return False
        state.current_dir = parent
        state.left_selected = 0
        state.right_selected = None
        return False

    keymap = KeyMap(
        KeyBinding(QUIT_KEYS, quit_browser),
        KeyBinding(DOWN_KEYS, move_selection(1)),
        KeyBinding(UP_KEYS, move_selection(-1)),
        KeyBinding(ACTIVATE_KEYS, activate_selection),
        KeyBinding(PARENT_KEYS, go_to_parent),
    )
    return keymap.dispatch(key)
