"""Main interactive event loop for the terminal UI.

Each iteration draws one frame, blocks for one key, then applies it.
Feature logic lives in the key handler and renderer; this module only wires.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from ..input import NavigationContext, handle_key
from ..listing import DirectoryEntry, list_directory
from ..render import build_frame
from ..state import NavigationState
from ..ui_theme import UITheme


class KeySource(Protocol):
    def next_key(self) -> str: ...


class FrameTerminal(Protocol):
    def raw_mode(self): ...

    def draw(self, lines: list[str]) -> None: ...


def _terminal_size() -> os.terminal_size:
    return shutil.get_terminal_size((80, 24))


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``.

    Tests swap these for fakes so the loop runs without a real filesystem
    layout, OS opener, or terminal size.
    """

    list_entries: Callable[[Path], list[DirectoryEntry]] = list_directory
    open_path: Callable[[Path], str | None] | None = None
    terminal_size: Callable[[], os.terminal_size] = _terminal_size


def run_main_loop(
    state: NavigationState,
    terminal: FrameTerminal,
    keys: KeySource,
    theme: UITheme,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run the interactive loop until the quit key is pressed.

    Terminal mode is restored on every exit path. Errors from drawing, key
    reading, or listing propagate to the caller after restoration.
    """
    context = NavigationContext(
        state=state,
        list_entries=callbacks.list_entries,
        open_path=callbacks.open_path,
    )
    skip_next_lf = False

    with terminal.raw_mode():
        while True:
            term = callbacks.terminal_size()
            terminal.draw(build_frame(state, term.columns, term.lines, theme, callbacks.list_entries))

            key = keys.next_key()
            if skip_next_lf and key == "ENTER_LF":
                skip_next_lf = False
                key = keys.next_key()
            skip_next_lf = key == "ENTER_CR"
            if key in {"ENTER_CR", "ENTER_LF"}:
                key = "ENTER"

            if handle_key(key, context):
                break
