"""Browser bootstrap: binds the real terminal, key source, and OS opener."""

from __future__ import annotations

import contextlib
import os
import sys
from collections.abc import Callable
from pathlib import Path

from ..errors import DirpickError
from ..input import TerminalKeySource
from ..listing import list_directory
from ..opener import open_with_default_application
from ..state import NavigationState
from ..terminal import TerminalController
from ..ui_theme import resolve_theme
from .loop import RuntimeLoopCallbacks, run_main_loop

TTY_DEVICE = "/dev/tty"
FALLBACK_TERMINAL_SIZE = os.terminal_size((80, 24))


def _terminal_size_of(fd: int) -> Callable[[], os.terminal_size]:
    """Return a callback measuring the terminal behind ``fd``."""

    def measure() -> os.terminal_size:
        try:
            return os.get_terminal_size(fd)
        except OSError:
            return FALLBACK_TERMINAL_SIZE

    return measure


@contextlib.contextmanager
def _frame_output_fd():
    """Yield the descriptor frames are drawn on.

    When stdout is captured (``eval "$(dirpick)"``) frames go to the
    controlling terminal so stdout only carries the hand-off line.
    """
    stdout_fd = sys.stdout.fileno()
    if os.isatty(stdout_fd):
        yield stdout_fd
        return
    try:
        tty_fd = os.open(TTY_DEVICE, os.O_WRONLY)
    except OSError as exc:
        raise DirpickError(
            code="not_a_tty",
            message="No terminal available for drawing",
            detail=str(exc),
        ) from exc
    try:
        yield tty_fd
    finally:
        os.close(tty_fd)


def run_browser(
    start_dir: Path,
    *,
    theme_name: str | None = None,
    no_color: bool = False,
    open_selection: bool = True,
) -> NavigationState:
    """Run the interactive browser from ``start_dir`` and return its final state."""
    stdin_fd = sys.stdin.fileno()
    if not os.isatty(stdin_fd):
        raise DirpickError(code="not_a_tty", message="dirpick needs an interactive terminal on stdin")

    state = NavigationState(current_dir=start_dir)
    with _frame_output_fd() as stdout_fd:
        callbacks = RuntimeLoopCallbacks(
            list_entries=list_directory,
            open_path=open_with_default_application if open_selection else None,
            terminal_size=_terminal_size_of(stdout_fd),
        )
        terminal = TerminalController(stdin_fd, stdout_fd)
        run_main_loop(
            state,
            terminal,
            TerminalKeySource(stdin_fd),
            resolve_theme(theme_name, no_color=no_color),
            callbacks,
        )
    return state
