"""Open a selected path with the operating system's default handler.

The launcher (``open`` on macOS, ``xdg-open`` elsewhere) gets a short grace
period; a launcher that fails within it is reported, one still running is left
detached and reaped on a later call. Returns an error message string instead of
raising for UI-friendly handling.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

LAUNCH_CHECK_SECONDS = 0.2

_running_launchers: list[subprocess.Popen] = []


def default_open_command(target: Path) -> list[str]:
    if sys.platform == "darwin":
        return ["open", str(target)]
    return ["xdg-open", str(target)]


def reap_finished_launchers() -> None:
    """Collect exit statuses of detached launchers that have since finished."""
    _running_launchers[:] = [process for process in _running_launchers if process.poll() is None]


def open_with_default_application(target: Path) -> str | None:
    kind = "directory" if target.is_dir() else "file"
    reap_finished_launchers()
    command = default_open_command(target)
    try:
        process = subprocess.Popen(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        return f"Failed to open {kind}: {exc}"

    try:
        status = process.wait(timeout=LAUNCH_CHECK_SECONDS)
    except subprocess.TimeoutExpired:
        _running_launchers.append(process)
        return None
    if status != 0:
        return f"Failed to open {kind}: {command[0]} exited with status {status}"
    return None
