"""Tests for launching the OS default handler."""

from __future__ import annotations

import subprocess
import unittest
from pathlib import Path
from unittest import mock

from dirpick import opener


class OpenWithDefaultApplicationTests(unittest.TestCase):
    def setUp(self) -> None:
        opener._running_launchers.clear()
        self.addCleanup(opener._running_launchers.clear)

    def test_linux_uses_xdg_open_detached(self) -> None:
        with mock.patch("dirpick.opener.sys.platform", "linux"), mock.patch(
            "dirpick.opener.subprocess.Popen"
        ) as popen:
            popen.return_value.wait.return_value = 0
            error = opener.open_with_default_application(Path("notes.txt"))

        self.assertIsNone(error)
        popen.assert_called_once_with(
            ["xdg-open", "notes.txt"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
        popen.return_value.wait.assert_called_once_with(timeout=opener.LAUNCH_CHECK_SECONDS)

    def test_macos_uses_open(self) -> None:
        with mock.patch("dirpick.opener.sys.platform", "darwin"):
            self.assertEqual(opener.default_open_command(Path("x")), ["open", "x"])

    def test_missing_launcher_returns_message(self) -> None:
        with mock.patch("dirpick.opener.sys.platform", "linux"), mock.patch(
            "dirpick.opener.subprocess.Popen", side_effect=FileNotFoundError("xdg-open")
        ):
            error = opener.open_with_default_application(Path("missing.txt"))

        self.assertEqual(error, "Failed to open file: xdg-open")

    def test_launcher_nonzero_exit_returns_message(self) -> None:
        with mock.patch("dirpick.opener.sys.platform", "linux"), mock.patch(
            "dirpick.opener.subprocess.Popen"
        ) as popen:
            popen.return_value.wait.return_value = 4
            error = opener.open_with_default_application(Path("notes.txt"))

        self.assertEqual(error, "Failed to open file: xdg-open exited with status 4")
        self.assertEqual(opener._running_launchers, [])

    def test_slow_launcher_is_tracked_then_reaped(self) -> None:
        slow = mock.Mock()
        slow.wait.side_effect = subprocess.TimeoutExpired(["xdg-open"], opener.LAUNCH_CHECK_SECONDS)
        slow.poll.return_value = None
        with mock.patch("dirpick.opener.sys.platform", "linux"), mock.patch(
            "dirpick.opener.subprocess.Popen", return_value=slow
        ):
            self.assertIsNone(opener.open_with_default_application(Path("notes.txt")))

        self.assertEqual(opener._running_launchers, [slow])
        slow.poll.return_value = 0
        opener.reap_finished_launchers()
        self.assertEqual(opener._running_launchers, [])


if __name__ == "__main__":
    unittest.main()
