"""Regression tests for raw-key decoding and key sources.

Covers ESC timing, arrow sequences, mouse reports, and control-key tokens.
These tests protect interactive input handling in raw terminal mode.
"""

import os
import time
import unittest

from dirpick import input as input_mod


def _read_keys(payload: bytes, count: int) -> list[str]:
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, payload)
        return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
    finally:
        os.close(read_fd)
        os.close(write_fd)


class ReadKeyRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b")
            started = time.monotonic()
            key = input_mod.read_key(read_fd, timeout_ms=20)
            elapsed = time.monotonic() - started
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "ESC")
        # Esc waits briefly for sequence bytes, but should not require another key press.
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences_are_recognized(self) -> None:
        self.assertEqual(
            _read_keys(b"\x1b[A\x1b[B\x1b[C\x1b[D", 4),
            ["UP", "DOWN", "RIGHT", "LEFT"],
        )

    def test_application_mode_arrows_are_recognized(self) -> None:
        self.assertEqual(_read_keys(b"\x1bOA\x1bOB", 2), ["UP", "DOWN"])

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(_read_keys(b"\x1bq", 2), ["ESC", "q"])

    def test_enter_and_backspace_tokens(self) -> None:
        self.assertEqual(
            _read_keys(b"\r\n\x7f\x08", 4),
            ["ENTER_CR", "ENTER_LF", "BACKSPACE", "BACKSPACE"],
        )

    def test_sgr_mouse_report_is_consumed_as_single_token(self) -> None:
        self.assertEqual(_read_keys(b"\x1b[<0;12;5Mq", 2), ["MOUSE", "q"])

    def test_multibyte_character_is_decoded_as_one_key(self) -> None:
        self.assertEqual(_read_keys("é".encode("utf-8"), 1), ["é"])

    def test_timeout_without_input_returns_empty_token(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            key = input_mod.read_key(read_fd, timeout_ms=5)
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "")


class KeySourceTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def test_queued_source_replays_keys_then_raises_eof(self) -> None:
        source = input_mod.QueuedKeySource(["DOWN", "q"])

        self.assertEqual(source.next_key(), "DOWN")
        self.assertEqual(source.remaining(), 1)
        self.assertEqual(source.next_key(), "q")
        with self.assertRaises(EOFError):
            source.next_key()

    def test_terminal_source_reads_from_descriptor(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b[B")
            key = input_mod.TerminalKeySource(read_fd).next_key()
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "DOWN")

    def test_terminal_source_raises_eof_when_input_closes(self) -> None:
        read_fd, write_fd = os.pipe()
        os.close(write_fd)
        try:
            with self.assertRaises(EOFError):
                input_mod.TerminalKeySource(read_fd).next_key()
        finally:
            os.close(read_fd)


if __name__ == "__main__":
    unittest.main()
