"""Tests for reading the persisted JSON config.

Malformed or mistyped values must fall back to defaults instead of raising.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirpick.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def _with_config(self, payload: str | None):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        config_path = Path(tmp.name) / "config.json"
        if payload is not None:
            config_path.write_text(payload, encoding="utf-8")
        patcher = mock.patch("dirpick.runtime.config.CONFIG_PATH", config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_missing_config_uses_defaults(self) -> None:
        self._with_config(None)
        self.assertEqual(config.load_config(), {})
        self.assertIsNone(config.load_theme_name())
        self.assertTrue(config.load_open_selection())

    def test_values_are_read_from_json_object(self) -> None:
        self._with_config(json.dumps({"theme": " ocean ", "open_selection": False}))
        self.assertEqual(config.load_theme_name(), "ocean")
        self.assertFalse(config.load_open_selection())

    def test_malformed_json_is_ignored(self) -> None:
        self._with_config("{not json")
        self.assertEqual(config.load_config(), {})

    def test_non_object_json_is_ignored(self) -> None:
        self._with_config("[1, 2, 3]")
        self.assertEqual(config.load_config(), {})

    def test_mistyped_values_fall_back(self) -> None:
        self._with_config(json.dumps({"theme": 3, "open_selection": "no"}))
        self.assertIsNone(config.load_theme_name())
        self.assertTrue(config.load_open_selection())

    def test_blank_theme_is_treated_as_unset(self) -> None:
        self._with_config(json.dumps({"theme": "   "}))
        self.assertIsNone(config.load_theme_name())

    def test_config_path_lives_under_app_config_dir(self) -> None:
        self.assertEqual(config.CONFIG_PATH.name, "config.json")
        self.assertIn("dirpick", str(config.CONFIG_PATH.parent))


if __name__ == "__main__":
    unittest.main()
