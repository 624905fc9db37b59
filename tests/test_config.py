from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from termtree import config


class ConfigBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "nested" / "termtree.json"
        patcher = mock.patch("termtree.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def test_missing_file_gives_defaults(self) -> None:
        self.assertEqual(config.load_config(), {})
        self.assertIsNone(config.load_theme_name())
        self.assertFalse(config.load_show_hidden())
        self.assertTrue(config.load_show_root())
        self.assertIsNone(config.load_page_step())

    def test_values_round_trip_through_one_file(self) -> None:
        config.save_config({"show_hidden": True, "show_root": False})
        config.save_theme_name("  ocean ")

        saved = json.loads(self.config_path.read_text(encoding="utf-8"))
        self.assertEqual(saved, {"show_hidden": True, "show_root": False, "theme": "ocean"})
        self.assertEqual(config.load_theme_name(), "ocean")
        self.assertTrue(config.load_show_hidden())
        self.assertFalse(config.load_show_root())

    def test_blank_theme_name_is_not_saved(self) -> None:
        config.save_theme_name("   ")
        self.assertFalse(self.config_path.exists())

    def test_malformed_json_is_ignored(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text("{not json", encoding="utf-8")
        self.assertEqual(config.load_config(), {})

    def test_non_object_json_is_ignored(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text("[1, 2]", encoding="utf-8")
        self.assertEqual(config.load_config(), {})

    def test_page_step_accepts_only_positive_integers(self) -> None:
        for raw, expected in ((5, 5), (0, None), (-3, None), (True, None), ("7", None), (2.5, None)):
            with self.subTest(raw=raw):
                config.save_config({"page_step": raw})
                self.assertEqual(config.load_page_step(), expected)

    def test_non_boolean_flags_fall_back(self) -> None:
        config.save_config({"show_hidden": "yes", "show_root": 0})
        self.assertFalse(config.load_show_hidden())
        self.assertTrue(config.load_show_root())

    def test_unwritable_config_does_not_raise(self) -> None:
        with mock.patch.object(Path, "write_text", side_effect=PermissionError("denied")):
            config.save_theme_name("ocean")


if __name__ == "__main__":
    unittest.main()
