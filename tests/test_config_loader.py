import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from convcommit.config.loader import DEFAULT_CONFIG, ConfigError, load_config


class TestConfigLoader(unittest.TestCase):
    """Tests for the configuration loader."""

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.user_dir = Path(self._tmp.name) / "home"
        self.user_dir.mkdir()
        self.repo_root = Path(self._tmp.name) / "repo"
        self.repo_root.mkdir()
        patcher = patch(
            "convcommit.config.loader._get_config_directory", return_value=self.user_dir
        )
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_defaults_when_no_file(self) -> None:
        self.assertEqual(load_config(self.repo_root), DEFAULT_CONFIG)
        self.assertEqual(load_config(), DEFAULT_CONFIG)

    def test_user_config(self) -> None:
        (self.user_dir / "config.json").write_text(json.dumps({"output_format": "json"}))
        result = load_config()
        self.assertEqual(result["output_format"], "json")
        self.assertEqual(result["json_indent"], 2)
        self.assertTrue(result["color"])

    def test_project_config_takes_precedence(self) -> None:
        (self.user_dir / "config.json").write_text(json.dumps({"output_format": "json"}))
        (self.repo_root / ".convcommit.json").write_text(
            json.dumps({"output_format": "text", "color": False, "json_indent": None})
        )
        result = load_config(self.repo_root)
        self.assertEqual(result, {"output_format": "text", "color": False, "json_indent": None})

    def test_unknown_keys_are_ignored(self) -> None:
        (self.repo_root / ".convcommit.json").write_text(json.dumps({"model": "x"}))
        self.assertEqual(load_config(self.repo_root), DEFAULT_CONFIG)

    def test_invalid_json(self) -> None:
        (self.repo_root / ".convcommit.json").write_text("{invalid}")
        with self.assertRaises(ConfigError):
            load_config(self.repo_root)

    def test_not_an_object(self) -> None:
        (self.repo_root / ".convcommit.json").write_text("[1, 2]")
        with self.assertRaises(ConfigError):
            load_config(self.repo_root)

    def test_invalid_values(self) -> None:
        cases = [
            {"output_format": "yaml"},
            {"json_indent": -1},
            {"json_indent": "2"},
            {"json_indent": True},
            {"color": "yes"},
        ]
        for data in cases:
            with self.subTest(data=data):
                (self.repo_root / ".convcommit.json").write_text(json.dumps(data))
                with self.assertRaises(ConfigError):
                    load_config(self.repo_root)


if __name__ == "__main__":
    unittest.main()
