"""
Unit tests for GUI settings persistence.
"""
import json
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from roster_grader.gui.models.settings import SettingsStore


class TestSettingsStore(unittest.TestCase):
    """Test settings persistence."""

    def setUp(self):
        self.temp_dir = TemporaryDirectory()
        self.settings_path = Path(self.temp_dir.name) / "test_settings.json"
        self.store = SettingsStore(self.settings_path)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_last_input_dir_persistence(self):
        """Last input directory is saved and loaded correctly."""
        self.store.set_last_input_dir("/rosters/term1")

        new_store = SettingsStore(self.settings_path)
        self.assertEqual(new_store.get_last_input_dir(), "/rosters/term1")

    def test_last_input_dir_default_is_none(self):
        self.assertIsNone(self.store.get_last_input_dir())

    def test_last_input_dir_change_emits_signal(self):
        received = []
        self.store.lastInputDirChanged.connect(received.append)

        self.store.set_last_input_dir("/a")
        self.store.set_last_input_dir("/a")
        self.store.set_last_input_dir("/b")

        self.assertEqual(received, ["/a", "/b"])

    def test_corrupted_file_falls_back_to_defaults(self):
        """Malformed JSON must not crash the app."""
        self.settings_path.write_text("{not json", encoding="utf-8")

        with self.assertLogs("roster_grader.gui.models.settings", level="WARNING"):
            store = SettingsStore(self.settings_path)

        self.assertIsNone(store.get_last_input_dir())

    def test_non_dict_file_falls_back_to_defaults(self):
        self.settings_path.write_text("[1, 2, 3]", encoding="utf-8")
        store = SettingsStore(self.settings_path)
        self.assertIsNone(store.get_last_input_dir())

    def test_saved_file_holds_only_version_and_last_input_dir(self):
        self.store.set_last_input_dir("/rosters")
        saved = json.loads(self.settings_path.read_text(encoding="utf-8"))
        self.assertEqual(sorted(saved), ["last_input_dir", "version"])

    def test_save_leaves_no_temp_file(self):
        self.store.set_last_input_dir("/x")
        names = sorted(p.name for p in Path(self.temp_dir.name).iterdir())
        self.assertEqual(names, ["test_settings.json"])


if __name__ == "__main__":
    unittest.main()
