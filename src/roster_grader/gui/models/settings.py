"""
Settings persistence model for the GUI.

Remembers where the last roster was opened from.
Malformed data falls back to defaults with a logged warning.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Optional

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)


class SettingsStore(QObject):
    """Lightweight JSON-backed store for persisting GUI preferences."""

    lastInputDirChanged = Signal(str)
    CURRENT_VERSION = 1

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        self.data: Dict[str, object] = {}

        if self.path.exists():
            try:
                self.data = json.loads(self.path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as e:
                logger.warning(f"Settings file {self.path} is corrupted, using defaults: {e}")
                self.data = {}
            except OSError as e:
                logger.warning(f"Failed to read settings {self.path}, using defaults: {e}")
                self.data = {}

        if "version" not in self._get_dict():
            self.data["version"] = self.CURRENT_VERSION

    def get_last_input_dir(self) -> Optional[str]:
        value = self._get_dict().get("last_input_dir")
        return value if isinstance(value, str) and value else None

    def set_last_input_dir(self, value: str) -> None:
        state = self._get_dict()
        if state.get("last_input_dir") == value:
            return
        state["last_input_dir"] = value
        self._save()
        self.lastInputDirChanged.emit(value)

    def _get_dict(self) -> Dict[str, object]:
        if not isinstance(self.data, dict):
            self.data = {}
        return self.data

    def _save(self) -> None:
        """Write settings with atomic replacement."""
        temp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path = self.path.with_suffix('.tmp')
            temp_path.write_text(json.dumps(self.data, indent=2), encoding="utf-8")
            temp_path.replace(self.path)
        except OSError as e:
            logger.warning(f"Failed to save settings: {e}")
            if temp_path is not None:
                try:
                    temp_path.unlink(missing_ok=True)
                except OSError:
                    pass
