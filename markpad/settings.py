"""Persistent user preferences.

Preferences are stored as JSON in an OS-appropriate config directory and
survive application restarts.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: Dict[str, Any] = {
    # Keep the editor widget's real caret. False reproduces the old
    # behaviour of inserting at the end of the document.
    "track_caret": True,
    "pdf_font_name": "Courier",
    "pdf_font_size": EditorConstants.PDF_FONT_SIZE,
    "recent_files": [],
}


class SettingsPersistence:
    """Manages persistent storage of user preferences."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = Path(config_dir or platformdirs.user_config_dir("markpad"))
        self._settings_file = self._config_dir / "settings.json"
        self._settings_cache: Optional[Dict[str, Any]] = None

    def _ensure_config_dir(self) -> None:
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create config directory {self._config_dir}: {e}")

    def _load_all(self) -> Dict[str, Any]:
        """Load stored settings, or an empty dict if missing or unreadable."""
        if self._settings_cache is not None:
            return self._settings_cache

        if not self._settings_file.exists():
            self._settings_cache = {}
            return self._settings_cache

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            self._settings_cache = {}
            return self._settings_cache

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            data = {}
        self._settings_cache = data
        return self._settings_cache

    def _save_all(self, settings: Dict[str, Any]) -> bool:
        """Save settings to disk atomically."""
        self._ensure_config_dir()
        temp_file = self._settings_file.with_suffix('.tmp')

        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            temp_file.replace(self._settings_file)
            self._settings_cache = settings
            return True
        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False

    def get(self, key: str) -> Any:
        """Return a stored setting, falling back to its default.

        Stored values that fail validation are ignored.
        """
        stored = self._load_all()
        if key in stored and self.validate_setting(key, stored[key]):
            return stored[key]
        default = DEFAULT_SETTINGS.get(key)
        return list(default) if isinstance(default, list) else default

    def set(self, key: str, value: Any) -> bool:
        """Validate and persist a single setting."""
        if not self.validate_setting(key, value):
            logger.warning(f"Rejected invalid value for setting {key!r}: {value!r}")
            return False
        settings = dict(self._load_all())
        settings[key] = value
        return self._save_all(settings)

    def validate_setting(self, key: str, value: Any) -> bool:
        if value is None:
            return True

        if key == 'track_caret':
            return isinstance(value, bool)

        if key == 'pdf_font_name':
            return isinstance(value, str)

        if key == 'pdf_font_size':
            if not isinstance(value, int) or isinstance(value, bool):
                return False
            return EditorConstants.MIN_PDF_FONT_SIZE <= value <= EditorConstants.MAX_PDF_FONT_SIZE

        if key == 'recent_files':
            return isinstance(value, list) and all(isinstance(p, str) for p in value)

        # Unknown settings are considered valid (forward compatibility)
        return True

    @property
    def track_caret(self) -> bool:
        return bool(self.get('track_caret'))

    def recent_files(self) -> List[str]:
        return self.get('recent_files') or []

    def add_recent_file(self, path: str) -> bool:
        """Move ``path`` to the front of the recent files list."""
        try:
            abs_path = os.path.abspath(path)
        except (OSError, ValueError):
            logger.warning(f"Invalid document path: {path}")
            return False
        recent = [p for p in self.recent_files() if p != abs_path]
        recent.insert(0, abs_path)
        return self.set('recent_files', recent[:EditorConstants.RECENT_FILES_LIMIT])

    def clear_cache(self) -> None:
        """Clear the in-memory cache of settings."""
        self._settings_cache = None


# Global instance
_persistence: Optional[SettingsPersistence] = None


def get_persistence() -> SettingsPersistence:
    """Get the global settings persistence instance."""
    global _persistence
    if _persistence is None:
        _persistence = SettingsPersistence()
    return _persistence
