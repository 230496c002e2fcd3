"""
Settings Manager.

Handles application settings with JSON file storage.
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)


@dataclass
class DisplaySettings:
    """Screen related settings."""
    density: float = 1.0  # pixels per dp


@dataclass
class ShapeDefaults:
    """Defaults applied to shapes that do not set them."""
    base_color: str = "#ffd6d6d6"
    accent_color: str = "#ff33add6"
    emboss: bool = True


@dataclass
class UISettings:
    """User interface settings."""
    padding: int = 0
    antialiasing: bool = True
    samples_dir: str = ""
    recent_files_max: int = 10


@dataclass
class AppSettings:
    """Complete application settings."""
    display: DisplaySettings = field(default_factory=DisplaySettings)
    shapes: ShapeDefaults = field(default_factory=ShapeDefaults)
    ui: UISettings = field(default_factory=UISettings)
    recent_files: list = field(default_factory=list)
    window_geometry: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "display": asdict(self.display),
            "shapes": asdict(self.shapes),
            "ui": asdict(self.ui),
            "recent_files": self.recent_files,
            "window_geometry": self.window_geometry,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """Create from dictionary."""
        settings = cls()

        if "display" in data:
            settings.display = DisplaySettings(**data["display"])
        if "shapes" in data:
            settings.shapes = ShapeDefaults(**data["shapes"])
        if "ui" in data:
            settings.ui = UISettings(**data["ui"])
        if "recent_files" in data:
            settings.recent_files = data["recent_files"]
        if "window_geometry" in data:
            settings.window_geometry = data["window_geometry"]

        return settings


class SettingsManager:
    """
    Manages application settings with JSON file storage.

    Settings file location:
    - Windows: %APPDATA%/ShapeButton/settings.json
    - Linux: ~/.config/ShapeButton/settings.json
    - macOS: ~/Library/Application Support/ShapeButton/settings.json
    """

    APP_NAME = "ShapeButton"
    SETTINGS_FILE = "settings.json"

    def __init__(self, config_override: Optional[str] = None):
        """
        Initialize settings manager.

        Args:
            config_override: Optional path to override config file location.
                            Useful for testing.
        """
        self._settings = AppSettings()
        self._config_override = config_override
        self._settings_path = self._get_settings_path()
        self._ensure_settings_dir()
        self.load()

    @property
    def settings(self) -> AppSettings:
        """Get current settings."""
        return self._settings

    @property
    def settings_path(self) -> str:
        """Get the settings file path."""
        return str(self._settings_path)

    # Convenience properties for common settings
    @property
    def density(self) -> float:
        return self._settings.display.density

    @density.setter
    def density(self, value: float):
        self._settings.display.density = value
        self.save()

    @property
    def shape_defaults(self) -> ShapeDefaults:
        return self._settings.shapes

    def get_samples_directory(self) -> Path:
        """Get the directory holding sample shape files."""
        if self._settings.ui.samples_dir and os.path.isdir(self._settings.ui.samples_dir):
            return Path(self._settings.ui.samples_dir)
        return Path(__file__).resolve().parent.parent / "samples"

    def _get_settings_path(self) -> Path:
        """Get platform-specific settings directory."""
        if self._config_override:
            return Path(self._config_override)

        import platform
        system = platform.system()

        if system == "Windows":
            base = os.environ.get("APPDATA", os.path.expanduser("~"))
            config_dir = Path(base) / self.APP_NAME
        elif system == "Darwin":  # macOS
            config_dir = Path.home() / "Library" / "Application Support" / self.APP_NAME
        else:  # Linux and others
            xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
            config_dir = Path(xdg_config) / self.APP_NAME

        return config_dir / self.SETTINGS_FILE

    def _ensure_settings_dir(self):
        """Create settings directory if it doesn't exist."""
        self._settings_path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> bool:
        """Load settings from file."""
        if not self._settings_path.exists():
            return False

        try:
            with open(self._settings_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._settings = AppSettings.from_dict(data)
            return True
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Error loading settings: {e}")
            return False

    def save(self) -> bool:
        """Save settings to file."""
        try:
            self._ensure_settings_dir()
            with open(self._settings_path, "w", encoding="utf-8") as f:
                json.dump(self._settings.to_dict(), f, indent=2)
            return True
        except OSError as e:
            logger.error(f"Error saving settings: {e}")
            return False

    def reset(self):
        """Reset settings to defaults."""
        self._settings = AppSettings()
        self.save()

    def add_recent_file(self, file_path: str):
        """Add a file to recent files list."""
        # Remove if already exists
        if file_path in self._settings.recent_files:
            self._settings.recent_files.remove(file_path)

        # Add to front
        self._settings.recent_files.insert(0, file_path)

        # Trim to max
        max_files = self._settings.ui.recent_files_max
        self._settings.recent_files = self._settings.recent_files[:max_files]

        self.save()

    def get_recent_files(self) -> list:
        """Get recent files list, filtered to existing files."""
        existing = [f for f in self._settings.recent_files if os.path.exists(f)]
        if len(existing) != len(self._settings.recent_files):
            self._settings.recent_files = existing
            self.save()
        return existing

    def save_window_geometry(self, geometry: bytes, state: bytes):
        """Save window geometry and state."""
        import base64
        self._settings.window_geometry = {
            "geometry": base64.b64encode(geometry).decode("ascii"),
            "state": base64.b64encode(state).decode("ascii"),
        }
        self.save()

    def get_window_geometry(self) -> tuple:
        """Get saved window geometry and state."""
        import base64
        geo = self._settings.window_geometry
        if not geo:
            return None, None

        try:
            geometry = base64.b64decode(geo.get("geometry", ""))
            state = base64.b64decode(geo.get("state", ""))
            return geometry, state
        except ValueError:
            return None, None


# Global settings instance
_settings_manager: Optional[SettingsManager] = None


def get_settings(config_override: Optional[str] = None) -> SettingsManager:
    """
    Get the global settings manager instance.

    Args:
        config_override: Optional path to override config location.
                        Only used on first call to initialize.
    """
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager(config_override)
    return _settings_manager


def reset_settings_manager():
    """Reset the global settings manager (useful for testing)."""
    global _settings_manager
    _settings_manager = None
