"""
Core settings management for pico8-launcher.
"""

import logging

from PySide6.QtCore import QSettings

from .logging import LoggingPreferences, load_logging_preferences

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Persistent tool preferences stored with QSettings.

    Run-specific values (executable, entry file, cartridge) are not stored
    here; they come from the environment through LaunchConfig.
    """

    def __init__(self, profile: str = "default"):
        """Initialize settings for a profile.

        Args:
            profile: Settings profile name (default: "default")
        """
        self.settings = QSettings("pico8-launcher", "pico8_launcher")
        self.profile = profile

        # Use profile as a group: pico8-launcher/pico8_launcher/default/...
        self.settings.beginGroup(profile)

        self._logging = load_logging_preferences(self.settings)

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    @property
    def logging(self) -> LoggingPreferences:
        """Logging preferences read at startup."""
        return self._logging

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()
