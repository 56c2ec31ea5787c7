"""
Logging preferences for pico8-launcher.

Stored under the ``logging/`` group of the profile's QSettings file and read
once per run. The launcher never writes them; edit the settings file (its
path is logged at DEBUG level) to turn console or file logging on.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/pico8_launcher.csv"

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LoggingPreferences:
    """Snapshot of the stored logging preferences."""

    console_enabled: bool = False
    console_level: str = "WARNING"
    console_colors: bool = True
    file_enabled: bool = False
    log_file: str = LOG_FILE_PATH


def _read_bool(settings: "QSettings", key: str, default: bool) -> bool:
    # INI storage hands booleans back as strings
    value = settings.value(key, default)
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes")
    return bool(value)


def load_logging_preferences(settings: "QSettings") -> LoggingPreferences:
    """Read logging preferences, falling back to defaults for bad values."""
    defaults = LoggingPreferences()

    level = str(settings.value("logging/console_level", defaults.console_level)).upper()
    if level not in VALID_LEVELS:
        logger.warning(f"Invalid console log level in settings: {level}, using {defaults.console_level}")
        level = defaults.console_level

    return LoggingPreferences(
        console_enabled=_read_bool(settings, "logging/console_enabled", defaults.console_enabled),
        console_level=level,
        console_colors=_read_bool(settings, "logging/console_use_colors", defaults.console_colors),
        file_enabled=_read_bool(settings, "logging/file_enabled", defaults.file_enabled),
    )
