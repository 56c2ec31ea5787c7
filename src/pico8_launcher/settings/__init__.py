"""
Settings package for pico8-launcher.

Persistent preferences use Qt's QSettings; per-run values are read from the
environment into an immutable LaunchConfig.

Usage:
    from pico8_launcher.settings import AppSettings, LaunchConfig

    config = LaunchConfig.from_environ(os.environ)
    result = config.validate()
"""

from .core import AppSettings
from .types import ValidationResult
from .logging import LoggingPreferences
from .launch_config import LaunchConfig
from .validation import LaunchConfigValidator

__all__ = [
    "AppSettings",
    "LoggingPreferences",
    "ValidationResult",
    "LaunchConfig",
    "LaunchConfigValidator",
]
