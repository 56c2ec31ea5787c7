"""
pico8-launcher: splice an entry .lua file into a PICO-8 cartridge and run it.

Meant to be invoked from an editor launch configuration that passes paths
through environment variables.
"""

__version__ = "0.1.0"
__author__ = "pico8-launcher Contributors"

from .settings import AppSettings, LaunchConfig, ValidationResult
from .cartridge import CartridgeSplicer, SpliceAborted, build_cartridge, rewrite_includes
from .launcher import launch, write_cartridge
from .utils.logging_config import setup_logging

__all__ = [
    # Settings
    "AppSettings",
    "LaunchConfig",
    "ValidationResult",

    # Cartridge
    "CartridgeSplicer",
    "SpliceAborted",
    "build_cartridge",
    "rewrite_includes",

    # Launcher
    "launch",
    "write_cartridge",

    # Logging
    "setup_logging",
]
