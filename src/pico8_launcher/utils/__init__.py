"""Utility helpers for pico8-launcher."""

from .logging_config import setup_logging
from .prompt import choose_yes_or_no

__all__ = ["setup_logging", "choose_yes_or_no"]
