"""
Launch configuration validation for pico8-launcher.
"""

import logging
from pathlib import Path
from typing import List, TYPE_CHECKING

from .types import ValidationResult
from .launch_config import EXE_PATH_VAR, ENTRY_FILE_VAR, ENTRY_CART_VAR

if TYPE_CHECKING:
    from .launch_config import LaunchConfig

logger = logging.getLogger(__name__)

NOT_SPECIFIED_HINT = "Did you specify a path in the .vscode/launch.json file?"


class LaunchConfigValidator:
    """Validates launch configuration before any file is touched."""

    def __init__(self, config: "LaunchConfig"):
        self.config = config

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        # Validate PICO-8 executable
        if self._is_blank(self.config.exe_path):
            errors.append(f"{EXE_PATH_VAR} has not been specified. {NOT_SPECIFIED_HINT}")
        elif not Path(self.config.exe_path).exists():
            errors.append(
                f"{EXE_PATH_VAR} points to a missing file. "
                "Did you provide a valid path to the PICO-8 executable?"
            )

        # Validate entry .lua file
        if self._is_blank(self.config.entry_path):
            errors.append(f"{ENTRY_FILE_VAR} has not been specified. {NOT_SPECIFIED_HINT}")
        elif not Path(self.config.entry_path).exists():
            errors.append(
                f"{ENTRY_FILE_VAR} points to a missing file. "
                "Did you provide a valid path to your entry .lua file?"
            )

        # Validate cartridge path (may be created later)
        if self._is_blank(self.config.cart_path):
            errors.append(f"{ENTRY_CART_VAR} has not been specified. {NOT_SPECIFIED_HINT}")
        else:
            cart_path = Path(self.config.cart_path)
            if cart_path.suffix.lower() != ".p8":
                warnings.append(
                    f"Cartridge path does not end with .p8, PICO-8 may refuse to load it: {cart_path}"
                )
            if not cart_path.absolute().parent.exists():
                warnings.append(f"Cartridge directory does not exist: {cart_path.absolute().parent}")

        if errors:
            logger.debug(f"Launch configuration has {len(errors)} error(s)")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )

    @staticmethod
    def _is_blank(value: str) -> bool:
        return value.strip() == ""
