"""
Run configuration read from the process environment.

The editor integration (e.g. a ``.vscode/launch.json`` entry) passes every
run-specific value through environment variables. They are read once at
startup into a :class:`LaunchConfig` which is then handed to each stage.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping

from .types import ValidationResult

# Environment variable names
EXE_PATH_VAR = "PICO8_EXE_PATH"
ENTRY_FILE_VAR = "ENTRY_FILE_PATH"
ENTRY_CART_VAR = "ENTRY_CART_PATH"
EXTRA_ARGS_VAR = "PICO8_ARGS"


@dataclass(frozen=True)
class LaunchConfig:
    """Values needed to prepare a cartridge and start PICO-8.

    Attributes:
        exe_path: Path to the PICO-8 executable
        entry_path: Path to the entry .lua file
        cart_path: Path to the cartridge to patch (may not exist yet)
        extra_args: Raw extra arguments string for PICO-8
    """

    exe_path: str = ""
    entry_path: str = ""
    cart_path: str = ""
    extra_args: str = ""

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "LaunchConfig":
        """Create config from an environment mapping (usually ``os.environ``)."""
        return cls(
            exe_path=environ.get(EXE_PATH_VAR, ""),
            entry_path=environ.get(ENTRY_FILE_VAR, ""),
            cart_path=environ.get(ENTRY_CART_VAR, ""),
            extra_args=environ.get(EXTRA_ARGS_VAR, ""),
        )

    @property
    def launch_args(self) -> List[str]:
        """Extra PICO-8 arguments, split on single spaces."""
        if self.extra_args == "":
            return []
        return self.extra_args.split(" ")

    @property
    def cart_exists(self) -> bool:
        """Check if the target cartridge already exists."""
        return Path(self.cart_path).exists()

    def validate(self) -> ValidationResult:
        """Validate this configuration."""
        from .validation import LaunchConfigValidator

        return LaunchConfigValidator(self).validate()
