"""
Writing the patched cartridge and running PICO-8 against it.
"""

import logging
import subprocess
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .settings import LaunchConfig

logger = logging.getLogger(__name__)


def write_cartridge(path: str, content: str) -> None:
    """Overwrite the cartridge file with new content."""
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(content)
    logger.info(f"Wrote cartridge: {path} ({len(content)} chars)")


def build_command(config: "LaunchConfig") -> List[str]:
    """Build the PICO-8 command line: executable, cartridge, then extra arguments."""
    return [config.exe_path, config.cart_path, *config.launch_args]


def launch(config: "LaunchConfig") -> int:
    """Run PICO-8 with the cartridge and wait for it to exit.

    PICO-8 inherits this process's stdin, stdout and stderr.

    Args:
        config: Validated launch configuration

    Returns:
        PICO-8's exit code, or 0 if it was terminated by a signal
    """
    command = build_command(config)
    logger.info(f"Launching PICO-8: {command}")

    completed = subprocess.run(command)

    if completed.returncode < 0:
        logger.info(f"PICO-8 terminated by signal {-completed.returncode}")
        return 0

    logger.info(f"PICO-8 exited with code {completed.returncode}")
    return completed.returncode
