"""
Main entry point for pico8-launcher.
Usage: python -m pico8_launcher
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .settings import AppSettings, LaunchConfig
from .cartridge import SpliceAborted, build_cartridge
from .launcher import launch, write_cartridge
from .utils.logging_config import setup_logging
from .utils.prompt import choose_yes_or_no


def report_error(message: str) -> None:
    """Show error message to user."""
    print(f"ERR: {message}", file=sys.stderr)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pico8-launch",
        description=(
            "Splice ENTRY_FILE_PATH into ENTRY_CART_PATH and run PICO8_EXE_PATH "
            "with the cartridge and PICO8_ARGS."
        ),
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="enable console logging at this level for this run",
    )
    parser.add_argument(
        "--no-launch",
        action="store_true",
        help="write the cartridge but do not start PICO-8",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = parse_args(argv)
    logger = logging.getLogger(f"{__name__}.main")
    try:
        settings = AppSettings()
        setup_logging(settings, console_level=args.log_level)

        logger.info(f"Starting pico8-launcher {__version__}")
        logger.debug(f"Settings loaded from {settings.get_settings_file_path()}")

        config = LaunchConfig.from_environ(os.environ)

        validation = config.validate()
        for warning in validation.warnings:
            logger.warning(warning)

        if not validation.is_valid:
            logger.error("Launch configuration validation failed")
            for error in validation.errors:
                logger.error(f"  {error}")
                report_error(error)
            return 1

        try:
            content = build_cartridge(config, confirm=choose_yes_or_no)
        except SpliceAborted:
            logger.info("Aborted by user, nothing written")
            return 0

        write_cartridge(config.cart_path, content)

        if args.no_launch:
            logger.info("Launch skipped (--no-launch)")
            return 0

        return launch(config)

    except Exception as e:
        logger.exception("Unhandled exception in main")
        report_error(f"An unexpected error occurred: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
