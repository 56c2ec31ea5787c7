"""
Splicing entry code into a cartridge's Lua section.
"""

import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, TYPE_CHECKING

from .format import (
    END_LUA_SEGMENT,
    START_GFX_SEGMENT,
    START_LUA_SEGMENT,
    TEMPLATE_CARTRIDGE_FOOTER,
    TEMPLATE_CARTRIDGE_HEADER,
    find_header_end,
    find_marker,
    split_lines,
)
from .includes import include_offset, rewrite_includes

if TYPE_CHECKING:
    from ..settings import LaunchConfig

PROCEED_PROMPT = "Do you wish to proceed?"


class SpliceAborted(Exception):
    """Raised when the user declines to continue with a damaged cartridge."""
    pass


class CartridgeSplicer:
    """Merges source code into a cartridge document.

    The splicer never touches the filesystem. Whenever the cartridge looks
    damaged it warns and asks ``confirm`` whether to carry on; a negative
    answer raises SpliceAborted before anything is written.
    """

    def __init__(self, confirm: Callable[[str], bool]):
        """Initialize the splicer.

        Args:
            confirm: Callback asking the user a yes/no question
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.confirm = confirm

    def splice(self, source: str, existing: Optional[str] = None) -> str:
        """Produce the final cartridge text.

        Args:
            source: Entry code with includes already repathed
            existing: Current cartridge text, or None to start from the template

        Returns:
            Cartridge text ready to be written

        Raises:
            SpliceAborted: If the user declined to proceed
        """
        if existing is None:
            self.logger.info("No existing cartridge, building from template")
            return "\n".join(
                [TEMPLATE_CARTRIDGE_HEADER, source, END_LUA_SEGMENT, TEMPLATE_CARTRIDGE_FOOTER]
            )

        lines = split_lines(existing)

        start_idx = find_marker(lines, START_LUA_SEGMENT)
        if start_idx is None:
            self._warn_or_abort(
                "Unable to determine code section in cartridge, cartridge file may be invalid or corrupted."
            )
            start_idx = find_header_end(lines) or 0
            self.logger.debug(f"Using line {start_idx} as code section start")

        end_idx = find_marker(lines, END_LUA_SEGMENT, start_idx + 1)
        if end_idx is None:
            end_idx = find_marker(lines, START_GFX_SEGMENT, start_idx + 1)
            source = f"{source}\n{END_LUA_SEGMENT}"

        if end_idx is None:
            self._warn_or_abort(
                "Unable to determine remaining data section in cartridge, cartridge file may be invalid or corrupted."
            )

        tail: List[str] = [] if end_idx is None else lines[end_idx:]
        self.logger.debug(
            f"Replacing cartridge lines {start_idx + 1}..{end_idx if end_idx is not None else len(lines)}"
        )
        return "\n".join(lines[: start_idx + 1] + [source] + tail)

    def _warn_or_abort(self, message: str) -> None:
        """Warn the user and ask whether to proceed."""
        self.logger.warning(message)
        print(f"WARN: {message}", file=sys.stderr)

        if not self.confirm(PROCEED_PROMPT):
            self.logger.info("User declined to proceed, cartridge left untouched")
            raise SpliceAborted(message)


def build_cartridge(config: "LaunchConfig", confirm: Callable[[str], bool]) -> str:
    """Read the entry file and existing cartridge and splice them together.

    Args:
        config: Validated launch configuration
        confirm: Callback asking the user a yes/no question

    Returns:
        Cartridge text ready to be written

    Raises:
        SpliceAborted: If the user declined to proceed
    """
    logger = logging.getLogger(__name__)

    # utf-8-sig: editors may save the entry file with a BOM
    entry_content = Path(config.entry_path).read_text(encoding="utf-8-sig").strip()
    offset = include_offset(config.cart_path, config.entry_path)
    logger.debug(f"Entry folder relative to cartridge: {offset}")
    entry_content = rewrite_includes(entry_content, offset)

    existing: Optional[str] = None
    if config.cart_exists:
        logger.info(f"Patching existing cartridge: {config.cart_path}")
        existing = Path(config.cart_path).read_text(encoding="utf-8-sig")

    return CartridgeSplicer(confirm).splice(entry_content, existing)
