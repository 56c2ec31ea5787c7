"""
PICO-8 cartridge text format: section markers and the blank template.

A ``.p8`` cartridge is a line-oriented text file. The Lua code section starts
after the ``__lua__`` line and runs until the next section marker; the
launcher also writes an explicit ``--__end_lua__--`` comment line so the end
of injected code can be found again on the next run.
"""

import re
from typing import List, Optional, Pattern

START_LUA_SEGMENT = "__lua__"
END_LUA_SEGMENT = "--__end_lua__--"
START_GFX_SEGMENT = "__gfx__"

CART_HEADER_END_SEGMENT: Pattern[str] = re.compile(r"^version\s+(\d+)$")

TEMPLATE_CARTRIDGE_HEADER = "\n".join([
    "pico-8 cartridge // http://www.pico-8.com",
    "version 42",
])

TEMPLATE_CARTRIDGE_FOOTER = "\n".join([START_GFX_SEGMENT] + ["0" * 128] * 6)

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> List[str]:
    """Split cartridge text into lines, accepting both LF and CRLF."""
    return _LINE_BREAK.split(text)


def find_marker(lines: List[str], marker: str, start: int = 0) -> Optional[int]:
    """Find the index of the first line equal to ``marker`` (ignoring surrounding whitespace).

    Args:
        lines: Cartridge lines
        marker: Exact marker token
        start: First index to look at

    Returns:
        Line index, or None if the marker is not present
    """
    for index in range(start, len(lines)):
        if lines[index].strip() == marker:
            return index
    return None


def find_header_end(lines: List[str]) -> Optional[int]:
    """Find the ``version N`` header line."""
    for index, line in enumerate(lines):
        if CART_HEADER_END_SEGMENT.match(line.strip()):
            return index
    return None
