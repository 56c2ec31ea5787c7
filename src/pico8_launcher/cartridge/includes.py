"""
Rewriting of ``#include`` directives.

PICO-8 resolves ``#include`` paths relative to the cartridge, while the entry
file's includes are written relative to the entry file itself. Once the entry
code is copied into the cartridge every include path has to be re-anchored.
"""

import logging
import os
import re
from typing import Pattern

logger = logging.getLogger(__name__)

INCLUDE_STATEMENT: Pattern[str] = re.compile(r"^[ \t]*#include[ \t]+(\S+)", re.MULTILINE)


def include_offset(cart_path: str, entry_path: str) -> str:
    """Relative path from the cartridge's directory to the entry file's directory.

    Args:
        cart_path: Path to the cartridge file
        entry_path: Path to the entry .lua file

    Returns:
        Relative directory path ("." when both live in the same directory)
    """
    cart_dir = os.path.dirname(cart_path) or os.curdir
    entry_dir = os.path.dirname(entry_path) or os.curdir
    return os.path.relpath(entry_dir, cart_dir)


def rewrite_includes(code: str, folder_path: str) -> str:
    """Resolve include paths so they are relative to another parent path.

    All matches are collected before editing and replaced from the last one
    to the first, so replacing one path never shifts the offsets of the
    matches still to be processed.

    Args:
        code: Code to repath statements in
        folder_path: Folder of the file that contains this code, relative to
            the cartridge's folder

    Returns:
        Code with repathed include statements
    """
    matches = list(INCLUDE_STATEMENT.finditer(code))
    if not matches:
        return code

    for match in reversed(matches):
        include_path = match.group(1)
        new_path = os.path.normpath(os.path.join(folder_path, include_path))
        start, end = match.span(1)
        code = code[:start] + new_path + code[end:]
        logger.debug(f"Repathed include {include_path} -> {new_path}")

    logger.info(f"Repathed {len(matches)} include statement(s)")
    return code
