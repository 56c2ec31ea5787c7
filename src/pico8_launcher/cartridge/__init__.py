"""Cartridge format helpers, include rewriting and code splicing."""

from .format import (
    START_LUA_SEGMENT,
    END_LUA_SEGMENT,
    START_GFX_SEGMENT,
    TEMPLATE_CARTRIDGE_HEADER,
    TEMPLATE_CARTRIDGE_FOOTER,
)
from .includes import include_offset, rewrite_includes
from .splicer import CartridgeSplicer, SpliceAborted, build_cartridge

__all__ = [
    "START_LUA_SEGMENT",
    "END_LUA_SEGMENT",
    "START_GFX_SEGMENT",
    "TEMPLATE_CARTRIDGE_HEADER",
    "TEMPLATE_CARTRIDGE_FOOTER",
    "include_offset",
    "rewrite_includes",
    "CartridgeSplicer",
    "SpliceAborted",
    "build_cartridge",
]
