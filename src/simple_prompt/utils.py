"""Text measurement helpers for prompt rendering."""

from __future__ import annotations

import re

import wcwidth as _wcwidth

# CSI (colours, erase) and OSC 8 hyperlinks take no columns
_STRIP_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"  # CSI
    r"|\x1b\]8;;[^\x07]*\x07"  # OSC 8
)

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 128


def strip_ansi(text: str) -> str:
    return _STRIP_RE.sub("", text)


def visible_width(text: str) -> int:
    """Calculate the number of terminal columns *text* occupies.

    * Strips ANSI escape sequences.
    * Uses a fast ASCII path when possible.
    * Falls back to ``wcwidth`` for anything else, treating
      non-printable characters as zero width.
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0

    if all(0x20 <= ord(ch) <= 0x7E for ch in stripped):
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(max(_wcwidth.wcwidth(ch), 0) for ch in stripped)
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[stripped] = total
    return total
