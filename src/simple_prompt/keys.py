"""Raw keystroke decoding.

Turns the byte stream coming from a terminal in raw mode into logical
:class:`KeyEvent` values. Only the small set of keys the line editor acts
on is recognised; everything else decodes to ``KeyType.UNRECOGNIZED``.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Byte values
# ---------------------------------------------------------------------------

CTRL_A = 1
CTRL_C = 3
CTRL_E = 5
BS = 8
TAB = 9
LF = 10
CTRL_K = 11
CR = 13
ESC = 27
DEL = 127

CSI_INTRODUCER = 91  # "["
PRINTABLE_THRESHOLD = 32


class KeyType(enum.Enum):
    """Every logical key the editor distinguishes."""

    PRINTABLE = "printable"
    ENTER = "enter"
    TERMINATE = "terminate"
    BACKSPACE = "backspace"
    TAB = "tab"
    CTRL_HOME = "ctrlHome"
    CTRL_END = "ctrlEnd"
    CTRL_KILL_TO_END = "ctrlKillToEnd"
    ARROW_UP = "up"
    ARROW_DOWN = "down"
    ARROW_LEFT = "left"
    ARROW_RIGHT = "right"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key. ``char`` is only meaningful for printable keys."""

    type: KeyType
    char: str = ""

    @classmethod
    def printable(cls, char: str) -> KeyEvent:
        return cls(KeyType.PRINTABLE, char)


# Single control bytes with a dedicated meaning
CONTROL_KEYS: dict[int, KeyType] = {
    LF: KeyType.ENTER,
    CR: KeyType.ENTER,
    CTRL_C: KeyType.TERMINATE,
    DEL: KeyType.BACKSPACE,
    BS: KeyType.BACKSPACE,
    TAB: KeyType.TAB,
    CTRL_A: KeyType.CTRL_HOME,
    CTRL_E: KeyType.CTRL_END,
    CTRL_K: KeyType.CTRL_KILL_TO_END,
}

# Final byte of ESC [ x sequences
ARROW_KEYS: dict[int, KeyType] = {
    65: KeyType.ARROW_UP,  # "A"
    66: KeyType.ARROW_DOWN,  # "B"
    67: KeyType.ARROW_RIGHT,  # "C"
    68: KeyType.ARROW_LEFT,  # "D"
}

UNRECOGNIZED = KeyEvent(KeyType.UNRECOGNIZED)


class ByteSource(Protocol):
    """Blocking supplier of raw input bytes."""

    def read_byte(self) -> int | None:
        """Return the next byte, or ``None`` once input is exhausted."""
        ...


def decode_byte(code: int) -> KeyEvent:
    """Classify a single byte that does not start an escape sequence."""
    key_type = CONTROL_KEYS.get(code)
    if key_type is not None:
        return KeyEvent(key_type)
    if code < PRINTABLE_THRESHOLD:
        return UNRECOGNIZED
    return KeyEvent.printable(chr(code))


class KeyDecoder:
    """Reads bytes from a :class:`ByteSource` and yields one key per call."""

    def __init__(self, source: ByteSource) -> None:
        self._source = source

    def next_key(self) -> KeyEvent:
        code = self._source.read_byte()
        if code is None:
            logger.info("Input exhausted, treating as terminate")
            return KeyEvent(KeyType.TERMINATE)
        if code == ESC:
            return self._read_escape()
        event = decode_byte(code)
        if event.type is KeyType.UNRECOGNIZED:
            logger.debug("Ignoring control byte %d", code)
        return event

    def _read_escape(self) -> KeyEvent:
        introducer = self._source.read_byte()
        if introducer != CSI_INTRODUCER:
            logger.debug("Discarding escape sequence with introducer %r", introducer)
            return UNRECOGNIZED
        final = self._source.read_byte()
        if final is None:
            return UNRECOGNIZED
        key_type = ARROW_KEYS.get(final)
        if key_type is None:
            logger.debug("Discarding unsupported sequence ESC [ %d", final)
            return UNRECOGNIZED
        return KeyEvent(key_type)
