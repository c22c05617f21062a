"""Terminal access: raw mode, byte input and text output.

``raw_mode`` puts the input descriptor into a character-at-a-time, no-echo
mode and guarantees the saved attributes are restored on every exit path,
including the terminate key (which unwinds as ``SystemExit``).
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
import termios
from typing import Iterator, Protocol, TextIO

from simple_prompt.errors import TerminalSetupError

logger = logging.getLogger(__name__)

# Indices into the termios attribute list
_IFLAG = 0
_LFLAG = 3
_CC = 6


class Output(Protocol):
    """Sink for rendered terminal output."""

    def write(self, data: str) -> None: ...

    def flush(self) -> None: ...


class StdoutOutput:
    """Output backed by a text stream, ``sys.stdout`` by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def write(self, data: str) -> None:
        self._stream.write(data)

    def flush(self) -> None:
        self._stream.flush()


class StdinSource:
    """Blocking byte source reading one byte at a time from a descriptor."""

    def __init__(self, fd: int | None = None) -> None:
        self._fd = fd if fd is not None else sys.stdin.fileno()

    def read_byte(self) -> int | None:
        data = os.read(self._fd, 1)
        return data[0] if data else None


def _raw_attributes(attrs: list) -> list:
    """Derive raw-mode attributes from a saved termios attribute list.

    Canonical mode, echo and signal generation are switched off so every
    key (Ctrl+C included) arrives as a byte. Output post-processing stays
    on so ``\\n`` still returns the carriage.
    """
    raw = list(attrs)
    raw[_IFLAG] &= ~(termios.IXON)
    raw[_LFLAG] &= ~(termios.ICANON | termios.ECHO | termios.ISIG | termios.IEXTEN)
    cc = list(attrs[_CC])
    cc[termios.VMIN] = 1
    cc[termios.VTIME] = 0
    raw[_CC] = cc
    return raw


@contextlib.contextmanager
def raw_mode(fd: int | None = None) -> Iterator[int]:
    """Enter raw mode on *fd* (stdin by default) for the duration of the block.

    Yields the descriptor. Raises :class:`TerminalSetupError` when *fd* is
    not a terminal.
    """
    try:
        if fd is None:
            fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
        termios.tcsetattr(fd, termios.TCSANOW, _raw_attributes(saved))
    except (termios.error, OSError, ValueError) as exc:
        raise TerminalSetupError(f"cannot enter raw mode: {exc}") from exc

    logger.debug("Raw mode enabled on fd %d", fd)
    try:
        yield fd
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        logger.debug("Terminal attributes restored on fd %d", fd)
