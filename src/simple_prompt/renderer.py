"""Incremental line rendering with terminal control sequences.

The renderer never redraws the whole screen. Each primitive writes the
smallest sequence that brings the visible line back in step with the edit
buffer, and tracks where the physical cursor ends up so callers can check
that it matches the logical cursor.
"""

from __future__ import annotations

from simple_prompt.terminal import Output
from simple_prompt.utils import visible_width

# ---------------------------------------------------------------------------
# Control sequences
# ---------------------------------------------------------------------------

_CURSOR_BACK = "\b"
_CURSOR_BACK_FMT = "\x1b[{}D"
_NEWLINE = "\r\n"


class Renderer:
    """Writes line-editing updates to an :class:`Output`.

    ``origin`` is the column where editable text starts (the prompt's
    visible width); ``column`` is the physical cursor column on the current
    line.
    """

    def __init__(self, output: Output) -> None:
        self._output = output
        self.origin: int = 0
        self.column: int = 0

    # -- lines --------------------------------------------------------------

    def begin_line(self, prompt: str) -> None:
        """Print the prompt and anchor editing after it."""
        self._output.write(prompt)
        self._output.flush()
        self.origin = visible_width(prompt)
        self.column = self.origin

    def message(self, text: str) -> None:
        """Print free-standing text (e.g. a banner) on its own line."""
        self._output.write(text.replace("\n", _NEWLINE) + _NEWLINE)
        self._output.flush()
        self.column = 0

    def newline(self) -> None:
        self._output.write(_NEWLINE)
        self._output.flush()
        self.column = 0

    # -- primitives ---------------------------------------------------------

    def put(self, text: str) -> None:
        """Print *text* at the cursor, overwriting what is there."""
        if not text:
            return
        self._output.write(text)
        self._output.flush()
        self.column += len(text)

    def back(self, n: int) -> None:
        """Move the cursor *n* columns to the left."""
        if n <= 0:
            return
        self._output.write(_CURSOR_BACK if n == 1 else _CURSOR_BACK_FMT.format(n))
        self._output.flush()
        self.column -= n

    def erase_tail(self, n: int) -> None:
        """Blank *n* columns from the cursor, leaving the cursor in place."""
        if n <= 0:
            return
        self.put(" " * n)
        self.back(n)

    # -- compound updates ---------------------------------------------------

    def insert(self, ch: str, suffix: str) -> None:
        """Show *ch* inserted before *suffix*; cursor ends after *ch*."""
        self.put(ch + suffix)
        self.back(len(suffix))

    def rubout(self, suffix: str) -> None:
        """Show the character left of the cursor removed, *suffix* shifted in."""
        self.back(1)
        self.put(suffix + " ")
        self.back(len(suffix) + 1)

    def replace(self, old_cursor: int, old_length: int, new_text: str) -> None:
        """Swap the displayed line for *new_text*, cursor at its end.

        *old_cursor* and *old_length* describe the line currently shown.
        """
        self.back(old_cursor)
        self.put(new_text)
        self.erase_tail(old_length - len(new_text))
