"""Editable single-line buffer with cursor tracking."""

from __future__ import annotations


class EditBuffer:
    """Line content plus an insertion point.

    The cursor always satisfies ``0 <= cursor <= len(text)``. Moves that
    would cross either boundary are no-ops.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._cursor = len(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def suffix(self) -> str:
        """Text from the cursor to the end of the line."""
        return self._text[self._cursor :]

    def __len__(self) -> int:
        return len(self._text)

    def insert(self, ch: str) -> None:
        """Insert text at the cursor and advance past it."""
        self._text = self._text[: self._cursor] + ch + self._text[self._cursor :]
        self._cursor += len(ch)

    def backspace(self) -> bool:
        """Delete the character before the cursor. Returns False at column 0."""
        if self._cursor == 0:
            return False
        self._text = self._text[: self._cursor - 1] + self._text[self._cursor :]
        self._cursor -= 1
        return True

    def move_left(self) -> bool:
        if self._cursor == 0:
            return False
        self._cursor -= 1
        return True

    def move_right(self) -> bool:
        if self._cursor >= len(self._text):
            return False
        self._cursor += 1
        return True

    def move_home(self) -> int:
        """Move to column 0 and return how many columns were crossed."""
        moved = self._cursor
        self._cursor = 0
        return moved

    def move_end(self) -> str:
        """Move to the end of the line and return the text passed over."""
        passed = self.suffix
        self._cursor = len(self._text)
        return passed

    def kill_to_end(self) -> str:
        """Truncate at the cursor (Ctrl+K) and return what was removed."""
        removed = self.suffix
        self._text = self._text[: self._cursor]
        return removed

    def set_text(self, text: str) -> None:
        """Replace the content and move the cursor to the end."""
        self._text = text
        self._cursor = len(text)

    def clear(self) -> str:
        text = self._text
        self._text = ""
        self._cursor = 0
        return text
