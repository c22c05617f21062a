"""Submitted-line history with clamped Up/Down navigation."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class History:
    """Append-only log of submitted lines.

    Navigation uses an index into ``entries``; ``len(entries)`` means "one
    past the newest entry", i.e. not browsing. Navigating never changes the
    entries themselves.
    """

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._index: int = 0

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def index(self) -> int:
        return self._index

    @property
    def browsing(self) -> bool:
        return self._index < len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, line: str) -> None:
        """Record a submitted line. Empty lines are ignored."""
        if not line:
            return
        self._entries.append(line)
        self.reset()

    def reset(self) -> None:
        """Stop browsing; the next Up shows the newest entry."""
        self._index = len(self._entries)

    def previous(self) -> str | None:
        """Step toward older entries (Up arrow).

        Returns the entry to display, or ``None`` when there is no history.
        At the oldest entry the index stays put and the oldest is returned
        again.
        """
        if not self._entries:
            return None
        if self._index > 0:
            self._index -= 1
        else:
            logger.debug("History already at oldest entry")
        return self._entries[self._index]

    def next(self) -> str | None:
        """Step toward newer entries (Down arrow).

        Returns the entry to display, ``""`` when stepping past the newest
        entry, or ``None`` if not browsing.
        """
        if self._index >= len(self._entries):
            return None
        self._index += 1
        if self._index == len(self._entries):
            return ""
        return self._entries[self._index]
