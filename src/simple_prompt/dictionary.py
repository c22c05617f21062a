"""Command dictionary and prefix completion."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from simple_prompt.errors import DictionaryLoadError

logger = logging.getLogger(__name__)


class CommandDictionary:
    """Ordered list of known commands used for tab completion.

    Entries keep insertion order, which is also the completion priority.
    Duplicates are kept.
    """

    def __init__(self, commands: Iterable[str] = ()) -> None:
        self._commands: list[str] = list(commands)

    def add(self, command: str) -> None:
        self._commands.append(command)

    def extend(self, commands: Iterable[str]) -> None:
        self._commands.extend(commands)

    def complete(self, prefix: str) -> str | None:
        """Return the first command starting with *prefix*, or ``None``.

        An empty prefix never completes.
        """
        if not prefix:
            return None
        for command in self._commands:
            if command[: len(prefix)] == prefix:
                return command
        return None

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, command: object) -> bool:
        return command in self._commands


def load_dictionary(path: str | Path) -> CommandDictionary:
    """Read commands from a text file, one per line.

    Blank lines and lines starting with ``#`` are skipped.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryLoadError(f"cannot read dictionary {path}: {exc}") from exc

    dictionary = CommandDictionary()
    for line in content.splitlines():
        command = line.strip()
        if command and not command.startswith("#"):
            dictionary.add(command)
    logger.info("Loaded %d commands from %s", len(dictionary), path)
    return dictionary
