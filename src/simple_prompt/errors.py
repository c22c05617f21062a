"""Exception types raised by the prompt engine."""

from __future__ import annotations


class PromptError(Exception):
    """Base class for simple-prompt errors."""


class TerminalSetupError(PromptError):
    """Raw mode could not be entered on the input descriptor."""


class DictionaryLoadError(PromptError):
    """A command dictionary file could not be read."""


class Terminated(SystemExit):
    """Raised when the terminate key is pressed.

    Subclasses :class:`SystemExit` so that an uncaught instance ends the
    process with status 0 after unwinding through ``raw_mode``.
    """

    def __init__(self) -> None:
        super().__init__(0)
