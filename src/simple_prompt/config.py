"""Configuration for an interactive prompt."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Callable

DEFAULT_PROMPT = "prompt$> "
DICTIONARY_ENV_VAR = "SIMPLE_PROMPT_DICTIONARY"


def _default_dictionary_path() -> str | None:
    return os.environ.get(DICTIONARY_ENV_VAR) or None


@dataclass
class PromptConfig:
    """Prompt settings.

    ``submit_handler`` receives each non-empty submitted line. ``printer``
    is an optional secondary sink called with the whole buffer after every
    inserted character.
    """

    prompt_text: str = DEFAULT_PROMPT
    welcome_text: str = ""
    submit_handler: Callable[[str], None] | None = None
    printer: Callable[[str], None] | None = None
    dictionary_path: str | None = field(default_factory=_default_dictionary_path)
