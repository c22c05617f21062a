"""simple-prompt: interactive line editing for character-mode terminals."""

from simple_prompt.buffer import EditBuffer
from simple_prompt.config import DEFAULT_PROMPT, PromptConfig
from simple_prompt.dictionary import CommandDictionary, load_dictionary
from simple_prompt.engine import EditEngine
from simple_prompt.errors import (
    DictionaryLoadError,
    PromptError,
    TerminalSetupError,
    Terminated,
)
from simple_prompt.history import History
from simple_prompt.keys import ByteSource, KeyDecoder, KeyEvent, KeyType, decode_byte
from simple_prompt.prompt import SimplePrompt
from simple_prompt.renderer import Renderer
from simple_prompt.terminal import Output, StdinSource, StdoutOutput, raw_mode

__all__ = [
    # Prompt loop
    "DEFAULT_PROMPT",
    "PromptConfig",
    "SimplePrompt",
    # Editing
    "EditBuffer",
    "EditEngine",
    "Renderer",
    # Completion and history
    "CommandDictionary",
    "History",
    "load_dictionary",
    # Keys
    "ByteSource",
    "KeyDecoder",
    "KeyEvent",
    "KeyType",
    "decode_byte",
    # Terminal
    "Output",
    "StdinSource",
    "StdoutOutput",
    "raw_mode",
    # Errors
    "DictionaryLoadError",
    "PromptError",
    "TerminalSetupError",
    "Terminated",
]
