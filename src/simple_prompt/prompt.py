"""Prompt loop tying the edit engine to a terminal."""

from __future__ import annotations

import logging

from simple_prompt.config import PromptConfig
from simple_prompt.dictionary import CommandDictionary, load_dictionary
from simple_prompt.engine import EditEngine
from simple_prompt.errors import PromptError
from simple_prompt.history import History
from simple_prompt.keys import ByteSource, KeyDecoder
from simple_prompt.renderer import Renderer
from simple_prompt.terminal import Output, StdinSource, StdoutOutput, raw_mode

logger = logging.getLogger(__name__)


class SimplePrompt:
    """Reads lines interactively and passes each one to a handler.

    Commands for tab completion are registered with :meth:`add_command`
    (or loaded from ``config.dictionary_path``) before :meth:`start`.
    """

    def __init__(
        self,
        config: PromptConfig | None = None,
        *,
        output: Output | None = None,
        source: ByteSource | None = None,
    ) -> None:
        self.config = config or PromptConfig()
        self._output = output
        self._source = source
        self._history = History()
        self._dictionary = CommandDictionary()
        self._dictionary_loaded = False
        self._running = False

    @property
    def history(self) -> History:
        return self._history

    @property
    def dictionary(self) -> CommandDictionary:
        return self._dictionary

    def add_command(self, command: str) -> None:
        self._dictionary.add(command)

    def start(self) -> None:
        """Enter raw mode on stdin and run the prompt loop.

        The terminal is restored however the loop ends, including the
        terminate key.
        """
        if self.config.dictionary_path and not self._dictionary_loaded:
            self._dictionary.extend(load_dictionary(self.config.dictionary_path))
            self._dictionary_loaded = True
        with raw_mode() as fd:
            if self._source is None:
                self._source = StdinSource(fd)
            self.run()

    def run(self) -> None:
        """Loop forever: read a line, dispatch it, record it in history.

        Only the terminate key (``Terminated``) or a handler exception ends
        the loop.
        """
        if self._running:
            raise PromptError("prompt loop is already running")
        output = self._output if self._output is not None else StdoutOutput()
        source = self._source if self._source is not None else StdinSource()

        renderer = Renderer(output)
        engine = EditEngine(renderer, self._history, self._dictionary, self.config.printer)
        decoder = KeyDecoder(source)

        self._running = True
        logger.info("Prompt loop started with %d commands", len(self._dictionary))
        try:
            if self.config.welcome_text:
                renderer.message(self.config.welcome_text)
            while True:
                line = engine.read_line(decoder, self.config.prompt_text)
                if not line:
                    continue
                logger.debug("Submitting line %r", line)
                if self.config.submit_handler is not None:
                    self.config.submit_handler(line)
                self._history.append(line)
        finally:
            self._running = False
