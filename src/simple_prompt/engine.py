"""Edit engine: the key-to-buffer state machine.

One edit session runs from ``begin`` until ENTER. Every handler that moves
the cursor or changes the buffer issues the matching renderer update in the
same step, so the visible cursor column always equals
``renderer.origin + buffer.cursor`` between keys.
"""

from __future__ import annotations

import logging
from typing import Callable

from simple_prompt.buffer import EditBuffer
from simple_prompt.dictionary import CommandDictionary
from simple_prompt.errors import Terminated
from simple_prompt.history import History
from simple_prompt.keys import KeyDecoder, KeyEvent, KeyType
from simple_prompt.renderer import Renderer

logger = logging.getLogger(__name__)

Printer = Callable[[str], None]


class EditEngine:
    """Applies key events to an :class:`EditBuffer` and the screen."""

    def __init__(
        self,
        renderer: Renderer,
        history: History,
        dictionary: CommandDictionary,
        printer: Printer | None = None,
    ) -> None:
        self._renderer = renderer
        self._history = history
        self._dictionary = dictionary
        self._printer = printer
        self._buffer = EditBuffer()

        self._handlers: dict[KeyType, Callable[[KeyEvent], str | None]] = {
            KeyType.PRINTABLE: self._on_printable,
            KeyType.ENTER: self._on_enter,
            KeyType.TERMINATE: self._on_terminate,
            KeyType.BACKSPACE: self._on_backspace,
            KeyType.TAB: self._on_tab,
            KeyType.CTRL_HOME: self._on_home,
            KeyType.CTRL_END: self._on_end,
            KeyType.CTRL_KILL_TO_END: self._on_kill_to_end,
            KeyType.ARROW_UP: self._on_up,
            KeyType.ARROW_DOWN: self._on_down,
            KeyType.ARROW_LEFT: self._on_left,
            KeyType.ARROW_RIGHT: self._on_right,
            KeyType.UNRECOGNIZED: self._on_unrecognized,
        }
        missing = set(KeyType) - set(self._handlers)
        if missing:
            raise TypeError(f"no handler for key types: {sorted(k.value for k in missing)}")

    @property
    def buffer(self) -> EditBuffer:
        return self._buffer

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    # -- session ------------------------------------------------------------

    def begin(self, prompt: str) -> None:
        """Start a new edit session with an empty buffer."""
        self._buffer.clear()
        self._history.reset()
        self._renderer.begin_line(prompt)

    def handle(self, event: KeyEvent) -> str | None:
        """Apply one key. Returns the finished line on ENTER, else ``None``."""
        return self._handlers[event.type](event)

    def read_line(self, decoder: KeyDecoder, prompt: str) -> str:
        """Run a full edit session and return the submitted line."""
        self.begin(prompt)
        while True:
            line = self.handle(decoder.next_key())
            if line is not None:
                return line

    # -- handlers -----------------------------------------------------------

    def _on_printable(self, event: KeyEvent) -> None:
        self._buffer.insert(event.char)
        self._renderer.insert(event.char, self._buffer.suffix)
        if self._printer is not None:
            self._printer(self._buffer.text)

    def _on_enter(self, event: KeyEvent) -> str:
        self._renderer.newline()
        return self._buffer.text

    def _on_terminate(self, event: KeyEvent) -> None:
        logger.info("Terminate key pressed")
        self._renderer.newline()
        raise Terminated()

    def _on_backspace(self, event: KeyEvent) -> None:
        if self._buffer.backspace():
            self._renderer.rubout(self._buffer.suffix)

    def _on_left(self, event: KeyEvent) -> None:
        if self._buffer.move_left():
            self._renderer.back(1)

    def _on_right(self, event: KeyEvent) -> None:
        passed = self._buffer.suffix[:1]
        if self._buffer.move_right():
            self._renderer.put(passed)

    def _on_home(self, event: KeyEvent) -> None:
        self._renderer.back(self._buffer.move_home())

    def _on_end(self, event: KeyEvent) -> None:
        self._renderer.put(self._buffer.move_end())

    def _on_kill_to_end(self, event: KeyEvent) -> None:
        removed = self._buffer.kill_to_end()
        self._renderer.erase_tail(len(removed))

    def _on_tab(self, event: KeyEvent) -> None:
        typed = self._buffer.text
        if not typed:
            return
        completion = self._dictionary.complete(typed)
        if completion is None:
            logger.debug("No completion for %r", typed)
            completion = typed
        self._show(completion)

    def _on_up(self, event: KeyEvent) -> None:
        entry = self._history.previous()
        if entry is not None:
            self._show(entry)

    def _on_down(self, event: KeyEvent) -> None:
        entry = self._history.next()
        if entry is not None:
            self._show(entry)

    def _on_unrecognized(self, event: KeyEvent) -> None:
        pass

    # -- helpers ------------------------------------------------------------

    def _show(self, text: str) -> None:
        """Replace the whole line with *text*, cursor at the end."""
        old_cursor, old_length = self._buffer.cursor, len(self._buffer)
        self._buffer.set_text(text)
        self._renderer.replace(old_cursor, old_length, text)
