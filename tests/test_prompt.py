"""Tests for the SimplePrompt loop."""

from __future__ import annotations

import pytest

from simple_prompt.config import DEFAULT_PROMPT, PromptConfig
from simple_prompt.errors import PromptError, Terminated
from simple_prompt.prompt import SimplePrompt

from .virtual_terminal import ScriptedSource, VirtualTerminal

CTRL_C = b"\x03"
UP = b"\x1b[A"


def run_prompt(
    script: bytes,
    config: PromptConfig | None = None,
    commands: tuple[str, ...] = (),
) -> tuple[SimplePrompt, VirtualTerminal, list[str]]:
    """Run the loop over *script* until it terminates."""
    submitted: list[str] = []
    config = config or PromptConfig(prompt_text="> ")
    if config.submit_handler is None:
        config.submit_handler = submitted.append
    term = VirtualTerminal()
    prompt = SimplePrompt(config, output=term, source=ScriptedSource(script))
    for command in commands:
        prompt.add_command(command)
    with pytest.raises(Terminated):
        prompt.run()
    return prompt, term, submitted


class TestConfig:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("SIMPLE_PROMPT_DICTIONARY", raising=False)
        config = PromptConfig()
        assert config.prompt_text == DEFAULT_PROMPT == "prompt$> "
        assert config.welcome_text == ""
        assert config.submit_handler is None
        assert config.printer is None
        assert config.dictionary_path is None

    def test_dictionary_path_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("SIMPLE_PROMPT_DICTIONARY", "/tmp/commands.txt")
        assert PromptConfig().dictionary_path == "/tmp/commands.txt"


class TestPromptLoop:
    def test_submits_lines_in_order(self) -> None:
        prompt, term, submitted = run_prompt(b"ls\npwd\n" + CTRL_C)
        assert submitted == ["ls", "pwd"]
        assert prompt.history.entries == ("ls", "pwd")
        assert term.lines[:2] == ["> ls", "> pwd"]

    def test_empty_submission_is_discarded(self) -> None:
        prompt, _, submitted = run_prompt(b"\n\nls\n\n" + CTRL_C)
        assert submitted == ["ls"]
        assert prompt.history.entries == ("ls",)

    def test_prompt_reprinted_for_each_line(self) -> None:
        _, term, _ = run_prompt(b"\n" + CTRL_C)
        assert term.output.count("> ") == 2

    def test_welcome_printed_once_first(self) -> None:
        config = PromptConfig(prompt_text="> ", welcome_text="Welcome!")
        _, term, _ = run_prompt(b"a\n" + CTRL_C, config)
        assert term.lines[0] == "Welcome!"
        assert term.output.count("Welcome!") == 1

    def test_no_welcome_when_empty(self) -> None:
        _, term, _ = run_prompt(CTRL_C)
        assert term.output.startswith("> ")

    def test_history_recall_and_resubmit(self) -> None:
        prompt, _, submitted = run_prompt(b"a\nb\n" + UP + UP + b"\n" + CTRL_C)
        assert submitted == ["a", "b", "a"]
        assert prompt.history.entries == ("a", "b", "a")

    def test_tab_completion_from_registered_commands(self) -> None:
        _, _, submitted = run_prompt(b"mk\t\n" + CTRL_C, commands=("remove", "mkdir"))
        assert submitted == ["mkdir"]

    def test_end_of_input_terminates(self) -> None:
        _, _, submitted = run_prompt(b"ls\n")
        assert submitted == ["ls"]

    def test_works_without_handler(self) -> None:
        prompt = SimplePrompt(
            PromptConfig(prompt_text="> "),
            output=VirtualTerminal(),
            source=ScriptedSource(b"ls\n" + CTRL_C),
        )
        with pytest.raises(Terminated):
            prompt.run()
        assert prompt.history.entries == ("ls",)

    def test_printer_receives_buffer(self) -> None:
        seen: list[str] = []
        config = PromptConfig(prompt_text="> ", printer=seen.append)
        run_prompt(b"ab\n" + CTRL_C, config)
        assert seen == ["a", "ab"]


class TestHandlerFaults:
    def test_handler_exception_propagates(self) -> None:
        def fail(line: str) -> None:
            raise ValueError(line)

        prompt = SimplePrompt(
            PromptConfig(prompt_text="> ", submit_handler=fail),
            output=VirtualTerminal(),
            source=ScriptedSource(b"boom\n"),
        )
        with pytest.raises(ValueError, match="boom"):
            prompt.run()
        assert prompt.history.entries == ()

    def test_loop_can_run_again_after_exit(self) -> None:
        source = ScriptedSource(CTRL_C)
        prompt = SimplePrompt(PromptConfig(), output=VirtualTerminal(), source=source)
        with pytest.raises(Terminated):
            prompt.run()
        source.feed(b"x\n" + CTRL_C)
        with pytest.raises(Terminated):
            prompt.run()
        assert prompt.history.entries == ("x",)

    def test_reentrant_run_rejected(self) -> None:
        errors: list[Exception] = []
        prompt: SimplePrompt

        def nested(line: str) -> None:
            try:
                prompt.run()
            except PromptError as exc:
                errors.append(exc)

        prompt = SimplePrompt(
            PromptConfig(prompt_text="> ", submit_handler=nested),
            output=VirtualTerminal(),
            source=ScriptedSource(b"x\n" + CTRL_C),
        )
        with pytest.raises(Terminated):
            prompt.run()
        assert len(errors) == 1


class TestStart:
    def test_start_loads_dictionary_and_restores_terminal(self, monkeypatch, tmp_path) -> None:
        import contextlib

        from simple_prompt import prompt as prompt_module

        events: list[str] = []

        @contextlib.contextmanager
        def fake_raw_mode(fd=None):
            events.append("enter")
            try:
                yield 0
            finally:
                events.append("exit")

        monkeypatch.setattr(prompt_module, "raw_mode", fake_raw_mode)
        path = tmp_path / "commands.txt"
        path.write_text("remove\nmkdir\n", encoding="utf-8")

        submitted: list[str] = []
        prompt = SimplePrompt(
            PromptConfig(prompt_text="> ", submit_handler=submitted.append, dictionary_path=str(path)),
            output=VirtualTerminal(),
            source=ScriptedSource(b"re\t\n" + CTRL_C),
        )
        with pytest.raises(Terminated):
            prompt.start()
        assert submitted == ["remove"]
        assert events == ["enter", "exit"]

    def test_second_start_does_not_reload_dictionary(self, monkeypatch, tmp_path) -> None:
        import contextlib

        from simple_prompt import prompt as prompt_module

        @contextlib.contextmanager
        def fake_raw_mode(fd=None):
            yield 0

        monkeypatch.setattr(prompt_module, "raw_mode", fake_raw_mode)
        path = tmp_path / "commands.txt"
        path.write_text("remove\nmkdir\n", encoding="utf-8")

        source = ScriptedSource(CTRL_C)
        prompt = SimplePrompt(
            PromptConfig(dictionary_path=str(path)),
            output=VirtualTerminal(),
            source=source,
        )
        with pytest.raises(Terminated):
            prompt.start()
        source.feed(CTRL_C)
        with pytest.raises(Terminated):
            prompt.start()
        assert list(prompt.dictionary) == ["remove", "mkdir"]
