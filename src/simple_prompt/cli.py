"""CLI entry point for simple-prompt. Uses Click for argument parsing."""

from __future__ import annotations

import logging

import click

from simple_prompt.config import DEFAULT_PROMPT, DICTIONARY_ENV_VAR, PromptConfig
from simple_prompt.errors import PromptError
from simple_prompt.prompt import SimplePrompt


def _echo_line(line: str) -> None:
    # Raw mode keeps output post-processing, so "\n" still returns the carriage
    click.echo(f"-> {line}")


@click.command()
@click.option("--prompt", "prompt_text", default=DEFAULT_PROMPT, show_default=True, help="Prompt text")
@click.option("--welcome", default="", help="Message printed once before the first prompt")
@click.option("-c", "--command", "commands", multiple=True, help="Command to offer for tab completion")
@click.option(
    "--dictionary",
    type=click.Path(dir_okay=False),
    envvar=DICTIONARY_ENV_VAR,
    default=None,
    help="File with one completion command per line",
)
@click.option("--echo/--no-echo", default=True, help="Print each submitted line back")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Write logs to this file")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    show_default=True,
    help="Log level; only applies together with --log-file",
)
def main(prompt_text, welcome, commands, dictionary, echo, log_file, log_level):
    """Interactive line editor with history and tab completion.

    Ctrl+C exits.
    """
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=getattr(logging, log_level.upper()),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    config = PromptConfig(
        prompt_text=prompt_text,
        welcome_text=welcome,
        submit_handler=_echo_line if echo else None,
        dictionary_path=dictionary,
    )
    prompt = SimplePrompt(config)
    for command in commands:
        prompt.add_command(command)

    try:
        prompt.start()
    except PromptError as exc:
        raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":
    main()
