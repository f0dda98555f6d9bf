"""Turn a command line into a list of commands forming a pipeline."""

from __future__ import annotations

from collections.abc import Iterator

from minish.env import Environment
from minish.expand import expand, remove_quotes
from minish.lexer import add_spaces, split_outside_quotes, trim
from minish.models import Command, Heredoc, Redirection
from minish.syntax import ShellSyntaxError, check_pipes, check_syntax, is_operator

_QUOTES = ("'", '"')


def split_pipeline(line: str) -> list[str]:
    """Split ``line`` on unquoted pipes after checking their placement.

    A blank line gives an empty list. Raises ShellSyntaxError for a
    misplaced ``|``.
    """
    trimmed = trim(line, " ")
    if not trimmed:
        return []
    check_pipes(trimmed)
    return split_outside_quotes(trimmed, "|")


def _operand(words: Iterator[str]) -> str:
    word = next(words, None)
    if word is None:
        raise ShellSyntaxError("newline")
    return word


def parse_segment(segment: str, env: Environment) -> Command:
    """Parse one pipeline segment into a Command.

    On a syntax error the exit status is set and ShellSyntaxError raised.
    """
    spaced = add_spaces(segment)
    try:
        check_syntax(spaced)
    except ShellSyntaxError as error:
        env.exit_status = error.status
        raise
    words = split_outside_quotes(spaced, " ")
    command = Command()
    if words and not is_operator(words[0]):
        command.name = expand(words[0], env)
    remaining = iter(words)
    for word in remaining:
        if not word:
            break
        value = expand(word, env)
        if value == "<<":
            raw = _operand(remaining)
            command.heredocs.append(
                Heredoc(delimiter=remove_quotes(raw), expand=not raw.startswith(_QUOTES))
            )
        elif is_operator(value):
            target = expand(_operand(remaining), env)
            command.redirections.append(Redirection(op=value, target=target))
        else:
            if command.name is None:
                command.name = expand(value, env)
            command.args.append(value)
    return command


def parse_line(line: str, env: Environment) -> list[Command]:
    """Parse a whole command line into its pipeline of commands."""
    return [parse_segment(segment, env) for segment in split_pipeline(line)]