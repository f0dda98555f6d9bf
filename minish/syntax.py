"""Syntax checks run on a command line before it is parsed."""

from __future__ import annotations

SYNTAX_ERROR_STATUS = 258
_REDIRECTION_CHARS = ("<", ">")
_OPERATORS = (">>", "<<", ">", "<")


class ShellSyntaxError(ValueError):
    """A command line is malformed near ``token``."""

    status = SYNTAX_ERROR_STATUS

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"42sh: syntax error near unexpected token `{token}'")


def is_redirection_char(char: str) -> bool:
    """Return whether ``char`` is ``<`` or ``>``."""
    return char in _REDIRECTION_CHARS


def is_operator(word: str) -> bool:
    """Return whether ``word`` is a redirection operator."""
    return word in _OPERATORS


def _char_at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


class _Quotes:
    __slots__ = ("single", "double")

    def __init__(self) -> None:
        self.single = False
        self.double = False

    def feed(self, char: str) -> None:
        if not self.double and char == "'":
            self.single = not self.single
        elif not self.single and char == '"':
            self.double = not self.double

    @property
    def active(self) -> bool:
        return self.single or self.double


def check_pipes(line: str) -> str:
    """Reject a leading, trailing or doubled unquoted ``|``; return ``line``."""
    end = len(line)
    index = 0
    while index < end and line[index] == " ":
        index += 1
    if index < end and line[index] == "|":
        raise ShellSyntaxError("|")
    quotes = _Quotes()
    while index < end:
        quotes.feed(line[index])
        if line[index] == "|":
            index += 1
            while index < end and line[index] == " ":
                index += 1
            if (index >= end or line[index] == "|") and not quotes.active:
                raise ShellSyntaxError("|")
        index += 1
    return line


def check_quotes(line: str) -> str:
    """Reject unclosed quotes; return ``line``."""
    quotes = _Quotes()
    for char in line:
        quotes.feed(char)
    if quotes.single:
        raise ShellSyntaxError("'")
    if quotes.double:
        raise ShellSyntaxError('"')
    return line


def _require_more(index: int, end: int) -> None:
    if index >= end:
        raise ShellSyntaxError("newline")


def _check_operator(line: str, index: int) -> int:
    """Validate the operator starting at ``index``; return the scan position."""
    end = len(line)
    index += 1
    _require_more(index, end)
    char = line[index]
    if char == ">" and char != line[index - 1]:
        raise ShellSyntaxError(char)
    if char == line[index - 1]:
        index += 1
        _require_more(index, end)
        if is_redirection_char(line[index]):
            index += 1
            if _char_at(line, index) == line[index - 1]:
                raise ShellSyntaxError(line[index] * 2)
            raise ShellSyntaxError(line[index - 1])
    if _char_at(line, index) == " ":
        while _char_at(line, index) == " ":
            index += 1
        _require_more(index, end)
        if is_redirection_char(line[index]):
            raise ShellSyntaxError(line[index])
    return index


def check_redirections(line: str) -> str:
    """Reject redirections with no target or stacked operators; return ``line``."""
    quotes = _Quotes()
    index = 0
    while index < len(line):
        char = line[index]
        quotes.feed(char)
        if is_redirection_char(char) and not quotes.active:
            index = _check_operator(line, index)
        index += 1
    return line


def check_syntax(line: str) -> str:
    """Check quotes, then redirections; return ``line`` when both pass."""
    check_quotes(line)
    check_redirections(line)
    return line