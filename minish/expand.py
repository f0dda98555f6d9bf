"""Variable expansion and quote removal for single words."""

from __future__ import annotations

from enum import IntEnum

from minish.env import Environment


class VariableKind(IntEnum):
    """What follows the first character of a word that may start a variable."""

    NOT_A_VARIABLE = -1
    DOUBLE_DOLLAR = 0
    NAME = 1
    DIGIT = 2
    QUOTED = 3


class _Quotes:
    """Tracks whether a scan is inside single or double quotes."""

    __slots__ = ("single", "double")

    def __init__(self) -> None:
        self.single = False
        self.double = False

    def feed(self, char: str) -> bool:
        """Update the state for ``char``; return whether it toggled a quote."""
        if not self.double and char == "'":
            self.single = not self.single
            return True
        if not self.single and char == '"':
            self.double = not self.double
            return True
        return False


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def remove_quotes(text: str) -> str:
    """Drop the quote characters that open or close a quoted section."""
    quotes = _Quotes()
    return "".join(char for char in text if not quotes.feed(char))


def variable_kind(text: str) -> VariableKind:
    """Classify what a ``$`` at the start of ``text`` introduces."""
    if not text.startswith("$"):
        return VariableKind.NOT_A_VARIABLE
    following = text[1:2]
    if following == "$":
        return VariableKind.DOUBLE_DOLLAR
    if following and _is_digit(following):
        return VariableKind.DIGIT
    if following in ("'", '"'):
        return VariableKind.QUOTED
    return VariableKind.NAME


def lookup(env: Environment, name: str) -> str:
    """Return the text ``$name`` expands to; ``?`` gives the last exit status."""
    if name == "?":
        return str(env.exit_status)
    return env.get(name) or ""


def _read_name(text: str, index: int) -> tuple[str, int]:
    """Read a variable name starting at ``index``; return it and the next index."""
    if index < len(text) and (_is_digit(text[index]) or text[index] == "?"):
        return text[index], index + 1
    end = index
    while end < len(text) and (_is_alnum(text[end]) or text[end] == "_"):
        end += 1
    return text[index:end], end


def _expand_dollar(text: str, index: int, env: Environment, out: list[str]) -> int:
    """Expand the ``$`` at ``index`` into ``out``; return the next index.

    A run of ``$`` signs expands only when its length is odd; an even run
    is swallowed and the following text is kept as it is.
    """
    index += 1
    odd = True
    while index < len(text) and text[index] == "$":
        odd = not odd
        index += 1
    if not odd:
        return index
    name, index = _read_name(text, index)
    out.append(lookup(env, name))
    return index


def expand(text: str, env: Environment) -> str:
    """Expand variables outside single quotes, then remove quotes."""
    out: list[str] = []
    quotes = _Quotes()
    index = 0
    while index < len(text):
        char = text[index]
        quotes.feed(char)
        following = text[index + 1] if index + 1 < len(text) else ""
        if char == "$" and following not in ("", " ", '"') and not quotes.single:
            index = _expand_dollar(text, index, env, out)
        else:
            out.append(char)
            index += 1
    return remove_quotes("".join(out))