"""Low-level splitting of a command line into words, aware of quoting."""

from __future__ import annotations

_REDIRECTION_CHARS = ("<", ">")


class _Quotes:
    """Tracks whether the scanner is inside single or double quotes."""

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


def _char_at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def add_spaces(line: str) -> str:
    """Surround unquoted ``<``, ``>``, ``<<`` and ``>>`` with spaces.

    A space is only inserted where the neighbouring character is not
    already a space. A single operator directly followed by another
    redirection character gets no space after it.
    """
    out: list[str] = []
    quotes = _Quotes()
    index = 0
    while index < len(line):
        char = line[index]
        if char in ("'", '"'):
            quotes.feed(char)
        if char in _REDIRECTION_CHARS and _char_at(line, index + 1) == char:
            if index > 0 and line[index - 1] != " " and not quotes.active:
                out.append(" ")
            out.append(char * 2)
            index += 1
            following = _char_at(line, index + 1)
            if following not in ("", " ") and not quotes.active:
                out.append(" ")
        elif char in _REDIRECTION_CHARS:
            if index > 0 and line[index - 1] != " " and not quotes.active:
                out.append(" ")
            out.append(char)
            following = _char_at(line, index + 1)
            if (
                following not in ("", " ")
                and not quotes.active
                and following not in _REDIRECTION_CHARS
            ):
                out.append(" ")
        else:
            out.append(char)
        index += 1
    return "".join(out)


def split_outside_quotes(text: str, sep: str) -> list[str]:
    """Split ``text`` on runs of ``sep`` that are not inside quotes.

    Empty pieces are dropped. A non-empty string made only of separators
    yields a single empty string; an empty string yields no pieces.
    """
    pieces: list[str] = []
    current: list[str] = []
    quotes = _Quotes()
    for char in text:
        if char == sep and not quotes.active:
            if current:
                pieces.append("".join(current))
                current = []
            continue
        quotes.feed(char)
        current.append(char)
    if current:
        pieces.append("".join(current))
    if not pieces and text:
        return [""]
    return pieces


def trim(text: str, chars: str = " ") -> str | None:
    """Strip ``chars`` from both ends of ``text``.

    Returns None when a non-empty ``text`` consists only of ``chars``.
    """
    if not text:
        return ""
    stripped = text.strip(chars) if chars else text
    if not stripped:
        return None
    return stripped