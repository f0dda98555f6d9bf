"""The shell's variable table and helpers for building it."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Mapping

DEFAULT_UNDERSCORE = "/usr/bin/env"


def variable_name(entry: str) -> str | None:
    """Return the name part of a ``NAME=value`` entry, or None without ``=``.

    The separator is searched for from the second character on, so a
    leading ``=`` is taken as part of the name.
    """
    index = entry.find("=", 1)
    if index < 0:
        return None
    return entry[:index]


def split_first_eq(text: str) -> tuple[str, str | None]:
    """Split ``text`` at its first ``=``; the value is None when there is none."""
    name, sep, value = text.partition("=")
    if not sep:
        return text, None
    return name, value


class Environment:
    """Ordered shell variables plus the last exit status.

    A variable may exist without a value (``export NAME``); its value is None.
    """

    def __init__(self, entries: Iterable[tuple[str, str | None]] = ()) -> None:
        self._vars: dict[str, str | None] = {}
        for name, value in entries:
            self._vars[name] = value
        self.exit_status = 0

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._vars))

    def __len__(self) -> int:
        return len(self._vars)

    def items(self) -> list[tuple[str, str | None]]:
        """Return ``(name, value)`` pairs in insertion order."""
        return list(self._vars.items())

    def get(self, name: str) -> str | None:
        """Return the value of ``name``, or None when unset or valueless."""
        return self._vars.get(name)

    def set(self, name: str, value: str | None) -> None:
        """Set ``name``, appending it at the end when it is new."""
        self._vars[name] = value

    def unset(self, name: str) -> bool:
        """Remove ``name``; return whether it was present."""
        if name not in self._vars:
            return False
        del self._vars[name]
        return True

    def to_envp(self) -> list[str]:
        """Return ``NAME=value`` strings for variables that have a value."""
        return [f"{name}={value}" for name, value in self._vars.items() if value is not None]

    def declarations(self) -> list[str]:
        """Return the lines ``export`` prints without arguments."""
        return [
            f'declare -x {name}="{value}"' if value is not None else f"declare -x {name}"
            for name, value in self._vars.items()
        ]

    def assignments(self) -> list[str]:
        """Return the lines ``env`` prints."""
        return self.to_envp()


def build_environment(
    environ: Mapping[str, str] | Iterable[str], cwd: str | None = None
) -> Environment:
    """Build the shell environment from the process environment.

    ``environ`` is a mapping or an iterable of ``NAME=value`` strings.
    When it is empty a minimal environment is created from ``cwd``
    (the current directory when None).
    """
    if isinstance(environ, Mapping):
        pairs = [(str(name), str(value)) for name, value in environ.items()]
    else:
        pairs = []
        for entry in environ:
            name = variable_name(entry)
            if name is not None:
                pairs.append((name, entry[len(name) + 1 :]))
    if pairs:
        return Environment(pairs)
    if cwd is None:
        cwd = os.getcwd()
    return Environment([("PWD", cwd), ("SHLVL", "1"), ("_", DEFAULT_UNDERSCORE)])