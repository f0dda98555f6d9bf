"""Locating the executable that a command name refers to."""

from __future__ import annotations

import os

from minish.env import Environment

NOT_FOUND_STATUS = 127
NOT_EXECUTABLE_STATUS = 126


class CommandLookupError(Exception):
    """A command could not be resolved to an executable file."""

    def __init__(self, status: int, message: str, command: str) -> None:
        self.status = status
        self.message = message
        self.command = command
        super().__init__(error_message(message, command))


def error_message(message: str, command: str) -> str:
    """Format an error the way the shell reports it."""
    return f"minishell: {command}: {message}"


def join_path(directory: str, command: str) -> str:
    """Join a search directory and a command name with a ``/``."""
    return f"{directory}/{command}"


def check_file(path: str, command: str) -> str:
    """Check that ``path`` exists, is not a directory and is executable.

    Returns ``path``; raises CommandLookupError naming ``command`` otherwise.
    """
    if not os.access(path, os.F_OK):
        raise CommandLookupError(NOT_FOUND_STATUS, "No such file or directory", command)
    if os.path.isdir(path):
        raise CommandLookupError(NOT_EXECUTABLE_STATUS, "is a directory", command)
    if not os.access(path, os.X_OK):
        raise CommandLookupError(NOT_EXECUTABLE_STATUS, "Permission denied", command)
    return path


def _search(command: str, search_path: str) -> str:
    for directory in (part for part in search_path.split(":") if part):
        candidate = join_path(directory, command)
        if command and os.access(candidate, os.F_OK):
            if os.access(candidate, os.X_OK):
                return candidate
            raise CommandLookupError(NOT_EXECUTABLE_STATUS, "Permission denied", candidate)
    raise CommandLookupError(NOT_FOUND_STATUS, "command not found", command)


def resolve_command(command: str, env: Environment) -> str:
    """Return the path of the executable that ``command`` names.

    A name holding ``/`` is used as it is; otherwise the directories of
    ``PATH`` are searched, or the current directory when ``PATH`` is unset.
    On failure the exit status is stored in ``env`` and
    CommandLookupError is raised.
    """
    try:
        if "/" in command:
            return check_file(command, command)
        search_path = env.get("PATH")
        if search_path is not None:
            return _search(command, search_path)
        return check_file(join_path(os.getcwd(), command), command)
    except CommandLookupError as error:
        env.exit_status = error.status
        raise