"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
from typing import TextIO

from minish.env import Environment, split_first_eq
from minish.models import Command
from minish.paths import error_message

BUILTINS = frozenset({"echo", "cd", "pwd", "env", "export", "unset", "exit"})
NUMERIC_ERROR_STATUS = 255
_WHITESPACE = " \t\n\v\f\r"
_OVERFLOW_LIMIT = 922337203685477580


class ShellExit(Exception):
    """Raised by ``exit`` to end the shell with ``status``."""

    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(f"exit {status}")


def _is_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def atoi(text: str) -> int:
    """Convert the leading number of ``text`` to a 32-bit signed int.

    A value that would overflow 64 bits gives -1, or 0 when negative.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not _is_digit(char):
            break
        digit = ord(char) - ord("0")
        if value >= _OVERFLOW_LIMIT and digit > 7:
            return -1 if sign == 1 else 0
        value = value * 10 + digit
    result = sign * value
    return ((result + 2**31) % 2**32) - 2**31


def is_valid_identifier(name: str) -> bool:
    """Return whether ``name`` (up to any ``=``) is a valid variable name."""
    if not name or not (_is_alpha(name[0]) or name[0] == "_"):
        return False
    for char in name[1:]:
        if char == "=":
            return True
        if not (_is_alpha(char) or _is_digit(char) or char == "_"):
            return False
    return True


def is_builtin(name: str | None) -> bool:
    """Return whether ``name`` is handled by the shell itself."""
    return name in BUILTINS


def _identifier_error(command: str, identifier: str) -> str:
    return f"mminishell: {command}: `{identifier}':not a valid identifier\n"


def builtin_echo(args: list[str], out: TextIO) -> int:
    """Print the arguments; a first ``-n`` suppresses the newline."""
    words = args[1:]
    newline = True
    if words[:1] == ["-n"]:
        words = words[1:]
        newline = False
    out.write(" ".join(words))
    if newline:
        out.write("\n")
    return 0


def _os_error_text(error: OSError) -> str:
    return os.strerror(error.errno) if error.errno else str(error)


def builtin_cd(args: list[str], env: Environment, err: TextIO) -> int:
    """Change directory to the argument or ``HOME``; update PWD and OLDPWD."""
    try:
        old_pwd = os.getcwd()
    except OSError as error:
        err.write(f"getcwd: {_os_error_text(error)}\n")
        return 1
    if len(args) > 1:
        target = args[1]
    else:
        target = env.get("HOME")
        if target is None:
            err.write("minishell: cd: HOME not set\n")
            return 1
    try:
        os.chdir(target)
    except OSError as error:
        err.write(f"cd: {_os_error_text(error)}\n")
        return 1
    try:
        new_pwd = os.getcwd()
    except OSError as error:
        err.write(f"getcwd: {_os_error_text(error)}\n")
        return 0
    if "PWD" in env:
        env.set("PWD", new_pwd)
    env.set("OLDPWD", old_pwd)
    return 0


def builtin_pwd(out: TextIO) -> int:
    """Print the current directory."""
    try:
        out.write(os.getcwd() + "\n")
    except OSError as error:
        out.write(f"pwd: {_os_error_text(error)}\n")
        return 1
    return 0


def builtin_env(args: list[str], env: Environment, out: TextIO) -> int:
    """Print the variables that have a value; fails when given arguments."""
    if len(args) > 1:
        return 1
    for line in env.assignments():
        out.write(line + "\n")
    return 0


def builtin_export(args: list[str], env: Environment, out: TextIO) -> int:
    """Define or update variables, or list them all when given none."""
    if len(args) < 2:
        for line in env.declarations():
            out.write(line + "\n")
        return 0
    for arg in args[1:]:
        if not is_valid_identifier(arg):
            out.write(_identifier_error("export", arg))
            continue
        name, value = split_first_eq(arg)
        if name in env:
            if value is not None and name != "_":
                env.set(name, value)
        else:
            env.set(name, value)
    return 0


def builtin_unset(args: list[str], env: Environment, out: TextIO) -> int:
    """Remove variables; stops at ``_`` and fails on an invalid name."""
    for arg in args[1:]:
        if arg == "_":
            return 0
        if not is_valid_identifier(arg):
            out.write(_identifier_error("unset", arg))
            return 1
        if env.get(arg) is not None:
            env.unset(arg)
    return 0


def builtin_exit(args: list[str], env: Environment, out: TextIO, err: TextIO) -> int:
    """Raise ShellExit with the requested status.

    Returns 1 without exiting when given more than one numeric argument.
    """
    if len(args) < 2:
        out.write("exit\n")
        raise ShellExit(env.exit_status % 256)
    argument = args[1]
    if any(_is_alpha(char) for char in argument):
        out.write("exit\n")
        err.write(error_message("numeric argument required", argument) + "\n")
        env.exit_status = NUMERIC_ERROR_STATUS
        raise ShellExit(NUMERIC_ERROR_STATUS)
    if len(args) > 2:
        out.write("exit\n")
        err.write(error_message("too many arguments", args[0]) + "\n")
        return 1
    out.write("exit\n")
    raise ShellExit(atoi(argument) % 256)


def run_builtin(command: Command, env: Environment, out: TextIO, err: TextIO) -> int:
    """Run a builtin command and store 0 or 1 as the exit status."""
    args = command.args
    name = command.name
    if name == "echo":
        result = builtin_echo(args, out)
    elif name == "cd":
        result = builtin_cd(args, env, err)
    elif name == "pwd":
        result = builtin_pwd(out)
    elif name == "env":
        result = builtin_env(args, env, out)
    elif name == "export":
        result = builtin_export(args, env, out)
    elif name == "unset":
        result = builtin_unset(args, env, out)
    elif name == "exit":
        result = builtin_exit(args, env, out, err)
    else:
        raise ValueError(f"not a builtin: {name!r}")
    env.exit_status = 0 if result == 0 else 1
    return env.exit_status