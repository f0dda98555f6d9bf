import os

import pytest

from minish.env import Environment
from minish.paths import (
    CommandLookupError,
    check_file,
    error_message,
    join_path,
    resolve_command,
)


def _make_file(path, mode):
    path.write_text("#!/bin/sh\n")
    os.chmod(path, mode)
    return path


def test_error_message_format():
    assert error_message("command not found", "foo") == "minishell: foo: command not found"


def test_join_path():
    assert join_path("/usr/bin", "ls") == "/usr/bin/ls"


def test_exception_text_uses_error_message():
    error = CommandLookupError(127, "command not found", "foo")
    assert str(error) == error_message("command not found", "foo")
    assert error.status == 127


def test_check_file_accepts_executable(tmp_path):
    tool = _make_file(tmp_path / "tool", 0o755)
    assert check_file(str(tool), "tool") == str(tool)


def test_check_file_missing(tmp_path):
    with pytest.raises(CommandLookupError) as info:
        check_file(str(tmp_path / "absent"), "absent")
    assert info.value.status == 127
    assert info.value.message == "No such file or directory"


def test_check_file_directory(tmp_path):
    with pytest.raises(CommandLookupError) as info:
        check_file(str(tmp_path), "dir")
    assert info.value.status == 126
    assert info.value.message == "is a directory"
    assert info.value.command == "dir"


def test_check_file_not_executable(tmp_path):
    data = _make_file(tmp_path / "data", 0o644)
    with pytest.raises(CommandLookupError) as info:
        check_file(str(data), "data")
    assert info.value.status == 126
    assert info.value.message == "Permission denied"


def test_resolve_searches_path_in_order(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    _make_file(second / "tool", 0o755)
    env = Environment([("PATH", f"{first}:{second}")])
    assert resolve_command("tool", env) == join_path(str(second), "tool")


def test_resolve_not_found_sets_status(tmp_path):
    env = Environment([("PATH", str(tmp_path))])
    with pytest.raises(CommandLookupError) as info:
        resolve_command("nothing-here", env)
    assert info.value.message == "command not found"
    assert env.exit_status == 127


def test_resolve_permission_denied_names_full_path(tmp_path):
    _make_file(tmp_path / "tool", 0o644)
    env = Environment([("PATH", str(tmp_path))])
    with pytest.raises(CommandLookupError) as info:
        resolve_command("tool", env)
    assert info.value.command == join_path(str(tmp_path), "tool")
    assert env.exit_status == 126


def test_resolve_empty_command_not_found(tmp_path):
    env = Environment([("PATH", str(tmp_path))])
    with pytest.raises(CommandLookupError) as info:
        resolve_command("", env)
    assert info.value.status == 127


def test_resolve_empty_path_finds_nothing(tmp_path):
    env = Environment([("PATH", "")])
    with pytest.raises(CommandLookupError) as info:
        resolve_command("ls", env)
    assert info.value.message == "command not found"


def test_resolve_with_slash_uses_name(tmp_path):
    tool = _make_file(tmp_path / "tool", 0o755)
    env = Environment([("PATH", "")])
    assert resolve_command(str(tool), env) == str(tool)


def test_resolve_with_slash_missing(tmp_path):
    env = Environment()
    with pytest.raises(CommandLookupError) as info:
        resolve_command(str(tmp_path / "gone"), env)
    assert env.exit_status == 127
    assert info.value.message == "No such file or directory"


def test_resolve_without_path_uses_cwd(tmp_path, monkeypatch):
    _make_file(tmp_path / "tool", 0o755)
    monkeypatch.chdir(tmp_path)
    env = Environment()
    assert resolve_command("tool", env) == join_path(os.getcwd(), "tool")