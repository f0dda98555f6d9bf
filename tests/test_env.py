import pytest

from minish.env import Environment, build_environment, split_first_eq, variable_name


def test_variable_name_simple():
    assert variable_name("HOME=/home/u") == "HOME"


def test_variable_name_without_separator():
    assert variable_name("NOEQ") is None
    assert variable_name("") is None
    assert variable_name("=") is None


def test_variable_name_keeps_leading_equals():
    assert variable_name("=x=y") == "=x"


@pytest.mark.parametrize(
    "text, expected",
    [("a=b=c", ("a", "b=c")), ("a", ("a", None)), ("a=", ("a", ""))],
)
def test_split_first_eq(text, expected):
    assert split_first_eq(text) == expected


def test_build_from_mapping_keeps_order():
    env = build_environment({"B": "2", "A": "1"})
    assert env.items() == [("B", "2"), ("A", "1")]
    assert env.exit_status == 0


def test_build_from_strings_skips_malformed():
    env = build_environment(["X=1=2", "junk", "Y="])
    assert env.items() == [("X", "1=2"), ("Y", "")]


def test_build_empty_creates_defaults():
    env = build_environment({}, cwd="/somewhere")
    assert env.items() == [("PWD", "/somewhere"), ("SHLVL", "1"), ("_", "/usr/bin/env")]


def test_build_empty_uses_current_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    env = build_environment([])
    assert env.get("PWD") == str(tmp_path)


def test_set_get_and_append_order():
    env = Environment([("A", "1")])
    env.set("B", "2")
    env.set("A", "3")
    assert env.items() == [("A", "3"), ("B", "2")]
    assert env.get("A") == "3"
    assert env.get("MISSING") is None


def test_unset():
    env = Environment([("A", "1"), ("B", None)])
    assert env.unset("A") is True
    assert env.unset("B") is True
    assert env.unset("A") is False
    assert len(env) == 0


def test_to_envp_skips_valueless():
    env = Environment([("A", "1"), ("B", None), ("C", "")])
    assert env.to_envp() == ["A=1", "C="]
    assert env.assignments() == env.to_envp()


def test_declarations_format():
    env = Environment([("A", "x y"), ("B", None)])
    assert env.declarations() == ['declare -x A="x y"', "declare -x B"]


def test_contains_and_iter():
    env = Environment([("A", "1"), ("B", None)])
    assert "B" in env
    assert "C" not in env
    assert list(env) == ["A", "B"]