from minish.models import Command, Heredoc, Redirection


def test_describe_name_and_args():
    command = Command(name="ls", args=["ls", "-l"])
    assert command.describe().splitlines() == [
        "cmd : ls",
        "c.arg[0] : ls",
        "c.arg[1] : -l",
    ]


def test_describe_without_name():
    assert Command().describe() == "cmd : (null)\n"


def test_describe_redirections_in_order():
    command = Command(
        name="cat",
        args=["cat"],
        redirections=[Redirection(">", "out"), Redirection("<", "in")],
    )
    lines = command.describe().splitlines()
    assert lines[2:] == [
        "file name : out",
        "opr       : >",
        "file name : in",
        "opr       : <",
    ]


def test_describe_heredocs_after_files():
    command = Command(
        name="cat",
        args=["cat"],
        redirections=[Redirection(">>", "log")],
        heredocs=[Heredoc("EOF", expand=False)],
    )
    lines = command.describe().splitlines()
    assert lines[-2:] == ["herdoc : <<", "del       : EOF"]
    assert lines[2] == "file name : log"


def test_heredoc_defaults():
    heredoc = Heredoc("END")
    assert heredoc.expand is True
    assert heredoc.operator == "<<"


def test_default_lists_are_independent():
    first = Command()
    second = Command()
    first.args.append("x")
    first.redirections.append(Redirection(">", "f"))
    assert second.args == []
    assert second.redirections == []
    assert second.heredocs == []