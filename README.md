# minish

`minish` holds the building blocks of a small POSIX-style shell: a
syntax checker, a quote-aware lexer, variable expansion, a parser that
turns a command line into a pipeline of commands, lookup of executables
through `PATH`, and the shell's built-in commands.

## Installing

```
pip install .
```

## Modules

- `minish.models`: `Command`, `Redirection` and `Heredoc` dataclasses.
  `Command.describe()` returns a line-per-field dump of a parsed command.
- `minish.env`: `Environment`, an ordered table of variables plus
  `exit_status`, with `get`, `set`, `unset`, `to_envp`, `declarations`
  and `assignments`. `build_environment(environ, cwd)` builds one from a
  mapping or from `NAME=value` strings; when it is empty it creates
  `PWD`, `SHLVL=1` and `_`. Also `split_first_eq` and `variable_name`.
- `minish.lexer`: `add_spaces` puts spaces around unquoted `<`, `>`,
  `<<`, `>>`; `split_outside_quotes` splits on a separator outside
  quotes; `trim` strips characters from both ends.
- `minish.syntax`: `check_pipes`, `check_quotes`, `check_redirections`
  and `check_syntax` raise `ShellSyntaxError` (its `status` is 258) for
  a stray `|`, an unclosed quote or a redirection with no target.
- `minish.expand`: `expand(text, env)` replaces `$NAME` and `$?`
  outside single quotes and then removes quotes; `remove_quotes`,
  `variable_kind` and `lookup` are available on their own.
- `minish.parser`: `split_pipeline`, `parse_segment` and `parse_line`.
  A syntax error in a segment sets the environment's exit status to 258
  and raises `ShellSyntaxError`.
- `minish.paths`: `resolve_command(command, env)` returns the path of an
  executable, searching `PATH` (or the current directory when `PATH` is
  unset). On failure it sets the exit status and raises
  `CommandLookupError` — 127 for `command not found` or
  `No such file or directory`, 126 for `Permission denied` or
  `is a directory`. Also `check_file`, `join_path` and `error_message`.
- `minish.builtins`: `echo` (with `-n`), `cd`, `pwd`, `env`, `export`,
  `unset` and `exit` as `builtin_*` functions, dispatched by
  `run_builtin(command, env, out, err)`, which stores 0 or 1 as the exit
  status. `exit` raises `ShellExit` carrying the status. Also `is_builtin`,
  `is_valid_identifier` and `atoi`.

## Example

```python
import io

from minish.builtins import run_builtin
from minish.env import build_environment
from minish.parser import parse_line

env = build_environment({"HOME": "/home/user"}, "/tmp")
for command in parse_line("echo hi > out.txt | wc -c", env):
    print(command.describe())

out, err = io.StringIO(), io.StringIO()
[command] = parse_line("echo -n $HOME", env)
run_builtin(command, env, out, err)
print(out.getvalue())  # /home/user
```

## What it does not do

The package has no interactive prompt and no command to start a shell.
It does not start external programs, connect pipelines, open the files
named by redirections or read here-document bodies: it parses command
lines, resolves executable paths and runs the built-in commands against
the streams you pass in.