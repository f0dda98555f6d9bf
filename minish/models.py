"""Data structures describing a parsed command line."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Redirection:
    """A file redirection such as ``> out.txt``."""

    op: str
    target: str


@dataclass
class Heredoc:
    """A here-document introduced by ``<<``."""

    delimiter: str
    expand: bool = True
    operator: str = "<<"


@dataclass
class Command:
    """One simple command of a pipeline."""

    name: str | None = None
    args: list[str] = field(default_factory=list)
    redirections: list[Redirection] = field(default_factory=list)
    heredocs: list[Heredoc] = field(default_factory=list)

    def describe(self) -> str:
        """Return a human-readable dump of the command, one field per line."""
        lines = [f"cmd : {self.name if self.name is not None else '(null)'}"]
        lines.extend(f"c.arg[{index}] : {arg}" for index, arg in enumerate(self.args))
        for redirection in self.redirections:
            lines.append(f"file name : {redirection.target}")
            lines.append(f"opr       : {redirection.op}")
        for heredoc in self.heredocs:
            lines.append(f"herdoc : {heredoc.operator}")
            lines.append(f"del       : {heredoc.delimiter}")
        return "".join(line + "\n" for line in lines)