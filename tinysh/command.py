"""Command model: classification and redirection splitting for one line."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .exceptions import UsageError

REDIRECT_OPERATORS = (">", "1>")


class Builtin(Enum):
    """The closed set of commands the shell implements itself."""
    ECHO = "echo"
    EXIT = "exit"
    TYPE = "type"
    PWD = "pwd"
    CD = "cd"

    @classmethod
    def lookup(cls, name: str) -> Optional['Builtin']:
        """Return the builtin called `name`, or None."""
        try:
            return cls(name)
        except ValueError:
            return None


class CommandKind(Enum):
    BUILTIN = "builtin"
    EXTERNAL = "external"


def is_builtin(name: str) -> bool:
    return Builtin.lookup(name) is not None


@dataclass
class Command:
    """One parsed input line.

    Attributes:
        name: Command name (first token)
        args: Arguments with the redirection operator and target removed
        builtin: Builtin member, or None for an external command
        redirect_target: File receiving stdout, if the line redirected it
    """
    name: str
    args: List[str] = field(default_factory=list)
    builtin: Optional[Builtin] = None
    redirect_target: Optional[str] = None

    @property
    def kind(self) -> CommandKind:
        return CommandKind.BUILTIN if self.builtin is not None else CommandKind.EXTERNAL

    def __repr__(self):
        args_str = ' '.join(self.args)
        redirect = f" > {self.redirect_target}" if self.redirect_target else ""
        return f"Command({self.kind.value}: {self.name} {args_str}{redirect})"


def parse_command(tokens: List[str]) -> Command:
    """Classify a token stream and split off output redirection.

    Only the first `>` or `1>` counts. Arguments stop at the operator and the
    target is always the last token of the line, so `cmd a > x y` writes
    to `y` and drops `x`.

    Args:
        tokens: Non-empty output of the lexer

    Returns:
        Command for the line

    Raises:
        UsageError: The operator is the last token and has no destination
    """
    name, rest = tokens[0], tokens[1:]
    args = list(rest)
    redirect_target = None

    for i, token in enumerate(rest):
        if token in REDIRECT_OPERATORS:
            if i == len(rest) - 1:
                raise UsageError("tinysh", "syntax error near unexpected token `newline'")
            args = rest[:i]
            redirect_target = rest[-1]
            break

    return Command(
        name=name,
        args=args,
        builtin=Builtin.lookup(name),
        redirect_target=redirect_target,
    )
