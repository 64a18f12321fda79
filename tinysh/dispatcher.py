"""Command dispatch: route one tokenized line to a builtin or an executable.

dispatch() is the error boundary of the shell. Whatever goes wrong while a
line is evaluated is reported here and turned into an exit status, so the
read loop always gets control back. The one exception is SystemExit raised
by the `exit` builtin.
"""

import io
import logging
import sys
from typing import List, Optional, TextIO, TYPE_CHECKING

from .builtins import get_builtin
from .command import Command, CommandKind, parse_command
from .exceptions import ShellError, UsageError, translate_os_error
from .external import run_external, write_redirect
from .process import Process

if TYPE_CHECKING:
    from .context import CommandContext

logger = logging.getLogger(__name__)


def dispatch(
    tokens: List[str],
    ctx: 'CommandContext',
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    Evaluate one tokenized line.

    Args:
        tokens: Lexer output for the line
        ctx: Session context
        stdout: Stream for normal output (default: sys.stdout)
        stderr: Stream for error output (default: sys.stderr)

    Returns:
        Exit status of the line (0 for an empty line)
    """
    if not tokens:
        return 0

    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    try:
        command = parse_command(tokens)
        logger.debug("dispatching %r", command)
        if command.kind is CommandKind.BUILTIN:
            return run_builtin(command, ctx, stdout, stderr)
        return run_external(
            command.name,
            command.args,
            ctx,
            redirect_target=command.redirect_target,
            stdout=stdout,
            stderr=stderr,
        )
    except UsageError as e:
        stdout.write(f"{e}\n")
        return e.exit_code
    except ShellError as e:
        stderr.write(f"{e}\n")
        return e.exit_code
    except OSError as e:
        error = translate_os_error(e)
        stderr.write(f"{tokens[0]}: {error}\n")
        return error.exit_code


def run_builtin(command: Command, ctx: 'CommandContext',
                stdout: TextIO, stderr: TextIO) -> int:
    """
    Run a builtin, capturing its stdout into the redirect target if one is set.

    The target is written after the builtin returns, even when it failed.
    """
    target = command.redirect_target
    process = Process(
        command=command.name,
        args=command.args,
        stdout=io.StringIO() if target is not None else stdout,
        stderr=stderr,
        executor=get_builtin(command.builtin),
        context=ctx,
        redirect_target=target,
    )

    exit_code = process.execute()

    if target is not None:
        write_redirect(target, process.get_stdout().encode('utf-8'))
    return exit_code
