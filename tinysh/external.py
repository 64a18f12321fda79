"""Running external executables found in the registry.

The child runs to completion before anything is printed: stdout and stderr
are both captured, then either written out, redirected to a file, or (for a
failed child) rewritten into a short `<program>:<message>` error line.
"""

import logging
import os
import subprocess
import sys
from typing import List, Optional, TextIO, TYPE_CHECKING

from .exceptions import CommandNotFoundError, ShellIOError, translate_os_error

if TYPE_CHECKING:
    from .context import CommandContext

logger = logging.getLogger(__name__)

NOT_FOUND = 127


def format_child_error(stderr_text: str) -> str:
    """Rewrite a failed child's stderr as `<base-name>:<rest>`.

    The text before the first colon is reduced to its file name component
    and trailing whitespace is trimmed from the rest.

    Examples:
        >>> format_child_error("/usr/bin/cat: nope: No such file or directory\\n")
        'cat: nope: No such file or directory'
        >>> format_child_error("plain failure\\n")
        'plain failure'
    """
    program, sep, rest = stderr_text.partition(':')
    if not sep:
        return stderr_text.rstrip()
    return f"{os.path.basename(program)}:{rest.rstrip()}"


def write_redirect(target: str, data: bytes) -> None:
    """Create or truncate `target` and write `data` to it."""
    try:
        with open(target, 'wb') as f:
            f.write(data)
    except OSError as e:
        raise translate_os_error(e, target) from e
    except ValueError as e:
        # open() rejects names with an embedded NUL
        raise ShellIOError(f"{target}: {e}", path=target) from e


def run_external(
    name: str,
    args: List[str],
    ctx: 'CommandContext',
    redirect_target: Optional[str] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Run an external program and wait for it.

    Args:
        name: Command name as typed; becomes the child's argv[0]
        args: Arguments passed to the child
        ctx: Session context used for lookup and as the child's cwd
        redirect_target: File receiving the child's stdout, if any
        stdout: Stream for normal output (default: sys.stdout)
        stderr: Stream for error output (default: sys.stderr)

    Returns:
        The child's exit status, or 127 when `name` is not registered

    Raises:
        ShellIOError: The child could not be spawned, its output is not
            valid UTF-8, or the redirect target could not be written
    """
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    path = ctx.resolve_executable(name)
    if path is None:
        error = CommandNotFoundError(name)
        stdout.write(f"{error}\n")
        return error.exit_code

    logger.debug("spawning %s as %s with %d args", path, name, len(args))
    try:
        completed = subprocess.run(
            [name, *args],
            executable=path,
            capture_output=True,
            cwd=ctx.cwd,
        )
    except OSError as e:
        raise ShellIOError(f"{name}: {e.strerror or e}") from e
    except ValueError as e:
        raise ShellIOError(f"{name}: {e}") from e

    if redirect_target is not None:
        write_redirect(redirect_target, completed.stdout)
    elif completed.returncode == 0:
        stdout.write(_decode(name, completed.stdout))
        stdout.flush()

    if completed.returncode != 0:
        logger.debug("%s exited with %d", name, completed.returncode)
        message = format_child_error(_decode(name, completed.stderr))
        if message:
            stderr.write(f"{message}\n")
            stderr.flush()

    return completed.returncode


def _decode(name: str, data: bytes) -> str:
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise ShellIOError(f"{name}: output is not valid UTF-8") from e
