"""Process class: one builtin invocation and the streams it writes to"""

import io
import logging
from typing import Callable, List, Optional, TextIO, TYPE_CHECKING

from .exceptions import CommandNotFoundError, ShellError, UsageError, translate_os_error

if TYPE_CHECKING:
    from .context import CommandContext

logger = logging.getLogger(__name__)


class Process:
    """Represents a single builtin command being executed"""

    def __init__(
        self,
        command: str,
        args: List[str],
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        executor: Optional[Callable[['Process'], int]] = None,
        context: Optional['CommandContext'] = None,
        redirect_target: Optional[str] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name
            args: Command arguments
            stdout: Output stream (default: in-memory buffer)
            stderr: Error stream (default: in-memory buffer)
            executor: Callable that executes the command
            context: Session state the command runs against
            redirect_target: File stdout is being redirected to, if any.
                The caller owns the redirection; commands only consult it
                when their output format depends on it.
        """
        self.command = command
        self.args = args
        self.stdout = stdout if stdout is not None else io.StringIO()
        self.stderr = stderr if stderr is not None else io.StringIO()
        self.executor = executor
        self.redirect_target = redirect_target

        if context is None:
            from .context import CommandContext
            context = CommandContext()
        self.context = context

        self.exit_code = 0

    @property
    def cwd(self) -> str:
        return self.context.cwd

    def execute(self) -> int:
        """
        Execute the process

        Usage errors are reported on stdout, other shell errors and OS errors
        on stderr, and each is turned into a non-zero exit code. SystemExit
        from `exit` is not caught.

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        if self.executor is None:
            error = CommandNotFoundError(self.command)
            self.stderr.write(f"{error}\n")
            self.exit_code = error.exit_code
            return self.exit_code

        try:
            self.exit_code = self.executor(self)
        except UsageError as e:
            self.stdout.write(f"{e}\n")
            self.exit_code = e.exit_code
        except ShellError as e:
            self.stderr.write(f"{e}\n")
            self.exit_code = e.exit_code
        except OSError as e:
            error = translate_os_error(e)
            self.stderr.write(f"{self.command}: {error}\n")
            self.exit_code = error.exit_code

        self.stdout.flush()
        self.stderr.flush()
        logger.debug("%r exited with %d", self, self.exit_code)
        return self.exit_code

    def get_stdout(self) -> str:
        """Get stdout contents (in-memory streams only)"""
        return self.stdout.getvalue()

    def get_stderr(self) -> str:
        """Get stderr contents (in-memory streams only)"""
        return self.stderr.getvalue()

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
