"""Shell: the read-eval loop that owns the session context."""

import logging
import sys
from typing import Optional, TextIO

from .config import ShellConfig
from .context import CommandContext
from .dispatcher import dispatch
from .lexer import tokenize

logger = logging.getLogger(__name__)

PROMPT = "$ "


class Shell:
    """Interactive command interpreter.

    The registry is scanned when the shell is created and once more just
    before the first command is evaluated; after that it is left alone.
    """

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        cwd: Optional[str] = None,
    ):
        """
        Initialize a shell session

        Args:
            config: Startup configuration (default: read from os.environ)
            stdin: Stream lines are read from (default: sys.stdin)
            stdout: Stream for prompt and output (default: sys.stdout)
            stderr: Stream for errors (default: sys.stderr)
            cwd: Initial working directory (default: the process cwd)

        Raises:
            FatalStartupError: The initial working directory is unusable
        """
        self.config = config if config is not None else ShellConfig.from_environ()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.context = CommandContext.create(self.config, cwd=cwd)
        self._refreshed_for_first_command = False

    @property
    def cwd(self) -> str:
        return self.context.cwd

    def execute(self, line: str) -> int:
        """
        Tokenize and evaluate one input line.

        Args:
            line: Raw input line

        Returns:
            Exit status of the line
        """
        if not self._refreshed_for_first_command:
            self.context.refresh_executables()
            self._refreshed_for_first_command = True

        return dispatch(tokenize(line), self.context, self.stdout, self.stderr)

    def read_line(self) -> Optional[str]:
        """Prompt and read one line; None at end of input."""
        self.stdout.write(PROMPT)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line

    def run(self) -> int:
        """
        Run the read-eval loop until `exit` or end of input.

        Returns:
            0 when input runs out; `exit` leaves through SystemExit instead
        """
        while True:
            line = self.read_line()
            if line is None:
                logger.debug("end of input")
                self.stdout.write("\n")
                self.stdout.flush()
                return 0
            self.execute(line)
