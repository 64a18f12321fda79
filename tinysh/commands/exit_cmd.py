"""
EXIT command - terminate the shell.

Note: Module name is exit_cmd.py to avoid shadowing the built-in `exit`.
"""

import re
import sys

from ..command import Builtin
from ..exceptions import ExitArgumentError
from ..process import Process
from . import register_command
from .base import validate_arg_count

# Optional sign and ASCII digits only
STATUS_PATTERN = re.compile(r'[+-]?[0-9]+')

STATUS_MIN = -2 ** 31
STATUS_MAX = 2 ** 31 - 1


def parse_status(argument: str) -> int:
    """Parse an exit status, trailing whitespace ignored.

    Raises:
        ExitArgumentError: Not a decimal integer in the signed 32-bit range
    """
    argument = argument.rstrip()
    if not STATUS_PATTERN.fullmatch(argument):
        raise ExitArgumentError(argument)

    status = int(argument)
    if not STATUS_MIN <= status <= STATUS_MAX:
        raise ExitArgumentError(argument)
    return status


@register_command(Builtin.EXIT)
def cmd_exit(process: Process) -> int:
    """
    Terminate the shell with an optional exit status

    Usage: exit [n]

    Examples:
        exit        # Exit with status 0
        exit 3      # Exit with status 3

    A non-numeric status or extra arguments are reported and the shell
    keeps running.
    """
    validate_arg_count(process, max_args=1)

    status = parse_status(process.args[0]) if process.args else 0

    process.stdout.flush()
    sys.exit(status)
