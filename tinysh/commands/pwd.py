"""
PWD command - print working directory.
"""

from ..command import Builtin
from ..process import Process
from . import register_command


@register_command(Builtin.PWD)
def cmd_pwd(process: Process) -> int:
    """
    Print working directory

    Usage: pwd

    One trailing separator is stripped, except for the root itself.
    """
    cwd = process.context.cwd
    if len(cwd) > 1 and cwd.endswith('/'):
        cwd = cwd[:-1]
    process.stdout.write(f"{cwd}\n")
    return 0
