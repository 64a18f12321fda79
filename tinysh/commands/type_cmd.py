"""
TYPE command - describe how a name would be run.

Note: Module name is type_cmd.py to avoid shadowing the built-in `type`.
"""

from ..command import Builtin, is_builtin
from ..process import Process
from . import register_command
from .base import validate_arg_count


@register_command(Builtin.TYPE)
def cmd_type(process: Process) -> int:
    """
    Report whether a name is a builtin or an executable on the search path

    Usage: type name

    Examples:
        type cd     # cd is a shell builtin
        type ls     # ls is /usr/bin/ls
    """
    validate_arg_count(process, min_args=1, max_args=1)

    name = process.args[0].rstrip()
    if is_builtin(name):
        process.stdout.write(f"{name} is a shell builtin\n")
        return 0

    path = process.context.resolve_executable(name)
    if path is not None:
        process.stdout.write(f"{name} is {path}\n")
        return 0

    process.stdout.write(f"{name}: not found\n")
    return 1
