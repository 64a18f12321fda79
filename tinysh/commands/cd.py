"""
CD command - change the working directory.
"""

from ..command import Builtin
from ..process import Process
from . import register_command
from .base import validate_arg_count


@register_command(Builtin.CD)
def cmd_cd(process: Process) -> int:
    """
    Change the working directory

    Usage: cd [dir]

    Examples:
        cd              # Go to $HOME
        cd ~/projects   # Relative to $HOME
        cd ../lib       # Sibling of the current directory

    A target that does not resolve to a directory raises
    DirectoryNotFoundError and leaves the working directory unchanged.
    """
    paths = process.context.paths

    validate_arg_count(process, max_args=1)

    if not process.args:
        paths.go_home()
        return 0

    paths.change_directory(process.args[0])
    return 0
