"""
ECHO command - print arguments.
"""

from ..command import Builtin
from ..process import Process
from . import register_command


@register_command(Builtin.ECHO)
def cmd_echo(process: Process) -> int:
    """
    Print arguments separated by single spaces

    Usage: echo [arg...]

    On a terminal trailing whitespace is trimmed before the newline; when
    redirected to a file the text is written as joined.
    """
    text = ' '.join(process.args)
    if process.redirect_target is None:
        text = text.rstrip()
    process.stdout.write(f"{text}\n")
    return 0
