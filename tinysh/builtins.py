"""
Built-in shell commands registry.

The builtins live in the commands/ directory. This module loads them and
exposes a lookup by Builtin member.
"""

from typing import Callable, Optional

from .command import Builtin
from .commands import load_all_commands

BUILTINS = load_all_commands()


def get_builtin(builtin: Builtin) -> Optional[Callable]:
    """
    Get a built-in command executor.

    Args:
        builtin: The Builtin member to look up

    Returns:
        The command function, or None if not found

    Example:
        >>> executor = get_builtin(Builtin.PWD)
        >>> executor(process)
        0
    """
    return BUILTINS.get(builtin)
