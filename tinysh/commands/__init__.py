"""
Builtin command implementations.

Each module in this package defines one builtin and registers it with
@register_command. load_all_commands() imports them all and checks that
every member of the Builtin enum has exactly one executor.
"""

import importlib
from typing import Callable, Dict

from ..command import Builtin

BUILTINS: Dict[Builtin, Callable] = {}

COMMAND_MODULES = ('cd', 'echo', 'exit_cmd', 'pwd', 'type_cmd')


def register_command(builtin: Builtin):
    """
    Register the decorated function as the executor for `builtin`.

    Example:
        @register_command(Builtin.PWD)
        def cmd_pwd(process: Process) -> int:
            ...
    """
    def decorator(func: Callable) -> Callable:
        if builtin in BUILTINS and BUILTINS[builtin] is not func:
            raise ValueError(f"builtin {builtin.value!r} registered twice")
        BUILTINS[builtin] = func
        return func
    return decorator


def load_all_commands() -> Dict[Builtin, Callable]:
    """Import every command module and return the populated registry."""
    for module in COMMAND_MODULES:
        importlib.import_module(f"{__name__}.{module}")

    missing = [b.value for b in Builtin if b not in BUILTINS]
    if missing:
        raise RuntimeError(f"builtins without an executor: {', '.join(missing)}")
    return BUILTINS
