"""Startup configuration for tinysh.

The environment is read exactly once, when the shell starts, and the result
is passed explicitly into the CommandContext. Nothing else in the package
looks at os.environ.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple


PATH_SEPARATOR = ':'


@dataclass(frozen=True)
class ShellConfig:
    """Immutable settings taken from the process environment.

    Attributes:
        search_dirs: Directories scanned for executables, in PATH order
        home: Home directory used for `~` and for `cd` with no argument
    """
    search_dirs: Tuple[str, ...] = ()
    home: str = '/'

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> 'ShellConfig':
        """Build a config from PATH and HOME.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            ShellConfig with empty PATH entries dropped

        Examples:
            >>> ShellConfig.from_environ({'PATH': '/bin::/usr/bin', 'HOME': '/home/ann'})
            ShellConfig(search_dirs=('/bin', '/usr/bin'), home='/home/ann')
        """
        if environ is None:
            environ = os.environ

        search_dirs = tuple(
            entry for entry in environ.get('PATH', '').split(PATH_SEPARATOR) if entry
        )
        home = environ.get('HOME') or os.path.expanduser('~')
        return cls(search_dirs=search_dirs, home=home)
