"""Path and working directory management for tinysh.

This module provides the PathManager class which handles:
- Current working directory tracking
- Resolving `cd` arguments (home, parent, relative and absolute forms)
- Canonicalizing paths against the real filesystem
"""

import logging
import os
from typing import TYPE_CHECKING

from .exceptions import DirectoryNotFoundError

if TYPE_CHECKING:
    from .context import CommandContext

logger = logging.getLogger(__name__)


class PathManager:
    """Manages paths and the working directory.

    The cwd held here is always absolute and canonical. It only changes
    through change_directory(), which validates the target first, so a
    failed `cd` leaves it untouched.

    Attributes:
        cwd: Current working directory (canonical absolute path)
        home: Home directory used for `~` forms and bare `cd`
    """

    def __init__(self, initial_cwd: str = "/", home: str = "/"):
        """Initialize the path manager.

        Args:
            initial_cwd: Initial current working directory (default: '/')
            home: Home directory (default: '/')
        """
        self.cwd = initial_cwd
        self.home = home

    def expand(self, path: str) -> str:
        """Turn a cd argument into an absolute, not yet canonical, path.

        Rules are tried in order and the first match wins.

        Examples:
            With cwd='/srv/app' and home='/home/ann':
                expand('')          -> '/home/ann'
                expand('~/src')     -> '/home/ann/src'
                expand('..')        -> '/srv'
                expand('../lib')    -> '/srv/lib'
                expand('./conf')    -> '/srv/app/conf'
                expand('/etc')      -> '/etc'
                expand('logs')      -> '/srv/app/logs'
        """
        if path in ("", "~", "~/"):
            return self.home
        if path.startswith("~/"):
            return os.path.join(self.home, path[2:])
        if path == "..":
            # dirname('/') is '/', so the root is its own parent
            return os.path.dirname(self.cwd)
        if path.startswith("../"):
            return os.path.join(self._pop_component(self.cwd), path[3:])
        if path.startswith("./"):
            return os.path.join(self.cwd, path[2:])
        if path.startswith("/"):
            return path
        return os.path.join(self.cwd, path)

    def resolve_path(self, path: str) -> str:
        """Resolve a cd argument to a canonical absolute path.

        Args:
            path: Path expression as typed by the user

        Returns:
            Canonical path (symlinks resolved, `.` and `..` collapsed)

        Raises:
            DirectoryNotFoundError: The path does not exist, cannot be
                accessed or is not a valid file name (e.g. it contains a
                NUL). The error carries `path` as typed.
        """
        expanded = self.expand(path)
        try:
            return os.path.realpath(expanded, strict=True)
        except (OSError, ValueError) as e:
            logger.debug("cannot canonicalize %s (%s): %s", path, expanded, e)
            raise DirectoryNotFoundError(path) from e

    def change_directory(self, path: str) -> str:
        """Change the current working directory.

        Updates both the tracked cwd and the process working directory.

        Args:
            path: cd argument as typed by the user

        Returns:
            The new working directory

        Raises:
            DirectoryNotFoundError: The target does not resolve or is not a
                directory
            OSError: The process could not enter the directory
        """
        resolved = self.resolve_path(path)
        if not os.path.isdir(resolved):
            raise DirectoryNotFoundError(resolved)

        os.chdir(resolved)
        self.cwd = resolved
        return resolved

    def go_home(self) -> str:
        """Change to the home directory."""
        return self.change_directory(self.home)

    @staticmethod
    def _pop_component(path: str) -> str:
        stripped = path.rstrip("/")
        if not stripped:
            return "/"
        return os.path.dirname(stripped)

    def __repr__(self):
        return f"PathManager(cwd={self.cwd!r}, home={self.home!r})"


def resolve_path(ctx: 'CommandContext', path: str) -> str:
    """Resolve `path` against the working directory held by `ctx`."""
    return ctx.paths.resolve_path(path)
