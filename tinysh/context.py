"""
CommandContext - the session state every command runs against.

The REPL driver creates one CommandContext at startup and keeps it for the
life of the process. Commands that change state (`cd`, registry refresh)
mutate it; everything else only reads from it.
"""

from dataclasses import dataclass, field
import os
from typing import Optional

from .config import ShellConfig
from .exceptions import FatalStartupError
from .executable_registry import ExecutableRegistry
from .path_manager import PathManager


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for command execution.

    This provides commands with access to:
    - The executable registry
    - The current working directory (through `paths`)
    - The startup configuration

    Example:
        >>> ctx = CommandContext.create(ShellConfig(search_dirs=('/bin',), home='/root'))
        >>> ctx.resolve_executable('sh')
        '/bin/sh'
    """

    config: ShellConfig = field(default_factory=ShellConfig)
    registry: ExecutableRegistry = field(default_factory=ExecutableRegistry)
    paths: PathManager = field(default_factory=PathManager)

    @classmethod
    def create(cls, config: ShellConfig, cwd: Optional[str] = None) -> 'CommandContext':
        """
        Build a context for a new session and fill the registry.

        Args:
            config: Startup configuration
            cwd: Initial working directory (default: the process cwd)

        Returns:
            A ready CommandContext

        Raises:
            FatalStartupError: The initial working directory cannot be
                determined
        """
        try:
            initial = os.path.realpath(cwd if cwd is not None else os.getcwd(), strict=True)
        except OSError as e:
            raise FatalStartupError(f"cannot determine working directory: {e}") from e

        ctx = cls(config=config, paths=PathManager(initial_cwd=initial, home=config.home))
        ctx.refresh_executables()
        return ctx

    @property
    def cwd(self) -> str:
        """Current working directory."""
        return self.paths.cwd

    @property
    def home(self) -> str:
        return self.config.home

    def refresh_executables(self) -> int:
        """Rescan the configured search directories into the registry."""
        return self.registry.refresh(self.config.search_dirs)

    def resolve_executable(self, name: str) -> Optional[str]:
        """Registry lookup for an external command name."""
        return self.registry.resolve(name)

    def __repr__(self):
        """String representation for debugging"""
        return (
            f"CommandContext(cwd={self.cwd!r}, "
            f"home={self.home!r}, "
            f"executables={len(self.registry)})"
        )
