"""Executable registry for tinysh.

This module provides the ExecutableRegistry class which handles:
- Scanning search-path directories for executables
- Mapping executable file names to absolute paths
- Looking up a command name before it is spawned

The registry is filled when the shell starts and refreshed once more right
before the first command runs. After that it stays as it is for the rest of
the session, so executables installed mid-session are not picked up.
"""

import logging
import os
from typing import Dict, Iterable, Optional

logger = logging.getLogger(__name__)


class ExecutableRegistry:
    """Registry of executables found on the search path.

    Example:
        registry.refresh(['/usr/local/bin', '/usr/bin'])
        registry.resolve('ls')  ->  '/usr/bin/ls'

    Attributes:
        _executables: Internal dictionary mapping file names to absolute paths
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._executables: Dict[str, str] = {}

    def register(self, name: str, path: str) -> None:
        """Add or replace one executable.

        Args:
            name: File name the command is invoked by
            path: Absolute path of the file
        """
        self._executables[name] = path

    def refresh(self, search_dirs: Iterable[str]) -> int:
        """Scan each directory (non-recursively) and register its entries.

        Later directories overwrite earlier ones for duplicate names. A
        directory that cannot be listed is skipped.

        Args:
            search_dirs: Directories to scan, in search-path order

        Returns:
            Number of entries registered by this scan
        """
        found = 0
        for directory in search_dirs:
            try:
                entries = os.scandir(directory)
            except OSError as e:
                logger.debug("skipping search directory %s: %s", directory, e)
                continue

            with entries:
                for entry in entries:
                    if not _is_representable(entry.name):
                        continue
                    self.register(entry.name, os.path.abspath(entry.path))
                    found += 1

        logger.debug("registry refresh found %d entries, %d names known",
                     found, len(self._executables))
        return found

    def resolve(self, name: str) -> Optional[str]:
        """Look up an executable by name.

        Args:
            name: Command name

        Returns:
            Absolute path if registered, None otherwise
        """
        return self._executables.get(name)

    def __len__(self) -> int:
        return len(self._executables)

    def __repr__(self) -> str:
        return f"ExecutableRegistry({len(self._executables)} executables)"


def _is_representable(name: str) -> bool:
    # os.scandir maps undecodable bytes to lone surrogates
    try:
        name.encode('utf-8')
    except UnicodeEncodeError:
        return False
    return True


def refresh(search_dirs: Iterable[str], registry: ExecutableRegistry) -> int:
    """Refresh `registry` from `search_dirs`; see ExecutableRegistry.refresh."""
    return registry.refresh(search_dirs)
