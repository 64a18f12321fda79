"""
Custom exception hierarchy for tinysh.

This module defines a structured exception hierarchy that provides:
- Clear error categorization (usage, not-found, parse, I/O)
- Consistent error messages
- Proper exit codes

Every error raised while evaluating a line is a ShellError (or an OSError
from the operating system) and is caught by the dispatcher, which reports it
and keeps the read loop running. FatalStartupError is the only exception
that is allowed to end the process.

Usage:
    from tinysh.exceptions import DirectoryNotFoundError

    try:
        ctx.paths.change_directory(target)
    except DirectoryNotFoundError as e:
        stderr.write(f"{e}\\n")
        return e.exit_code
"""

from typing import Optional


class ShellError(Exception):
    """
    Base class for all shell errors.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# Usage Errors
# =============================================================================

class UsageError(ShellError):
    """
    Raised when a command is invoked with the wrong arguments.

    Example:
        raise UsageError("cd", "too many arguments")
    """

    def __init__(self, command: str, details: str):
        super().__init__(f"{command}: {details}", exit_code=2)
        self.command = command
        self.details = details


# =============================================================================
# Not Found Errors
# =============================================================================

class NotFoundError(ShellError):
    """Base class for lookups that came back empty."""
    pass


class DirectoryNotFoundError(NotFoundError):
    """
    Raised when a cd target does not resolve to an existing directory.

    The path kept on the error is the one the user typed, not the
    partially joined path.

    Example:
        raise DirectoryNotFoundError("missing/dir")
    """

    def __init__(self, path: str, message: Optional[str] = None):
        if message is None:
            message = f"cd: {path}: No such directory"
        super().__init__(message, exit_code=1)
        self.path = path


class CommandNotFoundError(NotFoundError):
    """
    Raised when a command is neither a builtin nor in the registry.

    Example:
        raise CommandNotFoundError("nonexistent")
    """

    def __init__(self, command: str):
        super().__init__(f"{command}: command not found", exit_code=127)
        self.command = command


# =============================================================================
# Parsing Errors
# =============================================================================

class ParsingError(ShellError):
    """Base class for errors turning user text into values."""

    def __init__(self, message: str, text: Optional[str] = None):
        super().__init__(message, exit_code=2)
        self.text = text


class ExitArgumentError(ParsingError):
    """
    Raised when the exit status given to `exit` is not an integer.

    Example:
        raise ExitArgumentError("notanumber")
    """

    def __init__(self, argument: str):
        super().__init__(f"exit: {argument}: numeric argument required", text=argument)
        self.argument = argument


# =============================================================================
# I/O Errors
# =============================================================================

class ShellIOError(ShellError):
    """
    Raised when redirection, spawning or output decoding fails.

    Example:
        raise ShellIOError("/root/out.txt: Permission denied", path="/root/out.txt")
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, exit_code=1)
        self.path = path


class FatalStartupError(ShellError):
    """Raised when the shell cannot establish its initial working directory."""
    pass


# =============================================================================
# Utility Functions
# =============================================================================

def translate_os_error(error: OSError, path: Optional[str] = None) -> ShellIOError:
    """
    Translate an OSError into a ShellIOError with a shell-style message.

    Args:
        error: The OSError raised by the operating system
        path: Optional path that caused the error

    Returns:
        ShellIOError whose message reads "<path>: <reason>"

    Example:
        try:
            open(target, 'w')
        except OSError as e:
            raise translate_os_error(e, target)
    """
    reason = error.strerror or str(error)
    target = path or error.filename
    if target:
        return ShellIOError(f"{target}: {reason}", path=str(target))
    return ShellIOError(reason)
