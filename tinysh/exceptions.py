"""
Custom exception hierarchy for tinysh.

This module defines a structured exception hierarchy that provides:
- Clear error categorization
- Consistent error messages
- Proper exit codes

Usage:
    from tinysh.exceptions import DirectoryNotFoundError

    try:
        context.path_manager.change_directory(path)
    except DirectoryNotFoundError as e:
        process.stdout.write(f"cd: {e}\\n")
        return e.exit_code
"""

from typing import Optional

from .exit_codes import EXIT_CODE_FAILURE, EXIT_CODE_NOT_FOUND, EXIT_CODE_USAGE


class ShellError(Exception):
    """
    Base class for all shell errors.

    All custom exceptions should inherit from this class.
    This allows catching all shell-specific errors with a single except clause.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = EXIT_CODE_FAILURE):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# Working Directory Errors
# =============================================================================

class DirectoryError(ShellError):
    """
    Base class for working-directory errors.

    Raised when the working directory cannot be read or changed.
    """

    def __init__(self, message: str, path: Optional[str] = None,
                 exit_code: int = EXIT_CODE_FAILURE):
        super().__init__(message, exit_code)
        self.path = path


class DirectoryNotFoundError(DirectoryError):
    """
    Raised when the shell cannot change into a directory.

    The message is the same whatever the underlying cause was
    (missing path, permission denied, not a directory).

    Example:
        raise DirectoryNotFoundError("/path/to/dir")
    """

    def __init__(self, path: str, message: Optional[str] = None):
        if message is None:
            message = f"{path}: No such file or directory"
        super().__init__(message, path)


class HomeDirectoryError(DirectoryError):
    """
    Raised when the user's home directory cannot be determined.

    Example:
        raise HomeDirectoryError()
    """

    def __init__(self, message: Optional[str] = None):
        if message is None:
            message = "$HOME is not defined"
        super().__init__(message)


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command execution errors.

    Raised when a command fails to execute properly.
    """

    def __init__(self, command: str, message: str, exit_code: int = EXIT_CODE_FAILURE):
        super().__init__(message, exit_code)
        self.command = command


class CommandNotFoundError(CommandError):
    """
    Raised when a command cannot be found or could not be run.

    Example:
        raise CommandNotFoundError("unknown_cmd")
    """

    def __init__(self, command: str):
        message = f"{command}: command not found"
        super().__init__(command, message, exit_code=EXIT_CODE_NOT_FOUND)


class UsageError(CommandError):
    """
    Raised when a command is called with the wrong arguments.

    Example:
        raise UsageError("cd", "cd <path>")
    """

    def __init__(self, command: str, usage: str, message: Optional[str] = None):
        if message is None:
            message = f"{command}: usage: {usage}"
        super().__init__(command, message, exit_code=EXIT_CODE_USAGE)
        self.usage = usage


__all__ = [
    'ShellError',
    'DirectoryError',
    'DirectoryNotFoundError',
    'HomeDirectoryError',
    'CommandError',
    'CommandNotFoundError',
    'UsageError',
]
