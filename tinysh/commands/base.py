"""
Base utilities for command implementations.

This module provides common helper functions that command modules can use
to reduce code duplication and maintain consistency.
"""

from ..command_decorators import CommandMetadata
from ..exceptions import UsageError
from ..process import Process


def write_error(process: Process, message: str, prefix_command: bool = True):
    """
    Write an error message.

    Diagnostics go to stdout, next to regular command output.

    Args:
        process: The process object
        message: The error message
        prefix_command: If True, prefix message with command name
    """
    if prefix_command:
        process.stdout.write(f"{process.command}: {message}\n")
    else:
        process.stdout.write(f"{message}\n")


def validate_arg_count(process: Process, metadata: CommandMetadata) -> None:
    """
    Validate the number of arguments.

    Args:
        process: The process object
        metadata: Argument limits and usage synopsis of the command

    Raises:
        UsageError: If there are too few or too many arguments
    """
    arg_count = len(process.args)

    too_few = arg_count < metadata.min_args
    too_many = metadata.max_args is not None and arg_count > metadata.max_args
    if too_few or too_many:
        raise UsageError(process.command, metadata.usage or process.command)


def handle_generic_error(process: Process, error: Exception, context: str = "",
                         command_name: str = None) -> int:
    """
    Report an error with optional context.

    Args:
        process: Process object with stdout stream
        error: The exception that was caught
        context: Optional context string (e.g. what was being attempted)
        command_name: Optional command name (defaults to process.command)

    Returns:
        Exit code (always 1 for errors)

    Example:
        except OSError as e:
            return handle_generic_error(process, e)
    """
    cmd = command_name or process.command
    error_msg = str(error)

    if context:
        process.stdout.write(f"{cmd}: {context}: {error_msg}\n")
    else:
        process.stdout.write(f"{cmd}: {error_msg}\n")

    return 1


__all__ = [
    'write_error',
    'validate_arg_count',
    'handle_generic_error',
]
