"""
Decorators that attach metadata to built-in command handlers.

The metadata is read by the builtin dispatcher, which checks argument
counts before the handler runs so handlers only deal with valid input.
"""

from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class CommandMetadata:
    """
    Describes how a built-in may be called.

    Attributes:
        usage: Usage synopsis shown on wrong argument count (e.g. 'cd <path>')
        min_args: Minimum number of arguments
        max_args: Maximum number of arguments (None = unlimited)
    """
    usage: Optional[str] = None
    min_args: int = 0
    max_args: Optional[int] = None


DEFAULT_METADATA = CommandMetadata()


def command(usage: Optional[str] = None, min_args: int = 0,
            max_args: Optional[int] = None):
    """
    Mark a function as a built-in command handler.

    Example:
        @command(usage='cd <path>', min_args=1)
        @register_command('cd')
        def cmd_cd(process):
            ...
    """
    def decorator(func: Callable) -> Callable:
        func.metadata = CommandMetadata(usage=usage, min_args=min_args, max_args=max_args)
        return func
    return decorator


def get_metadata(func: Callable) -> CommandMetadata:
    """Get the metadata attached by @command, or the defaults"""
    return getattr(func, 'metadata', DEFAULT_METADATA)
