"""
Built-in shell commands registry.

All built-in commands live in the commands/ directory.
This module loads them and exposes lookup helpers for the dispatcher.
"""

from functools import partial
from typing import Callable, FrozenSet, Optional

from .command_decorators import get_metadata
from .commands import load_all_commands, BUILTINS as COMMANDS
from .commands.base import validate_arg_count
from .process import Process

# Load all command modules to populate the registry
load_all_commands()

BUILTINS = COMMANDS

# The registry is fixed once the command modules are loaded
BUILTIN_NAMES: FrozenSet[str] = frozenset(BUILTINS)


def is_builtin(command: str) -> bool:
    """Check whether a name is a shell builtin"""
    return command in BUILTINS


def run_builtin(handler: Callable, process: Process) -> int:
    """Check the argument count declared by @command, then run the handler"""
    validate_arg_count(process, get_metadata(handler))
    return handler(process)


def get_builtin(command: str) -> Optional[Callable[[Process], int]]:
    """
    Get a built-in command executor.

    Args:
        command: The command name to look up

    Returns:
        The command executor, or None if not found

    Example:
        >>> executor = get_builtin('echo')
        >>> if executor:
        ...     executor(process)
    """
    handler = BUILTINS.get(command)
    if handler is None:
        return None
    return partial(run_builtin, handler)
