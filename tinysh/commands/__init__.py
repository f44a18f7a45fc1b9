"""
Built-in command registry.

Each built-in lives in its own module in this package and registers
itself with the @register_command decorator when the module is imported.
"""

import importlib
from typing import Callable, Dict

# name -> handler(process) -> exit code
BUILTINS: Dict[str, Callable] = {}

# Modules imported by load_all_commands(); names differ from the command
# where the command is a Python keyword or builtin
COMMAND_MODULES = [
    'exit_cmd',
    'echo',
    'type_cmd',
    'pwd',
    'cd',
]


def register_command(*names: str):
    """
    Register a handler under one or more command names.

    Example:
        @register_command('pwd')
        def cmd_pwd(process):
            ...
    """
    def decorator(func):
        for name in names:
            BUILTINS[name] = func
        return func
    return decorator


def load_all_commands():
    """Import every command module so the registry is populated"""
    for module_name in COMMAND_MODULES:
        importlib.import_module(f'.{module_name}', __name__)
    return BUILTINS
