"""
TYPE command - describe how a name would be interpreted.

Note: Module name is type_cmd.py because 'type' is a Python builtin.
"""

from ..process import Process
from ..command_decorators import command
from ..external import find_executable
from . import BUILTINS, register_command
from .base import write_error


@command(usage='type command_name', min_args=1)
@register_command('type')
def cmd_type(process: Process) -> int:
    """
    Tell whether a name is a builtin or an executable on PATH

    Usage: type command_name

    Builtins win over executables of the same name. Only the first
    argument is looked up.

    Examples:
        type echo    # echo is a shell builtin
        type ls      # ls is /usr/bin/ls
    """
    name = process.args[0]

    if name in BUILTINS:
        process.stdout.write(f"{name} is a shell builtin\n")
        return 0

    path = find_executable(name, process.context.get_search_path())
    if path is None:
        write_error(process, f"{name}: not found", prefix_command=False)
        return 1

    process.stdout.write(f"{name} is {path}\n")
    return 0
