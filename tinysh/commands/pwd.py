"""
PWD command - print working directory.
"""

from ..process import Process
from ..command_decorators import command
from . import register_command
from .base import handle_generic_error


@command()
@register_command('pwd')
def cmd_pwd(process: Process) -> int:
    """
    Print working directory

    Usage: pwd
    """
    try:
        cwd = process.context.cwd
    except OSError as e:
        return handle_generic_error(process, e)
    process.stdout.write(f"{cwd}\n")
    return 0
