"""
ECHO command - print arguments.
"""

from ..process import Process
from ..command_decorators import command
from . import register_command


@command()
@register_command('echo')
def cmd_echo(process: Process) -> int:
    """
    Print arguments separated by single spaces

    Usage: echo [arg...]
    """
    process.stdout.write(' '.join(process.args) + '\n')
    return 0
