"""
EXIT command - leave the shell.

Note: Module name is exit_cmd.py because 'exit' is a Python builtin.
"""

from ..process import Process
from ..command_decorators import command
from ..control_flow import ExitShell
from ..exceptions import UsageError
from ..exit_codes import EXIT_CODE_SUCCESS
from . import register_command

EXIT_USAGE = "Invalid usage of exit. Use 'exit' or 'exit 0'."


@command(usage='exit [0]')
@register_command('exit')
def cmd_exit(process: Process) -> int:
    """
    Exit the shell

    Usage: exit [0]

    Only a plain 'exit' or 'exit 0' terminates the shell. Any other
    status is rejected and the shell keeps running.
    """
    if process.args == [] or process.args == ['0']:
        raise ExitShell(EXIT_CODE_SUCCESS)

    raise UsageError(process.command, 'exit [0]', message=EXIT_USAGE)
