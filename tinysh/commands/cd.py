"""
CD command - change the working directory.
"""

from ..process import Process
from ..command_decorators import command
from ..exceptions import DirectoryNotFoundError, HomeDirectoryError
from . import register_command
from .base import handle_generic_error, write_error


@command(usage='cd <path>', min_args=1)
@register_command('cd')
def cmd_cd(process: Process) -> int:
    """
    Change the current working directory

    Usage: cd <path>

    '~' means the home directory ($HOME). Relative paths are resolved
    against the current directory. Any failure to enter the directory
    is reported as 'No such file or directory'.

    Examples:
        cd /tmp
        cd ..
        cd ~
    """
    path = process.args[0]

    if path == '~':
        try:
            path = process.context.get_home()
        except HomeDirectoryError as e:
            return handle_generic_error(process, e, "failed to get home directory")

    try:
        process.context.path_manager.change_directory(path)
    except DirectoryNotFoundError as e:
        write_error(process, str(e))
        return e.exit_code
    return 0
