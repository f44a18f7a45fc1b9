"""
External command support: search-path lookup and process execution.
"""

import logging
import shutil
import subprocess
from typing import Optional

from .exceptions import CommandNotFoundError
from .process import Process

logger = logging.getLogger(__name__)


def find_executable(name: str, search_path: Optional[str] = None) -> Optional[str]:
    """
    Resolve a command name to an executable file.

    Args:
        name: Command name (a bare name, or a path containing a separator)
        search_path: PATH-style directory list; None uses the process PATH

    Returns:
        Path of the executable, or None if it cannot be found
    """
    if not name:
        return None
    return shutil.which(name, path=search_path)


def run_external(process: Process) -> int:
    """
    Run process.argv as a child process and wait for it.

    The child inherits the working directory and the shell's streams.
    Streams that are in-memory buffers have no file descriptor to hand
    over; the child's output is then collected and copied into them
    after it exits.

    Raises:
        CommandNotFoundError: If the program could not be started or exited
            with a non-zero status. Both are reported the same way.
    """
    stdin = process.stdin.fileno()
    stdout = process.stdout.fileno()
    stderr = process.stderr.fileno()

    # Anything we printed must reach the terminal before the child does
    process.stdout.flush()
    process.stderr.flush()

    logger.debug("spawning %r", process.argv)
    try:
        result = subprocess.run(
            process.argv,
            stdin=stdin if stdin is not None else subprocess.DEVNULL,
            stdout=stdout if stdout is not None else subprocess.PIPE,
            stderr=stderr if stderr is not None else subprocess.PIPE,
            env=process.context.env,
        )
    except (OSError, ValueError, subprocess.SubprocessError) as e:
        logger.debug("could not start %r: %s", process.command, e)
        raise CommandNotFoundError(process.command) from e

    if result.stdout:
        process.stdout.write(result.stdout)
    if result.stderr:
        process.stderr.write(result.stderr)

    logger.debug("%r exited with status %d", process.command, result.returncode)
    if result.returncode != 0:
        error = CommandNotFoundError(process.command)
        # Killed by a signal: report 128+N like other shells
        if result.returncode < 0:
            error.exit_code = 128 - result.returncode
        else:
            error.exit_code = result.returncode
        raise error
    return 0
