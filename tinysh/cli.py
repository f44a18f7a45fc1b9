"""Command-line entry point for tinysh"""

import logging
import os
import sys

from .exit_codes import EXIT_CODE_INTERRUPTED
from .shell import Shell

LOG_LEVEL_ENV = 'TINYSH_LOG_LEVEL'


def configure_logging():
    """Send diagnostics to stderr at the level named by TINYSH_LOG_LEVEL"""
    level_name = os.environ.get(LOG_LEVEL_ENV, 'WARNING').upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )


def main() -> int:
    """
    Run an interactive shell on the process's standard streams.

    Returns:
        Exit status: 0 after 'exit' or end of input, 130 on Ctrl-C
    """
    configure_logging()
    shell = Shell()
    try:
        return shell.repl()
    except KeyboardInterrupt:
        sys.stdout.write('\n')
        sys.stdout.flush()
        return EXIT_CODE_INTERRUPTED


if __name__ == '__main__':
    sys.exit(main())
