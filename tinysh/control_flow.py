"""
Control flow exceptions for the dispatch loop.

These are not errors: they unwind out of a running command to the loop
in Shell.repl(), which decides what to do with them.
"""

from .exit_codes import EXIT_CODE_SUCCESS


class ControlFlowException(Exception):
    """Base class for exceptions that steer the dispatch loop"""
    pass


class ExitShell(ControlFlowException):
    """
    Raised by the exit builtin to stop the loop.

    Attributes:
        exit_code: Status the shell process should terminate with
    """

    def __init__(self, exit_code: int = EXIT_CODE_SUCCESS):
        super().__init__(exit_code)
        self.exit_code = exit_code
