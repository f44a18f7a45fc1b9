"""Process class for a single command invocation"""

import logging
from typing import List, Optional, Callable

from .context import CommandContext
from .control_flow import ControlFlowException
from .exceptions import ShellError
from .exit_codes import EXIT_CODE_FAILURE
from .streams import InputStream, OutputStream, ErrorStream

logger = logging.getLogger(__name__)


class Process:
    """Represents a single command invocation: a builtin or an external program"""

    def __init__(
        self,
        command: str,
        args: List[str],
        executor: Callable[['Process'], int],
        stdin: Optional[InputStream] = None,
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
        context: Optional[CommandContext] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name
            args: Command arguments
            executor: Callable that executes the command
            stdin: Input stream
            stdout: Output stream
            stderr: Error stream
            context: CommandContext with environment and working directory

        Note:
            Streams default to in-memory buffers, which is what tests want.
            The shell always passes its own streams.
        """
        self.command = command
        self.args = args
        self.stdin = stdin or InputStream.from_text('')
        self.stdout = stdout or OutputStream.to_buffer()
        self.stderr = stderr or ErrorStream.to_buffer()
        self.executor = executor
        self.context = context if context is not None else CommandContext()

        self.exit_code = 0

    @property
    def argv(self) -> List[str]:
        """Full argument vector, command name first"""
        return [self.command] + self.args

    def execute(self) -> int:
        """
        Execute the process

        Shell errors raised by the executor are reported on stdout and
        turned into their exit code.

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        try:
            self.exit_code = self.executor(self)
        except KeyboardInterrupt:
            # Let KeyboardInterrupt propagate for proper Ctrl-C handling
            raise
        except ControlFlowException:
            # exit unwinds straight to the dispatch loop
            raise
        except ShellError as e:
            self.stdout.write(f"{e}\n")
            self.exit_code = e.exit_code
        except Exception as e:
            logger.debug("unexpected error in %r", self, exc_info=True)
            self.stdout.write(f"Error executing '{self.command}': {str(e)}\n")
            self.exit_code = EXIT_CODE_FAILURE

        self.stdout.flush()
        self.stderr.flush()

        return self.exit_code

    def get_stdout(self) -> str:
        """Get stdout contents"""
        return self.stdout.get_value()

    def get_stderr(self) -> str:
        """Get stderr contents"""
        return self.stderr.get_value()

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
