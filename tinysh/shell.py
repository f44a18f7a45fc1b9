"""
Shell - the command dispatch loop.

Reads a line, splits it on spaces and either runs a builtin or spawns
an external program with the shell's own standard streams.
"""

import logging
import os
from typing import Dict, List, Optional

from .builtins import get_builtin
from .context import CommandContext
from .control_flow import ExitShell
from .exit_codes import EXIT_CODE_SUCCESS
from .external import run_external
from .path_manager import PathManager
from .process import Process
from .streams import InputStream, OutputStream, ErrorStream

logger = logging.getLogger(__name__)

PROMPT = "$ "


class Shell:
    """
    Interactive command dispatcher.

    Attributes:
        env: Environment handed to builtins and external commands
        path_manager: Owner of the process working directory
        context: CommandContext shared by every command
        last_exit_code: Status of the most recent non-empty command
    """

    def __init__(
        self,
        stdin: Optional[InputStream] = None,
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
        initial_env: Optional[Dict[str, str]] = None,
        prompt: str = PROMPT,
    ):
        """
        Initialize the shell

        Args:
            stdin: Source of command lines (default: sys.stdin)
            stdout: Destination of command output (default: sys.stdout)
            stderr: Standard error handed to child processes (default: sys.stderr)
            initial_env: Environment to use instead of a copy of os.environ
            prompt: Prompt written before each line is read
        """
        self.stdin = stdin or InputStream.from_stdin()
        self.stdout = stdout or OutputStream.from_stdout()
        self.stderr = stderr or ErrorStream.from_stderr()
        self.env = dict(os.environ) if initial_env is None else dict(initial_env)
        self.prompt = prompt

        self.path_manager = PathManager()
        self.context = CommandContext(
            env=self.env,
            path_manager=self.path_manager,
        )
        self.last_exit_code = EXIT_CODE_SUCCESS

    @property
    def cwd(self) -> str:
        return self.path_manager.get_cwd()

    @staticmethod
    def tokenize(line: str) -> List[str]:
        """
        Split a command line into tokens.

        Surrounding whitespace is trimmed, then the line is split on every
        single space, so consecutive spaces yield empty tokens:
        'echo a  b' -> ['echo', 'a', '', 'b'].

        Returns:
            Token list; empty for a blank line
        """
        line = line.strip()
        if not line:
            return []
        return line.split(' ')

    def create_process(self, tokens: List[str]) -> Process:
        """Build the Process for a token list, builtin or external"""
        command, args = tokens[0], tokens[1:]
        executor = get_builtin(command)
        if executor is None:
            executor = run_external

        return Process(
            command=command,
            args=args,
            stdin=self.stdin,
            stdout=self.stdout,
            stderr=self.stderr,
            executor=executor,
            context=self.context,
        )

    def execute(self, line: str) -> int:
        """
        Execute one command line.

        Args:
            line: Raw input line

        Returns:
            Exit status of the command (0 for a blank line)

        Raises:
            ExitShell: When the line was a valid 'exit'
        """
        tokens = self.tokenize(line)
        if not tokens:
            return EXIT_CODE_SUCCESS

        process = self.create_process(tokens)
        logger.debug("dispatching %r", process)
        self.last_exit_code = process.execute()
        return self.last_exit_code

    def read_line(self) -> Optional[str]:
        """
        Show the prompt and read one line.

        Returns:
            The line, or None at end of input
        """
        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == '':
            return None
        return line

    def repl(self) -> int:
        """
        Run the read-dispatch loop until 'exit' or end of input.

        Returns:
            Exit status for the shell process
        """
        while True:
            line = self.read_line()
            if line is None:
                logger.debug("end of input, leaving")
                return EXIT_CODE_SUCCESS

            try:
                self.execute(line)
            except ExitShell as e:
                logger.debug("exit requested with status %d", e.exit_code)
                return e.exit_code
