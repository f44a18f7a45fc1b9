"""
Tests for the command-line entry point.
"""

import io
import logging
import subprocess
import sys
from unittest.mock import patch

from tinysh import cli


class TestMain:
    """Test cli.main() on patched standard streams."""

    def test_main_runs_until_exit(self, monkeypatch):
        """Test main reads sys.stdin and writes sys.stdout."""
        monkeypatch.setattr(sys, 'stdin', io.StringIO("echo hi\nexit\necho never\n"))
        stdout = io.StringIO()
        monkeypatch.setattr(sys, 'stdout', stdout)

        assert cli.main() == 0
        assert stdout.getvalue() == "$ hi\n$ "

    def test_main_exits_on_end_of_input(self, monkeypatch):
        """Test end of input ends the session with status 0."""
        monkeypatch.setattr(sys, 'stdin', io.StringIO("exit 1\n"))
        stdout = io.StringIO()
        monkeypatch.setattr(sys, 'stdout', stdout)

        assert cli.main() == 0
        assert "Invalid usage of exit" in stdout.getvalue()

    def test_main_handles_keyboard_interrupt(self, monkeypatch):
        """Test Ctrl-C ends the session with status 130 and no traceback."""
        stdout = io.StringIO()
        monkeypatch.setattr(sys, 'stdout', stdout)

        with patch('tinysh.cli.Shell') as shell_cls:
            shell_cls.return_value.repl.side_effect = KeyboardInterrupt()
            assert cli.main() == 130

        assert stdout.getvalue() == "\n"


class TestConfigureLogging:
    """Test log level selection from the environment."""

    def test_level_from_environment(self, monkeypatch):
        """Test TINYSH_LOG_LEVEL is passed to basicConfig."""
        monkeypatch.setenv('TINYSH_LOG_LEVEL', 'debug')

        with patch('tinysh.cli.logging.basicConfig') as basic_config:
            cli.configure_logging()

        assert basic_config.call_args.kwargs['level'] == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self, monkeypatch):
        """Test bad level names do not break startup."""
        monkeypatch.setenv('TINYSH_LOG_LEVEL', 'chatty')

        with patch('tinysh.cli.logging.basicConfig') as basic_config:
            cli.configure_logging()

        assert basic_config.call_args.kwargs['level'] == logging.WARNING

    def test_default_level(self, monkeypatch):
        """Test the default level is WARNING."""
        monkeypatch.delenv('TINYSH_LOG_LEVEL', raising=False)

        with patch('tinysh.cli.logging.basicConfig') as basic_config:
            cli.configure_logging()

        assert basic_config.call_args.kwargs['level'] == logging.WARNING


class TestModuleEntryPoint:
    """Test python -m tinysh end to end."""

    def test_piped_session(self):
        """Test a piped session runs builtins and exits with status 0."""
        result = subprocess.run(
            [sys.executable, '-m', 'tinysh'],
            input="echo hello\ntype cd\nexit 0\n",
            capture_output=True,
            text=True,
            timeout=30,
        )

        assert result.returncode == 0
        assert result.stdout == "$ hello\n$ cd is a shell builtin\n$ "

    def test_piped_session_end_of_input(self):
        """Test the process exits cleanly when input runs out."""
        result = subprocess.run(
            [sys.executable, '-m', 'tinysh'],
            input="not-a-real-cmd\n",
            capture_output=True,
            text=True,
            timeout=30,
        )

        assert result.returncode == 0
        assert result.stdout == "$ not-a-real-cmd: command not found\n$ "

    def test_piped_session_with_invalid_utf8(self):
        """Test bytes that are not UTF-8 do not end the session."""
        result = subprocess.run(
            [sys.executable, '-m', 'tinysh'],
            input=b"echo \xff\xfe\necho after\n",
            capture_output=True,
            timeout=30,
        )

        assert result.returncode == 0
        assert result.stdout == b"$ \xff\xfe\n$ after\n$ "
