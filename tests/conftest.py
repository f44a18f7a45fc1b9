"""
Pytest configuration and shared fixtures for tinysh tests.

This module provides reusable test fixtures for:
- A temporary working directory that is restored after each test
- A fake PATH directory holding small executables
- Shell instances wired to in-memory streams
"""

import stat

import pytest

from tinysh.builtins import get_builtin
from tinysh.context import CommandContext
from tinysh.external import run_external
from tinysh.process import Process
from tinysh.shell import Shell
from tinysh.streams import InputStream, OutputStream, ErrorStream


# ============================================================================
# Filesystem fixtures
# ============================================================================

def write_executable(path, body: str, executable: bool = True):
    """Write a /bin/sh script and optionally mark it executable."""
    path.write_text("#!/bin/sh\n" + body)
    mode = path.stat().st_mode
    if executable:
        path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    else:
        path.chmod(mode & ~(stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))
    return path


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """
    Provides a temporary directory that is the working directory for the test.

    monkeypatch restores the original working directory afterwards, even
    when the test changed it with cd.

    Returns:
        pathlib.Path: Resolved path of the working directory
    """
    root = tmp_path.resolve() / "work"
    root.mkdir()
    (root / "subdir").mkdir()
    (root / "subdir" / "nested").mkdir()
    (root / "file.txt").write_text("not a directory")
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def home_dir(tmp_path):
    """Provides a directory used as $HOME."""
    home = tmp_path.resolve() / "home"
    home.mkdir()
    return home


@pytest.fixture
def fake_bin(tmp_path):
    """
    Provides a directory of small executables to use as PATH.

    Contents:
        hello   - prints 'hello' followed by its arguments
        fail    - exits with status 3
        echo    - shadows the echo builtin
        noexec  - a script without the executable bit
    """
    bin_dir = tmp_path.resolve() / "bin"
    bin_dir.mkdir()
    write_executable(bin_dir / "hello", 'echo "hello $*"\n')
    write_executable(bin_dir / "fail", 'echo "failing" >&2\nexit 3\n')
    write_executable(bin_dir / "echo", 'echo "external echo"\n')
    write_executable(bin_dir / "noexec", 'echo "should not run"\n', executable=False)
    return bin_dir


@pytest.fixture
def shell_env(fake_bin, home_dir):
    """Environment with PATH limited to fake_bin and HOME set."""
    return {
        'PATH': str(fake_bin),
        'HOME': str(home_dir),
    }


# ============================================================================
# Shell and process fixtures
# ============================================================================

@pytest.fixture
def make_shell(workdir, shell_env):
    """
    Factory for shells reading from a string and writing to buffers.

    Example:
        def test_echo(make_shell):
            shell = make_shell("echo hi\\nexit\\n")
            assert shell.repl() == 0
            assert shell.stdout.get_value() == "$ hi\\n$ "
    """
    def factory(input_text: str = '', env=None):
        return Shell(
            stdin=InputStream.from_text(input_text),
            stdout=OutputStream.to_buffer(),
            stderr=ErrorStream.to_buffer(),
            initial_env=shell_env if env is None else env,
        )
    return factory


@pytest.fixture
def shell(make_shell):
    """Provides a shell with no pending input."""
    return make_shell()


@pytest.fixture
def mock_context(shell_env):
    """Provides a CommandContext over the test environment."""
    return CommandContext(env=dict(shell_env))


@pytest.fixture
def make_process(mock_context):
    """
    Factory for processes with buffered streams and the test context.

    Example:
        def test_pwd(make_process):
            process = make_process('pwd')
            cmd_pwd(process)
    """
    def factory(command: str, *args: str, executor=None):
        if executor is None:
            executor = get_builtin(command) or run_external
        return Process(
            command=command,
            args=list(args),
            executor=executor,
            context=mock_context,
        )
    return factory


# ============================================================================
# Helper Functions
# ============================================================================

def output_of(shell: Shell) -> str:
    """Get everything the shell wrote to stdout."""
    return shell.stdout.get_value()


def run_line(shell: Shell, line: str):
    """
    Execute a single line and return (status, output written by it).
    """
    before = len(output_of(shell))
    status = shell.execute(line)
    return status, output_of(shell)[before:]


pytest.output_of = output_of
pytest.run_line = run_line

