"""
CommandContext - Encapsulates all context needed for command execution.

This module provides the CommandContext dataclass that decouples commands
from the Shell class, making commands more testable.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from .exceptions import HomeDirectoryError
from .path_manager import PathManager


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for command execution.

    This provides commands with access to:
    - Environment variables (PATH, HOME)
    - The working directory, through its PathManager

    Commands should use this context instead of direct Shell access.

    Example:
        >>> ctx = CommandContext(env={'HOME': '/home/alice'})
        >>> ctx.get_home()
        '/home/alice'
    """

    env: Dict[str, str] = field(default_factory=dict)
    path_manager: PathManager = field(default_factory=PathManager)

    @property
    def cwd(self) -> str:
        """Current working directory (raises OSError if unavailable)"""
        return self.path_manager.get_cwd()

    def resolve_path(self, path: str) -> str:
        """
        Resolve relative paths against the working directory.

        Examples:
            >>> ctx.resolve_path('/tmp/file.txt')
            '/tmp/file.txt'
        """
        return self.path_manager.resolve_path(path)

    def get_variable(self, name: str) -> Optional[str]:
        """
        Get an environment variable.

        Args:
            name: Variable name

        Returns:
            Variable value or None if not set
        """
        return self.env.get(name)

    def get_home(self) -> str:
        """
        Get the user's home directory from HOME.

        Returns:
            Home directory path

        Raises:
            HomeDirectoryError: If HOME is unset or empty
        """
        home = self.get_variable('HOME')
        if not home:
            raise HomeDirectoryError()
        return home

    def get_search_path(self) -> Optional[str]:
        """Get the executable search path (PATH), or None if unset"""
        return self.get_variable('PATH')

    def __repr__(self):
        """String representation for debugging"""
        return f"CommandContext(env_vars={len(self.env)}, path_manager={self.path_manager!r})"
