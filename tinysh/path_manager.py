"""Path and working directory management for tinysh.

This module provides the PathManager class which handles:
- Reading the process working directory
- Path resolution (relative to absolute)
- Changing the process working directory

The working directory is process-wide state. PathManager is its only
writer; everything else reads it through get_cwd().
"""

import logging
import os

from .exceptions import DirectoryNotFoundError

logger = logging.getLogger(__name__)


class PathManager:
    """Manages paths and the process working directory.

    Unlike a virtual cwd, the directory tracked here is the real one
    returned by os.getcwd(), so child processes started by the shell
    inherit it without any extra bookkeeping.
    """

    def get_cwd(self) -> str:
        """Get the current working directory.

        Returns:
            Absolute path of the current working directory

        Raises:
            OSError: If the directory cannot be determined (e.g. it was removed)
        """
        return os.getcwd()

    def resolve_path(self, path: str) -> str:
        """Resolve a relative or absolute path to an absolute path.

        Absolute paths are returned as given. Relative paths are joined
        to the current working directory and normalized.

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Absolute path

        Examples:
            resolve_path('/foo/bar') -> '/foo/bar'
            resolve_path('bar') with cwd='/foo' -> '/foo/bar'
            resolve_path('../baz') with cwd='/foo/bar' -> '/foo/baz'
        """
        if os.path.isabs(path):
            return path
        return os.path.normpath(os.path.join(self.get_cwd(), path))

    def change_directory(self, path: str) -> str:
        """Change the current working directory.

        Args:
            path: New directory path (can be relative or absolute)

        Returns:
            The resolved path that is now the working directory

        Raises:
            DirectoryNotFoundError: If the directory cannot be entered,
                whatever the underlying reason
        """
        try:
            resolved = self.resolve_path(path)
        except OSError as e:
            logger.debug("cannot resolve %r against cwd: %s", path, e)
            raise DirectoryNotFoundError(path) from e

        try:
            os.chdir(resolved)
        except OSError as e:
            logger.debug("chdir(%r) failed: %s", resolved, e)
            raise DirectoryNotFoundError(resolved) from e

        logger.debug("working directory is now %s", resolved)
        return resolved
