"""
File Search Port interface definition.

This module defines the interface for locating files in the workspace.
"""

from typing_extensions import Protocol

from ..domain.models import TestOpenerError


class FileSearchError(TestOpenerError):
    """Raised when the workspace cannot be searched."""

    pass


class FileSearchPort(Protocol):
    """Interface for recursive workspace file search."""

    async def search(
        self, glob_pattern: str, exclude_glob: str | None, max_results: int
    ) -> list[str]:
        """
        Find files matching a glob pattern.

        Args:
            glob_pattern: Workspace-relative glob (e.g. ``**/Foo.**.ts``)
            exclude_glob: Glob of paths to skip (e.g. ``**/node_modules/**``)
            max_results: Upper bound on returned paths

        Returns:
            Absolute paths of matching files, at most ``max_results``

        Raises:
            FileSearchError: If the workspace cannot be searched
        """
        ...
