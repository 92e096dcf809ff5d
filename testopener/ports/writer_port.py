"""
Writer Port interface definition.

This module defines the interface for writing generated files to disk.
"""

from typing_extensions import Protocol

from ..domain.models import TestOpenerError


class WriterError(TestOpenerError):
    """Raised when a file cannot be written."""

    pass


class WriterPort(Protocol):
    """Interface for file write operations."""

    async def write_file(self, path: str, data: bytes) -> None:
        """
        Write ``data`` to ``path`` in one step.

        Either the complete content is in place afterwards or the target
        is left untouched.

        Raises:
            WriterError: If the file cannot be written
        """
        ...
