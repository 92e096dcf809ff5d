"""
Document Port interface definition.

This module defines the interface for opening and displaying documents.
"""

from typing_extensions import Protocol

from ..domain.models import Document, TestOpenerError


class DocumentError(TestOpenerError):
    """Raised when a document cannot be opened or shown."""

    pass


class DocumentPort(Protocol):
    """Interface for document open/display operations."""

    async def open(self, path: str) -> Document:
        """
        Open a text document.

        Raises:
            DocumentError: If the document cannot be read
        """
        ...

    async def show(self, document: Document) -> None:
        """Present an opened document to the user."""
        ...
