"""
UI Port interface definition.

This module defines the interface for user interaction: notifications,
confirmation, text input and single-choice picking.
"""

from typing_extensions import Protocol

from ..domain.models import PickItem, TestOpenerError


class UIError(TestOpenerError):
    """Raised when the user interface cannot display or read."""

    pass


class UIPort(Protocol):
    """Interface for user interface operations."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        ...

    def show_error(self, message: str) -> None:
        """Display an error message."""
        ...

    async def confirm(self, message: str) -> bool:
        """
        Ask a yes/no question.

        Returns:
            True if the user answered yes
        """
        ...

    async def prompt_text(
        self, message: str, placeholder: str | None = None, secret: bool = False
    ) -> str | None:
        """
        Ask the user for a line of text.

        Args:
            message: Prompt to display
            placeholder: Example of the expected value
            secret: Hide the input while typing

        Returns:
            The entered text, or None if the user cancelled
        """
        ...

    async def pick(self, items: list[PickItem]) -> str | None:
        """
        Let the user choose one item.

        Items are shown by label; the detail text is displayed alongside and
        can be used to tell items with equal labels apart.

        Returns:
            The ``detail`` of the selected item, or None if cancelled
        """
        ...
