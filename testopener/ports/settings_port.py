"""
Settings Port interface definition.

This module defines the interface for persisted configuration that survives
across sessions (the home of the generation credential).
"""

from typing import Literal

from typing_extensions import Protocol

from ..domain.models import TestOpenerError


class SettingsError(TestOpenerError):
    """Raised when persisted settings cannot be read or written."""

    pass


SettingsScope = Literal["global", "workspace"]


class SettingsPort(Protocol):
    """Interface for durable key/value settings."""

    def read(self, key: str) -> str | None:
        """
        Read a persisted value.

        Returns:
            The stored value, or None when the key is absent
        """
        ...

    def write(self, key: str, value: str, scope: SettingsScope = "global") -> None:
        """
        Persist a value.

        Raises:
            SettingsError: If the value cannot be stored
        """
        ...

    def delete(self, key: str, scope: SettingsScope = "global") -> None:
        """Remove a persisted value; missing keys are ignored."""
        ...

    def scope_of(self, key: str) -> SettingsScope | None:
        """
        Name the scope whose value ``read`` would return.

        Returns:
            "workspace" or "global", or None when the key is absent everywhere
        """
        ...
