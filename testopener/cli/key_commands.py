"""API key commands for the testopener CLI."""

import asyncio
import sys
from collections.abc import Callable
from typing import Any

import click

from ..config.credentials import CredentialManager
from ..ports.settings_port import SettingsError


def add_key_commands(
    app: click.Group, bootstrap: Callable[[click.Context], dict[str, Any]]
) -> None:
    """Add the ``key`` command group to the main CLI app."""

    @app.group()
    def key() -> None:
        """Manage the stored generation API key."""

    @key.command(name="set")
    @click.argument("value", required=False)
    @click.pass_context
    def set_key(ctx: click.Context, value: str | None) -> None:
        """Store VALUE as the API key (prompts when omitted)."""
        container = bootstrap(ctx)
        credentials: CredentialManager = container["credentials"]
        ui = container["ui"]

        try:
            if value is not None and value.strip():
                credentials.replace(value.strip())
                stored = True
            else:
                stored = asyncio.run(credentials.reprompt()) is not None
        except SettingsError as e:
            ui.show_error(f"Could not save the API key: {e}")
            sys.exit(1)

        if not stored:
            ui.show_info("No API key entered; nothing was changed")
            return
        ui.show_success(f"API key stored ({credentials.masked()})")

    @key.command(name="clear")
    @click.pass_context
    def clear_key(ctx: click.Context) -> None:
        """Remove the stored API key."""
        container = bootstrap(ctx)
        credentials: CredentialManager = container["credentials"]
        ui = container["ui"]

        try:
            credentials.clear()
        except SettingsError as e:
            ui.show_error(f"Could not remove the API key: {e}")
            sys.exit(1)
        ui.show_success("API key removed")

    @key.command(name="show")
    @click.pass_context
    def show_key(ctx: click.Context) -> None:
        """Show the stored API key, masked."""
        container = bootstrap(ctx)
        credentials: CredentialManager = container["credentials"]
        ui = container["ui"]

        try:
            masked = credentials.masked()
        except SettingsError as e:
            ui.show_error(f"Could not read settings: {e}")
            sys.exit(1)

        if masked is None:
            ui.show_info("No API key stored")
        else:
            ui.show_info(f"API key: {masked}")
