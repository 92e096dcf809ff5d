"""
Rich UI adapter implementing the UIPort interface.

This module provides a UIPort implementation using Rich components for
notifications, yes/no confirmation, text input and a numbered single-choice
picker. Console prompts read stdin directly on the event loop thread; the
workflow is sequential, so there is nothing else to run while waiting and
Ctrl+C reaches the prompt immediately.
"""

import logging

from rich.console import Console

from ...domain.models import PickItem
from ...ports.ui_port import UIError
from .rich_cli import RichCliComponents, UIStyle, get_theme

logger = logging.getLogger(__name__)


class RichUIAdapter:
    """
    Rich UI adapter implementing the UIPort interface.

    Cancelling a prompt (Ctrl+C or end of input) is reported as "no answer"
    rather than as an error, matching a dismissed dialog.
    """

    def __init__(
        self,
        console: Console | None = None,
        ui_style: UIStyle = UIStyle.CLASSIC,
        assume_yes: bool = False,
    ) -> None:
        """
        Initialize the Rich UI adapter.

        Args:
            console: Optional Rich Console instance (will create one if not provided)
            ui_style: Visual style
            assume_yes: Answer every confirmation with yes without asking
        """
        if console is None:
            console = Console(theme=get_theme(ui_style))
        else:
            # Table and panel styles are theme names; an injected console needs them too
            console.push_theme(get_theme(ui_style))
        self._console = console
        self.rich_cli = RichCliComponents(self._console, style=ui_style)
        self.assume_yes = assume_yes

    @property
    def console(self) -> Console:
        return self._console

    def show_info(self, message: str) -> None:
        try:
            self.rich_cli.display_info(message)
        except Exception as e:
            raise UIError(f"Failed to display info: {str(e)}") from e

    def show_error(self, message: str) -> None:
        try:
            self.rich_cli.display_error(message)
        except Exception as e:
            raise UIError(f"Failed to display error: {str(e)}") from e

    def show_success(self, message: str) -> None:
        try:
            self.rich_cli.display_success(message)
        except Exception as e:
            raise UIError(f"Failed to display success message: {str(e)}") from e

    async def confirm(self, message: str) -> bool:
        if self.assume_yes:
            logger.debug(f"Auto-confirmed: {message}")
            return True
        answer = await self._ask(self.rich_cli.get_user_confirmation, message, False)
        return bool(answer)

    async def prompt_text(
        self, message: str, placeholder: str | None = None, secret: bool = False
    ) -> str | None:
        label = f"{message} ({placeholder})" if placeholder else message
        answer = await self._ask(self.rich_cli.get_user_input, label, None, secret)
        if answer is None:
            return None
        return str(answer)

    async def pick(self, items: list[PickItem]) -> str | None:
        if not items:
            return None
        table = self.rich_cli.create_choice_table(
            [(item.label, item.detail) for item in items],
            title=f"{len(items)} matching test files",
        )
        self.rich_cli.print_table(table)
        index = await self._ask(self.rich_cli.get_choice_index, len(items))
        if index is None:
            return None
        return items[index].detail

    async def _ask(self, func, *args):
        """Run a console prompt; cancellation yields None."""
        try:
            return func(*args)
        except (KeyboardInterrupt, EOFError):
            self._console.print()
            logger.debug("Prompt cancelled by user")
            return None
        except Exception as e:
            raise UIError(f"Failed to get user input: {str(e)}") from e
