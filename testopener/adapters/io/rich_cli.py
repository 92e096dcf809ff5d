"""
Rich console components for testopener.

Themes plus the small set of building blocks the UI adapter and CLI render
with: message panels, prompts, a numbered picker table and syntax-highlighted
documents.
"""

from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.syntax import Syntax
from rich.table import Table
from rich.theme import Theme


class UIStyle(str, Enum):
    """UI style options for controlling visual complexity and theming."""

    MINIMAL = "minimal"
    CLASSIC = "classic"


TESTOPENER_THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "muted": "dim",
        "highlight": "bold magenta",
        "accent": "blue",
    }
)

# Restricted palette for CI and non-TTY output
MINIMAL_THEME = Theme(
    {
        "info": "default",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "muted": "dim",
        "highlight": "bold",
        "accent": "default",
    }
)


def get_theme(style: UIStyle) -> Theme:
    return MINIMAL_THEME if style == UIStyle.MINIMAL else TESTOPENER_THEME


class RichCliComponents:
    """Rendering helpers bound to one console."""

    def __init__(self, console: Console | None = None, style: UIStyle = UIStyle.CLASSIC) -> None:
        self.console = console or Console(theme=get_theme(style))
        self.style = style

    def _message(self, message: str, title: str, style: str) -> None:
        if self.style == UIStyle.MINIMAL:
            self.console.print(f"[{style}]{title}:[/] {escape(message)}", highlight=False)
        else:
            self.console.print(
                Panel(escape(message), title=f"[{style}]{title}[/]", border_style=style, expand=False)
            )

    def display_info(self, message: str, title: str = "Info") -> None:
        self._message(message, title, "info")

    def display_success(self, message: str, title: str = "Success") -> None:
        self._message(message, title, "success")

    def display_warning(self, message: str, title: str = "Warning") -> None:
        self._message(message, title, "warning")

    def display_error(self, message: str, title: str = "Error") -> None:
        self._message(message, title, "error")

    def get_user_input(
        self, prompt: str, default: str | None = None, password: bool = False
    ) -> str | None:
        """Ask for a line of text; an empty answer yields ``default``."""
        return Prompt.ask(
            f"[highlight]{prompt}[/]",
            console=self.console,
            default=default,
            password=password,
            show_default=not password,
        )

    def get_user_confirmation(self, message: str, default: bool = False) -> bool:
        return Confirm.ask(f"[highlight]{message}[/]", console=self.console, default=default)

    def get_choice_index(self, count: int) -> int | None:
        """Ask for a 1-based row number; 0 cancels. Returns a 0-based index."""
        choices = [str(i) for i in range(count + 1)]
        answer = IntPrompt.ask(
            "[highlight]Select a file (0 to cancel)[/]",
            console=self.console,
            choices=choices,
            show_choices=False,
            default=1,
        )
        if answer == 0:
            return None
        return answer - 1

    def create_choice_table(self, rows: Sequence[tuple[str, str]], title: str) -> Table:
        table = Table(title=title, show_lines=False, expand=False)
        table.add_column("#", style="accent", justify="right")
        table.add_column("File", style="highlight")
        table.add_column("Path", style="muted", overflow="fold")
        for index, (label, detail) in enumerate(rows, 1):
            table.add_row(str(index), escape(label), escape(detail))
        return table

    def create_conventions_table(self, rows: Sequence[tuple[str, str, str]]) -> Table:
        table = Table(title="Test file conventions")
        table.add_column("Convention", style="accent")
        table.add_column("Extensions")
        table.add_column("Example for 'Foo'", style="highlight")
        for row in rows:
            table.add_row(*row)
        return table

    def print_table(self, table: Table) -> None:
        self.console.print(table)

    def display_code_snippet(
        self,
        code: str,
        path: str,
        title: str | None = None,
        line_numbers: bool = True,
    ) -> None:
        lexer = Syntax.guess_lexer(path, code=code)
        syntax = Syntax(code, lexer, line_numbers=line_numbers, word_wrap=True)
        if self.style == UIStyle.MINIMAL:
            self.console.print(f"[muted]{title or Path(path).name}[/]")
            self.console.print(syntax)
        else:
            self.console.print(Panel(syntax, title=title or Path(path).name, expand=True))
