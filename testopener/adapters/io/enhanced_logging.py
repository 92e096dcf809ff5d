"""
Logging setup with Rich integration.

The CLI configures the root logger once with a RichHandler bound to its
console; library modules only ever call ``logging.getLogger(__name__)``.
"""

import logging
import threading

from rich.console import Console
from rich.logging import RichHandler

from .rich_cli import TESTOPENER_THEME


class LoggerManager:
    """Configures process-wide logging exactly once."""

    _console: Console | None = None
    _handler: RichHandler | None = None
    _setup_complete: bool = False
    _setup_lock: threading.Lock = threading.Lock()

    @classmethod
    def setup_global_logging(
        cls, console: Console | None = None, level: int = logging.INFO
    ) -> None:
        """Set up global logging configuration with thread safety."""
        with cls._setup_lock:
            root_logger = logging.getLogger()

            if cls._setup_complete and cls._handler in root_logger.handlers:
                root_logger.setLevel(level)
                return

            cls._console = console or Console(theme=TESTOPENER_THEME, stderr=True)

            # Replace foreign RichHandlers, keep any other handlers
            for handler in list(root_logger.handlers):
                if isinstance(handler, RichHandler):
                    root_logger.removeHandler(handler)

            rich_handler = RichHandler(
                console=cls._console,
                show_time=True,
                show_path=False,
                markup=False,
                rich_tracebacks=True,
            )
            rich_handler.setFormatter(logging.Formatter(fmt="%(message)s"))

            root_logger.addHandler(rich_handler)
            root_logger.setLevel(level)
            cls._handler = rich_handler
            cls._setup_complete = True

    @classmethod
    def set_verbosity(
        cls,
        verbose: bool = False,
        quiet: bool = False,
        suppress_modules: list[str] | None = None,
    ) -> int:
        """
        Apply CLI verbosity flags.

        Quiet wins over verbose. Outside verbose mode the given third-party
        modules are held at WARNING.

        Returns:
            The level set on the root logger
        """
        if quiet:
            level = logging.WARNING
        elif verbose:
            level = logging.DEBUG
        else:
            level = logging.INFO

        logging.getLogger().setLevel(level)
        for module in suppress_modules or []:
            logging.getLogger(module).setLevel(
                logging.NOTSET if verbose and not quiet else logging.WARNING
            )
        return level

    @classmethod
    def reset(cls) -> None:
        """Detach our handler (used by tests)."""
        with cls._setup_lock:
            if cls._handler is not None:
                logging.getLogger().removeHandler(cls._handler)
            cls._handler = None
            cls._console = None
            cls._setup_complete = False


def setup_enhanced_logging(
    console: Console | None = None, level: int = logging.INFO
) -> logging.Logger:
    """Set up enhanced logging system and return the main logger."""
    LoggerManager.setup_global_logging(console, level)
    return logging.getLogger("testopener.main")
