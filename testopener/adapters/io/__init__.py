"""Terminal and filesystem adapters."""

from .document_viewer import DocumentViewer
from .enhanced_logging import LoggerManager, setup_enhanced_logging
from .file_search import WorkspaceFileSearch
from .rich_cli import RichCliComponents, UIStyle, get_theme
from .settings_store import TomlSettingsStore
from .ui_rich import RichUIAdapter, UIError
from .writer import AtomicFileWriter

__all__ = [
    "AtomicFileWriter",
    "DocumentViewer",
    "LoggerManager",
    "RichCliComponents",
    "RichUIAdapter",
    "TomlSettingsStore",
    "UIError",
    "UIStyle",
    "WorkspaceFileSearch",
    "get_theme",
    "setup_enhanced_logging",
]
