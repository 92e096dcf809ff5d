"""
Port interfaces for the testopener system.

This module contains all the interface definitions using Python Protocols
to define contracts between the application layer and adapters.
"""

from .document_port import DocumentError, DocumentPort
from .llm_error import LLMAuthenticationError, LLMError
from .llm_port import LLMPort
from .search_port import FileSearchError, FileSearchPort
from .settings_port import SettingsError, SettingsPort, SettingsScope
from .ui_port import UIError, UIPort
from .writer_port import WriterError, WriterPort

__all__ = [
    "DocumentError",
    "DocumentPort",
    "FileSearchError",
    "FileSearchPort",
    "LLMAuthenticationError",
    "LLMError",
    "LLMPort",
    "SettingsError",
    "SettingsPort",
    "SettingsScope",
    "UIError",
    "UIPort",
    "WriterError",
    "WriterPort",
]
