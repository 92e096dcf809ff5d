"""
Document adapter: opens text files and presents them.

Documents are shown either as a syntax-highlighted listing in the console or
by launching the user's editor ($VISUAL / $EDITOR) on the file.
"""

import asyncio
import logging
from pathlib import Path
from typing import Literal

import click

from ...domain.models import Document
from ...ports.document_port import DocumentError
from .rich_cli import RichCliComponents

logger = logging.getLogger(__name__)

ViewerMode = Literal["console", "editor"]


class DocumentViewer:
    """DocumentPort implementation for a terminal session."""

    def __init__(
        self, rich_cli: RichCliComponents, viewer: ViewerMode = "console"
    ) -> None:
        self.rich_cli = rich_cli
        self.viewer = viewer

    async def open(self, path: str) -> Document:
        return await asyncio.to_thread(self._read, path)

    def _read(self, path: str) -> Document:
        file_path = Path(path)
        try:
            # newline="" keeps CRLF line endings as they are on disk
            with open(file_path, encoding="utf-8", newline="") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise DocumentError(f"{path} is not a UTF-8 text file") from e
        except OSError as e:
            raise DocumentError(f"Failed to read {path}: {e}") from e
        return Document(path=str(file_path.resolve()), text=text)

    async def show(self, document: Document) -> None:
        if self.viewer == "editor":
            logger.debug(f"Launching editor for {document.path}")
            try:
                click.edit(filename=document.path)
            except click.ClickException as e:
                raise DocumentError(f"Could not launch editor: {e.format_message()}") from e
            return

        self.rich_cli.display_code_snippet(document.text, document.path)
