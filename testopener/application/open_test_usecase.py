"""
Open Test File Use Case - the single user-invokable action.

Given an implementation file, finds its test file by naming convention and
opens it. When several files match, the user picks one; when none match,
generation of a new test file is offered (if enabled).
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config.models import SearchConfig
from ..domain.conventions import resolve_for
from ..domain.models import (
    ImplementationFileIdentity,
    OpenOutcome,
    OpenTestResult,
    TestFileCandidate,
)
from ..ports.document_port import DocumentError, DocumentPort
from ..ports.search_port import FileSearchError, FileSearchPort
from ..ports.ui_port import UIError, UIPort
from .disambiguation import choose
from .generation_orchestrator import GenerationOrchestrator

logger = logging.getLogger(__name__)


class OpenTestFileUseCase:
    """
    Open the test file for an implementation file, or offer to generate one.

    The implementation file is an explicit argument of `run`; the use case
    holds no per-invocation state, so overlapping runs do not interfere.
    """

    def __init__(
        self,
        search_port: FileSearchPort,
        ui_port: UIPort,
        document_port: DocumentPort,
        orchestrator: GenerationOrchestrator | None = None,
        search_config: SearchConfig | None = None,
    ) -> None:
        """
        Initialize the use case.

        Args:
            search_port: Workspace file search
            ui_port: Picker and notifications
            document_port: Opens and shows the chosen file
            orchestrator: Generation workflow; None disables generation
            search_config: Search exclusions and result cap
        """
        self._search = search_port
        self._ui = ui_port
        self._documents = document_port
        self._orchestrator = orchestrator
        self._search_config = search_config or SearchConfig()

    async def run(self, file_path: str | Path) -> OpenTestResult:
        """
        Execute the action for ``file_path``.

        Returns:
            OpenTestResult describing how the invocation ended
        """
        try:
            return await self._run(file_path)
        except UIError as e:
            logger.error(f"User interface failed: {e}")
            return OpenTestResult(outcome=OpenOutcome.FAILED, message=f"User interface failed: {e}")

    async def _run(self, file_path: str | Path) -> OpenTestResult:
        identity = ImplementationFileIdentity.from_path(file_path)
        pattern = resolve_for(identity)

        if pattern is None:
            return self._notify(
                OpenOutcome.UNSUPPORTED,
                f"File extension is unsupported: {identity.extension or identity.file_name}",
            )

        try:
            paths = await self._search.search(
                f"**/{pattern}",
                self._search_config.exclude_glob,
                self._search_config.max_results,
            )
        except FileSearchError as e:
            logger.error(f"Test file search failed: {e}")
            message = f"Search failed: {e}"
            self._ui.show_error(message)
            return OpenTestResult(outcome=OpenOutcome.FAILED, message=message)

        candidates = [TestFileCandidate.from_path(path) for path in paths]
        logger.debug(f"Pattern {pattern} matched {len(candidates)} file(s)")

        if not candidates:
            if self._orchestrator is not None:
                return await self._orchestrator.run(identity)
            return self._notify(
                OpenOutcome.NOT_FOUND, f"No test files found for {identity.file_name}"
            )

        chosen = await choose(candidates, self._ui.pick)
        if chosen is None:
            return OpenTestResult(outcome=OpenOutcome.CANCELLED)

        try:
            document = await self._documents.open(chosen)
            await self._documents.show(document)
        except DocumentError as e:
            logger.error(f"Could not open {chosen}: {e}")
            message = f"Could not open {chosen}: {e}"
            self._ui.show_error(message)
            return OpenTestResult(outcome=OpenOutcome.FAILED, path=chosen, message=message)

        return OpenTestResult(outcome=OpenOutcome.OPENED, path=chosen)

    def _notify(self, outcome: OpenOutcome, message: str) -> OpenTestResult:
        self._ui.show_info(message)
        return OpenTestResult(outcome=outcome, message=message)
