"""
Generation Orchestrator - synthesizes a missing test file.

Runs when a search for an implementation file's test file came back empty.
The workflow asks for confirmation, obtains the API key, calls the generation
service and writes the result next to the implementation file. A rejected key
is recovered from by prompting for a replacement and calling again; every
other failure ends the run with a generic notice. Nothing is written unless
the generation call succeeded.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import SecretStr

from ..config.credentials import CredentialManager
from ..config.models import GenerationConfig
from ..domain.models import (
    GeneratedTestFile,
    GenerationRequest,
    ImplementationFileIdentity,
    OpenOutcome,
    OpenTestResult,
)
from ..ports.document_port import DocumentError, DocumentPort
from ..ports.llm_error import LLMAuthenticationError, LLMError
from ..ports.llm_port import LLMPort
from ..ports.settings_port import SettingsError
from ..ports.ui_port import UIError, UIPort
from ..ports.writer_port import WriterError, WriterPort
from ..prompts.registry import generation_instruction

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Failed to generate test file."
INVALID_CREDENTIAL_MESSAGE = "The API key was rejected by the generation service."


class GenerationState(str, Enum):
    """States of a single generation run."""

    CONFIRMING = "confirming"
    DECLINED = "declined"
    NO_CREDENTIAL = "no_credential"
    AWAIT_PROMPT = "await_prompt"
    HAVE_CREDENTIAL = "have_credential"
    CALLING = "calling"
    SUCCESS = "success"
    AUTH_REJECTED = "auth_rejected"
    AWAIT_REPROMPT_OR_ABORT = "await_reprompt_or_abort"
    OTHER_FAILURE = "other_failure"
    ABORTED = "aborted"


class GenerationOrchestrator:
    """
    Coordinates credential, generation service and file materialization.

    Each call to `run` owns its own state; the only shared state is the
    persisted credential behind the CredentialManager.
    """

    def __init__(
        self,
        llm_port: LLMPort,
        credentials: CredentialManager,
        ui_port: UIPort,
        document_port: DocumentPort,
        writer_port: WriterPort,
        config: GenerationConfig | None = None,
    ) -> None:
        """
        Initialize the orchestrator.

        Args:
            llm_port: Text generation service
            credentials: Owner of the API key lifecycle
            ui_port: Confirmation and notifications
            document_port: Reads the implementation file, shows the result
            writer_port: Writes the generated file
            config: Generation settings (defaults when None)
        """
        self._llm = llm_port
        self._credentials = credentials
        self._ui = ui_port
        self._documents = document_port
        self._writer = writer_port
        self._config = config or GenerationConfig()
        self.state = GenerationState.CONFIRMING

    def _transition(self, state: GenerationState) -> None:
        logger.debug("Generation state %s -> %s", self.state.value, state.value)
        self.state = state

    async def run(self, identity: ImplementationFileIdentity) -> OpenTestResult:
        """
        Offer to generate a test file for ``identity`` and do so if accepted.

        Returns:
            OpenTestResult with outcome GENERATED, DECLINED, ABORTED or FAILED
        """
        try:
            return await self._run(identity)
        except UIError as e:
            # The UI itself is broken, so report through the result only
            logger.error(f"User interface failed during generation: {e}")
            self._transition(GenerationState.OTHER_FAILURE)
            return OpenTestResult(outcome=OpenOutcome.FAILED, message=GENERIC_FAILURE_MESSAGE)

    async def _run(self, identity: ImplementationFileIdentity) -> OpenTestResult:
        self.state = GenerationState.CONFIRMING
        confirmed = await self._ui.confirm(
            f"No test file found for {identity.file_name}. Generate one?"
        )
        if not confirmed:
            self._transition(GenerationState.DECLINED)
            return OpenTestResult(outcome=OpenOutcome.DECLINED)

        try:
            if self._credentials.get() is None:
                self._transition(GenerationState.NO_CREDENTIAL)
                self._transition(GenerationState.AWAIT_PROMPT)
            credential = await self._credentials.ensure()
        except SettingsError as e:
            logger.error(f"Could not persist API key: {e}")
            return self._fail(f"Could not save the API key: {e}")

        if credential is None:
            # Declining to enter a key is a valid choice, not an error
            self._transition(GenerationState.ABORTED)
            return OpenTestResult(outcome=OpenOutcome.ABORTED)
        self._transition(GenerationState.HAVE_CREDENTIAL)

        try:
            source = await self._documents.open(identity.absolute_path)
        except DocumentError as e:
            logger.error(f"Could not read {identity.absolute_path}: {e}")
            return self._fail(GENERIC_FAILURE_MESSAGE)

        request = GenerationRequest(
            extension=identity.extension,
            source_content=source.text,
            credential=SecretStr(credential),
        )
        content = await self._generate_with_auth_recovery(request)
        if isinstance(content, OpenTestResult):
            return content

        self._transition(GenerationState.SUCCESS)
        generated = GeneratedTestFile.for_identity(
            identity, content, test_suffix=self._config.test_suffix
        )
        return await self._materialize(generated)

    async def _generate_with_auth_recovery(
        self, request: GenerationRequest
    ) -> str | OpenTestResult:
        """Call the service, replacing the key on each rejection until declined."""
        instruction = generation_instruction(request.extension)
        credential = request.credential
        auth_retries = 0

        while True:
            self._transition(GenerationState.CALLING)
            try:
                return await self._llm.generate(
                    instruction, request.source_content, credential.get_secret_value()
                )
            except LLMAuthenticationError as e:
                self._transition(GenerationState.AUTH_REJECTED)
                logger.debug(f"Generation rejected credential: {e}")
                self._ui.show_error(INVALID_CREDENTIAL_MESSAGE)

                limit = self._config.max_auth_retries
                if limit is not None and auth_retries >= limit:
                    logger.warning(
                        f"Giving up after {auth_retries} API key replacement(s)"
                    )
                    return self._fail(GENERIC_FAILURE_MESSAGE)

                self._transition(GenerationState.AWAIT_REPROMPT_OR_ABORT)
                try:
                    replacement = await self._credentials.reprompt()
                except SettingsError as save_error:
                    logger.error(f"Could not persist API key: {save_error}")
                    return self._fail(f"Could not save the API key: {save_error}")
                if replacement is None:
                    self._transition(GenerationState.ABORTED)
                    return OpenTestResult(outcome=OpenOutcome.ABORTED)

                credential = SecretStr(replacement)
                auth_retries += 1
            except LLMError as e:
                logger.error(f"Test generation failed: {e}")
                return self._fail(GENERIC_FAILURE_MESSAGE)
            except Exception as e:
                logger.error(
                    f"Unexpected error from generation service: {type(e).__name__}: {e}"
                )
                return self._fail(GENERIC_FAILURE_MESSAGE)

    async def _materialize(self, generated: GeneratedTestFile) -> OpenTestResult:
        """Write the generated file, then open and show it."""
        try:
            await self._writer.write_file(
                generated.target_path, generated.content.encode("utf-8")
            )
        except WriterError as e:
            logger.error(f"Could not write {generated.target_path}: {e}")
            return self._fail(GENERIC_FAILURE_MESSAGE)

        logger.debug(f"Wrote generated test file {generated.target_path}")
        try:
            document = await self._documents.open(generated.target_path)
            await self._documents.show(document)
        except DocumentError as e:
            message = f"Test file written to {generated.target_path} but could not be opened: {e}"
            self._ui.show_error(message)
            return OpenTestResult(
                outcome=OpenOutcome.GENERATED,
                path=generated.target_path,
                message=message,
            )

        return OpenTestResult(outcome=OpenOutcome.GENERATED, path=generated.target_path)

    def _fail(self, message: str) -> OpenTestResult:
        self._transition(GenerationState.OTHER_FAILURE)
        self._ui.show_error(message)
        return OpenTestResult(outcome=OpenOutcome.FAILED, message=message)
