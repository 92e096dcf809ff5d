"""
LLM Port interface definition.

This module defines the interface for the text generation service that
synthesizes test files.
"""

from typing_extensions import Protocol


class LLMPort(Protocol):
    """
    Interface for text generation.

    Implementations must raise `LLMAuthenticationError` when the credential
    is rejected and `LLMError` for every other failure.
    """

    async def generate(
        self, instruction: str, user_content: str, credential: str
    ) -> str:
        """
        Generate text for the given instruction and user content.

        Args:
            instruction: System-level instruction for the model
            user_content: Content the model operates on
            credential: API credential to authenticate the call with

        Returns:
            The single text payload of the response

        Raises:
            LLMAuthenticationError: If the credential is rejected
            LLMError: For any other failure
        """
        ...
