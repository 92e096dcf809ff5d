"""Anthropic Claude adapter for test file generation."""

from __future__ import annotations

import logging

import anthropic

from ...config.models import GenerationConfig
from ...ports.llm_error import LLMAuthenticationError, LLMError
from .common import normalize_output

logger = logging.getLogger(__name__)

PROVIDER = "anthropic"


class ClaudeAdapter:
    """LLMPort implementation backed by the Anthropic Messages API."""

    def __init__(self, config: GenerationConfig | None = None, max_retries: int = 2) -> None:
        self.config = config or GenerationConfig()
        self.model = self.config.anthropic_model
        self.max_retries = max_retries

    def _create_client(self, credential: str) -> anthropic.AsyncAnthropic:
        return anthropic.AsyncAnthropic(
            api_key=credential,
            timeout=self.config.timeout,
            max_retries=self.max_retries,
        )

    async def generate(self, instruction: str, user_content: str, credential: str) -> str:
        logger.debug(f"Requesting test file from Anthropic model {self.model}")
        try:
            async with self._create_client(credential) as client:
                message = await client.messages.create(
                    model=self.model,
                    system=instruction,
                    messages=[{"role": "user", "content": user_content}],
                    max_tokens=self.config.max_tokens,
                    temperature=self.config.temperature,
                )
        except anthropic.AuthenticationError as e:
            raise LLMAuthenticationError(
                "API key rejected",
                provider=PROVIDER,
                operation="generate",
                model=self.model,
                status_code=getattr(e, "status_code", 401),
            ) from e
        except anthropic.APIStatusError as e:
            logger.error(f"Anthropic API error: {e.status_code}")
            raise LLMError(
                f"Anthropic API error: {e.message}",
                provider=PROVIDER,
                operation="generate",
                model=self.model,
                status_code=e.status_code,
            ) from e
        except anthropic.APIError as e:
            logger.error(f"Anthropic API error: {type(e).__name__}")
            raise LLMError(
                f"Anthropic API error: {e.message}",
                provider=PROVIDER,
                operation="generate",
                model=self.model,
            ) from e

        # Concatenate text blocks; other block types carry no file content
        content = "".join(
            block.text for block in message.content if getattr(block, "type", None) == "text"
        )
        if not content.strip():
            raise LLMError(
                "Empty response from Anthropic",
                provider=PROVIDER,
                operation="generate",
                model=self.model,
            )
        return normalize_output(content, self.config.strip_code_fences)
