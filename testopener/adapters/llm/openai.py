"""OpenAI adapter for test file generation."""

from __future__ import annotations

import logging

import openai

from ...config.models import GenerationConfig
from ...ports.llm_error import LLMAuthenticationError, LLMError
from .common import normalize_output

logger = logging.getLogger(__name__)

PROVIDER = "openai"


class OpenAIAdapter:
    """
    LLMPort implementation backed by the OpenAI Chat Completions API.

    A client is created per call because the credential can change between
    calls when the user replaces a rejected key.
    """

    def __init__(self, config: GenerationConfig | None = None, max_retries: int = 2) -> None:
        self.config = config or GenerationConfig()
        self.model = self.config.openai_model
        self.max_retries = max_retries

    def _create_client(self, credential: str) -> openai.AsyncOpenAI:
        return openai.AsyncOpenAI(
            api_key=credential,
            base_url=self.config.openai_base_url,
            timeout=self.config.timeout,
            max_retries=self.max_retries,
        )

    async def generate(self, instruction: str, user_content: str, credential: str) -> str:
        logger.debug(f"Requesting test file from OpenAI model {self.model}")
        try:
            async with self._create_client(credential) as client:
                response = await client.chat.completions.create(
                    model=self.model,
                    messages=[
                        {"role": "system", "content": instruction},
                        {"role": "user", "content": user_content},
                    ],
                    max_tokens=self.config.max_tokens,
                    temperature=self.config.temperature,
                )
        except openai.AuthenticationError as e:
            raise LLMAuthenticationError(
                "API key rejected",
                provider=PROVIDER,
                operation="generate",
                model=self.model,
                status_code=getattr(e, "status_code", 401),
            ) from e
        except openai.APIStatusError as e:
            logger.error(f"OpenAI API error: {e.status_code}")
            raise LLMError(
                f"OpenAI API error: {e.message}",
                provider=PROVIDER,
                operation="generate",
                model=self.model,
                status_code=e.status_code,
                metadata={"request_id": e.request_id} if e.request_id else None,
            ) from e
        except openai.APIError as e:
            logger.error(f"OpenAI API error: {type(e).__name__}")
            raise LLMError(
                f"OpenAI API error: {e.message}",
                provider=PROVIDER,
                operation="generate",
                model=self.model,
            ) from e

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            raise LLMError(
                "Empty response from OpenAI",
                provider=PROVIDER,
                operation="generate",
                model=self.model,
            )
        return normalize_output(content, self.config.strip_code_fences)
