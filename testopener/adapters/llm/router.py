"""Select the generation adapter for the configured provider."""

from __future__ import annotations

from ...config.models import GenerationConfig
from ...ports.llm_port import LLMPort
from .claude import ClaudeAdapter
from .openai import OpenAIAdapter


def create_llm_adapter(config: GenerationConfig) -> LLMPort:
    if config.provider == "anthropic":
        return ClaudeAdapter(config)
    return OpenAIAdapter(config)
