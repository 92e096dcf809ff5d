"""Text generation adapters."""

from .claude import ClaudeAdapter
from .common import normalize_output, strip_code_fences
from .openai import OpenAIAdapter
from .router import create_llm_adapter

__all__ = [
    "ClaudeAdapter",
    "OpenAIAdapter",
    "create_llm_adapter",
    "normalize_output",
    "strip_code_fences",
]
