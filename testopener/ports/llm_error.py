"""Unified error types for text generation provider failures.

This module defines `LLMError`, a provider-agnostic exception that all
generation adapters raise at their public boundary, and
`LLMAuthenticationError` for a rejected credential. The original provider
exception is preserved via exception chaining (``from e``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class LLMError(Exception):
    """Provider-agnostic generation error with normalized context.

    Attributes:
        message: Human-friendly error summary. Never contains the credential.
        provider: Provider key (e.g., "openai", "anthropic").
        operation: High-level operation (e.g., "generate").
        model: The model identifier used for the request.
        status_code: Optional HTTP/status code if available.
        metadata: Additional structured details (request ids, etc.).
    """

    message: str
    provider: str | None = None
    operation: str | None = None
    model: str | None = None
    status_code: int | None = None
    metadata: Mapping[str, Any] | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        parts: list[str] = []
        if self.provider:
            parts.append(f"provider={self.provider}")
        if self.operation:
            parts.append(f"op={self.operation}")
        if self.model:
            parts.append(f"model={self.model}")
        if self.status_code is not None:
            parts.append(f"status={self.status_code}")
        ctx = (" ".join(parts)) if parts else ""
        if ctx:
            return f"{type(self).__name__}({ctx}): {self.message}"
        return f"{type(self).__name__}: {self.message}"


@dataclass
class LLMAuthenticationError(LLMError):
    """The provider rejected the credential (HTTP 401 or equivalent)."""

    status_code: int | None = 401
