"""
Domain models for the testopener system.

This module contains the core domain models using Pydantic for validation.
They describe the implementation file being worked on, the test files found
for it, and the request/result pair of a test generation run.
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


class TestOpenerError(Exception):
    """Base exception for testopener domain errors."""

    pass


class ImplementationFileIdentity(BaseModel):
    """
    Identity of the implementation file a command was invoked for.

    Built once per invocation from an explicit path and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    base_name: str = Field(..., description="File name without its extension")
    extension: str = Field(
        ..., description="Extension including the leading dot, or empty"
    )
    absolute_path: str = Field(..., description="Absolute path to the file")

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Extensions are either empty or start with a dot."""
        if v and not v.startswith("."):
            raise ValueError("Extension must start with '.'")
        return v

    @classmethod
    def from_path(cls, path: str | Path) -> "ImplementationFileIdentity":
        """Create an identity from a file path (relative paths are resolved)."""
        resolved = Path(path).expanduser().resolve()
        return cls(
            base_name=resolved.stem,
            extension=resolved.suffix,
            absolute_path=str(resolved),
        )

    @property
    def file_name(self) -> str:
        """Base name and extension, e.g. ``Foo.ts``."""
        return f"{self.base_name}{self.extension}"

    @property
    def directory(self) -> Path:
        return Path(self.absolute_path).parent


class TestFileCandidate(BaseModel):
    """A single search hit that may be the test file for an implementation."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Absolute path of the located file")
    display_name: str = Field(..., description="Name shown to the user")

    @classmethod
    def from_path(cls, path: str) -> "TestFileCandidate":
        return cls(path=path, display_name=Path(path).name)


class PickItem(BaseModel):
    """Row offered to a single-choice picker."""

    model_config = ConfigDict(frozen=True)

    label: str
    detail: str


class Document(BaseModel):
    """An opened text document."""

    model_config = ConfigDict(frozen=True)

    path: str
    text: str


class GenerationRequest(BaseModel):
    """
    One-shot request to the text generation service.

    The credential is held as a SecretStr so it never shows up in reprs or
    log lines that happen to format the request.
    """

    model_config = ConfigDict(frozen=True)

    extension: str
    source_content: str
    credential: SecretStr


class GeneratedTestFile(BaseModel):
    """Test file produced by a successful generation call."""

    model_config = ConfigDict(frozen=True)

    target_path: str
    content: str

    @classmethod
    def for_identity(
        cls,
        identity: ImplementationFileIdentity,
        content: str,
        test_suffix: str = ".test",
    ) -> "GeneratedTestFile":
        """Place the file next to the implementation as ``<base><suffix><ext>``."""
        target = identity.directory / f"{identity.base_name}{test_suffix}{identity.extension}"
        return cls(target_path=str(target), content=content)


class OpenOutcome(str, Enum):
    """Terminal states of an open-or-generate invocation."""

    OPENED = "opened"
    UNSUPPORTED = "unsupported"
    NOT_FOUND = "not_found"
    CANCELLED = "cancelled"
    GENERATED = "generated"
    DECLINED = "declined"
    ABORTED = "aborted"
    FAILED = "failed"

    @property
    def is_error(self) -> bool:
        return self in (OpenOutcome.UNSUPPORTED, OpenOutcome.NOT_FOUND, OpenOutcome.FAILED)


class OpenTestResult(BaseModel):
    """Result of running the open-or-generate action."""

    model_config = ConfigDict(frozen=True)

    outcome: OpenOutcome
    path: str | None = Field(None, description="File opened or written, if any")
    message: str | None = Field(None, description="Message shown to the user")
