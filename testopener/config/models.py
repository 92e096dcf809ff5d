"""Configuration models for testopener."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class SearchConfig(BaseModel):
    """Configuration for locating existing test files."""

    exclude_glob: str = Field(
        default="**/node_modules/**",
        description="Glob of paths never searched for test files",
    )

    exclude_dirs: list[str] = Field(
        default_factory=list,
        description="Additional directory names to skip (e.g. 'vendor', '.venv')",
    )

    max_results: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum number of candidate files returned by a search",
    )

    @field_validator("exclude_dirs")
    @classmethod
    def validate_exclude_dirs(cls, v: list[str]) -> list[str]:
        """Directory names are plain names, not paths."""
        for name in v:
            if not name.strip():
                raise ValueError("exclude_dirs entries cannot be empty")
            if "/" in name or "\\" in name:
                raise ValueError(f"exclude_dirs entry must be a name, got: {name}")
        return v


class GenerationConfig(BaseModel):
    """Configuration for generating a missing test file."""

    enabled: bool = Field(
        default=True, description="Offer generation when no test file is found"
    )

    provider: Literal["openai", "anthropic"] = Field(
        default="openai", description="Text generation provider"
    )

    openai_model: str = Field(
        default="gpt-4o-mini", description="OpenAI model used for generation"
    )
    openai_base_url: str | None = Field(
        default=None, description="Custom OpenAI API base URL (optional)"
    )

    anthropic_model: str = Field(
        default="claude-sonnet-4-20250514",
        description="Anthropic model used for generation",
    )

    max_tokens: int = Field(
        default=4096, ge=100, le=128000, description="Maximum tokens in the response"
    )

    temperature: float = Field(
        default=0.1, ge=0.0, le=2.0, description="Response randomness"
    )

    timeout: float = Field(
        default=60.0, ge=5.0, le=600.0, description="Request timeout in seconds"
    )

    max_auth_retries: int | None = Field(
        default=None,
        ge=0,
        description=(
            "How many times a rejected API key may be replaced and retried "
            "within one run (null = until the user declines)"
        ),
    )

    strip_code_fences: bool = Field(
        default=True,
        description="Remove a markdown code fence wrapping the generated file",
    )

    test_suffix: str = Field(
        default=".test",
        description="Infix inserted between base name and extension of generated files",
    )

    @field_validator("test_suffix")
    @classmethod
    def validate_test_suffix(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v:
            raise ValueError("test_suffix must be a non-empty file name fragment")
        return v


class CredentialsConfig(BaseModel):
    """Configuration for the persisted API credential."""

    setting_key: str = Field(
        default="api_key", description="Settings key the credential is stored under"
    )


class UIConfig(BaseModel):
    """Configuration for user interface behavior."""

    style: Literal["classic", "minimal"] = Field(
        default="classic", description="Console output style"
    )

    viewer: Literal["console", "editor"] = Field(
        default="console",
        description="Show documents in the console or open them in $EDITOR",
    )


class LoggingConfig(BaseModel):
    """Configuration for logging behavior."""

    suppress_modules: list[str] = Field(
        default=["asyncio", "httpx", "httpcore", "openai", "anthropic"],
        description="External library modules to suppress debug logs from in non-verbose mode",
    )


class TestOpenerConfig(BaseModel):
    """Main configuration model for testopener."""

    search: SearchConfig = Field(
        default_factory=SearchConfig, description="Test file search settings"
    )

    generation: GenerationConfig = Field(
        default_factory=GenerationConfig, description="Test generation settings"
    )

    credentials: CredentialsConfig = Field(
        default_factory=CredentialsConfig, description="Credential storage settings"
    )

    ui: UIConfig = Field(default_factory=UIConfig, description="UI settings")

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging behavior configuration"
    )

    def get_nested_value(self, key_path: str, default: Any = None) -> Any:
        """Get a value by dotted path, e.g. ``generation.provider``."""
        current: Any = self
        for key in key_path.split("."):
            if isinstance(current, BaseModel) and key in type(current).model_fields:
                current = getattr(current, key)
            elif isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current
