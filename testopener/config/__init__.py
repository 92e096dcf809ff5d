"""Configuration management for testopener."""

from .credentials import CredentialManager, mask_secret
from .loader import ConfigLoader, ConfigurationError
from .models import (
    CredentialsConfig,
    GenerationConfig,
    LoggingConfig,
    SearchConfig,
    TestOpenerConfig,
    UIConfig,
)

__all__ = [
    "TestOpenerConfig",
    "SearchConfig",
    "GenerationConfig",
    "CredentialsConfig",
    "UIConfig",
    "LoggingConfig",
    "ConfigLoader",
    "ConfigurationError",
    "CredentialManager",
    "mask_secret",
]
