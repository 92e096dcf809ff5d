"""Credential management for the test generation service."""

import logging

from pydantic import SecretStr

from ..ports.settings_port import SettingsPort
from ..ports.ui_port import UIPort

logger = logging.getLogger(__name__)


PROVIDER_LABELS = {
    "openai": ("OpenAI", "sk-..."),
    "anthropic": ("Anthropic", "sk-ant-..."),
}


class CredentialManager:
    """
    Owns the lifecycle of the generation service API key.

    The key lives in persisted settings (global scope unless a workspace pins
    its own) so it survives across sessions. It is fetched without prompting,
    prompted for when absent, and replaced when the service rejects it. There is no expiry: a stored key is
    trusted until the service says otherwise.
    """

    def __init__(
        self,
        settings: SettingsPort,
        ui: UIPort,
        setting_key: str = "api_key",
        provider: str = "openai",
    ) -> None:
        """Initialize credential manager.

        Args:
            settings: Persisted settings store holding the key
            ui: UI used to prompt for a missing or rejected key
            setting_key: Settings key the credential is stored under
            provider: Provider name, used for prompt wording only
        """
        self.settings = settings
        self.ui = ui
        self.setting_key = setting_key
        self.provider_label, self.placeholder = PROVIDER_LABELS.get(
            provider, (provider, None)
        )

    def get(self) -> str | None:
        """Return the persisted credential, or None. Never prompts."""
        value = self.settings.read(self.setting_key)
        if value is None or not value.strip():
            return None
        return value.strip()

    async def ensure(self) -> str | None:
        """
        Return the persisted credential, prompting for one if absent.

        A non-empty answer is persisted before it is returned. An empty or
        cancelled prompt returns None and persists nothing.
        """
        existing = self.get()
        if existing is not None:
            return existing

        logger.debug("No persisted credential, prompting")
        supplied = await self._prompt(f"Enter your {self.provider_label} API key")
        if supplied is None:
            return None

        self.replace(supplied)
        return supplied

    async def reprompt(self, message: str | None = None) -> str | None:
        """
        Prompt for a replacement after the service rejected the current key.

        Returns:
            The new credential (already persisted), or None if declined
        """
        supplied = await self._prompt(
            message or f"Enter a new {self.provider_label} API key"
        )
        if supplied is None:
            return None
        self.replace(supplied)
        return supplied

    def replace(self, new_credential: str) -> None:
        """
        Persist ``new_credential`` in place of the current key, unconditionally.

        The value is written to the scope that currently supplies the key, so
        a rejected workspace key cannot keep shadowing its replacement. With no
        key stored anywhere it goes to the global scope.
        """
        scope = self.settings.scope_of(self.setting_key) or "global"
        self.settings.write(self.setting_key, new_credential, scope=scope)
        logger.debug("Credential persisted under '%s' (%s scope)", self.setting_key, scope)

    def clear(self) -> None:
        """Remove the persisted credential from every scope that holds it."""
        while (scope := self.settings.scope_of(self.setting_key)) is not None:
            self.settings.delete(self.setting_key, scope=scope)
        logger.debug("Credential cleared from '%s'", self.setting_key)

    def masked(self) -> str | None:
        """Masked preview of the stored credential for display, e.g. ``sk-...abcd``."""
        value = self.get()
        if value is None:
            return None
        return mask_secret(SecretStr(value))

    async def _prompt(self, message: str) -> str | None:
        answer = await self.ui.prompt_text(message, self.placeholder, secret=True)
        if answer is None or not answer.strip():
            return None
        return answer.strip()


def mask_secret(secret: SecretStr, visible: int = 4) -> str:
    """Show only the head and the last ``visible`` characters of a secret."""
    raw = secret.get_secret_value()
    if len(raw) <= visible * 2:
        return "*" * len(raw)
    head = raw[:3] if raw.startswith("sk-") else ""
    return f"{head}...{raw[-visible:]}"
