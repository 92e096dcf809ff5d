"""Tests for the API key lifecycle."""

import pytest
from pydantic import SecretStr

from testopener.config.credentials import CredentialManager, mask_secret


class TestGet:
    def test_absent(self, credentials):
        assert credentials.get() is None

    def test_blank_counts_as_absent(self, fake_settings, credentials):
        fake_settings.scopes["global"]["api_key"] = "   "
        assert credentials.get() is None

    def test_custom_setting_key(self, fake_settings, fake_ui):
        fake_settings.scopes["global"]["openai_key"] = "sk-custom"
        manager = CredentialManager(fake_settings, fake_ui, setting_key="openai_key")
        assert manager.get() == "sk-custom"


class TestEnsure:
    @pytest.mark.asyncio
    async def test_persisted_value_never_prompts(self, fake_settings, fake_ui, credentials):
        fake_settings.scopes["global"]["api_key"] = "sk-stored"

        assert await credentials.ensure() == "sk-stored"
        assert fake_ui.prompt_calls == []
        assert fake_settings.writes == []

    @pytest.mark.asyncio
    async def test_prompts_and_persists_answer(self, fake_settings, fake_ui, credentials):
        fake_ui.prompt_answers = ["  sk-new  "]

        assert await credentials.ensure() == "sk-new"
        assert fake_settings.writes == [("api_key", "sk-new", "global")]
        message, placeholder, secret = fake_ui.prompt_calls[0]
        assert "API key" in message
        assert placeholder == "sk-..."
        assert secret is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("answer", ["", "   ", None])
    async def test_empty_or_cancelled_persists_nothing(
        self, fake_settings, fake_ui, credentials, answer
    ):
        fake_ui.prompt_answers = [answer]

        assert await credentials.ensure() is None
        assert fake_settings.writes == []
        assert fake_settings.read("api_key") is None


class TestReplaceAndReprompt:
    def test_replace_is_unconditional(self, fake_settings, credentials):
        credentials.replace("sk-one")
        credentials.replace("sk-two")
        assert fake_settings.read("api_key") == "sk-two"
        assert all(scope == "global" for _, _, scope in fake_settings.writes)

    @pytest.mark.asyncio
    async def test_reprompt_replaces(self, fake_settings, fake_ui, credentials):
        fake_settings.scopes["global"]["api_key"] = "sk-old"
        fake_ui.prompt_answers = ["sk-new"]

        assert await credentials.reprompt() == "sk-new"
        assert fake_settings.read("api_key") == "sk-new"
        assert "new" in fake_ui.prompt_calls[0][0]

    @pytest.mark.asyncio
    async def test_reprompt_declined_keeps_old_value(self, fake_settings, fake_ui, credentials):
        fake_settings.scopes["global"]["api_key"] = "sk-old"
        fake_ui.prompt_answers = [None]

        assert await credentials.reprompt() is None
        assert fake_settings.read("api_key") == "sk-old"

    def test_clear(self, fake_settings, credentials):
        credentials.replace("sk-one")
        credentials.clear()
        assert credentials.get() is None

    def test_replace_overwrites_the_scope_supplying_the_key(self, fake_settings, credentials):
        fake_settings.scopes["global"]["api_key"] = "sk-global"
        fake_settings.scopes["workspace"]["api_key"] = "sk-pinned"

        credentials.replace("sk-fresh")

        assert credentials.get() == "sk-fresh"
        assert fake_settings.writes == [("api_key", "sk-fresh", "workspace")]
        assert fake_settings.scopes["global"]["api_key"] == "sk-global"

    def test_clear_removes_every_scope(self, fake_settings, credentials):
        fake_settings.scopes["global"]["api_key"] = "sk-global"
        fake_settings.scopes["workspace"]["api_key"] = "sk-pinned"

        credentials.clear()

        assert credentials.get() is None

    def test_anthropic_prompt_wording(self, fake_settings, fake_ui):
        manager = CredentialManager(fake_settings, fake_ui, provider="anthropic")
        assert manager.provider_label == "Anthropic"
        assert manager.placeholder == "sk-ant-..."


class TestMasking:
    def test_masked_shows_tail_only(self, credentials):
        credentials.replace("sk-abcdefghijklmnop")
        assert credentials.masked() == "sk-...mnop"

    def test_masked_absent(self, credentials):
        assert credentials.masked() is None

    def test_short_secret_fully_masked(self):
        assert mask_secret(SecretStr("abc")) == "***"

    def test_non_sk_prefix_hidden(self):
        assert mask_secret(SecretStr("0123456789abcdef")) == "...cdef"
