"""Tests for the TOML settings store."""

import os
import stat
import sys

import pytest

from testopener.adapters.io import settings_store
from testopener.adapters.io.settings_store import TomlSettingsStore
from testopener.ports.settings_port import SettingsError


@pytest.fixture
def store(tmp_path):
    return TomlSettingsStore(
        global_path=tmp_path / "config" / "settings.toml",
        workspace_root=tmp_path / "project",
    )


class TestTomlSettingsStore:
    def test_missing_file_reads_none(self, store):
        assert store.read("api_key") is None

    def test_write_then_read_global(self, store, tmp_path):
        store.write("api_key", "sk-123")
        assert store.read("api_key") == "sk-123"
        assert (tmp_path / "config" / "settings.toml").read_text().strip() == 'api_key = "sk-123"'

    def test_workspace_scope_shadows_global(self, store, tmp_path):
        store.write("api_key", "sk-global")
        store.write("api_key", "sk-workspace", scope="workspace")
        assert store.read("api_key") == "sk-workspace"
        assert (tmp_path / "project" / ".testopener" / "settings.toml").exists()

    def test_other_keys_survive_a_write(self, store):
        store.write("other", "value")
        store.write("api_key", "sk-1")
        assert store.read("other") == "value"

    def test_scope_of(self, store):
        assert store.scope_of("api_key") is None
        store.write("api_key", "sk-global")
        assert store.scope_of("api_key") == "global"
        store.write("api_key", "sk-workspace", scope="workspace")
        assert store.scope_of("api_key") == "workspace"
        store.delete("api_key", scope="workspace")
        assert store.scope_of("api_key") == "global"

    def test_delete(self, store):
        store.write("api_key", "sk-1")
        store.delete("api_key")
        assert store.read("api_key") is None
        # deleting again is a no-op
        store.delete("api_key")

    def test_no_workspace_configured(self, tmp_path):
        store = TomlSettingsStore(global_path=tmp_path / "settings.toml")
        with pytest.raises(SettingsError):
            store.write("api_key", "x", scope="workspace")

    def test_unknown_scope(self, store):
        with pytest.raises(SettingsError):
            store.write("api_key", "x", scope="project")

    def test_invalid_toml(self, store, tmp_path):
        path = tmp_path / "config" / "settings.toml"
        path.parent.mkdir(parents=True)
        path.write_text("api_key = ")
        with pytest.raises(SettingsError):
            store.read("api_key")

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_file_is_private(self, store, tmp_path):
        store.write("api_key", "sk-1")
        mode = os.stat(tmp_path / "config" / "settings.toml").st_mode
        assert stat.S_IMODE(mode) == 0o600

    def test_no_temp_files_left_behind(self, store, tmp_path):
        store.write("api_key", "sk-1")
        assert [p.name for p in (tmp_path / "config").iterdir()] == ["settings.toml"]

    def test_default_global_path_uses_app_dir(self, monkeypatch, tmp_path):
        monkeypatch.setattr(
            settings_store.click, "get_app_dir", lambda name: str(tmp_path / name)
        )
        assert settings_store.default_global_path() == tmp_path / "testopener" / "settings.toml"
