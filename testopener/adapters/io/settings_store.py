"""
Persisted settings store backed by TOML files.

Two scopes are supported:
- global: one file in the user's application directory
  (``click.get_app_dir("testopener")/settings.toml``), shared by all projects
- workspace: ``<workspace>/.testopener/settings.toml``

Reads check the workspace scope first, then the global scope. Writes replace
the file atomically, and the global file is created with owner-only
permissions because it holds the API key.
"""

import logging
import os
import tempfile
import tomllib
from pathlib import Path
from typing import Any

import click
import tomli_w

from ...ports.settings_port import SettingsError, SettingsScope

logger = logging.getLogger(__name__)

APP_NAME = "testopener"
SETTINGS_FILENAME = "settings.toml"


def default_global_path() -> Path:
    """Location of the global settings file for the current user."""
    return Path(click.get_app_dir(APP_NAME)) / SETTINGS_FILENAME


class TomlSettingsStore:
    """SettingsPort implementation persisting flat string keys to TOML."""

    def __init__(
        self,
        global_path: str | Path | None = None,
        workspace_root: str | Path | None = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            global_path: Global settings file (defaults to the user app dir)
            workspace_root: Workspace whose ``.testopener/settings.toml`` is
                consulted first; None disables the workspace scope
        """
        self.global_path = Path(global_path) if global_path else default_global_path()
        self.workspace_path = (
            Path(workspace_root) / f".{APP_NAME}" / SETTINGS_FILENAME
            if workspace_root
            else None
        )

    def read(self, key: str) -> str | None:
        scope = self.scope_of(key)
        if scope is None:
            return None
        return str(self._load(self._path_for(scope))[key])

    def scope_of(self, key: str) -> SettingsScope | None:
        for scope in self._read_order():
            if self._load(self._path_for(scope)).get(key) is not None:
                return scope
        return None

    def write(self, key: str, value: str, scope: SettingsScope = "global") -> None:
        path = self._path_for(scope)
        data = self._load(path)
        data[key] = value
        self._dump(path, data)
        logger.debug(f"Setting '{key}' written to {scope} scope")

    def delete(self, key: str, scope: SettingsScope = "global") -> None:
        path = self._path_for(scope)
        data = self._load(path)
        if key not in data:
            return
        del data[key]
        self._dump(path, data)
        logger.debug(f"Setting '{key}' removed from {scope} scope")

    def _read_order(self) -> list[SettingsScope]:
        if self.workspace_path is not None:
            return ["workspace", "global"]
        return ["global"]

    def _path_for(self, scope: SettingsScope) -> Path:
        if scope == "global":
            return self.global_path
        if scope == "workspace":
            if self.workspace_path is None:
                raise SettingsError("No workspace is configured for workspace settings")
            return self.workspace_path
        raise SettingsError(f"Unknown settings scope: {scope}")

    def _load(self, path: Path) -> dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise SettingsError(f"Invalid TOML in {path}: {e}") from e
        except OSError as e:
            raise SettingsError(f"Failed to read {path}: {e}") from e

    def _dump(self, path: Path, data: dict[str, Any]) -> None:
        """Write ``data`` to a temporary sibling and move it into place."""
        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
            )
            with os.fdopen(fd, "wb") as f:
                tomli_w.dump(data, f)
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            raise SettingsError(f"Failed to write {path}: {e}") from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
