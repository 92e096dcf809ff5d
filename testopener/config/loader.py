"""
Configuration loader for testopener.

Configuration is layered, later sources overriding earlier ones per field:

1. a project file (``.testopener.toml``, ``.testopener.yml``/``.yaml`` or
   ``testopener.toml`` in the workspace, or an explicit ``--config`` path)
2. environment variables named ``TESTOPENER_<SECTION>__<FIELD>``
3. overrides from command line flags
"""

import logging
import os
import tomllib
import typing
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from .models import TestOpenerConfig

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


Sections = dict[str, Any]


def _layer(base: Sections, updates: Mapping[str, Any]) -> Sections:
    """Overlay ``updates`` onto ``base`` field by field within each section."""
    for section, values in updates.items():
        current = base.get(section)
        if isinstance(current, dict) and isinstance(values, Mapping):
            base[section] = {**current, **values}
        else:
            base[section] = values
    return base


def _section_model(section: str) -> type[BaseModel] | None:
    field = TestOpenerConfig.model_fields.get(section)
    if field is None or not isinstance(field.annotation, type):
        return None
    if not issubclass(field.annotation, BaseModel):
        return None
    return field.annotation


class ConfigLoader:
    """Builds a validated TestOpenerConfig from file, environment and CLI."""

    CONFIG_FILENAMES = (
        ".testopener.toml",
        ".testopener.yml",
        ".testopener.yaml",
        "testopener.toml",
    )

    ENV_PREFIX = "TESTOPENER_"

    def __init__(
        self,
        config_file: str | Path | None = None,
        search_dir: str | Path | None = None,
    ):
        """Initialize the configuration loader.

        Args:
            config_file: Explicit configuration file; it must exist
            search_dir: Directory searched for a project file (defaults to the
                current directory)
        """
        self.config_file = Path(config_file) if config_file else None
        self.search_dir = Path(search_dir) if search_dir else Path.cwd()
        self._config_cache: TestOpenerConfig | None = None

    def load_config(
        self,
        cli_overrides: Mapping[str, Any] | None = None,
        reload: bool = False,
    ) -> TestOpenerConfig:
        """Load and validate configuration from every source.

        Args:
            cli_overrides: Section/field values taken from command line flags
            reload: Ignore the cached result of an earlier call

        Raises:
            ConfigurationError: If a file cannot be parsed or a value is invalid
        """
        if self._config_cache is not None and not reload:
            return self._config_cache

        sections: Sections = {}
        path = self.find_config_file()
        if path is not None:
            _layer(sections, self._read_file(path))
            logger.debug(f"Loaded configuration from {path}")

        env_sections = self._read_environment(os.environ)
        if env_sections:
            _layer(sections, env_sections)
            logger.debug(
                "Applied environment overrides for: %s", ", ".join(sorted(env_sections))
            )

        if cli_overrides:
            _layer(sections, cli_overrides)

        try:
            self._config_cache = TestOpenerConfig.model_validate(sections)
        except ValidationError as e:
            error_msg = f"Configuration validation failed: {e}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg) from e

        return self._config_cache

    def find_config_file(self) -> Path | None:
        """Return the configuration file in effect, or None to use defaults."""
        if self.config_file is not None:
            if not self.config_file.is_file():
                raise ConfigurationError(f"Configuration file not found: {self.config_file}")
            return self.config_file

        for filename in self.CONFIG_FILENAMES:
            candidate = self.search_dir / filename
            if candidate.is_file():
                return candidate
        return None

    def _read_file(self, path: Path) -> Mapping[str, Any]:
        suffix = path.suffix.lower()
        try:
            if suffix == ".toml":
                with open(path, "rb") as f:
                    content = tomllib.load(f)
            elif suffix in (".yml", ".yaml"):
                with open(path, encoding="utf-8") as f:
                    content = yaml.safe_load(f) or {}
            else:
                raise ConfigurationError(
                    f"Unsupported configuration file type '{suffix}': {path}"
                )
        except (tomllib.TOMLDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Failed to read {path}: {e}") from e

        if not isinstance(content, Mapping):
            raise ConfigurationError(f"Configuration in {path} must be a mapping")
        return content

    def _read_environment(self, environ: Mapping[str, str]) -> Sections:
        """
        Collect ``TESTOPENER_<SECTION>__<FIELD>`` variables into sections.

        Values stay strings so pydantic applies the field's own coercion; only
        list fields are split on commas. Variables naming no known field are
        ignored with a warning.
        """
        sections: Sections = {}
        for name, raw in environ.items():
            if not name.startswith(self.ENV_PREFIX):
                continue

            parts = name[len(self.ENV_PREFIX) :].lower().split("__")
            model = _section_model(parts[0]) if len(parts) == 2 else None
            field = model.model_fields.get(parts[1]) if model is not None else None
            if field is None:
                logger.warning(f"Ignoring {name}: expected {self.ENV_PREFIX}<SECTION>__<FIELD>")
                continue

            section, key = parts
            sections.setdefault(section, {})[key] = self._env_value(raw, field.annotation)
        return sections

    @staticmethod
    def _env_value(raw: str, annotation: Any) -> Any:
        if typing.get_origin(annotation) is list:
            return [item.strip() for item in raw.split(",") if item.strip()]
        if type(None) in typing.get_args(annotation) and raw.strip().lower() in ("", "none", "null"):
            return None
        return raw
