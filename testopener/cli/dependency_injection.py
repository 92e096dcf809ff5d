"""Dependency injection container for CLI commands."""

from pathlib import Path
from typing import Any

from ..adapters.io.document_viewer import DocumentViewer
from ..adapters.io.file_search import WorkspaceFileSearch
from ..adapters.io.settings_store import TomlSettingsStore
from ..adapters.io.ui_rich import RichUIAdapter
from ..adapters.io.writer import AtomicFileWriter
from ..adapters.llm.router import create_llm_adapter
from ..application.generation_orchestrator import GenerationOrchestrator
from ..application.open_test_usecase import OpenTestFileUseCase
from ..config.credentials import CredentialManager
from ..config.models import TestOpenerConfig


class DependencyError(Exception):
    """Raised when dependency injection fails."""

    pass


def create_dependency_container(
    config: TestOpenerConfig,
    ui: RichUIAdapter,
    root: Path | None = None,
    allow_generation: bool = True,
) -> dict[str, Any]:
    """
    Create a dependency injection container with all required services.

    Args:
        config: testopener configuration
        ui: Console UI shared by every service
        root: Workspace root; None leaves out the search, writer and
            workspace settings scope (enough for the ``key`` commands)
        allow_generation: False wires the use case without an orchestrator

    Returns:
        Dictionary containing all service instances

    Raises:
        DependencyError: If dependency creation fails
    """
    try:
        container: dict[str, Any] = {"config": config, "ui": ui}

        settings = TomlSettingsStore(workspace_root=root)
        container["settings"] = settings
        container["credentials"] = CredentialManager(
            settings,
            ui,
            setting_key=config.credentials.setting_key,
            provider=config.generation.provider,
        )

        if root is None:
            return container

        container["search"] = WorkspaceFileSearch(
            root, exclude_dirs=config.search.exclude_dirs
        )
        container["documents"] = DocumentViewer(ui.rich_cli, viewer=config.ui.viewer)
        container["writer"] = AtomicFileWriter(project_root=root)

        orchestrator = None
        if allow_generation and config.generation.enabled:
            container["llm"] = create_llm_adapter(config.generation)
            orchestrator = GenerationOrchestrator(
                container["llm"],
                container["credentials"],
                ui,
                container["documents"],
                container["writer"],
                config=config.generation,
            )
        container["orchestrator"] = orchestrator

        container["open_usecase"] = OpenTestFileUseCase(
            container["search"],
            ui,
            container["documents"],
            orchestrator=orchestrator,
            search_config=config.search,
        )
        return container

    except Exception as e:
        raise DependencyError(f"Failed to create dependency container: {e}") from e
