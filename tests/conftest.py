"""Global fixtures and in-memory port implementations for the testopener suite.

The fakes record every interaction so tests can assert on what the
application layer asked of its collaborators.
"""

from collections.abc import Iterable
from pathlib import Path

import pytest

from testopener.config.credentials import CredentialManager
from testopener.config.models import GenerationConfig
from testopener.domain.models import Document, PickItem
from testopener.ports.document_port import DocumentError
from testopener.ports.settings_port import SettingsError
from testopener.ports.writer_port import WriterError


class FakeUI:
    """UIPort double with scripted answers."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.errors: list[str] = []
        self.confirm_answers: list[bool] = []
        self.confirm_messages: list[str] = []
        self.prompt_answers: list[str | None] = []
        self.prompt_calls: list[tuple[str, str | None, bool]] = []
        self.pick_result: str | None = None
        self.pick_calls: list[list[PickItem]] = []

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    async def confirm(self, message: str) -> bool:
        self.confirm_messages.append(message)
        return self.confirm_answers.pop(0) if self.confirm_answers else False

    async def prompt_text(
        self, message: str, placeholder: str | None = None, secret: bool = False
    ) -> str | None:
        self.prompt_calls.append((message, placeholder, secret))
        return self.prompt_answers.pop(0) if self.prompt_answers else None

    async def pick(self, items: list[PickItem]) -> str | None:
        self.pick_calls.append(list(items))
        return self.pick_result


class FakeSettings:
    """SettingsPort double keeping both scopes in dictionaries."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.scopes: dict[str, dict[str, str]] = {
            "global": dict(values or {}),
            "workspace": {},
        }
        self.writes: list[tuple[str, str, str]] = []
        self.fail_writes = False

    def read(self, key: str) -> str | None:
        scope = self.scope_of(key)
        return None if scope is None else self.scopes[scope][key]

    def scope_of(self, key: str) -> str | None:
        for scope in ("workspace", "global"):
            if key in self.scopes[scope]:
                return scope
        return None

    def write(self, key: str, value: str, scope: str = "global") -> None:
        if self.fail_writes:
            raise SettingsError("disk full")
        self.writes.append((key, value, scope))
        self.scopes[scope][key] = value

    def delete(self, key: str, scope: str = "global") -> None:
        self.scopes[scope].pop(key, None)


class InMemoryFiles:
    """Shared file table backing FakeDocuments and FakeWriter."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})


class FakeDocuments:
    """DocumentPort double reading from an InMemoryFiles table."""

    def __init__(self, store: InMemoryFiles) -> None:
        self.store = store
        self.opened: list[str] = []
        self.shown: list[Document] = []
        self.unreadable: set[str] = set()

    async def open(self, path: str) -> Document:
        self.opened.append(path)
        if path in self.unreadable or path not in self.store.files:
            raise DocumentError(f"cannot open {path}")
        return Document(path=path, text=self.store.files[path])

    async def show(self, document: Document) -> None:
        self.shown.append(document)


class FakeWriter:
    """WriterPort double writing into an InMemoryFiles table."""

    def __init__(self, store: InMemoryFiles) -> None:
        self.store = store
        self.writes: list[tuple[str, bytes]] = []
        self.fail = False

    async def write_file(self, path: str, data: bytes) -> None:
        if self.fail:
            raise WriterError(f"cannot write {path}")
        self.writes.append((path, data))
        self.store.files[path] = data.decode("utf-8")


class FakeLLM:
    """LLMPort double returning scripted results; exceptions are raised."""

    def __init__(self, results: Iterable[object] = ()) -> None:
        self.results = list(results)
        self.calls: list[tuple[str, str, str]] = []

    async def generate(self, instruction: str, user_content: str, credential: str) -> str:
        self.calls.append((instruction, user_content, credential))
        result = self.results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result


class FakeSearch:
    """FileSearchPort double returning a fixed list of paths."""

    def __init__(self, paths: list[str] | None = None, error: Exception | None = None) -> None:
        self.paths = list(paths or [])
        self.error = error
        self.calls: list[tuple[str, str | None, int]] = []

    async def search(
        self, glob_pattern: str, exclude_glob: str | None, max_results: int
    ) -> list[str]:
        self.calls.append((glob_pattern, exclude_glob, max_results))
        if self.error is not None:
            raise self.error
        return self.paths[:max_results]


IMPLEMENTATION_PATH = str(Path("/work/src/Foo.ts").resolve())
IMPLEMENTATION_SOURCE = "export function foo(): number {\n  return 1;\n}\n"


@pytest.fixture
def fake_ui():
    return FakeUI()


@pytest.fixture
def fake_settings():
    return FakeSettings()


@pytest.fixture
def file_store():
    return InMemoryFiles({IMPLEMENTATION_PATH: IMPLEMENTATION_SOURCE})


@pytest.fixture
def fake_documents(file_store):
    return FakeDocuments(file_store)


@pytest.fixture
def fake_writer(file_store):
    return FakeWriter(file_store)


@pytest.fixture
def credentials(fake_settings, fake_ui):
    return CredentialManager(fake_settings, fake_ui)


@pytest.fixture
def generation_config():
    return GenerationConfig()
