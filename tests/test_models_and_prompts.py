"""Tests for domain models, prompt building and logging setup."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError
from rich.logging import RichHandler

from testopener.adapters.io.enhanced_logging import LoggerManager, setup_enhanced_logging
from testopener.domain.models import (
    GeneratedTestFile,
    GenerationRequest,
    ImplementationFileIdentity,
    OpenOutcome,
)
from testopener.prompts.registry import generation_instruction


class TestImplementationFileIdentity:
    def test_from_relative_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        identity = ImplementationFileIdentity.from_path("src/Widget.tsx")
        assert identity.base_name == "Widget"
        assert identity.extension == ".tsx"
        assert Path(identity.absolute_path) == (tmp_path / "src" / "Widget.tsx").resolve()
        assert identity.file_name == "Widget.tsx"

    def test_no_extension(self, tmp_path):
        identity = ImplementationFileIdentity.from_path(tmp_path / "Makefile")
        assert identity.extension == ""

    def test_extension_must_have_dot(self):
        with pytest.raises(ValidationError):
            ImplementationFileIdentity(base_name="a", extension="py", absolute_path="/a.py")

    def test_frozen(self, tmp_path):
        identity = ImplementationFileIdentity.from_path(tmp_path / "a.py")
        with pytest.raises(ValidationError):
            identity.base_name = "b"


class TestGeneratedTestFile:
    def test_target_sits_beside_implementation(self, tmp_path):
        identity = ImplementationFileIdentity.from_path(tmp_path / "Foo.ts")
        generated = GeneratedTestFile.for_identity(identity, "body")
        assert generated.target_path == str(tmp_path.resolve() / "Foo.test.ts")

    def test_python_keeps_test_infix(self, tmp_path):
        identity = ImplementationFileIdentity.from_path(tmp_path / "foo.py")
        generated = GeneratedTestFile.for_identity(identity, "body")
        assert Path(generated.target_path).name == "foo.test.py"


def test_generation_request_hides_credential():
    request = GenerationRequest(extension=".ts", source_content="x", credential="sk-hidden")
    assert "sk-hidden" not in repr(request)
    assert request.credential.get_secret_value() == "sk-hidden"


@pytest.mark.parametrize(
    "outcome, is_error",
    [
        (OpenOutcome.OPENED, False),
        (OpenOutcome.GENERATED, False),
        (OpenOutcome.CANCELLED, False),
        (OpenOutcome.DECLINED, False),
        (OpenOutcome.ABORTED, False),
        (OpenOutcome.UNSUPPORTED, True),
        (OpenOutcome.NOT_FOUND, True),
        (OpenOutcome.FAILED, True),
    ],
)
def test_outcome_exit_status(outcome, is_error):
    assert outcome.is_error is is_error


class TestPrompts:
    def test_instruction_names_extension_and_framework(self):
        instruction = generation_instruction(".py")
        assert ".py" in instruction
        assert "pytest" in instruction
        assert "no commentary" in instruction

    def test_unknown_extension_falls_back(self):
        assert "conventional test framework" in generation_instruction(".zig")


class TestLogging:
    def test_setup_is_idempotent(self):
        LoggerManager.reset()
        try:
            setup_enhanced_logging()
            setup_enhanced_logging()
            handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
            assert len(handlers) == 1
        finally:
            LoggerManager.reset()

    def test_verbosity_levels(self):
        root = logging.getLogger()
        original = root.level
        try:
            assert LoggerManager.set_verbosity(verbose=True) == logging.DEBUG
            assert LoggerManager.set_verbosity(quiet=True, verbose=True) == logging.WARNING
            LoggerManager.set_verbosity(suppress_modules=["httpx"])
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            root.setLevel(original)
