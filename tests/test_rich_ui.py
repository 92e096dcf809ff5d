"""Tests for the Rich console UI and document viewer adapters."""

import io
from unittest.mock import patch

import pytest
from rich.console import Console

from testopener.adapters.io.document_viewer import DocumentViewer
from testopener.adapters.io.rich_cli import RichCliComponents, UIStyle
from testopener.adapters.io.ui_rich import RichUIAdapter
from testopener.domain.models import Document, PickItem
from testopener.ports.document_port import DocumentError


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, force_terminal=False)


@pytest.fixture
def ui(console):
    return RichUIAdapter(console, ui_style=UIStyle.MINIMAL)


def output(console):
    return console.file.getvalue()


class TestRichUIAdapter:
    def test_messages_are_printed_escaped(self, ui, console):
        ui.show_info("No test files found for [bold]Foo.ts")
        ui.show_error("Failed to generate test file.")
        text = output(console)
        assert "No test files found for [bold]Foo.ts" in text
        assert "Failed to generate test file." in text

    @pytest.mark.asyncio
    async def test_confirm(self, ui):
        with patch.object(ui.rich_cli, "get_user_confirmation", return_value=True) as ask:
            assert await ui.confirm("Generate one?") is True
        ask.assert_called_once_with("Generate one?", False)

    @pytest.mark.asyncio
    async def test_assume_yes_skips_prompt(self, console):
        ui = RichUIAdapter(console, assume_yes=True)
        with patch.object(ui.rich_cli, "get_user_confirmation") as ask:
            assert await ui.confirm("Generate one?") is True
        ask.assert_not_called()

    @pytest.mark.asyncio
    async def test_prompt_text_is_secret(self, ui):
        with patch.object(ui.rich_cli, "get_user_input", return_value="sk-1") as ask:
            assert await ui.prompt_text("Enter your OpenAI API key", "sk-...", secret=True) == "sk-1"
        ask.assert_called_once_with("Enter your OpenAI API key (sk-...)", None, True)

    @pytest.mark.asyncio
    async def test_interrupted_prompt_yields_none(self, ui):
        with patch.object(ui.rich_cli, "get_user_input", side_effect=KeyboardInterrupt):
            assert await ui.prompt_text("Enter key") is None

    @pytest.mark.asyncio
    async def test_pick_returns_detail(self, ui, console):
        items = [PickItem(label="a.test.ts", detail="/w/a.test.ts"), PickItem(label="b.test.ts", detail="/w/b.test.ts")]
        with patch.object(ui.rich_cli, "get_choice_index", return_value=1):
            assert await ui.pick(items) == "/w/b.test.ts"
        assert "a.test.ts" in output(console)

    @pytest.mark.asyncio
    async def test_pick_cancelled(self, ui):
        items = [PickItem(label="a", detail="/a"), PickItem(label="b", detail="/b")]
        with patch.object(ui.rich_cli, "get_choice_index", return_value=None):
            assert await ui.pick(items) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("style", [UIStyle.CLASSIC, UIStyle.MINIMAL])
    async def test_injected_console_receives_theme(self, style):
        console = Console(file=io.StringIO(), width=120)
        ui = RichUIAdapter(console, ui_style=style)
        items = [PickItem(label="a.test.ts", detail="/w/a.test.ts"), PickItem(label="b.test.ts", detail="/w/b.test.ts")]

        with patch.object(ui.rich_cli, "get_choice_index", return_value=0):
            assert await ui.pick(items) == "/w/a.test.ts"
        assert console.get_style("accent") is not None


class TestDocumentViewer:
    @pytest.mark.asyncio
    async def test_open_reads_text(self, tmp_path, console):
        path = tmp_path / "Foo.test.ts"
        path.write_text("it('works')")
        viewer = DocumentViewer(RichCliComponents(console))

        document = await viewer.open(str(path))

        assert document.text == "it('works')"
        assert document.path == str(path.resolve())

    @pytest.mark.asyncio
    async def test_open_keeps_line_endings(self, tmp_path, console):
        path = tmp_path / "Foo.cs"
        path.write_bytes(b"class Foo {\r\n}\r\n")
        viewer = DocumentViewer(RichCliComponents(console))

        document = await viewer.open(str(path))

        assert document.text == "class Foo {\r\n}\r\n"

    @pytest.mark.asyncio
    async def test_open_missing_file(self, tmp_path, console):
        viewer = DocumentViewer(RichCliComponents(console))
        with pytest.raises(DocumentError):
            await viewer.open(str(tmp_path / "missing.ts"))

    @pytest.mark.asyncio
    async def test_open_binary_file(self, tmp_path, console):
        path = tmp_path / "blob.py"
        path.write_bytes(b"\xff\xfe\x00\x81")
        viewer = DocumentViewer(RichCliComponents(console))
        with pytest.raises(DocumentError):
            await viewer.open(str(path))

    @pytest.mark.asyncio
    async def test_show_in_console(self, console):
        viewer = DocumentViewer(RichCliComponents(console, style=UIStyle.MINIMAL))
        await viewer.show(Document(path="/w/test_foo.py", text="def test_foo():\n    pass\n"))
        text = output(console)
        assert "test_foo.py" in text
        assert "def test_foo" in text

    @pytest.mark.asyncio
    async def test_show_in_editor(self, console):
        viewer = DocumentViewer(RichCliComponents(console), viewer="editor")
        with patch("testopener.adapters.io.document_viewer.click.edit") as edit:
            await viewer.show(Document(path="/w/test_foo.py", text=""))
        edit.assert_called_once_with(filename="/w/test_foo.py")
