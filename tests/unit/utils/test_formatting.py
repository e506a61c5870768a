"""Unit tests for Rich console helpers."""

import io
import os

import pytest
from rich.console import Console
from rmexcept.core.theme import get_theme
from rmexcept.utils import formatting


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch) -> tuple[io.StringIO, io.StringIO]:
    """Swap both shared consoles for plain in-memory consoles."""
    out, err = io.StringIO(), io.StringIO()
    monkeypatch.setattr(
        formatting, "console", Console(file=out, theme=get_theme(), width=40, color_system=None)
    )
    monkeypatch.setattr(
        formatting,
        "err_console",
        Console(file=err, theme=get_theme(), width=40, color_system=None),
    )
    return out, err


class TestMessageHelpers:
    """Tests for the print_* helpers."""

    def test_info_goes_to_stdout(self, captured: tuple[io.StringIO, io.StringIO]) -> None:
        """print_info writes to stdout."""
        out, err = captured
        formatting.print_info("hello")

        assert out.getvalue() == "hello\n"
        assert err.getvalue() == ""

    def test_error_goes_to_stderr(self, captured: tuple[io.StringIO, io.StringIO]) -> None:
        """print_error writes a prefixed message to stderr."""
        out, err = captured
        formatting.print_error("boom")

        assert err.getvalue() == "Error: boom\n"
        assert out.getvalue() == ""

    def test_warning_goes_to_stderr(self, captured: tuple[io.StringIO, io.StringIO]) -> None:
        """print_warning writes a prefixed message to stderr."""
        _, err = captured
        formatting.print_warning("careful")

        assert err.getvalue() == "Warning: careful\n"

    def test_markup_is_escaped(self, captured: tuple[io.StringIO, io.StringIO]) -> None:
        """Paths containing brackets are printed literally."""
        out, _ = captured
        formatting.print_success("removed [red]x")

        assert out.getvalue() == "removed [red]x\n"

    def test_entry_lines_do_not_wrap(self, captured: tuple[io.StringIO, io.StringIO]) -> None:
        """Long entry lines stay on one line."""
        out, _ = captured
        line = 'Deleting entry "/' + "x" * 80 + '"'
        formatting.print_entry(line)

        assert out.getvalue() == line + "\n"

    def test_undecodable_name_is_escaped(self, captured: tuple[io.StringIO, io.StringIO]) -> None:
        """Lone surrogates from undecodable file names are shown as escapes."""
        out, err = captured
        name = os.fsdecode(b"bad\xffname")

        formatting.print_entry(f'Deleting entry "{name}"')
        formatting.print_warning(f"Skipped {name}")

        assert out.getvalue() == 'Deleting entry "bad\\xffname"\n'
        assert err.getvalue() == "Warning: Skipped bad\\xffname\n"


class TestPrintable:
    """Tests for printable."""

    def test_plain_text_unchanged(self) -> None:
        """Valid text passes through untouched."""
        assert formatting.printable("café/ü.txt") == "café/ü.txt"

    def test_surrogates_become_escapes(self) -> None:
        """Each undecodable byte becomes one backslash escape."""
        text = formatting.printable("a\udcff\udcfeb")

        assert text == "a\\xff\\xfeb"
        text.encode("utf-8")
