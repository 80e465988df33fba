from __future__ import annotations

import os
import sys
from typing import Generator
from unittest.mock import patch

import pytest
from rich.text import Text
from rich.console import Console

import tagkeeper.utils.console as console_module
from tagkeeper.utils.console import (
    TAGKEEPER_THEME,
    _get_console,
    _should_use_color,
    colorize_tag_kind,
    print_error,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
)


@pytest.fixture(autouse=True)
def reset_console() -> Generator[None, None, None]:
    """Clear the console singleton before and after each test."""
    reconfigure_console()
    yield
    reconfigure_console()


@pytest.fixture
def recording_console() -> Console:
    """Install a recording console in place of the singleton."""
    console = Console(theme=TAGKEEPER_THEME, record=True, width=120, no_color=True)
    console_module._console = console
    return console


@pytest.mark.unit
class TestConsoleLifecycle:
    """Tests for singleton creation and reset."""

    def test_singleton(self) -> None:
        assert _get_console() is _get_console()

    def test_reconfigure_creates_new_instance(self) -> None:
        first = _get_console()
        reconfigure_console()

        assert _get_console() is not first

    def test_no_color_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")

        assert _should_use_color() is False
        assert _get_console().no_color is True

    def test_color_disabled_explicitly(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("CI", raising=False)
        reconfigure_console(use_color=False)

        with patch.object(sys.stdout, "isatty", return_value=True):
            assert _get_console().no_color is True
        assert "NO_COLOR" not in os.environ

    def test_reconfigure_restores_auto_detection(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("CI", raising=False)
        reconfigure_console(use_color=False)
        reconfigure_console()

        with patch.object(sys.stdout, "isatty", return_value=True):
            assert _get_console().no_color is False

    def test_ci_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("CI", "true")

        assert _should_use_color() is False

    def test_tty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("CI", raising=False)

        with patch.object(sys.stdout, "isatty", return_value=True):
            assert _should_use_color() is True


@pytest.mark.unit
class TestStatusMessages:
    """Tests for print_success / print_error / print_warning."""

    def test_print_success(self, recording_console: Console) -> None:
        print_success("v0.3.0 accepted")

        assert recording_console.export_text() == "[OK] v0.3.0 accepted\n"

    def test_print_error(self, recording_console: Console) -> None:
        print_error("Version downgrade detected")

        assert recording_console.export_text() == "[ERROR] Version downgrade detected\n"

    def test_print_warning_custom_prefix(self, recording_console: Console) -> None:
        print_warning("careful", prefix="!!")

        assert recording_console.export_text() == "!! careful\n"

    def test_brackets_are_not_markup(self, recording_console: Console) -> None:
        print_error("[bold]tag[/bold]")

        assert "[bold]tag[/bold]" in recording_console.export_text()


@pytest.mark.unit
class TestPrintTable:
    """Tests for print_table."""

    def test_renders_rows(self, recording_console: Console) -> None:
        print_table(
            [
                {"Tag": "v1.0.0", "Kind": "release"},
                {"Tag": "v1.0.0-rc1", "Kind": "rc"},
            ],
            title="Tags",
        )

        output = recording_console.export_text()
        assert "Tags" in output
        assert "v1.0.0-rc1" in output
        assert "release" in output

    def test_header_order(self, recording_console: Console) -> None:
        print_table([{"A": 1, "B": 2}], headers=["B", "A"])

        header_line = recording_console.export_text().splitlines()[1]
        assert header_line.index("B") < header_line.index("A")

    def test_missing_keys_render_empty(self, recording_console: Console) -> None:
        print_table([{"A": 1}], headers=["A", "B"])

        assert "1" in recording_console.export_text()

    @pytest.mark.parametrize("tag", ["v1.0.0[/]", "release[x]", "[bold]v1.0.0[/bold]"])
    def test_brackets_render_literally(self, recording_console: Console, tag: str) -> None:
        print_table([{"Tag": tag}])

        assert tag in recording_console.export_text()

    def test_text_cells_keep_their_style(self) -> None:
        console = Console(record=True, width=80, force_terminal=True, color_system="standard")
        console_module._console = console

        print_table([{"Kind": Text("rc", style="cyan")}])

        assert "\x1b[36mrc" in console.export_text(styles=True)

    def test_empty_data_prints_nothing(self, recording_console: Console) -> None:
        print_table([])

        assert recording_console.export_text() == ""


@pytest.mark.unit
class TestColorizeTagKind:
    """Tests for colorize_tag_kind."""

    @pytest.mark.parametrize(
        "kind, color",
        [
            ("release", "green"),
            ("rc", "cyan"),
            ("prerelease", "yellow"),
            ("invalid", "red"),
        ],
    )
    def test_known_kinds(self, kind: str, color: str) -> None:
        label = colorize_tag_kind(kind)

        assert label.plain == kind
        assert label.style == color

    def test_case_insensitive_lookup(self) -> None:
        label = colorize_tag_kind("RC")

        assert label.plain == "RC"
        assert label.style == "cyan"

    def test_unknown_kind_unstyled(self) -> None:
        label = colorize_tag_kind("other")

        assert label.plain == "other"
        assert not label.style
