from __future__ import annotations

import pytest

from release_candidate.utils.console import (
    _get_console,
    print_error,
    print_success,
    print_warning,
    reconfigure_console,
)


@pytest.mark.unit
class TestConsole:
    """Tests for the console helpers."""

    @pytest.mark.parametrize(
        ("func", "prefix"),
        [
            (print_success, "[OK]"),
            (print_error, "[ERROR]"),
            (print_warning, "[WARNING]"),
        ],
    )
    def test_messages_go_to_stderr(self, func, prefix: str, capsys) -> None:
        """Test status messages never reach stdout."""
        reconfigure_console()

        func("done")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert f"{prefix} done" in captured.err

    def test_markup_is_not_interpreted(self, capsys) -> None:
        """Test bracketed text is printed literally."""
        reconfigure_console()

        print_warning("##teamcity[message text='[bold]x[/bold]']", prefix="")

        assert "##teamcity[message text='[bold]x[/bold]']" in capsys.readouterr().err

    def test_singleton_until_reconfigured(self) -> None:
        """Test the console is reused until reconfigure_console is called."""
        reconfigure_console()
        first = _get_console()

        assert _get_console() is first

        reconfigure_console()
        assert _get_console() is not first

    def test_no_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test NO_COLOR disables styling."""
        monkeypatch.setenv("NO_COLOR", "1")
        reconfigure_console()

        assert _get_console().no_color is True
