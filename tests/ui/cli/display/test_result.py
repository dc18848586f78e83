"""Tests for the match display."""

from io import StringIO

from rich.console import Console

from mdfiles.ui.cli.display import ResultDisplay


def test_show_match_prints_line_verbatim() -> None:
    """Markup, emoji codes and long lines are printed untouched."""

    buffer = StringIO()
    display = ResultDisplay(Console(file=buffer, width=20))
    line = "- [:smile: [bold]x.go](./very/long/path/that/exceeds/the/width/[bold]x.go)"

    display.show_match(line)

    assert buffer.getvalue() == line + "\n"


def test_default_console_writes_to_stdout(capsys) -> None:
    ResultDisplay().show_match("- [main.go](./main.go)")

    assert capsys.readouterr().out == "- [main.go](./main.go)\n"


def test_show_match_keeps_tabs_and_control_characters() -> None:
    buffer = StringIO()
    display = ResultDisplay(Console(file=buffer))
    line = "- [a\tb\r.go](dir/a\tb\r.go)"

    display.show_match(line)

    assert buffer.getvalue() == line + "\n"
