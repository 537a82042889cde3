"""Tests for Rich Console factory and theme."""

from io import StringIO

from canvasdates.output.console import CD_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[cd.date]Aug 27[/cd.date]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "Aug 27" in output

    def test_widths(self) -> None:
        assert create_console().width == 120
        assert create_console(width=80).width == 80


class TestTheme:
    def test_theme_styles(self) -> None:
        own = {name for name in CD_THEME.styles if name.startswith("cd.")}
        assert own == {"cd.ok", "cd.error", "cd.warning", "cd.op", "cd.key", "cd.path", "cd.date"}
