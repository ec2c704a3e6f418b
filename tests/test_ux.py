"""
Tests for console output helpers.
"""

from shuttle_init import ux
from shuttle_init.ux import (
    ICONS,
    print_error,
    print_header,
    print_info,
    print_step,
    print_success,
    print_summary,
    set_colors,
)


class TestMessages:
    """Icon-prefixed messages."""

    def test_success(self, capsys):
        """Should print a success line."""
        print_success("Done")
        assert capsys.readouterr().out == f"{ICONS['success']} Done\n"

    def test_error_goes_to_stderr(self, capsys):
        """Errors should go to stderr."""
        print_error("Broken")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert f"{ICONS['error']} Broken" in captured.err

    def test_info(self, capsys):
        """Should print an info line."""
        print_info("Note")
        assert f"{ICONS['info']} Note" in capsys.readouterr().out

    def test_step_trace(self, capsys):
        """Step traces should go to stderr with an arrow."""
        print_step("Checking if blog is available")
        assert capsys.readouterr().err == "--> Checking if blog is available\n"


class TestColors:
    """Color toggling."""

    def test_colors_enabled(self):
        """Should wrap text in ANSI codes when colors are on."""
        set_colors(True)
        assert ux._color("x", "red") == "\033[31mx\033[0m"

    def test_colors_disabled(self):
        """Should leave text alone when colors are off."""
        set_colors(False)
        assert ux._color("x", "red") == "x"


class TestSummary:
    """Headers and summaries."""

    def test_header_underline(self, capsys):
        """The underline should match the title length."""
        print_header("Project ready")
        assert capsys.readouterr().out == "Project ready\n=============\n"

    def test_summary_aligns_keys(self, capsys):
        """Summary keys should be padded to the longest key."""
        print_summary("Project ready", {"Name": "blog", "Framework": "axum"}, status="Done")
        out = capsys.readouterr().out
        assert "  Name     : blog" in out
        assert "  Framework: axum" in out
        assert f"{ICONS['success']} Done" in out
