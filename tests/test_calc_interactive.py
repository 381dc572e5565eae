# =============================================================================
# tests/test_calc_interactive.py - Interactive Script Tests
# =============================================================================
# Tests for scripts/calc_interactive.py in batch and prompt modes.
#
# Run with: pytest tests/test_calc_interactive.py -v
# =============================================================================

import importlib.util
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "calc_interactive.py"


@pytest.fixture(scope="module")
def calc_script():
    spec = importlib.util.spec_from_file_location("calc_interactive", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted sequence of lines, then EOF."""
    def _feed(*lines):
        remaining = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed


class TestFormatResult:

    def test_whole_numbers_drop_fraction(self, calc_script):
        assert calc_script.format_result(14.0) == "14"
        assert calc_script.format_result(-3.0) == "-3"

    def test_fractions_kept(self, calc_script):
        assert calc_script.format_result(2.5) == "2.5"


class TestBatchMode:

    def test_prints_each_result(self, calc_script, capsys):
        assert calc_script.main(["2+3*4", "(2+3)*4"]) == 0
        assert capsys.readouterr().out.split() == ["14", "20"]

    def test_stops_on_first_error(self, calc_script, capsys):
        assert calc_script.main(["1+1", "2/0", "3+3"]) == 1
        captured = capsys.readouterr()
        assert captured.out.split() == ["2"]
        assert "error: division by zero" in captured.err


class TestInteractiveMode:

    def test_evaluates_until_quit(self, calc_script, feed_input, capsys):
        feed_input("1+1", "", "2+a", "/quit", "5*5")

        assert calc_script.main([]) == 0

        captured = capsys.readouterr()
        assert "2" in captured.out.splitlines()
        assert "25" not in captured.out
        assert "error: unsupported character: a" in captured.err

    def test_help_command(self, calc_script, feed_input, capsys):
        feed_input("/help", "/exit")

        assert calc_script.main([]) == 0
        assert "Operators" in capsys.readouterr().out

    def test_eof_exits_cleanly(self, calc_script, feed_input):
        feed_input()
        assert calc_script.main([]) == 0
