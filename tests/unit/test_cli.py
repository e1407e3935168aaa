"""Unit tests for the command-line driver."""

import logging

import pytest

from decicalc.__main__ import main


@pytest.fixture(autouse=True)
def _restore_logger(monkeypatch):
    monkeypatch.delenv("DECICALC_HISTORY_CAPACITY", raising=False)
    monkeypatch.delenv("DECICALC_ANGLE_MODE", raising=False)
    logger = logging.getLogger("decicalc")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestMain:
    """Tests for python -m decicalc."""

    def test_prints_display(self, capsys):
        assert main(["1", "2", "+", "3", "="]) == 0
        assert capsys.readouterr().out == "15\n"

    def test_prints_history(self, capsys):
        assert main(["--history", "2", "*", "3", "=", "+", "1", "="]) == 0
        assert capsys.readouterr().out.splitlines() == ["7", "6 + 1 = 7", "2 × 3 = 6"]

    def test_radians_flag(self, capsys):
        assert main(["--radians", "0", "cos"]) == 0
        assert capsys.readouterr().out == "1\n"

    def test_error_display(self, capsys):
        assert main(["1", "/", "0", "="]) == 0
        assert capsys.readouterr().out == "Error\n"

    def test_unknown_token(self, capsys):
        assert main(["1", "?"]) == 2
        assert "Unknown input event" in capsys.readouterr().err

    def test_no_tokens(self, capsys):
        assert main([]) == 0
        assert capsys.readouterr().out == "0\n"
