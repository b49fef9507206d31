"""Command-line launcher tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from fifteen import main as cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def launched(monkeypatch: pytest.MonkeyPatch) -> list[tuple]:
    calls: list[tuple] = []
    monkeypatch.setattr(cli, "_launch", lambda frontend, seed: calls.append((frontend, seed)))
    return calls


def test_frontend_option(launched: list[tuple]) -> None:
    result = runner.invoke(cli.app, ["-f", "pygame", "--seed", "7"])
    assert result.exit_code == 0, result.output
    assert launched == [(cli.Frontend.pygame, 7)]


def test_unknown_frontend_is_a_usage_error(launched: list[tuple]) -> None:
    result = runner.invoke(cli.app, ["-f", "vanilla"])
    assert result.exit_code == 2
    assert launched == []


def test_bad_log_level_is_a_usage_error(launched: list[tuple]) -> None:
    result = runner.invoke(cli.app, ["-f", "rich", "--log-level", "chatty"])
    assert result.exit_code == 2
    assert launched == []


def test_menu_launches_selected_frontend(launched: list[tuple]) -> None:
    result = runner.invoke(cli.app, [], input="9\n3\n0\n")
    assert result.exit_code == 0, result.output
    assert "Unknown option." in result.output
    assert "Goodbye!" in result.output
    assert launched == [(cli.Frontend.pyqt, None)]


def test_log_file_receives_records(launched: list[tuple], tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "fifteen.log"
    result = runner.invoke(
        cli.app, ["-f", "rich", "--log-level", "info", "--log-file", str(log_file)]
    )
    assert result.exit_code == 0, result.output

    logger.bind(component="gameplay").info("hello from the test")
    logger.remove()
    assert "hello from the test" in log_file.read_text()
