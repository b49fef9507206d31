#!/usr/bin/env python3
"""Fifteen — a 4×4 sliding-tile puzzle.

Usage::

    fifteen                      # interactive menu
    fifteen -f rich              # Rich terminal
    fifteen -f pygame --seed 7   # Pygame GUI, reproducible shuffle
    fifteen -f pyqt --log-level debug --log-file fifteen.log
"""

from __future__ import annotations

import importlib
import random
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from fifteen.logger import setup_logging

log = logger.bind(component="main")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.rich: "fifteen.frontend.cli.rich.app",
    Frontend.pygame: "fifteen.frontend.gui.pygame.app",
    Frontend.pyqt: "fifteen.frontend.gui.pyqt.app",
}

_MENU = {
    "1": Frontend.rich,
    "2": Frontend.pygame,
    "3": Frontend.pyqt,
}


# -- helpers ------------------------------------------------------------------


def _launch(frontend: Frontend, seed: int | None) -> None:
    log.info(f"Launching {frontend.value} frontend (seed={seed})")
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(rng=random.Random(seed))


def _menu_loop(seed: int | None) -> None:
    while True:
        print()
        print("  ====================================")
        print("            F I F T E E N             ")
        print("  ====================================")
        print()
        print("  1.  Play  (Rich Terminal)")
        print("  2.  Play  (Pygame GUI)")
        print("  3.  Play  (PyQt GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in _MENU:
            _launch(_MENU[choice], seed)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the shuffle, for reproducible games.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        envvar="FIFTEEN_LOG_LEVEL",
        help="Minimum log level (DEBUG, INFO, WARNING, ...).",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        envvar="FIFTEEN_LOG_FILE",
        help="Write logs to this file instead of stderr.",
    ),
) -> None:
    """Fifteen sliding puzzle."""
    try:
        setup_logging(log_level, log_file)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc

    if frontend is None:
        _menu_loop(seed)
        return

    _launch(frontend, seed)


if __name__ == "__main__":
    app()
