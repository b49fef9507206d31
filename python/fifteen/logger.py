"""Loguru setup shared by the launcher and every frontend.

Modules log through ``logger.bind(component=...)``; the component picks the
colour of the tag and the minimum level that gets through.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

PALETTE = {
    "gameplay": "green",
    "generator": "blue",
    "rich": "magenta",
    "pygame": "cyan",
    "pyqt": "yellow",
    "main": "white",
}

LEVEL_PER_COMPONENT = {
    "generator": "INFO",
}


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, "DEBUG")).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")

    # The tag lives in the *template* that the sink receives,
    # so Loguru will translate it to ANSI codes.
    return (
        "{time:HH:mm:ss} | "
        f"<{colour}>{comp:<10}</> | "
        "<level>{message}</level>\n{exception}"
    )


def setup_logging(level: str = "WARNING", log_file: Path | None = None) -> None:
    """Replace loguru's default handler with a single filtered sink.

    Terminal frontends redraw the whole screen, so pass *log_file* to keep
    log lines out of the way.
    """
    logger.remove()
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=level.upper(),
            format=formatter,
            filter=component_filter,
            colorize=False,
        )
    else:
        logger.add(
            sys.stderr,
            level=level.upper(),
            format=formatter,
            filter=component_filter,
            colorize=True,
        )
