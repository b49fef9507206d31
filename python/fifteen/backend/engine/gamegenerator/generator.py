"""Builds solved boards and picks shuffle directions."""

from __future__ import annotations

import random

from loguru import logger

from fifteen.backend.models.board import Board, Direction
from fifteen.settings import SHUFFLE_STEPS_MAX, SHUFFLE_STEPS_MIN

log = logger.bind(component="generator")


class GameGenerator:
    """Creates solvable puzzles by sliding away from the solved state."""

    @staticmethod
    def shuffle_steps(rng: random.Random) -> int:
        """Number of slides for a fresh game."""
        steps = rng.randint(SHUFFLE_STEPS_MIN, SHUFFLE_STEPS_MAX)
        log.debug(f"Shuffling {steps} steps")
        return steps

    @staticmethod
    def candidate_directions(
        board: Board, previous: Direction | None
    ) -> list[Direction]:
        """Legal slides on *board* that do not undo *previous*."""
        return [
            d
            for d in board.legal_directions()
            if previous is None or d is not previous.reverse
        ]

    @staticmethod
    def next_direction(
        board: Board, previous: Direction | None, rng: random.Random
    ) -> Direction:
        """Pick a shuffle direction uniformly among the candidates."""
        return rng.choice(GameGenerator.candidate_directions(board, previous))
