"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from enum import StrEnum

from fifteen.backend.models.board import Board, Direction


class Phase(StrEnum):
    IN_PLAY = "in_play"
    SOLVED = "solved"


class GameState:
    """Holds the current board, phase, move counter and shuffle history."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.phase: Phase = Phase.IN_PLAY
        self.moves: int = 0
        self.shuffle_sequence: list[Direction] = []

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def record_shuffle(self, directions: list[Direction]) -> None:
        self.shuffle_sequence.extend(directions)

    # -- phase ----------------------------------------------------------------

    def mark_solved(self) -> None:
        self.phase = Phase.SOLVED

    @property
    def is_finished(self) -> bool:
        return self.phase is Phase.SOLVED

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
