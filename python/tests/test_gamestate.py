"""GameState bookkeeping tests."""

from __future__ import annotations

from fifteen.backend.engine.gamestate import GameState, Phase
from fifteen.backend.models.board import Board, Direction


def test_new_state() -> None:
    state = GameState(Board.solved())
    assert state.phase is Phase.IN_PLAY
    assert state.moves == 0
    assert state.shuffle_sequence == []
    assert state.is_solved
    assert not state.is_finished


def test_counters_and_phase() -> None:
    state = GameState(Board.solved())
    state.increment_moves()
    state.increment_moves()
    state.record_shuffle([Direction.DOWN, Direction.RIGHT])
    state.record_shuffle([Direction.UP])
    state.mark_solved()

    assert state.moves == 2
    assert state.shuffle_sequence == [Direction.DOWN, Direction.RIGHT, Direction.UP]
    assert state.phase is Phase.SOLVED
    assert state.is_finished
