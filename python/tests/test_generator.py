"""Shuffle tests: legality from every cell and the no-reversal rule."""

from __future__ import annotations

import random

import pytest

from fifteen.backend.engine.gamegenerator import GameGenerator
from fifteen.backend.engine.gameplay import GamePlay
from fifteen.backend.models.board import Board, Direction
from fifteen.settings import SHUFFLE_STEPS_MAX, SHUFFLE_STEPS_MIN


# -- helpers ------------------------------------------------------------------


def _board_with_empty_at(index: int) -> Board:
    flat = list(range(1, 16))
    flat.insert(index, 0)
    return Board.from_flat(4, flat)


def _ids(index: int) -> str:
    return f"empty-at-{index // 4}-{index % 4}"


class _RecordingRandom(random.Random):
    """Keeps every candidate list handed to ``choice``."""

    def __init__(self, seed: int) -> None:
        super().__init__(seed)
        self.offered: list[list] = []

    def choice(self, seq):
        self.offered.append(list(seq))
        return super().choice(seq)


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("seed", range(20))
def test_shuffle_steps_in_range(seed: int) -> None:
    steps = GameGenerator.shuffle_steps(random.Random(seed))
    assert SHUFFLE_STEPS_MIN <= steps <= SHUFFLE_STEPS_MAX


@pytest.mark.parametrize("index", range(16), ids=_ids)
def test_single_step_never_leaves_the_grid(index: int) -> None:
    for seed in range(25):
        board = _board_with_empty_at(index)
        legal = board.legal_directions()
        game = GamePlay.from_board(board, rng=random.Random(seed))

        (direction,) = game.shuffle(1)

        assert direction in legal
        er, ec = game.empty_slot_position()
        assert 0 <= er < 4 and 0 <= ec < 4
        assert game.state.moves == 0


def test_first_step_offers_every_legal_direction() -> None:
    rng = _RecordingRandom(0)
    game = GamePlay(rng=rng)

    game.shuffle(1)

    assert rng.offered == [[Direction.DOWN, Direction.RIGHT]]


def test_candidates_exclude_the_reverse_of_the_previous_slide() -> None:
    board = _board_with_empty_at(5)  # empty slot at (1, 1)
    assert GameGenerator.candidate_directions(board, None) == list(Direction)
    assert GameGenerator.candidate_directions(board, Direction.UP) == [
        Direction.UP,
        Direction.LEFT,
        Direction.RIGHT,
    ]
    assert GameGenerator.candidate_directions(board, Direction.LEFT) == [
        Direction.UP,
        Direction.DOWN,
        Direction.LEFT,
    ]


def test_corner_after_reverse_leaves_one_candidate() -> None:
    board = Board.solved()  # empty slot at (3, 3)
    assert GameGenerator.candidate_directions(board, Direction.UP) == [Direction.RIGHT]


@pytest.mark.parametrize("seed", range(10))
def test_shuffle_never_reverses_previous_slide(seed: int) -> None:
    game = GamePlay(rng=random.Random(seed))
    applied = game.shuffle(200)

    assert len(applied) == 200
    for previous, current in zip(applied, applied[1:]):
        assert current is not previous.reverse


def test_seeded_shuffles_repeat() -> None:
    a = GamePlay(rng=random.Random(42))
    b = GamePlay(rng=random.Random(42))
    a.start_new_game()
    b.start_new_game()
    assert a.shuffle_sequence == b.shuffle_sequence
    assert a.board.rows() == b.board.rows()
    assert not a.is_solved()
