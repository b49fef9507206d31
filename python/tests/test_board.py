"""Board model tests: construction, queries and the slide table."""

from __future__ import annotations

import pytest

from fifteen.backend.models.board import (
    SLIDE_OFFSETS,
    Board,
    Direction,
    Position,
    Tile,
    solved_position,
)

SOLVED_ROWS = [
    [1, 2, 3, 4],
    [5, 6, 7, 8],
    [9, 10, 11, 12],
    [13, 14, 15, 0],
]


# -- helpers ------------------------------------------------------------------


def _board_with_empty_at(index: int) -> Board:
    """4×4 board, tiles in value order, empty slot at flat *index*."""
    flat = list(range(1, 16))
    flat.insert(index, 0)
    return Board.from_flat(4, flat)


def _cells(board: Board) -> list[Position]:
    return sorted([t.position for t in board.tiles] + [board.empty_slot])


# -- construction -------------------------------------------------------------


def test_solved_layout() -> None:
    board = Board.solved()
    assert board.size == 4
    assert board.rows() == SOLVED_ROWS
    assert board.empty_slot == Position(3, 3)
    assert board.is_solved()


def test_solved_positions_follow_value() -> None:
    assert solved_position(1) == Position(0, 0)
    assert solved_position(4) == Position(0, 3)
    assert solved_position(5) == Position(1, 0)
    assert solved_position(15) == Position(3, 2)


def test_from_flat_places_tiles_and_empty_slot() -> None:
    board = Board.from_flat(4, [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 0, 15])
    assert board.empty_slot == Position(3, 2)
    assert board.find_tile_at(Position(3, 3)).value == 15
    assert not board.is_solved()


def test_from_flat_rejects_wrong_length() -> None:
    with pytest.raises(ValueError, match="Expected 16 tiles"):
        Board.from_flat(4, list(range(15)))


def test_from_flat_rejects_duplicates() -> None:
    flat = list(range(16))
    flat[5] = 4
    with pytest.raises(ValueError, match="permutation"):
        Board.from_flat(4, flat)


def test_overlapping_positions_are_rejected() -> None:
    tiles = Board.solved().tiles
    tiles[0].position = Position(3, 3)
    with pytest.raises(ValueError, match="exactly once"):
        Board(size=4, tiles=tiles, empty_slot=Position(3, 3))


def test_copy_is_independent() -> None:
    board = Board.solved()
    clone = board.copy()
    clone.swap_with_empty_slot(clone.find_tile_at(Position(3, 2)))
    assert board.is_solved()
    assert not clone.is_solved()


# -- queries ------------------------------------------------------------------


def test_find_tile_at() -> None:
    board = Board.solved()
    assert board.find_tile_at(Position(0, 0)) == Tile(1, Position(0, 0))
    assert board.find_tile_at(Position(2, 1)).value == 10


@pytest.mark.parametrize(
    "position",
    [(3, 3), (-1, 0), (0, -1), (4, 0), (0, 4)],
    ids=["empty-slot", "above", "left-of", "below", "right-of"],
)
def test_find_tile_at_returns_none(position: tuple[int, int]) -> None:
    assert Board.solved().find_tile_at(Position(*position)) is None


@pytest.mark.parametrize(
    ("position", "expected"),
    [
        ((2, 3), True),   # above
        ((3, 2), True),   # left
        ((2, 2), False),  # diagonal
        ((3, 1), False),  # two columns away
        ((1, 3), False),  # two rows away
        ((0, 0), False),
    ],
)
def test_is_adjacent_to_empty_slot(position: tuple[int, int], expected: bool) -> None:
    board = Board.solved()
    tile = board.find_tile_at(Position(*position))
    assert board.is_adjacent_to_empty_slot(tile) is expected


def test_is_tile_home() -> None:
    board = Board.from_flat(4, [2, 1, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 0])
    assert not board.find_tile_at(Position(0, 0)).is_home()
    assert board.find_tile_at(Position(0, 2)).is_home()
    assert not board.is_solved()


def test_is_solved_is_idempotent() -> None:
    board = _board_with_empty_at(5)
    assert board.is_solved() == board.is_solved()


# -- slides -------------------------------------------------------------------


def test_slide_table_covers_every_direction() -> None:
    assert set(SLIDE_OFFSETS) == set(Direction)


@pytest.mark.parametrize(
    ("direction", "target"),
    [
        (Direction.UP, (2, 1)),
        (Direction.DOWN, (0, 1)),
        (Direction.LEFT, (1, 2)),
        (Direction.RIGHT, (1, 0)),
    ],
)
def test_slide_target_is_relative_to_empty_slot(
    direction: Direction, target: tuple[int, int]
) -> None:
    board = _board_with_empty_at(5)  # empty slot at (1, 1)
    assert board.slide_target(direction) == Position(*target)


@pytest.mark.parametrize(
    ("index", "expected"),
    [
        (0, {Direction.UP, Direction.LEFT}),
        (3, {Direction.UP, Direction.RIGHT}),
        (12, {Direction.DOWN, Direction.LEFT}),
        (15, {Direction.DOWN, Direction.RIGHT}),
        (1, {Direction.UP, Direction.LEFT, Direction.RIGHT}),
        (7, {Direction.UP, Direction.DOWN, Direction.RIGHT}),
        (5, set(Direction)),
    ],
    ids=["top-left", "top-right", "bottom-left", "bottom-right", "top-edge", "right-edge", "middle"],
)
def test_legal_directions(index: int, expected: set[Direction]) -> None:
    assert set(_board_with_empty_at(index).legal_directions()) == expected


def test_swap_keeps_grid_covered() -> None:
    board = Board.solved()
    origin = board.swap_with_empty_slot(board.find_tile_at(Position(2, 3)))
    assert origin == Position(2, 3)
    assert board.empty_slot == Position(2, 3)
    assert board.find_tile_at(Position(3, 3)).value == 12
    assert _cells(board) == [Position(r, c) for r in range(4) for c in range(4)]


def test_direction_reverse() -> None:
    for d in Direction:
        assert d.reverse is not d
        assert d.reverse.reverse is d


def test_unknown_direction_fails_loudly() -> None:
    with pytest.raises(ValueError):
        Direction("sideways")
