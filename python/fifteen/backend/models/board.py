"""Board model for the sliding puzzle game."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import NamedTuple

from fifteen.settings import BOARD_SIDE


class Direction(StrEnum):
    """Where the *tile* travels when sliding into the empty slot."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def reverse(self) -> Direction:
        return _REVERSE[self]


_REVERSE: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Position(NamedTuple):
    row: int
    col: int


# Offset from the empty slot to the tile that slides into it.
# UP   → tile at (r+1, c) moves up   → empty slot shifts down
# DOWN → tile at (r-1, c) moves down → empty slot shifts up
# LEFT → tile at (r, c+1) moves left → empty slot shifts right
# RIGHT→ tile at (r, c-1) moves right→ empty slot shifts left
SLIDE_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


def solved_position(value: int, size: int = BOARD_SIDE) -> Position:
    return Position((value - 1) // size, (value - 1) % size)


@dataclass
class Tile:
    value: int
    position: Position

    def is_home(self, size: int = BOARD_SIDE) -> bool:
        return self.position == solved_position(self.value, size)


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are kept in value order with their current positions; the empty
    slot is tracked separately.
    """

    size: int
    tiles: list[Tile]
    empty_slot: Position

    def __post_init__(self) -> None:
        self._validate()

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int = BOARD_SIDE) -> Board:
        """Return the goal-state board (all tiles in order, empty bottom-right)."""
        tiles = [
            Tile(value=v, position=solved_position(v, size))
            for v in range(1, size * size)
        ]
        return cls(size=size, tiles=tiles, empty_slot=Position(size - 1, size - 1))

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list (0 is the empty slot).

        Example::

            Board.from_flat(4, [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 0, 15])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size * size - 1}, got {flat}."
            )
        by_value: dict[int, Tile] = {}
        empty_slot = Position(size - 1, size - 1)
        for i, v in enumerate(flat):
            pos = Position(i // size, i % size)
            if v == 0:
                empty_slot = pos
            else:
                by_value[v] = Tile(value=v, position=pos)
        tiles = [by_value[v] for v in range(1, size * size)]
        return cls(size=size, tiles=tiles, empty_slot=empty_slot)

    # -- queries --------------------------------------------------------------

    def in_bounds(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.size and 0 <= col < self.size

    def find_tile_at(self, position: Position) -> Tile | None:
        """Return the tile occupying *position*, or ``None`` for the empty
        slot and positions outside the grid."""
        for tile in self.tiles:
            if tile.position == position:
                return tile
        return None

    def is_adjacent_to_empty_slot(self, tile: Tile) -> bool:
        (tr, tc), (er, ec) = tile.position, self.empty_slot
        return (tr == er and abs(tc - ec) == 1) or (tc == ec and abs(tr - er) == 1)

    def slide_target(self, direction: Direction) -> Position:
        """Position of the tile that would move when sliding in *direction*."""
        dr, dc = SLIDE_OFFSETS[direction]
        return Position(self.empty_slot.row + dr, self.empty_slot.col + dc)

    def legal_directions(self) -> list[Direction]:
        """Directions whose slide target lies on the grid."""
        return [d for d in Direction if self.in_bounds(self.slide_target(d))]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return all(tile.is_home(self.size) for tile in self.tiles)

    def rows(self) -> list[list[int]]:
        """Tile values laid out as a 2D grid; 0 marks the empty slot."""
        grid = [[0] * self.size for _ in range(self.size)]
        for tile in self.tiles:
            grid[tile.position.row][tile.position.col] = tile.value
        return grid

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=[replace(t) for t in self.tiles],
            empty_slot=self.empty_slot,
        )

    # -- mutation -------------------------------------------------------------

    def swap_with_empty_slot(self, tile: Tile) -> Position:
        """Move *tile* into the empty slot; return the tile's old position."""
        origin = tile.position
        tile.position = self.empty_slot
        self.empty_slot = origin
        return origin

    # -- helpers --------------------------------------------------------------

    def _validate(self) -> None:
        values = sorted(t.value for t in self.tiles)
        if values != list(range(1, self.size * self.size)):
            raise ValueError(f"Board needs tiles 1..{self.size * self.size - 1}.")
        cells = [t.position for t in self.tiles] + [self.empty_slot]
        if any(not self.in_bounds(p) for p in cells) or len(set(cells)) != len(cells):
            raise ValueError("Tiles and the empty slot must cover the grid exactly once.")
