"""Outcomes of a move attempt.

A move either succeeds with :class:`TileMoved` or is rejected with one of
the two :data:`MoveError` variants.  Rejections are ordinary return values;
they never mutate the board.
"""

from __future__ import annotations

from dataclasses import dataclass

from fifteen.backend.models.board import Position, Tile


@dataclass(frozen=True)
class TileMoved:
    """*tile* is a snapshot carrying the tile's new position."""

    tile: Tile
    origin: Position

    ok = True


@dataclass(frozen=True)
class NoTileAtPosition:
    """The target cell is the empty slot or lies outside the grid."""

    position: Position

    ok = False


@dataclass(frozen=True)
class TileNotAdjacent:
    """The tile exists but does not touch the empty slot."""

    tile: Tile

    ok = False


MoveError = NoTileAtPosition | TileNotAdjacent
MoveResult = TileMoved | MoveError
