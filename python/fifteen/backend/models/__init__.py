from fifteen.backend.models.board import Board, Direction, Position, Tile
from fifteen.backend.models.moves import (
    MoveError,
    MoveResult,
    NoTileAtPosition,
    TileMoved,
    TileNotAdjacent,
)

__all__ = [
    "Board",
    "Direction",
    "MoveError",
    "MoveResult",
    "NoTileAtPosition",
    "Position",
    "Tile",
    "TileMoved",
    "TileNotAdjacent",
]
