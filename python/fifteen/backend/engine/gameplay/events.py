"""Notifications sent from a game session to its presentation layer."""

from __future__ import annotations

from fifteen.backend.models.board import Board, Tile
from fifteen.backend.models.moves import MoveError


class GameListener:
    """Base listener; frontends override the hooks they care about."""

    def on_tile_moved(self, tile: Tile) -> None:
        """*tile* carries its new position."""

    def on_move_rejected(self, error: MoveError) -> None:
        """``NoTileAtPosition`` calls for a board-wide cue,
        ``TileNotAdjacent`` for a cue on ``error.tile``."""

    def on_solved(self) -> None:
        pass

    def on_new_game(self, board: Board) -> None:
        pass
