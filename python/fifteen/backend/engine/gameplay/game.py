"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import random
from dataclasses import replace

from loguru import logger

from fifteen.backend.engine.gamegenerator import GameGenerator
from fifteen.backend.engine.gameplay.events import GameListener
from fifteen.backend.engine.gamestate import GameState, Phase
from fifteen.backend.models.board import Board, Direction, Position, Tile
from fifteen.backend.models.moves import (
    MoveResult,
    NoTileAtPosition,
    TileMoved,
    TileNotAdjacent,
)
from fifteen.settings import BOARD_SIDE

log = logger.bind(component="gameplay")


class GameFinishedError(RuntimeError):
    """A move was attempted after the puzzle was solved."""


class GamePlay:
    """Orchestrates a single game session.

    Construction builds the solved board without shuffling; call
    :meth:`start_new_game` to get a playable layout.
    """

    def __init__(
        self,
        size: int = BOARD_SIDE,
        listener: GameListener | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.size = size
        self.listener = listener or GameListener()
        self.rng = rng or random.Random()
        self.state = GameState(Board.solved(size))
        self._shuffling = False

    @classmethod
    def from_board(
        cls,
        board: Board,
        listener: GameListener | None = None,
        rng: random.Random | None = None,
    ) -> GamePlay:
        """Create a game session around an existing board."""
        obj = cls(board.size, listener=listener, rng=rng)
        obj.state = GameState(board)
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def shuffle_sequence(self) -> list[Direction]:
        return list(self.state.shuffle_sequence)

    def tiles(self) -> list[Tile]:
        return [replace(t) for t in self.board.tiles]

    def empty_slot_position(self) -> Position:
        return self.board.empty_slot

    def is_solved(self) -> bool:
        return self.state.is_solved

    # -- commands -------------------------------------------------------------

    def start_new_game(self) -> None:
        """Rebuild the solved board and shuffle it into a fresh game."""
        self.state = GameState(Board.solved(self.size))
        while True:
            self.shuffle(GameGenerator.shuffle_steps(self.rng))
            if not self.is_solved():
                break
            log.info("Shuffle landed on the solved layout, shuffling again")
        log.info(f"New game after {len(self.state.shuffle_sequence)} shuffle steps")
        self.listener.on_new_game(self.board)

    def attempt_slide(self, direction: Direction) -> MoveResult:
        """Slide a tile in *direction* into the empty slot.

        E.g. ``Direction.UP`` moves the tile **below** the empty slot upward.
        """
        return self.attempt_move(self.board.slide_target(direction))

    def attempt_move(self, position: tuple[int, int]) -> MoveResult:
        """Move the tile at *position* into the empty slot if it touches it."""
        if self.state.is_finished:
            raise GameFinishedError("The puzzle is solved; start a new game first.")

        position = Position(*position)
        board = self.board
        tile = board.find_tile_at(position)

        if tile is None:
            error = NoTileAtPosition(position)
            log.debug(f"No tile at {tuple(position)}")
            self.listener.on_move_rejected(error)
            return error

        if not board.is_adjacent_to_empty_slot(tile):
            error = TileNotAdjacent(replace(tile))
            log.debug(f"Tile {tile.value} at {tuple(position)} is not adjacent")
            self.listener.on_move_rejected(error)
            return error

        origin = board.swap_with_empty_slot(tile)
        moved = TileMoved(tile=replace(tile), origin=origin)
        log.debug(f"Tile {tile.value} moved {tuple(origin)} -> {tuple(tile.position)}")
        self.listener.on_tile_moved(moved.tile)

        if not self._shuffling:
            self.state.increment_moves()
            if board.is_solved():
                self.state.mark_solved()
                log.info(f"Puzzle solved in {self.state.moves} moves")
                self.listener.on_solved()

        return moved

    def shuffle(self, steps: int) -> list[Direction]:
        """Apply *steps* random slides, never undoing the previous one.

        Returns the directions applied.  Shuffle slides do not count as
        player moves and never finish the game.
        """
        if self.state.is_finished:
            raise GameFinishedError("The puzzle is solved; start a new game first.")
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")

        previous: Direction | None = None
        applied: list[Direction] = []
        self._shuffling = True
        try:
            for _ in range(steps):
                direction = GameGenerator.next_direction(self.board, previous, self.rng)
                self.attempt_slide(direction)
                applied.append(direction)
                previous = direction
        finally:
            self._shuffling = False

        self.state.record_shuffle(applied)
        return applied
