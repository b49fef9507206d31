"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output and the shared single-key
input handler.  Arrow keys / WASD slide tiles; the board is shuffled as
soon as the game starts.
"""

from __future__ import annotations

import random

import rich.box
from loguru import logger
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fifteen.backend.engine.gameplay import GameListener, GamePlay
from fifteen.backend.models.board import Board, Direction, Tile
from fifteen.backend.models.moves import MoveError, TileNotAdjacent
from fifteen.frontend.cli.input_handler import get_key

console = Console()
log = logger.bind(component="rich")

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- board rendering ----------------------------------------------------------


def render_board(
    board: Board,
    *,
    moved: int | None = None,
    rejected: int | None = None,
    border_style: str = "bright_blue",
) -> Table:
    """Return a Rich Table representing the puzzle grid.

    *moved* and *rejected* are tile values to highlight.
    """
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style=border_style,
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    home = {t.value for t in board.tiles if t.is_home(board.size)}
    for row in board.rows():
        cells: list[str] = []
        for val in row:
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif val == rejected:
                cells.append(f"[bold white on red]{val:>{width}}[/bold white on red]")
            elif val == moved:
                cells.append(f"[bold cyan]{val:>{width}}[/bold cyan]")
            elif val in home:
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- listener -----------------------------------------------------------------


class RichApp(GameListener):
    """Draws the board after each notification and drives the key loop."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.game = GamePlay(listener=self, rng=rng)
        self._moved: int | None = None
        self._rejected_tile: int | None = None
        self._rejected_board = False
        self._solved = False

    # -- notifications ----------------------------------------------------------

    def on_tile_moved(self, tile: Tile) -> None:
        self._moved = tile.value

    def on_move_rejected(self, error: MoveError) -> None:
        if isinstance(error, TileNotAdjacent):
            self._rejected_tile = error.tile.value
        else:
            self._rejected_board = True

    def on_solved(self) -> None:
        self._solved = True

    def on_new_game(self, board: Board) -> None:
        self._moved = None
        self._solved = False

    # -- screens ------------------------------------------------------------------

    def _draw_game(self) -> None:
        console.clear()

        board_table = render_board(
            self.game.board,
            moved=self._moved,
            rejected=self._rejected_tile,
            border_style="bold red" if self._rejected_board else "bright_blue",
        )
        self._rejected_tile = None
        self._rejected_board = False

        stats = Text()
        stats.append("  Moves: ", style="dim")
        stats.append(str(self.game.state.moves), style="bold yellow")

        controls = Text()
        controls.append("  ↑↓←→", style="bold cyan")
        controls.append(" / ", style="dim")
        controls.append("WASD", style="bold cyan")
        controls.append("  slide   ", style="dim")
        controls.append("R", style="bold cyan")
        controls.append("  new game   ", style="dim")
        controls.append("Q", style="bold cyan")
        controls.append("  quit", style="dim")

        size = self.game.size
        panel = Panel(
            Align.center(board_table),
            title=f"[bold cyan]Fifteen  {size}×{size}[/bold cyan]",
            border_style="bright_blue",
            padding=(1, 2),
        )

        console.print()
        console.print(Align.center(panel))
        console.print(Align.center(stats))
        console.print(Align.center(controls))

    def _draw_win(self) -> None:
        console.clear()

        congrats = Text()
        congrats.append("\n  ★ ", style="bold yellow")
        congrats.append("CONGRATULATIONS!", style="bold green")
        congrats.append("  You solved it!  ", style="green")
        congrats.append("★\n", style="bold yellow")

        stats = Text()
        stats.append("  Moves: ", style="dim")
        stats.append(str(self.game.state.moves), style="bold yellow")

        size = self.game.size
        panel = Panel(
            Group(
                Align.center(render_board(self.game.board)),
                Align.center(congrats),
                Align.center(stats),
            ),
            title=f"[bold green]Fifteen  {size}×{size}[/bold green]",
            border_style="bold green",
            padding=(1, 2),
        )

        console.print()
        console.print(Align.center(panel))
        console.print(
            Align.center(
                Text("\n  Press Enter or R to play again, Q to quit.\n", style="dim")
            )
        )

    # -- loops ----------------------------------------------------------------------

    def _play(self) -> bool:
        """Run one game; return False when the player quits."""
        self.game.start_new_game()

        while not self._solved:
            self._draw_game()
            key = get_key()

            if key in _DIRECTIONS:
                self.game.attempt_slide(_DIRECTIONS[key])
            elif key == "restart":
                log.info("Game restarted from the keyboard")
                self.game.start_new_game()
            elif key == "quit":
                return False

        self._draw_win()
        while True:
            key = get_key()
            if key in ("restart", "enter"):
                return True
            if key == "quit":
                return False

    def run(self) -> None:
        while self._play():
            pass
        console.clear()
        console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))


# -- public entry point -------------------------------------------------------


def run(rng: random.Random | None = None) -> None:
    """Launch the Rich terminal frontend."""
    RichApp(rng).run()
