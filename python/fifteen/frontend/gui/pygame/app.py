"""Pygame GUI frontend — fully self-contained.

Click a tile next to the empty slot or use the arrow keys / WASD.
Solving the puzzle opens a "play again" screen.
"""

from __future__ import annotations

import enum
import random

import pygame
from loguru import logger

from fifteen.backend.engine.gameplay import GameListener, GamePlay
from fifteen.backend.models.board import Board, Direction, Position, Tile
from fifteen.backend.models.moves import MoveError, TileNotAdjacent

log = logger.bind(component="pygame")

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 460, 560
TILE_GAP = 6
MARGIN = 30
BOARD_TOP = 76
BOARD_MAX = WIN_W - 2 * MARGIN  # max board width/height in px
REJECT_MS = 300  # how long a rejection cue stays on screen
FPS = 30


# ---------------------------------------------------------------------------
# Screen enum
# ---------------------------------------------------------------------------
class _Screen(enum.Enum):
    PLAYING = "playing"
    WIN = "win"


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "radius", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
        radius: int = 8,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self.radius = radius
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=self.radius)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


# ---------------------------------------------------------------------------
# Centring helpers
# ---------------------------------------------------------------------------
def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp(GameListener):
    def __init__(self, rng: random.Random | None = None) -> None:
        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Fifteen")
        self._clock = pygame.time.Clock()

        # Fonts
        self._f_big = pygame.font.SysFont("Helvetica", 38, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_btn = pygame.font.SysFont("Helvetica", 17, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._screen = _Screen.PLAYING
        self._moved: int | None = None
        # value -> tick at which the cue expires; 0 is the whole board
        self._reject_until: dict[int, int] = {}

        self.game = GamePlay(listener=self, rng=rng)
        self._build_win_btns()
        self.game.start_new_game()

    def _build_win_btns(self) -> None:
        bw = 220
        self._win_again = _Btn(
            (_cx(bw), 380, bw, 50),
            "PLAY AGAIN",
            self._f_btn,
            bg=COL_GREEN,
            hover=(190, 240, 190),
            fg=COL_BASE,
        )
        self._win_quit = _Btn(
            (_cx(bw), 448, bw, 46), "Q U I T", self._f_btn,
            bg=COL_RED, hover=(255, 170, 185), fg=COL_BASE,
        )

    # ── notifications ───────────────────────────────────────────────────────

    def on_tile_moved(self, tile: Tile) -> None:
        self._moved = tile.value

    def on_move_rejected(self, error: MoveError) -> None:
        key = error.tile.value if isinstance(error, TileNotAdjacent) else 0
        self._reject_until[key] = pygame.time.get_ticks() + REJECT_MS

    def on_solved(self) -> None:
        self._screen = _Screen.WIN

    def on_new_game(self, board: Board) -> None:
        self._moved = None
        self._reject_until.clear()
        self._screen = _Screen.PLAYING

    # ── helpers ─────────────────────────────────────────────────────────────

    def _tile_layout(self) -> tuple[int, int, int, int]:
        """Return (tile_px, origin_x, origin_y, total_px) for the board."""
        sz = self.game.size
        tile_px = (BOARD_MAX - (sz + 1) * TILE_GAP) // sz
        total = sz * tile_px + (sz + 1) * TILE_GAP
        ox = _cx(total) + TILE_GAP
        oy = BOARD_TOP + TILE_GAP
        return tile_px, ox, oy, total

    def _tile_rect(
        self, r: int, c: int, tpx: int, ox: int, oy: int
    ) -> pygame.Rect:
        return pygame.Rect(
            ox + c * (tpx + TILE_GAP),
            oy + r * (tpx + TILE_GAP),
            tpx,
            tpx,
        )

    def _cell_at(self, pos: tuple[int, int]) -> Position | None:
        tpx, ox, oy, _ = self._tile_layout()
        for r in range(self.game.size):
            for c in range(self.game.size):
                if self._tile_rect(r, c, tpx, ox, oy).collidepoint(pos):
                    return Position(r, c)
        return None

    def _rejecting(self, key: int) -> bool:
        return self._reject_until.get(key, 0) > pygame.time.get_ticks()

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_game(self) -> None:
        self._surf.fill(COL_BASE)
        board = self.game.board
        sz = self.game.size
        tpx, ox, oy, total = self._tile_layout()
        f_tile = pygame.font.SysFont("Helvetica", max(14, tpx // 3), bold=True)

        _blit_center(
            self._surf,
            self._f_title.render(f"Fifteen  {sz}×{sz}", True, COL_TEXT),
            14,
        )
        _blit_center(
            self._surf,
            self._f_body.render(f"Moves: {self.game.state.moves}", True, COL_PINK),
            44,
        )

        # board bg, red while a board-wide rejection cue is active
        bg = COL_RED if self._rejecting(0) else COL_MANTLE
        pygame.draw.rect(
            self._surf,
            bg,
            pygame.Rect(_cx(total), BOARD_TOP, total, total),
            border_radius=10,
        )

        for tile in board.tiles:
            r, c = tile.position
            rect = self._tile_rect(r, c, tpx, ox, oy)
            if self._rejecting(tile.value):
                col = COL_RED
            elif tile.is_home(sz):
                col = COL_GREEN
            elif tile.value == self._moved:
                col = COL_YELLOW
            else:
                col = COL_BLUE
            pygame.draw.rect(self._surf, col, rect, border_radius=6)
            lbl = f_tile.render(str(tile.value), True, COL_BASE)
            self._surf.blit(
                lbl,
                (
                    rect.centerx - lbl.get_width() // 2,
                    rect.centery - lbl.get_height() // 2,
                ),
            )

        _blit_center(
            self._surf,
            self._f_small.render(
                "Click a tile or use Arrows / WASD     R  new game     Esc  quit",
                True,
                COL_OVERLAY0,
            ),
            BOARD_TOP + total + 16,
        )

    def _draw_win(self) -> None:
        self._surf.fill(COL_BASE)

        _blit_center(
            self._surf,
            self._f_big.render("★  S O L V E D  ★", True, COL_GREEN),
            100,
        )
        info = [
            (f"Grid:   {self.game.size}×{self.game.size}", COL_SUBTEXT),
            (f"Moves:  {self.game.state.moves}", COL_YELLOW),
        ]
        y = 200
        for txt, col in info:
            _blit_center(self._surf, self._f_title.render(txt, True, col), y)
            y += 44

        self._win_again.draw(self._surf)
        self._win_quit.draw(self._surf)

    # ── event handling ──────────────────────────────────────────────────────

    _DIRS = {
        pygame.K_UP: Direction.UP,
        pygame.K_w: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_s: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_a: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
        pygame.K_d: Direction.RIGHT,
    }

    def _ev_game(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            cell = self._cell_at(ev.pos)
            if cell is not None:
                self.game.attempt_move(cell)
        elif ev.type == pygame.KEYDOWN:
            if ev.key in self._DIRS:
                self.game.attempt_slide(self._DIRS[ev.key])
            elif ev.key == pygame.K_r:
                log.info("Game restarted from the keyboard")
                self.game.start_new_game()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _ev_win(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._win_again.motion(ev.pos)
            self._win_quit.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._win_again.hit(ev.pos):
                self.game.start_new_game()
            elif self._win_quit.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_r, pygame.K_RETURN):
                self.game.start_new_game()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.PLAYING: self._ev_game,
            _Screen.WIN: self._ev_win,
        }
        _draw = {
            _Screen.PLAYING: self._draw_game,
            _Screen.WIN: self._draw_win,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                if not _dispatch[self._screen](ev):
                    running = False
                    break

            _draw[self._screen]()
            pygame.display.flip()
            self._clock.tick(FPS)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(rng: random.Random | None = None) -> None:
    """Launch the Pygame GUI."""
    app = PygameApp(rng)
    app.run_loop()
