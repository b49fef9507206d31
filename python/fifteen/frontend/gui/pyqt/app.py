"""PyQt6 GUI frontend — fully self-contained.

A board of tile buttons plus a victory page with a "play again" button.
No terminal interaction required.
"""

from __future__ import annotations

import random
import sys

from loguru import logger
from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSpacerItem,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from fifteen.backend.engine.gameplay import GameListener, GamePlay
from fifteen.backend.models.board import Board, Direction, Position, Tile
from fifteen.backend.models.moves import MoveError, TileNotAdjacent

log = logger.bind(component="pyqt")

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_SUBTEXT = "#a6adc8"
_BLUE = "#89b4fa"
_BLUE_H = "#a4c4fc"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"
_PINK = "#f5c2e7"
_YELLOW = "#f9e2af"
_RED = "#f38ba8"
_RED_H = "#f5a0b8"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""

_TILE_PX = 84
_REJECT_MS = 300

_KEY_DIRS = {
    Qt.Key.Key_Up: Direction.UP,
    Qt.Key.Key_W: Direction.UP,
    Qt.Key.Key_Down: Direction.DOWN,
    Qt.Key.Key_S: Direction.DOWN,
    Qt.Key.Key_Left: Direction.LEFT,
    Qt.Key.Key_A: Direction.LEFT,
    Qt.Key.Key_Right: Direction.RIGHT,
    Qt.Key.Key_D: Direction.RIGHT,
}


def _styled_btn(
    text: str,
    *,
    bg: str = _SURFACE0,
    hover: str = _SURFACE1,
    fg: str = _TEXT,
    font_size: int = 14,
    min_w: int = 0,
    min_h: int = 44,
    radius: int = 8,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", font_size, QFont.Weight.Bold))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:{radius}px; padding:6px 18px; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
    )
    return btn


def _tile_css(bg: str, hover: str) -> str:
    return (
        f"QPushButton{{background:{bg};color:{_BASE};"
        f"border:none;border-radius:8px;font-weight:bold;}}"
        f"QPushButton:hover{{background:{hover};}}"
    )


# ═══════════════════════════════════════════════════════════════════════════
# Pages
# ═══════════════════════════════════════════════════════════════════════════


class _GamePage(QWidget):
    """The puzzle board with one button per cell."""

    def __init__(self, game: GamePlay) -> None:
        super().__init__()
        self.setObjectName("page")
        self.game = game
        self._rejected: int | None = None
        self._moved: int | None = None

        size = game.size
        root = QVBoxLayout(self)
        root.setSpacing(6)
        root.setContentsMargins(16, 10, 16, 10)

        t = QLabel(f"Fifteen  {size}×{size}")
        t.setFont(QFont("Helvetica", 17, QFont.Weight.Bold))
        t.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(t)

        self._stats = QLabel()
        self._stats.setFont(QFont("Helvetica", 13))
        self._stats.setStyleSheet(f"color:{_PINK};")
        self._stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._stats)

        self._frame = QFrame()
        self._grid = QGridLayout(self._frame)
        self._grid.setSpacing(4)
        self._grid.setContentsMargins(8, 8, 8, 8)
        root.addWidget(self._frame, alignment=Qt.AlignmentFlag.AlignCenter)

        self._btns: list[list[QPushButton]] = []
        for r in range(size):
            row: list[QPushButton] = []
            for c in range(size):
                b = QPushButton()
                b.setFixedSize(_TILE_PX, _TILE_PX)
                b.setFont(QFont("Helvetica", _TILE_PX // 4, QFont.Weight.Bold))
                b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
                b.clicked.connect(lambda _, rr=r, cc=c: self.game.attempt_move(Position(rr, cc)))
                self._grid.addWidget(b, r, c)
                row.append(b)
            self._btns.append(row)

        hint = QLabel("Click a tile or use Arrows / WASD     R  new game     Esc  quit")
        hint.setFont(QFont("Helvetica", 11))
        hint.setStyleSheet(f"color:{_OVERLAY0};")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(hint)

        self.set_board_cue(False)

    # -- cues --

    def set_board_cue(self, on: bool) -> None:
        bg = _RED if on else _MANTLE
        self._frame.setStyleSheet(f"background:{bg}; border-radius:10px;")

    def flash_board(self) -> None:
        self.set_board_cue(True)
        QTimer.singleShot(_REJECT_MS, lambda: self.set_board_cue(False))

    def flash_tile(self, value: int) -> None:
        self._rejected = value
        self.sync()
        QTimer.singleShot(_REJECT_MS, self._clear_tile_cue)

    def _clear_tile_cue(self) -> None:
        self._rejected = None
        self.sync()

    def mark_moved(self, value: int | None) -> None:
        self._moved = value

    # -- drawing --

    def sync(self) -> None:
        board = self.game.board
        rows = board.rows()
        home = {t.value for t in board.tiles if t.is_home(board.size)}
        for r, row in enumerate(rows):
            for c, v in enumerate(row):
                b = self._btns[r][c]
                if v == 0:
                    b.setText("")
                    b.setStyleSheet(
                        f"QPushButton{{background:{_MANTLE};border:none;border-radius:8px;}}"
                    )
                    continue
                b.setText(str(v))
                if v == self._rejected:
                    b.setStyleSheet(_tile_css(_RED, _RED_H))
                elif v in home:
                    b.setStyleSheet(_tile_css(_GREEN, _GREEN_H))
                elif v == self._moved:
                    b.setStyleSheet(_tile_css(_YELLOW, _YELLOW))
                else:
                    b.setStyleSheet(_tile_css(_BLUE, _BLUE_H))
        self._stats.setText(f"Moves: {self.game.state.moves}")


class _WinPage(QWidget):
    """Victory screen with play-again and quit buttons."""

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("page")

        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.setSpacing(10)
        root.setContentsMargins(30, 30, 30, 30)

        star = QLabel("★  S O L V E D  ★")
        star.setFont(QFont("Helvetica", 32, QFont.Weight.Bold))
        star.setStyleSheet(f"color:{_GREEN};")
        star.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(star)

        root.addSpacerItem(QSpacerItem(0, 20))

        self.moves_lbl = QLabel()
        self.moves_lbl.setFont(QFont("Helvetica", 20, QFont.Weight.Bold))
        self.moves_lbl.setStyleSheet(f"color:{_YELLOW};")
        self.moves_lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self.moves_lbl)

        root.addSpacerItem(QSpacerItem(0, 24))

        self.again_btn = _styled_btn(
            "PLAY AGAIN", bg=_GREEN, hover=_GREEN_H, fg=_BASE,
            font_size=16, min_w=240, min_h=50,
        )
        root.addWidget(self.again_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        root.addSpacerItem(QSpacerItem(0, 6))

        self.quit_btn = _styled_btn(
            "Q U I T", bg=_RED, hover=_RED_H, fg=_BASE, min_w=240, font_size=13
        )
        root.addWidget(self.quit_btn, alignment=Qt.AlignmentFlag.AlignCenter)

    def set_moves(self, moves: int) -> None:
        self.moves_lbl.setText(f"Moves:  {moves}")


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════

_IDX_GAME = 0
_IDX_WIN = 1


class _MainWindow(QMainWindow, GameListener):
    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Fifteen")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(440, 520)

        self.game = GamePlay(listener=self, rng=rng)

        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        self._game_page = _GamePage(self.game)
        self._stack.addWidget(self._game_page)  # 0

        self._win_page = _WinPage()
        self._win_page.again_btn.clicked.connect(self.game.start_new_game)
        self._win_page.quit_btn.clicked.connect(self.close)
        self._stack.addWidget(self._win_page)  # 1

        self.game.start_new_game()

    # -- notifications ---

    def on_tile_moved(self, tile: Tile) -> None:
        self._game_page.mark_moved(tile.value)
        self._game_page.sync()

    def on_move_rejected(self, error: MoveError) -> None:
        if isinstance(error, TileNotAdjacent):
            self._game_page.flash_tile(error.tile.value)
        else:
            self._game_page.flash_board()

    def on_solved(self) -> None:
        self._win_page.set_moves(self.game.state.moves)
        self._stack.setCurrentIndex(_IDX_WIN)

    def on_new_game(self, board: Board) -> None:
        self._game_page.mark_moved(None)
        self._game_page.sync()
        self._stack.setCurrentIndex(_IDX_GAME)

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        idx = self._stack.currentIndex()

        if idx == _IDX_GAME:
            if key in _KEY_DIRS:
                self.game.attempt_slide(_KEY_DIRS[key])
            elif key == Qt.Key.Key_R:
                log.info("Game restarted from the keyboard")
                self.game.start_new_game()
            elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
                self.close()

        elif idx == _IDX_WIN:
            if key in (Qt.Key.Key_R, Qt.Key.Key_Return):
                self.game.start_new_game()
            elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
                self.close()

        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(rng: random.Random | None = None) -> None:
    """Launch the PyQt6 GUI."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(rng)
    window.show()
    qapp.exec()
