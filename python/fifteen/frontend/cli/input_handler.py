"""Cross-platform single-keypress reader for the terminal frontend.

Handles arrow keys, WASD, and special keys without requiring Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    ch = msvcrt.getwch()
    # Arrow keys arrive as a prefix byte followed by a scan code.
    if ch in ("\x00", "\xe0"):
        return "\x00" + msvcrt.getwch()
    return ch


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "W": "up",
    "s": "down",
    "S": "down",
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "R": "restart",
    "\r": "enter",
    "\n": "enter",
}

# Final byte of the ``ESC [ x`` sequences sent by Unix terminals.
_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

# Scan codes following the Windows ``\x00`` / ``\xe0`` prefix.
_SCAN_MAP: dict[str, str] = {
    "H": "up",
    "P": "down",
    "M": "right",
    "K": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


def resolve_escape(seq: str) -> str:
    """Map the characters following ESC to an action string.

    ``""`` (a bare Escape) means quit.
    """
    if not seq:
        return "quit"
    if seq[0] == "[" and len(seq) > 1:
        return _ARROW_MAP.get(seq[1], "")
    if seq[0] == "[":
        return ""
    return "quit"


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — arrow keys / WASD
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r
        "enter"                        — Enter / Return
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    ch = _getch()

    if len(ch) == 2 and ch[0] == "\x00":
        return _SCAN_MAP.get(ch[1], "")

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            return resolve_escape(ch2 + _getch())
        return resolve_escape("")

    return resolve(ch)
