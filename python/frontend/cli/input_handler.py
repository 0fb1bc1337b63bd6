"""Keypress reader for the keyboard frontends.

Each key is turned into one of the actions ``controls.handle_key``
understands, so the shells never see raw terminal bytes.
"""

from __future__ import annotations

import os
import sys


# -- raw reads ------------------------------------------------------------------


def _read_posix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _read_nt() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_read = _read_nt if os.name == "nt" else _read_posix


# -- actions --------------------------------------------------------------------

# Letters are matched case-insensitively.
_ACTIONS: dict[str, str] = {
    "w": "up",
    "a": "left",
    "s": "down",
    "d": "right",
    "u": "undo",
    "r": "restart",
    "h": "help",
    "?": "help",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    " ": "enter",
    "\r": "enter",
    "\n": "enter",
}

# Final byte of an ``ESC [`` cursor-key sequence.
_CURSOR_KEYS: dict[str, str] = {"A": "up", "B": "down", "C": "right", "D": "left"}


def resolve(ch: str) -> str:
    """Return the action for a single character.

    Unmapped printable characters come back unchanged (the menus read
    digits this way); anything else maps to ``""``.
    """
    action = _ACTIONS.get(ch.lower())
    if action is not None:
        return action
    return ch if ch.isprintable() else ""


def get_key() -> str:
    """Block for one keypress and return its action.

    Actions: ``up``, ``down``, ``left``, ``right``, ``enter`` (click the
    cursor cell), ``undo``, ``restart``, ``help``, ``quit``; an unmapped
    printable character; or ``""``.  A lone Escape counts as ``quit``.
    """
    ch = _read()
    if ch != "\x1b":
        return resolve(ch)
    if _read() != "[":
        return "quit"
    return _CURSOR_KEYS.get(_read(), "")
