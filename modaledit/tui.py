"""Terminal front end: draws the editor with curses and feeds it key presses."""

from __future__ import annotations

import curses
import sys
from collections.abc import Sequence
from itertools import islice

from modaledit.editor import (
    KEY_BACKSPACE,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    Editor,
)

# The status message is right-aligned to the width of this text.
_MESSAGE_SLOT = "saved! "

_SPECIAL_KEYS = {
    curses.KEY_UP: KEY_UP,
    curses.KEY_DOWN: KEY_DOWN,
    curses.KEY_LEFT: KEY_LEFT,
    curses.KEY_RIGHT: KEY_RIGHT,
    curses.KEY_BACKSPACE: KEY_BACKSPACE,
}


def _put(screen, y: int, x: int, text: str) -> None:
    """Draw ``text`` at ``(y, x)``, clipped to the screen; drawing errors are ignored."""
    max_y, max_x = screen.getmaxyx()
    if not 0 <= y < max_y or x >= max_x:
        return
    x = max(x, 0)
    try:
        screen.addnstr(y, x, text, max_x - x)
    except curses.error:
        # Writing into the bottom-right cell reports an error after drawing.
        pass


def _translate(key: str | int) -> str | None:
    """Turn a key from ``get_wch`` into the form the editor understands."""
    if isinstance(key, str):
        return key
    return _SPECIAL_KEYS.get(key)


def render(screen, editor: Editor) -> None:
    """Draw the buffer, the mode line and any message, then place the cursor."""
    max_y, max_x = screen.getmaxyx()
    screen.erase()
    for y, text in enumerate(islice(editor.buffer, max(max_y - 1, 0))):
        _put(screen, y, 0, text)

    status_y = max_y - 2
    _put(screen, status_y, 0, editor.mode.label())
    if editor.message:
        _put(screen, status_y, max_x - len(_MESSAGE_SLOT), editor.message)

    cursor_y = min(editor.cursor_y, max(max_y - 1, 0))
    cursor_x = min(editor.cursor_x, max(max_x - 1, 0))
    try:
        screen.move(cursor_y, cursor_x)
    except curses.error:
        pass
    screen.refresh()


def run(screen, editor: Editor) -> None:
    """Read keys from ``screen`` and apply them until the editor stops."""
    render(screen, editor)
    while editor.running:
        key = _translate(screen.get_wch())
        if key is not None:
            editor.handle_key(key)
        render(screen, editor)


def _session(screen, editor: Editor) -> None:
    curses.noecho()
    curses.raw()
    screen.keypad(True)
    run(screen, editor)


def main(argv: Sequence[str] | None = None) -> int:
    """Edit the file named on the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        prog = sys.argv[0] if sys.argv and sys.argv[0] else "modaledit"
        print(f"Usage: {prog} <filename>")
        return 1
    editor = Editor.open(args[0])
    curses.wrapper(_session, editor)
    return 0


if __name__ == "__main__":
    sys.exit(main())