"""Modal editing state: cursor, mode, key handling, undo and redo."""

from __future__ import annotations

import enum
from os import PathLike
from typing import Union

from modaledit.buffer import TextBuffer, read_file, save_file
from modaledit.history import Action, ActionType, History

StrPath = Union[str, "PathLike[str]"]

ESC = "\x1b"
BACKSPACE = "\x7f"
SAVE_KEY = "\x13"  # Ctrl-S
REDO_KEY = "\x12"  # Ctrl-R
UNDO_KEY = "u"

KEY_UP = "KEY_UP"
KEY_DOWN = "KEY_DOWN"
KEY_LEFT = "KEY_LEFT"
KEY_RIGHT = "KEY_RIGHT"
KEY_BACKSPACE = "KEY_BACKSPACE"


class Mode(enum.Enum):
    """The editor's input modes."""

    NORMAL = "normal"
    INSERT = "insert"

    def label(self) -> str:
        """The text shown in the status line for this mode."""
        if self is Mode.INSERT:
            return "-- INSERT --"
        return "-- NORMAL --"


class Editor:
    """A buffer being edited, with its cursor, mode and edit history.

    Keys are given to :meth:`handle_key` as single characters, or as the
    names ``KEY_UP``, ``KEY_DOWN``, ``KEY_LEFT``, ``KEY_RIGHT`` and
    ``KEY_BACKSPACE`` for special keys.
    """

    def __init__(self, buffer: TextBuffer, path: StrPath) -> None:
        self.buffer = buffer
        self.path = path
        self.mode = Mode.NORMAL
        self.undo_history = History()
        self.redo_history = History()
        self.message = ""
        self.running = True
        if len(buffer) > 0:
            self.cursor_y = len(buffer) - 1
            self.cursor_x = len(buffer[self.cursor_y])
        else:
            self.cursor_y = 0
            self.cursor_x = 0

    @classmethod
    def open(cls, path: StrPath) -> Editor:
        """Load ``path`` and place the cursor at the end of its last line."""
        return cls(read_file(path), path)

    @property
    def cursor(self) -> tuple[int, int]:
        """The cursor as ``(row, column)``."""
        return self.cursor_y, self.cursor_x

    def __repr__(self) -> str:
        return (
            f"Editor(path={self.path!r}, mode={self.mode.name}, "
            f"cursor={self.cursor})"
        )

    # ------------------------------------------------------------------ keys

    def handle_key(self, key: str) -> None:
        """Act on one key press according to the current mode."""
        if self.mode is Mode.NORMAL:
            self._handle_normal(key)
        else:
            self._handle_insert(key)

    def _handle_normal(self, key: str) -> None:
        if key == UNDO_KEY:
            self.undo()
        elif key == REDO_KEY:
            self.redo()
        elif key == SAVE_KEY:
            try:
                self.save()
            except OSError as err:
                self.message = f"Save failed: {err.strerror or err}"
        elif key == "q":
            self.running = False
        elif key == "i":
            self.mode = Mode.INSERT
            self.message = ""
        elif key in (KEY_UP, "k"):
            self.move_up()
        elif key in (KEY_DOWN, "j"):
            self.move_down()
        elif key in (KEY_LEFT, "h"):
            self.move_left()
        elif key in (KEY_RIGHT, "l"):
            self.move_right()

    def _handle_insert(self, key: str) -> None:
        if key == ESC:
            self.mode = Mode.NORMAL
            self.message = ""
        elif key in (BACKSPACE, KEY_BACKSPACE):
            self.backspace()
        elif key in ("\n", "\r"):
            self.newline()
        elif len(key) == 1 and " " <= key <= "~":
            self.type_char(key)

    # ------------------------------------------------------------- movement

    def _row_length(self, row: int) -> int:
        return len(self.buffer[row])

    def _clamp_cursor(self) -> None:
        if len(self.buffer) == 0:
            self.cursor_y = 0
            self.cursor_x = 0
        else:
            self.cursor_y = min(self.cursor_y, len(self.buffer) - 1)
            self.cursor_x = min(self.cursor_x, self._row_length(self.cursor_y))

    def move_up(self) -> None:
        """Move to the previous row, keeping the column where it fits."""
        if self.cursor_y > 0:
            self.cursor_y -= 1
            self.cursor_x = min(self.cursor_x, self._row_length(self.cursor_y))

    def move_down(self) -> None:
        """Move to the next row, keeping the column where it fits."""
        if self.cursor_y < len(self.buffer) - 1:
            self.cursor_y += 1
            self.cursor_x = min(self.cursor_x, self._row_length(self.cursor_y))

    def move_left(self) -> None:
        """Move one column left, or to the end of the previous row."""
        if self.cursor_x > 0:
            self.cursor_x -= 1
        elif self.cursor_y > 0:
            self.cursor_y -= 1
            self.cursor_x = self._row_length(self.cursor_y)

    def move_right(self) -> None:
        """Move one column right, or to the start of the next row."""
        if self.cursor_y >= len(self.buffer):
            return
        if self.cursor_x < self._row_length(self.cursor_y):
            self.cursor_x += 1
        elif self.cursor_y < len(self.buffer) - 1:
            self.cursor_y += 1
            self.cursor_x = 0

    # ---------------------------------------------------------------- edits

    def _record(self, action: Action) -> None:
        self.undo_history.push(action)
        self.redo_history.clear()

    def type_char(self, ch: str) -> None:
        """Insert ``ch`` at the cursor and move past it."""
        row, col = self.cursor
        self.buffer.insert_char(row, col, ch)
        self._record(Action(ActionType.INSERT_CHAR, row=row, col=col, data=ch))
        self.cursor_x += 1
        self.message = ""

    def backspace(self) -> None:
        """Delete the character before the cursor, or join with the row above."""
        row, col = self.cursor
        if col > 0:
            deleted = self.buffer[row][col - 1]
            self.buffer.delete_char(row, col - 1)
            self._record(
                Action(ActionType.DELETE_CHAR, row=row, col=col - 1, data=deleted)
            )
            self.cursor_x -= 1
        elif row > 0:
            moved = self.buffer[row]
            original = self._row_length(row - 1)
            self.buffer.join_rows(row - 1, row)
            self._record(
                Action(
                    ActionType.JOIN_ROWS,
                    row=row - 1,
                    col=original,
                    data=moved,
                    original_row1_size=original,
                )
            )
            self.cursor_y -= 1
            self.cursor_x = original
        else:
            return
        self.message = ""

    def newline(self) -> None:
        """Split the row at the cursor and move to the start of the new row."""
        row, col = self.cursor
        self.buffer.split_row(row, col)
        moved = self.buffer[row + 1]
        self._record(Action(ActionType.SPLIT_ROW, row=row, col=col, data=moved))
        self.cursor_y += 1
        self.cursor_x = 0
        self.message = ""

    # --------------------------------------------------------- undo / redo

    def undo(self) -> bool:
        """Reverse the most recent edit; return whether there was one."""
        self.message = "Undo!"
        if len(self.undo_history) == 0:
            return False
        action = self.undo_history.pop()
        buf = self.buffer
        row, col = action.row, action.col
        kind = action.type

        if kind is ActionType.INSERT_CHAR:
            buf.delete_char(row, col)
            self.cursor_y, self.cursor_x = row, col
        elif kind is ActionType.DELETE_CHAR:
            buf.insert_char(row, col, action.data[0])
            self.cursor_y, self.cursor_x = row, col + 1
        elif kind is ActionType.INSERT_ROW:
            buf.delete_row(row)
            self.cursor_y = row - 1 if row > 0 else 0
            self.cursor_x = (
                self._row_length(self.cursor_y)
                if 0 <= self.cursor_y < len(buf)
                else 0
            )
        elif kind is ActionType.DELETE_ROW:
            buf.insert_row(row, action.data)
            self.cursor_y, self.cursor_x = row, 0
        elif kind is ActionType.SPLIT_ROW:
            buf.join_rows(row, row + 1)
            self.cursor_y, self.cursor_x = row, col
        elif kind is ActionType.JOIN_ROWS:
            buf.split_row(row, action.original_row1_size)
            buf.set_row(row + 1, action.data)
            self.cursor_y, self.cursor_x = row + 1, 0

        self._clamp_cursor()
        self.redo_history.push(action)
        return True

    def redo(self) -> bool:
        """Reapply the most recently undone edit; return whether there was one."""
        if len(self.redo_history) == 0:
            return False
        action = self.redo_history.pop()
        buf = self.buffer
        row, col = action.row, action.col
        kind = action.type

        if kind is ActionType.INSERT_CHAR:
            buf.insert_char(row, col, action.data[0])
            self.cursor_y, self.cursor_x = row, col + 1
        elif kind is ActionType.DELETE_CHAR:
            buf.delete_char(row, col)
            self.cursor_y, self.cursor_x = row, col
        elif kind is ActionType.INSERT_ROW:
            buf.insert_row(row)
            self.cursor_y, self.cursor_x = row, 0
        elif kind is ActionType.DELETE_ROW:
            buf.delete_row(row)
            self.cursor_y = row - 1 if row > 0 else 0
            self.cursor_x = (
                min(self.cursor_x, self._row_length(self.cursor_y))
                if 0 <= self.cursor_y < len(buf)
                else 0
            )
        elif kind is ActionType.SPLIT_ROW:
            buf.split_row(row, col)
            buf.set_row(row + 1, action.data)
            self.cursor_y, self.cursor_x = row + 1, 0
        elif kind is ActionType.JOIN_ROWS:
            buf.join_rows(row, row + 1)
            self.cursor_y, self.cursor_x = row, action.original_row1_size

        self._clamp_cursor()
        self.undo_history.push(action)
        self.message = "Redo!"
        return True

    # ----------------------------------------------------------------- file

    def save(self) -> None:
        """Write the buffer to the editor's file."""
        save_file(self.path, self.buffer)
        self.message = "Saved!"