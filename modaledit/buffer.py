"""Line-oriented text buffer and the file routines that fill and store it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike
from typing import Union

StrPath = Union[str, "PathLike[str]"]

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class TextBuffer:
    """An ordered list of text rows.

    Edits addressed at a row or column outside the buffer are ignored, and
    columns past the end of a row are clamped to its length where an edit
    allows it.
    """

    def __init__(self, rows: Iterable[str] | None = None) -> None:
        self._rows: list[str] = list(rows) if rows is not None else []

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: int) -> str:
        return self._rows[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rows)

    def __repr__(self) -> str:
        return f"TextBuffer({self._rows!r})"

    def _has_row(self, index: int) -> bool:
        return 0 <= index < len(self._rows)

    def insert_row(self, index: int, text: str = "") -> None:
        """Insert a row before ``index``; ``index`` may equal the row count."""
        if not 0 <= index <= len(self._rows):
            return
        self._rows.insert(index, text)

    def delete_row(self, index: int) -> None:
        """Remove the row at ``index``."""
        if not self._has_row(index):
            return
        del self._rows[index]

    def set_row(self, index: int, text: str) -> None:
        """Replace the whole contents of an existing row."""
        if not self._has_row(index):
            raise IndexError(f"row {index} out of range")
        self._rows[index] = text

    def insert_char(self, row: int, col: int, ch: str) -> None:
        """Insert a single character at ``col``, clamped to the row's end."""
        if len(ch) != 1:
            raise ValueError("exactly one character is inserted at a time")
        if not self._has_row(row) or col < 0:
            return
        text = self._rows[row]
        col = min(col, len(text))
        self._rows[row] = text[:col] + ch + text[col:]

    def delete_char(self, row: int, col: int) -> None:
        """Delete the character at ``col`` if the row has one there."""
        if not self._has_row(row):
            return
        text = self._rows[row]
        if not 0 <= col < len(text):
            return
        self._rows[row] = text[:col] + text[col + 1:]

    def split_row(self, row: int, col: int) -> None:
        """Move everything from ``col`` onwards into a new row below."""
        if not self._has_row(row) or col < 0:
            return
        text = self._rows[row]
        col = min(col, len(text))
        self._rows[row] = text[:col]
        self._rows.insert(row + 1, text[col:])

    def join_rows(self, row1: int, row2: int) -> None:
        """Append ``row2`` to ``row1`` and remove it; the rows must be adjacent."""
        if not 0 <= row1 < len(self._rows) - 1 or row2 != row1 + 1:
            return
        self._rows[row1] += self._rows[row2]
        del self._rows[row2]


def read_file(path: StrPath) -> TextBuffer:
    """Load a file into a buffer, one row per line.

    A file that cannot be opened, or holds nothing, gives a single empty row.
    Only the newline character ends a line; a final newline adds no row.
    """
    try:
        with open(path, encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
            text = handle.read()
    except OSError:
        return TextBuffer([""])

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return TextBuffer(lines or [""])


def save_file(path: StrPath, buffer: TextBuffer) -> None:
    """Write the buffer's rows joined by newlines, with no newline at the end."""
    with open(path, "w", encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
        handle.write("\n".join(buffer))