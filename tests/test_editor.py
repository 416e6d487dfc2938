import pytest

from modaledit.buffer import TextBuffer
from modaledit.editor import Editor, Mode
from modaledit.history import Action, ActionType


def make(rows, path="unused.txt"):
    return Editor(TextBuffer(rows), path)


def feed(editor, keys):
    for key in keys:
        editor.handle_key(key)


def test_mode_labels():
    assert Mode.NORMAL.label() == "-- NORMAL --"
    assert Mode.INSERT.label() == "-- INSERT --"


def test_open_missing_file_gives_one_empty_row(tmp_path):
    editor = Editor.open(tmp_path / "missing.txt")
    assert list(editor.buffer) == [""]
    assert editor.cursor == (0, 0)
    assert editor.mode is Mode.NORMAL


def test_open_places_cursor_at_end_of_last_line(tmp_path):
    lines = ["first", "second line"]
    path = tmp_path / "f.txt"
    path.write_text("\n".join(lines) + "\n")
    editor = Editor.open(path)
    assert list(editor.buffer) == lines
    assert editor.cursor == (len(lines) - 1, len(lines[-1]))


def test_typing_then_undo_and_redo():
    original = "ab"
    typed = "xyz"
    editor = make([original])
    feed(editor, ["i", *typed])
    assert editor.buffer[0] == original + typed
    assert editor.cursor == (0, len(original) + len(typed))
    feed(editor, ["\x1b"])
    assert editor.mode is Mode.NORMAL
    for _ in typed:
        assert editor.undo() is True
    assert editor.buffer[0] == original
    assert editor.cursor == (0, len(original))
    assert editor.message == "Undo!"
    for _ in typed:
        assert editor.redo() is True
    assert editor.buffer[0] == original + typed
    assert editor.cursor == (0, len(original) + len(typed))


def test_normal_mode_keys_do_not_edit():
    editor = make(["text"])
    feed(editor, ["x", "z", "1"])
    assert list(editor.buffer) == ["text"]
    assert len(editor.undo_history) == 0


def test_backspace_records_deleted_character():
    editor = make(["hello"])
    feed(editor, ["i", "\x7f"])
    assert editor.buffer[0] == "hello"[:-1]
    assert editor.cursor == (0, len("hello") - 1)
    feed(editor, ["\x1b", "u"])
    assert editor.buffer[0] == "hello"
    assert editor.cursor == (0, len("hello"))


def test_backspace_at_line_start_joins_and_undo_splits():
    rows = ["top", "bottom"]
    editor = make(rows)
    editor.cursor_y, editor.cursor_x = 1, 0
    feed(editor, ["i", "KEY_BACKSPACE"])
    assert list(editor.buffer) == [rows[0] + rows[1]]
    assert editor.cursor == (0, len(rows[0]))
    editor.undo()
    assert list(editor.buffer) == rows
    assert editor.cursor == (1, 0)
    editor.redo()
    assert list(editor.buffer) == [rows[0] + rows[1]]
    assert editor.cursor == (0, len(rows[0]))


def test_backspace_at_buffer_start_does_nothing():
    editor = make(["abc"])
    editor.cursor_x = 0
    feed(editor, ["i", "\x7f"])
    assert list(editor.buffer) == ["abc"]
    assert len(editor.undo_history) == 0


def test_newline_split_undo_redo():
    text = "leftright"
    cut = len("left")
    editor = make([text])
    editor.cursor_x = cut
    feed(editor, ["i", "\n"])
    assert list(editor.buffer) == [text[:cut], text[cut:]]
    assert editor.cursor == (1, 0)
    editor.undo()
    assert list(editor.buffer) == [text]
    assert editor.cursor == (0, cut)
    editor.redo()
    assert list(editor.buffer) == [text[:cut], text[cut:]]
    assert editor.cursor == (1, 0)


def test_carriage_return_also_splits():
    editor = make(["ab"])
    editor.cursor_x = 1
    feed(editor, ["i", "\r"])
    assert list(editor.buffer) == ["a", "b"]


def test_new_edit_clears_redo_history():
    editor = make([""])
    feed(editor, ["i", "a", "b", "\x1b", "u"])
    assert len(editor.redo_history) == 1
    feed(editor, ["i", "c"])
    assert len(editor.redo_history) == 0
    assert editor.redo() is False


def test_undo_with_empty_history():
    editor = make(["same"])
    assert editor.undo() is False
    assert list(editor.buffer) == ["same"]
    assert len(editor.redo_history) == 0


def test_undo_of_deleted_row_restores_it():
    editor = make(["a", "c"])
    editor.undo_history.push(Action(ActionType.DELETE_ROW, row=1, data="b"))
    assert editor.undo() is True
    assert list(editor.buffer) == ["a", "b", "c"]
    assert editor.cursor == (1, 0)
    assert editor.redo() is True
    assert list(editor.buffer) == ["a", "c"]
    assert editor.cursor_y == 0


def test_undo_of_inserted_row_removes_it():
    editor = make(["keep", ""])
    editor.undo_history.push(Action(ActionType.INSERT_ROW, row=1))
    editor.undo()
    assert list(editor.buffer) == ["keep"]
    assert editor.cursor == (0, len("keep"))


def test_non_printable_ignored_in_insert_mode():
    editor = make(["x"])
    feed(editor, ["i", "\x01", "\t"])
    assert list(editor.buffer) == ["x"]
    assert len(editor.undo_history) == 0


def test_vertical_movement_clamps_column():
    rows = ["a long line", "ab", "another long line"]
    editor = make(rows)
    editor.cursor_y, editor.cursor_x = 0, len(rows[0])
    feed(editor, ["j"])
    assert editor.cursor == (1, len(rows[1]))
    feed(editor, ["KEY_DOWN"])
    assert editor.cursor == (2, len(rows[1]))
    feed(editor, ["j"])
    assert editor.cursor_y == len(rows) - 1
    feed(editor, ["k", "KEY_UP", "k"])
    assert editor.cursor_y == 0


def test_horizontal_movement_wraps_between_rows():
    rows = ["ab", "cd"]
    editor = make(rows)
    editor.cursor_y, editor.cursor_x = 1, 0
    feed(editor, ["h"])
    assert editor.cursor == (0, len(rows[0]))
    feed(editor, ["l"])
    assert editor.cursor == (1, 0)
    feed(editor, ["KEY_RIGHT", "KEY_RIGHT", "KEY_RIGHT"])
    assert editor.cursor == (1, len(rows[1]))
    editor.cursor_y, editor.cursor_x = 0, 0
    feed(editor, ["KEY_LEFT"])
    assert editor.cursor == (0, 0)


def test_save_key_writes_file(tmp_path):
    path = tmp_path / "out.txt"
    editor = make(["one", "two"], path)
    feed(editor, ["\x13"])
    assert path.read_text() == "one\ntwo"
    assert editor.message == "Saved!"


def test_save_round_trip_after_edits(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("start\n")
    editor = Editor.open(path)
    feed(editor, ["i", "\n", "n", "e", "w", "\x1b", "\x13"])
    reopened = Editor.open(path)
    assert list(reopened.buffer) == list(editor.buffer)


def test_save_to_directory_raises(tmp_path):
    editor = make(["x"], tmp_path)
    with pytest.raises(OSError):
        editor.save()


def test_save_key_failure_reports_message(tmp_path):
    editor = make(["x"], tmp_path)
    feed(editor, ["\x13"])
    assert editor.message.startswith("Save failed")
    assert editor.running is True


def test_quit_stops_running():
    editor = make([""])
    feed(editor, ["i", "q"])
    assert editor.running is True
    assert editor.buffer[0] == "q"
    feed(editor, ["\x1b", "q"])
    assert editor.running is False