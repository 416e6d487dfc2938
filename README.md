# modaledit

A small modal text editor for the terminal. It has a normal mode for moving
around and an insert mode for typing. Every edit can be undone and redone.

## Installing

    pip install .

The terminal front end uses the standard `curses` module, so it runs where
Python provides `curses` (Linux, macOS and other POSIX systems).

## Running

    modaledit notes.txt

Give exactly one file name. With any other number of arguments the command
prints a usage line and exits with status 1.

If the file cannot be opened, for example because it does not exist yet, the
editor starts with one empty line. The file is written only when you save.
Files are read and written as UTF-8; lines are split on `\n` only, a final
newline adds no extra line, and a saved file has no newline at its end.

On start the cursor sits at the end of the last line.

## Keys

Normal mode (the starting mode):

| Key          | Action                                        |
|--------------|-----------------------------------------------|
| `i`          | switch to insert mode                         |
| `h` / Left   | move left, wrapping to the end of the previous line |
| `l` / Right  | move right, wrapping to the start of the next line  |
| `k` / Up     | move up                                       |
| `j` / Down   | move down                                     |
| `u`          | undo                                          |
| Ctrl-R       | redo                                          |
| Ctrl-S       | save                                          |
| `q`          | quit                                          |

Insert mode:

| Key        | Action                                                              |
|------------|---------------------------------------------------------------------|
| Esc        | back to normal mode                                                 |
| printable  | insert the character at the cursor (ASCII space to `~`)             |
| Enter      | split the line at the cursor                                        |
| Backspace  | delete the character before the cursor, or join with the line above |

The current mode is shown as `-- NORMAL --` or `-- INSERT --` near the bottom
of the screen, with `Saved!`, `Undo!` or `Redo!` at the right after those
commands. If saving fails, the message reads `Save failed: ...` and the editor
keeps running. Any new edit clears the redo history.

## Using it as a library

The editing logic does not need a terminal. Keys are passed to
`Editor.handle_key` as one-character strings, or as the names `"KEY_UP"`,
`"KEY_DOWN"`, `"KEY_LEFT"`, `"KEY_RIGHT"` and `"KEY_BACKSPACE"`:

```python
from modaledit.editor import Editor, Mode

editor = Editor.open("notes.txt")
editor.handle_key("i")
assert editor.mode is Mode.INSERT
editor.type_char("x")
editor.newline()
editor.undo()
editor.redo()
editor.save()
print(editor.cursor, editor.message)
```

The editor also has `move_up`, `move_down`, `move_left`, `move_right` and
`backspace`, and the attributes `buffer`, `path`, `mode`, `cursor_y`,
`cursor_x`, `message`, `running`, `undo_history` and `redo_history`.
`undo()` and `redo()` return whether there was an edit to reverse or reapply.

- `modaledit.buffer.TextBuffer` holds the lines and offers `insert_row`,
  `delete_row`, `set_row`, `insert_char`, `delete_char`, `split_row` and
  `join_rows`. Edits aimed outside the buffer are ignored.
- `modaledit.buffer.read_file` and `save_file` load and store a buffer.
- `modaledit.history` defines `ActionType`, the frozen `Action` record and
  `History`, a stack with `push`, `pop` (raises `IndexError` when empty) and
  `clear`.
- `modaledit.tui` has `render(screen, editor)`, `run(screen, editor)` and
  `main(argv=None)`, the entry point of the `modaledit` command.

## What it does not do

The screen shows only as many lines as fit in the terminal, from the first
line on; there is no scrolling, so lines below the window can be edited but
not seen. There is no search, no syntax highlighting, no way to open another
file from inside the editor, and no prompt before quitting with unsaved
changes.