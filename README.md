# modaledit

A small modal, vi-like text editor for the terminal, built on `curses`.
Lines are stored as UTF-8 bytes, and cursor columns and rendering take the
display width of wide characters into account (via `wcwidth`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Running

```
modaledit
```

The editor opens a built-in sample buffer (see `modaledit.app.build_buffer`)
and starts in Normal mode. The status line at the bottom shows the current
mode, the number of lines, the last key pressed, the latest message and the
cursor position. Line numbers are shown relative to the cursor line; the
cursor line shows its absolute number.

Loading and saving use a single fixed file, `modaledit.files.DEFAULT_PATH`
(`./chuj` in the current directory).

## Modes and keys

### Normal mode

| Key        | Action                                          |
|------------|-------------------------------------------------|
| `h j k l`  | move left, down, up, right                      |
| `0` / `$`  | start / end of line                             |
| `^`        | first word character of the line                |
| `w` / `b`  | next / previous word                            |
| `e`        | end of word                                     |
| `f` `F`    | find a character forward / backward             |
| `;`        | repeat the last find (forward)                  |
| `g` / `G`  | start / end of the buffer                       |
| `i` / `a`  | insert before / after the cursor                |
| `x`        | delete the character under the cursor           |
| `r`        | replace the character under the cursor          |
| `s`        | delete the character and enter Insert mode      |
| `d`        | delete over the next motion (`Esc` cancels)     |
| `J`        | join the next line onto the current one         |
| `K`        | split the line at the cursor                    |
| `Ctrl-S`   | save the buffer to the file                     |
| `Ctrl-W`   | load the file into the buffer                   |
| `:`        | enter Command mode                              |
| `/`        | enter Search mode                               |
| `q`        | quit                                            |

Loading inserts the file's lines at the top of the buffer; the lines already
there are kept below them. Save and load failures are reported on the
status line.

### Insert mode

Typed characters are inserted at the cursor. `Esc` returns to Normal mode,
`Enter` splits the line, `Backspace` deletes the previous character (joining
with the line above at the start of a line), and the arrow keys, `Home` and
`End` move the cursor.

### Command mode

Type a command and press `Enter`; `Esc` cancels. A command may be
abbreviated down to its shortest accepted prefix:

| Command  | Shortest | Action                          |
|----------|----------|---------------------------------|
| `:write` | `:w`     | save the buffer to the file     |
| `:edit`  | `:ed`    | load the file into the buffer   |

Unknown commands are reported on the status line as `Command not found`.

## What it does not do

- There is no way to choose a file: the editor always starts with the sample
  buffer, and loading and saving always use `DEFAULT_PATH`.
- Search mode only collects the typed text; pressing `Enter` returns to
  Normal mode without searching.
- There is no undo, no yank/paste and no counts before commands.

## Using the pieces as a library

The editing core does not depend on the terminal and can be driven
directly:

```python
from modaledit.buffer import Buffer, Pos
from modaledit.utf8 import byte_to_column

buf = Buffer()
buf.insert_line(0, "héllo world")
buf.insert_char(Pos(0, 0), ord(">"))
print(buf.get_line(0).decode())  # >héllo world
print(buf.end())                 # Pos(row=0, col=13): byte length of the last line

data = "日本".encode()
print(byte_to_column(data, 3))   # 2: one double-width character
```

- `modaledit.utf8` – byte/column helpers for UTF-8 lines.
- `modaledit.buffer` – `Buffer`, `Pos`, `Range` and `normalize_range`.
- `modaledit.motion` – `Motions` computes the ranges covered by the vi motions.
- `modaledit.actions` – `Editor` applies the Normal and Insert mode actions.
- `modaledit.command` – `CommandPrompt`, `Command` and `match_command`.
- `modaledit.files` – `load_into_buffer` and `save_from_buffer`.
- `modaledit.input` – `InputHandler` turns key presses into those actions.
- `modaledit.render` – the curses `Renderer` and its helpers.