# termedit

termedit provides the parts of a small full-screen terminal text editor as
plain Python objects. None of them needs a real terminal:

- `termedit.keys` holds key codes, key-combination parsing, JSON keymaps and the
  decoding of raw input bytes into keys.
- `termedit.buffer` holds the text being edited, with its cursor and editing
  operations.
- `termedit.screen` builds the escape sequences that draw the text rows, the
  status bar and a timed status message.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install .[test]
pytest
```

## Keys and keymaps

`Key` is an `IntEnum` of codes for keys that are not a single character:
`BACKSPACE` (127), `ARROW_UP`, `ARROW_DOWN`, `ARROW_LEFT`, `ARROW_RIGHT`,
`PAGE_UP`, `PAGE_DOWN`, `HOME`, `END` and `DELETE`.

`ctrl_key(char)` returns the code a terminal sends for ctrl plus a key, for
example `ctrl_key("q") == 17`.

`parse_key_combo(text)` turns a description such as `"ctrl+q"` or `"shift+up"`
into a frozen `KeyCombo` with the fields `ctrl`, `alt`, `shift` and `key`. The
parts are joined by `+` and are case-insensitive. The modifiers are `ctrl`,
`alt` and `shift`. The named keys are `up`, `down`, `left`, `right`, `pageup`,
`pagedown`, `home`, `end`, `backspace` and `delete`. Any other part must be a
single character. If it is not, the function raises `KeymapError`, which is a
`ValueError`.

`key_combo_to_int(combo)` returns the code the terminal delivers for the
combination. Ctrl with a letter from `a` to `z` becomes the control code. In
every other case the result is the key itself, and `alt` and `shift` do not
change it.

`load_keymap(path)` reads a JSON object that maps key descriptions to command
names. It returns a `dict[int, str]` keyed by key code:

```json
{
  "ctrl+q": "quit",
  "ctrl+s": "save",
  "up": "cursor_up"
}
```

```python
from termedit.keys import Key, load_keymap

keymap = load_keymap("keymap.json")
assert keymap[17] == "quit"
assert keymap[Key.ARROW_UP] == "cursor_up"
```

The function raises `KeymapError` for invalid JSON, for a document that is not
an object of strings, and for a key description it cannot parse. The command
names are stored as they are written, and this package gives them no meaning.

### Decoding input

`KeyReader(read_byte)` decodes raw bytes into key codes. `read_byte` returns the
next byte as an `int`, or `None` when no input is available yet. `read_key()`
calls it again until a key arrives, and skips any sequence it does not
recognise. It decodes the following:

- `ESC [ A`/`B`/`C`/`D` as the arrow keys, and `ESC [ H`/`F` as Home and End
- `ESC [ 5 ~`, `ESC [ 6 ~` and `ESC [ 3 ~` as Page Up, Page Down and Delete
- `ESC [ 1 ; 2 A`…`D` (shift plus an arrow) as the plain arrow keys
- the two-byte UTF-8 forms of `å ä ö Å Ä Ö` as those characters' code points
- a lone escape, where the next byte is not yet available, as 27

```python
from termedit.keys import Key, KeyReader

reader = KeyReader(iter(b"\x1b[Ax").__next__)
assert reader.read_key() == Key.ARROW_UP
assert reader.read_key() == ord("x")
```

## The text buffer

`TextBuffer(tab_stop=4)` holds a list of `Line` objects in `lines`. Each
`Line` has `chars`, the text, and `render`, the text with tabs expanded. The
buffer also holds a `cursor`, which is a `Point(x, y)`, and a `dirty` flag.

```python
from termedit.buffer import TextBuffer
from termedit.keys import Key

buf = TextBuffer()
buf.load_text("hello\nworld\n")   # cursor at 0,0, not dirty
buf.move_cursor(Key.ARROW_DOWN)
buf.insert_char("W")
assert buf.lines[1].chars == "Wworld"
assert buf.dirty
assert buf.to_text() == "hello\nWworld\n"
```

`load_text` splits on newlines, drops one trailing empty line and removes a
trailing `\r` from each line. The editing methods are `insert_row`,
`delete_row`, `insert_char`, `insert_newline` (which splits the line at the
cursor) and `delete_char` (which deletes the character before the cursor, or
joins the line to the one above at column 0). An index out of range is ignored.

`move_cursor(key)` handles the four arrow keys. Left at column 0 moves to the
end of the line above, and right at the end of a line moves to the start of the
next one. After the move the cursor snaps to the end of the line. The cursor
may rest one row past the last line. `set_cursor(point)` places the cursor
directly.

Other helpers:

- `cursor_rx()`, and `compute_rx(chars, x, tab_stop)`, give the column on
  screen of a character index, counting a tab as `tab_stop` columns.
- `expand_tabs(chars, tab_stop)` replaces each tab with `tab_stop` spaces.
- `find_all(query)`, and `search_points(row, text, query)`, return the start
  of every occurrence that does not overlap an earlier one, in reading order.
- `matching_paren(left, right)` searches backwards from just before the cursor
  for the bracket that balances `right`. It raises `NoMatchError` (a
  `LookupError`) if there is none.

## Drawing the screen

`Viewport(rows, cols)` is the visible window. `scroll(buffer)` moves it so that
the cursor lies inside it. `StatusMessage(timeout=3.0, clock=time.monotonic)`
holds a message. Its `set(text)` starts the timeout, and `current()` returns the
text until the timeout has passed.

`render_frame(buffer, viewport, file_name, dirty, status)` scrolls the viewport.
It then returns one string that redraws the whole screen: the text rows, an
inverted status bar and the message line, followed by a move of the cursor to
its place. The parts are also available on their own as `draw_rows`,
`draw_status_bar` and `draw_status_message`. An empty buffer shows a welcome
line a third of the way down the screen. `clear_screen(rows)` returns the
sequences that blank the screen and home the cursor.

```python
import sys
from termedit.screen import StatusMessage, Viewport, render_frame

viewport = Viewport(rows=22, cols=80)
status = StatusMessage()
status.set("Press ctrl+q to exit.")
sys.stdout.write(render_frame(buf, viewport, "notes.txt", buf.dirty, status))
```

## What this package does not do

termedit installs no command and has no main loop. It does not put the
terminal into raw mode, query the window size or read from standard input. It
does not bind keymap commands such as `quit` or `save` to actions, and it does
not show prompts. Reading and writing files is left to the caller: pass the
text to `TextBuffer.load_text` and write out the result of
`TextBuffer.to_text`.