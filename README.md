# lineedit

The editing core of an interactive line editor: a text buffer with a cursor,
keyword completion, and edit modes that turn key presses into editor events.
It has no terminal layer, so it can be driven from any front end or tested on
its own.

## What is in it

- `lineedit.line_buffer.LineBuffer` holds the text (`text`) and the cursor
  (`offset`). Offsets are Python string indices. It supports grapheme- and
  word-aware movement and deletion, moving between lines, finding a character
  to the left or right (the vi `f`/`t`/`F`/`T` moves), upper- and lowercasing
  words, capitalising a character, and swapping words or graphemes.
- `lineedit.segmentation` splits text into extended grapheme clusters
  (`grapheme_indices`) and word segments (`word_bound_indices`), and tells
  whether a segment holds no letter or digit (`is_word_boundary`).
- `lineedit.commands` defines `EditCommand` (an `EditKind` plus an optional
  character or string), its `UndoBehavior`, and `ReedlineEvent` (an
  `EventKind` plus its value), with helpers such as `ReedlineEvent.edit(...)`,
  `ReedlineEvent.multiple(...)` and `ReedlineEvent.until_found(...)`.
- `lineedit.completion` has `Span`, the abstract `Completer`, and
  `DefaultCompleter`, a trie of keywords with a minimum word length and an
  optional set of extra allowed characters.
- `lineedit.circular.CircularCompletionHandler` cycles through the
  completions on repeated calls and then returns to the original line.
- `lineedit.keybindings` has the input events (`KeyEvent`, `KeyCode`,
  `KeyModifiers`, `MouseEvent`, `ResizeEvent`), `PromptEditMode`, the
  abstract `EditMode`, and the `Keybindings` table with `add_binding` and
  `find_binding`.
- `lineedit.emacs.Emacs` and `lineedit.vi.Vi` are edit modes.
  `default_emacs_keybindings()`, `default_vi_normal_keybindings()` and
  `default_vi_insert_keybindings()` give their default tables.
- `lineedit.vi_parser` parses vi normal-mode key sequences of the form
  `[multiplier] command [count] [motion]` (for example `2d3w`) into events.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Usage

Editing a buffer:

```python
from lineedit.line_buffer import LineBuffer

buf = LineBuffer("This is a test")
buf.delete_word_left()
assert buf.text == "This is a "
assert buf.offset == 10
```

Completing words and cycling through the candidates:

```python
from lineedit.circular import CircularCompletionHandler
from lineedit.completion import DefaultCompleter
from lineedit.line_buffer import LineBuffer

completer = DefaultCompleter(["login", "logout"])
handler = CircularCompletionHandler()
buf = LineBuffer("lo")
handler.handle(completer, buf)   # buf.text == "login"
handler.handle(completer, buf)   # buf.text == "logout"
handler.handle(completer, buf)   # buf.text == "lo"
```

Translating key presses into editor events:

```python
from lineedit.commands import EventKind
from lineedit.emacs import Emacs
from lineedit.keybindings import KeyCode, KeyEvent, KeyModifiers

emacs = Emacs()
event = emacs.parse_event(KeyEvent(KeyCode.char("l"), KeyModifiers.CONTROL))
assert event.kind is EventKind.CLEAR_SCREEN
```

Parsing a vi sequence:

```python
from lineedit.vi_parser import parse

result = parse("dw")
event = result.to_reedline_event()   # MULTIPLE holding one CUT_WORD_RIGHT edit
```

## What it does not do

- It does not read the terminal, draw a prompt or repaint anything; the caller
  supplies the key events and shows the buffer.
- It does not run `EditCommand` values against a buffer: there is no editor
  object with an undo/redo stack or a cut buffer, and no clipboard. Edits are
  made by calling `LineBuffer` methods directly.
- It keeps no command history, hints or menus.

## Running the tests

```
pytest
```