"""Editable text with a cursor, supporting grapheme- and word-wise editing."""

from __future__ import annotations

from .segmentation import grapheme_indices, is_word_boundary, word_bound_indices


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _last_word_start(text: str) -> int:
    start = 0
    for index, segment in word_bound_indices(text):
        if not is_word_boundary(segment):
            start = index
    return start


class LineBuffer:
    """The entered line(s) and the cursor position within them.

    ``text`` is the content and ``offset`` the cursor, as a string index.
    """

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.offset = len(text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineBuffer):
            return NotImplemented
        return self.text == other.text and self.offset == other.offset

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LineBuffer({self.text!r}, offset={self.offset})"

    def __len__(self) -> int:
        return len(self.text)

    def replace(self, start: int, end: int, text: str) -> None:
        """Replace the content between ``start`` and ``end`` with ``text``."""
        self.replace_range(start, end, text)

    def replace_range(self, start: int, end: int, text: str) -> None:
        """Substitute ``text`` for the range; the cursor is left untouched."""
        if not 0 <= start <= end <= len(self.text):
            raise IndexError(f"range {start}..{end} out of bounds for length {len(self.text)}")
        self.text = self.text[:start] + text + self.text[end:]

    def clear_range(self, start: int, end: int) -> None:
        """Remove the range; the cursor is left untouched."""
        self.replace_range(start, end, "")

    def is_empty(self) -> bool:
        return not self.text

    def is_valid(self) -> bool:
        """Whether the text is encodable and the cursor sits on a grapheme boundary."""
        try:
            self.text.encode("utf-8")
        except UnicodeEncodeError:
            return False
        if not 0 <= self.offset <= len(self.text):
            return False
        return self.offset == len(self.text) or any(
            index == self.offset for index, _ in grapheme_indices(self.text)
        )

    def set_buffer(self, text: str) -> None:
        """Replace the whole content and put the cursor at its end."""
        self.text = text
        self.offset = len(text)

    def line(self) -> int:
        """Index of the line the cursor is on."""
        return self.text.count("\n", 0, self.offset)

    def num_lines(self) -> int:
        return self.text.count("\n") + 1

    def ends_with(self, c: str) -> bool:
        return self.text.endswith(c)

    def move_to_start(self) -> None:
        self.offset = 0

    def move_to_line_start(self) -> None:
        self.offset = self.text.rfind("\n", 0, self.offset) + 1

    def move_to_line_end(self) -> None:
        self.offset = self.find_current_line_end()

    def move_to_end(self) -> None:
        self.offset = len(self.text)

    def find_current_line_end(self) -> int:
        """Where the current line ends: the buffer end or its ``\\n`` / ``\\r\\n``."""
        index = self.text.find("\n", self.offset)
        if index == -1:
            return len(self.text)
        if index > 0 and self.text[index - 1] == "\r":
            return index - 1
        return index

    def grapheme_right_index(self) -> int:
        """Position behind the grapheme right of the cursor."""
        graphemes = grapheme_indices(self.text[self.offset :])
        next(graphemes, None)
        second = next(graphemes, None)
        return len(self.text) if second is None else self.offset + second[0]

    def grapheme_left_index(self) -> int:
        """Position in front of the grapheme left of the cursor."""
        start = 0
        for index, _ in grapheme_indices(self.text[: self.offset]):
            start = index
        return start

    def word_right_index(self) -> int:
        """Position behind the next word to the right."""
        for index, segment in word_bound_indices(self.text[self.offset :]):
            if not is_word_boundary(segment):
                return self.offset + index + len(segment)
        return len(self.text)

    def word_left_index(self) -> int:
        """Position in front of the next word to the left."""
        return _last_word_start(self.text[: self.offset])

    def move_right(self) -> None:
        self.offset = self.grapheme_right_index()

    def move_left(self) -> None:
        self.offset = self.grapheme_left_index()

    def move_word_left(self) -> None:
        self.offset = self.word_left_index()

    def move_word_right(self) -> None:
        self.offset = self.word_right_index()

    def insert_char(self, c: str) -> None:
        """Insert one character at the cursor and move right."""
        _check_char(c)
        self.text = self.text[: self.offset] + c + self.text[self.offset :]
        self.move_right()

    def insert_str(self, text: str) -> None:
        """Insert ``text`` at the cursor and put the cursor behind it."""
        self.text = self.text[: self.offset] + text + self.text[self.offset :]
        self.offset += len(text)

    def clear(self) -> None:
        self.text = ""
        self.offset = 0

    def clear_to_end(self) -> None:
        self.text = self.text[: self.offset]

    def clear_to_line_end(self) -> None:
        """Clear from the cursor to the end of the line, keeping the newline."""
        self.clear_range(self.offset, self.find_current_line_end())

    def clear_to_insertion_point(self) -> None:
        """Clear from the buffer start to the cursor."""
        self.clear_range(0, self.offset)
        self.offset = 0

    def on_whitespace(self) -> bool:
        return self.offset < len(self.text) and self.text[self.offset].isspace()

    def current_word_range(self) -> tuple[int, int]:
        """``(start, end)`` of the word under or right of the cursor."""
        right = self.word_right_index()
        return _last_word_start(self.text[:right]), right

    def current_line_range(self) -> tuple[int, int]:
        """``(start, end)`` of the current line, end past its line terminator."""
        left = self.text.rfind("\n", 0, self.offset) + 1
        newline = self.text.find("\n", self.offset)
        right = len(self.text) if newline == -1 else newline + 1
        return left, right

    def uppercase_word(self) -> None:
        start, end = self.current_word_range()
        self.replace_range(start, end, self.text[start:end].upper())
        self.move_word_right()

    def lowercase_word(self) -> None:
        start, end = self.current_word_range()
        self.replace_range(start, end, self.text[start:end].lower())
        self.move_word_right()

    def word_count(self) -> int:
        return len(self.text.split())

    def capitalize_char(self) -> None:
        """Uppercase the grapheme at the cursor (skipping whitespace) and move right."""
        if self.on_whitespace():
            self.move_word_right()
            self.move_word_left()
        start = self.offset
        right = self.grapheme_right_index()
        if right > start:
            self.replace_range(start, right, self.text[start:right].upper())
            self.move_right()

    def delete_left_grapheme(self) -> None:
        left = self.grapheme_left_index()
        if left < self.offset:
            self.clear_range(left, self.offset)
            self.offset = left

    def delete_right_grapheme(self) -> None:
        right = self.grapheme_right_index()
        if right > self.offset:
            self.clear_range(self.offset, right)

    def delete_word_left(self) -> None:
        left = self.word_left_index()
        self.clear_range(left, self.offset)
        self.offset = left

    def delete_word_right(self) -> None:
        self.clear_range(self.offset, self.word_right_index())

    def swap_words(self) -> None:
        """Swap the current word with the word on its right."""
        first = self.current_word_range()
        self.move_word_right()
        second = self.current_word_range()
        if first != second:
            self.move_word_left()
            word_1 = self.text[first[0] : first[1]]
            word_2 = self.text[second[0] : second[1]]
            self.replace_range(second[0], second[1], word_1)
            self.replace_range(first[0], first[1], word_2)

    def swap_graphemes(self) -> None:
        """Swap the graphemes on either side of the cursor."""
        if self.offset == 0:
            self.move_right()
        elif self.offset == len(self.text):
            self.move_left()

        middle = self.offset
        first_start = self.grapheme_left_index()
        second_end = self.grapheme_right_index()

        if first_start < middle < second_end:
            first = self.text[first_start:middle]
            second = self.text[middle:second_end]
            self.replace_range(middle, second_end, first)
            self.replace_range(first_start, middle, second)
            self.offset = second_end
        else:
            self.offset = middle

    def _grapheme_column(self, line_start: int) -> int:
        return sum(1 for _ in grapheme_indices(self.text[line_start : self.offset]))

    def move_line_up(self) -> None:
        if self.is_cursor_at_first_line():
            return
        old_start, _ = self.current_line_range()
        column = self._grapheme_column(old_start)

        self.offset = old_start
        self.move_left()

        new_start, new_end = self.current_line_range()
        target = new_start
        for count, (index, _) in enumerate(grapheme_indices(self.text[new_start:new_end])):
            if count > column:
                break
            target = new_start + index
        self.offset = target

    def move_line_down(self) -> None:
        if self.is_cursor_at_last_line():
            return
        old_start, old_end = self.current_line_range()
        column = self._grapheme_column(old_start)

        self.offset = old_end

        new_start, new_end = self.current_line_range()
        for count, (index, _) in enumerate(grapheme_indices(self.text[new_start:new_end])):
            if count == column:
                self.offset = new_start + index
                return
        self.offset = self.find_current_line_end()

    def is_cursor_at_first_line(self) -> bool:
        return "\n" not in self.text[: self.offset]

    def is_cursor_at_last_line(self) -> bool:
        return "\n" not in self.text[self.offset :]

    def find_char_right(self, c: str, current_line: bool) -> int | None:
        """Index of the first ``c`` after the grapheme at the cursor, or ``None``."""
        _check_char(c)
        start = self.grapheme_right_index()
        end = self.current_line_range()[1] if current_line else len(self.text)
        index = self.text.find(c, start, end)
        return None if index == -1 else index

    def find_char_left(self, c: str, current_line: bool) -> int | None:
        """Index of the last ``c`` before the cursor, or ``None``."""
        _check_char(c)
        start = self.current_line_range()[0] if current_line else 0
        index = self.text.rfind(c, start, self.offset)
        return None if index == -1 else index

    def move_right_until(self, c: str, current_line: bool) -> int:
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.offset = index
        return self.offset

    def move_right_before(self, c: str, current_line: bool) -> int:
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.offset = index
            self.offset = self.grapheme_left_index()
        return self.offset

    def move_left_until(self, c: str, current_line: bool) -> int:
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.offset = index
        return self.offset

    def move_left_before(self, c: str, current_line: bool) -> int:
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.offset = index + 1
        return self.offset

    def delete_right_until_char(self, c: str, current_line: bool) -> None:
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.clear_range(self.offset, index + 1)

    def delete_right_before_char(self, c: str, current_line: bool) -> None:
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.clear_range(self.offset, index)

    def delete_left_until_char(self, c: str, current_line: bool) -> None:
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.clear_range(index, self.offset)
            self.offset = index

    def delete_left_before_char(self, c: str, current_line: bool) -> None:
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.clear_range(index + 1, self.offset)
            self.offset = index + 1