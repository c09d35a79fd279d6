"""Bash style cycling through completions on repeated tab presses."""

from __future__ import annotations

from .completion import Completer
from .line_buffer import LineBuffer


def _copy(buffer: LineBuffer) -> LineBuffer:
    duplicate = LineBuffer(buffer.text)
    duplicate.offset = buffer.offset
    return duplicate


class CircularCompletionHandler:
    """Rotates through the completer's suggestions, then back to the original line."""

    def __init__(self) -> None:
        self._initial_line = LineBuffer()
        self._index = 0
        self._last_buffer: LineBuffer | None = None

    def handle(self, completer: Completer, present_buffer: LineBuffer) -> None:
        """Apply the next completion to ``present_buffer`` in place."""
        if self._last_buffer is not None and self._last_buffer != present_buffer:
            self._index = 0

        if self._index == 0:
            self._initial_line = _copy(present_buffer)
        else:
            present_buffer.text = self._initial_line.text
            present_buffer.offset = self._initial_line.offset

        completions = completer.complete(present_buffer.text, present_buffer.offset)

        if completions:
            if self._index < len(completions):
                span, replacement = completions[self._index]
                self._index += 1
                offset = present_buffer.offset + len(replacement) - (span.end - span.start)
                present_buffer.replace(span.start, span.end, replacement)
                present_buffer.offset = offset
            else:
                self._index = 0

        self._last_buffer = _copy(present_buffer)