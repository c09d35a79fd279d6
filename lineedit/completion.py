"""Tab completion: spans, the completer interface and a keyword trie completer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Span:
    """A range of the line, ``start`` inclusive and ``end`` exclusive."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(
                f"Can't create a Span whose end < start, start={self.start}, end={self.end}"
            )


class Completer(ABC):
    """Turns a line and a cursor position into possible completions."""

    @abstractmethod
    def complete(self, line: str, pos: int) -> list[tuple[Span, str]]:
        """Return ``(span, replacement)`` pairs for the text before ``pos``."""


def _is_alphanumeric(ch: str) -> bool:
    return ch.isalpha() or ch.isnumeric()


class _Node:
    """A trie node; ``leaf`` marks the end of an inserted word."""

    __slots__ = ("subnodes", "leaf", "inclusions")

    def __init__(self, inclusions: frozenset[str]) -> None:
        self.subnodes: dict[str, _Node] = {}
        self.leaf = False
        self.inclusions = inclusions

    def clear(self) -> None:
        self.subnodes.clear()

    def word_count(self) -> int:
        return sum(node.word_count() for node in self.subnodes.values()) + int(self.leaf)

    def subnode_count(self) -> int:
        return sum(node.subnode_count() for node in self.subnodes.values()) + 1

    def insert(self, word: str) -> None:
        node = self
        for c in word:
            if c in node.inclusions or _is_alphanumeric(c) or c.isspace():
                node = node.subnodes.setdefault(c, _Node(node.inclusions))
            else:
                break
        node.leaf = True

    def complete(self, prefix: str) -> list[str] | None:
        node = self
        for c in prefix:
            child = node.subnodes.get(c)
            if child is None:
                return None
            node = child
        return list(node._collect(""))

    def _collect(self, partial: str) -> Iterator[str]:
        if self.leaf:
            yield partial
        for c in sorted(self.subnodes):
            yield from self.subnodes[c]._collect(partial + c)


def _dedup(items: list[tuple[Span, str]]) -> list[tuple[Span, str]]:
    result: list[tuple[Span, str]] = []
    for item in items:
        if not result or result[-1] != item:
            result.append(item)
    return result


class DefaultCompleter(Completer):
    """Completes keywords stored in a trie.

    Only letters, digits, whitespace and the characters in ``inclusions`` are
    stored; a word is cut at the first other character. Words shorter than
    ``min_word_len`` are ignored by :meth:`insert`.
    """

    def __init__(
        self,
        words: Iterable[str] = (),
        min_word_len: int = 2,
        inclusions: Iterable[str] = (),
    ) -> None:
        self.min_word_len = min_word_len
        self._root = _Node(frozenset(inclusions))
        self.insert(words)

    def complete(self, line: str, pos: int) -> list[tuple[Span, str]]:
        """Complete the word(s) before ``pos``, longest context last."""
        completions: list[tuple[Span, str]] = []
        if not line:
            return completions
        whitespaces = 0
        span_line = ""
        for piece in reversed(line[:pos].split(" ")):
            if not piece:
                whitespaces += 1
                continue
            span_line = piece if not span_line else f"{piece} {span_line}"
            extensions = self._root.complete(span_line)
            if extensions is None:
                continue
            span = Span(pos - len(span_line) - whitespaces, pos)
            for ext in sorted(extensions):
                candidate = span_line + ext
                if len(candidate) > span.end - span.start:
                    completions.append((span, candidate))
        return _dedup(completions)

    def insert(self, words: Iterable[str]) -> None:
        """Add every word at least ``min_word_len`` long."""
        for word in words:
            if len(word) >= self.min_word_len:
                self._root.insert(word)

    def clear(self) -> None:
        """Remove all words."""
        self._root.clear()

    def word_count(self) -> int:
        """Number of words stored."""
        return self._root.word_count()

    def size(self) -> int:
        """Number of trie nodes, the root included."""
        return self._root.subnode_count()