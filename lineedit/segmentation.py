"""Grapheme and word segmentation of text.

Offsets are Python string indices (code points). Graphemes are extended
grapheme clusters. Word segments follow the main rules of Unicode default
word boundaries: letters and digits (with joining punctuation such as
apostrophes or decimal points) form one segment, runs of spaces form one
segment, and every other grapheme stands alone.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterator
from enum import Enum, auto

import regex

_GRAPHEME = regex.compile(r"\X")

_MID_LETTER = frozenset(":\u00b7\u0387\u05f4\u2027\ufe13\ufe55\uff1a")
_MID_NUM_LET = frozenset(".'\u2018\u2019\u2024\ufe52\uff07\uff0e")
_MID_NUM = frozenset(",;\u037e\u0589\u060c\u060d\u066c\u07f8\u2044\ufe10\ufe14\ufe50\ufe54\uff0c\uff1b")


class _WordKind(Enum):
    LETTER = auto()
    NUMERIC = auto()
    EXTEND_NUM_LET = auto()
    MID_LETTER = auto()
    MID_NUM_LET = auto()
    MID_NUM = auto()
    SPACE = auto()
    OTHER = auto()


_WORD_LIKE = frozenset({_WordKind.LETTER, _WordKind.NUMERIC, _WordKind.EXTEND_NUM_LET})


def grapheme_indices(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(offset, grapheme)`` for every extended grapheme cluster."""
    for match in _GRAPHEME.finditer(text):
        yield match.start(), match.group()


def _word_kind(grapheme: str) -> _WordKind:
    first = grapheme[0]
    category = unicodedata.category(first)
    if first.isalpha():
        return _WordKind.LETTER
    if category == "Nd":
        return _WordKind.NUMERIC
    if category == "Pc":
        return _WordKind.EXTEND_NUM_LET
    if first in _MID_NUM_LET:
        return _WordKind.MID_NUM_LET
    if first in _MID_LETTER:
        return _WordKind.MID_LETTER
    if first in _MID_NUM:
        return _WordKind.MID_NUM
    if category == "Zs":
        return _WordKind.SPACE
    return _WordKind.OTHER


def _joins(kinds: list[_WordKind], i: int) -> bool:
    """Whether there is no word boundary between grapheme ``i - 1`` and ``i``."""
    prev, cur = kinds[i - 1], kinds[i]
    after = kinds[i + 1] if i + 1 < len(kinds) else None
    before = kinds[i - 2] if i >= 2 else None

    if prev is _WordKind.SPACE and cur is _WordKind.SPACE:
        return True
    if prev in _WORD_LIKE and cur in _WORD_LIKE:
        return True
    letter_mid = (_WordKind.MID_LETTER, _WordKind.MID_NUM_LET)
    if prev is _WordKind.LETTER and cur in letter_mid and after is _WordKind.LETTER:
        return True
    if prev in letter_mid and cur is _WordKind.LETTER and before is _WordKind.LETTER:
        return True
    number_mid = (_WordKind.MID_NUM, _WordKind.MID_NUM_LET)
    if prev is _WordKind.NUMERIC and cur in number_mid and after is _WordKind.NUMERIC:
        return True
    if prev in number_mid and cur is _WordKind.NUMERIC and before is _WordKind.NUMERIC:
        return True
    return False


def word_bound_indices(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(offset, segment)`` for the text split at word boundaries."""
    graphemes = list(grapheme_indices(text))
    if not graphemes:
        return
    kinds = [_word_kind(g) for _, g in graphemes]
    start = 0
    for i in range(1, len(graphemes) + 1):
        if i < len(graphemes) and _joins(kinds, i):
            continue
        begin = graphemes[start][0]
        end = graphemes[i][0] if i < len(graphemes) else len(text)
        yield begin, text[begin:end]
        start = i


def _is_alphanumeric(ch: str) -> bool:
    return ch.isalpha() or ch.isnumeric()


def is_word_boundary(segment: str) -> bool:
    """True if the segment holds no letter or digit."""
    return not any(_is_alphanumeric(ch) for ch in segment)