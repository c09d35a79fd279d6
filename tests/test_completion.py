import pytest

from lineedit.completion import Completer, DefaultCompleter, Span

HEROES = ["batman", "robin", "batmobile", "batcave", "robber"]


def test_complete_prefix():
    completer = DefaultCompleter(HEROES)
    assert completer.complete("bat", 3) == [
        (Span(0, 3), "batcave"),
        (Span(0, 3), "batman"),
        (Span(0, 3), "batmobile"),
    ]


def test_complete_after_other_words():
    completer = DefaultCompleter(HEROES)
    assert completer.complete("to the bat", 10) == [
        (Span(7, 10), "batcave"),
        (Span(7, 10), "batman"),
        (Span(7, 10), "batmobile"),
    ]


def test_insert_after_construction():
    completer = DefaultCompleter()
    completer.insert(HEROES)
    assert completer.complete("rob", 3) == [(Span(0, 3), "robber"), (Span(0, 3), "robin")]


def test_word_count_and_size():
    completer = DefaultCompleter(HEROES)
    assert completer.word_count() == 5
    assert completer.size() == 24


def test_clear():
    completer = DefaultCompleter(HEROES)
    completer.clear()
    assert completer.size() == 1
    assert completer.word_count() == 0
    assert completer.complete("bat", 3) == []


def test_insert_in_parts_equals_insert_at_once():
    whole = DefaultCompleter(["a", "line", "with", "many", "words"])
    parts = DefaultCompleter()
    parts.insert(["a", "line", "with"])
    parts.insert(["many", "words"])
    assert whole.word_count() == parts.word_count() == 4
    assert whole.size() == parts.size()


@pytest.mark.parametrize("min_len, expected", [(4, 3), (1, 5)])
def test_min_word_len(min_len, expected):
    completer = DefaultCompleter(min_word_len=min_len)
    completer.insert(["one", "two", "three", "four", "five"])
    assert completer.word_count() == expected


def test_min_word_len_only_affects_future_inserts():
    completer = DefaultCompleter(["ab"])
    completer.min_word_len = 5
    completer.insert(["abcd"])
    assert completer.word_count() == 1


def test_special_characters_cut_words_by_default():
    completer = DefaultCompleter(["test-hyphen", "test_underscore"])
    assert completer.complete("te", 2) == [(Span(0, 2), "test")]


def test_inclusions_keep_special_characters():
    completer = DefaultCompleter(["test-hyphen", "test_underscore"], inclusions=["-", "_"])
    assert completer.complete("te", 2) == [
        (Span(0, 2), "test-hyphen"),
        (Span(0, 2), "test_underscore"),
    ]


def test_complete_empty_line():
    completer = DefaultCompleter(HEROES)
    assert completer.complete("", 0) == []


def test_exact_word_not_offered():
    completer = DefaultCompleter(["batman"])
    assert completer.complete("batman", 6) == []


def test_trailing_space_counts_in_span():
    completer = DefaultCompleter(["hello world"])
    assert completer.complete("hello ", 6) == [(Span(0, 6), "hello world")]


def test_multi_word_entries():
    completer = DefaultCompleter(["hello world", "hello world reedline", "test"])
    assert completer.complete("hello wo", 8) == [
        (Span(0, 8), "hello world"),
        (Span(0, 8), "hello world reedline"),
    ]


def test_span_rejects_end_before_start():
    with pytest.raises(ValueError):
        Span(3, 2)


def test_span_ordering():
    assert sorted([Span(2, 5), Span(0, 1), Span(2, 3)]) == [Span(0, 1), Span(2, 3), Span(2, 5)]


def test_completer_is_abstract():
    with pytest.raises(TypeError):
        Completer()