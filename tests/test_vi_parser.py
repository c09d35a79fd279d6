from collections import deque

import pytest

from lineedit.commands import EditCommand, EditKind, EventKind, ReedlineEvent
from lineedit.vi_parser import (
    Command,
    CommandKind,
    Motion,
    MotionKind,
    ParseResult,
    ReedlineOption,
    parse,
    parse_command,
    parse_motion,
)


def ev(kind):
    return ReedlineEvent(kind)


def edit(kind, arg=None):
    return ReedlineEvent.edit(EditCommand(kind, arg))


def test_delete_word():
    assert parse("dw") == ParseResult(
        multiplier=None,
        command=Command(CommandKind.DELETE),
        count=None,
        motion=Motion(MotionKind.WORD),
        valid=True,
    )


def test_two_delete_word():
    assert parse("2dw") == ParseResult(
        multiplier=2,
        command=Command(CommandKind.DELETE),
        count=None,
        motion=Motion(MotionKind.WORD),
        valid=True,
    )


def test_two_delete_two_word():
    assert parse("2d2w") == ParseResult(
        multiplier=2,
        command=Command(CommandKind.DELETE),
        count=2,
        motion=Motion(MotionKind.WORD),
        valid=True,
    )


def test_two_delete_twenty_word():
    assert parse("2d20w") == ParseResult(
        multiplier=2,
        command=Command(CommandKind.DELETE),
        count=20,
        motion=Motion(MotionKind.WORD),
        valid=True,
    )


def test_two_delete_two_lines():
    assert parse("2dd") == ParseResult(
        multiplier=2,
        command=Command(CommandKind.DELETE),
        count=None,
        motion=Motion(MotionKind.LINE),
        valid=True,
    )


def test_has_garbage():
    assert parse("2dm") == ParseResult(
        multiplier=2,
        command=Command(CommandKind.DELETE),
        count=None,
        motion=None,
        valid=False,
    )


def test_two_up():
    assert parse("2k") == ParseResult(
        multiplier=2,
        command=Command(CommandKind.MOVE_UP),
        count=None,
        motion=None,
        valid=True,
    )


@pytest.mark.parametrize(
    "keys, expected",
    [
        ("2k", ReedlineEvent.multiple(ev(EventKind.UP), ev(EventKind.UP))),
        ("k", ReedlineEvent.multiple(ev(EventKind.UP))),
        ("2j", ReedlineEvent.multiple(ev(EventKind.DOWN), ev(EventKind.DOWN))),
        ("j", ReedlineEvent.multiple(ev(EventKind.DOWN))),
        ("2l", ReedlineEvent.multiple(ev(EventKind.RIGHT), ev(EventKind.RIGHT))),
        ("l", ReedlineEvent.multiple(ev(EventKind.RIGHT))),
        ("2h", ReedlineEvent.multiple(ev(EventKind.LEFT), ev(EventKind.LEFT))),
        ("h", ReedlineEvent.multiple(ev(EventKind.LEFT))),
        ("0", ReedlineEvent.multiple(edit(EditKind.MOVE_TO_LINE_START))),
        ("$", ReedlineEvent.multiple(edit(EditKind.MOVE_TO_LINE_END))),
        ("i", ReedlineEvent.multiple(ev(EventKind.REPAINT))),
        ("p", ReedlineEvent.multiple(edit(EditKind.PASTE_CUT_BUFFER_AFTER))),
        (
            "2p",
            ReedlineEvent.multiple(
                edit(EditKind.PASTE_CUT_BUFFER_AFTER), edit(EditKind.PASTE_CUT_BUFFER_AFTER)
            ),
        ),
        ("u", ReedlineEvent.multiple(edit(EditKind.UNDO))),
        ("2u", ReedlineEvent.multiple(edit(EditKind.UNDO), edit(EditKind.UNDO))),
        ("dd", ReedlineEvent.multiple(edit(EditKind.CUT_CURRENT_LINE))),
        ("dw", ReedlineEvent.multiple(edit(EditKind.CUT_WORD_RIGHT))),
    ],
)
def test_reedline_move(keys, expected):
    assert parse(keys).to_reedline_event() == expected


def test_delete_alone_is_incomplete_but_valid():
    result = parse("d")
    assert result.valid is True
    assert result.to_reedline_event() == ev(EventKind.NONE)


def test_delete_to_start_gives_none():
    result = parse("d0")
    assert result.motion == Motion(MotionKind.START)
    assert result.to_reedline_event() == ev(EventKind.NONE)


def test_multiplier_and_count_multiply():
    event = parse("2d2w").to_reedline_event()
    assert event == ReedlineEvent.multiple(*[edit(EditKind.CUT_WORD_RIGHT)] * 4)


def test_change_word_adds_repaint():
    assert parse("cw").to_reedline_event() == ReedlineEvent.multiple(
        edit(EditKind.CUT_WORD_RIGHT), ev(EventKind.REPAINT)
    )


def test_change_line():
    assert parse("cd").to_reedline_event() == ReedlineEvent.multiple(
        edit(EditKind.MOVE_TO_START),
        edit(EditKind.CLEAR_TO_LINE_END),
        ev(EventKind.REPAINT),
    )


def test_find_command_does_not_consume_target():
    result = parse("fa")
    assert result.command == Command(CommandKind.MOVE_RIGHT_UNTIL, "a")
    assert result.valid is False
    assert result.to_reedline_event() == ReedlineEvent.multiple(
        edit(EditKind.MOVE_RIGHT_UNTIL, "a")
    )


def test_find_command_without_target_is_incomplete():
    result = parse("f")
    assert result.command == Command(CommandKind.INCOMPLETE)
    assert result.to_reedline_event() == ev(EventKind.NONE)


def test_delete_until_char_motion():
    result = parse("dfx")
    assert result.motion == Motion(MotionKind.RIGHT_UNTIL, "x")
    assert result.to_reedline_event() == ReedlineEvent.multiple(
        edit(EditKind.CUT_RIGHT_UNTIL, "x")
    )


def test_count_without_motion_gives_none():
    assert parse("d2").to_reedline_event() == ev(EventKind.NONE)


def test_empty_input_is_invalid():
    result = parse("")
    assert result.valid is False
    assert result.to_reedline_event() == ev(EventKind.NONE)


@pytest.mark.parametrize(
    "keys, expected",
    [("i", True), ("a", True), ("A", True), ("s", True), ("cw", True), ("c", False), ("dw", False), ("k", False)],
)
def test_enter_insert_mode(keys, expected):
    assert parse(keys).enter_insert_mode() is expected


def test_parse_command_consumes_from_deque():
    stream = deque("dw")
    assert parse_command(stream) == Command(CommandKind.DELETE)
    assert list(stream) == ["w"]


def test_parse_motion_consumes_from_deque():
    stream = deque("$x")
    assert parse_motion(stream) == Motion(MotionKind.END)
    assert list(stream) == ["x"]


def test_parse_motion_unknown_returns_none():
    assert parse_motion("z") is None


def test_to_reedline_for_delete_is_incomplete():
    assert Command(CommandKind.DELETE).to_reedline() == [ReedlineOption.incomplete()]


def test_to_reedline_with_motion_for_non_operator_is_none():
    assert Command(CommandKind.MOVE_UP).to_reedline_with_motion(Motion(MotionKind.WORD), None) is None


def test_to_reedline_with_motion_count():
    options = Command(CommandKind.DELETE).to_reedline_with_motion(Motion(MotionKind.END), 3)
    assert options == [ReedlineOption.edit(EditCommand(EditKind.CUT_TO_END))] * 3


def test_command_needs_char_for_find():
    with pytest.raises(ValueError):
        Command(CommandKind.MOVE_LEFT_BEFORE)


def test_motion_rejects_char_for_word():
    with pytest.raises(ValueError):
        Motion(MotionKind.WORD, "x")