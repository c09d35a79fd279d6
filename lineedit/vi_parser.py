"""Parsing of vi normal-mode key sequences into editor events.

A sequence has the shape ``[multiplier] command [count] [motion]``, for
example ``2d3w``. The characters are read from the left of a
:class:`collections.deque`. Recognised characters are consumed; the
argument character of ``f``, ``t``, ``F`` and ``T`` is only looked at.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

from .commands import EditCommand, EditKind, EventKind, ReedlineEvent

_ASCII_DIGITS = frozenset("0123456789")


class CommandKind(Enum):
    """The vi normal-mode commands."""

    INCOMPLETE = auto()
    DELETE = auto()
    DELETE_CHAR = auto()
    PASTE_AFTER = auto()
    PASTE_BEFORE = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_WORD_RIGHT = auto()
    MOVE_WORD_LEFT = auto()
    MOVE_TO_LINE_START = auto()
    MOVE_TO_LINE_END = auto()
    ENTER_VI_APPEND = auto()
    ENTER_VI_INSERT = auto()
    UNDO = auto()
    DELETE_TO_END = auto()
    APPEND_TO_END = auto()
    CHANGE = auto()
    MOVE_RIGHT_UNTIL = auto()
    MOVE_RIGHT_BEFORE = auto()
    MOVE_LEFT_UNTIL = auto()
    MOVE_LEFT_BEFORE = auto()
    HISTORY_SEARCH = auto()


_COMMAND_CHAR_KINDS = frozenset(
    {
        CommandKind.MOVE_RIGHT_UNTIL,
        CommandKind.MOVE_RIGHT_BEFORE,
        CommandKind.MOVE_LEFT_UNTIL,
        CommandKind.MOVE_LEFT_BEFORE,
    }
)


class MotionKind(Enum):
    """The motions that can follow a delete or change command."""

    WORD = auto()
    LINE = auto()
    START = auto()
    END = auto()
    RIGHT_UNTIL = auto()
    RIGHT_BEFORE = auto()
    LEFT_UNTIL = auto()
    LEFT_BEFORE = auto()


_MOTION_CHAR_KINDS = frozenset(
    {
        MotionKind.RIGHT_UNTIL,
        MotionKind.RIGHT_BEFORE,
        MotionKind.LEFT_UNTIL,
        MotionKind.LEFT_BEFORE,
    }
)


def _check_arg(kind: Enum, char: str | None, char_kinds: frozenset) -> None:
    if kind in char_kinds:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"{kind.name} needs a single character, got {char!r}")
    elif char is not None:
        raise ValueError(f"{kind.name} takes no character, got {char!r}")


@dataclass(frozen=True)
class ReedlineOption:
    """One step of a parsed command: an event, an edit, or incomplete (``None``)."""

    value: ReedlineEvent | EditCommand | None = None

    @classmethod
    def event(cls, event: ReedlineEvent) -> ReedlineOption:
        return cls(event)

    @classmethod
    def edit(cls, command: EditCommand) -> ReedlineOption:
        return cls(command)

    @classmethod
    def incomplete(cls) -> ReedlineOption:
        return cls(None)

    @property
    def is_incomplete(self) -> bool:
        return self.value is None

    def to_event(self) -> ReedlineEvent:
        """The editor event for this step; incomplete steps become NONE."""
        if isinstance(self.value, EditCommand):
            return ReedlineEvent.edit(self.value)
        if isinstance(self.value, ReedlineEvent):
            return self.value
        return ReedlineEvent(EventKind.NONE)


_EVENT_FOR_COMMAND = {
    CommandKind.MOVE_UP: EventKind.UP,
    CommandKind.MOVE_DOWN: EventKind.DOWN,
    CommandKind.MOVE_LEFT: EventKind.LEFT,
    CommandKind.MOVE_RIGHT: EventKind.RIGHT,
    CommandKind.ENTER_VI_INSERT: EventKind.REPAINT,
    CommandKind.HISTORY_SEARCH: EventKind.SEARCH_HISTORY,
}

_EDIT_FOR_COMMAND = {
    CommandKind.MOVE_TO_LINE_START: EditKind.MOVE_TO_LINE_START,
    CommandKind.MOVE_TO_LINE_END: EditKind.MOVE_TO_LINE_END,
    CommandKind.MOVE_WORD_LEFT: EditKind.MOVE_WORD_LEFT,
    CommandKind.MOVE_WORD_RIGHT: EditKind.MOVE_WORD_RIGHT,
    CommandKind.ENTER_VI_APPEND: EditKind.MOVE_RIGHT,
    CommandKind.PASTE_AFTER: EditKind.PASTE_CUT_BUFFER_AFTER,
    CommandKind.PASTE_BEFORE: EditKind.PASTE_CUT_BUFFER_BEFORE,
    CommandKind.UNDO: EditKind.UNDO,
    CommandKind.DELETE_TO_END: EditKind.CUT_TO_LINE_END,
    CommandKind.APPEND_TO_END: EditKind.MOVE_TO_END,
    CommandKind.MOVE_RIGHT_UNTIL: EditKind.MOVE_RIGHT_UNTIL,
    CommandKind.MOVE_RIGHT_BEFORE: EditKind.MOVE_RIGHT_BEFORE,
    CommandKind.MOVE_LEFT_UNTIL: EditKind.MOVE_LEFT_UNTIL,
    CommandKind.MOVE_LEFT_BEFORE: EditKind.MOVE_LEFT_BEFORE,
    CommandKind.DELETE_CHAR: EditKind.DELETE,
}

_CUT_FOR_MOTION = {
    MotionKind.RIGHT_UNTIL: EditKind.CUT_RIGHT_UNTIL,
    MotionKind.RIGHT_BEFORE: EditKind.CUT_RIGHT_BEFORE,
    MotionKind.LEFT_UNTIL: EditKind.CUT_LEFT_UNTIL,
    MotionKind.LEFT_BEFORE: EditKind.CUT_LEFT_BEFORE,
}

_DELETE_EDITS = {
    MotionKind.END: (EditKind.CUT_TO_END,),
    MotionKind.LINE: (EditKind.CUT_CURRENT_LINE,),
    MotionKind.WORD: (EditKind.CUT_WORD_RIGHT,),
    **{kind: (edit,) for kind, edit in _CUT_FOR_MOTION.items()},
}

_CHANGE_EDITS = {
    MotionKind.END: (EditKind.CLEAR_TO_LINE_END,),
    MotionKind.LINE: (EditKind.MOVE_TO_START, EditKind.CLEAR_TO_LINE_END),
    MotionKind.WORD: (EditKind.CUT_WORD_RIGHT,),
    **{kind: (edit,) for kind, edit in _CUT_FOR_MOTION.items()},
}

_EDIT_ARG_KINDS = frozenset(_CUT_FOR_MOTION.values())


@dataclass(frozen=True)
class Motion:
    """A motion; ``char`` is the target of the ``f``/``t``/``F``/``T`` motions."""

    kind: MotionKind
    char: str | None = None

    def __post_init__(self) -> None:
        _check_arg(self.kind, self.char, _MOTION_CHAR_KINDS)


@dataclass(frozen=True)
class Command:
    """A vi command; ``char`` is the target of the ``f``/``t``/``F``/``T`` commands."""

    kind: CommandKind
    char: str | None = None

    def __post_init__(self) -> None:
        _check_arg(self.kind, self.char, _COMMAND_CHAR_KINDS)

    def to_reedline(self) -> list[ReedlineOption]:
        """The steps for this command used without a motion."""
        event_kind = _EVENT_FOR_COMMAND.get(self.kind)
        if event_kind is not None:
            return [ReedlineOption.event(ReedlineEvent(event_kind))]
        edit_kind = _EDIT_FOR_COMMAND.get(self.kind)
        if edit_kind is not None:
            return [ReedlineOption.edit(EditCommand(edit_kind, self.char))]
        # delete, change and incomplete commands still need a motion
        return [ReedlineOption.incomplete()]

    def to_reedline_with_motion(
        self, motion: Motion, count: int | None
    ) -> list[ReedlineOption] | None:
        """The steps for this command with ``motion``, repeated ``count`` times.

        Returns ``None`` if the command takes no such motion.
        """
        if self.kind is CommandKind.DELETE:
            table, trailing = _DELETE_EDITS, []
        elif self.kind is CommandKind.CHANGE:
            table = _CHANGE_EDITS
            trailing = [ReedlineOption.event(ReedlineEvent(EventKind.REPAINT))]
        else:
            return None
        edit_kinds = table.get(motion.kind)
        if edit_kinds is None:
            return None
        options = [
            ReedlineOption.edit(
                EditCommand(kind, motion.char if kind in _EDIT_ARG_KINDS else None)
            )
            for kind in edit_kinds
        ]
        options.extend(trailing)
        if count is not None:
            options = options * count
        return options


def _stream(chars: Iterable[str]) -> deque[str]:
    return chars if isinstance(chars, deque) else deque(chars)


_SIMPLE_COMMANDS = {
    "d": CommandKind.DELETE,
    "p": CommandKind.PASTE_AFTER,
    "P": CommandKind.PASTE_BEFORE,
    "h": CommandKind.MOVE_LEFT,
    "l": CommandKind.MOVE_RIGHT,
    "j": CommandKind.MOVE_DOWN,
    "k": CommandKind.MOVE_UP,
    "w": CommandKind.MOVE_WORD_RIGHT,
    "b": CommandKind.MOVE_WORD_LEFT,
    "i": CommandKind.ENTER_VI_INSERT,
    "a": CommandKind.ENTER_VI_APPEND,
    "0": CommandKind.MOVE_TO_LINE_START,
    "$": CommandKind.MOVE_TO_LINE_END,
    "u": CommandKind.UNDO,
    "c": CommandKind.CHANGE,
    "x": CommandKind.DELETE_CHAR,
    "s": CommandKind.HISTORY_SEARCH,
    "D": CommandKind.DELETE_TO_END,
    "A": CommandKind.APPEND_TO_END,
}

_TARGET_COMMANDS = {
    "f": CommandKind.MOVE_RIGHT_UNTIL,
    "t": CommandKind.MOVE_RIGHT_BEFORE,
    "F": CommandKind.MOVE_LEFT_UNTIL,
    "T": CommandKind.MOVE_LEFT_BEFORE,
}

_SIMPLE_MOTIONS = {
    "w": MotionKind.WORD,
    "d": MotionKind.LINE,
    "0": MotionKind.START,
    "$": MotionKind.END,
}

_TARGET_MOTIONS = {
    "f": MotionKind.RIGHT_UNTIL,
    "t": MotionKind.RIGHT_BEFORE,
    "F": MotionKind.LEFT_UNTIL,
    "T": MotionKind.LEFT_BEFORE,
}


def parse_command(chars: Iterable[str]) -> Command | None:
    """Read a command from the front of ``chars``.

    A find command without its target character gives an INCOMPLETE command.
    """
    stream = _stream(chars)
    if not stream:
        return None
    head = stream[0]
    if head in _SIMPLE_COMMANDS:
        stream.popleft()
        return Command(_SIMPLE_COMMANDS[head])
    if head in _TARGET_COMMANDS:
        stream.popleft()
        if not stream:
            return Command(CommandKind.INCOMPLETE)
        return Command(_TARGET_COMMANDS[head], stream[0])
    return None


def parse_motion(chars: Iterable[str]) -> Motion | None:
    """Read a motion from the front of ``chars``."""
    stream = _stream(chars)
    if not stream:
        return None
    head = stream[0]
    if head in _SIMPLE_MOTIONS:
        stream.popleft()
        return Motion(_SIMPLE_MOTIONS[head])
    if head in _TARGET_MOTIONS:
        stream.popleft()
        if not stream:
            return None
        return Motion(_TARGET_MOTIONS[head], stream[0])
    return None


def _parse_number(stream: deque[str]) -> int | None:
    if not stream or stream[0] == "0" or stream[0] not in _ASCII_DIGITS:
        return None
    count = 0
    while stream and stream[0] in _ASCII_DIGITS:
        count = count * 10 + int(stream.popleft())
    return count


@dataclass(frozen=True)
class ParseResult:
    """The parts of a parsed key sequence and whether it is well formed."""

    multiplier: int | None
    command: Command | None
    count: int | None
    motion: Motion | None
    valid: bool

    def enter_insert_mode(self) -> bool:
        """Whether running this sequence switches to insert mode."""
        if self.command is None:
            return False
        kind = self.command.kind
        if self.motion is None:
            return kind in (
                CommandKind.ENTER_VI_INSERT,
                CommandKind.ENTER_VI_APPEND,
                CommandKind.APPEND_TO_END,
                CommandKind.HISTORY_SEARCH,
            )
        return kind is CommandKind.CHANGE

    def to_reedline_event(self) -> ReedlineEvent:
        """The editor event for this sequence; NONE if it does nothing yet."""
        none = ReedlineEvent(EventKind.NONE)
        if self.command is None:
            return none
        repeat = 1 if self.multiplier is None else self.multiplier

        if self.count is None and self.motion is None:
            events = [option.to_event() for option in self.command.to_reedline()] * repeat
            if none in events:
                return none
            return ReedlineEvent.multiple(*events)

        if self.motion is not None:
            options = self.command.to_reedline_with_motion(self.motion, self.count)
            if options is None:
                return none
            return ReedlineEvent.multiple(*(option.to_event() for option in options * repeat))

        return none


def parse(chars: Iterable[str]) -> ParseResult:
    """Parse a whole key sequence; leftover characters make it invalid."""
    stream = _stream(chars)
    multiplier = _parse_number(stream)
    command = parse_command(stream)
    count = _parse_number(stream)
    motion = parse_motion(stream)

    recognised = any(part is not None for part in (multiplier, command, count, motion))
    has_garbage = bool(stream)

    return ParseResult(
        multiplier=multiplier,
        command=command,
        count=count,
        motion=motion,
        valid=recognised and not has_garbage,
    )