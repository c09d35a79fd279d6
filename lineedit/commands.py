"""Edit commands and editor events with their payloads."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto


class UndoBehavior(Enum):
    """How an edit command affects the undo history."""

    IGNORE = auto()
    """The command does not change the undo history."""
    FULL = auto()
    """The state after the command is always stored."""
    COALESCE = auto()
    """The state may be merged with the previous one if no word was completed."""


class EditKind(Enum):
    """The kinds of edit that can be run on the buffer."""

    MOVE_TO_START = auto()
    MOVE_TO_LINE_START = auto()
    MOVE_TO_END = auto()
    MOVE_TO_LINE_END = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_WORD_LEFT = auto()
    MOVE_WORD_RIGHT = auto()
    INSERT_CHAR = auto()
    INSERT_STRING = auto()
    BACKSPACE = auto()
    DELETE = auto()
    BACKSPACE_WORD = auto()
    DELETE_WORD = auto()
    CLEAR = auto()
    CLEAR_TO_LINE_END = auto()
    CUT_CURRENT_LINE = auto()
    CUT_FROM_START = auto()
    CUT_FROM_LINE_START = auto()
    CUT_TO_END = auto()
    CUT_TO_LINE_END = auto()
    CUT_WORD_LEFT = auto()
    CUT_WORD_RIGHT = auto()
    PASTE_CUT_BUFFER_BEFORE = auto()
    PASTE_CUT_BUFFER_AFTER = auto()
    UPPERCASE_WORD = auto()
    LOWERCASE_WORD = auto()
    CAPITALIZE_CHAR = auto()
    SWAP_WORDS = auto()
    SWAP_GRAPHEMES = auto()
    UNDO = auto()
    REDO = auto()
    CUT_RIGHT_UNTIL = auto()
    CUT_RIGHT_BEFORE = auto()
    MOVE_RIGHT_UNTIL = auto()
    MOVE_RIGHT_BEFORE = auto()
    CUT_LEFT_UNTIL = auto()
    CUT_LEFT_BEFORE = auto()
    MOVE_LEFT_UNTIL = auto()
    MOVE_LEFT_BEFORE = auto()


_CHAR_KINDS = frozenset(
    {
        EditKind.INSERT_CHAR,
        EditKind.CUT_RIGHT_UNTIL,
        EditKind.CUT_RIGHT_BEFORE,
        EditKind.MOVE_RIGHT_UNTIL,
        EditKind.MOVE_RIGHT_BEFORE,
        EditKind.CUT_LEFT_UNTIL,
        EditKind.CUT_LEFT_BEFORE,
        EditKind.MOVE_LEFT_UNTIL,
        EditKind.MOVE_LEFT_BEFORE,
    }
)

_STRING_KINDS = frozenset({EditKind.INSERT_STRING})

_IGNORED_BY_UNDO = frozenset({EditKind.UNDO, EditKind.REDO})

_COALESCED_BY_UNDO = frozenset({EditKind.INSERT_CHAR})


@dataclass(frozen=True)
class EditCommand:
    """One edit of the buffer; ``arg`` holds the character or string it needs."""

    kind: EditKind
    arg: str | None = None

    def __post_init__(self) -> None:
        if self.kind in _CHAR_KINDS:
            if not isinstance(self.arg, str) or len(self.arg) != 1:
                raise ValueError(f"{self.kind.name} needs a single character, got {self.arg!r}")
        elif self.kind in _STRING_KINDS:
            if not isinstance(self.arg, str):
                raise TypeError(f"{self.kind.name} needs a string, got {self.arg!r}")
        elif self.arg is not None:
            raise ValueError(f"{self.kind.name} takes no argument, got {self.arg!r}")

    def undo_behavior(self) -> UndoBehavior:
        """How running this command is recorded in the undo history."""
        if self.kind in _IGNORED_BY_UNDO:
            return UndoBehavior.IGNORE
        if self.kind in _COALESCED_BY_UNDO:
            return UndoBehavior.COALESCE
        return UndoBehavior.FULL


class EventKind(Enum):
    """The kinds of event the line editor reacts to."""

    NONE = auto()
    HISTORY_HINT_COMPLETE = auto()
    HISTORY_HINT_WORD_COMPLETE = auto()
    ACTION_HANDLER = auto()
    CTRL_D = auto()
    CTRL_C = auto()
    CLEAR_SCREEN = auto()
    ENTER = auto()
    ESC = auto()
    MOUSE = auto()
    RESIZE = auto()
    EDIT = auto()
    REPAINT = auto()
    PREVIOUS_HISTORY = auto()
    UP = auto()
    DOWN = auto()
    RIGHT = auto()
    LEFT = auto()
    NEXT_HISTORY = auto()
    SEARCH_HISTORY = auto()
    MULTIPLE = auto()
    UNTIL_FOUND = auto()
    MENU = auto()
    MENU_NEXT = auto()
    MENU_PREVIOUS = auto()
    MENU_UP = auto()
    MENU_DOWN = auto()
    MENU_LEFT = auto()
    MENU_RIGHT = auto()
    MENU_PAGE_NEXT = auto()
    MENU_PAGE_PREVIOUS = auto()
    EXECUTE_HOST_COMMAND = auto()


_EVENT_LIST_KINDS = frozenset({EventKind.MULTIPLE, EventKind.UNTIL_FOUND})
_TEXT_KINDS = frozenset({EventKind.MENU, EventKind.EXECUTE_HOST_COMMAND})


@dataclass(frozen=True)
class ReedlineEvent:
    """An event for the line editor.

    ``value`` depends on ``kind``: a tuple of :class:`EditCommand` for EDIT,
    a tuple of events for MULTIPLE and UNTIL_FOUND, ``(width, height)`` for
    RESIZE, a string for MENU and EXECUTE_HOST_COMMAND, otherwise ``None``.
    """

    kind: EventKind
    value: object = None

    def __post_init__(self) -> None:
        kind, value = self.kind, self.value
        if kind is EventKind.EDIT:
            commands = _as_tuple(value, EditCommand, kind)
            object.__setattr__(self, "value", commands)
        elif kind in _EVENT_LIST_KINDS:
            events = _as_tuple(value, ReedlineEvent, kind)
            object.__setattr__(self, "value", events)
        elif kind is EventKind.RESIZE:
            try:
                width, height = value  # type: ignore[misc]
            except (TypeError, ValueError):
                raise ValueError(f"RESIZE needs (width, height), got {value!r}") from None
            if not (isinstance(width, int) and isinstance(height, int)):
                raise TypeError(f"RESIZE needs integer sizes, got {value!r}")
            object.__setattr__(self, "value", (width, height))
        elif kind in _TEXT_KINDS:
            if not isinstance(value, str):
                raise TypeError(f"{kind.name} needs a string, got {value!r}")
        elif value is not None:
            raise ValueError(f"{kind.name} takes no value, got {value!r}")

    @classmethod
    def edit(cls, *commands: EditCommand) -> ReedlineEvent:
        return cls(EventKind.EDIT, commands)

    @classmethod
    def multiple(cls, *events: ReedlineEvent) -> ReedlineEvent:
        return cls(EventKind.MULTIPLE, events)

    @classmethod
    def until_found(cls, *events: ReedlineEvent) -> ReedlineEvent:
        return cls(EventKind.UNTIL_FOUND, events)

    @classmethod
    def resize(cls, width: int, height: int) -> ReedlineEvent:
        return cls(EventKind.RESIZE, (width, height))

    @classmethod
    def menu(cls, name: str) -> ReedlineEvent:
        return cls(EventKind.MENU, name)

    @classmethod
    def execute_host_command(cls, command: str) -> ReedlineEvent:
        return cls(EventKind.EXECUTE_HOST_COMMAND, command)


def _as_tuple(value: object, item_type: type, kind: EventKind) -> tuple:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise TypeError(f"{kind.name} needs a sequence of {item_type.__name__}, got {value!r}")
    items = tuple(value)
    for item in items:
        if not isinstance(item, item_type):
            raise TypeError(f"{kind.name} holds {item_type.__name__} only, got {item!r}")
    return items