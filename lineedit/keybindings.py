"""Key events, key combinations and the keybinding table of the edit modes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, Flag
from typing import ClassVar, Union

from .commands import EditCommand, EditKind, EventKind, ReedlineEvent


class KeyModifiers(Flag):
    """Modifier keys held while a key is pressed."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4


_KEY_NAMES = frozenset(
    {
        "backspace",
        "enter",
        "left",
        "right",
        "up",
        "down",
        "home",
        "end",
        "page_up",
        "page_down",
        "tab",
        "back_tab",
        "delete",
        "insert",
        "null",
        "esc",
        "char",
    }
)


@dataclass(frozen=True)
class KeyCode:
    """A pressed key: a named key, or ``"char"`` with the typed character."""

    name: str
    character: str | None = None

    BACKSPACE: ClassVar[KeyCode]
    ENTER: ClassVar[KeyCode]
    LEFT: ClassVar[KeyCode]
    RIGHT: ClassVar[KeyCode]
    UP: ClassVar[KeyCode]
    DOWN: ClassVar[KeyCode]
    HOME: ClassVar[KeyCode]
    END: ClassVar[KeyCode]
    PAGE_UP: ClassVar[KeyCode]
    PAGE_DOWN: ClassVar[KeyCode]
    TAB: ClassVar[KeyCode]
    BACK_TAB: ClassVar[KeyCode]
    DELETE: ClassVar[KeyCode]
    INSERT: ClassVar[KeyCode]
    NULL: ClassVar[KeyCode]
    ESC: ClassVar[KeyCode]

    def __post_init__(self) -> None:
        if self.name not in _KEY_NAMES:
            raise ValueError(f"unknown key {self.name!r}")
        if self.name == "char":
            if not isinstance(self.character, str) or len(self.character) != 1:
                raise ValueError(f"a char key needs a single character, got {self.character!r}")
        elif self.character is not None:
            raise ValueError(f"key {self.name!r} takes no character")

    @classmethod
    def char(cls, c: str) -> KeyCode:
        """The key that types ``c``."""
        return cls("char", c)

    @property
    def is_char(self) -> bool:
        return self.name == "char"


KeyCode.BACKSPACE = KeyCode("backspace")
KeyCode.ENTER = KeyCode("enter")
KeyCode.LEFT = KeyCode("left")
KeyCode.RIGHT = KeyCode("right")
KeyCode.UP = KeyCode("up")
KeyCode.DOWN = KeyCode("down")
KeyCode.HOME = KeyCode("home")
KeyCode.END = KeyCode("end")
KeyCode.PAGE_UP = KeyCode("page_up")
KeyCode.PAGE_DOWN = KeyCode("page_down")
KeyCode.TAB = KeyCode("tab")
KeyCode.BACK_TAB = KeyCode("back_tab")
KeyCode.DELETE = KeyCode("delete")
KeyCode.INSERT = KeyCode("insert")
KeyCode.NULL = KeyCode("null")
KeyCode.ESC = KeyCode("esc")


@dataclass(frozen=True)
class KeyEvent:
    """A key press with its modifiers."""

    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE


@dataclass(frozen=True)
class MouseEvent:
    """A mouse action at a terminal cell."""

    column: int = 0
    row: int = 0
    modifiers: KeyModifiers = KeyModifiers.NONE


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal was resized."""

    width: int
    height: int


InputEvent = Union[KeyEvent, MouseEvent, ResizeEvent]


class PromptEditMode(Enum):
    """The edit mode shown by the prompt indicator."""

    EMACS = "emacs"
    VI_NORMAL = "vi_normal"
    VI_INSERT = "vi_insert"


class EditMode(ABC):
    """Translates terminal input events into editor events."""

    @abstractmethod
    def parse_event(self, event: InputEvent) -> ReedlineEvent:
        """Translate one input event."""

    @abstractmethod
    def edit_mode(self) -> PromptEditMode:
        """What the prompt indicator should show."""


@dataclass(frozen=True)
class KeyCombination:
    modifier: KeyModifiers
    key_code: KeyCode


@dataclass
class Keybindings:
    """Maps key combinations to editor events."""

    bindings: dict[KeyCombination, ReedlineEvent] = field(default_factory=dict)

    def add_binding(
        self, modifier: KeyModifiers, key_code: KeyCode, command: ReedlineEvent
    ) -> None:
        """Bind ``command`` to the key, replacing any earlier binding."""
        if command.kind is EventKind.UNTIL_FOUND and not command.value:
            raise ValueError("UntilFound should contain a series of potential events to handle")
        self.bindings[KeyCombination(modifier, key_code)] = command

    def find_binding(self, modifier: KeyModifiers, key_code: KeyCode) -> ReedlineEvent | None:
        """The event bound to the key, or ``None``."""
        return self.bindings.get(KeyCombination(modifier, key_code))


def edit_bind(command: EditCommand) -> ReedlineEvent:
    """An event running the single edit ``command``."""
    return ReedlineEvent.edit(command)


def _edit(kind: EditKind) -> ReedlineEvent:
    return edit_bind(EditCommand(kind))


def _event(kind: EventKind) -> ReedlineEvent:
    return ReedlineEvent(kind)


def _lookup(bindings: Keybindings, modifier: KeyModifiers, code: KeyCode) -> ReedlineEvent:
    found = bindings.find_binding(modifier, code)
    return found if found is not None else ReedlineEvent(EventKind.NONE)


def _ascii_upper(c: str) -> str:
    return c.upper() if "a" <= c <= "z" else c


_INSERTING_MODIFIERS = frozenset(
    {
        KeyModifiers.NONE,
        KeyModifiers.CONTROL | KeyModifiers.ALT,
        KeyModifiers.CONTROL | KeyModifiers.ALT | KeyModifiers.SHIFT,
    }
)


def _typed_char_event(
    bindings: Keybindings, modifier: KeyModifiers, code: KeyCode
) -> ReedlineEvent:
    """Event for a character key typed in an inserting mode.

    Mixed control and alt modifiers come from keys such as AltGr on
    non-American keyboards and insert the character as is.
    """
    c = code.character
    assert c is not None
    if modifier == KeyModifiers.SHIFT:
        return edit_bind(EditCommand(EditKind.INSERT_CHAR, _ascii_upper(c)))
    if modifier in _INSERTING_MODIFIERS:
        return edit_bind(EditCommand(EditKind.INSERT_CHAR, c))
    return _lookup(bindings, modifier, code)


def add_common_keybindings(kb: Keybindings) -> None:
    """Add the bindings shared by the emacs and vi insert modes."""
    km, kc = KeyModifiers, KeyCode

    kb.add_binding(km.NONE, kc.ESC, _event(EventKind.ESC))
    kb.add_binding(km.NONE, kc.BACKSPACE, _edit(EditKind.BACKSPACE))
    kb.add_binding(km.NONE, kc.DELETE, _edit(EditKind.DELETE))
    kb.add_binding(km.NONE, kc.END, _edit(EditKind.MOVE_TO_LINE_END))
    kb.add_binding(km.NONE, kc.HOME, _edit(EditKind.MOVE_TO_LINE_START))

    kb.add_binding(km.CONTROL, kc.char("c"), _event(EventKind.CTRL_C))
    kb.add_binding(km.CONTROL, kc.char("l"), _event(EventKind.CLEAR_SCREEN))
    kb.add_binding(km.CONTROL, kc.char("r"), _event(EventKind.SEARCH_HISTORY))

    kb.add_binding(
        km.CONTROL,
        kc.RIGHT,
        ReedlineEvent.until_found(
            _event(EventKind.HISTORY_HINT_WORD_COMPLETE), _edit(EditKind.MOVE_WORD_RIGHT)
        ),
    )
    kb.add_binding(km.CONTROL, kc.LEFT, _edit(EditKind.MOVE_WORD_LEFT))

    up = ReedlineEvent.until_found(_event(EventKind.MENU_UP), _event(EventKind.UP))
    down = ReedlineEvent.until_found(_event(EventKind.MENU_DOWN), _event(EventKind.DOWN))
    left = ReedlineEvent.until_found(_event(EventKind.MENU_LEFT), _event(EventKind.LEFT))
    right = ReedlineEvent.until_found(
        _event(EventKind.HISTORY_HINT_COMPLETE),
        _event(EventKind.MENU_RIGHT),
        _event(EventKind.RIGHT),
    )

    kb.add_binding(km.NONE, kc.UP, up)
    kb.add_binding(km.NONE, kc.DOWN, down)
    kb.add_binding(km.NONE, kc.LEFT, left)
    kb.add_binding(km.NONE, kc.RIGHT, right)

    kb.add_binding(km.CONTROL, kc.char("b"), left)
    kb.add_binding(km.CONTROL, kc.char("f"), right)
    kb.add_binding(km.CONTROL, kc.char("p"), up)
    kb.add_binding(km.CONTROL, kc.char("n"), down)