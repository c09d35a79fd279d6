"""The vi style edit mode with normal and insert modes."""

from __future__ import annotations

from enum import Enum, auto

from .commands import EventKind, ReedlineEvent
from .keybindings import (
    EditMode,
    InputEvent,
    KeyCode,
    KeyEvent,
    KeyModifiers,
    Keybindings,
    MouseEvent,
    PromptEditMode,
    ResizeEvent,
    _ascii_upper,
    _lookup,
    _typed_char_event,
)
from .vi_keybindings import default_vi_insert_keybindings, default_vi_normal_keybindings
from .vi_parser import parse


class _Mode(Enum):
    NORMAL = auto()
    INSERT = auto()


class Vi(EditMode):
    """Parses input events like a vi style editor; starts in insert mode."""

    def __init__(
        self,
        insert_keybindings: Keybindings | None = None,
        normal_keybindings: Keybindings | None = None,
    ) -> None:
        self.insert_keybindings = (
            insert_keybindings
            if insert_keybindings is not None
            else default_vi_insert_keybindings()
        )
        self.normal_keybindings = (
            normal_keybindings
            if normal_keybindings is not None
            else default_vi_normal_keybindings()
        )
        self._cache: list[str] = []
        self._mode = _Mode.INSERT
        self._previous: ReedlineEvent | None = None

    def parse_event(self, event: InputEvent) -> ReedlineEvent:
        if isinstance(event, KeyEvent):
            return self._parse_key(event.code, event.modifiers)
        if isinstance(event, MouseEvent):
            return ReedlineEvent(EventKind.MOUSE)
        if isinstance(event, ResizeEvent):
            return ReedlineEvent.resize(event.width, event.height)
        raise TypeError(f"not an input event: {event!r}")

    def _parse_key(self, code: KeyCode, modifiers: KeyModifiers) -> ReedlineEvent:
        if code.is_char:
            if self._mode is _Mode.NORMAL:
                return self._parse_normal_char(code, modifiers)
            return _typed_char_event(self.insert_keybindings, modifiers, code)
        if modifiers == KeyModifiers.NONE and code == KeyCode.ESC:
            self._cache.clear()
            self._mode = _Mode.NORMAL
            return ReedlineEvent.multiple(
                ReedlineEvent(EventKind.ESC), ReedlineEvent(EventKind.REPAINT)
            )
        if modifiers == KeyModifiers.NONE and code == KeyCode.ENTER:
            self._mode = _Mode.INSERT
            return ReedlineEvent(EventKind.ENTER)
        bindings = self.normal_keybindings if self._mode is _Mode.NORMAL else self.insert_keybindings
        return _lookup(bindings, modifiers, code)

    def _parse_normal_char(self, code: KeyCode, modifiers: KeyModifiers) -> ReedlineEvent:
        c = code.character
        assert c is not None
        # The repeat key is handled here since the last event lives in the editor.
        if c == "." and self._previous is not None:
            return self._previous

        if modifiers not in (KeyModifiers.NONE, KeyModifiers.SHIFT):
            return _lookup(self.normal_keybindings, modifiers, code)

        self._cache.append(_ascii_upper(c) if modifiers == KeyModifiers.SHIFT else c)
        result = parse(self._cache)

        if result.enter_insert_mode():
            self._mode = _Mode.INSERT

        event = result.to_reedline_event()
        if event.kind is not EventKind.NONE or not result.valid:
            self._cache.clear()

        self._previous = event
        return event

    def edit_mode(self) -> PromptEditMode:
        if self._mode is _Mode.NORMAL:
            return PromptEditMode.VI_NORMAL
        return PromptEditMode.VI_INSERT