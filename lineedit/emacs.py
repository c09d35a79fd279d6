"""The emacs style edit mode."""

from __future__ import annotations

from .commands import EditCommand, EditKind, EventKind, ReedlineEvent
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
    _lookup,
    _typed_char_event,
    add_common_keybindings,
    edit_bind,
)


def default_emacs_keybindings() -> Keybindings:
    """The default emacs keybindings."""
    km, kc = KeyModifiers, KeyCode

    def edit(kind: EditKind) -> ReedlineEvent:
        return edit_bind(EditCommand(kind))

    kb = Keybindings()

    kb.add_binding(km.CONTROL, kc.char("d"), ReedlineEvent(EventKind.CTRL_D))
    kb.add_binding(km.CONTROL, kc.char("g"), edit(EditKind.REDO))
    kb.add_binding(km.CONTROL, kc.char("z"), edit(EditKind.UNDO))
    kb.add_binding(km.CONTROL, kc.char("a"), edit(EditKind.MOVE_TO_LINE_START))
    kb.add_binding(km.CONTROL, kc.char("e"), edit(EditKind.MOVE_TO_LINE_END))
    kb.add_binding(km.CONTROL, kc.char("k"), edit(EditKind.CUT_TO_END))
    kb.add_binding(km.CONTROL, kc.char("u"), edit(EditKind.CUT_FROM_START))
    kb.add_binding(km.CONTROL, kc.char("y"), edit(EditKind.PASTE_CUT_BUFFER_BEFORE))
    kb.add_binding(km.CONTROL, kc.char("h"), edit(EditKind.BACKSPACE))
    kb.add_binding(km.CONTROL, kc.char("w"), edit(EditKind.CUT_WORD_LEFT))
    kb.add_binding(km.CONTROL, kc.char("t"), edit(EditKind.SWAP_GRAPHEMES))

    kb.add_binding(km.ALT, kc.LEFT, edit(EditKind.MOVE_WORD_LEFT))
    kb.add_binding(km.ALT, kc.DELETE, edit(EditKind.DELETE_WORD))
    kb.add_binding(km.ALT, kc.BACKSPACE, edit(EditKind.BACKSPACE_WORD))
    kb.add_binding(
        km.ALT,
        kc.RIGHT,
        ReedlineEvent.until_found(
            ReedlineEvent(EventKind.HISTORY_HINT_WORD_COMPLETE),
            edit(EditKind.MOVE_WORD_RIGHT),
        ),
    )
    kb.add_binding(km.ALT, kc.char("b"), edit(EditKind.MOVE_WORD_LEFT))
    kb.add_binding(km.ALT, kc.char("d"), edit(EditKind.CUT_WORD_RIGHT))
    kb.add_binding(km.ALT, kc.char("u"), edit(EditKind.UPPERCASE_WORD))
    kb.add_binding(km.ALT, kc.char("l"), edit(EditKind.LOWERCASE_WORD))
    kb.add_binding(km.ALT, kc.char("c"), edit(EditKind.CAPITALIZE_CHAR))
    kb.add_binding(km.ALT, kc.char("m"), edit(EditKind.BACKSPACE_WORD))

    add_common_keybindings(kb)
    return kb


class Emacs(EditMode):
    """Parses input events like an emacs style editor."""

    def __init__(self, keybindings: Keybindings | None = None) -> None:
        self.keybindings = keybindings if keybindings is not None else default_emacs_keybindings()

    def parse_event(self, event: InputEvent) -> ReedlineEvent:
        if isinstance(event, KeyEvent):
            code, modifiers = event.code, event.modifiers
            if code.is_char:
                return _typed_char_event(self.keybindings, modifiers, code)
            if modifiers == KeyModifiers.NONE and code == KeyCode.ENTER:
                return ReedlineEvent(EventKind.ENTER)
            return _lookup(self.keybindings, modifiers, code)
        if isinstance(event, MouseEvent):
            return ReedlineEvent(EventKind.MOUSE)
        if isinstance(event, ResizeEvent):
            return ReedlineEvent.resize(event.width, event.height)
        raise TypeError(f"not an input event: {event!r}")

    def edit_mode(self) -> PromptEditMode:
        return PromptEditMode.EMACS