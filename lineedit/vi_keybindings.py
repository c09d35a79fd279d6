"""Default keybindings of the vi edit mode."""

from __future__ import annotations

from .commands import EventKind, ReedlineEvent
from .keybindings import KeyCode, KeyModifiers, Keybindings, add_common_keybindings


def default_vi_normal_keybindings() -> Keybindings:
    """The default bindings for vi normal mode."""
    km, kc = KeyModifiers, KeyCode

    def until_found(*kinds: EventKind) -> ReedlineEvent:
        return ReedlineEvent.until_found(*(ReedlineEvent(kind) for kind in kinds))

    kb = Keybindings()
    kb.add_binding(km.CONTROL, kc.char("c"), ReedlineEvent(EventKind.CTRL_C))
    kb.add_binding(km.CONTROL, kc.char("l"), ReedlineEvent(EventKind.CLEAR_SCREEN))
    kb.add_binding(km.NONE, kc.UP, until_found(EventKind.MENU_UP, EventKind.UP))
    kb.add_binding(km.NONE, kc.DOWN, until_found(EventKind.MENU_DOWN, EventKind.DOWN))
    kb.add_binding(km.NONE, kc.LEFT, until_found(EventKind.MENU_LEFT, EventKind.LEFT))
    kb.add_binding(km.NONE, kc.RIGHT, until_found(EventKind.MENU_RIGHT, EventKind.RIGHT))
    return kb


def default_vi_insert_keybindings() -> Keybindings:
    """The default bindings for vi insert mode."""
    kb = Keybindings()
    add_common_keybindings(kb)
    return kb