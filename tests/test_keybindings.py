import pytest

from lineedit.commands import EditCommand, EditKind, EventKind, ReedlineEvent
from lineedit.keybindings import (
    KeyCode,
    KeyCombination,
    KeyModifiers,
    Keybindings,
    add_common_keybindings,
    edit_bind,
)


def test_find_binding_returns_added_event():
    kb = Keybindings()
    event = ReedlineEvent(EventKind.CTRL_D)
    kb.add_binding(KeyModifiers.CONTROL, KeyCode.char("d"), event)
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.char("d")) == event


def test_find_binding_missing_gives_none():
    kb = Keybindings()
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.char("d")) is None


def test_binding_depends_on_modifier():
    kb = Keybindings()
    kb.add_binding(KeyModifiers.ALT, KeyCode.char("b"), ReedlineEvent(EventKind.ESC))
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.char("b")) is None


def test_add_binding_overrides():
    kb = Keybindings()
    kb.add_binding(KeyModifiers.CONTROL, KeyCode.char("l"), ReedlineEvent(EventKind.CLEAR_SCREEN))
    kb.add_binding(
        KeyModifiers.CONTROL, KeyCode.char("l"), ReedlineEvent(EventKind.HISTORY_HINT_COMPLETE)
    )
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.char("l")) == ReedlineEvent(
        EventKind.HISTORY_HINT_COMPLETE
    )
    assert len(kb.bindings) == 1


def test_empty_until_found_is_rejected():
    kb = Keybindings()
    with pytest.raises(ValueError):
        kb.add_binding(KeyModifiers.NONE, KeyCode.UP, ReedlineEvent.until_found())


def test_edit_bind_wraps_one_command():
    command = EditCommand(EditKind.UNDO)
    assert edit_bind(command) == ReedlineEvent(EventKind.EDIT, (command,))


def test_key_combination_is_hashable_key():
    combo = KeyCombination(KeyModifiers.CONTROL | KeyModifiers.ALT, KeyCode.char("x"))
    same = KeyCombination(KeyModifiers.ALT | KeyModifiers.CONTROL, KeyCode.char("x"))
    assert {combo: 1}[same] == 1


@pytest.mark.parametrize("bad", ["", "ab"])
def test_char_key_needs_single_character(bad):
    with pytest.raises(ValueError):
        KeyCode.char(bad)


def test_unknown_key_name_is_rejected():
    with pytest.raises(ValueError):
        KeyCode("hyper")


def test_named_key_takes_no_character():
    with pytest.raises(ValueError):
        KeyCode("enter", "x")


def test_common_bindings_control_keys():
    kb = Keybindings()
    add_common_keybindings(kb)
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.char("c")) == ReedlineEvent(
        EventKind.CTRL_C
    )
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.char("l")) == ReedlineEvent(
        EventKind.CLEAR_SCREEN
    )
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.char("r")) == ReedlineEvent(
        EventKind.SEARCH_HISTORY
    )


def test_common_bindings_editing_keys():
    kb = Keybindings()
    add_common_keybindings(kb)
    assert kb.find_binding(KeyModifiers.NONE, KeyCode.BACKSPACE) == edit_bind(
        EditCommand(EditKind.BACKSPACE)
    )
    assert kb.find_binding(KeyModifiers.NONE, KeyCode.HOME) == edit_bind(
        EditCommand(EditKind.MOVE_TO_LINE_START)
    )
    assert kb.find_binding(KeyModifiers.NONE, KeyCode.ESC) == ReedlineEvent(EventKind.ESC)


def test_common_bindings_arrows_and_aliases_agree():
    kb = Keybindings()
    add_common_keybindings(kb)
    assert kb.find_binding(KeyModifiers.NONE, KeyCode.UP) == ReedlineEvent.until_found(
        ReedlineEvent(EventKind.MENU_UP), ReedlineEvent(EventKind.UP)
    )
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.char("p")) == kb.find_binding(
        KeyModifiers.NONE, KeyCode.UP
    )
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.char("f")) == kb.find_binding(
        KeyModifiers.NONE, KeyCode.RIGHT
    )
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.char("b")) == kb.find_binding(
        KeyModifiers.NONE, KeyCode.LEFT
    )
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.char("n")) == kb.find_binding(
        KeyModifiers.NONE, KeyCode.DOWN
    )