from __future__ import annotations

import pytest

from input_engine.keys import (
    BACKSPACE,
    DELETE,
    DOWN,
    LEFT,
    RETURN,
    RIGHT,
    TAB,
    TEXT,
    UP,
    EditOp,
    KeyInput,
    classify,
)


def test_modifiers_are_normalized() -> None:
    key = KeyInput(key="c", modifiers=(" CTRL", "ctrl", ""))

    assert key.modifiers == ("ctrl",)
    assert key.is_ctrl_c is True


def test_char_carries_text_payload() -> None:
    key = KeyInput.char("hello")

    assert key.text == "hello"
    assert classify(key) is EditOp.INSERT


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        (KeyInput.named(UP), EditOp.IGNORE),
        (KeyInput.named(DOWN), EditOp.IGNORE),
        (KeyInput.named(TAB), EditOp.IGNORE),
        (KeyInput.named(TAB, "shift"), EditOp.IGNORE),
        (KeyInput(key="c", modifiers=("CTRL",), text="c"), EditOp.IGNORE),
        (KeyInput.named(RETURN), EditOp.SUBMIT),
        (KeyInput.named("LEFT"), EditOp.MOVE_LEFT),
        (KeyInput.named(RIGHT), EditOp.MOVE_RIGHT),
        (KeyInput.named(BACKSPACE), EditOp.DELETE_LEFT),
        (KeyInput.named(DELETE), EditOp.DELETE_LEFT),
        (KeyInput.char("q"), EditOp.INSERT),
    ],
)
def test_classify(key: KeyInput, expected: EditOp) -> None:
    assert classify(key) is expected


def test_shift_tab_is_not_plain_tab() -> None:
    key = KeyInput.named(TAB, "shift")

    assert key.is_shift_tab is True
    assert key.is_tab is False
    assert KeyInput.named(LEFT).is_left_arrow is True


@pytest.mark.parametrize("text", [UP, LEFT, RETURN, TAB, BACKSPACE])
def test_text_spelling_a_key_name_is_inserted(text: str) -> None:
    key = KeyInput.char(text)

    assert key.key == TEXT
    assert classify(key) is EditOp.INSERT
