"""Decoded key events and their mapping onto edit operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

RETURN = "return"
BACKSPACE = "backspace"
DELETE = "delete"
LEFT = "left"
RIGHT = "right"
UP = "up"
DOWN = "down"
TAB = "tab"
TEXT = "text"

NAMED_KEYS = frozenset({RETURN, BACKSPACE, DELETE, LEFT, RIGHT, UP, DOWN, TAB})


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Key event as delivered by the host's input decoder.

    ``key`` is one of the named keys above, or ``TEXT`` for typed or pasted
    text whatever that text spells.
    ``text`` carries the insertable payload: one character for a typed key,
    many for a paste.
    """

    key: str
    modifiers: tuple[str, ...] = ()
    text: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @classmethod
    def char(cls, text: str) -> "KeyInput":
        return cls(key=TEXT, text=text)

    @classmethod
    def named(cls, key: str, *modifiers: str) -> "KeyInput":
        return cls(key=key.lower(), modifiers=modifiers)

    @property
    def ctrl(self) -> bool:
        return "ctrl" in self.modifiers

    @property
    def shift(self) -> bool:
        return "shift" in self.modifiers

    @property
    def is_return(self) -> bool:
        return self.key == RETURN

    @property
    def is_backspace_or_delete(self) -> bool:
        return self.key in (BACKSPACE, DELETE)

    @property
    def is_left_arrow(self) -> bool:
        return self.key == LEFT

    @property
    def is_right_arrow(self) -> bool:
        return self.key == RIGHT

    @property
    def is_up_arrow(self) -> bool:
        return self.key == UP

    @property
    def is_down_arrow(self) -> bool:
        return self.key == DOWN

    @property
    def is_tab(self) -> bool:
        return self.key == TAB and not self.shift

    @property
    def is_shift_tab(self) -> bool:
        return self.key == TAB and self.shift

    @property
    def is_ctrl_c(self) -> bool:
        return self.ctrl and self.key.lower() == "c"


class EditOp(str, Enum):
    IGNORE = "ignore"
    SUBMIT = "submit"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    DELETE_LEFT = "delete_left"
    INSERT = "insert"


def classify(key: KeyInput) -> EditOp:
    """Pick the edit operation for ``key``; anything unnamed is an insert."""

    if (
        key.is_up_arrow
        or key.is_down_arrow
        or key.is_tab
        or key.is_shift_tab
        or key.is_ctrl_c
    ):
        return EditOp.IGNORE
    if key.is_return:
        return EditOp.SUBMIT
    if key.is_left_arrow:
        return EditOp.MOVE_LEFT
    if key.is_right_arrow:
        return EditOp.MOVE_RIGHT
    if key.is_backspace_or_delete:
        return EditOp.DELETE_LEFT
    return EditOp.INSERT


__all__ = [
    "BACKSPACE",
    "DELETE",
    "DOWN",
    "LEFT",
    "NAMED_KEYS",
    "RETURN",
    "RIGHT",
    "TAB",
    "TEXT",
    "UP",
    "EditOp",
    "KeyInput",
    "classify",
]
