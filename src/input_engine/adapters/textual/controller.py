"""Textual adapter that feeds key events into an InputSession."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from rich.text import Text

from input_engine.buffer import EditResult
from input_engine.keys import (
    BACKSPACE,
    DELETE,
    DOWN,
    LEFT,
    RETURN,
    RIGHT,
    TAB,
    UP,
    KeyInput,
)
from input_engine.session import VALUE_CHANGE, VALUE_SUBMIT, InputSession

from .render import to_rich_text

_TEXTUAL_NAMED_KEYS: Dict[str, KeyInput] = {
    "enter": KeyInput.named(RETURN),
    "left": KeyInput.named(LEFT),
    "right": KeyInput.named(RIGHT),
    "up": KeyInput.named(UP),
    "down": KeyInput.named(DOWN),
    "tab": KeyInput.named(TAB),
    "shift+tab": KeyInput.named(TAB, "shift"),
    "backspace": KeyInput.named(BACKSPACE),
    "delete": KeyInput.named(DELETE),
    "ctrl+c": KeyInput(key="c", modifiers=("ctrl",)),
}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def key_input_from_textual(
    key: str, character: Optional[str] = None
) -> Optional[KeyInput]:
    """Translate a Textual key name; ``None`` means the field has no use for it."""

    named = _TEXTUAL_NAMED_KEYS.get(key)
    if named is not None:
        return named
    if character and character.isprintable():
        return KeyInput.char(character)
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[Text], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualInputAdapter:
    """Bridges an InputSession and its bus events to a Textual surface."""

    def __init__(self, session: InputSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        for event in (VALUE_CHANGE, VALUE_SUBMIT):
            session.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )
        self.refresh()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[EditResult]:
        key_input = key_input_from_textual(key, character)
        if key_input is None:
            return None
        self._log_state("key ->", key=key, character=character)
        result = self.session.handle_key(key_input)
        self._after_result(result)
        return result

    def handle_paste(self, text: str) -> EditResult:
        self._log_state("paste ->", paste_length=len(text))
        result = self.session.paste(text)
        self._after_result(result)
        return result

    def refresh(self) -> None:
        self.hooks.update_view(to_rich_text(self.session.render()))

    def _after_result(self, result: EditResult) -> None:
        self._log_state(
            "result <-",
            consumed=result.consumed,
            changed=result.changed,
            status=result.status,
        )
        if result.status == "ignored":
            return
        self.hooks.update_status(result.status)
        self.refresh()

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        cursor = self.session.cursor
        snapshot: Dict[str, object] = {
            "offset": cursor.offset,
            "width": cursor.width,
            "length": len(self.session.value),
            "segments": len(self.session.segments),
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["TextualInputAdapter", "TextualUIHooks", "key_input_from_textual"]
