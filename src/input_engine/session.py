"""Editing session: routes key events through the engine and notifies hosts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from input_engine.buffer import Cursor, EditEngine, EditResult, Segment
from input_engine.config import FieldConfig
from input_engine.display import DisplayProjector, DisplayUnit
from input_engine.keys import NAMED_KEYS, EditOp, KeyInput, classify
from input_engine.runtime import telemetry

VALUE_CHANGE = "value.change"
VALUE_SUBMIT = "value.submit"


class SessionBus:
    """Minimal event bus carrying value notifications to the host."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class SessionMirror:
    """Host-friendly snapshot of the session."""

    text: str
    cursor_offset: int
    cursor_width: int
    segments: tuple[Segment, ...]
    units: tuple[DisplayUnit, ...] = field(default_factory=tuple)


class InputSession:
    """One text field: engine state, configuration and notifications.

    Key events are processed one at a time, in arrival order. Only edits that
    change the value emit ``value.change``; only return emits
    ``value.submit``.
    """

    def __init__(
        self,
        value: str = "",
        *,
        cursor_offset: int | None = None,
        config: Optional[FieldConfig] = None,
        on_change: Optional[Callable[[str], None]] = None,
        on_submit: Optional[Callable[[str], None]] = None,
        bus: Optional[SessionBus] = None,
        logger_name: str = "input_engine.session",
    ) -> None:
        self.config = config or FieldConfig()
        self.logger_name = logger_name
        self.engine = EditEngine(
            value,
            cursor_offset=cursor_offset,
            large_paste_threshold=self.config.large_paste_threshold,
            logger_name="input_engine.engine",
        )
        self.projector = DisplayProjector(self.config)
        self.bus = bus or SessionBus()
        if on_change is not None:
            self.bus.subscribe(VALUE_CHANGE, on_change)  # type: ignore[arg-type]
        if on_submit is not None:
            self.bus.subscribe(VALUE_SUBMIT, on_submit)  # type: ignore[arg-type]

    @property
    def value(self) -> str:
        return self.engine.text

    @property
    def cursor(self) -> Cursor:
        return self.engine.cursor

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self.engine.segments.snapshot()

    def configure(self, config: FieldConfig) -> None:
        self.config = config
        self.projector.config = config
        self.engine.large_paste_threshold = config.large_paste_threshold

    def handle_key(self, key: KeyInput) -> EditResult:
        if not self.config.focus:
            return EditResult(consumed=False, status="ignored")
        op = classify(key)
        if op is EditOp.IGNORE:
            return EditResult(consumed=False, status="ignored")

        with telemetry.span(
            f"session::{op.value}",
            logger_name=self.logger_name,
            component="session",
            metadata={
                "key": key.key if key.key in NAMED_KEYS else "text",
                "offset": self.engine.cursor.offset,
            },
        ) as handle:
            result = self._apply(op, key)
            handle.add_metadata("status", result.status)

        if op is EditOp.SUBMIT:
            self.bus.emit(VALUE_SUBMIT, self.value)
        elif result.changed:
            self.bus.emit(VALUE_CHANGE, self.value)
        return result

    def paste(self, text: str) -> EditResult:
        return self.handle_key(KeyInput.char(text))

    def set_value(self, value: str) -> EditResult:
        """Replace the value from the host side (controlled usage)."""

        return self.engine.set_value(value)

    def render(self) -> tuple[DisplayUnit, ...]:
        return self.projector.project(self.engine.snapshot())

    def snapshot(self) -> SessionMirror:
        cursor = self.engine.cursor
        return SessionMirror(
            text=self.value,
            cursor_offset=cursor.offset,
            cursor_width=cursor.width,
            segments=self.segments,
            units=self.render(),
        )

    def _apply(self, op: EditOp, key: KeyInput) -> EditResult:
        if op is EditOp.SUBMIT:
            return self.engine.submit()
        if op is EditOp.MOVE_LEFT:
            if not self.config.show_cursor:
                return self.engine.hold_cursor()
            return self.engine.move_left()
        if op is EditOp.MOVE_RIGHT:
            if not self.config.show_cursor:
                return self.engine.hold_cursor()
            return self.engine.move_right()
        if op is EditOp.DELETE_LEFT:
            return self.engine.delete_left()
        return self.engine.insert(key.text or "")


__all__ = [
    "VALUE_CHANGE",
    "VALUE_SUBMIT",
    "InputSession",
    "SessionBus",
    "SessionMirror",
]
