"""Styled display units produced by the projector."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional


class Style(str, Enum):
    """Abstract styles; renderers map them to real escape codes."""

    PLAIN = "plain"
    INVERSE = "inverse"
    DIM = "dim"
    HINT = "hint"


@dataclass(frozen=True, slots=True)
class DisplayUnit:
    text: str
    style: Style = Style.PLAIN
    segment_id: Optional[int] = None

    @property
    def is_placeholder(self) -> bool:
        return self.segment_id is not None


class UnitBuilder:
    """Accumulates units, merging adjacent runs that share a style."""

    def __init__(self) -> None:
        self._units: List[DisplayUnit] = []

    def add(self, text: str, style: Style = Style.PLAIN) -> None:
        if not text:
            return
        if self._units:
            last = self._units[-1]
            if last.style is style and last.segment_id is None:
                self._units[-1] = DisplayUnit(last.text + text, style)
                return
        self._units.append(DisplayUnit(text, style))

    def add_placeholder(self, segment_id: int, length: int, style: Style) -> None:
        self._units.append(
            DisplayUnit(placeholder_label(length), style, segment_id=segment_id)
        )

    def build(self) -> tuple[DisplayUnit, ...]:
        return tuple(self._units)


def placeholder_label(length: int) -> str:
    return f"(Pasted: {length} chars)"


def plain_text(units: Iterable[DisplayUnit]) -> str:
    return "".join(unit.text for unit in units)


__all__ = [
    "DisplayUnit",
    "Style",
    "UnitBuilder",
    "placeholder_label",
    "plain_text",
]
