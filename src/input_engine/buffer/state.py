"""Cursor and pasted-segment records for the edit buffer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Cursor:
    """Insertion point plus the transient paste-highlight width.

    ``offset`` counts code points, not display columns. ``width`` is the
    length of the run inserted by the last edit and is zero after any other
    operation.
    """

    offset: int = 0
    width: int = 0

    def clamp(self, length: int) -> None:
        self.offset = max(0, min(self.offset, length))


@dataclass(frozen=True, slots=True)
class Segment:
    """Region of the buffer that came from one large paste."""

    start: int
    length: int
    id: int

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("segment length must be positive")
        if self.start < 0:
            raise ValueError("segment start cannot be negative")

    @property
    def end(self) -> int:
        return self.start + self.length

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end

    def strictly_contains(self, offset: int) -> bool:
        return self.start < offset < self.end

    def moved(self, delta: int) -> "Segment":
        return Segment(start=self.start + delta, length=self.length, id=self.id)


__all__ = ["Cursor", "Segment"]
