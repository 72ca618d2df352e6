"""Bookkeeping for large-paste segments as the buffer around them changes."""

from __future__ import annotations

from bisect import bisect_right
from typing import Iterator, List, Optional

from input_engine.runtime import telemetry

from .state import Segment


class SegmentStore:
    """Non-overlapping pasted segments kept sorted by ``start``.

    Segments never overlap, so ordering by ``start`` also orders them by
    ``end`` and point lookups can bisect instead of scanning.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._segments: List[Segment] = []
        self._next_id = 0
        self._logger_name = logger_name

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __bool__(self) -> bool:
        return bool(self._segments)

    def snapshot(self) -> tuple[Segment, ...]:
        return tuple(self._segments)

    def shift_for_insert(self, at: int, inserted_length: int) -> None:
        """Move every segment starting at or after ``at`` right."""

        if inserted_length <= 0:
            return
        self._segments = [
            seg.moved(inserted_length) if seg.start >= at else seg
            for seg in self._segments
        ]

    def shift_for_delete(self, at: int, removed_length: int) -> None:
        """Move every segment starting at or after the removed range left."""

        if removed_length <= 0:
            return
        cutoff = at + removed_length
        self._segments = [
            seg.moved(-removed_length) if seg.start >= cutoff else seg
            for seg in self._segments
        ]

    def register_large_insert(self, at: int, length: int) -> int:
        """Track ``length`` code points pasted at ``at`` and return the new id.

        A segment split by the paste no longer describes pasted text and is
        dropped. Segments at or after ``at`` move right, so the new segment
        never overlaps a neighbour that started exactly at ``at``.
        """

        superseded = self.discard_containing(at)
        self.shift_for_insert(at, length)
        segment = Segment(start=at, length=length, id=self._fresh_id())
        index = bisect_right(self._segments, at, key=_start)
        self._segments.insert(index, segment)
        telemetry.record_event(
            "segment.register",
            level="debug",
            logger_name=self._logger_name,
            data={
                "id": segment.id,
                "start": at,
                "length": length,
                "superseded": superseded.id if superseded else None,
            },
        )
        return segment.id

    def discard_containing(self, offset: int) -> Optional[Segment]:
        """Drop the segment that ``offset`` splits in two, if any."""

        segment = self.find_containing(offset)
        if segment is None or segment.start == offset:
            return None
        self.remove(segment.id)
        return segment

    def find_containing(self, offset: int) -> Optional[Segment]:
        index = bisect_right(self._segments, offset, key=_start) - 1
        if index < 0:
            return None
        segment = self._segments[index]
        return segment if segment.contains(offset) else None

    def find_ending_at(self, offset: int) -> Optional[Segment]:
        segment = self.find_containing(offset - 1)
        if segment is not None and segment.end == offset:
            return segment
        return None

    def remove(self, segment_id: int) -> Segment:
        for index, segment in enumerate(self._segments):
            if segment.id == segment_id:
                del self._segments[index]
                telemetry.record_event(
                    "segment.remove",
                    level="debug",
                    logger_name=self._logger_name,
                    data={"id": segment_id, "start": segment.start},
                )
                return segment
        raise KeyError(f"Segment {segment_id} is not tracked")

    def clear(self) -> None:
        self._segments.clear()

    def _fresh_id(self) -> int:
        segment_id = self._next_id
        self._next_id += 1
        return segment_id


def _start(segment: Segment) -> int:
    return segment.start


__all__ = ["SegmentStore"]
