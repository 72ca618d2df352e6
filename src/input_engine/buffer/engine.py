"""Edit engine owning the text value, the cursor and the pasted segments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from input_engine.runtime import telemetry

from .segments import SegmentStore
from .state import Cursor, Segment

LARGE_PASTE_THRESHOLD = 200


@dataclass(slots=True)
class EditResult:
    """Outcome of one edit operation or handled key."""

    consumed: bool
    changed: bool = False
    status: str = "ok"
    message: Optional[str] = None


@dataclass(slots=True)
class FieldView:
    """Read-only snapshot handed to the display projector."""

    text: str
    cursor: Cursor
    segments: tuple[Segment, ...]


def normalize_run(run: str) -> str:
    """Map carriage returns to newlines so pasted line breaks render."""

    return run.replace("\r", "\n")


class EditEngine:
    """Applies atomic edits to the buffer and keeps segments in step.

    Every operation is total: out-of-range positions are clamped and edits
    that would break a pasted segment apart are rejected as no-ops.
    """

    def __init__(
        self,
        value: str = "",
        *,
        cursor_offset: int | None = None,
        large_paste_threshold: int = LARGE_PASTE_THRESHOLD,
        logger_name: str | None = None,
    ) -> None:
        self._text = value
        start = len(value) if cursor_offset is None else cursor_offset
        self._cursor = Cursor(offset=start)
        self._cursor.clamp(len(value))
        self.large_paste_threshold = large_paste_threshold
        self._logger_name = logger_name
        self.segments = SegmentStore(logger_name=logger_name)

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> Cursor:
        return Cursor(offset=self._cursor.offset, width=self._cursor.width)

    def snapshot(self) -> FieldView:
        return FieldView(
            text=self._text,
            cursor=self.cursor,
            segments=self.segments.snapshot(),
        )

    def move_left(self) -> EditResult:
        target = self._cursor.offset - 1
        segment = self.segments.find_containing(target)
        if segment is not None and segment.strictly_contains(target):
            target = segment.start
        return self._move_to(target)

    def move_right(self) -> EditResult:
        target = self._cursor.offset + 1
        segment = self.segments.find_containing(target)
        if segment is not None and segment.strictly_contains(target):
            target = segment.end
        return self._move_to(target)

    def delete_left(self) -> EditResult:
        offset = self._cursor.offset
        self._cursor.width = 0
        if offset == 0:
            return EditResult(consumed=True, status="noop")

        segment = self.segments.find_ending_at(offset)
        if segment is not None:
            self._text = self._text[: segment.start] + self._text[segment.end :]
            self.segments.remove(segment.id)
            self.segments.shift_for_delete(segment.start, segment.length)
            self._cursor.offset = segment.start
            return EditResult(
                consumed=True,
                changed=True,
                status="segment_deleted",
                message=str(segment.length),
            )

        if self.segments.find_containing(offset - 1) is not None:
            telemetry.record_event(
                "edit.rejected",
                level="debug",
                logger_name=self._logger_name,
                data={"operation": "delete_left", "offset": offset},
            )
            return EditResult(consumed=True, status="rejected")

        self._text = self._text[: offset - 1] + self._text[offset:]
        self.segments.shift_for_delete(offset - 1, 1)
        self._cursor.offset = offset - 1
        return EditResult(consumed=True, changed=True, status="deleted")

    def insert(self, run: str) -> EditResult:
        normalized = normalize_run(run)
        size = len(normalized)
        at = self._cursor.offset
        if not size:
            self._cursor.width = 0
            return EditResult(consumed=True, status="noop")

        self._text = self._text[:at] + normalized + self._text[at:]
        if size >= self.large_paste_threshold:
            self.segments.register_large_insert(at, size)
            status = "pasted"
        else:
            # A segment split by typed text no longer exists.
            self.segments.discard_containing(at)
            self.segments.shift_for_insert(at, size)
            status = "inserted"

        self._cursor.offset = at + size
        self._cursor.width = size if size > 1 else 0
        return EditResult(consumed=True, changed=True, status=status)

    def hold_cursor(self) -> EditResult:
        """Keep the cursor where it is, ending any paste highlight."""

        self._cursor.width = 0
        return EditResult(consumed=True, status="noop")

    def submit(self) -> EditResult:
        return EditResult(consumed=True, status="submitted", message=self._text)

    def set_value(self, value: str) -> EditResult:
        """Replace the whole buffer on behalf of the host.

        Segment positions mean nothing against foreign text, so they are
        dropped along with the cursor width.
        """

        if value == self._text:
            return EditResult(consumed=False, status="noop")
        self._text = value
        self.segments.clear()
        self._cursor.width = 0
        self._cursor.clamp(len(value))
        return EditResult(consumed=True, changed=True, status="replaced")

    def _move_to(self, target: int) -> EditResult:
        previous = self._cursor.offset
        self._cursor.offset = target
        self._cursor.clamp(len(self._text))
        self._cursor.width = 0
        if self._cursor.offset == previous:
            return EditResult(consumed=True, status="noop")
        return EditResult(consumed=True, status="moved")


__all__ = [
    "LARGE_PASTE_THRESHOLD",
    "EditEngine",
    "EditResult",
    "FieldView",
    "normalize_run",
]
