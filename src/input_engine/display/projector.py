"""Turns buffer, cursor and segments into styled display units."""

from __future__ import annotations

from typing import Optional, Sequence

from input_engine.buffer import FieldView, Segment
from input_engine.config import FieldConfig

from .units import DisplayUnit, Style, UnitBuilder


class DisplayProjector:
    """Derives the renderable view of a field. Never mutates state.

    Pasted segments collapse into ``(Pasted: N chars)`` tokens. The cursor is
    drawn as inverse cells: the character under it, or a blank cell right
    after the token when it sits within a segment. Highlighting a plain
    character walks the buffer, so projection is linear in the buffer length.
    """

    def __init__(self, config: FieldConfig) -> None:
        self.config = config

    def project(self, view: FieldView) -> tuple[DisplayUnit, ...]:
        config = self.config
        builder = UnitBuilder()

        if not view.text and config.placeholder:
            if config.cursor_visible:
                builder.add(config.placeholder[0], Style.INVERSE)
                builder.add(config.placeholder[1:], Style.HINT)
            else:
                builder.add(config.placeholder, Style.HINT)
            return builder.build()

        if config.mask:
            # Masked fields never reveal where pastes begin or end.
            value = config.mask * len(view.text)
            segments: Sequence[Segment] = ()
        else:
            value = view.text
            segments = sorted(view.segments, key=lambda seg: seg.start)

        if not config.cursor_visible:
            self._walk(builder, value, segments, offset=None, low=0, high=-1)
            return builder.build()

        offset = view.cursor.offset
        width = view.cursor.width if config.highlight_pasted_text else 0
        self._walk(
            builder, value, segments, offset=offset, low=offset - width, high=offset
        )
        if offset == len(value):
            builder.add(" ", Style.INVERSE)
        return builder.build()

    def _walk(
        self,
        builder: UnitBuilder,
        value: str,
        segments: Sequence[Segment],
        *,
        offset: Optional[int],
        low: int,
        high: int,
    ) -> None:
        position = 0
        for segment in segments:
            _add_plain(builder, value, position, segment.start, low, high)
            builder.add_placeholder(segment.id, segment.length, Style.DIM)
            if offset is not None and segment.contains(offset):
                builder.add(" ", Style.INVERSE)
            position = segment.end
        _add_plain(builder, value, position, len(value), low, high)


def _add_plain(
    builder: UnitBuilder, value: str, start: int, stop: int, low: int, high: int
) -> None:
    lo = max(start, low)
    hi = min(stop, high + 1)
    if lo >= hi:
        builder.add(value[start:stop])
        return
    builder.add(value[start:lo])
    _add_highlighted(builder, value[lo:hi])
    builder.add(value[hi:stop])


def _add_highlighted(builder: UnitBuilder, chunk: str) -> None:
    # A highlighted newline gets its own inverse blank so the cursor shows.
    for index, part in enumerate(chunk.split("\n")):
        if index:
            builder.add(" ", Style.INVERSE)
            builder.add("\n")
        builder.add(part, Style.INVERSE)


__all__ = ["DisplayProjector"]
