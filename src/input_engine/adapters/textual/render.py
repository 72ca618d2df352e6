"""Maps abstract display units onto rich styles."""

from __future__ import annotations

from typing import Iterable, Mapping

from rich.text import Text

from input_engine.display import DisplayUnit, Style

RICH_STYLES: Mapping[Style, str] = {
    Style.PLAIN: "",
    Style.INVERSE: "reverse",
    Style.DIM: "dim",
    Style.HINT: "grey50",
}


def to_rich_text(
    units: Iterable[DisplayUnit], *, styles: Mapping[Style, str] = RICH_STYLES
) -> Text:
    text = Text()
    for unit in units:
        text.append(unit.text, style=styles.get(unit.style) or None)
    return text


__all__ = ["RICH_STYLES", "to_rich_text"]
