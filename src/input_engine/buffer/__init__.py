"""Buffer, cursor and pasted-segment bookkeeping."""

from .engine import (
    LARGE_PASTE_THRESHOLD,
    EditEngine,
    EditResult,
    FieldView,
    normalize_run,
)
from .segments import SegmentStore
from .state import Cursor, Segment

__all__ = [
    "LARGE_PASTE_THRESHOLD",
    "Cursor",
    "EditEngine",
    "EditResult",
    "FieldView",
    "Segment",
    "SegmentStore",
    "normalize_run",
]
