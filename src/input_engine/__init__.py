"""Editing engine for terminal text fields with collapsible large pastes."""

from .buffer import Cursor, EditEngine, EditResult, Segment, SegmentStore
from .config import ConfigError, FieldConfig
from .display import DisplayProjector, DisplayUnit, Style, plain_text
from .keys import KeyInput
from .session import InputSession, SessionBus, SessionMirror

__all__ = [
    "ConfigError",
    "Cursor",
    "DisplayProjector",
    "DisplayUnit",
    "EditEngine",
    "EditResult",
    "FieldConfig",
    "InputSession",
    "KeyInput",
    "Segment",
    "SegmentStore",
    "SessionBus",
    "SessionMirror",
    "Style",
    "plain_text",
]

__version__ = "0.1.0"
