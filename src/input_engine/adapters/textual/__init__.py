"""Textual host adapter for input sessions."""

from .controller import TextualInputAdapter, TextualUIHooks, key_input_from_textual
from .render import RICH_STYLES, to_rich_text

__all__ = [
    "RICH_STYLES",
    "TextualInputAdapter",
    "TextualUIHooks",
    "key_input_from_textual",
    "to_rich_text",
]
