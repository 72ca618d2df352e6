"""Projection of field state into styled display units."""

from .projector import DisplayProjector
from .units import DisplayUnit, Style, UnitBuilder, placeholder_label, plain_text

__all__ = [
    "DisplayProjector",
    "DisplayUnit",
    "Style",
    "UnitBuilder",
    "placeholder_label",
    "plain_text",
]
