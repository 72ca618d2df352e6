"""Behaviour switches for a text field session."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from input_engine.buffer import LARGE_PASTE_THRESHOLD

ENV_PREFIX = "INPUT_ENGINE_"

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(ValueError):
    """Raised when a field configuration breaks the caller contract."""

    def __init__(self, message: str, *, field_name: str | None = None) -> None:
        super().__init__(message)
        self.field_name = field_name


@dataclass(frozen=True, slots=True)
class FieldConfig:
    """Configuration consumed by the session and the display projector.

    ``placeholder`` is shown while the value is empty. ``focus`` routes key
    input to the field. ``mask`` is a single character drawn in place of
    every character, e.g. for passwords. ``show_cursor`` enables the fake
    cursor and arrow-key
    navigation. ``highlight_pasted_text`` highlights the run inserted by the
    last paste. Pastes of at least ``large_paste_threshold`` characters are
    collapsed into a placeholder token.
    """

    placeholder: str = ""
    focus: bool = True
    mask: Optional[str] = None
    show_cursor: bool = True
    highlight_pasted_text: bool = False
    large_paste_threshold: int = LARGE_PASTE_THRESHOLD

    def __post_init__(self) -> None:
        if self.mask is not None and len(self.mask) != 1:
            raise ConfigError("mask must be a single character", field_name="mask")
        if self.large_paste_threshold < 2:
            raise ConfigError(
                "large_paste_threshold must be at least 2",
                field_name="large_paste_threshold",
            )

    @property
    def cursor_visible(self) -> bool:
        return self.show_cursor and self.focus

    def with_overrides(self, **changes: object) -> "FieldConfig":
        return replace(self, **changes)

    @classmethod
    def from_env(
        cls,
        prefix: str = ENV_PREFIX,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> "FieldConfig":
        env = os.environ if environ is None else environ

        def flag(name: str, default: bool) -> bool:
            raw = env.get(f"{prefix}{name}")
            if raw is None:
                return default
            return raw.strip().lower() in _TRUTHY

        threshold = env.get(f"{prefix}PASTE_THRESHOLD")
        try:
            large_paste_threshold = (
                int(threshold) if threshold else LARGE_PASTE_THRESHOLD
            )
        except ValueError as exc:
            raise ConfigError(
                f"PASTE_THRESHOLD must be an integer, got {threshold!r}",
                field_name="large_paste_threshold",
            ) from exc

        return cls(
            placeholder=env.get(f"{prefix}PLACEHOLDER", ""),
            focus=flag("FOCUS", True),
            mask=env.get(f"{prefix}MASK"),
            show_cursor=flag("SHOW_CURSOR", True),
            highlight_pasted_text=flag("HIGHLIGHT_PASTED", False),
            large_paste_threshold=large_paste_threshold,
        )


__all__ = ["ConfigError", "FieldConfig"]
