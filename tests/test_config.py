from __future__ import annotations

import pytest

from input_engine.config import ConfigError, FieldConfig


def test_defaults_match_text_input_props() -> None:
    config = FieldConfig()

    assert config.placeholder == ""
    assert config.focus is True
    assert config.mask is None
    assert config.show_cursor is True
    assert config.highlight_pasted_text is False
    assert config.large_paste_threshold == 200
    assert config.cursor_visible is True


@pytest.mark.parametrize("mask", ["", "**"])
def test_mask_must_be_single_character(mask: str) -> None:
    with pytest.raises(ConfigError) as excinfo:
        FieldConfig(mask=mask)

    assert excinfo.value.field_name == "mask"


def test_threshold_must_exceed_single_character() -> None:
    with pytest.raises(ConfigError):
        FieldConfig(large_paste_threshold=1)


def test_with_overrides_returns_copy() -> None:
    config = FieldConfig()

    hidden = config.with_overrides(show_cursor=False)

    assert hidden.show_cursor is False
    assert config.show_cursor is True
    assert hidden.cursor_visible is False


def test_from_env_reads_prefixed_values() -> None:
    environ = {
        "INPUT_ENGINE_PLACEHOLDER": "Type here",
        "INPUT_ENGINE_MASK": "*",
        "INPUT_ENGINE_SHOW_CURSOR": "no",
        "INPUT_ENGINE_HIGHLIGHT_PASTED": "yes",
        "INPUT_ENGINE_PASTE_THRESHOLD": "64",
    }

    config = FieldConfig.from_env(environ=environ)

    assert config == FieldConfig(
        placeholder="Type here",
        mask="*",
        show_cursor=False,
        highlight_pasted_text=True,
        large_paste_threshold=64,
    )


def test_from_env_uses_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_ENGINE_FOCUS", "0")
    monkeypatch.delenv("INPUT_ENGINE_MASK", raising=False)

    config = FieldConfig.from_env()

    assert config.focus is False
    assert config.mask is None


def test_from_env_rejects_bad_threshold() -> None:
    with pytest.raises(ConfigError):
        FieldConfig.from_env(environ={"INPUT_ENGINE_PASTE_THRESHOLD": "lots"})

