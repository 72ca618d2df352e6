from __future__ import annotations

from typing import List, Optional

from rich.text import Span, Text

from input_engine.adapters.textual import (
    TextualInputAdapter,
    TextualUIHooks,
    key_input_from_textual,
    to_rich_text,
)
from input_engine.config import FieldConfig
from input_engine.display import DisplayUnit, Style
from input_engine.keys import TAB
from input_engine.session import InputSession


def make_adapter(
    config: Optional[FieldConfig] = None,
) -> tuple[TextualInputAdapter, List[Text], List[str], List[tuple[str, object]]]:
    views: List[Text] = []
    statuses: List[str] = []
    events: List[tuple[str, object]] = []
    hooks = TextualUIHooks(
        update_view=views.append,
        update_status=statuses.append,
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    adapter = TextualInputAdapter(InputSession(config=config), hooks)
    return adapter, views, statuses, events


def test_adapter_renders_on_creation() -> None:
    _, views, _, _ = make_adapter()

    assert [view.plain for view in views] == [" "]


def test_adapter_updates_view_and_status() -> None:
    adapter, views, statuses, _ = make_adapter()

    adapter.handle_textual_key("a", character="a")

    assert views[-1].plain == "a "
    assert statuses == ["inserted"]


def test_ignored_keys_do_not_refresh() -> None:
    adapter, views, statuses, events = make_adapter()

    result = adapter.handle_textual_key("tab")

    assert result is not None
    assert result.status == "ignored"
    assert len(views) == 1
    assert statuses == []
    assert events == []


def test_unmapped_keys_are_not_handled() -> None:
    adapter, views, _, _ = make_adapter()

    assert adapter.handle_textual_key("f1") is None
    assert adapter.handle_textual_key("ctrl+a", character="\x01") is None
    assert len(views) == 1


def test_paste_collapses_into_placeholder() -> None:
    adapter, views, statuses, _ = make_adapter()

    adapter.handle_paste("Z" * 200)

    assert views[-1].plain == "(Pasted: 200 chars) "
    assert statuses[-1] == "pasted"


def test_adapter_relays_value_events() -> None:
    adapter, _, _, events = make_adapter()

    adapter.handle_textual_key("x", character="x")
    adapter.handle_textual_key("enter")

    assert events == [("value.change", "x"), ("value.submit", "x")]


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    hooks = TextualUIHooks(update_view=lambda _text: None, log=logs.append)
    adapter = TextualInputAdapter(InputSession(), hooks)

    adapter.handle_textual_key("left")

    assert any(line.startswith("key ->") for line in logs)
    assert any("status='noop'" in line for line in logs)


def test_key_translation() -> None:
    shift_tab = key_input_from_textual("shift+tab")
    typed = key_input_from_textual("space", " ")

    assert shift_tab is not None and shift_tab.key == TAB and shift_tab.shift
    assert typed is not None and typed.text == " "


def test_to_rich_text_maps_styles() -> None:
    units = (
        DisplayUnit("ab"),
        DisplayUnit("(Pasted: 200 chars)", Style.DIM, segment_id=0),
        DisplayUnit(" ", Style.INVERSE),
    )

    text = to_rich_text(units)

    assert text.plain == "ab(Pasted: 200 chars) "
    assert text.spans == [Span(2, 21, "dim"), Span(21, 22, "reverse")]


def test_placeholder_hint_is_grey() -> None:
    adapter, views, _, _ = make_adapter(FieldConfig(placeholder="Search"))

    assert views[-1].plain == "Search"
    assert views[-1].spans == [Span(0, 1, "reverse"), Span(1, 6, "grey50")]
