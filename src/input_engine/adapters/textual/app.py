"""Executable Textual app hosting a single input field."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from input_engine.config import ConfigError, FieldConfig
from input_engine.runtime import telemetry
from input_engine.session import VALUE_SUBMIT, InputSession

from .controller import TextualInputAdapter, TextualUIHooks


@dataclass
class UIState:
    status_text: str = ""
    submitted: List[str] = field(default_factory=list)


class InputEngineApp(App[None]):
    """Minimal Textual UI embedding one input session."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#field-view {
		height: auto;
		min-height: 3;
		border: round $accent;
		padding: 0 1;
	}

	#history {
		height: 1fr;
		padding: 0 1;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, config: Optional[FieldConfig] = None) -> None:
        super().__init__()
        self._config = config or FieldConfig()
        self._state = UIState()
        self.session: InputSession | None = None
        self.adapter: TextualInputAdapter | None = None
        self._field_widget: Static | None = None
        self._history_widget: Static | None = None
        self._status_widget: Static | None = None
        self._logger = telemetry.get_logger("input_engine.adapters.textual")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="field-area"):
            self._field_widget = Static("", id="field-view")
            yield self._field_widget
            self._history_widget = Static("", id="history")
            yield self._history_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        self.session = InputSession(config=self._config)
        hooks = TextualUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            handle_event=self._handle_event,
            log=self._logger.debug,
        )
        self.adapter = TextualInputAdapter(self.session, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        result = self.adapter.handle_textual_key(event.key, character=event.character)
        if result is not None and result.consumed:
            event.stop()

    def on_paste(self, event: events.Paste) -> None:
        if not self.adapter:
            return
        self.adapter.handle_paste(event.text)
        event.stop()

    def _update_view(self, text: Text) -> None:
        if self._field_widget:
            self._field_widget.update(text)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name != VALUE_SUBMIT or not isinstance(payload, str) or not self.session:
            return
        self._state.submitted.append(payload)
        if self._history_widget:
            self._history_widget.update("\n".join(self._state.submitted))
        # The host owns the value: clearing it mirrors a chat-style prompt.
        self.session.set_value("")
        if self.adapter:
            self.adapter.refresh()


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    defaults = FieldConfig.from_env()
    parser = argparse.ArgumentParser(description="Run the input engine Textual demo.")
    parser.add_argument(
        "--placeholder",
        default=defaults.placeholder,
        help="Text shown while the field is empty",
    )
    parser.add_argument(
        "--mask",
        default=defaults.mask,
        help="Single character drawn instead of the typed text",
    )
    parser.add_argument(
        "--no-cursor",
        action="store_true",
        default=not defaults.show_cursor,
        help="Hide the cursor and disable arrow-key navigation",
    )
    parser.add_argument(
        "--highlight-pasted",
        action="store_true",
        default=defaults.highlight_pasted_text,
        help="Highlight the most recently pasted run",
    )
    parser.add_argument(
        "--paste-threshold",
        type=int,
        default=defaults.large_paste_threshold,
        help="Pastes at least this long collapse into a placeholder (default: 200)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        default=None,
        help="Telemetry preset; the environment is used when omitted",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    try:
        config = FieldConfig(
            placeholder=args.placeholder,
            mask=args.mask,
            show_cursor=not args.no_cursor,
            highlight_pasted_text=args.highlight_pasted,
            large_paste_threshold=args.paste_threshold,
        )
    except ConfigError as exc:
        raise SystemExit(f"invalid configuration: {exc}") from exc
    InputEngineApp(config=config).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
