"""Operator prompt modal screen."""

from __future__ import annotations

from typing import Any, Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from cafe.errors import CafeError

_MAX_INPUT_CHARS = 60


class PromptModal(ModalScreen[Any]):
    """
    Ask the operator for one value.

    The typed text goes through ``parser`` on Enter. A CafeError keeps the
    modal open with the error shown (re-prompt); otherwise the modal is
    dismissed with the parsed value. Escape and Ctrl+C dismiss with None.
    """

    CSS = """
    PromptModal {
        align: center middle;
        background: $background 60%;
    }

    #prompt-dialog {
        width: 72;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #prompt-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #prompt-body {
        color: white;
        margin-bottom: 1;
    }

    #prompt-label {
        color: white;
    }

    #prompt-value {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #prompt-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #prompt-help {
        color: #dddddd;
    }
    """

    def __init__(
        self,
        title: str,
        prompt: str,
        parser: Callable[[str], Any],
        body: Text | str | None = None,
    ) -> None:
        super().__init__()
        self.title_text = title
        self.prompt = prompt
        self.parser = parser
        self.body = body
        self.value = ""
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="prompt-dialog"):
            yield Static(self.title_text, id="prompt-title")
            if self.body is not None:
                yield Static(self.body, id="prompt-body")
            yield Static(self.prompt, id="prompt-label")
            yield Static(id="prompt-value")
            yield Static(id="prompt-error")
            yield Static("Enter confirm. Backspace delete. Esc cancel.", id="prompt-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self._confirm()
            event.stop()
            return

        if event.key == "backspace":
            if self.value:
                self.value = self.value[:-1]
                self.error = ""
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            if len(self.value) < _MAX_INPUT_CHARS:
                self.value += event.character
            self.error = ""
            self._refresh_content()
            event.stop()

    def _confirm(self) -> None:
        try:
            parsed = self.parser(self.value)
        except CafeError as exc:
            self.error = str(exc)
            self.value = ""
            self._refresh_content()
            return
        self.dismiss(parsed)

    def _refresh_content(self) -> None:
        value_widget = self.query_one("#prompt-value", Static)
        error_widget = self.query_one("#prompt-error", Static)
        value_widget.update(Text(f"{self.value}|"))
        error_widget.update(self.error or "")
