"""Read-only notice modal for receipts, menus, reports and feedback."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container, VerticalScroll
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static


class NoticeModal(ModalScreen[None]):
    """Centered modal showing one block of text until the operator closes it."""

    CSS = """
    NoticeModal {
        align: center middle;
        background: $background 60%;
    }

    #notice-dialog {
        width: 72;
        height: auto;
        max-height: 90%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #notice-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #notice-scroll {
        height: auto;
        max-height: 30;
    }

    #notice-body {
        color: white;
    }

    #notice-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    def __init__(self, title: str, body: Text | str, error: bool = False) -> None:
        super().__init__()
        self.title_text = title
        self.body = body
        self.error = error

    def compose(self) -> ComposeResult:
        with Container(id="notice-dialog"):
            yield Static(self.title_text, id="notice-title")
            with VerticalScroll(id="notice-scroll"):
                body = Text(self.body, style="bold #ffb3b3") if self.error and isinstance(self.body, str) else self.body
                yield Static(body, id="notice-body")
            yield Static("Enter/Esc/q close, ↑/↓ scroll", id="notice-help")

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "enter", "q", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
