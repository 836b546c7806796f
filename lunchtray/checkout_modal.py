"""Checkout confirmation modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from lunchtray.models import OrderSummary
from lunchtray.rendering import format_order_summary


class CheckoutModal(ModalScreen[bool]):
    """Show the final order and ask whether to submit it."""

    BINDINGS = [
        ("enter", "submit", "Submit"),
        ("y", "submit", "Submit"),
        ("escape", "back", "Back"),
        ("q", "back", "Back"),
        ("n", "back", "Back"),
    ]

    CSS = """
    CheckoutModal {
        align: center middle;
        background: $background 60%;
    }

    #checkout-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #checkout-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #checkout-help {
        margin-top: 1;
        color: $text-muted;
    }
    """

    def __init__(self, summary: OrderSummary) -> None:
        super().__init__()
        self.summary = summary

    def compose(self) -> ComposeResult:
        with Container(id="checkout-dialog"):
            yield Static("Submit Order?", id="checkout-title")
            yield Static(id="checkout-body")
            yield Static("Enter/y submit. Esc/q/n go back.", id="checkout-help")

    def on_mount(self) -> None:
        self.query_one("#checkout-body", Static).update(format_order_summary(self.summary))

    def action_submit(self) -> None:
        self.dismiss(True)

    def action_back(self) -> None:
        self.dismiss(False)
