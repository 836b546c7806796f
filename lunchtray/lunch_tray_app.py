"""Main Textual app class."""

from __future__ import annotations

import logging
from typing import Callable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Header, Static

from lunchtray.checkout_modal import CheckoutModal
from lunchtray.data import DEFAULT_CATALOG
from lunchtray.models import CATEGORIES, MenuItem
from lunchtray.order_state import InvalidSelection, OrderState
from lunchtray.rendering import category_label, category_style, format_currency, format_menu_item, format_order_summary

logger = logging.getLogger(__name__)

START_STEP = "start"
CHECKOUT_STEP = "checkout"
STEPS: tuple[str, ...] = (START_STEP,) + CATEGORIES + (CHECKOUT_STEP,)


class LunchTrayApp(App):
    """A Textual app that walks one order through entree, side and accompaniment."""

    TITLE = "Lunch Tray"
    SUB_TITLE = "Entree / Side / Accompaniment"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #order-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #menu-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #order-summary {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 3;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    step = reactive(START_STEP)
    selected_index = reactive(0)

    BINDINGS = [
        ("s", "start_order", "Start order"),
        ("up", "move_cursor(-1)", "Previous item"),
        ("down", "move_cursor(1)", "Next item"),
        ("k", "move_cursor(-1)", "Previous item"),
        ("j", "move_cursor(1)", "Next item"),
        ("enter", "choose", "Select"),
        ("n", "next_step", "Next"),
        ("b", "previous_step", "Back"),
        ("c", "cancel_order", "Cancel order"),
        ("ctrl+q", "quit", "Quit"),
    ] + [(str(number), f"pick({number})", f"Pick {number}") for number in range(1, 10)]

    def __init__(self, order: OrderState | None = None) -> None:
        super().__init__()
        self.order = order if order is not None else OrderState(DEFAULT_CATALOG)
        self.system_status = ""
        self._unsubscribe: Callable[[], None] | None = None
        logger.debug("app_init catalog_items=%d", len(self.order.catalog))

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static(id="step-title", classes="pane-title")
                yield Static(id="menu-list")
            with Vertical(id="order-pane"):
                yield Static("Your Order", classes="pane-title")
                yield Static(id="order-summary")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._unsubscribe = self.order.subscribe(self._on_order_change)
        self._refresh_all()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def action_start_order(self) -> None:
        if self._modal_open() or self.step != START_STEP:
            return
        self.system_status = ""
        self._go_to(CATEGORIES[0])

    def action_move_cursor(self, delta: int) -> None:
        if self._modal_open() or self.step not in CATEGORIES:
            return
        entries = self._entries()
        if not entries:
            return
        self.selected_index = (self.selected_index + delta) % len(entries)
        self._refresh_menu()

    def action_pick(self, number: int) -> None:
        if self._modal_open() or self.step not in CATEGORIES:
            return
        entries = self._entries()
        if not (1 <= number <= len(entries)):
            return
        self.selected_index = number - 1
        self.action_choose()

    def action_choose(self) -> None:
        if self._modal_open():
            return
        if self.step == CHECKOUT_STEP:
            self.push_screen(CheckoutModal(self.order.snapshot()), self._on_checkout_result)
            return
        if self.step not in CATEGORIES:
            return

        entries = self._entries()
        if not entries:
            return
        key, _ = entries[self.selected_index]
        try:
            self.order.select(self.step, key)
        except InvalidSelection as exc:
            self.system_status = str(exc)
            self._refresh_status()
            return
        self.system_status = ""
        self._refresh_menu()
        self._refresh_status()

    def action_next_step(self) -> None:
        if self._modal_open() or self.step not in CATEGORIES:
            return
        if self.order.selection_for(self.step) is None:
            label = category_label(self.step).lower()
            article = "an" if label[0] in "aeiou" else "a"
            self.system_status = f"Pick {article} {label} first"
            self._refresh_status()
            return
        self.system_status = ""
        self._go_to(STEPS[STEPS.index(self.step) + 1])

    def action_previous_step(self) -> None:
        if self._modal_open() or self.step in {START_STEP, CATEGORIES[0]}:
            return
        self.system_status = ""
        self._go_to(STEPS[STEPS.index(self.step) - 1])

    def action_cancel_order(self) -> None:
        if self._modal_open() or self.step == START_STEP:
            return
        logger.info("order_canceled subtotal=%s", self.order.subtotal)
        self.order.reset_order()
        self.system_status = "Order canceled"
        self._go_to(START_STEP)

    def _on_checkout_result(self, submitted: bool | None) -> None:
        if not submitted:
            logger.debug("checkout_dismissed")
            return

        summary = self.order.snapshot()
        logger.info(
            "order_submitted entree=%r side=%r accompaniment=%r subtotal=%s tax=%s total=%s",
            summary.entree.name if summary.entree else None,
            summary.side.name if summary.side else None,
            summary.accompaniment.name if summary.accompaniment else None,
            summary.subtotal,
            summary.tax,
            summary.total,
        )
        self.order.reset_order()
        self.system_status = f"Order submitted: {format_currency(summary.total)}"
        self._go_to(START_STEP)

    def _on_order_change(self, field_name: str, value: object) -> None:
        # total is always the last field notified for a change.
        if field_name != "total":
            return
        self._refresh_order()

    def _modal_open(self) -> bool:
        return isinstance(self.screen, CheckoutModal)

    def _go_to(self, step: str) -> None:
        self.step = step
        self.selected_index = self._selected_entry_index()
        logger.debug("step_changed step=%s", step)
        self._refresh_all()

    def _entries(self) -> list[tuple[str, MenuItem]]:
        if self.step not in CATEGORIES:
            return []
        return self.order.catalog.entries_for(self.step)

    def _selected_entry_index(self) -> int:
        if self.step not in CATEGORIES:
            return 0
        current = self.order.selection_for(self.step)
        for idx, (_, item) in enumerate(self._entries()):
            if item == current:
                return idx
        return 0

    def _refresh_all(self) -> None:
        self._refresh_menu()
        self._refresh_order()
        self._refresh_status()

    def _refresh_menu(self) -> None:
        try:
            title = self.query_one("#step-title", Static)
            menu = self.query_one("#menu-list", Static)
        except NoMatches:
            return

        if self.step == START_STEP:
            title.update("Start Order")
            menu.update("Press S to start a new order.")
            return

        if self.step == CHECKOUT_STEP:
            title.update("Order Summary")
            body = Text()
            body.append_text(format_order_summary(self.order.snapshot()))
            body.append("\n\nEnter to submit, B to go back, C to cancel.", style="dim")
            menu.update(body)
            return

        heading = Text()
        heading.append(category_label(self.step), style=category_style(self.step))
        heading.append(" Choose one")
        title.update(heading)

        current = self.order.selection_for(self.step)
        lines = Text()
        for idx, (_, item) in enumerate(self._entries()):
            if idx > 0:
                lines.append("\n")
            pointer = "➤ " if idx == self.selected_index else "  "
            lines.append(f"{pointer}{idx + 1}. ")
            lines.append_text(format_menu_item(item, selected=item == current))
        menu.update(lines)

    def _refresh_order(self) -> None:
        try:
            summary_widget = self.query_one("#order-summary", Static)
        except NoMatches:
            return
        summary_widget.update(format_order_summary(self.order.snapshot()))

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        if self.step == START_STEP:
            hint = "S start. Ctrl+Q quit."
        elif self.step == CHECKOUT_STEP:
            hint = "Enter submit. B back. C cancel."
        else:
            hint = "↑/↓ or J/K move, 1-9 or Enter select, N next, B back, C cancel."
        bar.update(f"{hint}\n{self.system_status or 'Ready'}")
