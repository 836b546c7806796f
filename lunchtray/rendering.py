"""Currency formatting and rich rendering helpers."""

from __future__ import annotations

import locale
from decimal import ROUND_HALF_UP, Decimal

from rich.text import Text

from lunchtray.config import CURRENCY_FALLBACK_SYMBOL
from lunchtray.models import CATEGORIES, MenuItem, OrderSummary

_CENT = Decimal("0.01")

_CATEGORY_LABELS = {
    "entree": "Entree",
    "side": "Side",
    "accompaniment": "Accompaniment",
}


def format_currency(amount: Decimal, symbol: str | None = None) -> str:
    """
    Format an amount as currency, rounded half-up to cents.

    Uses the active LC_MONETARY locale when it defines a currency symbol
    and no explicit symbol is given; otherwise prefixes the symbol.
    """
    cents = Decimal(amount).quantize(_CENT, rounding=ROUND_HALF_UP)
    if symbol is None and locale.localeconv()["currency_symbol"]:
        return locale.currency(cents, grouping=True)
    return f"{symbol or CURRENCY_FALLBACK_SYMBOL}{cents:,.2f}"


def category_label(category: str) -> str:
    """Return the display label for a course."""
    return _CATEGORY_LABELS[category]


def category_style(category: str) -> str:
    """Return a consistent badge style for course tags."""
    if category == "entree":
        return "bold #ffffff on #b23a48"
    if category == "side":
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_menu_item(item: MenuItem, selected: bool = False, symbol: str | None = None) -> Text:
    """Render a menu row: name, price, and a dimmed description line."""
    text = Text()
    text.append("(•) " if selected else "( ) ", style="bold" if selected else "")
    text.append(item.name, style="bold" if selected else "")
    text.append(f"  {format_currency(item.price, symbol)}")
    if item.description:
        text.append(f"\n      {item.description}", style="dim")
    return text


def format_order_summary(summary: OrderSummary, symbol: str | None = None) -> Text:
    """Render the selections and the subtotal, tax and total lines."""
    text = Text()
    for category in CATEGORIES:
        item = summary.selection_for(category)
        text.append(category_label(category)[0], style=category_style(category))
        if item is None:
            text.append(" (none)\n", style="dim")
            continue
        text.append(f" {item.name}  {format_currency(item.price, symbol)}\n")

    text.append("\n")
    text.append(f"Subtotal: {format_currency(summary.subtotal, symbol)}\n")
    text.append(f"Tax: {format_currency(summary.tax, symbol)}\n")
    text.append(f"Total: {format_currency(summary.total, symbol)}", style="bold")
    return text
