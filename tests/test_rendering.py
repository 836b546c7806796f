from __future__ import annotations

from decimal import Decimal

from lunchtray import rendering
from lunchtray.models import OrderSummary
from lunchtray.rendering import format_currency, format_menu_item, format_order_summary


def test_format_currency_rounds_half_up_to_cents():
    assert format_currency(Decimal("0.885"), symbol="$") == "$0.89"
    assert format_currency(Decimal("11.88"), symbol="$") == "$11.88"
    assert format_currency(Decimal("0"), symbol="$") == "$0.00"


def test_format_currency_groups_thousands():
    assert format_currency(Decimal("1234.5"), symbol="€") == "€1,234.50"


def test_format_menu_item_includes_price_and_description(fixture_catalog):
    item = fixture_catalog.lookup("Cauliflower", "entree")
    plain = format_menu_item(item, selected=True, symbol="$").plain
    assert "(•) Cauliflower" in plain
    assert "$7.00" in plain


def test_format_order_summary(order):
    order.set_entree("Cauliflower")
    order.set_side("Rice")
    order.set_accompaniment("Eggroll")

    plain = format_order_summary(order.snapshot(), symbol="$").plain

    assert "Subtotal: $11.00" in plain
    assert "Tax: $0.88" in plain
    assert "Total: $11.88" in plain


def test_format_order_summary_marks_empty_courses():
    summary = OrderSummary(None, None, None, Decimal("0"), Decimal("0"), Decimal("0"))
    plain = format_order_summary(summary, symbol="$").plain
    assert plain.count("(none)") == 3


def _install_locale(monkeypatch, handed_over):
    def fake_currency(value, symbol=True, grouping=False, international=False):
        handed_over.append(value)
        return f"{value:,.2f} €"

    monkeypatch.setattr(rendering.locale, "localeconv", lambda: {"currency_symbol": "€"})
    monkeypatch.setattr(rendering.locale, "currency", fake_currency)


def test_format_currency_uses_host_locale_when_it_has_a_symbol(monkeypatch):
    handed_over = []
    _install_locale(monkeypatch, handed_over)

    assert format_currency(Decimal("1234.565")) == "1,234.57 €"
    assert handed_over == [Decimal("1234.57")]


def test_explicit_symbol_wins_over_host_locale(monkeypatch):
    handed_over = []
    _install_locale(monkeypatch, handed_over)

    assert format_currency(Decimal("0.885"), symbol="$") == "$0.89"
    assert handed_over == []
