from __future__ import annotations

from decimal import Decimal

import pytest

from lunchtray.data import DEFAULT_CATALOG, MenuCatalog, build_catalog
from lunchtray.models import MenuItem, OrderSummary


def test_menu_item_rejects_negative_price():
    with pytest.raises(ValueError):
        MenuItem("Refund", Decimal("-1.00"), "side")


def test_menu_item_rejects_unknown_category():
    with pytest.raises(ValueError):
        MenuItem("Pie", Decimal("3.00"), "dessert")


def test_menu_item_rejects_float_price():
    with pytest.raises(ValueError):
        MenuItem("Soup", 3.0, "side")


def test_lookup_respects_category(fixture_catalog):
    assert fixture_catalog.lookup("Rice", "side").price == Decimal("2.50")
    assert fixture_catalog.lookup("Rice", "entree") is None
    assert fixture_catalog.lookup("Missing", "side") is None


def test_entries_for_keeps_table_order(fixture_catalog):
    keys = [key for key, _ in fixture_catalog.entries_for("entree")]
    assert keys == ["Cauliflower", "A", "B"]


def test_entries_for_unknown_category(fixture_catalog):
    with pytest.raises(ValueError):
        fixture_catalog.entries_for("dessert")


def test_catalog_is_a_snapshot_of_its_source():
    source = {"Rice": MenuItem("Rice", Decimal("2.50"), "side")}
    catalog = MenuCatalog(source)
    source["Soup"] = MenuItem("Soup", Decimal("3.00"), "side")
    assert "Soup" not in catalog
    assert len(catalog) == 1
    assert list(catalog) == ["Rice"]


def test_build_catalog_rejects_bad_price():
    with pytest.raises(ValueError):
        build_catalog({"x": {"name": "X", "price": "free", "category": "side"}})


def test_default_catalog_contents():
    assert len(DEFAULT_CATALOG) == 11
    assert [key for key, _ in DEFAULT_CATALOG.entries_for("entree")] == ["cauliflower", "chili", "pasta", "skillet"]
    assert len(DEFAULT_CATALOG.entries_for("side")) == 4
    assert len(DEFAULT_CATALOG.entries_for("accompaniment")) == 3
    assert DEFAULT_CATALOG.lookup("pasta", "entree").price == Decimal("5.50")


def test_summary_selection_for(fixture_catalog):
    rice = fixture_catalog.lookup("Rice", "side")
    summary = OrderSummary(None, rice, None, Decimal("2.50"), Decimal("0.20"), Decimal("2.70"))
    assert summary.selection_for("side") is rice
    assert summary.selection_for("entree") is None
    with pytest.raises(ValueError):
        summary.selection_for("dessert")
