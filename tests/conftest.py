"""
Shared fixtures: a small fixed catalog and an order bound to it.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from lunchtray.data import MenuCatalog
from lunchtray.models import MenuItem
from lunchtray.order_state import OrderState


@pytest.fixture
def fixture_catalog() -> MenuCatalog:
    """Catalog keyed by display name."""
    items = [
        MenuItem("Cauliflower", Decimal("7.00"), "entree"),
        MenuItem("A", Decimal("5.00"), "entree"),
        MenuItem("B", Decimal("7.00"), "entree"),
        MenuItem("Rice", Decimal("2.50"), "side"),
        MenuItem("Potato Salad", Decimal("3.00"), "side"),
        MenuItem("Eggroll", Decimal("1.50"), "accompaniment"),
        MenuItem("Fortune Cookie", Decimal("0.25"), "accompaniment"),
    ]
    return MenuCatalog({item.name: item for item in items})


@pytest.fixture
def order(fixture_catalog: MenuCatalog) -> OrderState:
    return OrderState(fixture_catalog)


@pytest.fixture
def recorded(order: OrderState) -> list[tuple[str, object]]:
    """Every (field, value) notification the order emits after this fixture runs."""
    events: list[tuple[str, object]] = []
    order.subscribe(lambda field_name, value: events.append((field_name, value)))
    return events
