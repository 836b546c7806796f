"""State holder for the one order being built on screen."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable

from lunchtray.config import TAX_RATE
from lunchtray.data import MenuCatalog
from lunchtray.models import ACCOMPANIMENT, CATEGORIES, ENTREE, SIDE, MenuItem, OrderSummary

logger = logging.getLogger(__name__)

Listener = Callable[[str, object], None]

_ZERO = Decimal("0")
_DERIVED_FIELDS = ("subtotal", "tax", "total")


class InvalidSelection(ValueError):
    """Raised when a name is not on the menu for the requested course."""

    def __init__(self, name: str, category: str) -> None:
        super().__init__(f"{name!r} is not a {category} on the menu")
        self.name = name
        self.category = category


class OrderState:
    """
    Hold the entree, side and accompaniment for one order.

    Subtotal, tax and total are derived from the selections and are only
    changed by the setters and reset_order. Subscribers are told about
    each changed field after all of them have been recomputed, so a
    listener never sees a subtotal that disagrees with tax or total.
    """

    def __init__(self, catalog: MenuCatalog, tax_rate: Decimal = TAX_RATE) -> None:
        self._catalog = catalog
        if not isinstance(tax_rate, Decimal):
            raise ValueError(f"tax_rate must be a Decimal, got {type(tax_rate).__name__}")
        if tax_rate < 0:
            raise ValueError("tax_rate must not be negative")
        self._tax_rate = tax_rate
        self._selections: dict[str, MenuItem | None] = {category: None for category in CATEGORIES}
        self._subtotal = _ZERO
        self._tax = _ZERO
        self._total = _ZERO
        self._listeners: list[Listener] = []
        self.reset_order()

    @property
    def catalog(self) -> MenuCatalog:
        return self._catalog

    @property
    def entree(self) -> MenuItem | None:
        return self._selections[ENTREE]

    @property
    def side(self) -> MenuItem | None:
        return self._selections[SIDE]

    @property
    def accompaniment(self) -> MenuItem | None:
        return self._selections[ACCOMPANIMENT]

    @property
    def subtotal(self) -> Decimal:
        return self._subtotal

    @property
    def tax(self) -> Decimal:
        return self._tax

    @property
    def total(self) -> Decimal:
        return self._total

    @property
    def tax_rate(self) -> Decimal:
        return self._tax_rate

    @property
    def is_empty(self) -> bool:
        return all(item is None for item in self._selections.values())

    def selection_for(self, category: str) -> MenuItem | None:
        """Return the current selection for a course."""
        if category not in CATEGORIES:
            raise ValueError(f"unknown category {category!r}")
        return self._selections[category]

    def snapshot(self) -> OrderSummary:
        """Copy every observable field into an immutable summary."""
        return OrderSummary(
            entree=self.entree,
            side=self.side,
            accompaniment=self.accompaniment,
            subtotal=self._subtotal,
            tax=self._tax,
            total=self._total,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register listener(field_name, value); returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_entree(self, name: str) -> None:
        self._select(ENTREE, name)

    def set_side(self, name: str) -> None:
        self._select(SIDE, name)

    def set_accompaniment(self, name: str) -> None:
        self._select(ACCOMPANIMENT, name)

    def select(self, category: str, name: str) -> None:
        """Set the selection for any course by category name."""
        if category not in CATEGORIES:
            raise ValueError(f"unknown category {category!r}")
        self._select(category, name)

    def recompute_tax_and_total(self) -> None:
        """Derive tax and total from the current subtotal and notify."""
        self._derive_tax_and_total()
        self._notify(("tax", "total"))

    def reset_order(self) -> None:
        """Clear all selections and zero every derived amount."""
        for category in CATEGORIES:
            self._selections[category] = None
        self._subtotal = _ZERO
        self._tax = _ZERO
        self._total = _ZERO
        logger.debug("order_reset")
        self._notify(CATEGORIES + _DERIVED_FIELDS)

    def _select(self, category: str, name: str) -> None:
        item = self._catalog.lookup(name, category)
        if item is None:
            logger.info("selection_rejected category=%s name=%r", category, name)
            raise InvalidSelection(name, category)

        subtotal = self._subtotal
        previous = self._selections[category]
        if previous is not None:
            subtotal = self._non_negative(subtotal - previous.price, category)
        subtotal = subtotal + item.price

        self._selections[category] = item
        self._subtotal = subtotal
        self._derive_tax_and_total()
        logger.debug(
            "selection_set category=%s name=%r subtotal=%s tax=%s total=%s",
            category,
            item.name,
            self._subtotal,
            self._tax,
            self._total,
        )
        self._notify((category,) + _DERIVED_FIELDS)

    def _derive_tax_and_total(self) -> None:
        self._tax = self._subtotal * self._tax_rate
        self._total = self._subtotal + self._tax

    def _non_negative(self, amount: Decimal, category: str) -> Decimal:
        if amount >= 0:
            return amount
        logger.warning(
            "subtotal_clamped category=%s computed=%s selections=%r",
            category,
            amount,
            {key: item.name if item else None for key, item in self._selections.items()},
        )
        return _ZERO

    def _notify(self, fields: tuple[str, ...]) -> None:
        values = {
            ENTREE: self.entree,
            SIDE: self.side,
            ACCOMPANIMENT: self.accompaniment,
            "subtotal": self._subtotal,
            "tax": self._tax,
            "total": self._total,
        }
        # State is already committed; every listener still gets every field
        # and the first failure is re-raised afterwards.
        first_error: Exception | None = None
        for listener in list(self._listeners):
            for field_name in fields:
                try:
                    listener(field_name, values[field_name])
                except Exception as exc:
                    logger.exception("listener_failed field=%s listener=%r", field_name, listener)
                    if first_error is None:
                        first_error = exc
        if first_error is not None:
            raise first_error
