"""Domain models for lunch-tray."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

ENTREE = "entree"
SIDE = "side"
ACCOMPANIMENT = "accompaniment"

# Course order is also the order the app walks through them.
CATEGORIES: tuple[str, ...] = (ENTREE, SIDE, ACCOMPANIMENT)


@dataclass(frozen=True)
class MenuItem:
    """A purchasable menu item in exactly one course."""

    name: str
    price: Decimal
    category: str
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.price, Decimal):
            raise ValueError(f"price for {self.name!r} must be a Decimal, got {type(self.price).__name__}")
        if self.price < 0:
            raise ValueError(f"price for {self.name!r} must not be negative")
        if self.category not in CATEGORIES:
            raise ValueError(f"unknown category {self.category!r} for {self.name!r}")


@dataclass(frozen=True)
class OrderSummary:
    """Point-in-time copy of every observable order field."""

    entree: MenuItem | None
    side: MenuItem | None
    accompaniment: MenuItem | None
    subtotal: Decimal
    tax: Decimal
    total: Decimal

    def selection_for(self, category: str) -> MenuItem | None:
        """Return the selected item for a course."""
        if category not in CATEGORIES:
            raise ValueError(f"unknown category {category!r}")
        return getattr(self, category)
