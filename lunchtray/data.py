"""Static menu data and the read-only catalog wrapper."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Iterator, Mapping

from lunchtray.constant import MENU_ITEMS_BY_ID
from lunchtray.models import CATEGORIES, MenuItem


class MenuCatalog:
    """Read-only mapping from a lookup key to a menu item."""

    def __init__(self, items: Mapping[str, MenuItem]) -> None:
        self._items: Mapping[str, MenuItem] = MappingProxyType(dict(items))

    def lookup(self, key: str, category: str) -> MenuItem | None:
        """Find an item by key, or None if it is missing or belongs to another course."""
        item = self._items.get(key)
        if item is None or item.category != category:
            return None
        return item

    def entries_for(self, category: str) -> list[tuple[str, MenuItem]]:
        """List (key, item) pairs for one course in table order."""
        if category not in CATEGORIES:
            raise ValueError(f"unknown category {category!r}")
        return [(key, item) for key, item in self._items.items() if item.category == category]

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


def build_catalog(raw: Mapping[str, Mapping[str, str]]) -> MenuCatalog:
    """Convert raw menu rows into a MenuCatalog."""
    items: dict[str, MenuItem] = {}
    for key, row in raw.items():
        try:
            price = Decimal(row["price"])
        except (InvalidOperation, TypeError) as exc:
            raise ValueError(f"invalid price {row['price']!r} for menu key {key!r}") from exc
        items[key] = MenuItem(
            name=row["name"],
            price=price,
            category=row["category"],
            description=row.get("description", ""),
        )
    return MenuCatalog(items)


DEFAULT_CATALOG = build_catalog(MENU_ITEMS_BY_ID)
