"""Menu catalog: ordered, case-insensitively unique menu items."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Iterator

from restaurant_pos.constant import DEFAULT_MENU_ENTRIES
from restaurant_pos.models import MenuCategory, MenuItem, to_price

logger = logging.getLogger(__name__)


class DuplicateNameError(ValueError):
    """Raised when a menu item name is already taken (case-insensitive)."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Menu already has an item named {name!r}")
        self.name = name


def _name_key(name: str) -> str:
    # Per-character lowering: "Straße" and "Strasse" stay distinct.
    return name.lower()


class MenuCatalog:
    """Insertion-ordered menu. Lookups ignore case."""

    def __init__(self) -> None:
        self._items: list[MenuItem] = []
        self._by_key: dict[str, MenuItem] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(tuple(self._items))

    def add_item(
        self,
        name: str,
        price: Decimal | int | float | str,
        category: MenuCategory | str,
    ) -> MenuItem:
        """Create and append a menu item.

        Raises DuplicateNameError on a case-insensitive name clash and
        ValueError for a blank name, a malformed or negative price, or an
        unknown category. The catalog is left untouched on any failure.
        """
        if not name.strip():
            raise ValueError("Menu item name must not be empty")

        key = _name_key(name)
        if key in self._by_key:
            logger.debug("catalog_add_rejected name=%r reason=duplicate", name)
            raise DuplicateNameError(name)

        try:
            parsed_price = to_price(price)
        except InvalidOperation as exc:
            raise ValueError(f"Invalid price {price!r} for {name!r}") from exc
        if not parsed_price.is_finite() or parsed_price < 0:
            raise ValueError(f"Price must be a finite amount >= 0, got {price!r}")

        item = MenuItem(name=name, price=parsed_price, category=MenuCategory(category))
        self._items.append(item)
        self._by_key[key] = item
        logger.debug("catalog_add name=%r price=%s category=%s", item.name, item.price, item.category)
        return item

    def list(self) -> tuple[MenuItem, ...]:
        """Return items in insertion order."""
        return tuple(self._items)

    def find_by_name(self, name: str) -> MenuItem | None:
        """Case-insensitive exact lookup, whitespace included; None when the dish is not on the menu."""
        return self._by_key.get(_name_key(name))

    def by_category(self, category: MenuCategory | str) -> list[MenuItem]:
        wanted = MenuCategory(category)
        return [item for item in self._items if item.category is wanted]


def default_catalog() -> MenuCatalog:
    """Build the house menu."""
    catalog = MenuCatalog()
    for name, price, category in DEFAULT_MENU_ENTRIES:
        catalog.add_item(name, price, category)
    return catalog
