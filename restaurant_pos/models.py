"""Domain models for restaurant-pos."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class MenuCategory(str, Enum):
    """Menu section a dish is listed under."""

    STARTER = "STARTER"
    MAIN_COURSE = "MAIN_COURSE"
    DESSERT = "DESSERT"
    BEVERAGE = "BEVERAGE"

    def __str__(self) -> str:
        return self.value


def to_price(value: Decimal | int | float | str) -> Decimal:
    """Convert a price input to an exact Decimal (floats go through their str form)."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


@dataclass(frozen=True)
class MenuItem:
    """An immutable dish on the menu."""

    name: str
    price: Decimal
    category: MenuCategory


class Order:
    """One customer's selected items.

    Items are shared references into the catalog and may repeat. The total is
    recomputed on every call.
    """

    def __init__(self, order_id: int) -> None:
        self._order_id = order_id
        self._items: list[MenuItem] = []

    def __repr__(self) -> str:
        return f"Order(order_id={self._order_id}, items={len(self._items)})"

    def id(self) -> int:
        return self._order_id

    def add_item(self, item: MenuItem) -> None:
        self._items.append(item)

    def items(self) -> tuple[MenuItem, ...]:
        return tuple(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def total_price(self) -> Decimal:
        """Sum of item prices, Decimal('0') for an empty order."""
        return sum((item.price for item in self._items), Decimal("0"))
