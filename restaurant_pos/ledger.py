"""Sales ledger: owns every order placed in the session."""

from __future__ import annotations

import logging
import threading
from decimal import Decimal

from restaurant_pos.models import Order
from restaurant_pos.report import total_sales

logger = logging.getLogger(__name__)


class SalesLedger:
    """Append-only list of orders with ledger-scoped sequential ids starting at 1."""

    def __init__(self) -> None:
        self._orders: list[Order] = []
        self._last_order_id = 0
        # Guards the id counter and the order list together.
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._orders)

    def create_order(self) -> Order:
        """Create, record and return a new empty order.

        The returned object is the instance the ledger keeps, so items added
        through it show up in later reads.
        """
        with self._lock:
            self._last_order_id += 1
            order = Order(self._last_order_id)
            self._orders.append(order)
        logger.debug("ledger_create_order order_id=%d", order.id())
        return order

    def all_orders(self) -> tuple[Order, ...]:
        """Return orders in creation order."""
        with self._lock:
            return tuple(self._orders)

    def total_sales(self) -> Decimal:
        return total_sales(self.all_orders())
