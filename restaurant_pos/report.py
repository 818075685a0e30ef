"""Sales reporting over a sequence of orders."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from restaurant_pos.models import Order


@dataclass(frozen=True)
class SalesReport:
    """Total sales at a point in time."""

    report_date: date
    total_sales: Decimal
    order_count: int


def total_sales(orders: Iterable[Order]) -> Decimal:
    """Sum of order totals, Decimal('0') when there are no orders."""
    return sum((order.total_price() for order in orders), Decimal("0"))


def build_sales_report(orders: Iterable[Order], report_date: date | None = None) -> SalesReport:
    """Snapshot the sales figure for a report, dated today unless a date is given."""
    snapshot = list(orders)
    return SalesReport(
        report_date=report_date if report_date is not None else date.today(),
        total_sales=total_sales(snapshot),
        order_count=len(snapshot),
    )
