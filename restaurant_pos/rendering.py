"""Rendering helpers for menu, order and report text."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from rich.text import Text

from restaurant_pos.config import CURRENCY_SYMBOL, REPORT_DATE_FORMAT
from restaurant_pos.constant import CATEGORY_BADGE_STYLES
from restaurant_pos.models import MenuCategory, MenuItem, Order
from restaurant_pos.report import SalesReport


def format_price(amount: Decimal) -> str:
    """Render an amount with the configured currency symbol and two decimals."""
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def badge_style(category: MenuCategory) -> str:
    """Return a consistent badge style for category tags."""
    return CATEGORY_BADGE_STYLES.get(category.value, "bold")


def format_menu_item(item: MenuItem) -> Text:
    """Render `<name> - <price> - <CATEGORY>` with a colored category badge."""
    text = Text()
    text.append(f"{item.name} - {format_price(item.price)} - ")
    text.append(item.category.value, style=badge_style(item.category))
    return text


def format_menu(items: Iterable[MenuItem]) -> Text:
    lines = Text()
    lines.append("--- Menu ---", style="bold")
    for item in items:
        lines.append("\n")
        lines.append_text(format_menu_item(item))
    return lines


def format_order(order: Order) -> Text:
    """Render an order block: id, one line per item, and the total."""
    text = Text()
    text.append(f"Order ID: {order.id()}", style="bold")
    for item in order.items():
        text.append(f"\n{item.name} - {format_price(item.price)}")
    text.append(f"\nTotal: {format_price(order.total_price())}")
    return text


def format_orders(orders: Iterable[Order]) -> Text:
    blocks = [format_order(order) for order in orders]
    if not blocks:
        return Text("No orders placed yet.")
    return Text("\n\n").join(blocks)


def format_sales_report(report: SalesReport) -> str:
    return f"Total Sales for {report.report_date.strftime(REPORT_DATE_FORMAT)}: {format_price(report.total_sales)}"
