"""Editable static menu configuration."""

from __future__ import annotations

# (name, price, category) in display order. Prices stay strings so they load as exact decimals.
DEFAULT_MENU_ENTRIES: list[tuple[str, str, str]] = [
    ("Soup", "5.99", "STARTER"),
    ("Steak", "15.99", "MAIN_COURSE"),
    ("Cake", "4.99", "DESSERT"),
    ("Coffee", "2.99", "BEVERAGE"),
]

CATEGORY_LABELS: dict[str, str] = {
    "STARTER": "Starter",
    "MAIN_COURSE": "Main Course",
    "DESSERT": "Dessert",
    "BEVERAGE": "Beverage",
}

CATEGORY_BADGE_STYLES: dict[str, str] = {
    "STARTER": "bold #0b1f0f on #5fbf72",
    "MAIN_COURSE": "bold #ffffff on #b23a48",
    "DESSERT": "bold #ffffff on #8e44ad",
    "BEVERAGE": "bold #ffffff on #2f6db5",
}

DONE_KEYWORD = "done"
