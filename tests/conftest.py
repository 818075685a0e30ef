"""Shared fixtures for restaurant-pos tests."""

from __future__ import annotations

import pytest

from restaurant_pos.catalog import MenuCatalog
from restaurant_pos.ledger import SalesLedger
from restaurant_pos.models import MenuCategory


@pytest.fixture
def catalog() -> MenuCatalog:
    """Catalog with the two dishes used across scenarios."""
    menu = MenuCatalog()
    menu.add_item("Soup", "5.99", MenuCategory.STARTER)
    menu.add_item("Steak", "15.99", MenuCategory.MAIN_COURSE)
    return menu


@pytest.fixture
def ledger() -> SalesLedger:
    return SalesLedger()
