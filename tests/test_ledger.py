"""Unit tests for SalesLedger."""

import threading
from decimal import Decimal

from restaurant_pos.catalog import MenuCatalog
from restaurant_pos.ledger import SalesLedger


class TestCreateOrder:
    def test_ids_are_sequential_from_one(self, ledger: SalesLedger) -> None:
        orders = [ledger.create_order() for _ in range(5)]
        assert [order.id() for order in orders] == [1, 2, 3, 4, 5]
        assert [order.id() for order in ledger.all_orders()] == [1, 2, 3, 4, 5]

    def test_new_order_is_empty(self, ledger: SalesLedger) -> None:
        order = ledger.create_order()
        assert order.is_empty()
        assert order.total_price() == Decimal("0")

    def test_returned_handle_is_the_stored_order(self, ledger: SalesLedger, catalog: MenuCatalog) -> None:
        order = ledger.create_order()
        order.add_item(catalog.find_by_name("Soup"))
        stored = ledger.all_orders()[0]
        assert stored is order
        assert stored.total_price() == Decimal("5.99")

    def test_ledgers_are_independent(self) -> None:
        first = SalesLedger()
        second = SalesLedger()
        first.create_order()
        first.create_order()
        assert second.create_order().id() == 1
        assert first.create_order().id() == 3

    def test_concurrent_creation_never_reuses_ids(self, ledger: SalesLedger) -> None:
        def worker() -> None:
            for _ in range(200):
                ledger.create_order()

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        ids = [order.id() for order in ledger.all_orders()]
        assert len(ids) == 1600
        assert ids == list(range(1, 1601))


class TestAllOrders:
    def test_empty_ledger(self, ledger: SalesLedger) -> None:
        assert ledger.all_orders() == ()
        assert len(ledger) == 0

    def test_view_is_a_snapshot(self, ledger: SalesLedger) -> None:
        ledger.create_order()
        snapshot = ledger.all_orders()
        ledger.create_order()
        assert len(snapshot) == 1
        assert len(ledger.all_orders()) == 2


class TestTotalSales:
    def test_scenario(self, ledger: SalesLedger, catalog: MenuCatalog) -> None:
        first = ledger.create_order()
        first.add_item(catalog.find_by_name("Soup"))
        first.add_item(catalog.find_by_name("Steak"))
        second = ledger.create_order()
        second.add_item(catalog.find_by_name("soup"))
        second.add_item(catalog.find_by_name("SOUP"))

        assert first.total_price() == Decimal("21.98")
        assert second.total_price() == Decimal("11.98")
        assert ledger.total_sales() == Decimal("33.96")
