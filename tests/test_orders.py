"""Tests for app.services.orders: placing orders, stock, ownership and status updates."""

from app.core.exceptions import OrderError, ResourceNotFoundError
from app.models import Order, Product
from app.schemas.order import ORDER_ACCEPTED_STATUS, OrderLine
from app.schemas.pagination import PageRequest
from app.services import orders
from tests.support import DatabaseTestCase, add_category, add_product


class TestPlaceOrder(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        category = add_category(self.db, "Stationery")
        self.pen = add_product(self.db, category, "Pen", price=10.0, discount=10.0, quantity=5)
        self.pad = add_product(self.db, category, "Notepad", price=4.0, quantity=2)

    def test_order_totals_special_prices_and_takes_stock(self) -> None:
        out = orders.place_order(
            self.db,
            "bob@shop.io",
            [OrderLine(product_id=self.pen.id, quantity=2), OrderLine(product_id=self.pad.id, quantity=1)],
            "card",
        )
        self.assertEqual(out.total_amount, 22.0)
        self.assertEqual(out.order_status, ORDER_ACCEPTED_STATUS)
        self.assertEqual(out.payment.payment_method, "card")
        self.assertEqual([i.ordered_product_price for i in out.items], [9.0, 4.0])
        self.assertEqual(self.db.get(Product, self.pen.id).quantity, 3)
        self.assertEqual(self.db.get(Product, self.pad.id).quantity, 1)

    def test_repeated_lines_are_merged(self) -> None:
        out = orders.place_order(
            self.db,
            "bob@shop.io",
            [OrderLine(product_id=self.pad.id, quantity=1), OrderLine(product_id=self.pad.id, quantity=1)],
            "cash",
        )
        self.assertEqual(len(out.items), 1)
        self.assertEqual(out.items[0].quantity, 2)

    def test_insufficient_stock_changes_nothing(self) -> None:
        with self.assertRaises(OrderError):
            orders.place_order(
                self.db,
                "bob@shop.io",
                [OrderLine(product_id=self.pen.id, quantity=1), OrderLine(product_id=self.pad.id, quantity=3)],
                "card",
            )
        self.assertEqual(self.db.get(Product, self.pen.id).quantity, 5)
        self.assertEqual(self.db.query(Order).count(), 0)

    def test_missing_product(self) -> None:
        with self.assertRaises(ResourceNotFoundError):
            orders.place_order(self.db, "bob@shop.io", [OrderLine(product_id=999, quantity=1)], "card")

    def test_empty_order_is_rejected(self) -> None:
        with self.assertRaises(OrderError):
            orders.place_order(self.db, "bob@shop.io", [], "card")


class TestOrderLookups(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        category = add_category(self.db, "Stationery")
        pen = add_product(self.db, category, "Pen", price=10.0, quantity=50)
        self.bob_order = orders.place_order(
            self.db, "bob@shop.io", [OrderLine(product_id=pen.id, quantity=1)], "card"
        )
        orders.place_order(self.db, "eve@shop.io", [OrderLine(product_id=pen.id, quantity=3)], "card")

    def test_owner_can_read_order(self) -> None:
        out = orders.get_order(self.db, "bob@shop.io", self.bob_order.order_id)
        self.assertEqual(out.order_id, self.bob_order.order_id)

    def test_other_user_cannot_read_order(self) -> None:
        with self.assertRaises(ResourceNotFoundError):
            orders.get_order(self.db, "eve@shop.io", self.bob_order.order_id)

    def test_orders_by_user(self) -> None:
        self.assertEqual(len(orders.get_orders_by_user(self.db, "bob@shop.io")), 1)
        with self.assertRaises(ResourceNotFoundError):
            orders.get_orders_by_user(self.db, "nobody@shop.io")

    def test_update_status(self) -> None:
        out = orders.update_order(self.db, "bob@shop.io", self.bob_order.order_id, " Shipped ")
        self.assertEqual(out.order_status, "Shipped")

    def test_paged_listing_sorted_by_total(self) -> None:
        page = PageRequest(page_number=0, page_size=10, sort_by="total_amount", sort_order="desc")
        result = orders.get_all_orders(self.db, page)
        self.assertEqual(result.total_elements, 2)
        self.assertEqual([o.email for o in result.content], ["eve@shop.io", "bob@shop.io"])
