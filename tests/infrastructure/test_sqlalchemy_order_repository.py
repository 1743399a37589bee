"""Integration tests for SqlAlchemyOrderRepository against in-memory SQLite."""

from decimal import Decimal

import pytest
from sqlalchemy import func, select

from ecom.domain.exceptions import EntityNotFoundError, PersistenceError
from ecom.domain.model.customer import Address, Customer
from ecom.domain.model.order import Order, OrderItem
from ecom.domain.model.product import Product
from ecom.domain.model.value_objects import Money, Quantity
from ecom.infrastructure.persistence.models import OrderItemModel, OrderModel
from ecom.infrastructure.persistence.sqlalchemy_customer_repository import (
    SqlAlchemyCustomerRepository,
)
from ecom.infrastructure.persistence.sqlalchemy_order_repository import (
    SqlAlchemyOrderRepository,
)
from ecom.infrastructure.persistence.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)


@pytest.fixture
def customer(session_factory) -> Customer:
    customer = Customer.create("123", "Customer 1")
    customer.change_address(Address("Street 1", 1, "Zipcode 1", "City 1"))
    SqlAlchemyCustomerRepository(session_factory).create(customer)
    return customer


@pytest.fixture
def products(session_factory) -> list[Product]:
    repo = SqlAlchemyProductRepository(session_factory)
    products = [
        Product("product1", "Product 1", Money.of("10")),
        Product("product2", "Product 2", Money.of("20")),
    ]
    for product in products:
        repo.create(product)
    return products


@pytest.fixture
def repo(session_factory) -> SqlAlchemyOrderRepository:
    return SqlAlchemyOrderRepository(session_factory)


def _item(item_id: str, product: Product, qty: int) -> OrderItem:
    return OrderItem(
        id=item_id,
        name=product.name,
        price=product.price,
        product_id=product.id,
        quantity=Quantity(qty),
    )


def _load_row(session_factory, order_id: str) -> dict:
    with session_factory() as session:
        return session.get(OrderModel, order_id).as_dict()


class TestCreate:

    def test_persists_order_and_item_rows(self, repo, session_factory, customer, products):
        item = _item("1", products[0], 2)
        order = Order.create("123", customer.id, [item])

        repo.create(order)

        assert _load_row(session_factory, "123") == {
            "id": "123",
            "customer_id": "123",
            "total": Decimal("20.00"),
            "items": [
                {
                    "id": "1",
                    "name": "Product 1",
                    "price": Decimal("10.00"),
                    "quantity": 2,
                    "order_id": "123",
                    "product_id": "product1",
                },
            ],
        }

    def test_duplicate_id_raises_persistence_error(self, repo, customer, products):
        repo.create(Order.create("o1", customer.id, [_item("i1", products[0], 1)]))

        with pytest.raises(PersistenceError, match="Could not create order 'o1'"):
            repo.create(Order.create("o1", customer.id, [_item("i2", products[0], 1)]))

    def test_unknown_customer_raises_persistence_error(self, repo, products):
        order = Order.create("o1", "ghost", [_item("i1", products[0], 1)])
        with pytest.raises(PersistenceError):
            repo.create(order)

    def test_failed_item_insert_leaves_no_order_row(self, repo, session_factory, customer, products):
        bogus = Product("nope", "Missing", Money.of("1"))
        order = Order.create("o1", customer.id, [_item("i1", products[0], 1), _item("i2", bogus, 1)])

        with pytest.raises(PersistenceError):
            repo.create(order)

        with session_factory() as session:
            assert session.get(OrderModel, "o1") is None
            assert session.scalar(select(func.count()).select_from(OrderItemModel)) == 0


class TestUpdate:

    def test_replaces_items(self, repo, session_factory, customer, products):
        item1 = _item("orderItem1", products[0], 2)
        order = Order.create("order1", customer.id, [item1])
        repo.create(order)

        item2 = _item("orderItem2", products[1], 1)
        order.change_items([item1, item2])
        repo.update(order)

        row = _load_row(session_factory, "order1")
        assert row["total"] == Decimal("40.00")
        assert [i["id"] for i in row["items"]] == ["orderItem1", "orderItem2"]
        assert all(i["order_id"] == "order1" for i in row["items"])

    def test_leaves_no_residual_rows(self, repo, session_factory, customer, products):
        order = Order.create("o1", customer.id, [_item("a", products[0], 1), _item("b", products[1], 1)])
        repo.create(order)

        new_items = [_item("c", products[1], 3)]
        order.change_items(new_items)
        repo.update(order)

        assert repo.find("o1").items == new_items
        with session_factory() as session:
            ids = session.scalars(select(OrderItemModel.id)).all()
        assert ids == ["c"]

    def test_unknown_order_raises_not_found(self, repo, customer, products):
        order = Order.create("missing", customer.id, [_item("i1", products[0], 1)])
        with pytest.raises(EntityNotFoundError, match="Order not found"):
            repo.update(order)

    def test_failed_update_keeps_previous_items(self, repo, customer, products):
        original = [_item("i1", products[0], 1)]
        order = Order.create("o1", customer.id, original)
        repo.create(order)

        bogus = Product("nope", "Missing", Money.of("1"))
        order.change_items([_item("i2", bogus, 1)])
        with pytest.raises(PersistenceError):
            repo.update(order)

        assert repo.find("o1").items == original


class TestFind:

    def test_round_trip(self, repo, customer, products):
        order = Order.create("orderId", customer.id, [_item("orderItemId", products[0], 2)])
        repo.create(order)

        assert repo.find("orderId") == order

    def test_preserves_item_order(self, repo, customer, products):
        items = [
            _item("z", products[0], 1),
            _item("a", products[1], 2),
            _item("m", products[0], 3),
        ]
        order = Order.create("o1", customer.id, items)
        repo.create(order)

        assert [item.id for item in repo.find("o1").items] == ["z", "a", "m"]

    def test_round_trip_keeps_cent_prices(self, repo, session_factory, customer):
        product = Product("cheap", "Cheap", Money.of("0.12"))
        SqlAlchemyProductRepository(session_factory).create(product)
        order = Order.create("o1", customer.id, [_item("i1", product, 3)])
        repo.create(order)

        loaded = repo.find("o1")
        assert loaded == order
        assert loaded.total() == Money.of("0.36")
        assert _load_row(session_factory, "o1")["total"] == Decimal("0.36")

    def test_recomputes_total(self, repo, customer, products):
        order = Order.create("o1", customer.id, [_item("i1", products[0], 2), _item("i2", products[1], 3)])
        repo.create(order)

        assert repo.find("o1").total() == Money.of("80")

    def test_not_found(self, repo):
        with pytest.raises(EntityNotFoundError, match="Order not found"):
            repo.find("notFound")


class TestFindAll:

    def test_returns_every_order_once(self, repo, customer, products):
        order1 = Order.create("order1", customer.id, [_item("orderItem1", products[0], 2)])
        repo.create(order1)

        orders = repo.find_all()
        assert len(orders) == 1
        assert order1 in orders

        order2 = Order.create("order2", customer.id, [_item("orderItem2", products[0], 1)])
        repo.create(order2)

        orders = repo.find_all()
        assert len(orders) == 2
        assert orders.count(order1) == 1
        assert orders.count(order2) == 1

    def test_same_customer_and_product_do_not_share_items(self, repo, customer, products):
        order1 = Order.create("o1", customer.id, [_item("i1", products[0], 1)])
        order2 = Order.create("o2", customer.id, [_item("i2", products[0], 5)])
        repo.create(order1)
        repo.create(order2)

        by_id = {order.id: order for order in repo.find_all()}
        assert by_id["o1"].items == order1.items
        assert by_id["o2"].items == order2.items

    def test_empty(self, repo):
        assert repo.find_all() == []
