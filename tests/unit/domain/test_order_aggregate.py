"""Unit tests for the Order aggregate and Product entity."""
from __future__ import annotations

from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from mp_orders.domain.orders import (
    Address,
    Order,
    OrderCancelledIntegrationEvent,
    OrderConfirmedIntegrationEvent,
    OrderCreatedDomainEvent,
    OrderDeliveredIntegrationEvent,
    OrderItemAddedDomainEvent,
    OrderShippedDomainEvent,
    OrderStatus,
)
from mp_orders.domain.products import Product
from mp_orders.kernel.errors import InvariantViolationError, ValidationError
from mp_orders.kernel.types import Money
from mp_orders.testing import OrderBuilder, ProductBuilder, default_address


def event_types(order: Order) -> list[type]:
    return [type(e) for e in order.domain_events]


# ---------------------------------------------------------------------------
# Creation and lines
# ---------------------------------------------------------------------------


class TestOrderCreation:
    def test_create_starts_pending_with_created_event(self) -> None:
        order = Order.create("cust-1", default_address())
        assert order.status is OrderStatus.PENDING
        assert order.items == ()
        assert isinstance(order.id, UUID)
        assert event_types(order) == [OrderCreatedDomainEvent]
        assert order.domain_events[0].order_id == order.id

    def test_customer_id_is_trimmed(self) -> None:
        assert Order.create("  cust-9 ", default_address()).customer_id == "cust-9"

    def test_blank_customer_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Customer ID is required."):
            Order.create("   ", default_address())

    def test_empty_order_total_is_zero_usd(self) -> None:
        order = Order.create("cust-1", default_address())
        assert order.total_price == Money(Decimal("0"), "USD")

    def test_not_soft_deleted_on_creation(self) -> None:
        order = Order.create("cust-1", default_address())
        assert order.is_deleted is False
        assert order.created_on_utc is None


class TestOrderLines:
    def test_add_item_raises_item_added(self) -> None:
        order = Order.create("cust-1", default_address())
        product_id = uuid4()
        order.add_item(product_id, "Widget", 3, Money.of("10.00"))
        assert len(order.items) == 1
        added = order.domain_events[-1]
        assert isinstance(added, OrderItemAddedDomainEvent)
        assert added.product_id == product_id
        assert added.quantity == 3

    def test_same_product_merges_quantity(self) -> None:
        order = Order.create("cust-1", default_address())
        product_id = uuid4()
        order.add_item(product_id, "Widget", 2, Money.of("10.00"))
        order.add_item(product_id, "Widget", 3, Money.of("10.00"))
        assert len(order.items) == 1
        assert order.items[0].quantity == 5
        assert event_types(order).count(OrderItemAddedDomainEvent) == 2

    def test_total_sums_lines(self) -> None:
        order = OrderBuilder().with_(lines=()).with_line(uuid4(), 2, "50.00").with_line(uuid4(), 1, "25.50").build()
        assert order.total_price == Money.of("125.50")

    def test_zero_quantity_rejected(self) -> None:
        order = Order.create("cust-1", default_address())
        with pytest.raises(ValidationError, match="Quantity must be greater than zero."):
            order.add_item(uuid4(), "Widget", 0, Money.of("1"))

    def test_remove_item(self) -> None:
        order = OrderBuilder().build()
        order.remove_item(order.items[0].id)
        assert order.items == ()

    def test_remove_unknown_item(self) -> None:
        order = OrderBuilder().build()
        with pytest.raises(InvariantViolationError):
            order.remove_item(uuid4())

    def test_lines_frozen_after_confirm(self) -> None:
        order = OrderBuilder().with_(status=OrderStatus.CONFIRMED).build()
        with pytest.raises(InvariantViolationError, match="Cannot modify order in Confirmed status."):
            order.add_item(uuid4(), "Widget", 1, Money.of("1"))

    def test_update_shipping_address(self) -> None:
        order = OrderBuilder().build()
        address = Address.create("2 Side St", "Shelbyville", None, None, "US")
        order.update_shipping_address(address)
        assert order.shipping_address == address


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


class TestOrderLifecycle:
    def test_confirm_raises_integration_event_with_total(self) -> None:
        order = OrderBuilder().with_(clear_events=True).build()
        order.confirm()
        assert order.status is OrderStatus.CONFIRMED
        assert order.confirmed_at is not None
        (event,) = order.domain_events
        assert isinstance(event, OrderConfirmedIntegrationEvent)
        assert event.total_amount == Decimal("100.00")
        assert event.customer_id == "cust-1"

    def test_confirm_without_items(self) -> None:
        order = Order.create("cust-1", default_address())
        with pytest.raises(InvariantViolationError, match="Cannot confirm an order without items."):
            order.confirm()

    def test_confirm_twice(self) -> None:
        order = OrderBuilder().with_(status=OrderStatus.CONFIRMED, clear_events=True).build()
        with pytest.raises(InvariantViolationError, match="Cannot confirm order in Confirmed status."):
            order.confirm()
        assert order.domain_events == ()

    def test_full_happy_path(self) -> None:
        order = OrderBuilder().with_(status=OrderStatus.DELIVERED).build()
        assert order.status is OrderStatus.DELIVERED
        kinds = event_types(order)
        assert kinds[-3:] == [
            OrderConfirmedIntegrationEvent,
            OrderShippedDomainEvent,
            OrderDeliveredIntegrationEvent,
        ]
        assert order.shipped_at is not None
        assert order.delivered_at is not None

    def test_ship_requires_confirmation(self) -> None:
        order = OrderBuilder().build()
        with pytest.raises(InvariantViolationError, match="Cannot ship order in Pending status."):
            order.ship()

    def test_cancel_records_reason(self) -> None:
        order = OrderBuilder().with_(clear_events=True).build()
        order.cancel("  out of stock ")
        assert order.status is OrderStatus.CANCELLED
        assert order.cancellation_reason == "out of stock"
        (event,) = order.domain_events
        assert isinstance(event, OrderCancelledIntegrationEvent)
        assert event.reason == "out of stock"

    def test_cancel_requires_reason(self) -> None:
        order = OrderBuilder().build()
        with pytest.raises(ValidationError):
            order.cancel(" ")
        assert order.status is OrderStatus.PENDING

    def test_shipped_order_cannot_be_cancelled(self) -> None:
        order = OrderBuilder().with_(status=OrderStatus.SHIPPED).build()
        with pytest.raises(InvariantViolationError, match="Cannot cancel order in Shipped status."):
            order.cancel("too late")

    @pytest.mark.parametrize(
        ("source", "target", "allowed"),
        [
            (OrderStatus.PENDING, OrderStatus.CONFIRMED, True),
            (OrderStatus.PENDING, OrderStatus.SHIPPED, False),
            (OrderStatus.CONFIRMED, OrderStatus.CANCELLED, True),
            (OrderStatus.SHIPPED, OrderStatus.DELIVERED, True),
            (OrderStatus.DELIVERED, OrderStatus.CANCELLED, False),
            (OrderStatus.CANCELLED, OrderStatus.CONFIRMED, False),
        ],
    )
    def test_transition_table(self, source: OrderStatus, target: OrderStatus, allowed: bool) -> None:
        assert source.can_transition_to(target) is allowed

    def test_clear_domain_events(self) -> None:
        order = OrderBuilder().build()
        order.clear_domain_events()
        assert order.domain_events == ()


# ---------------------------------------------------------------------------
# Address
# ---------------------------------------------------------------------------


class TestAddress:
    def test_requires_street_city_country(self) -> None:
        with pytest.raises(ValidationError):
            Address.create("", "Springfield", None, None, "US")
        with pytest.raises(ValidationError):
            Address.create("1 Main St", "Springfield", None, None, "")

    def test_value_equality(self) -> None:
        assert default_address() == default_address()


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------


class TestProduct:
    def test_create_defaults(self) -> None:
        product = Product.create("Widget", None, Decimal("9.99"))
        assert product.is_active is True
        assert product.description == ""
        assert product.unit_price == Money.of("9.99", "USD")

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Price cannot be negative."):
            Product.create("Widget", None, Decimal("-1"))

    def test_name_length_limit(self) -> None:
        with pytest.raises(ValidationError):
            Product.create("x" * 201, None, Decimal("1"))

    def test_stock_movements(self) -> None:
        product = ProductBuilder().build()
        product.add_stock(5)
        product.remove_stock(12)
        assert product.stock_quantity == 3
        assert product.has_stock(3)
        assert not product.has_stock(4)

    def test_cannot_remove_more_than_available(self) -> None:
        product = ProductBuilder().with_(stock_quantity=1).build()
        with pytest.raises(InvariantViolationError, match="Not enough stock available."):
            product.remove_stock(2)

    def test_activation_toggle(self) -> None:
        product = ProductBuilder().build()
        product.deactivate()
        assert product.is_active is False
        product.activate()
        assert product.is_active is True
