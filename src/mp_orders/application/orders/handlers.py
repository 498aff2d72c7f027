"""Order command and query handlers.

Handlers translate domain rule violations into ``Err`` results; the
transaction middleware then rolls back without persisting anything.
"""
from __future__ import annotations

from typing import Callable
from uuid import UUID

from mp_orders.application.cqrs import CommandHandler, QueryHandler
from mp_orders.application.orders.commands import (
    CancelOrderCommand,
    ConfirmOrderCommand,
    CreateOrderCommand,
    DeliverOrderCommand,
    ShipOrderCommand,
)
from mp_orders.application.orders.queries import (
    GetOrderQuery,
    GetOrdersByCustomerQuery,
    OrderResponse,
    OrderSummary,
)
from mp_orders.application.persistence import OrderRepository
from mp_orders.domain.orders import Address, Order
from mp_orders.kernel.errors import InvariantViolationError, ValidationError
from mp_orders.kernel.types import Err, Error, Money, Ok, Result


def order_not_found(order_id: UUID) -> Error:
    return Error.not_found("order.not_found", f"Order with ID {order_id} was not found.")


def rejected(exc: InvariantViolationError | ValidationError) -> Error:
    code = "order.invalid_input" if isinstance(exc, ValidationError) else "order.invalid_operation"
    return Error.validation(code, exc.message)


class CreateOrderHandler(CommandHandler[CreateOrderCommand]):
    def __init__(self, orders: OrderRepository) -> None:
        self._orders = orders

    async def handle(self, command: CreateOrderCommand) -> Result[UUID]:
        address = command.shipping_address
        try:
            order = Order.create(
                command.customer_id,
                Address.create(address.street, address.city, address.state, address.postal_code, address.country),  # type: ignore[union-attr]
            )
            for item in command.items:
                order.add_item(item.product_id, item.product_name, item.quantity, Money.of(item.unit_price, item.currency))
        except (InvariantViolationError, ValidationError) as exc:
            return Err(rejected(exc))
        await self._orders.add(order)
        return Ok(order.id)


class _TransitionHandler:
    """Load an order, apply one lifecycle transition, register the update."""

    def __init__(self, orders: OrderRepository) -> None:
        self._orders = orders

    async def _transition(self, order_id: UUID, apply: Callable[[Order], None]) -> Result[None]:
        order = await self._orders.get_by_id(order_id)
        if order is None:
            return Err(order_not_found(order_id))
        try:
            apply(order)
        except (InvariantViolationError, ValidationError) as exc:
            return Err(rejected(exc))
        await self._orders.update(order)
        return Ok(None)


class ConfirmOrderHandler(_TransitionHandler, CommandHandler[ConfirmOrderCommand]):
    async def handle(self, command: ConfirmOrderCommand) -> Result[None]:
        return await self._transition(command.order_id, Order.confirm)


class ShipOrderHandler(_TransitionHandler, CommandHandler[ShipOrderCommand]):
    async def handle(self, command: ShipOrderCommand) -> Result[None]:
        return await self._transition(command.order_id, Order.ship)


class DeliverOrderHandler(_TransitionHandler, CommandHandler[DeliverOrderCommand]):
    async def handle(self, command: DeliverOrderCommand) -> Result[None]:
        return await self._transition(command.order_id, Order.deliver)


class CancelOrderHandler(_TransitionHandler, CommandHandler[CancelOrderCommand]):
    async def handle(self, command: CancelOrderCommand) -> Result[None]:
        return await self._transition(command.order_id, lambda order: order.cancel(command.reason))


class GetOrderHandler(QueryHandler[GetOrderQuery]):
    def __init__(self, orders: OrderRepository) -> None:
        self._orders = orders

    async def handle(self, query: GetOrderQuery) -> Result[OrderResponse]:
        order = await self._orders.get_by_id(query.order_id)
        if order is None:
            return Err(order_not_found(query.order_id))
        return Ok(OrderResponse.from_order(order))


class GetOrdersByCustomerHandler(QueryHandler[GetOrdersByCustomerQuery]):
    def __init__(self, orders: OrderRepository) -> None:
        self._orders = orders

    async def handle(self, query: GetOrdersByCustomerQuery) -> Result[list[OrderSummary]]:
        orders = await self._orders.get_by_customer_id(query.customer_id)
        return Ok([OrderSummary.from_order(o) for o in orders])


__all__ = [
    "CancelOrderHandler",
    "ConfirmOrderHandler",
    "CreateOrderHandler",
    "DeliverOrderHandler",
    "GetOrderHandler",
    "GetOrdersByCustomerHandler",
    "ShipOrderHandler",
]
