"""Order use cases."""
from mp_orders.application.orders.commands import (
    AddressInput,
    CancelOrderCommand,
    ConfirmOrderCommand,
    CreateOrderCommand,
    DeliverOrderCommand,
    OrderItemInput,
    ShipOrderCommand,
)
from mp_orders.application.orders.event_handlers import OrderActivityLogger, subscribe_order_handlers
from mp_orders.application.orders.handlers import (
    CancelOrderHandler,
    ConfirmOrderHandler,
    CreateOrderHandler,
    DeliverOrderHandler,
    GetOrderHandler,
    GetOrdersByCustomerHandler,
    ShipOrderHandler,
)
from mp_orders.application.orders.queries import (
    GetOrderQuery,
    GetOrdersByCustomerQuery,
    OrderItemResponse,
    OrderResponse,
    OrderSummary,
)

__all__ = [
    "AddressInput",
    "CancelOrderCommand",
    "CancelOrderHandler",
    "ConfirmOrderCommand",
    "ConfirmOrderHandler",
    "CreateOrderCommand",
    "CreateOrderHandler",
    "DeliverOrderCommand",
    "DeliverOrderHandler",
    "GetOrderHandler",
    "GetOrderQuery",
    "GetOrdersByCustomerHandler",
    "GetOrdersByCustomerQuery",
    "OrderActivityLogger",
    "OrderItemInput",
    "OrderItemResponse",
    "OrderResponse",
    "OrderSummary",
    "ShipOrderCommand",
    "subscribe_order_handlers",
]
