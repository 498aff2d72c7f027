"""Kernel types: Result, Money, identifiers."""
from mp_orders.kernel.types.ids import OrderId, OrderItemId, ProductId, new_id, parse_id
from mp_orders.kernel.types.money import DEFAULT_CURRENCY, Money
from mp_orders.kernel.types.result import Err, Error, ErrorKind, Ok, Result

__all__ = [
    "DEFAULT_CURRENCY",
    "Err",
    "Error",
    "ErrorKind",
    "Money",
    "Ok",
    "OrderId",
    "OrderItemId",
    "ProductId",
    "Result",
    "new_id",
    "parse_id",
]
