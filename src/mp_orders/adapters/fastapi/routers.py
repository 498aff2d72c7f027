"""FastAPI adapter: order, product and health routers.

Routes only translate HTTP to commands and queries. ``Err`` results are
raised as domain errors and rendered by :class:`FastAPIExceptionMapper`.
"""
from __future__ import annotations

import dataclasses
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Query, status

from mp_orders.adapters.fastapi.deps import MediatorDep
from mp_orders.adapters.fastapi.schemas import (
    CancelOrderBody,
    CreatedResponse,
    CreateOrderBody,
    CreateProductBody,
    UpdateProductBody,
)
from mp_orders.application.orders import (
    CancelOrderCommand,
    ConfirmOrderCommand,
    DeliverOrderCommand,
    GetOrderQuery,
    GetOrdersByCustomerQuery,
    OrderResponse,
    OrderSummary,
    ShipOrderCommand,
)
from mp_orders.application.products import (
    DeleteProductCommand,
    GetProductQuery,
    GetProductsQuery,
    ProductResponse,
)

API_PREFIX = "/api/v1"

orders_router = APIRouter(prefix=f"{API_PREFIX}/orders", tags=["orders"])
products_router = APIRouter(prefix=f"{API_PREFIX}/products", tags=["products"])
health_router = APIRouter(tags=["ops"])


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


@orders_router.post("", status_code=status.HTTP_201_CREATED)
async def create_order(body: CreateOrderBody, mediator: MediatorDep) -> CreatedResponse:
    result = await mediator.send(body.to_command())
    return CreatedResponse(id=result.unwrap())


@orders_router.get("/{order_id}")
async def get_order(order_id: UUID, mediator: MediatorDep) -> OrderResponse:
    result = await mediator.send(GetOrderQuery(order_id))
    return result.unwrap()


@orders_router.get("")
async def list_customer_orders(customer_id: str, mediator: MediatorDep) -> list[OrderSummary]:
    result = await mediator.send(GetOrdersByCustomerQuery(customer_id))
    return result.unwrap()


@orders_router.post("/{order_id}/confirm", status_code=status.HTTP_204_NO_CONTENT)
async def confirm_order(order_id: UUID, mediator: MediatorDep) -> None:
    (await mediator.send(ConfirmOrderCommand(order_id))).unwrap()


@orders_router.post("/{order_id}/ship", status_code=status.HTTP_204_NO_CONTENT)
async def ship_order(order_id: UUID, mediator: MediatorDep) -> None:
    (await mediator.send(ShipOrderCommand(order_id))).unwrap()


@orders_router.post("/{order_id}/deliver", status_code=status.HTTP_204_NO_CONTENT)
async def deliver_order(order_id: UUID, mediator: MediatorDep) -> None:
    (await mediator.send(DeliverOrderCommand(order_id))).unwrap()


@orders_router.post("/{order_id}/cancel", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_order(order_id: UUID, body: CancelOrderBody, mediator: MediatorDep) -> None:
    (await mediator.send(CancelOrderCommand(order_id, body.reason))).unwrap()


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------


@products_router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(body: CreateProductBody, mediator: MediatorDep) -> CreatedResponse:
    result = await mediator.send(body.to_command())
    return CreatedResponse(id=result.unwrap())


@products_router.get("")
async def list_products(
    mediator: MediatorDep,
    category: str | None = None,
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=10, ge=1, le=100),
) -> dict[str, Any]:
    paged = (await mediator.send(GetProductsQuery(category, page, page_size))).unwrap()
    return {
        "items": [dataclasses.asdict(item) for item in paged.items],
        "page": paged.page,
        "page_size": paged.page_size,
        "total_count": paged.total_count,
        "total_pages": paged.total_pages,
    }


@products_router.get("/{product_id}")
async def get_product(product_id: UUID, mediator: MediatorDep) -> ProductResponse:
    return (await mediator.send(GetProductQuery(product_id))).unwrap()


@products_router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_product(product_id: UUID, body: UpdateProductBody, mediator: MediatorDep) -> None:
    (await mediator.send(body.to_command(product_id))).unwrap()


@products_router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: UUID, mediator: MediatorDep) -> None:
    (await mediator.send(DeleteProductCommand(product_id))).unwrap()


# ---------------------------------------------------------------------------
# Ops
# ---------------------------------------------------------------------------


@health_router.get("/health/live")
async def liveness() -> dict[str, str]:
    """Liveness probe: 200 whenever the process is up."""
    return {"status": "ok"}


__all__ = ["API_PREFIX", "health_router", "orders_router", "products_router"]
