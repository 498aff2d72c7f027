"""FastAPI adapter: request bodies."""
from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from mp_orders.application.orders import AddressInput, CreateOrderCommand, OrderItemInput
from mp_orders.application.products import CreateProductCommand, UpdateProductCommand
from mp_orders.kernel.types.money import DEFAULT_CURRENCY


class AddressBody(BaseModel):
    street: str
    city: str
    country: str
    state: str = ""
    postal_code: str = ""


class OrderItemBody(BaseModel):
    product_id: UUID
    product_name: str
    quantity: int
    unit_price: Decimal
    currency: str = DEFAULT_CURRENCY


class CreateOrderBody(BaseModel):
    customer_id: str
    shipping_address: AddressBody
    items: list[OrderItemBody] = Field(default_factory=list)

    def to_command(self) -> CreateOrderCommand:
        return CreateOrderCommand(
            customer_id=self.customer_id,
            shipping_address=AddressInput(**self.shipping_address.model_dump()),
            items=tuple(OrderItemInput(**item.model_dump()) for item in self.items),
        )


class CancelOrderBody(BaseModel):
    reason: str


class ProductBody(BaseModel):
    name: str
    price: Decimal
    description: str | None = None
    currency: str = DEFAULT_CURRENCY
    sku: str | None = None
    category: str | None = None


class CreateProductBody(ProductBody):
    stock_quantity: int = 0

    def to_command(self) -> CreateProductCommand:
        return CreateProductCommand(**self.model_dump())


class UpdateProductBody(ProductBody):
    def to_command(self, product_id: UUID) -> UpdateProductCommand:
        return UpdateProductCommand(product_id=product_id, **self.model_dump())


class CreatedResponse(BaseModel):
    id: UUID


__all__ = [
    "AddressBody",
    "CancelOrderBody",
    "CreateOrderBody",
    "CreateProductBody",
    "CreatedResponse",
    "OrderItemBody",
    "UpdateProductBody",
]
