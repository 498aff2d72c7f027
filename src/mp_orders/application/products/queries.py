"""Product queries and their read models."""
from __future__ import annotations

import dataclasses
import math
from datetime import datetime
from decimal import Decimal
from typing import Generic, TypeVar
from uuid import UUID

from mp_orders.application.cqrs import Query, Rules
from mp_orders.domain.products import Product

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class GetProductQuery(Query):
    product_id: UUID


@dataclasses.dataclass(frozen=True)
class GetProductsQuery(Query):
    category: str | None = None
    page: int = 1
    page_size: int = 10

    def validate(self) -> None:
        Rules().require(self.page >= 1, "page", "Page must be at least 1.").require(
            1 <= self.page_size <= 100, "page_size", "Page size must be between 1 and 100."
        ).check()


@dataclasses.dataclass(frozen=True)
class ProductResponse:
    id: UUID
    name: str
    description: str
    price: Decimal
    currency: str
    stock_quantity: int
    is_active: bool
    sku: str | None
    category: str | None
    created_on_utc: datetime | None
    modified_on_utc: datetime | None

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            currency=product.currency,
            stock_quantity=product.stock_quantity,
            is_active=product.is_active,
            sku=product.sku,
            category=product.category,
            created_on_utc=product.created_on_utc,
            modified_on_utc=product.modified_on_utc,
        )


@dataclasses.dataclass(frozen=True)
class ProductListItem:
    id: UUID
    name: str
    price: Decimal
    currency: str
    stock_quantity: int
    is_active: bool
    category: str | None

    @classmethod
    def from_product(cls, product: Product) -> "ProductListItem":
        return cls(
            product.id,
            product.name,
            product.price,
            product.currency,
            product.stock_quantity,
            product.is_active,
            product.category,
        )


@dataclasses.dataclass(frozen=True)
class PagedResponse(Generic[T]):
    items: list[T]
    page: int
    page_size: int
    total_count: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.page_size else 0


__all__ = [
    "GetProductQuery",
    "GetProductsQuery",
    "PagedResponse",
    "ProductListItem",
    "ProductResponse",
]
