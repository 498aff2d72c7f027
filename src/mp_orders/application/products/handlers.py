"""Product command and query handlers."""
from __future__ import annotations

from uuid import UUID

from mp_orders.application.cqrs import CommandHandler, QueryHandler
from mp_orders.application.persistence import ProductRepository
from mp_orders.application.products.commands import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)
from mp_orders.application.products.queries import (
    GetProductQuery,
    GetProductsQuery,
    PagedResponse,
    ProductListItem,
    ProductResponse,
)
from mp_orders.domain.products import Product
from mp_orders.kernel.errors import DomainError
from mp_orders.kernel.types import Err, Error, Ok, Result


def product_not_found(product_id: UUID) -> Error:
    return Error.not_found("product.not_found", f"Product with ID {product_id} was not found.")


def duplicate_sku(sku: str) -> Error:
    return Error.conflict("product.duplicate_sku", f"A product with SKU '{sku}' already exists.")


class CreateProductHandler(CommandHandler[CreateProductCommand]):
    def __init__(self, products: ProductRepository) -> None:
        self._products = products

    async def handle(self, command: CreateProductCommand) -> Result[UUID]:
        if command.sku and await self._products.exists_by_sku(command.sku):
            return Err(duplicate_sku(command.sku))
        try:
            product = Product.create(
                command.name,
                command.description,
                command.price,
                command.currency.upper(),
                command.stock_quantity,
                command.sku,
                command.category,
            )
        except DomainError as exc:
            return Err(Error.validation("product.invalid_input", exc.message))
        await self._products.add(product)
        return Ok(product.id)


class UpdateProductHandler(CommandHandler[UpdateProductCommand]):
    def __init__(self, products: ProductRepository) -> None:
        self._products = products

    async def handle(self, command: UpdateProductCommand) -> Result[None]:
        product = await self._products.get_by_id(command.product_id)
        if product is None:
            return Err(product_not_found(command.product_id))
        if command.sku and command.sku != product.sku:
            other = await self._products.get_by_sku(command.sku)
            if other is not None and other.id != product.id:
                return Err(duplicate_sku(command.sku))
        try:
            product.update(
                command.name,
                command.description,
                command.price,
                command.currency.upper(),
                command.sku,
                command.category,
            )
        except DomainError as exc:
            return Err(Error.validation("product.invalid_input", exc.message))
        await self._products.update(product)
        return Ok(None)


class DeleteProductHandler(CommandHandler[DeleteProductCommand]):
    """Removes a product; the unit of work turns this into a soft delete."""

    def __init__(self, products: ProductRepository) -> None:
        self._products = products

    async def handle(self, command: DeleteProductCommand) -> Result[None]:
        product = await self._products.get_by_id(command.product_id)
        if product is None:
            return Err(product_not_found(command.product_id))
        await self._products.remove(product)
        return Ok(None)


class GetProductHandler(QueryHandler[GetProductQuery]):
    def __init__(self, products: ProductRepository) -> None:
        self._products = products

    async def handle(self, query: GetProductQuery) -> Result[ProductResponse]:
        product = await self._products.get_by_id(query.product_id)
        if product is None:
            return Err(product_not_found(query.product_id))
        return Ok(ProductResponse.from_product(product))


class GetProductsHandler(QueryHandler[GetProductsQuery]):
    """Active products, optionally filtered by category, paged in memory."""

    def __init__(self, products: ProductRepository) -> None:
        self._products = products

    async def handle(self, query: GetProductsQuery) -> Result[PagedResponse[ProductListItem]]:
        products = await self._products.list_active(query.category)
        start = (query.page - 1) * query.page_size
        page = products[start : start + query.page_size]
        return Ok(
            PagedResponse(
                items=[ProductListItem.from_product(p) for p in page],
                page=query.page,
                page_size=query.page_size,
                total_count=len(products),
            )
        )


__all__ = [
    "CreateProductHandler",
    "DeleteProductHandler",
    "GetProductHandler",
    "GetProductsHandler",
    "UpdateProductHandler",
]
