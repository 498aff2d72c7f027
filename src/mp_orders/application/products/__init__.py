"""Product use cases."""
from mp_orders.application.products.commands import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)
from mp_orders.application.products.handlers import (
    CreateProductHandler,
    DeleteProductHandler,
    GetProductHandler,
    GetProductsHandler,
    UpdateProductHandler,
)
from mp_orders.application.products.queries import (
    GetProductQuery,
    GetProductsQuery,
    PagedResponse,
    ProductListItem,
    ProductResponse,
)

__all__ = [
    "CreateProductCommand",
    "CreateProductHandler",
    "DeleteProductCommand",
    "DeleteProductHandler",
    "GetProductHandler",
    "GetProductQuery",
    "GetProductsHandler",
    "GetProductsQuery",
    "PagedResponse",
    "ProductListItem",
    "ProductResponse",
    "UpdateProductCommand",
    "UpdateProductHandler",
]
