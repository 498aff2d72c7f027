"""FastAPI adapter: application factory, routers, error mapping, request context."""
from mp_orders.adapters.fastapi.app import create_app
from mp_orders.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from mp_orders.adapters.fastapi.middleware import RequestContextMiddleware
from mp_orders.adapters.fastapi.routers import health_router, orders_router, products_router

__all__ = [
    "FastAPIExceptionMapper",
    "RequestContextMiddleware",
    "create_app",
    "health_router",
    "orders_router",
    "products_router",
]
