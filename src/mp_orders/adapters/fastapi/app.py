"""FastAPI adapter: application factory.

Run with ``uvicorn --factory mp_orders.adapters.fastapi.app:create_app``.
"""
from __future__ import annotations

import contextlib
from typing import AsyncIterator

from fastapi import FastAPI

from mp_orders.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from mp_orders.adapters.fastapi.middleware import RequestContextMiddleware
from mp_orders.adapters.fastapi.routers import health_router, orders_router, products_router
from mp_orders.bootstrap import Container, bootstrap
from mp_orders.observability.logging import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(container: Container | None = None, *, configure_logs: bool = True) -> FastAPI:
    """Build the HTTP application around *container* (bootstrapped from the environment by default).

    The lifespan creates the schema when ``APP_CREATE_SCHEMA`` is on and runs
    the outbox processor as a background task when
    ``APP_RUN_OUTBOX_PROCESSOR`` is on.
    """
    container = container or bootstrap()
    settings = container.settings
    if configure_logs:
        configure_logging(settings.log_level, json=settings.log_json)

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.create_schema:
            await container.session_factory.create_schema()
        if settings.run_outbox_processor:
            container.outbox_processor.start()
        logger.info("app.started", outbox_processor=settings.run_outbox_processor)
        try:
            yield
        finally:
            await container.dispose()
            logger.info("app.stopped")

    app = FastAPI(title="mp-orders", version="1.0.0", lifespan=lifespan)
    app.state.container = container
    app.add_middleware(RequestContextMiddleware)
    FastAPIExceptionMapper().register(app)
    app.include_router(orders_router)
    app.include_router(products_router)
    app.include_router(health_router)
    return app


__all__ = ["create_app"]
