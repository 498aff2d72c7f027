"""Application pipeline: Pipeline class."""
from __future__ import annotations

import functools
from typing import Any

from mp_orders.application.pipeline.middleware import Handler, Middleware


class Pipeline:
    """Ordered chain of middleware around a handler; the first added runs outermost."""

    def __init__(self, *middlewares: Middleware) -> None:
        self._middlewares: list[Middleware] = list(middlewares)

    def add(self, middleware: Middleware) -> "Pipeline":
        """Append a middleware (fluent API)."""
        self._middlewares.append(middleware)
        return self

    async def execute(self, request: Any, handler: Handler) -> Any:
        """Execute the full chain, ending with *handler*."""
        chain = handler
        for mw in reversed(self._middlewares):
            chain = functools.partial(mw, next_=chain)
        return await chain(request)


__all__ = ["Pipeline"]
