"""FastAPI adapter: ASGI middleware binding correlation id and acting principal."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from mp_orders.kernel.security import Principal, SecurityContext
from mp_orders.observability.correlation import CORRELATION_HEADER, CorrelationContext

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Receive, Scope, Send

USER_HEADER = "X-User-ID"


class RequestContextMiddleware:
    """Bind the request's correlation id and principal for its lifetime.

    The correlation id comes from ``X-Correlation-ID`` (or ``X-Request-ID``,
    or a fresh UUID) and is echoed on the response. ``X-User-ID``, when
    present, becomes the current :class:`Principal`; authentication happens
    upstream.
    """

    def __init__(self, app: "ASGIApp") -> None:
        self.app = app
        self._response_header = CORRELATION_HEADER.lower().encode()

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = {k.decode("latin-1"): v.decode("latin-1") for k, v in scope.get("headers", [])}
        ctx = CorrelationContext.from_headers(headers)
        user = headers.get(USER_HEADER.lower(), "").strip()

        ctx_token = CorrelationContext.set(ctx)
        principal_token = SecurityContext.set_current(Principal(subject=user)) if user else None
        structlog.contextvars.bind_contextvars(correlation_id=ctx.correlation_id)

        encoded_id = ctx.correlation_id.encode()
        response_header = self._response_header

        async def send_with_header(message: Any) -> None:
            if message["type"] == "http.response.start":
                headers_list: list[tuple[bytes, bytes]] = list(message.get("headers", []))
                headers_list.append((response_header, encoded_id))
                message = {**message, "headers": headers_list}
            await send(message)

        try:
            await self.app(scope, receive, send_with_header)
        finally:
            structlog.contextvars.unbind_contextvars("correlation_id")
            if principal_token is not None:
                SecurityContext.reset(principal_token)
            CorrelationContext.reset(ctx_token)


__all__ = ["RequestContextMiddleware", "USER_HEADER"]
