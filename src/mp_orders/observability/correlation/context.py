"""Observability: RequestContext, CorrelationContext."""
from __future__ import annotations

import dataclasses
from contextvars import ContextVar, Token
from typing import Mapping
from uuid import uuid4

CORRELATION_HEADER = "X-Correlation-ID"


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Ambient context for a single request or background cycle."""
    correlation_id: str
    user_id: str | None = None

    @classmethod
    def new(cls, user_id: str | None = None) -> "RequestContext":
        return cls(correlation_id=str(uuid4()), user_id=user_id)


_CTX_VAR: ContextVar[RequestContext | None] = ContextVar("_mp_orders_request_ctx", default=None)


class CorrelationContext:
    """Ambient correlation context stored in a ``ContextVar``."""

    @staticmethod
    def set(ctx: RequestContext) -> Token[RequestContext | None]:
        return _CTX_VAR.set(ctx)

    @staticmethod
    def reset(token: Token[RequestContext | None]) -> None:
        _CTX_VAR.reset(token)

    @staticmethod
    def get() -> RequestContext | None:
        return _CTX_VAR.get()

    @staticmethod
    def clear() -> None:
        _CTX_VAR.set(None)

    @staticmethod
    def from_headers(headers: Mapping[str, str]) -> RequestContext:
        """Build a context from HTTP headers.

        ``X-Correlation-ID`` wins, then ``X-Request-ID``, then a fresh UUID.
        Header names match case-insensitively.
        """
        norm = {k.lower(): v for k, v in headers.items()}
        correlation_id = (
            norm.get(CORRELATION_HEADER.lower())
            or norm.get("x-request-id")
            or str(uuid4())
        )
        return RequestContext(correlation_id=correlation_id)


__all__ = ["CORRELATION_HEADER", "CorrelationContext", "RequestContext"]
