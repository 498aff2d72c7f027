"""FastAPI adapter: dependencies."""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from mp_orders.bootstrap import Mediator


def get_mediator(request: Request) -> Mediator:
    return request.app.state.container.mediator


MediatorDep = Annotated[Mediator, Depends(get_mediator)]

__all__ = ["MediatorDep", "get_mediator"]
