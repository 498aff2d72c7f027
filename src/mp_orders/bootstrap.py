"""Composition root: settings, persistence, event buses, mediator, outbox processor."""
from __future__ import annotations

import dataclasses
import functools
from typing import Any, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from mp_orders.adapters.sqlalchemy import (
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
    SqlAlchemySessionFactory,
    SqlAlchemyUnitOfWork,
    open_outbox_store,
)
from mp_orders.application.cqrs import Command, CommandHandler, InProcessEventBus, Query, QueryHandler
from mp_orders.application.orders import (
    CancelOrderCommand,
    CancelOrderHandler,
    ConfirmOrderCommand,
    ConfirmOrderHandler,
    CreateOrderCommand,
    CreateOrderHandler,
    DeliverOrderCommand,
    DeliverOrderHandler,
    GetOrderHandler,
    GetOrderQuery,
    GetOrdersByCustomerHandler,
    GetOrdersByCustomerQuery,
    ShipOrderCommand,
    ShipOrderHandler,
    subscribe_order_handlers,
)
from mp_orders.application.outbox import OutboxProcessor, OutboxSettings
from mp_orders.application.pipeline import (
    LoggingMiddleware,
    Pipeline,
    TransactionMiddleware,
    ValidationMiddleware,
)
from mp_orders.application.products import (
    CreateProductCommand,
    CreateProductHandler,
    DeleteProductCommand,
    DeleteProductHandler,
    GetProductHandler,
    GetProductQuery,
    GetProductsHandler,
    GetProductsQuery,
    UpdateProductCommand,
    UpdateProductHandler,
)
from mp_orders.config.settings import AppSettings, EnvSettingsLoader
from mp_orders.domain.orders import register_order_events
from mp_orders.kernel.errors import HandlerNotFoundError
from mp_orders.kernel.messaging import EventBus, EventRegistry
from mp_orders.kernel.time import Clock, SystemClock
from mp_orders.kernel.types import Result


@dataclasses.dataclass
class Scope:
    """Per-request collaborators sharing one session."""

    session: AsyncSession
    uow: SqlAlchemyUnitOfWork
    orders: SqlAlchemyOrderRepository
    products: SqlAlchemyProductRepository


HandlerFactory = Callable[[Scope], CommandHandler[Any] | QueryHandler[Any]]


class Mediator:
    """Sends a command or query through the pipeline to its handler.

    Every call opens a fresh :class:`Scope`. The pipeline order is
    logging, validation, transaction (commands only), handler.
    """

    def __init__(
        self,
        session_factory: Callable[[], AsyncSession],
        registry: EventRegistry,
        immediate_bus: EventBus,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._registry = registry
        self._immediate_bus = immediate_bus
        self._clock = clock or SystemClock()
        self._factories: dict[type, HandlerFactory] = {}

    def register(self, request_type: type[Command] | type[Query], factory: HandlerFactory) -> None:
        self._factories[request_type] = factory

    async def send(self, request: Command | Query) -> Result[Any]:
        factory = self._factories.get(type(request))
        if factory is None:
            raise HandlerNotFoundError(type(request))
        async with self._session_factory() as session:
            scope = self._open_scope(session)
            handler = factory(scope)
            pipeline = Pipeline(
                LoggingMiddleware(),
                ValidationMiddleware(),
                TransactionMiddleware(scope.uow),
            )
            return await pipeline.execute(request, handler.handle)

    def _open_scope(self, session: AsyncSession) -> Scope:
        uow = SqlAlchemyUnitOfWork(
            session,
            registry=self._registry,
            dispatcher=self._immediate_bus,
            clock=self._clock,
        )
        return Scope(
            session=session,
            uow=uow,
            orders=SqlAlchemyOrderRepository(session),
            products=SqlAlchemyProductRepository(session),
        )


def register_default_handlers(mediator: Mediator) -> Mediator:
    mediator.register(CreateOrderCommand, lambda s: CreateOrderHandler(s.orders))
    mediator.register(ConfirmOrderCommand, lambda s: ConfirmOrderHandler(s.orders))
    mediator.register(ShipOrderCommand, lambda s: ShipOrderHandler(s.orders))
    mediator.register(DeliverOrderCommand, lambda s: DeliverOrderHandler(s.orders))
    mediator.register(CancelOrderCommand, lambda s: CancelOrderHandler(s.orders))
    mediator.register(GetOrderQuery, lambda s: GetOrderHandler(s.orders))
    mediator.register(GetOrdersByCustomerQuery, lambda s: GetOrdersByCustomerHandler(s.orders))
    mediator.register(CreateProductCommand, lambda s: CreateProductHandler(s.products))
    mediator.register(UpdateProductCommand, lambda s: UpdateProductHandler(s.products))
    mediator.register(DeleteProductCommand, lambda s: DeleteProductHandler(s.products))
    mediator.register(GetProductQuery, lambda s: GetProductHandler(s.products))
    mediator.register(GetProductsQuery, lambda s: GetProductsHandler(s.products))
    return mediator


@dataclasses.dataclass
class Container:
    settings: AppSettings
    outbox_settings: OutboxSettings
    session_factory: SqlAlchemySessionFactory
    registry: EventRegistry
    immediate_bus: InProcessEventBus
    event_bus: EventBus
    mediator: Mediator
    outbox_processor: OutboxProcessor

    async def dispose(self) -> None:
        await self.outbox_processor.stop()
        await self.session_factory.dispose()


def bootstrap(
    settings: AppSettings | None = None,
    outbox_settings: OutboxSettings | None = None,
    *,
    event_bus: EventBus | None = None,
    clock: Clock | None = None,
) -> Container:
    """Wire the application. Settings default to the environment."""
    loader = EnvSettingsLoader()
    settings = settings or loader.load(AppSettings)
    outbox_settings = outbox_settings or loader.load(OutboxSettings)
    clock = clock or SystemClock()

    session_factory = SqlAlchemySessionFactory(settings.database_url)
    registry = register_order_events(EventRegistry())

    immediate_bus = InProcessEventBus()
    if event_bus is None:
        event_bus = InProcessEventBus()
    subscribe_order_handlers(
        immediate_bus,
        event_bus if isinstance(event_bus, InProcessEventBus) else None,
    )

    mediator = register_default_handlers(
        Mediator(session_factory, registry, immediate_bus, clock=clock)
    )
    processor = OutboxProcessor(
        functools.partial(open_outbox_store, session_factory),
        event_bus,
        registry,
        outbox_settings,
        clock=clock,
    )
    return Container(
        settings=settings,
        outbox_settings=outbox_settings,
        session_factory=session_factory,
        registry=registry,
        immediate_bus=immediate_bus,
        event_bus=event_bus,
        mediator=mediator,
        outbox_processor=processor,
    )


__all__ = ["Container", "Mediator", "Scope", "bootstrap", "register_default_handlers"]
