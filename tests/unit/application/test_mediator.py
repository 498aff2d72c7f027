"""Unit tests for the command pipeline and the wired Mediator."""
from __future__ import annotations

import asyncio
import dataclasses
from decimal import Decimal
from typing import Any, Awaitable, Callable
from uuid import UUID, uuid4

import pytest
from sqlalchemy import func, select

from mp_orders.application.cqrs import Command, Query, Rules
from mp_orders.application.orders import (
    AddressInput,
    CancelOrderCommand,
    ConfirmOrderCommand,
    CreateOrderCommand,
    GetOrderQuery,
    GetOrdersByCustomerQuery,
    OrderItemInput,
    ShipOrderCommand,
)
from mp_orders.application.outbox import OutboxSettings
from mp_orders.application.pipeline import (
    LoggingMiddleware,
    Middleware,
    Pipeline,
    TransactionMiddleware,
    ValidationMiddleware,
)
from mp_orders.application.products import (
    CreateProductCommand,
    DeleteProductCommand,
    GetProductQuery,
    GetProductsQuery,
    UpdateProductCommand,
)
from mp_orders.bootstrap import Container, bootstrap
from mp_orders.config.settings import AppSettings
from mp_orders.domain.orders import (
    OrderConfirmedIntegrationEvent,
    OrderCreatedDomainEvent,
    OrderItemAddedDomainEvent,
    OrderShippedDomainEvent,
)
from mp_orders.kernel.ddd import UnitOfWork
from mp_orders.kernel.errors import HandlerNotFoundError
from mp_orders.kernel.messaging import OutboxMessage
from mp_orders.kernel.types import Err, Error, ErrorKind, Ok
from mp_orders.testing import FrozenClock, RecordingEventBus
from mp_orders.testing.database import MEMORY_URL


# ---------------------------------------------------------------------------
# Pipeline building blocks
# ---------------------------------------------------------------------------


class FakeUnitOfWork(UnitOfWork):
    def __init__(self) -> None:
        self.calls: list[str] = []
        self._active = False

    @property
    def has_active_transaction(self) -> bool:
        return self._active

    async def save_changes(self) -> int:
        self.calls.append("save")
        return 0

    async def begin_transaction(self) -> None:
        self.calls.append("begin")
        self._active = True

    async def commit_transaction(self) -> None:
        self.calls.append("commit")
        self._active = False

    async def rollback_transaction(self) -> None:
        self.calls.append("rollback")
        self._active = False


@dataclasses.dataclass(frozen=True)
class Ping(Command):
    name: str = "ping"

    def validate(self) -> None:
        Rules().require(bool(self.name), "name", "Name is required.").check()


@dataclasses.dataclass(frozen=True)
class Peek(Query):
    pass


class Recorder(Middleware):
    def __init__(self, label: str, log: list[str]) -> None:
        self._label = label
        self._log = log

    async def __call__(self, request: Any, next_: Callable[[Any], Awaitable[Any]]) -> Any:
        self._log.append(f"{self._label}:in")
        result = await next_(request)
        self._log.append(f"{self._label}:out")
        return result


class TestPipeline:
    def test_first_added_runs_outermost(self) -> None:
        log: list[str] = []

        async def handler(request: Any) -> str:
            log.append("handler")
            return "done"

        pipeline = Pipeline(Recorder("a", log)).add(Recorder("b", log))
        assert asyncio.run(pipeline.execute(Ping(), handler)) == "done"
        assert log == ["a:in", "b:in", "handler", "b:out", "a:out"]

    def test_validation_short_circuits(self) -> None:
        called = False

        async def handler(request: Any) -> Any:
            nonlocal called
            called = True
            return Ok(None)

        result = asyncio.run(Pipeline(LoggingMiddleware(), ValidationMiddleware()).execute(Ping(name=""), handler))
        assert result == Err(Error.validation("validation.failed", "Name is required."))
        assert called is False

    def test_transaction_commits_ok(self) -> None:
        uow = FakeUnitOfWork()

        async def handler(request: Any) -> Any:
            return Ok(1)

        assert asyncio.run(Pipeline(TransactionMiddleware(uow)).execute(Ping(), handler)) == Ok(1)
        assert uow.calls == ["begin", "commit"]

    def test_transaction_rolls_back_err(self) -> None:
        uow = FakeUnitOfWork()

        async def handler(request: Any) -> Any:
            return Err(Error.failure("nope", "no"))

        asyncio.run(Pipeline(TransactionMiddleware(uow)).execute(Ping(), handler))
        assert uow.calls == ["begin", "rollback"]

    def test_transaction_rolls_back_exception(self) -> None:
        uow = FakeUnitOfWork()

        async def handler(request: Any) -> Any:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            asyncio.run(Pipeline(LoggingMiddleware(), TransactionMiddleware(uow)).execute(Ping(), handler))
        assert uow.calls == ["begin", "rollback"]

    def test_queries_skip_transaction(self) -> None:
        uow = FakeUnitOfWork()

        async def handler(request: Any) -> Any:
            return Ok("read")

        assert asyncio.run(Pipeline(TransactionMiddleware(uow)).execute(Peek(), handler)) == Ok("read")
        assert uow.calls == []


# ---------------------------------------------------------------------------
# Mediator wired by bootstrap()
# ---------------------------------------------------------------------------


def make_container() -> tuple[Container, RecordingEventBus, RecordingEventBus]:
    integration = RecordingEventBus()
    container = bootstrap(
        AppSettings(database_url=MEMORY_URL, run_outbox_processor=False),
        OutboxSettings(),
        event_bus=integration,
        clock=FrozenClock(),
    )
    immediate = RecordingEventBus()
    for event_type in (OrderCreatedDomainEvent, OrderItemAddedDomainEvent, OrderShippedDomainEvent):
        container.immediate_bus.register(event_type, immediate.publish)
    return container, immediate, integration


def create_order_command(customer_id: str = "cust-1", items: int = 2) -> CreateOrderCommand:
    return CreateOrderCommand(
        customer_id=customer_id,
        shipping_address=AddressInput("1 Main St", "Springfield", "US", "IL", "62701"),
        items=tuple(
            OrderItemInput(uuid4(), f"Widget {i}", i + 1, Decimal("50.00")) for i in range(items)
        ),
    )


async def outbox_rows(container: Container) -> int:
    async with container.session_factory() as session:
        return await session.scalar(select(func.count()).select_from(OutboxMessage))


def with_container(test: Callable[[Container, RecordingEventBus, RecordingEventBus], Awaitable[None]]) -> None:
    async def run() -> None:
        container, immediate, integration = make_container()
        await container.session_factory.create_schema()
        try:
            await test(container, immediate, integration)
        finally:
            await container.dispose()

    asyncio.run(run())


class TestOrderUseCases:
    def test_create_then_confirm(self) -> None:
        async def scenario(container: Container, immediate: RecordingEventBus, integration: RecordingEventBus) -> None:
            created = await container.mediator.send(create_order_command())
            assert created.is_ok()
            order_id = created.unwrap()
            assert isinstance(order_id, UUID)
            assert [type(e) for e in immediate.published] == [
                OrderCreatedDomainEvent,
                OrderItemAddedDomainEvent,
                OrderItemAddedDomainEvent,
            ]
            assert await outbox_rows(container) == 0

            assert await container.mediator.send(ConfirmOrderCommand(order_id)) == Ok(None)
            assert await outbox_rows(container) == 1
            assert integration.published == []

            report = await container.outbox_processor.process_once()
            assert report.processed == 1
            (event,) = integration.of_type(OrderConfirmedIntegrationEvent)
            assert event.order_id == order_id
            assert event.total_amount == Decimal("150.00")

            view = (await container.mediator.send(GetOrderQuery(order_id))).unwrap()
            assert view.status == "Confirmed"
            assert view.total_amount == Decimal("150.00")
            assert len(view.items) == 2

        with_container(scenario)

    def test_confirm_twice_is_rejected(self) -> None:
        async def scenario(container: Container, immediate: RecordingEventBus, integration: RecordingEventBus) -> None:
            order_id = (await container.mediator.send(create_order_command())).unwrap()
            await container.mediator.send(ConfirmOrderCommand(order_id))
            immediate.clear()

            result = await container.mediator.send(ConfirmOrderCommand(order_id))

            assert result == Err(
                Error.validation("order.invalid_operation", "Cannot confirm order in Confirmed status.")
            )
            assert immediate.published == []
            assert await outbox_rows(container) == 1

        with_container(scenario)

    def test_rejected_command_persists_nothing(self) -> None:
        async def scenario(container: Container, immediate: RecordingEventBus, integration: RecordingEventBus) -> None:
            order_id = (await container.mediator.send(create_order_command())).unwrap()
            result = await container.mediator.send(ShipOrderCommand(order_id))
            assert isinstance(result, Err)
            assert result.error.message == "Cannot ship order in Pending status."
            view = (await container.mediator.send(GetOrderQuery(order_id))).unwrap()
            assert view.status == "Pending"

        with_container(scenario)

    def test_cancel_queues_integration_event(self) -> None:
        async def scenario(container: Container, immediate: RecordingEventBus, integration: RecordingEventBus) -> None:
            order_id = (await container.mediator.send(create_order_command())).unwrap()
            assert (await container.mediator.send(CancelOrderCommand(order_id, "changed mind"))).is_ok()
            assert await outbox_rows(container) == 1
            view = (await container.mediator.send(GetOrderQuery(order_id))).unwrap()
            assert view.status == "Cancelled"
            assert view.cancellation_reason == "changed mind"

        with_container(scenario)

    def test_unknown_order(self) -> None:
        async def scenario(container: Container, immediate: RecordingEventBus, integration: RecordingEventBus) -> None:
            missing = uuid4()
            result = await container.mediator.send(ConfirmOrderCommand(missing))
            assert isinstance(result, Err)
            assert result.error.kind is ErrorKind.NOT_FOUND
            assert result.error.message == f"Order with ID {missing} was not found."

        with_container(scenario)

    def test_invalid_command_never_reaches_handler(self) -> None:
        async def scenario(container: Container, immediate: RecordingEventBus, integration: RecordingEventBus) -> None:
            result = await container.mediator.send(create_order_command(items=0))
            assert isinstance(result, Err)
            assert result.error.kind is ErrorKind.VALIDATION
            assert "At least one item is required." in result.error.message
            assert immediate.published == []
            assert (await container.mediator.send(GetOrdersByCustomerQuery("cust-1"))).unwrap() == []

        with_container(scenario)

    def test_orders_by_customer(self) -> None:
        async def scenario(container: Container, immediate: RecordingEventBus, integration: RecordingEventBus) -> None:
            await container.mediator.send(create_order_command("cust-2", items=1))
            await container.mediator.send(create_order_command("cust-2", items=3))
            summaries = (await container.mediator.send(GetOrdersByCustomerQuery("cust-2"))).unwrap()
            assert sorted(s.item_count for s in summaries) == [1, 3]

        with_container(scenario)

    def test_unregistered_request_type(self) -> None:
        async def scenario(container: Container, immediate: RecordingEventBus, integration: RecordingEventBus) -> None:
            with pytest.raises(HandlerNotFoundError):
                await container.mediator.send(Ping())

        with_container(scenario)


class TestProductUseCases:
    def test_crud_flow(self) -> None:
        async def scenario(container: Container, immediate: RecordingEventBus, integration: RecordingEventBus) -> None:
            send = container.mediator.send
            product_id = (
                await send(CreateProductCommand("Widget", Decimal("9.99"), sku="W-1", category="tools", stock_quantity=5))
            ).unwrap()

            update = UpdateProductCommand(product_id, "Widget Pro", Decimal("12.50"), sku="W-1", category="tools")
            assert (await send(update)).is_ok()
            view = (await send(GetProductQuery(product_id))).unwrap()
            assert view.name == "Widget Pro"
            assert view.price == Decimal("12.50")
            assert view.stock_quantity == 5

            assert (await send(DeleteProductCommand(product_id))).is_ok()
            gone = await send(GetProductQuery(product_id))
            assert isinstance(gone, Err)
            assert gone.error.code == "product.not_found"

        with_container(scenario)

    def test_duplicate_sku_conflicts(self) -> None:
        async def scenario(container: Container, immediate: RecordingEventBus, integration: RecordingEventBus) -> None:
            send = container.mediator.send
            await send(CreateProductCommand("Widget", Decimal("1"), sku="DUP"))
            result = await send(CreateProductCommand("Gadget", Decimal("2"), sku="DUP"))
            assert isinstance(result, Err)
            assert result.error.kind is ErrorKind.CONFLICT
            assert result.error.code == "product.duplicate_sku"

        with_container(scenario)

    def test_sku_reusable_after_delete(self) -> None:
        async def scenario(container: Container, immediate: RecordingEventBus, integration: RecordingEventBus) -> None:
            send = container.mediator.send
            first = (await send(CreateProductCommand("Widget", Decimal("1"), sku="AGAIN"))).unwrap()
            await send(DeleteProductCommand(first))
            assert (await send(CreateProductCommand("Widget 2", Decimal("1"), sku="AGAIN"))).is_ok()

        with_container(scenario)

    def test_paging(self) -> None:
        async def scenario(container: Container, immediate: RecordingEventBus, integration: RecordingEventBus) -> None:
            send = container.mediator.send
            for i in range(5):
                await send(CreateProductCommand(f"Item {i}", Decimal("1"), category="bulk"))
            page = (await send(GetProductsQuery("bulk", page=2, page_size=2))).unwrap()
            assert page.total_count == 5
            assert page.total_pages == 3
            assert [p.name for p in page.items] == ["Item 2", "Item 3"]

            invalid = await send(GetProductsQuery(page=0))
            assert isinstance(invalid, Err)
            assert invalid.error.kind is ErrorKind.VALIDATION

        with_container(scenario)
