"""Background publisher for pending outbox messages."""
from __future__ import annotations

import asyncio
import dataclasses
from contextlib import AbstractAsyncContextManager
from typing import Callable

from mp_orders.application.outbox.settings import OutboxSettings
from mp_orders.kernel.errors import SerializationError, UnknownEventTypeError
from mp_orders.kernel.messaging import EventBus, EventRegistry, OutboxMessage, OutboxStore
from mp_orders.kernel.time import Clock, SystemClock
from mp_orders.observability.correlation import CorrelationContext, RequestContext
from mp_orders.observability.logging import get_logger

logger = get_logger(__name__)

StoreScope = Callable[[], AbstractAsyncContextManager[OutboxStore]]


@dataclasses.dataclass(frozen=True)
class OutboxBatchReport:
    """Outcome of one polling cycle."""

    fetched: int = 0
    processed: int = 0
    failed: int = 0
    exhausted: int = 0


class OutboxProcessor:
    """Polls the outbox and publishes due messages through the event bus.

    Each cycle opens a fresh store scope, takes up to ``batch_size`` pending
    rows below the retry ceiling (oldest first), handles them one by one and
    commits all row changes in a single write. Per-message failures are
    recorded on the row; failures of a whole cycle are logged and the loop
    carries on. Delivery is at-least-once.
    """

    def __init__(
        self,
        store_scope: StoreScope,
        bus: EventBus,
        registry: EventRegistry,
        settings: OutboxSettings | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._store_scope = store_scope
        self._bus = bus
        self._registry = registry
        self._settings = settings or OutboxSettings()
        self._clock = clock or SystemClock()
        self._stop: asyncio.Event | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def settings(self) -> OutboxSettings:
        return self._settings

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    # ------------------------------------------------------------------
    # Loop control
    # ------------------------------------------------------------------

    def start(self) -> asyncio.Task[None]:
        """Run :meth:`run` as a background task on the current loop."""
        if self.is_running:
            raise RuntimeError("Outbox processor is already running")
        self._stop = asyncio.Event()
        self._task = asyncio.create_task(self.run(self._stop), name="outbox-processor")
        return self._task

    async def stop(self) -> None:
        """Signal the loop to exit and wait for it."""
        if self._task is None or self._stop is None:
            return
        self._stop.set()
        try:
            await self._task
        finally:
            self._task = None
            self._stop = None

    async def run(self, stop: asyncio.Event | None = None) -> None:
        """Poll until *stop* is set or the task is cancelled."""
        stop = stop or asyncio.Event()
        interval = self._settings.polling_interval_seconds
        logger.info(
            "outbox.processor_started",
            polling_interval_seconds=interval,
            batch_size=self._settings.batch_size,
            max_retries=self._settings.max_retries,
        )
        try:
            while not stop.is_set():
                try:
                    await self.process_once()
                except asyncio.CancelledError:
                    raise
                except Exception:
                    logger.exception("outbox.cycle_failed")
                try:
                    await asyncio.wait_for(stop.wait(), timeout=interval)
                except TimeoutError:
                    pass
        finally:
            logger.info("outbox.processor_stopped")

    # ------------------------------------------------------------------
    # One cycle
    # ------------------------------------------------------------------

    async def process_once(self) -> OutboxBatchReport:
        token = CorrelationContext.set(RequestContext.new())
        try:
            return await self._process_batch()
        finally:
            CorrelationContext.reset(token)

    async def _process_batch(self) -> OutboxBatchReport:
        max_retries = self._settings.max_retries
        async with self._store_scope() as store:
            messages = await store.fetch_pending(
                batch_size=self._settings.batch_size, max_retries=max_retries
            )
            if not messages:
                return OutboxBatchReport()

            logger.debug("outbox.batch_fetched", count=len(messages))
            processed = failed = exhausted = 0
            for message in messages:
                if await self._process_message(message):
                    processed += 1
                    continue
                failed += 1
                if message.is_exhausted(max_retries):
                    exhausted += 1
                    logger.error(
                        "outbox.message_exhausted",
                        message_id=str(message.id),
                        message_type=message.type,
                        retry_count=message.retry_count,
                        error=message.error,
                    )
            await store.save()

        report = OutboxBatchReport(len(messages), processed, failed, exhausted)
        logger.info("outbox.batch_processed", **dataclasses.asdict(report))
        return report

    async def _process_message(self, message: OutboxMessage) -> bool:
        log = logger.bind(message_id=str(message.id), message_type=message.type)
        try:
            registration = self._registry.resolve(message.type)
        except UnknownEventTypeError as exc:
            log.warning("outbox.unknown_type")
            message.mark_failed(exc.message)
            return False

        try:
            event = registration.deserialize(message.content)
        except SerializationError as exc:
            log.warning("outbox.deserialize_failed", error=exc.message)
            message.mark_failed(exc.message)
            return False

        try:
            await self._bus.publish(event)
        except Exception as exc:
            log.error("outbox.message_failed", exc_info=True, retry_count=message.retry_count + 1)
            message.mark_failed(str(exc) or type(exc).__name__)
            return False

        message.mark_processed(self._clock.now())
        log.debug("outbox.message_processed")
        return True


__all__ = ["OutboxBatchReport", "OutboxProcessor", "StoreScope"]
