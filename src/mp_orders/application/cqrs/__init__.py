"""Application CQRS: commands, queries, events."""
from mp_orders.application.cqrs.commands import Command, CommandHandler
from mp_orders.application.cqrs.events import EventHandler, InProcessEventBus
from mp_orders.application.cqrs.queries import Query, QueryHandler
from mp_orders.application.cqrs.validation import Rules

__all__ = [
    "Command",
    "CommandHandler",
    "EventHandler",
    "InProcessEventBus",
    "Query",
    "QueryHandler",
    "Rules",
]
