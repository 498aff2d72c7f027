"""DDD building blocks: public re-export surface."""

from mp_orders.kernel.ddd.aggregate import AggregateRoot
from mp_orders.kernel.ddd.auditing import Auditable, SoftDeletable
from mp_orders.kernel.ddd.domain_event import DomainEvent, EventKind
from mp_orders.kernel.ddd.entity import Entity
from mp_orders.kernel.ddd.invariant import Invariant
from mp_orders.kernel.ddd.repository import Repository
from mp_orders.kernel.ddd.unit_of_work import UnitOfWork
from mp_orders.kernel.ddd.value_object import ValueObject

__all__ = [
    "AggregateRoot",
    "Auditable",
    "DomainEvent",
    "Entity",
    "EventKind",
    "Invariant",
    "Repository",
    "SoftDeletable",
    "UnitOfWork",
    "ValueObject",
]
