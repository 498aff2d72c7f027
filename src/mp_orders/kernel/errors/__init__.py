"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── InvariantViolationError
    │   ├── ValidationError
    │   ├── NotFoundError
    │   └── ConflictError
    ├── ApplicationError     (application.py)
    │   ├── HandlerNotFoundError
    │   └── ConfigError      (mp_orders.config.validation)
    └── InfrastructureError  (infrastructure.py)
        ├── SerializationError
        └── UnknownEventTypeError
"""

from mp_orders.kernel.errors.application import ApplicationError, HandlerNotFoundError
from mp_orders.kernel.errors.base import BaseError
from mp_orders.kernel.errors.domain import (
    ConflictError,
    DomainError,
    InvariantViolationError,
    NotFoundError,
    ValidationError,
)
from mp_orders.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
    UnknownEventTypeError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "HandlerNotFoundError",
    "InfrastructureError",
    "InvariantViolationError",
    "NotFoundError",
    "SerializationError",
    "UnknownEventTypeError",
    "ValidationError",
]
