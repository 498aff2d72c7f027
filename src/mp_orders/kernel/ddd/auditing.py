"""Audit and soft-delete mixins for persisted entities.

Both mixins initialise their fields cooperatively so they can be combined
with :class:`~mp_orders.kernel.ddd.entity.Entity` in any order.
"""

from __future__ import annotations

from datetime import datetime


class Auditable:
    """Entity whose creation and last modification are stamped on save."""

    created_on_utc: datetime | None
    created_by: str | None
    modified_on_utc: datetime | None
    modified_by: str | None

    def __init__(self) -> None:
        self.created_on_utc = None
        self.created_by = None
        self.modified_on_utc = None
        self.modified_by = None
        super().__init__()

    def stamp_created(self, at: datetime, by: str) -> None:
        self.created_on_utc = at
        self.created_by = by

    def stamp_modified(self, at: datetime, by: str) -> None:
        self.modified_on_utc = at
        self.modified_by = by


class SoftDeletable:
    """Entity that is flagged as deleted instead of being removed."""

    is_deleted: bool
    deleted_on_utc: datetime | None
    deleted_by: str | None

    def __init__(self) -> None:
        self.is_deleted = False
        self.deleted_on_utc = None
        self.deleted_by = None
        super().__init__()

    def mark_deleted(self, at: datetime, by: str) -> None:
        self.is_deleted = True
        self.deleted_on_utc = at
        self.deleted_by = by


__all__ = ["Auditable", "SoftDeletable"]
