"""SQLAlchemy adapter: audit trail snapshots of pending session changes."""

from __future__ import annotations

import dataclasses
import enum
import json
from datetime import datetime
from typing import Any, Iterable
from uuid import UUID, uuid4

from sqlalchemy import inspect
from sqlalchemy.orm import InstanceState, Session


class AuditAction(str, enum.Enum):
    ADDED = "Added"
    MODIFIED = "Modified"
    DELETED = "Deleted"


@dataclasses.dataclass(eq=False)
class AuditTrailEntry:
    """One ``audit_trails`` row: before/after column values as JSON text."""

    table_name: str
    key: str
    action: str
    performed_on_utc: datetime
    performed_by: str | None = None
    old_values: str | None = None
    new_values: str | None = None
    id: UUID = dataclasses.field(default_factory=uuid4)  # noqa: A003


def build_audit_entries(
    session: Session,
    *,
    actor: str,
    at: datetime,
    exclude: tuple[type, ...] = (),
) -> list[AuditTrailEntry]:
    """Snapshot every pending add, update and delete in *session*.

    Must run after soft deletes have been converted to updates and before
    the flush, while attribute history is still available. Instances of
    *exclude* (and audit rows themselves) are skipped.
    """
    skip = (AuditTrailEntry, *exclude)
    entries: list[AuditTrailEntry] = []

    for obj in _skipping(session.new, skip):
        state = inspect(obj)
        entries.append(
            _entry(state, AuditAction.ADDED, actor, at, new=_current_values(state))
        )

    orphans: list[Any] = []
    for obj in _skipping(session.dirty, skip):
        if not session.is_modified(obj):
            continue
        state = inspect(obj)
        orphans.extend(_removed_orphans(session, state, skip))
        old, new = _changed_values(state)
        if not new:
            continue
        # soft deletes arrive here as updates
        action = AuditAction.DELETED if new.get("is_deleted") is True else AuditAction.MODIFIED
        entries.append(_entry(state, action, actor, at, old=old, new=new))

    for obj in (*_skipping(session.deleted, skip), *orphans):
        state = inspect(obj)
        entries.append(
            _entry(state, AuditAction.DELETED, actor, at, old=_original_values(state))
        )

    return entries


def _skipping(objects: Iterable[Any], skip: tuple[type, ...]) -> Iterable[Any]:
    return (obj for obj in objects if not isinstance(obj, skip))


def _removed_orphans(session: Session, state: InstanceState[Any], skip: tuple[type, ...]) -> list[Any]:
    """Children dropped from a delete-orphan collection; the flush deletes them."""
    orphans: list[Any] = []
    for rel in state.mapper.relationships:
        if not rel.cascade.delete_orphan:
            continue
        for child in state.attrs[rel.key].history.deleted or ():
            if child is None or isinstance(child, skip) or child in session.deleted:
                continue
            if inspect(child).key is not None:
                orphans.append(child)
    return orphans


def _entry(
    state: InstanceState[Any],
    action: AuditAction,
    actor: str,
    at: datetime,
    *,
    old: dict[str, Any] | None = None,
    new: dict[str, Any] | None = None,
) -> AuditTrailEntry:
    mapper = state.mapper
    key = ",".join(
        str(state.dict.get(mapper.get_property_by_column(col).key))
        for col in mapper.primary_key
    )
    return AuditTrailEntry(
        table_name=mapper.local_table.name,
        key=key,
        action=action.value,
        performed_by=actor,
        performed_on_utc=at,
        old_values=_dump(old),
        new_values=_dump(new),
    )


def _column_keys(state: InstanceState[Any]) -> list[str]:
    return [prop.key for prop in state.mapper.column_attrs]


def _current_values(state: InstanceState[Any]) -> dict[str, Any]:
    return {key: state.dict.get(key) for key in _column_keys(state)}


def _original_values(state: InstanceState[Any]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for key in _column_keys(state):
        history = state.attrs[key].history
        if history.deleted:
            values[key] = history.deleted[0]
        elif history.unchanged:
            values[key] = history.unchanged[0]
        else:
            values[key] = state.dict.get(key)
    return values


def _changed_values(state: InstanceState[Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    old: dict[str, Any] = {}
    new: dict[str, Any] = {}
    for key in _column_keys(state):
        history = state.attrs[key].history
        if not history.has_changes():
            continue
        old[key] = history.deleted[0] if history.deleted else None
        new[key] = history.added[0] if history.added else None
    return old, new


def _dump(values: dict[str, Any] | None) -> str | None:
    if not values:
        return None
    return json.dumps(values, default=_json_default, sort_keys=True)


def _json_default(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


__all__ = ["AuditAction", "AuditTrailEntry", "build_audit_entries"]
