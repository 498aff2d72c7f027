"""Entity base class: identity-based equality."""

from __future__ import annotations

from uuid import UUID


class Entity:
    """Base entity; equality is identity-based (by ``id``).

    ``id`` is a plain attribute so the persistence layer can map it as a
    column.
    """

    id: UUID

    def __init__(self, id: UUID) -> None:  # noqa: A002
        self.id = id
        super().__init__()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}(id={self.id!r})"


__all__ = ["Entity"]
