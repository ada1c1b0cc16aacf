"""Todos – TodoItem entity and the TodoItemDto read model."""
from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from typing import Any


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclasses.dataclass
class TodoItem:
    """A to-do entry.  ``id`` is assigned by the store on creation."""

    title: str
    description: str | None = None
    id: int | None = None
    is_completed: bool = False
    created_at: datetime = dataclasses.field(default_factory=_utcnow)
    completed_at: datetime | None = None

    def set_completed(self, is_completed: bool) -> None:
        """Set the completion flag; ``completed_at`` follows it."""
        self.is_completed = is_completed
        self.completed_at = _utcnow() if is_completed else None

    def toggle_completion(self) -> None:
        self.set_completed(not self.is_completed)

    def update(self, title: str, description: str | None, is_completed: bool) -> None:
        self.title = title
        self.description = description
        if is_completed != self.is_completed:
            self.set_completed(is_completed)

    def to_dto(self) -> "TodoItemDto":
        return TodoItemDto(
            id=self.id,
            title=self.title,
            description=self.description,
            is_completed=self.is_completed,
            created_at=self.created_at,
            completed_at=self.completed_at,
        )


@dataclasses.dataclass(frozen=True)
class TodoItemDto:
    """Immutable snapshot of a :class:`TodoItem` returned by handlers."""

    id: int | None
    title: str
    description: str | None
    is_completed: bool
    created_at: datetime
    completed_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "is_completed": self.is_completed,
            "created_at": self.created_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }


__all__ = ["TodoItem", "TodoItemDto"]
