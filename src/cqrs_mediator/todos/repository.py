"""Todos – TodoRepository port and the in-memory, list-backed store."""
from __future__ import annotations

import abc
import asyncio
import dataclasses
from typing import TYPE_CHECKING

from cqrs_mediator.kernel.errors import NotFoundError
from cqrs_mediator.todos.domain import TodoItem

if TYPE_CHECKING:
    from cqrs_mediator.kernel.cancellation import CancellationToken


class TodoRepository(abc.ABC):
    """Port: persistence for :class:`TodoItem` entities."""

    @abc.abstractmethod
    async def create(self, item: TodoItem, cancellation: CancellationToken | None = None) -> TodoItem: ...

    @abc.abstractmethod
    async def get(self, item_id: int, cancellation: CancellationToken | None = None) -> TodoItem | None: ...

    @abc.abstractmethod
    async def list(self, cancellation: CancellationToken | None = None) -> list[TodoItem]: ...

    @abc.abstractmethod
    async def update(self, item: TodoItem, cancellation: CancellationToken | None = None) -> TodoItem: ...

    @abc.abstractmethod
    async def delete(self, item_id: int, cancellation: CancellationToken | None = None) -> bool: ...

    @abc.abstractmethod
    async def toggle_completion(self, item_id: int, cancellation: CancellationToken | None = None) -> TodoItem: ...


class InMemoryTodoRepository(TodoRepository):
    """Process-local store; ids start at 1 and increase strictly per instance.

    All reads and writes are serialised by an :class:`asyncio.Lock` and the token
    is checked once the lock is held.  Items go in and come out as copies, so
    a caller mutating a returned item changes nothing until it calls
    :meth:`update`.
    """

    def __init__(self) -> None:
        self._items: list[TodoItem] = []
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def create(self, item: TodoItem, cancellation: CancellationToken | None = None) -> TodoItem:
        async with self._lock:
            _check(cancellation)
            stored = dataclasses.replace(item, id=self._next_id)
            self._next_id += 1
            self._items.append(stored)
            return dataclasses.replace(stored)

    async def get(self, item_id: int, cancellation: CancellationToken | None = None) -> TodoItem | None:
        async with self._lock:
            _check(cancellation)
            existing = self._find(item_id)
            return dataclasses.replace(existing) if existing is not None else None

    async def list(self, cancellation: CancellationToken | None = None) -> list[TodoItem]:
        async with self._lock:
            _check(cancellation)
            return [dataclasses.replace(item) for item in self._items]

    async def update(self, item: TodoItem, cancellation: CancellationToken | None = None) -> TodoItem:
        async with self._lock:
            _check(cancellation)
            for index, existing in enumerate(self._items):
                if existing.id == item.id:
                    self._items[index] = dataclasses.replace(item)
                    return dataclasses.replace(item)
        raise NotFoundError("Todo", item.id)

    async def delete(self, item_id: int, cancellation: CancellationToken | None = None) -> bool:
        async with self._lock:
            _check(cancellation)
            existing = self._find(item_id)
            if existing is None:
                return False
            self._items.remove(existing)
            return True

    async def toggle_completion(self, item_id: int, cancellation: CancellationToken | None = None) -> TodoItem:
        async with self._lock:
            _check(cancellation)
            existing = self._find(item_id)
            if existing is None:
                raise NotFoundError("Todo", item_id)
            existing.toggle_completion()
            return dataclasses.replace(existing)

    def _find(self, item_id: int) -> TodoItem | None:
        return next((i for i in self._items if i.id == item_id), None)


def _check(cancellation: CancellationToken | None) -> None:
    if cancellation is not None:
        cancellation.raise_if_cancelled()


__all__ = ["InMemoryTodoRepository", "TodoRepository"]
