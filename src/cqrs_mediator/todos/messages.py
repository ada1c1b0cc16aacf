"""Todos – commands and queries."""
from __future__ import annotations

import dataclasses

from cqrs_mediator.application.cqrs import Command, Query
from cqrs_mediator.todos.domain import TodoItemDto


@dataclasses.dataclass(frozen=True)
class CreateTodo(Command[TodoItemDto]):
    title: str
    description: str | None = None


@dataclasses.dataclass(frozen=True)
class UpdateTodo(Command[TodoItemDto]):
    """Replace title/description and set completion to exactly ``is_completed``."""

    id: int
    title: str
    description: str | None = None
    is_completed: bool = False


@dataclasses.dataclass(frozen=True)
class DeleteTodo(Command[bool]):
    id: int


@dataclasses.dataclass(frozen=True)
class ToggleTodoCompletion(Command[TodoItemDto]):
    """Invert the completion flag once."""

    id: int


@dataclasses.dataclass(frozen=True)
class GetTodoById(Query[TodoItemDto | None]):
    id: int


@dataclasses.dataclass(frozen=True)
class GetAllTodos(Query[list[TodoItemDto]]):
    pass


__all__ = [
    "CreateTodo",
    "DeleteTodo",
    "GetAllTodos",
    "GetTodoById",
    "ToggleTodoCompletion",
    "UpdateTodo",
]
