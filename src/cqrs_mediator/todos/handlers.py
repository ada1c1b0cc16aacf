"""Todos – command and query handlers backed by a :class:`TodoRepository`."""
from __future__ import annotations

from typing import TYPE_CHECKING

from cqrs_mediator.application.cqrs import CommandHandler, QueryHandler
from cqrs_mediator.kernel.errors import NotFoundError
from cqrs_mediator.todos.domain import TodoItem, TodoItemDto
from cqrs_mediator.todos.messages import (
    CreateTodo,
    DeleteTodo,
    GetAllTodos,
    GetTodoById,
    ToggleTodoCompletion,
    UpdateTodo,
)
from cqrs_mediator.todos.repository import TodoRepository

if TYPE_CHECKING:
    from cqrs_mediator.kernel.cancellation import CancellationToken


class CreateTodoHandler(CommandHandler[CreateTodo, TodoItemDto]):
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    async def handle(self, command: CreateTodo, cancellation: CancellationToken) -> TodoItemDto:
        item = TodoItem(title=command.title, description=command.description)
        created = await self._repository.create(item, cancellation)
        return created.to_dto()


class UpdateTodoHandler(CommandHandler[UpdateTodo, TodoItemDto]):
    """Apply the caller's title, description and completion flag as given."""

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    async def handle(self, command: UpdateTodo, cancellation: CancellationToken) -> TodoItemDto:
        existing = await self._repository.get(command.id, cancellation)
        if existing is None:
            raise NotFoundError("Todo", command.id)
        existing.update(command.title, command.description, command.is_completed)
        updated = await self._repository.update(existing, cancellation)
        return updated.to_dto()


class DeleteTodoHandler(CommandHandler[DeleteTodo, bool]):
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    async def handle(self, command: DeleteTodo, cancellation: CancellationToken) -> bool:
        return await self._repository.delete(command.id, cancellation)


class ToggleTodoCompletionHandler(CommandHandler[ToggleTodoCompletion, TodoItemDto]):
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    async def handle(self, command: ToggleTodoCompletion, cancellation: CancellationToken) -> TodoItemDto:
        toggled = await self._repository.toggle_completion(command.id, cancellation)
        return toggled.to_dto()


class GetTodoByIdHandler(QueryHandler[GetTodoById, TodoItemDto | None]):
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    async def handle(self, query: GetTodoById, cancellation: CancellationToken) -> TodoItemDto | None:
        item = await self._repository.get(query.id, cancellation)
        return item.to_dto() if item is not None else None


class GetAllTodosHandler(QueryHandler[GetAllTodos, list[TodoItemDto]]):
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    async def handle(self, query: GetAllTodos, cancellation: CancellationToken) -> list[TodoItemDto]:
        return [item.to_dto() for item in await self._repository.list(cancellation)]


__all__ = [
    "CreateTodoHandler",
    "DeleteTodoHandler",
    "GetAllTodosHandler",
    "GetTodoByIdHandler",
    "ToggleTodoCompletionHandler",
    "UpdateTodoHandler",
]
