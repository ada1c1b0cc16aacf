"""Todos – startup wiring of handlers and behaviors."""
from __future__ import annotations

from cqrs_mediator.application.cqrs import HandlerRegistry, Mediator
from cqrs_mediator.application.pipeline import LoggingBehavior, ValidationBehavior
from cqrs_mediator.todos.handlers import (
    CreateTodoHandler,
    DeleteTodoHandler,
    GetAllTodosHandler,
    GetTodoByIdHandler,
    ToggleTodoCompletionHandler,
    UpdateTodoHandler,
)
from cqrs_mediator.todos.messages import (
    CreateTodo,
    DeleteTodo,
    GetAllTodos,
    GetTodoById,
    ToggleTodoCompletion,
    UpdateTodo,
)
from cqrs_mediator.todos.repository import InMemoryTodoRepository, TodoRepository
from cqrs_mediator.todos.validators import default_validators


def build_registry(repository: TodoRepository) -> HandlerRegistry:
    """Register every to-do handler, then logging (outermost) and validation.

    Handlers are created per dispatch; the repository is shared.
    """
    validation = ValidationBehavior(default_validators())
    return (
        HandlerRegistry()
        .add_handler(CreateTodo, lambda: CreateTodoHandler(repository))
        .add_handler(UpdateTodo, lambda: UpdateTodoHandler(repository))
        .add_handler(DeleteTodo, lambda: DeleteTodoHandler(repository))
        .add_handler(ToggleTodoCompletion, lambda: ToggleTodoCompletionHandler(repository))
        .add_handler(GetTodoById, lambda: GetTodoByIdHandler(repository))
        .add_handler(GetAllTodos, lambda: GetAllTodosHandler(repository))
        .add_behavior(LoggingBehavior)
        .add_behavior(validation)
    )


def build_mediator(repository: TodoRepository | None = None) -> Mediator:
    return Mediator(build_registry(repository if repository is not None else InMemoryTodoRepository()))


__all__ = ["build_mediator", "build_registry"]
