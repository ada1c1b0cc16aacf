"""Todos – reference application built on the mediator.

The HTTP layer (``cqrs_mediator.todos.api`` / ``.app``) needs the ``fastapi``
extra and is not imported here.
"""
from cqrs_mediator.todos.bootstrap import build_mediator, build_registry
from cqrs_mediator.todos.domain import TodoItem, TodoItemDto
from cqrs_mediator.todos.messages import (
    CreateTodo,
    DeleteTodo,
    GetAllTodos,
    GetTodoById,
    ToggleTodoCompletion,
    UpdateTodo,
)
from cqrs_mediator.todos.repository import InMemoryTodoRepository, TodoRepository

__all__ = [
    "CreateTodo",
    "DeleteTodo",
    "GetAllTodos",
    "GetTodoById",
    "InMemoryTodoRepository",
    "TodoItem",
    "TodoItemDto",
    "TodoRepository",
    "ToggleTodoCompletion",
    "UpdateTodo",
    "build_mediator",
    "build_registry",
]
