"""Todos – HTTP routes translating requests into mediator dispatches."""
from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import BaseModel

from cqrs_mediator.adapters.fastapi import get_mediator, request_cancellation
from cqrs_mediator.application.cqrs import Mediator
from cqrs_mediator.kernel.cancellation import CancellationToken
from cqrs_mediator.todos.messages import (
    CreateTodo,
    DeleteTodo,
    GetAllTodos,
    GetTodoById,
    ToggleTodoCompletion,
    UpdateTodo,
)

MediatorDep = Annotated[Mediator, Depends(get_mediator)]
CancellationDep = Annotated[CancellationToken, Depends(request_cancellation)]


class CreateTodoRequest(BaseModel):
    title: str
    description: str | None = None


class UpdateTodoRequest(BaseModel):
    title: str
    description: str | None = None
    is_completed: bool = False


router = APIRouter(prefix="/todos", tags=["todos"])


@router.get("")
async def list_todos(mediator: MediatorDep, cancellation: CancellationDep) -> list[dict[str, Any]]:
    todos = await mediator.send_query(GetAllTodos(), cancellation)
    return [todo.to_dict() for todo in todos]


@router.get("/{todo_id}")
async def get_todo(todo_id: int, mediator: MediatorDep, cancellation: CancellationDep) -> dict[str, Any]:
    todo = await mediator.send_query(GetTodoById(id=todo_id), cancellation)
    if todo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Todo '{todo_id}' not found")
    return todo.to_dict()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_todo(
    body: CreateTodoRequest,
    request: Request,
    response: Response,
    mediator: MediatorDep,
    cancellation: CancellationDep,
) -> dict[str, Any]:
    todo = await mediator.send_command(CreateTodo(title=body.title, description=body.description), cancellation)
    response.headers["Location"] = str(request.url_for("get_todo", todo_id=str(todo.id)))
    return todo.to_dict()


@router.put("/{todo_id}")
async def update_todo(
    todo_id: int,
    body: UpdateTodoRequest,
    mediator: MediatorDep,
    cancellation: CancellationDep,
) -> dict[str, Any]:
    # The route id always wins over anything in the body.
    command = UpdateTodo(
        id=todo_id,
        title=body.title,
        description=body.description,
        is_completed=body.is_completed,
    )
    todo = await mediator.send_command(command, cancellation)
    return todo.to_dict()


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(todo_id: int, mediator: MediatorDep, cancellation: CancellationDep) -> Response:
    deleted = await mediator.send_command(DeleteTodo(id=todo_id), cancellation)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Todo '{todo_id}' not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{todo_id}/toggle")
async def toggle_todo(todo_id: int, mediator: MediatorDep, cancellation: CancellationDep) -> dict[str, Any]:
    todo = await mediator.send_command(ToggleTodoCompletion(id=todo_id), cancellation)
    return todo.to_dict()


__all__ = ["CreateTodoRequest", "UpdateTodoRequest", "router"]
