"""Application CQRS – Command, CommandHandler."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from cqrs_mediator.kernel.cancellation import CancellationToken

R = TypeVar("R")
C = TypeVar("C", bound="Command[Any]")


class Command(Generic[R]):
    """Marker base for commands (intent to change state, exactly one result ``R``).

    Concrete commands should be frozen dataclasses::

        @dataclasses.dataclass(frozen=True)
        class CreateTodo(Command[TodoItemDto]):
            title: str
            description: str | None = None
    """


class CommandHandler(abc.ABC, Generic[C, R]):
    """Handle a single command type and return its result."""

    @abc.abstractmethod
    async def handle(self, command: C, cancellation: CancellationToken) -> R: ...


__all__ = ["Command", "CommandHandler"]
