"""Application CQRS – Mediator: resolves a handler and runs it through the behavior pipeline.

Usage::

    registry = (
        HandlerRegistry()
        .add_handler(CreateTodo, lambda: CreateTodoHandler(repository))
        .add_behavior(LoggingBehavior())
    )
    mediator = Mediator(registry)
    todo = await mediator.send_command(CreateTodo(title="Buy milk"), source.token)
"""
from __future__ import annotations

import inspect
from typing import Any, TypeVar

from cqrs_mediator.application.cqrs.commands import Command
from cqrs_mediator.application.cqrs.queries import Query
from cqrs_mediator.application.cqrs.registry import HandlerResolver, result_type_of
from cqrs_mediator.application.pipeline.context import dispatch_scope
from cqrs_mediator.application.pipeline.pipeline import Pipeline
from cqrs_mediator.kernel.cancellation import CancellationToken

R = TypeVar("R")


class Mediator:
    """Dispatch commands and queries to exactly one handler each.

    Every dispatch resolves the handler and its behaviors afresh from the
    resolver, folds the behaviors around the handler (first registered is
    outermost) and awaits the result.  The mediator holds no mutable state and
    never catches: :class:`~cqrs_mediator.kernel.errors.HandlerNotFoundError`,
    cancellation and handler/behavior exceptions all reach the caller unchanged.
    """

    def __init__(self, resolver: HandlerResolver) -> None:
        self._resolver = resolver

    async def send_command(
        self,
        command: Command[R],
        cancellation: CancellationToken | None = None,
        *,
        result_type: Any = None,
    ) -> R:
        """Dispatch *command*; *result_type* defaults to the command's declared ``R``."""
        if not isinstance(command, Command):
            raise TypeError(f"send_command expects a Command, got {type(command).__name__}")
        return await self._dispatch(command, cancellation, result_type)

    async def send_query(
        self,
        query: Query[R],
        cancellation: CancellationToken | None = None,
        *,
        result_type: Any = None,
    ) -> R:
        """Dispatch *query*; *result_type* defaults to the query's declared ``R``."""
        if not isinstance(query, Query):
            raise TypeError(f"send_query expects a Query, got {type(query).__name__}")
        return await self._dispatch(query, cancellation, result_type)

    async def _dispatch(self, message: Any, cancellation: CancellationToken | None, result_type: Any) -> Any:
        message_type = type(message)
        if result_type is None:
            result_type = result_type_of(message_type)
        token = cancellation if cancellation is not None else CancellationToken.none()

        handler = self._resolver.resolve_handler(message_type, result_type)
        behaviors = self._resolver.resolve_behaviors(message_type, result_type)

        async def invoke_handler() -> Any:
            result = handler.handle(message, token)
            if inspect.isawaitable(result):
                result = await result
            return result

        with dispatch_scope(message_type, result_type):
            if not behaviors:
                return await invoke_handler()
            return await Pipeline(behaviors).execute(message, invoke_handler, token)


__all__ = ["Mediator"]
