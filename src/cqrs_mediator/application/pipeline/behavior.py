"""Application pipeline – PipelineBehavior base."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from cqrs_mediator.kernel.cancellation import CancellationToken

M = TypeVar("M")
R = TypeVar("R")

Next = Callable[[], Awaitable[Any]]


class PipelineBehavior(abc.ABC, Generic[M, R]):
    """Single link in the behavior chain wrapped around a handler.

    ``next_`` runs the rest of the chain (the next behavior or the handler) and
    returns its result.  A behavior may:

    - call ``next_`` exactly once (the common case);
    - not call it at all, short-circuiting with its own result or an exception;
    - call it more than once, re-executing everything downstream.  Handlers with
      side effects then run more than once, so behaviors doing this must say so.

    The cancellation token must be observed at least on entry.
    """

    @abc.abstractmethod
    async def handle(self, message: M, next_: Next, cancellation: CancellationToken) -> R: ...


__all__ = ["Next", "PipelineBehavior"]
