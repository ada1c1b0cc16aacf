"""Application CQRS – Query, QueryHandler."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from cqrs_mediator.kernel.cancellation import CancellationToken

R = TypeVar("R")
Q = TypeVar("Q", bound="Query[Any]")


class Query(Generic[R]):
    """Marker base for queries (read-only intent, exactly one result ``R``)."""


class QueryHandler(abc.ABC, Generic[Q, R]):
    """Handle a single query type and return a result."""

    @abc.abstractmethod
    async def handle(self, query: Q, cancellation: CancellationToken) -> R: ...


__all__ = ["Query", "QueryHandler"]
