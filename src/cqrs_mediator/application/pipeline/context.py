"""Application pipeline – DispatchContext for the message currently being dispatched."""
from __future__ import annotations

import contextlib
import dataclasses
from contextvars import ContextVar
from typing import Any, Iterator

from cqrs_mediator.kernel.naming import type_name


@dataclasses.dataclass(frozen=True)
class DispatchContext:
    """The resolved ``(message type, result type)`` pair of one dispatch."""

    message_type: type
    result_type: Any

    @property
    def result_type_name(self) -> str:
        return type_name(self.result_type)


_CTX_VAR: ContextVar[DispatchContext | None] = ContextVar("_cqrs_dispatch_ctx", default=None)


def current_dispatch() -> DispatchContext | None:
    """Return the innermost active dispatch, or ``None`` outside the mediator."""
    return _CTX_VAR.get()


@contextlib.contextmanager
def dispatch_scope(message_type: type, result_type: Any) -> Iterator[DispatchContext]:
    """Make a dispatch current for the duration of the block; nests."""
    ctx = DispatchContext(message_type, result_type)
    token = _CTX_VAR.set(ctx)
    try:
        yield ctx
    finally:
        _CTX_VAR.reset(token)


__all__ = ["DispatchContext", "current_dispatch", "dispatch_scope"]
