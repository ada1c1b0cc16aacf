"""FastAPI adapter – request-scoped dependencies for mediator dispatch."""
from __future__ import annotations

import asyncio
import contextlib
from typing import Any, AsyncIterator

from fastapi import Request

from cqrs_mediator.application.cqrs import Mediator
from cqrs_mediator.kernel.cancellation import CancellationToken, CancellationTokenSource

CLIENT_DISCONNECTED = "Client disconnected"


def get_mediator(request: Request) -> Mediator:
    """Return the :class:`Mediator` stored on ``app.state.mediator``."""
    mediator = getattr(request.app.state, "mediator", None)
    if mediator is None:
        raise RuntimeError("No mediator configured on app.state.mediator")
    return mediator


async def cancel_on_disconnect(request: Any, source: CancellationTokenSource) -> None:
    """Drain ASGI messages until ``http.disconnect``, then cancel *source*.

    Only run this once the route's body (if any) has been read; FastAPI reads
    declared body parameters before resolving dependencies.
    """
    while True:
        message = await request.receive()
        if message["type"] == "http.disconnect":
            source.cancel(CLIENT_DISCONNECTED)
            return


async def request_cancellation(request: Request) -> AsyncIterator[CancellationToken]:
    """Yield one cancellation token per HTTP request.

    The token is cancelled when the client disconnects before the route
    finishes.  The source is kept on ``request.state.cancellation``.
    """
    source = CancellationTokenSource()
    request.state.cancellation = source
    watcher = asyncio.create_task(cancel_on_disconnect(request, source))
    try:
        yield source.token
    finally:
        watcher.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await watcher


__all__ = ["CLIENT_DISCONNECTED", "cancel_on_disconnect", "get_mediator", "request_cancellation"]
