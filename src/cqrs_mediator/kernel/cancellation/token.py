"""Kernel – cooperative, request-scoped cancellation.

A :class:`CancellationTokenSource` is created once per external request; its
:attr:`~CancellationTokenSource.token` is passed explicitly through every
behavior and handler.  Participants observe it with
:meth:`CancellationToken.raise_if_cancelled`.
"""
from __future__ import annotations

from typing import Callable

from cqrs_mediator.kernel.errors import OperationCancelledError


class CancellationToken:
    """Read-only view of a cancellation flag, shared by reference."""

    __slots__ = ("_cancelled", "_reason", "_callbacks")

    def __init__(self) -> None:
        self._cancelled = False
        self._reason: str | None = None
        self._callbacks: list[Callable[[], None]] = []

    @classmethod
    def none(cls) -> "CancellationToken":
        """A token that is never cancelled."""
        return cls()

    @classmethod
    def cancelled(cls, reason: str | None = None) -> "CancellationToken":
        """A token that is already cancelled."""
        token = cls()
        token._cancel(reason)
        return token

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    @property
    def reason(self) -> str | None:
        return self._reason

    def raise_if_cancelled(self) -> None:
        """Raise :class:`OperationCancelledError` if cancellation was requested."""
        if self._cancelled:
            raise OperationCancelledError(self._reason or "Operation was cancelled")

    def register(self, callback: Callable[[], None]) -> None:
        """Run *callback* on cancellation (immediately if already cancelled)."""
        if self._cancelled:
            callback()
        else:
            self._callbacks.append(callback)

    def _cancel(self, reason: str | None) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        self._reason = reason
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()

    def __repr__(self) -> str:
        return f"CancellationToken(is_cancelled={self._cancelled})"


class CancellationTokenSource:
    """Owner side of a :class:`CancellationToken`.

    Usage::

        source = CancellationTokenSource()
        result = await mediator.send_query(GetAllTodos(), source.token)
        ...
        source.cancel("client disconnected")
    """

    def __init__(self) -> None:
        self._token = CancellationToken()

    @property
    def token(self) -> CancellationToken:
        return self._token

    @property
    def is_cancelled(self) -> bool:
        return self._token.is_cancelled

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation.  Idempotent; the first reason wins."""
        self._token._cancel(reason)  # noqa: SLF001


__all__ = ["CancellationToken", "CancellationTokenSource"]
