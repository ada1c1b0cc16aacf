"""Application-layer errors raised by the dispatch machinery."""

from __future__ import annotations

from typing import Any

from cqrs_mediator.kernel.errors.base import BaseError
from cqrs_mediator.kernel.naming import type_name


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class HandlerNotFoundError(ApplicationError):
    """No handler is registered for a ``(message type, result type)`` pair.

    This is a configuration error: it is never retried and is surfaced to the
    caller unchanged.
    """

    default_code = "handler_not_found"

    def __init__(self, message_type: type, result_type: Any, **kwargs: Any) -> None:
        super().__init__(
            f"No handler registered for {type_name(message_type)} -> {type_name(result_type)}",
            detail={
                "message_type": type_name(message_type),
                "result_type": type_name(result_type),
            },
            **kwargs,
        )
        self.message_type = message_type
        self.result_type = result_type


class DuplicateHandlerError(ApplicationError):
    """A second handler was registered for an already-bound pair."""

    default_code = "duplicate_handler"

    def __init__(self, message_type: type, result_type: Any, **kwargs: Any) -> None:
        super().__init__(
            f"A handler is already registered for {type_name(message_type)} -> {type_name(result_type)}",
            detail={
                "message_type": type_name(message_type),
                "result_type": type_name(result_type),
            },
            **kwargs,
        )
        self.message_type = message_type
        self.result_type = result_type


class OperationCancelledError(ApplicationError):
    """The request-scoped cancellation token was observed as cancelled."""

    default_code = "cancelled"

    def __init__(self, message: str = "Operation was cancelled", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "ApplicationError",
    "DuplicateHandlerError",
    "HandlerNotFoundError",
    "OperationCancelledError",
]
