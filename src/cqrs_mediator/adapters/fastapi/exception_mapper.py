"""FastAPI adapter – translate mediator errors into JSON HTTP responses."""
from __future__ import annotations

from typing import Any, Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cqrs_mediator.kernel.errors import (
    BaseError,
    DomainError,
    HandlerNotFoundError,
    NotFoundError,
    OperationCancelledError,
    ValidationError,
)
from cqrs_mediator.observability.logging import get_logger

# Non-standard "client closed request" status, as used by nginx.
STATUS_CLIENT_CLOSED_REQUEST = 499

UNHANDLED_BODY = {"code": "internal_error", "message": "An error occurred"}


class FastAPIExceptionMapper:
    """Register error → HTTP status-code mappings on a FastAPI app.

    Body schema::

        {"code": "not_found", "message": "Todo '7' not found", "detail": {...}}

    Validation failures also carry ``errors`` grouped per field::

        {"code": "validation_error", ..., "errors": {"title": ["Title is required"]}}

    Mappings, most specific first
    -----------------------------
    ``ValidationError``         → 400
    ``NotFoundError``           → 404
    ``OperationCancelledError`` → 499
    ``HandlerNotFoundError``    → 500
    ``DomainError``             → 422
    ``Exception``               → 500, generic body; the exception is not echoed

    Every 5xx is logged as ``http.request_failed``.
    """

    def __init__(self, logger: Any | None = None) -> None:
        self._log = logger if logger is not None else get_logger(__name__)
        self._map: list[tuple[type[Exception], int]] = [
            (ValidationError, 400),
            (NotFoundError, 404),
            (OperationCancelledError, STATUS_CLIENT_CLOSED_REQUEST),
            (HandlerNotFoundError, 500),
            (DomainError, 422),
            (Exception, 500),
        ]

    @property
    def mappings(self) -> list[tuple[type[Exception], int]]:
        return list(self._map)

    def body_for(self, exc: Exception) -> dict[str, Any]:
        if not isinstance(exc, BaseError):
            return dict(UNHANDLED_BODY)
        body = exc.to_dict()
        if isinstance(exc, ValidationError):
            body["errors"] = exc.errors_by_field()
        return body

    def register(self, app: FastAPI) -> None:
        """Install one handler per mapping on *app*."""
        for exc_type, status in self._map:
            app.add_exception_handler(exc_type, self._handler(status))

    def _handler(self, status: int) -> Callable[[Request, Exception], JSONResponse]:
        def handle(request: Request, exc: Exception) -> JSONResponse:
            if status >= 500:
                fields = exc.log_fields() if isinstance(exc, BaseError) else {"error_type": type(exc).__name__}
                self._log.error(
                    "http.request_failed",
                    status=status,
                    method=request.method,
                    path=request.url.path,
                    exc_info=exc,
                    **fields,
                )
            return JSONResponse(status_code=status, content=self.body_for(exc))

        return handle


__all__ = ["FastAPIExceptionMapper", "STATUS_CLIENT_CLOSED_REQUEST", "UNHANDLED_BODY"]
