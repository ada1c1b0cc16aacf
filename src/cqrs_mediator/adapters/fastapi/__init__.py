"""FastAPI adapter – exception mapper and request dependencies."""
from cqrs_mediator.adapters.fastapi.deps import (
    CLIENT_DISCONNECTED,
    cancel_on_disconnect,
    get_mediator,
    request_cancellation,
)
from cqrs_mediator.adapters.fastapi.exception_mapper import (
    STATUS_CLIENT_CLOSED_REQUEST,
    FastAPIExceptionMapper,
)

__all__ = [
    "CLIENT_DISCONNECTED",
    "FastAPIExceptionMapper",
    "STATUS_CLIENT_CLOSED_REQUEST",
    "cancel_on_disconnect",
    "get_mediator",
    "request_cancellation",
]
