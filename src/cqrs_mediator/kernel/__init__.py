"""Kernel – framework-agnostic building blocks."""

from cqrs_mediator.kernel.cancellation import CancellationToken, CancellationTokenSource
from cqrs_mediator.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    DuplicateHandlerError,
    HandlerNotFoundError,
    NotFoundError,
    OperationCancelledError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CancellationToken",
    "CancellationTokenSource",
    "DomainError",
    "DuplicateHandlerError",
    "HandlerNotFoundError",
    "NotFoundError",
    "OperationCancelledError",
    "ValidationError",
]
