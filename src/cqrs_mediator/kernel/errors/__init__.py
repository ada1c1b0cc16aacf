"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError          (application.py)
    │   ├── HandlerNotFoundError
    │   ├── DuplicateHandlerError
    │   └── OperationCancelledError
    └── DomainError               (domain.py)
        ├── ValidationError
        └── NotFoundError
"""

from cqrs_mediator.kernel.errors.application import (
    ApplicationError,
    DuplicateHandlerError,
    HandlerNotFoundError,
    OperationCancelledError,
)
from cqrs_mediator.kernel.errors.base import BaseError
from cqrs_mediator.kernel.errors.domain import DomainError, NotFoundError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "DuplicateHandlerError",
    "HandlerNotFoundError",
    "NotFoundError",
    "OperationCancelledError",
    "ValidationError",
]
