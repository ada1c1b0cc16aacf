"""Application – use-case building blocks (framework-agnostic)."""

from cqrs_mediator.application.cqrs import (
    Command,
    CommandHandler,
    HandlerRegistry,
    Mediator,
    Query,
    QueryHandler,
)
from cqrs_mediator.application.pipeline import (
    LoggingBehavior,
    Pipeline,
    PipelineBehavior,
    ValidationBehavior,
)
from cqrs_mediator.application.validation import Validator

__all__ = [
    "Command",
    "CommandHandler",
    "HandlerRegistry",
    "LoggingBehavior",
    "Mediator",
    "Pipeline",
    "PipelineBehavior",
    "Query",
    "QueryHandler",
    "ValidationBehavior",
    "Validator",
]
