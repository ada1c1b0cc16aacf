"""Application CQRS – Commands, Queries, HandlerRegistry, Mediator."""
from cqrs_mediator.application.cqrs.commands import Command, CommandHandler
from cqrs_mediator.application.cqrs.queries import Query, QueryHandler
from cqrs_mediator.application.cqrs.registry import HandlerRegistry, HandlerResolver, result_type_of
from cqrs_mediator.application.cqrs.mediator import Mediator

__all__ = [
    "Command",
    "CommandHandler",
    "HandlerRegistry",
    "HandlerResolver",
    "Mediator",
    "Query",
    "QueryHandler",
    "result_type_of",
]
