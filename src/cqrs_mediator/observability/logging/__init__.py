"""Observability – structured logging helpers."""
from cqrs_mediator.observability.logging.factory import JsonLoggerFactory
from cqrs_mediator.observability.logging.processors import add_service_name, get_logger

__all__ = ["JsonLoggerFactory", "add_service_name", "get_logger"]
