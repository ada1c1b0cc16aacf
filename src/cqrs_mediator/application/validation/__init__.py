"""Application validation – field rules and per-message validators."""
from cqrs_mediator.application.validation.validator import FieldFailure, FieldRule, Validator

__all__ = ["FieldFailure", "FieldRule", "Validator"]
