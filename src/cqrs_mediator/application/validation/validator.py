"""Application validation – declarative per-message validators.

Validators are plain objects bound to one message type.  Rules are declared
per field in ``__init__`` and evaluated in declaration order; evaluation of a
field stops at its first failing rule.

Usage::

    class CreateTodoValidator(Validator[CreateTodo]):
        message_type = CreateTodo

        def __init__(self) -> None:
            super().__init__()
            (
                self.rule_for("title")
                .not_empty("Title is required")
                .min_length(3, "Title must be at least 3 characters")
            )
"""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, ClassVar, Generic, TypeVar

M = TypeVar("M")

Check = Callable[[Any], bool]


@dataclasses.dataclass(frozen=True)
class FieldFailure:
    """A single field-level validation failure."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class FieldRule:
    """Ordered checks for a single attribute of a message (fluent API)."""

    def __init__(self, field: str) -> None:
        self.field = field
        self._checks: list[tuple[Check, str]] = []

    def must(self, check: Check, message: str) -> "FieldRule":
        """Add an arbitrary predicate; *message* is reported when it returns False."""
        self._checks.append((check, message))
        return self

    def not_empty(self, message: str) -> "FieldRule":
        return self.must(lambda v: v is not None and (not isinstance(v, str) or v.strip() != ""), message)

    def min_length(self, length: int, message: str) -> "FieldRule":
        return self.must(lambda v: v is None or len(v) >= length, message)

    def max_length(self, length: int, message: str) -> "FieldRule":
        return self.must(lambda v: v is None or len(v) <= length, message)

    def greater_than(self, bound: Any, message: str) -> "FieldRule":
        return self.must(lambda v: v is not None and v > bound, message)

    def evaluate(self, message: Any) -> FieldFailure | None:
        value = getattr(message, self.field, None)
        for check, text in self._checks:
            if not check(value):
                return FieldFailure(self.field, text)
        return None


class Validator(Generic[M]):
    """Base class for validators of one message type."""

    message_type: ClassVar[type]

    def __init__(self) -> None:
        self._rules: list[FieldRule] = []

    def rule_for(self, field: str) -> FieldRule:
        rule = FieldRule(field)
        self._rules.append(rule)
        return rule

    def validate(self, message: M) -> list[FieldFailure]:
        """Return every failure (at most one per declared rule)."""
        failures: list[FieldFailure] = []
        for rule in self._rules:
            failure = rule.evaluate(message)
            if failure is not None:
                failures.append(failure)
        return failures


__all__ = ["FieldFailure", "FieldRule", "Validator"]
