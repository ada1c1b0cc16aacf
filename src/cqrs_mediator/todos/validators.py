"""Todos – input validation rules for the mutating commands."""
from __future__ import annotations

from cqrs_mediator.application.validation import Validator
from cqrs_mediator.todos.messages import CreateTodo, UpdateTodo

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class CreateTodoValidator(Validator[CreateTodo]):
    message_type = CreateTodo

    def __init__(self) -> None:
        super().__init__()
        (
            self.rule_for("title")
            .not_empty("Title is required")
            .min_length(TITLE_MIN_LENGTH, f"Title must be at least {TITLE_MIN_LENGTH} characters")
            .max_length(TITLE_MAX_LENGTH, f"Title cannot exceed {TITLE_MAX_LENGTH} characters")
        )
        self.rule_for("description").max_length(
            DESCRIPTION_MAX_LENGTH, f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"
        )


class UpdateTodoValidator(Validator[UpdateTodo]):
    message_type = UpdateTodo

    def __init__(self) -> None:
        super().__init__()
        self.rule_for("id").greater_than(0, "ID must be greater than 0")
        (
            self.rule_for("title")
            .not_empty("Title is required")
            .min_length(TITLE_MIN_LENGTH, f"Title must be at least {TITLE_MIN_LENGTH} characters")
            .max_length(TITLE_MAX_LENGTH, f"Title cannot exceed {TITLE_MAX_LENGTH} characters")
        )
        self.rule_for("description").max_length(
            DESCRIPTION_MAX_LENGTH, f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"
        )


def default_validators() -> list[Validator[object]]:
    return [CreateTodoValidator(), UpdateTodoValidator()]


__all__ = ["CreateTodoValidator", "UpdateTodoValidator", "default_validators"]
