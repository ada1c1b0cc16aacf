"""Application pipeline – built-in behavior implementations."""
from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any, Iterable

from cqrs_mediator.application.pipeline.behavior import Next, PipelineBehavior
from cqrs_mediator.application.pipeline.context import current_dispatch
from cqrs_mediator.application.validation import Validator
from cqrs_mediator.kernel.errors import OperationCancelledError, ValidationError
from cqrs_mediator.kernel.naming import type_name
from cqrs_mediator.observability.logging import get_logger

if TYPE_CHECKING:
    from cqrs_mediator.kernel.cancellation import CancellationToken


def _result_type_name(result: Any) -> str:
    ctx = current_dispatch()
    return ctx.result_type_name if ctx is not None else type_name(type(result))


class LoggingBehavior(PipelineBehavior[Any, Any]):
    """Log request start/end with timing.

    Emits ``request.started`` before the rest of the chain runs and
    ``request.completed`` after it returns.  ``result_type`` names the declared
    result type of the dispatch (``TodoItemDto | None``), not the type of the
    returned value; outside a mediator dispatch the value's type is used.
    Failures are logged as ``request.failed`` and re-raised unchanged;
    cancellation is neither logged as a failure nor caught.
    """

    def __init__(self, logger: Any | None = None) -> None:
        self._log = logger if logger is not None else get_logger(__name__)

    async def handle(self, message: Any, next_: Next, cancellation: CancellationToken) -> Any:
        name = type(message).__name__
        self._log.info("request.started", request_type=name)
        cancellation.raise_if_cancelled()
        start = time.perf_counter()
        try:
            result = await next_()
        except OperationCancelledError:
            raise
        except Exception as exc:
            duration = (time.perf_counter() - start) * 1000
            self._log.error(
                "request.failed",
                request_type=name,
                error_type=type(exc).__name__,
                duration_ms=round(duration, 2),
            )
            raise
        duration = (time.perf_counter() - start) * 1000
        self._log.info(
            "request.completed",
            request_type=name,
            result_type=_result_type_name(result),
            duration_ms=round(duration, 2),
        )
        return result


class ValidationBehavior(PipelineBehavior[Any, Any]):
    """Run the validators registered for the message type before the handler.

    All failures are collected and raised together as a single
    :class:`ValidationError`; the handler is not invoked in that case.
    """

    def __init__(self, validators: Iterable[Validator[Any]] = ()) -> None:
        self._validators: dict[type, list[Validator[Any]]] = {}
        for validator in validators:
            self._validators.setdefault(validator.message_type, []).append(validator)

    def validators_for(self, message_type: type) -> list[Validator[Any]]:
        return list(self._validators.get(message_type, []))

    async def handle(self, message: Any, next_: Next, cancellation: CancellationToken) -> Any:
        cancellation.raise_if_cancelled()
        validators = self._validators.get(type(message))
        if not validators:
            return await next_()

        failures = [f for v in validators for f in v.validate(message)]
        if failures:
            raise ValidationError(
                f"Validation failed for {type(message).__name__}",
                errors=[f.to_dict() for f in failures],
            )
        return await next_()


__all__ = ["LoggingBehavior", "ValidationBehavior"]
