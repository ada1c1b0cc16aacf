"""Application CQRS – HandlerRegistry and the handler resolution contract.

Handlers are bound to a ``(message type, result type)`` pair by explicit
registration at startup.  The result type is read from the message class's
parametrised base (``class GetTodoById(Query[TodoItemDto | None])``) unless it
is passed explicitly.

Handlers and behaviors may be registered either as instances (shared by every
dispatch) or as zero-argument factories (a class or any callable), which are
invoked once per dispatch.
"""
from __future__ import annotations

import dataclasses
import typing
from typing import Any, Callable, Protocol, TypeVar

from cqrs_mediator.application.cqrs.commands import Command
from cqrs_mediator.application.cqrs.queries import Query
from cqrs_mediator.application.pipeline.behavior import PipelineBehavior
from cqrs_mediator.kernel.errors import DuplicateHandlerError, HandlerNotFoundError

Factory = Callable[[], Any]


def result_type_of(message_type: type) -> Any:
    """Return ``R`` for a class deriving from ``Command[R]`` or ``Query[R]``.

    Raises :class:`TypeError` if the class (or any ancestor) never binds ``R``.
    """
    for klass in message_type.__mro__:
        for base in klass.__dict__.get("__orig_bases__", ()):
            if typing.get_origin(base) not in (Command, Query):
                continue
            args = typing.get_args(base)
            if args and not isinstance(args[0], TypeVar):
                return args[0]
    raise TypeError(
        f"{message_type.__name__} does not declare a result type; "
        "derive from Command[R] / Query[R] or pass result_type explicitly"
    )


def _as_factory(component: Any) -> Factory:
    if isinstance(component, type):
        return component
    if callable(component) and not hasattr(component, "handle"):
        return component
    return lambda: component


class HandlerResolver(Protocol):
    """Resolution contract consumed by :class:`~cqrs_mediator.application.cqrs.Mediator`.

    Returned objects only need to stay valid for the duration of one dispatch.
    """

    def resolve_handler(self, message_type: type, result_type: Any) -> Any: ...

    def resolve_behaviors(self, message_type: type, result_type: Any) -> list[PipelineBehavior[Any, Any]]: ...


@dataclasses.dataclass(frozen=True)
class _BehaviorRegistration:
    factory: Factory
    message_type: type | None = None
    result_type: Any = None

    def applies_to(self, message_type: type, result_type: Any) -> bool:
        if self.message_type is None:
            return True
        return self.message_type is message_type and self.result_type == result_type


class HandlerRegistry:
    """Append-only registry of handlers and behaviors.

    Behaviors registered without a message type are *open*: they apply to every
    pair.  Resolution always returns behaviors in registration order, whether
    open or bound to a single pair.
    """

    def __init__(self) -> None:
        self._handlers: dict[tuple[type, Any], Factory] = {}
        self._behaviors: list[_BehaviorRegistration] = []

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_handler(self, message_type: type, handler: Any, *, result_type: Any = None) -> "HandlerRegistry":
        """Bind *handler* (instance, class, or factory) to *message_type*.

        Raises :class:`DuplicateHandlerError` if the pair is already bound.
        """
        key = (message_type, result_type if result_type is not None else result_type_of(message_type))
        if key in self._handlers:
            raise DuplicateHandlerError(*key)
        self._handlers[key] = _as_factory(handler)
        return self

    def add_behavior(
        self,
        behavior: Any,
        *,
        message_type: type | None = None,
        result_type: Any = None,
    ) -> "HandlerRegistry":
        """Append a behavior; open unless *message_type* is given."""
        if message_type is not None and result_type is None:
            result_type = result_type_of(message_type)
        self._behaviors.append(
            _BehaviorRegistration(_as_factory(behavior), message_type, result_type)
        )
        return self

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def has_handler(self, message_type: type, result_type: Any = None) -> bool:
        if result_type is None:
            result_type = result_type_of(message_type)
        return (message_type, result_type) in self._handlers

    def resolve_handler(self, message_type: type, result_type: Any) -> Any:
        factory = self._handlers.get((message_type, result_type))
        if factory is None:
            raise HandlerNotFoundError(message_type, result_type)
        return factory()

    def resolve_behaviors(self, message_type: type, result_type: Any) -> list[PipelineBehavior[Any, Any]]:
        return [
            registration.factory()
            for registration in self._behaviors
            if registration.applies_to(message_type, result_type)
        ]


__all__ = ["HandlerRegistry", "HandlerResolver", "result_type_of"]
