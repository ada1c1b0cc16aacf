"""Application pipeline – Pipeline class."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from cqrs_mediator.application.pipeline.behavior import Next, PipelineBehavior

if TYPE_CHECKING:
    from cqrs_mediator.kernel.cancellation import CancellationToken


class Pipeline:
    """Builds and executes an ordered chain of behaviors around a terminal step.

    The first behavior added is the outermost: its "before" code runs first and
    its "after" code runs last.
    """

    def __init__(self, behaviors: Iterable[PipelineBehavior[Any, Any]] = ()) -> None:
        self._behaviors: list[PipelineBehavior[Any, Any]] = list(behaviors)

    def add(self, behavior: PipelineBehavior[Any, Any]) -> "Pipeline":
        """Append a behavior (fluent API)."""
        self._behaviors.append(behavior)
        return self

    def __len__(self) -> int:
        return len(self._behaviors)

    def build(self, message: Any, terminal: Next, cancellation: CancellationToken) -> Next:
        """Fold the behaviors right-to-left into a single zero-arg continuation."""
        chain = terminal
        for behavior in reversed(self._behaviors):
            chain = _link(behavior, message, chain, cancellation)
        return chain

    async def execute(self, message: Any, terminal: Next, cancellation: CancellationToken) -> Any:
        """Execute the full chain, ending with *terminal*."""
        return await self.build(message, terminal, cancellation)()


def _link(
    behavior: PipelineBehavior[Any, Any],
    message: Any,
    next_: Next,
    cancellation: CancellationToken,
) -> Next:
    async def _invoke() -> Any:
        return await behavior.handle(message, next_, cancellation)

    return _invoke


__all__ = ["Pipeline"]
