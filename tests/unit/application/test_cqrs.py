"""Unit tests for CQRS – message contracts, HandlerRegistry and Mediator."""

from __future__ import annotations

import asyncio
import dataclasses
from typing import Any

import pytest

from cqrs_mediator.application.cqrs import (
    Command,
    CommandHandler,
    HandlerRegistry,
    Mediator,
    Query,
    QueryHandler,
    result_type_of,
)
from cqrs_mediator.application.pipeline import Next, PipelineBehavior
from cqrs_mediator.kernel.cancellation import CancellationToken, CancellationTokenSource
from cqrs_mediator.kernel.errors import (
    DuplicateHandlerError,
    HandlerNotFoundError,
    OperationCancelledError,
)


# ---------------------------------------------------------------------------
# Concrete commands / queries / handlers for tests
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class EchoResult:
    value: str


@dataclasses.dataclass(frozen=True)
class EchoCommand(Command[EchoResult]):
    input: str


@dataclasses.dataclass(frozen=True)
class EchoQuery(Query[EchoResult]):
    input: str


@dataclasses.dataclass(frozen=True)
class CountQuery(Query[int]):
    pass


class EchoCommandHandler(CommandHandler[EchoCommand, EchoResult]):
    def __init__(self, steps: list[str] | None = None) -> None:
        self.calls: list[EchoCommand] = []
        self._steps = steps

    async def handle(self, command: EchoCommand, cancellation: CancellationToken) -> EchoResult:
        self.calls.append(command)
        if self._steps is not None:
            self._steps.append("handle")
        return EchoResult(f"Result: {command.input}")


class EchoQueryHandler(QueryHandler[EchoQuery, EchoResult]):
    async def handle(self, query: EchoQuery, cancellation: CancellationToken) -> EchoResult:
        return EchoResult(f"Query: {query.input}")


class CancellableQueryHandler(QueryHandler[EchoQuery, EchoResult]):
    async def handle(self, query: EchoQuery, cancellation: CancellationToken) -> EchoResult:
        cancellation.raise_if_cancelled()
        return EchoResult(query.input)


class SyncCountHandler(QueryHandler[CountQuery, int]):
    def handle(self, query: CountQuery, cancellation: CancellationToken) -> int:  # type: ignore[override]
        return 42


class RecordingBehavior(PipelineBehavior[Any, Any]):
    def __init__(self, name: str, steps: list[str]) -> None:
        self._name = name
        self._steps = steps

    async def handle(self, message: Any, next_: Next, cancellation: CancellationToken) -> Any:
        self._steps.append(f"{self._name}-before")
        result = await next_()
        self._steps.append(f"{self._name}-after")
        return result


# ---------------------------------------------------------------------------
# Message contracts
# ---------------------------------------------------------------------------


class TestResultTypeOf:
    def test_reads_command_result_type(self) -> None:
        assert result_type_of(EchoCommand) is EchoResult

    def test_reads_query_result_type(self) -> None:
        assert result_type_of(CountQuery) is int

    def test_inherited_from_parametrised_ancestor(self) -> None:
        class SpecialEcho(EchoCommand):
            pass

        assert result_type_of(SpecialEcho) is EchoResult

    def test_generic_result_type(self) -> None:
        class ListQuery(Query[list[EchoResult]]):
            pass

        assert result_type_of(ListQuery) == list[EchoResult]

    def test_unparametrised_message_raises(self) -> None:
        class Bare(Command):  # type: ignore[type-arg]
            pass

        with pytest.raises(TypeError, match="does not declare a result type"):
            result_type_of(Bare)

    def test_messages_are_immutable(self) -> None:
        cmd = EchoCommand("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            cmd.input = "y"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# HandlerRegistry
# ---------------------------------------------------------------------------


class TestHandlerRegistry:
    def test_resolves_registered_instance(self) -> None:
        handler = EchoCommandHandler()
        registry = HandlerRegistry().add_handler(EchoCommand, handler)
        assert registry.resolve_handler(EchoCommand, EchoResult) is handler

    def test_class_registration_creates_instance_per_resolution(self) -> None:
        registry = HandlerRegistry().add_handler(EchoCommand, EchoCommandHandler)
        first = registry.resolve_handler(EchoCommand, EchoResult)
        second = registry.resolve_handler(EchoCommand, EchoResult)
        assert isinstance(first, EchoCommandHandler)
        assert first is not second

    def test_factory_registration(self) -> None:
        created: list[EchoCommandHandler] = []

        def factory() -> EchoCommandHandler:
            handler = EchoCommandHandler()
            created.append(handler)
            return handler

        registry = HandlerRegistry().add_handler(EchoCommand, factory)
        assert registry.resolve_handler(EchoCommand, EchoResult) is created[0]

    def test_missing_handler_raises(self) -> None:
        with pytest.raises(HandlerNotFoundError):
            HandlerRegistry().resolve_handler(EchoCommand, EchoResult)

    def test_wrong_result_type_is_not_found(self) -> None:
        registry = HandlerRegistry().add_handler(EchoCommand, EchoCommandHandler())
        with pytest.raises(HandlerNotFoundError):
            registry.resolve_handler(EchoCommand, str)

    def test_explicit_result_type(self) -> None:
        registry = HandlerRegistry().add_handler(EchoCommand, EchoCommandHandler(), result_type=str)
        assert registry.has_handler(EchoCommand, str)
        assert not registry.has_handler(EchoCommand)

    def test_duplicate_registration_rejected(self) -> None:
        registry = HandlerRegistry().add_handler(EchoCommand, EchoCommandHandler())
        with pytest.raises(DuplicateHandlerError):
            registry.add_handler(EchoCommand, EchoCommandHandler())

    def test_behaviors_in_registration_order(self) -> None:
        steps: list[str] = []
        b1 = RecordingBehavior("B1", steps)
        b2 = RecordingBehavior("B2", steps)
        b3 = RecordingBehavior("B3", steps)
        registry = (
            HandlerRegistry()
            .add_behavior(b1)
            .add_behavior(b2, message_type=EchoCommand)
            .add_behavior(b3)
        )
        assert registry.resolve_behaviors(EchoCommand, EchoResult) == [b1, b2, b3]

    def test_closed_behavior_only_applies_to_its_pair(self) -> None:
        steps: list[str] = []
        open_b = RecordingBehavior("open", steps)
        closed_b = RecordingBehavior("closed", steps)
        registry = (
            HandlerRegistry()
            .add_behavior(closed_b, message_type=EchoCommand)
            .add_behavior(open_b)
        )
        assert registry.resolve_behaviors(EchoQuery, EchoResult) == [open_b]
        assert registry.resolve_behaviors(EchoCommand, EchoResult) == [closed_b, open_b]

    def test_behavior_class_registration_is_instantiated(self) -> None:
        class Passthrough(PipelineBehavior[Any, Any]):
            async def handle(self, message: Any, next_: Next, cancellation: CancellationToken) -> Any:
                return await next_()

        registry = HandlerRegistry().add_behavior(Passthrough)
        (behavior,) = registry.resolve_behaviors(EchoCommand, EchoResult)
        assert isinstance(behavior, Passthrough)


# ---------------------------------------------------------------------------
# Mediator
# ---------------------------------------------------------------------------


class TestMediator:
    def test_command_without_behaviors_returns_handler_result(self) -> None:
        mediator = Mediator(HandlerRegistry().add_handler(EchoCommand, EchoCommandHandler()))
        result = asyncio.run(mediator.send_command(EchoCommand("test")))
        assert result == EchoResult("Result: test")

    def test_query_without_behaviors_returns_handler_result(self) -> None:
        mediator = Mediator(HandlerRegistry().add_handler(EchoQuery, EchoQueryHandler()))
        result = asyncio.run(mediator.send_query(EchoQuery("q")))
        assert result == EchoResult("Query: q")

    def test_sync_handler_is_supported(self) -> None:
        mediator = Mediator(HandlerRegistry().add_handler(CountQuery, SyncCountHandler()))
        assert asyncio.run(mediator.send_query(CountQuery())) == 42

    def test_two_behaviors_wrap_handler_in_order(self) -> None:
        steps: list[str] = []
        registry = (
            HandlerRegistry()
            .add_handler(EchoCommand, EchoCommandHandler(steps))
            .add_behavior(RecordingBehavior("B1", steps))
            .add_behavior(RecordingBehavior("B2", steps))
        )
        result = asyncio.run(Mediator(registry).send_command(EchoCommand("test-pipeline")))

        assert result == EchoResult("Result: test-pipeline")
        assert steps == ["B1-before", "B2-before", "handle", "B2-after", "B1-after"]

    def test_missing_handler_raises_before_any_behavior(self) -> None:
        steps: list[str] = []
        registry = HandlerRegistry().add_behavior(RecordingBehavior("B1", steps))

        with pytest.raises(HandlerNotFoundError):
            asyncio.run(Mediator(registry).send_command(EchoCommand("x")))
        assert steps == []

    def test_short_circuit_skips_handler(self) -> None:
        class ShortCircuit(PipelineBehavior[Any, Any]):
            async def handle(self, message: Any, next_: Next, cancellation: CancellationToken) -> Any:
                return EchoResult("short-circuited")

        handler = EchoCommandHandler()
        registry = HandlerRegistry().add_handler(EchoCommand, handler).add_behavior(ShortCircuit())

        result = asyncio.run(Mediator(registry).send_command(EchoCommand("x")))
        assert result == EchoResult("short-circuited")
        assert handler.calls == []

    def test_behavior_can_transform_result(self) -> None:
        class Upper(PipelineBehavior[Any, Any]):
            async def handle(self, message: Any, next_: Next, cancellation: CancellationToken) -> Any:
                result = await next_()
                return EchoResult(result.value.upper())

        registry = HandlerRegistry().add_handler(EchoCommand, EchoCommandHandler()).add_behavior(Upper())
        result = asyncio.run(Mediator(registry).send_command(EchoCommand("abc")))
        assert result == EchoResult("RESULT: ABC")

    def test_behavior_calling_next_twice_reexecutes_handler(self) -> None:
        class Twice(PipelineBehavior[Any, Any]):
            async def handle(self, message: Any, next_: Next, cancellation: CancellationToken) -> Any:
                await next_()
                return await next_()

        handler = EchoCommandHandler()
        registry = HandlerRegistry().add_handler(EchoCommand, handler).add_behavior(Twice())
        asyncio.run(Mediator(registry).send_command(EchoCommand("x")))
        assert len(handler.calls) == 2

    def test_handler_exception_propagates_unmodified(self) -> None:
        boom = RuntimeError("boom")

        class Failing(CommandHandler[EchoCommand, EchoResult]):
            async def handle(self, command: EchoCommand, cancellation: CancellationToken) -> EchoResult:
                raise boom

        steps: list[str] = []
        registry = (
            HandlerRegistry()
            .add_handler(EchoCommand, Failing())
            .add_behavior(RecordingBehavior("B1", steps))
        )
        with pytest.raises(RuntimeError) as exc_info:
            asyncio.run(Mediator(registry).send_command(EchoCommand("x")))
        assert exc_info.value is boom
        assert steps == ["B1-before"]

    def test_pre_cancelled_token_propagates_from_handler(self) -> None:
        mediator = Mediator(HandlerRegistry().add_handler(EchoQuery, CancellableQueryHandler()))
        source = CancellationTokenSource()
        source.cancel()

        with pytest.raises(OperationCancelledError):
            asyncio.run(mediator.send_query(EchoQuery("q"), source.token))

    def test_same_token_reaches_every_link(self) -> None:
        seen: list[CancellationToken] = []

        class Capture(PipelineBehavior[Any, Any]):
            async def handle(self, message: Any, next_: Next, cancellation: CancellationToken) -> Any:
                seen.append(cancellation)
                return await next_()

        class CapturingHandler(QueryHandler[EchoQuery, EchoResult]):
            async def handle(self, query: EchoQuery, cancellation: CancellationToken) -> EchoResult:
                seen.append(cancellation)
                return EchoResult("ok")

        registry = (
            HandlerRegistry()
            .add_handler(EchoQuery, CapturingHandler())
            .add_behavior(Capture())
            .add_behavior(Capture())
        )
        token = CancellationTokenSource().token
        asyncio.run(Mediator(registry).send_query(EchoQuery("q"), token))
        assert seen == [token, token, token]

    def test_missing_token_defaults_to_uncancelled(self) -> None:
        seen: list[CancellationToken] = []

        class CapturingHandler(QueryHandler[EchoQuery, EchoResult]):
            async def handle(self, query: EchoQuery, cancellation: CancellationToken) -> EchoResult:
                seen.append(cancellation)
                return EchoResult("ok")

        mediator = Mediator(HandlerRegistry().add_handler(EchoQuery, CapturingHandler()))
        asyncio.run(mediator.send_query(EchoQuery("q")))
        assert seen[0].is_cancelled is False

    def test_same_command_twice_invokes_handler_twice(self) -> None:
        handler = EchoCommandHandler()
        mediator = Mediator(HandlerRegistry().add_handler(EchoCommand, handler))
        command = EchoCommand("same")

        async def _run() -> tuple[EchoResult, EchoResult]:
            return await mediator.send_command(command), await mediator.send_command(command)

        first, second = asyncio.run(_run())
        assert first == second
        assert handler.calls == [command, command]

    def test_explicit_result_type_selects_binding(self) -> None:
        class StrHandler(CommandHandler[EchoCommand, str]):
            async def handle(self, command: EchoCommand, cancellation: CancellationToken) -> str:
                return command.input

        registry = (
            HandlerRegistry()
            .add_handler(EchoCommand, EchoCommandHandler())
            .add_handler(EchoCommand, StrHandler(), result_type=str)
        )
        mediator = Mediator(registry)
        assert asyncio.run(mediator.send_command(EchoCommand("x"), result_type=str)) == "x"
        assert asyncio.run(mediator.send_command(EchoCommand("x"))) == EchoResult("Result: x")

    def test_send_command_rejects_query(self) -> None:
        mediator = Mediator(HandlerRegistry().add_handler(EchoQuery, EchoQueryHandler()))
        with pytest.raises(TypeError, match="expects a Command"):
            asyncio.run(mediator.send_command(EchoQuery("q")))  # type: ignore[arg-type]

    def test_send_query_rejects_command(self) -> None:
        mediator = Mediator(HandlerRegistry().add_handler(EchoCommand, EchoCommandHandler()))
        with pytest.raises(TypeError, match="expects a Query"):
            asyncio.run(mediator.send_query(EchoCommand("c")))  # type: ignore[arg-type]

    def test_concurrent_dispatches_are_independent(self) -> None:
        class SlowEcho(QueryHandler[EchoQuery, EchoResult]):
            async def handle(self, query: EchoQuery, cancellation: CancellationToken) -> EchoResult:
                await asyncio.sleep(0)
                return EchoResult(query.input)

        mediator = Mediator(HandlerRegistry().add_handler(EchoQuery, SlowEcho))

        async def _run() -> list[EchoResult]:
            return list(await asyncio.gather(*(mediator.send_query(EchoQuery(str(i))) for i in range(5))))

        assert asyncio.run(_run()) == [EchoResult(str(i)) for i in range(5)]
