"""Application pipeline – behavior chain wrapped around handlers."""
from cqrs_mediator.application.pipeline.behavior import Next, PipelineBehavior
from cqrs_mediator.application.pipeline.behaviors import LoggingBehavior, ValidationBehavior
from cqrs_mediator.application.pipeline.context import DispatchContext, current_dispatch, dispatch_scope
from cqrs_mediator.application.pipeline.pipeline import Pipeline

__all__ = [
    "DispatchContext",
    "LoggingBehavior",
    "Next",
    "Pipeline",
    "PipelineBehavior",
    "ValidationBehavior",
    "current_dispatch",
    "dispatch_scope",
]
