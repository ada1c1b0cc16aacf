"""
cqrs_mediator – in-process command/query mediator with a behavior pipeline.

Import path convention::

    from cqrs_mediator.kernel.errors import HandlerNotFoundError
    from cqrs_mediator.kernel.cancellation import CancellationTokenSource
    from cqrs_mediator.application.cqrs import Command, HandlerRegistry, Mediator
    from cqrs_mediator.application.pipeline import LoggingBehavior, PipelineBehavior
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
