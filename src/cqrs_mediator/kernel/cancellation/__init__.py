"""Kernel – explicit cancellation token threading."""
from cqrs_mediator.kernel.cancellation.token import CancellationToken, CancellationTokenSource

__all__ = ["CancellationToken", "CancellationTokenSource"]
