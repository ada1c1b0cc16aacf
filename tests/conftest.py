"""Shared fixtures for the test-suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo any ``structlog.configure`` done by a test (e.g. via ``create_app``)."""
    yield
    structlog.reset_defaults()
