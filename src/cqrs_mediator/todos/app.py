"""Todos – FastAPI application factory.

Run with::

    uvicorn --factory cqrs_mediator.todos.app:create_app
"""
from __future__ import annotations

import os

from fastapi import FastAPI

from cqrs_mediator.adapters.fastapi import FastAPIExceptionMapper
from cqrs_mediator.application.cqrs import Mediator
from cqrs_mediator.config import AppSettings, DotenvSettingsLoader
from cqrs_mediator.observability.logging import JsonLoggerFactory, get_logger
from cqrs_mediator.todos.api import router
from cqrs_mediator.todos.bootstrap import build_mediator

logger = get_logger(__name__)


def create_app(
    settings: AppSettings | None = None,
    mediator: Mediator | None = None,
    *,
    env_file: str | os.PathLike[str] = ".env",
) -> FastAPI:
    """Build the to-do API.

    Without explicit *settings*, ``TODO_*`` variables are read from *env_file*
    (if present) layered under the process environment.
    """
    if settings is None:
        settings = DotenvSettingsLoader(env_file).load(AppSettings)
    JsonLoggerFactory.configure(settings.log_level, json=settings.json_logs, service=settings.title)

    app = FastAPI(title=settings.title)
    app.state.settings = settings
    app.state.mediator = mediator if mediator is not None else build_mediator()
    app.include_router(router, prefix=settings.api_prefix)
    FastAPIExceptionMapper().register(app)

    logger.info("app.created", title=settings.title, api_prefix=settings.api_prefix)
    return app


__all__ = ["create_app"]
