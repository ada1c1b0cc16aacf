"""Config settings – Settings base class and the application settings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from cqrs_mediator.config.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class AppSettings(Settings):
    """Settings for the to-do HTTP application (``TODO_*`` variables)."""

    _prefix: ClassVar[str] = "TODO"

    title: str = "Todo API"
    log_level: str = "INFO"
    json_logs: bool = True
    api_prefix: str = "/api/v1"

    def _validate(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")
        if self.api_prefix and not self.api_prefix.startswith("/"):
            raise InvalidSettingValueError("api_prefix", self.api_prefix, "must start with '/'")


__all__ = ["AppSettings", "Settings"]
