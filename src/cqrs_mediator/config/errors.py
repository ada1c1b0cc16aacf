"""Config – errors raised while building settings at startup.

They are :class:`ApplicationError` subclasses, so a misconfigured process fails
with the same ``code`` / ``detail`` shape as any other mediator error.
"""
from __future__ import annotations

from cqrs_mediator.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    default_code = "config_error"
    default_message = "Invalid configuration"


class MissingRequiredSettingError(ConfigError):
    """An environment variable backing a field without default is unset."""

    default_code = "missing_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"{setting_name} must be set",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot be used as given."""

    default_code = "invalid_setting"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": str(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
