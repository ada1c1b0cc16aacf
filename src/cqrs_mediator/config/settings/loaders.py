"""Config settings – build a :class:`Settings` dataclass from key/value sources.

Field ``log_level`` of a class with ``_prefix = "TODO"`` is read from
``TODO_LOG_LEVEL``.  Values are converted according to the field's resolved
annotation; ``X | None`` fields convert as ``X``.
"""
from __future__ import annotations

import abc
import dataclasses
import os
import types
import typing
from collections.abc import Mapping
from typing import Any, Callable, TypeVar

from dotenv import dotenv_values

from cqrs_mediator.config.errors import InvalidSettingValueError, MissingRequiredSettingError
from cqrs_mediator.config.settings.base import Settings

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _to_bool(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"expected one of {sorted(_TRUE | _FALSE)}")


def _to_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


_CONVERTERS: dict[Any, Callable[[str], Any]] = {
    bool: _to_bool,
    int: int,
    float: float,
    str: str,
    list: _to_list,
}


def _converter_for(annotation: Any) -> Callable[[str], Any]:
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        non_none = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(non_none) == 1:
            return _converter_for(non_none[0])
        return str
    return _CONVERTERS.get(origin or annotation, str)


def env_key(settings_class: type[Settings], field_name: str) -> str:
    prefix = getattr(settings_class, "_prefix", "")
    return f"{prefix}_{field_name}".upper() if prefix else field_name.upper()


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read settings from a mapping of variables (``os.environ`` by default).

    Raises :class:`MissingRequiredSettingError` for a field without default whose
    variable is unset, and :class:`InvalidSettingValueError` when a value cannot
    be converted or the settings class rejects it.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = self._environ if self._environ is not None else os.environ
        hints = typing.get_type_hints(settings_class)
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            key = env_key(settings_class, field.name)
            raw = environ.get(key)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(key)
                continue
            convert = _converter_for(hints.get(field.name, str))
            try:
                values[field.name] = convert(raw)
            except ValueError as exc:
                raise InvalidSettingValueError(key, raw, str(exc)) from exc

        return settings_class(**values)


class DotenvSettingsLoader(SettingsLoader):
    """Read settings from a ``.env`` file layered with the process environment.

    The process environment wins unless ``override`` is set.  A missing file is
    treated as empty.  ``os.environ`` is never modified.
    """

    def __init__(self, env_file: str | os.PathLike[str] = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        from_file = {k: v for k, v in dotenv_values(self._env_file).items() if v is not None}
        if self._override:
            merged = {**os.environ, **from_file}
        else:
            merged = {**from_file, **os.environ}
        return EnvSettingsLoader(merged).load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "env_key"]
