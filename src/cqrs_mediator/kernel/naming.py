"""Kernel – readable names for message and result types.

``list[TodoItemDto].__name__`` is just ``"list"`` and ``TodoItemDto | None`` has
no ``__name__`` at all, so log events and error details format types here.
"""
from __future__ import annotations

import types
import typing
from typing import Any


def type_name(tp: Any) -> str:
    """Return ``list[TodoItemDto]`` / ``TodoItemDto | None`` style names."""
    if tp is None or tp is type(None):
        return "None"
    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin is typing.Union or origin is types.UnionType:
        return " | ".join(type_name(arg) for arg in args)
    if origin is not None and args:
        return f"{type_name(origin)}[{', '.join(type_name(arg) for arg in args)}]"
    return getattr(tp, "__name__", None) or repr(tp)


__all__ = ["type_name"]
