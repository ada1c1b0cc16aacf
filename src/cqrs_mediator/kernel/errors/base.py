"""Root of the mediator's error hierarchy."""

from __future__ import annotations

from typing import Any, ClassVar


class BaseError(Exception):
    """An error with a stable ``code`` slug and a JSON-safe ``detail`` mapping.

    :meth:`to_dict` is the public shape used for HTTP bodies; it never exposes
    the chained cause.  :meth:`log_fields` adds the error and cause type names
    for structured log events.  Chain causes with ``raise ... from exc``.
    """

    default_code: ClassVar[str] = "error"
    default_message: ClassVar[str] = "An error occurred"

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = self.detail
        return payload

    def log_fields(self) -> dict[str, Any]:
        fields = {"error_type": type(self).__name__, **self.to_dict()}
        if self.__cause__ is not None:
            fields["cause_type"] = type(self.__cause__).__name__
        return fields


__all__ = ["BaseError"]
