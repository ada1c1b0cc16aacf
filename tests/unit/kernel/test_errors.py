"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import pytest

from cqrs_mediator.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    DuplicateHandlerError,
    HandlerNotFoundError,
    NotFoundError,
    OperationCancelledError,
    ValidationError,
)


class CreateWidget:
    pass


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert str(err) == "something went wrong"

    def test_defaults(self) -> None:
        err = BaseError()
        assert err.code == "error"
        assert err.message == "An error occurred"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_omits_empty_detail(self) -> None:
        assert BaseError("m", code="c").to_dict() == {"code": "c", "message": "m"}

    def test_to_dict_with_detail(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_detail_is_copied(self) -> None:
        detail = {"key": "val"}
        err = BaseError("m", detail=detail)
        detail["key"] = "changed"
        assert err.detail == {"key": "val"}

    def test_cause_is_kept_out_of_to_dict(self) -> None:
        try:
            try:
                raise KeyError("secret")
            except KeyError as exc:
                raise BaseError("wrapper") from exc
        except BaseError as err:
            assert "cause" not in err.to_dict()
            assert err.log_fields()["cause_type"] == "KeyError"
            assert err.log_fields()["error_type"] == "BaseError"

    def test_repr(self) -> None:
        assert repr(BaseError("m", code="c")) == "BaseError(code='c', message='m')"


class TestApplicationErrors:
    def test_handler_not_found_carries_pair(self) -> None:
        err = HandlerNotFoundError(CreateWidget, int)
        assert isinstance(err, ApplicationError)
        assert err.code == "handler_not_found"
        assert err.message_type is CreateWidget
        assert err.result_type is int
        assert err.detail == {"message_type": "CreateWidget", "result_type": "int"}
        assert "CreateWidget -> int" in err.message

    def test_handler_not_found_with_generic_result_type(self) -> None:
        err = HandlerNotFoundError(CreateWidget, list[int])
        assert "list[int]" in err.message

    def test_duplicate_handler(self) -> None:
        err = DuplicateHandlerError(CreateWidget, str)
        assert err.code == "duplicate_handler"
        assert "already registered" in err.message

    def test_cancelled_default_message(self) -> None:
        err = OperationCancelledError()
        assert err.code == "cancelled"
        assert err.message == "Operation was cancelled"


class TestDomainErrors:
    def test_validation_error_to_dict_has_errors(self) -> None:
        err = ValidationError("bad", errors=[{"field": "title", "message": "required"}])
        assert isinstance(err, DomainError)
        assert err.to_dict()["errors"] == [{"field": "title", "message": "required"}]

    def test_validation_error_groups_by_field(self) -> None:
        err = ValidationError(
            "bad",
            errors=[
                {"field": "title", "message": "a"},
                {"field": "description", "message": "b"},
                {"field": "title", "message": "c"},
            ],
        )
        assert err.errors_by_field() == {"title": ["a", "c"], "description": ["b"]}

    def test_validation_error_defaults_to_empty_errors(self) -> None:
        assert ValidationError("bad").errors == []

    def test_not_found_message_with_identifier(self) -> None:
        err = NotFoundError("Todo", 7)
        assert err.message == "Todo '7' not found"
        assert err.identifier == 7

    def test_not_found_message_without_identifier(self) -> None:
        assert NotFoundError("Todo").message == "Todo not found"

    @pytest.mark.parametrize(
        "err_cls", [ValidationError, NotFoundError],
    )
    def test_domain_errors_are_not_application_errors(self, err_cls: type) -> None:
        assert not issubclass(err_cls, ApplicationError)
