"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import pytest

from logbridge.kernel.errors import ApplicationError, ArgumentMissingError, BaseError


class TestBaseError:
    def test_message_is_stored(self) -> None:
        assert BaseError("something went wrong").message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_str_carries_code(self) -> None:
        assert str(ApplicationError("bad input")) == "[application_error] bad input"

    def test_to_dict_minimal(self) -> None:
        assert BaseError("m").to_dict() == {
            "error_type": "BaseError",
            "code": "base_error",
            "message": "m",
        }

    def test_to_dict_includes_detail_and_cause(self) -> None:
        cause = RuntimeError("boom")
        err = BaseError("wrapped", detail={"k": 1}, cause=cause)
        assert err.to_dict() == {
            "error_type": "BaseError",
            "code": "base_error",
            "message": "wrapped",
            "detail": {"k": 1},
            "cause": repr(cause),
        }
        assert err.cause is cause

    def test_cause_follows_raise_from(self) -> None:
        cause = KeyError("k")
        with pytest.raises(BaseError) as exc_info:
            try:
                raise cause
            except KeyError as exc:
                raise BaseError("lookup failed") from exc
        assert exc_info.value.cause is cause

    def test_detail_is_copied(self) -> None:
        detail = {"k": 1}
        err = BaseError("m", detail=detail)
        detail["k"] = 2
        assert err.detail == {"k": 1}


class TestArgumentMissingError:
    def test_hierarchy(self) -> None:
        err = ArgumentMissingError("provider")
        assert isinstance(err, ApplicationError)
        assert isinstance(err, ValueError)

    def test_carries_argument_name(self) -> None:
        err = ArgumentMissingError("formatter")
        assert err.argument_name == "formatter"
        assert err.code == "argument_missing"
        assert err.to_dict()["detail"] == {"argument": "formatter"}
        assert "formatter" in err.message

    def test_custom_message(self) -> None:
        assert ArgumentMissingError("x", "need x").message == "need x"

    def test_catchable_as_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise ArgumentMissingError("provider")
