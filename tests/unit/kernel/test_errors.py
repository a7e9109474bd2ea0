"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from mp_flags.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from mp_flags.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    FlagFormatError,
    InvalidArgumentError,
    ValidationError,
)


class TestBaseError:
    def test_message_and_default_code(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert err.code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestInvalidArgumentError:
    def test_hierarchy(self) -> None:
        err = InvalidArgumentError("name", "cannot be None")
        assert isinstance(err, ValidationError)
        assert isinstance(err, DomainError)
        assert isinstance(err, BaseError)

    def test_fields(self) -> None:
        err = InvalidArgumentError("value", "cannot be None")
        assert err.code == "invalid_argument"
        assert err.argument == "value"
        assert err.message == "Argument 'value' cannot be None"
        assert err.to_dict()["errors"] == [{"field": "value", "reason": "cannot be None"}]


class TestFlagFormatError:
    def test_wraps_cause(self) -> None:
        try:
            int("abc")
        except ValueError as exc:
            err = FlagFormatError("max_users", cause=exc)
        assert err.code == "flag_format_error"
        assert err.flag_name == "max_users"
        assert isinstance(err.cause, ValueError)
        assert err.__cause__ is err.cause
        assert err.detail == {"flag": "max_users"}

    def test_is_domain_error(self) -> None:
        assert isinstance(FlagFormatError("f"), DomainError)


class TestConfigErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(ConfigError, ApplicationError)
        assert issubclass(MissingRequiredSettingError, ConfigError)

    def test_missing_required(self) -> None:
        err = MissingRequiredSettingError("FLAGS_DATABASE_URL")
        assert err.setting_name == "FLAGS_DATABASE_URL"
        assert "FLAGS_DATABASE_URL" in err.message

    def test_invalid_value(self) -> None:
        err = InvalidSettingValueError("table_name", "", "must not be empty")
        assert err.code == "invalid_setting_value"
        assert err.detail == {"setting": "table_name", "reason": "must not be empty"}

    def test_raise_and_catch_as_base(self) -> None:
        with pytest.raises(BaseError):
            raise MissingRequiredSettingError("X")
