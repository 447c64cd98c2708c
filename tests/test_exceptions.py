"""Tests for the exception hierarchy and error formatting."""

import pytest
from pydantic import BaseModel, ValidationError

from chorder.exceptions import (
    CapacityExceededError,
    ChorderError,
    ConfigFileInvalidError,
    ConfigIOError,
    ConfigValidationError,
    ErrorContext,
    SpawnError,
    format_error_for_display,
    wrap_pydantic_error,
)


class _Model(BaseModel):
    count: int
    name: str


def _validation_error(json_text: str) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        _Model.model_validate_json(json_text)
    return exc_info.value


class TestWrapPydanticError:

    @pytest.mark.unit
    def test_invalid_json(self):
        error = wrap_pydantic_error(_validation_error("{"), "/tmp/config.json")
        assert isinstance(error, ConfigFileInvalidError)
        assert error.file_path == "/tmp/config.json"

    @pytest.mark.unit
    def test_single_field(self):
        error = wrap_pydantic_error(_validation_error('{"count": "x", "name": "n"}'), "c.json")
        assert isinstance(error, ConfigValidationError)
        assert error.field == "count"
        assert "c.json" in error.recovery_hint

    @pytest.mark.unit
    def test_multiple_fields(self):
        error = wrap_pydantic_error(_validation_error("{}"), "c.json")
        assert isinstance(error, ConfigValidationError)
        assert error.field == "multiple fields"
        assert "2 validation errors" in error.user_message


class TestFormatting:

    @pytest.mark.unit
    def test_custom_error(self):
        error = CapacityExceededError(page="main", limit=12, actual=13)
        message, hint = format_error_for_display(error)
        assert message == "Page 'main' has 13 options but the grid only has 12 slots"
        assert "Remove 1 option(s)" in hint

    @pytest.mark.unit
    def test_standard_error(self):
        message, hint = format_error_for_display(RuntimeError("boom"))
        assert message == "RuntimeError: boom"
        assert hint is None

    @pytest.mark.unit
    def test_full_message(self):
        error = ConfigIOError("/x/config.json", "write", "Permission denied")
        assert str(error) == "Could not write /x/config.json: Permission denied"
        assert "Suggestion:" in error.get_full_message()

    @pytest.mark.unit
    def test_full_message_without_hint(self):
        error = ChorderError("Something failed")
        assert error.get_full_message() == "Something failed"
        assert error.technical_message == "Something failed"

    @pytest.mark.unit
    def test_spawn_error(self):
        error = SpawnError(["", "s.sh"], "No such file")
        assert isinstance(error, ChorderError)
        assert error.command == ["", "s.sh"]


class TestErrorContext:

    @pytest.mark.unit
    def test_reraises_by_default(self):
        with pytest.raises(ValueError):
            with ErrorContext("do something"):
                raise ValueError("bad")

    @pytest.mark.unit
    def test_can_suppress(self):
        with ErrorContext("do something", re_raise=False) as ctx:
            raise ConfigIOError("p", "read", "gone")
        assert isinstance(ctx.error, ConfigIOError)
