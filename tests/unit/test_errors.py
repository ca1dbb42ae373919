"""Tests for error_handler and custom exceptions."""

from __future__ import annotations

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from aml_models.core.errors import (
    AmlModelsError,
    ConfigurationError,
    MalformedPayloadError,
    PagingError,
    UnknownEnumError,
    UnknownModelError,
    error_handler,
)


class _Shape(BaseModel):
    name: str
    count: int


def _validation_error() -> PydanticValidationError:
    try:
        _Shape.model_validate({"count": "many"})
    except PydanticValidationError as exc:
        return exc
    raise AssertionError("expected a validation error")


class TestExceptionHierarchy:
    def test_base_error(self):
        exc = AmlModelsError("test")
        assert str(exc) == "test"
        assert exc.exit_code == 1

    def test_malformed_payload_error(self):
        exc = MalformedPayloadError("Compute", "bad shape")
        assert isinstance(exc, AmlModelsError)
        assert exc.exit_code == 2
        assert str(exc) == "Malformed Compute payload: bad shape"
        assert exc.errors == []

    def test_unknown_model_error(self):
        exc = UnknownModelError("missing")
        assert isinstance(exc, AmlModelsError)
        assert exc.exit_code == 4

    def test_unknown_enum_error(self):
        exc = UnknownEnumError("missing")
        assert isinstance(exc, AmlModelsError)
        assert exc.exit_code == 4

    def test_paging_error(self):
        exc = PagingError("loop")
        assert isinstance(exc, AmlModelsError)
        assert exc.exit_code == 5

    def test_configuration_error(self):
        exc = ConfigurationError("bad toml")
        assert isinstance(exc, AmlModelsError)
        assert exc.exit_code == 6


class TestFromValidationError:
    def test_lists_every_location(self):
        exc = MalformedPayloadError.from_validation_error("Shape", _validation_error())
        message = str(exc)
        assert message.startswith("Malformed Shape payload: ")
        assert "name: Field required" in message
        assert "count:" in message
        assert len(exc.errors) == 2

    def test_errors_have_no_urls(self):
        exc = MalformedPayloadError.from_validation_error("Shape", _validation_error())
        assert all("url" not in err for err in exc.errors)


class TestErrorHandler:
    def test_catches_paging_error(self):
        @error_handler
        def raises_paging():
            raise PagingError("cycle")

        with pytest.raises(SystemExit) as exc_info:
            raises_paging()
        assert exc_info.value.code == 5

    def test_catches_configuration_error(self):
        @error_handler
        def raises_config():
            raise ConfigurationError("bad value")

        with pytest.raises(SystemExit) as exc_info:
            raises_config()
        assert exc_info.value.code == 6

    def test_catches_value_error(self):
        @error_handler
        def raises_value():
            raise ValueError("unknown domain")

        with pytest.raises(SystemExit) as exc_info:
            raises_value()
        assert exc_info.value.code == 1

    def test_message_with_brackets_is_not_markup(self):
        @error_handler
        def raises_bracketed():
            raise MalformedPayloadError("Compute", "value[0]: [bold]oops")

        with pytest.raises(SystemExit) as exc_info:
            raises_bracketed()
        assert exc_info.value.code == 2

    def test_passes_through_normal_return(self):
        @error_handler
        def returns_value():
            return 42

        assert returns_value() == 42

    def test_does_not_catch_other_exceptions(self):
        @error_handler
        def raises_type_error():
            raise TypeError("bad type")

        with pytest.raises(TypeError):
            raises_type_error()
