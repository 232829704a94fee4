"""Tests for error types and codes."""

import pytest

from typeplane.core.errors import (
    ConfigError,
    EmitError,
    ErrorCode,
    InternalError,
    ModelError,
    ParseError,
    TypePlaneError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.MODEL_MISSING_PACKAGE, 3000),
            (ErrorCode.PARSE_UNREADABLE, 3000),
            (ErrorCode.EMIT_UNBALANCED_BLOCK, 4000),
            (ErrorCode.INTERNAL_ERROR, 9000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestTypePlaneError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = TypePlaneError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            retryable=True,
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "retryable": True,
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_human_readable(self) -> None:
        """Error string representation is human readable."""
        error = TypePlaneError(code=ErrorCode.INTERNAL_ERROR, message="Something broke")

        assert str(error) == "[9001] INTERNAL_ERROR: Something broke"

    def test_is_raisable(self) -> None:
        """Errors can be raised and caught as exceptions."""
        with pytest.raises(TypePlaneError) as exc_info:
            raise InternalError.unexpected("boom", step="emit")
        assert exc_info.value.details == {"step": "emit"}


class TestFactories:
    """Factory classmethod tests."""

    def test_config_parse_error(self) -> None:
        error = ConfigError.parse_error("/x/config.yaml", "bad indent")
        assert error.code == ErrorCode.CONFIG_PARSE_ERROR
        assert "/x/config.yaml" in error.message
        assert error.details == {"path": "/x/config.yaml", "reason": "bad indent"}

    def test_config_invalid_value(self) -> None:
        error = ConfigError.invalid_value("diagram.direction", "sideways", "not allowed")
        assert error.code == ErrorCode.CONFIG_INVALID_VALUE
        assert error.details["field"] == "diagram.direction"
        assert error.details["value"] == "sideways"

    def test_model_missing_package_names_source(self) -> None:
        error = ModelError.missing_package("src/A.java")
        assert error.code == ErrorCode.MODEL_MISSING_PACKAGE
        assert "src/A.java" in str(error)

    def test_model_missing_package_without_path(self) -> None:
        error = ModelError.missing_package(None)
        assert error.details == {"path": "<unknown source>"}

    def test_model_invalid_declaration(self) -> None:
        error = ModelError.invalid_declaration("Foo", "bad")
        assert error.code == ErrorCode.MODEL_INVALID_DECLARATION
        assert isinstance(error, TypePlaneError)

    def test_parse_unreadable(self) -> None:
        error = ParseError.unreadable("A.java", "permission denied")
        assert error.error_name == "PARSE_UNREADABLE"

    def test_emit_unbalanced_block_without_open_block(self) -> None:
        error = EmitError.unbalanced_block(None, 'class "A"')
        assert "none" in error.message

    def test_emit_unclosed_blocks_lists_blocks(self) -> None:
        error = EmitError.unclosed_blocks(['package "p"', 'class "p.A"'])
        assert error.details["open_blocks"] == ['package "p"', 'class "p.A"']
