"""TypePlane error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Model / parsing
- 4xxx: Emission
- 9xxx: Internal

Unresolved type references are not errors. They drop the relationship
edge and never surface here.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Model / parsing (3xxx)
    MODEL_MISSING_PACKAGE = 3001
    MODEL_INVALID_DECLARATION = 3002
    PARSE_UNREADABLE = 3101
    PARSE_UNSUPPORTED = 3102

    # Emission (4xxx)
    EMIT_UNBALANCED_BLOCK = 4001
    EMIT_UNCLOSED_BLOCKS = 4002

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class TypePlaneError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TypePlaneError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class ModelError(TypePlaneError):
    """Malformed declaration model handed to the index."""

    @classmethod
    def missing_package(cls, path: str | None) -> "ModelError":
        where = path or "<unknown source>"
        return cls(
            code=ErrorCode.MODEL_MISSING_PACKAGE,
            message=f"Compilation unit has no package association: {where}",
            details={"path": where},
        )

    @classmethod
    def invalid_declaration(cls, name: str, reason: str) -> "ModelError":
        return cls(
            code=ErrorCode.MODEL_INVALID_DECLARATION,
            message=f"Invalid type declaration '{name}': {reason}",
            details={"name": name, "reason": reason},
        )


class ParseError(TypePlaneError):
    """Source files that cannot be turned into a compilation unit."""

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "ParseError":
        return cls(
            code=ErrorCode.PARSE_UNREADABLE,
            message=f"Cannot read source file {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def unsupported(cls, path: str) -> "ParseError":
        return cls(
            code=ErrorCode.PARSE_UNSUPPORTED,
            message=f"Unsupported source file: {path}",
            details={"path": path},
        )


class EmitError(TypePlaneError):
    """Block discipline violations in the diagram sink."""

    @classmethod
    def unbalanced_block(cls, expected: str | None, got: str) -> "EmitError":
        return cls(
            code=ErrorCode.EMIT_UNBALANCED_BLOCK,
            message=f"Cannot close {got}: innermost open block is {expected or 'none'}",
            details={"expected": expected, "got": got},
        )

    @classmethod
    def unclosed_blocks(cls, open_blocks: list[str]) -> "EmitError":
        return cls(
            code=ErrorCode.EMIT_UNCLOSED_BLOCKS,
            message=f"Writer closed with open blocks: {', '.join(open_blocks)}",
            details={"open_blocks": open_blocks},
        )


class InternalError(TypePlaneError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
