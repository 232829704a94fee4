"""Core module exports."""

from typeplane.core.errors import (
    ConfigError,
    EmitError,
    ErrorCode,
    InternalError,
    ModelError,
    ParseError,
    TypePlaneError,
)
from typeplane.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from typeplane.core.progress import progress, status, task

__all__ = [
    # Errors
    "TypePlaneError",
    "ConfigError",
    "EmitError",
    "ErrorCode",
    "InternalError",
    "ModelError",
    "ParseError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Progress
    "progress",
    "status",
    "task",
]
