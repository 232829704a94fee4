"""Config module exports."""

from typeplane.config.loader import TypePlaneSettings, load_config
from typeplane.config.models import (
    DiagramConfig,
    LoggingConfig,
    SourceConfig,
    TypePlaneConfig,
)

__all__ = [
    "load_config",
    "TypePlaneConfig",
    "TypePlaneSettings",
    "DiagramConfig",
    "LoggingConfig",
    "SourceConfig",
]
