"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TYPEPLANE__SECTION__KEY)
3. Repo YAML (.typeplane/config.yaml)
4. Global YAML (~/.config/typeplane/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    TYPEPLANE__<SECTION>__<KEY>=<VALUE>

Examples:
    TYPEPLANE__LOGGING__LEVEL=DEBUG
    TYPEPLANE__SOURCE__ROOT=app/src/main/java
    TYPEPLANE__DIAGRAM__DIRECTION=top_to_bottom
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from typeplane.config.constants import DEFAULT_OUTPUT_PATH, DEFAULT_SOURCE_ROOT

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TYPEPLANE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG lists every unresolved type reference.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class SourceConfig(BaseModel):
    """Where sources are discovered.

    Env vars:
        TYPEPLANE__SOURCE__ROOT: Source root, relative to the repository
        TYPEPLANE__SOURCE__EXTENSIONS: JSON list of file extensions
    """

    root: str = Field(
        default=DEFAULT_SOURCE_ROOT,
        description="Source tree to scan. Relative paths resolve against the repo root.",
    )
    extensions: list[str] = Field(
        default_factory=lambda: [".java"],
        description="File extensions treated as sources.",
    )
    exclude_dirs: list[str] = Field(
        default_factory=list,
        description="Directory names pruned in addition to the built-in build/cache dirs.",
    )
    include_dirs: list[str] = Field(
        default_factory=list,
        description="Built-in pruned directory names to scan anyway (e.g. 'out').",
    )

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: list[str]) -> list[str]:
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                raise ValueError("Empty file extension")
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized


class DiagramConfig(BaseModel):
    """Diagram rendering options.

    Env vars:
        TYPEPLANE__DIAGRAM__OUTPUT: Output .puml path
        TYPEPLANE__DIAGRAM__TITLE: Diagram name after @startuml
        TYPEPLANE__DIAGRAM__THEME: PlantUML theme, e.g. blueprint
        TYPEPLANE__DIAGRAM__DIRECTION: left_to_right or top_to_bottom
    """

    output: str = Field(
        default=DEFAULT_OUTPUT_PATH,
        description="Where the .puml file is written.",
    )
    title: str | None = Field(
        default=None,
        description="Name written after @startuml. Omitted when unset.",
    )
    theme: str | None = Field(
        default=None,
        description="PlantUML theme name (!theme <name>).",
    )
    hide_empty_members: bool = Field(
        default=True,
        description="Emit 'hide empty members'.",
    )
    direction: Literal["left_to_right", "top_to_bottom"] = Field(
        default="left_to_right",
        description="Layout direction directive.",
    )
    show_members: bool = Field(
        default=True,
        description="Render fields, record components and enum constants inside type blocks.",
    )
    footer: bool = Field(
        default=True,
        description="Emit the generator footer.",
    )


class TypePlaneConfig(BaseModel):
    """Root configuration for TypePlane.

    All settings can be configured via:
    1. Environment variables: TYPEPLANE__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    diagram: DiagramConfig = Field(default_factory=DiagramConfig)
