"""Configuration constants.

Values here are not user-configurable. For configurable values, see
models.py (SourceConfig, DiagramConfig, LoggingConfig).
"""

# =============================================================================
# Layout conventions
# =============================================================================
# Borrowed from the Maven source layout and the PlantUML docs folder layout.

DEFAULT_SOURCE_ROOT = "src/main/java"
"""Source root scanned when none is given."""

DEFAULT_OUTPUT_PATH = "docs/diagrams/src/class-diagram.puml"
"""Diagram written when no output path is given."""

TYPEPLANE_DIR = ".typeplane"
"""Per-repository configuration directory."""

# =============================================================================
# Diagram protocol constants
# =============================================================================

INDENT_UNIT = "  "
"""One nesting level in emitted PlantUML."""

BLOCK_MARKER = "@tpl"
"""Tag written into block begin/end comments so tools can find block boundaries."""

NESTED_NAME_SEPARATOR = "_"
"""Joins owner FQN and simple name in rendered names of nested types."""

FOOTER_LINES = (
    "Generated with TypePlane (Java → UML)",
)
"""Footer text when diagram.footer is enabled."""
