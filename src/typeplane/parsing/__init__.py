"""Source discovery and Java declaration extraction."""

from typeplane.parsing.discovery import discover_sources
from typeplane.parsing.java import JavaDeclarationParser, parse_paths

__all__ = [
    "JavaDeclarationParser",
    "discover_sources",
    "parse_paths",
]
