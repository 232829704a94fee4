"""Declared-Type Index exports."""

from typeplane.index.declared import (
    DeclaredIndex,
    build_index,
    normalize_type_name,
    simple_name,
)
from typeplane.index.listener import BuildListener, Dashboard, NullListener

__all__ = [
    "BuildListener",
    "Dashboard",
    "DeclaredIndex",
    "NullListener",
    "build_index",
    "normalize_type_name",
    "simple_name",
]
