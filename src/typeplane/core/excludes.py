"""Directories skipped while walking a source tree.

Tier 0 (HARDCODED_DIRS): never traversed, not configurable.
Tier 1 (DEFAULT_PRUNABLE_DIRS): build outputs and caches of the JVM
toolchains; users may re-include one by listing it in
``source.include_dirs``.
"""

from __future__ import annotations

HARDCODED_DIRS: frozenset[str] = frozenset(
    (
        # VCS internals
        ".git",
        ".svn",
        ".hg",
        ".bzr",
        # TypePlane data
        ".typeplane",
    )
)

DEFAULT_PRUNABLE_DIRS: frozenset[str] = frozenset(
    (
        # JVM build tools
        ".gradle",
        ".m2",
        "target",
        "build",
        "out",
        "bin",
        # Scala / Kotlin tooling
        ".bsp",
        ".metals",
        ".bloop",
        ".kotlin",
        # IDE/Editor directories
        ".idea",
        ".vscode",
        ".settings",
        # Generic
        "node_modules",
        "dist",
        ".cache",
        "tmp",
    )
)

PRUNABLE_DIRS: frozenset[str] = HARDCODED_DIRS | DEFAULT_PRUNABLE_DIRS


def is_hardcoded_dir(dirname: str) -> bool:
    """Check if directory is hardcoded (never traversable, not overridable)."""
    return dirname in HARDCODED_DIRS


def is_default_prunable(dirname: str) -> bool:
    """Check if directory is prunable by default (but user can override)."""
    return dirname in DEFAULT_PRUNABLE_DIRS


def pruned_dirs(
    extra: frozenset[str] | set[str] = frozenset(),
    include: frozenset[str] | set[str] = frozenset(),
) -> frozenset[str]:
    """Effective prune set: defaults plus ``extra``, minus re-included names.

    Hardcoded directories stay pruned even when listed in ``include``.
    """
    reincluded = frozenset(include) - HARDCODED_DIRS
    return (PRUNABLE_DIRS | frozenset(extra)) - reincluded
