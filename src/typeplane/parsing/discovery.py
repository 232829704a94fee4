"""Source discovery.

Walks a source root, pruning VCS, build and cache directories, and returns
the matching files in a stable (sorted) order.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from typeplane.core.excludes import pruned_dirs
from typeplane.core.logging import get_logger

if TYPE_CHECKING:
    from typeplane.index.listener import BuildListener

log = get_logger("discovery")


def discover_sources(
    root: Path,
    *,
    extensions: Iterable[str] = (".java",),
    exclude_dirs: Iterable[str] = (),
    include_dirs: Iterable[str] = (),
    listener: BuildListener | None = None,
) -> list[Path]:
    """Find source files under ``root``.

    A missing root yields an empty list rather than an error, matching a
    project that simply has no sources yet.
    """
    if not root.is_dir():
        log.info("source_root_missing", root=str(root))
        return []

    wanted = {ext.lower() for ext in extensions}
    prune = pruned_dirs(frozenset(exclude_dirs), frozenset(include_dirs))

    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in prune)
        for filename in sorted(filenames):
            if Path(filename).suffix.lower() in wanted:
                found.append(Path(dirpath) / filename)

    found.sort()
    if listener is not None:
        for path in found:
            listener.on_path(path)

    log.debug("sources_discovered", root=str(root), count=len(found))
    return found
