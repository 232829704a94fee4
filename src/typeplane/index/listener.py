"""Build listeners.

A listener is handed explicitly to discovery, ``build_index`` and the
relationship resolver for a single run. Nothing here is process-wide.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from typeplane.core.logging import get_logger
from typeplane.core.progress import status

if TYPE_CHECKING:
    from typeplane.model import CompilationUnit
    from typeplane.relations import Relationship


class BuildListener(Protocol):
    """Receives discovery events as a run progresses."""

    def on_path(self, path: Path) -> None: ...

    def on_unit(self, unit: CompilationUnit) -> None: ...

    def on_type(self, fqn: str) -> None: ...

    def on_relationship(self, relationship: Relationship) -> None: ...


class NullListener:
    """Listener that ignores every event."""

    def on_path(self, path: Path) -> None:
        pass

    def on_unit(self, unit: CompilationUnit) -> None:
        pass

    def on_type(self, fqn: str) -> None:
        pass

    def on_relationship(self, relationship: Relationship) -> None:
        pass


class Dashboard:
    """Counts files, units, types and relationships seen during one run.

    With ``verbose`` every discovery is echoed to the console; otherwise
    events only go to the debug log.
    """

    def __init__(self, *, verbose: bool = False) -> None:
        self.verbose = verbose
        self.file_count = 0
        self.unit_count = 0
        self.type_count = 0
        self.relationship_count = 0
        self._log = get_logger("dashboard")

    def on_path(self, path: Path) -> None:
        self.file_count += 1
        self._report("source_discovered", f"Discovered source file #{self.file_count}: {path}")

    def on_unit(self, unit: CompilationUnit) -> None:
        self.unit_count += 1
        package = unit.package or "(default package)"
        self._report("unit_discovered", f"Discovered unit #{self.unit_count}: {package}")

    def on_type(self, fqn: str) -> None:
        self.type_count += 1
        self._report("type_discovered", f"Discovered type #{self.type_count}: {fqn}")

    def on_relationship(self, relationship: Relationship) -> None:
        self.relationship_count += 1
        self._log.debug(
            "relationship_resolved",
            source=relationship.source,
            target=relationship.target,
            kind=relationship.kind.value,
        )

    def _report(self, event: str, message: str) -> None:
        self._log.debug(event, detail=message)
        if self.verbose:
            status(message, indent=2)

    def __repr__(self) -> str:
        return (
            f"Dashboard(files={self.file_count}, units={self.unit_count}, "
            f"types={self.type_count}, relationships={self.relationship_count})"
        )
