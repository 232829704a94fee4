"""Relationship model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RelationKind(str, Enum):
    """Structural relationship kinds."""

    EXTENDS = "extends"
    IMPLEMENTS = "implements"
    OWNS = "owns"
    ASSOCIATES = "associates"


# PlantUML arrows, written "<target> <arrow> <source>" for the general end
# first (extends/implements) and "<source> <arrow> <target>" otherwise.
ARROWS: dict[RelationKind, str] = {
    RelationKind.EXTENDS: "<|--",
    RelationKind.IMPLEMENTS: "<|..",
    RelationKind.OWNS: "+--",
    RelationKind.ASSOCIATES: "-->",
}


@dataclass(frozen=True, slots=True)
class Relationship:
    """A directed edge between two indexed types.

    ``source`` is the declaring side: the subtype for extends/implements,
    the owner for owns and associates. ``role`` is the field or component
    name of an association.
    """

    source: str
    target: str
    kind: RelationKind
    role: str | None = None
    stereotypes: tuple[str, ...] = ()

    @property
    def arrow(self) -> str:
        return ARROWS[self.kind]

    @property
    def general_end_first(self) -> bool:
        """True when the diagram line starts at the target (inheritance arrows)."""
        return self.kind in (RelationKind.EXTENDS, RelationKind.IMPLEMENTS)
