"""Statements streamed from the resolver side to the diagram sink."""

from __future__ import annotations

from dataclasses import dataclass

from typeplane.model import TypeKind
from typeplane.relations import RelationKind, Relationship


@dataclass(frozen=True, slots=True)
class Declare:
    """Announce a type before any relation references it."""

    fqn: str
    kind: TypeKind
    rendered_name: str
    stereotypes: tuple[str, ...] = ()
    members: tuple[str, ...] = ()
    abstract: bool = False


@dataclass(frozen=True, slots=True)
class Relate:
    """One relationship, with names already rendered for the diagram."""

    relationship: Relationship
    source_name: str
    target_name: str

    @property
    def kind(self) -> RelationKind:
        return self.relationship.kind

    def line_parts(self) -> tuple[str, str, str]:
        """(left, arrow, right) in diagram order."""
        rel = self.relationship
        if rel.general_end_first:
            return self.target_name, rel.arrow, self.source_name
        return self.source_name, rel.arrow, self.target_name


Statement = Declare | Relate
