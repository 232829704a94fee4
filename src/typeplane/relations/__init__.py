"""Relationship resolution exports."""

from typeplane.relations.models import ARROWS, RelationKind, Relationship
from typeplane.relations.resolver import PassStats, RelationshipResolver, ResolveStats

__all__ = [
    "ARROWS",
    "PassStats",
    "RelationKind",
    "Relationship",
    "RelationshipResolver",
    "ResolveStats",
]
