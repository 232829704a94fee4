"""Relationship resolution over a built DeclaredIndex.

Three passes, always run in this order:

- Pass A (``inheritance``): extends and implements edges
- Pass B (``nesting``): owner +-- nested edges, re-derived from FQN shape
- Pass C (``associations``): field and record-component associations

Every pass visits types package by package in the index's sorted order
and by sorted FQN inside a package, so the same input always yields the
same edge sequence. Names that do not resolve to an indexed type are
dropped; self edges are never produced.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from typeplane.core.errors import InternalError
from typeplane.core.logging import get_logger
from typeplane.index import BuildListener, DeclaredIndex
from typeplane.model import TypeDeclaration, TypeKind
from typeplane.relations.models import RelationKind, Relationship

log = get_logger("relations")

_INHERITING_KINDS = frozenset({TypeKind.CLASS, TypeKind.INTERFACE, TypeKind.ENUM})
_FIELD_OWNER_KINDS = frozenset({TypeKind.CLASS, TypeKind.INTERFACE, TypeKind.ENUM})


@dataclass
class PassStats:
    """Counters for one resolver pass."""

    resolved: int = 0
    unresolved: int = 0
    self_skipped: int = 0


@dataclass
class ResolveStats:
    """Statistics from a resolver run."""

    inheritance: PassStats = field(default_factory=PassStats)
    nesting: PassStats = field(default_factory=PassStats)
    associations: PassStats = field(default_factory=PassStats)

    @property
    def edges(self) -> int:
        return self.inheritance.resolved + self.nesting.resolved + self.associations.resolved


class RelationshipResolver:
    """Derives structural relationships between indexed types.

    Usage::

        resolver = RelationshipResolver(index)
        for rel in resolver.resolve_all():
            ...
        resolver.stats.edges
    """

    def __init__(self, index: DeclaredIndex, listener: BuildListener | None = None) -> None:
        self._index = index
        self._listener = listener
        self.stats = ResolveStats()

    def resolve_all(self) -> Iterator[Relationship]:
        """Passes A, B and C chained in that order."""
        yield from self.inheritance()
        yield from self.nesting()
        yield from self.associations()

    # ------------------------------------------------------------------
    # Pass A
    # ------------------------------------------------------------------

    def inheritance(self) -> Iterator[Relationship]:
        stats = self.stats.inheritance
        for package, fqn, td in self._index.iter_sorted():
            if td.kind not in _INHERITING_KINDS:
                continue

            if td.kind is not TypeKind.ENUM:
                for raw in td.supertypes:
                    rel = self._edge(package, fqn, raw, RelationKind.EXTENDS, stats)
                    if rel is not None:
                        yield rel

            for raw in td.interfaces:
                rel = self._edge(package, fqn, raw, RelationKind.IMPLEMENTS, stats)
                if rel is not None:
                    yield rel

    # ------------------------------------------------------------------
    # Pass B
    # ------------------------------------------------------------------

    def nesting(self) -> Iterator[Relationship]:
        stats = self.stats.nesting
        for _package, fqn, _td in self._index.iter_sorted():
            owner = self._index.owner_of(fqn)
            if owner is None:
                continue
            stats.resolved += 1
            rel = Relationship(source=owner, target=fqn, kind=RelationKind.OWNS)
            if self._listener is not None:
                self._listener.on_relationship(rel)
            yield rel

    # ------------------------------------------------------------------
    # Pass C
    # ------------------------------------------------------------------

    def associations(self) -> Iterator[Relationship]:
        stats = self.stats.associations
        for package, fqn, td in self._index.iter_sorted():
            for role, raw, stereotypes in self._structural_members(td):
                rel = self._edge(
                    package,
                    fqn,
                    raw,
                    RelationKind.ASSOCIATES,
                    stats,
                    role=role,
                    stereotypes=stereotypes,
                )
                if rel is not None:
                    yield rel

    @staticmethod
    def _structural_members(
        td: TypeDeclaration,
    ) -> list[tuple[str, str, tuple[str, ...]]]:
        """(role, raw type, stereotypes) for the members that carry structural state."""
        if td.kind is TypeKind.RECORD:
            return [(c.name, c.type_name, c.annotations) for c in td.components]
        if td.kind in _FIELD_OWNER_KINDS:
            return [(f.name, f.type_name, f.annotations) for f in td.fields]
        if td.kind is TypeKind.ANNOTATION:
            return []
        raise InternalError.unexpected("unhandled declaration kind", kind=str(td.kind))

    # ------------------------------------------------------------------

    def _edge(
        self,
        package: str,
        fqn: str,
        raw: str,
        kind: RelationKind,
        stats: PassStats,
        *,
        role: str | None = None,
        stereotypes: tuple[str, ...] = (),
    ) -> Relationship | None:
        target = self._index.resolve_type_name(package, raw)
        if target is None:
            stats.unresolved += 1
            log.debug("unresolved_type", source=fqn, raw=raw, kind=kind.value)
            return None
        if target == fqn:
            stats.self_skipped += 1
            return None
        stats.resolved += 1
        rel = Relationship(
            source=fqn,
            target=target,
            kind=kind,
            role=role,
            stereotypes=stereotypes,
        )
        if self._listener is not None:
            self._listener.on_relationship(rel)
        return rel
