"""Emission driver.

Turns a DeclaredIndex into the ordered statement stream (every ``Declare``
first, then every ``Relate`` from resolver passes A, B, C) and renders that
stream through a PlantUMLWriter.
"""

from __future__ import annotations

from collections.abc import Iterator

from typeplane.config.constants import FOOTER_LINES
from typeplane.config.models import DiagramConfig
from typeplane.emit.plantuml import PlantUMLWriter
from typeplane.emit.statements import Declare, Relate, Statement
from typeplane.index import BuildListener, DeclaredIndex
from typeplane.model import FieldDecl, TypeDeclaration, TypeKind
from typeplane.relations import RelationshipResolver, ResolveStats

_VISIBILITY = {
    "public": "+",
    "protected": "#",
    "private": "-",
}

_DIRECTIONS = {
    "left_to_right": "left to right direction",
    "top_to_bottom": "top to bottom direction",
}


# Fields of these kinds are implicitly public static final
_CONSTANT_OWNERS = frozenset({TypeKind.INTERFACE, TypeKind.ANNOTATION})


def _field_line(fd: FieldDecl, owner_kind: TypeKind = TypeKind.CLASS) -> str:
    implicit = owner_kind in _CONSTANT_OWNERS
    default = "+" if implicit else "~"
    visibility = next((_VISIBILITY[m] for m in fd.modifiers if m in _VISIBILITY), default)
    markers = ""
    if implicit or fd.is_static:
        markers += "{static} "
    if implicit or fd.is_final:
        markers += "{final} "
    return f"{markers}{visibility}{fd.name} : {fd.type_name}"


def member_lines(td: TypeDeclaration) -> tuple[str, ...]:
    """Member lines shown inside a type block, in declaration order."""
    lines: list[str] = []
    if td.kind is TypeKind.ENUM:
        lines.extend(td.constants)
    if td.kind is TypeKind.RECORD:
        lines.extend(f"{c.name} : {c.type_name}" for c in td.components)
    lines.extend(_field_line(fd, td.kind) for fd in td.fields)
    return tuple(lines)


class DiagramDriver:
    """Drives a PlantUMLWriter from a DeclaredIndex.

    Usage::

        driver = DiagramDriver(index, config.diagram)
        with PlantUMLWriter(stream) as writer:
            driver.write(writer)
    """

    def __init__(
        self,
        index: DeclaredIndex,
        config: DiagramConfig | None = None,
        listener: BuildListener | None = None,
    ) -> None:
        self._index = index
        self._config = config or DiagramConfig()
        self._resolver = RelationshipResolver(index, listener)

    @property
    def stats(self) -> ResolveStats:
        return self._resolver.stats

    def declarations(self) -> Iterator[Declare]:
        show_members = self._config.show_members
        for _package, fqn, td in self._index.iter_sorted():
            yield Declare(
                fqn=fqn,
                kind=td.kind,
                rendered_name=self._index.rendered_name(fqn),
                stereotypes=td.annotations,
                members=member_lines(td) if show_members else (),
                abstract=td.is_abstract,
            )

    def relations(self) -> Iterator[Relate]:
        rendered = self._index.rendered_name
        for rel in self._resolver.resolve_all():
            yield Relate(
                relationship=rel,
                source_name=rendered(rel.source),
                target_name=rendered(rel.target),
            )

    def statements(self) -> Iterator[Statement]:
        """Full ordered stream: declarations, then relations."""
        yield from self.declarations()
        yield from self.relations()

    def write(self, writer: PlantUMLWriter) -> int:
        """Render the whole diagram. Returns the number of relation lines."""
        config = self._config
        writer.begin_diagram(config.title)
        if config.hide_empty_members:
            writer.directive("hide empty members")
        if config.theme:
            writer.directive(f"!theme {config.theme}")

        current_package: str | None = None
        for statement in self.declarations():
            package = self._index.package_of[statement.fqn]
            if package != current_package:
                if current_package:
                    writer.end_package(current_package)
                if package:
                    writer.begin_package(package)
                current_package = package
            self._declare(writer, statement)
        if current_package:
            writer.end_package(current_package)

        count = 0
        for relate in self.relations():
            left, arrow, right = relate.line_parts()
            rel = relate.relationship
            writer.connect(left, arrow, right, label=rel.role, stereotypes=rel.stereotypes)
            count += 1

        writer.println()
        writer.directive(_DIRECTIONS[config.direction])
        if config.footer:
            writer.footer(FOOTER_LINES)
        writer.end_diagram(config.title)
        return count

    @staticmethod
    def _declare(writer: PlantUMLWriter, statement: Declare) -> None:
        kind = statement.kind.value
        writer.begin_type(
            kind,
            statement.rendered_name,
            statement.stereotypes,
            abstract=statement.abstract,
        )
        for line in statement.members:
            writer.member(line)
        writer.end_type(kind, statement.rendered_name, abstract=statement.abstract)
