"""Java declaration extraction via Tree-sitter.

Produces the Type Declaration Model from Java source: package, type
declarations (class, interface, enum, record, annotation) with their
nested declarations, raw supertype/interface names, fields, record
components, enum constants, modifiers and annotations.

Only declarations are read. Method bodies, imports and expressions are
ignored; raw type names are kept exactly as written.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import tree_sitter
import tree_sitter_java

from typeplane.core.errors import ParseError, TypePlaneError
from typeplane.core.logging import get_logger
from typeplane.core.progress import progress
from typeplane.model import (
    CompilationUnit,
    FieldDecl,
    RecordComponent,
    TypeDeclaration,
    TypeKind,
)

log = get_logger("parsing.java")

_DECLARATION_KINDS: dict[str, TypeKind] = {
    "class_declaration": TypeKind.CLASS,
    "interface_declaration": TypeKind.INTERFACE,
    "enum_declaration": TypeKind.ENUM,
    "record_declaration": TypeKind.RECORD,
    "annotation_type_declaration": TypeKind.ANNOTATION,
}

# Member declarations that hold state, per body node type
_FIELD_NODES = frozenset({"field_declaration", "constant_declaration"})

_ANNOTATION_NODES = frozenset({"marker_annotation", "annotation"})


def _text(node: Any) -> str:
    return node.text.decode("utf-8", errors="replace") if node is not None and node.text else ""


def _compact(node: Any) -> str:
    """Node text with whitespace collapsed, e.g. for ``a . b . C``."""
    return " ".join(_text(node).split())


class JavaDeclarationParser:
    """Extracts a CompilationUnit from Java source.

    Usage::

        parser = JavaDeclarationParser()
        unit = parser.parse(source_bytes, path="src/main/java/p/A.java")
        unit = parser.parse_file(Path("A.java"))
    """

    def __init__(self) -> None:
        self._language = tree_sitter.Language(tree_sitter_java.language())
        self._parser = tree_sitter.Parser()
        self._parser.language = self._language

    def parse_file(self, path: Path) -> CompilationUnit:
        """Read and parse one file.

        Raises:
            ParseError: the file cannot be read or is not text.
        """
        try:
            content = path.read_bytes()
        except OSError as e:
            raise ParseError.unreadable(str(path), str(e)) from e
        if b"\x00" in content:
            raise ParseError.unsupported(str(path))
        return self.parse(content, path=str(path))

    def parse(self, content: bytes | str, path: str | None = None) -> CompilationUnit:
        """Parse source text. Tree-sitter recovers from syntax errors, so
        partially broken files still yield whatever declarations survive.
        """
        if isinstance(content, str):
            content = content.encode("utf-8")
        tree = self._parser.parse(content)
        root = tree.root_node
        if root.has_error:
            log.debug("syntax_errors_recovered", path=path)

        package = ""
        types: list[TypeDeclaration] = []
        for child in root.named_children:
            if child.type == "package_declaration":
                package = self._package_name(child)
            elif child.type in _DECLARATION_KINDS:
                td = self._declaration(child)
                if td is not None:
                    types.append(td)

        return CompilationUnit(package=package, types=tuple(types), path=path)

    # ------------------------------------------------------------------

    @staticmethod
    def _package_name(node: Any) -> str:
        for child in node.named_children:
            if child.type in ("scoped_identifier", "identifier"):
                return _compact(child).replace(" ", "")
        return ""

    def _declaration(self, node: Any) -> TypeDeclaration | None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None
        kind = _DECLARATION_KINDS[node.type]
        modifiers, annotations = self._modifiers(node)
        body = node.child_by_field_name("body")

        supertypes: list[str] = []
        interfaces: list[str] = []
        if kind is TypeKind.CLASS:
            superclass = node.child_by_field_name("superclass")
            if superclass is not None:
                supertypes.extend(_compact(t) for t in superclass.named_children)
            interfaces.extend(self._type_list(node.child_by_field_name("interfaces")))
        elif kind is TypeKind.INTERFACE:
            for child in node.named_children:
                if child.type == "extends_interfaces":
                    supertypes.extend(self._type_list(child))
        elif kind in (TypeKind.ENUM, TypeKind.RECORD):
            interfaces.extend(self._type_list(node.child_by_field_name("interfaces")))

        components: tuple[RecordComponent, ...] = ()
        if kind is TypeKind.RECORD:
            components = self._components(node.child_by_field_name("parameters"))

        members = self._body_members(body)
        constants: tuple[str, ...] = ()
        if kind is TypeKind.ENUM and body is not None:
            constants = tuple(
                _text(c.child_by_field_name("name"))
                for c in body.named_children
                if c.type == "enum_constant"
            )

        fields: list[FieldDecl] = []
        nested: list[TypeDeclaration] = []
        for member in members:
            if member.type in _FIELD_NODES:
                fields.extend(self._fields(member))
            elif member.type in _DECLARATION_KINDS:
                td = self._declaration(member)
                if td is not None:
                    nested.append(td)

        return TypeDeclaration(
            name=_text(name_node),
            kind=kind,
            supertypes=tuple(supertypes),
            interfaces=tuple(interfaces),
            fields=tuple(fields),
            components=components,
            constants=constants,
            nested=tuple(nested),
            modifiers=modifiers,
            annotations=annotations,
        )

    @staticmethod
    def _body_members(body: Any) -> list[Any]:
        """Member nodes of a type body; enum bodies keep them after the constants."""
        if body is None:
            return []
        members: list[Any] = []
        for child in body.named_children:
            if child.type == "enum_body_declarations":
                members.extend(child.named_children)
            else:
                members.append(child)
        return members

    @staticmethod
    def _type_list(node: Any) -> list[str]:
        if node is None:
            return []
        names: list[str] = []
        for child in node.named_children:
            if child.type == "type_list":
                names.extend(_compact(t) for t in child.named_children)
        return names

    @staticmethod
    def _modifiers(node: Any) -> tuple[tuple[str, ...], tuple[str, ...]]:
        """(keyword modifiers, annotation simple names) of a declaration."""
        keywords: list[str] = []
        annotations: list[str] = []
        for child in node.children:
            if child.type != "modifiers":
                continue
            for mod in child.children:
                if mod.type in _ANNOTATION_NODES:
                    name = _compact(mod.child_by_field_name("name")).replace(" ", "")
                    if name:
                        annotations.append(name.rsplit(".", 1)[-1])
                elif not mod.is_named:
                    keywords.append(mod.type)
        return tuple(keywords), tuple(annotations)

    def _fields(self, node: Any) -> list[FieldDecl]:
        type_text = _compact(node.child_by_field_name("type"))
        modifiers, annotations = self._modifiers(node)
        fields: list[FieldDecl] = []
        for declarator in node.children_by_field_name("declarator"):
            name = _text(declarator.child_by_field_name("name"))
            if not name:
                continue
            dims = _compact(declarator.child_by_field_name("dimensions")).replace(" ", "")
            fields.append(
                FieldDecl(
                    name=name,
                    type_name=type_text + dims,
                    modifiers=modifiers,
                    annotations=annotations,
                )
            )
        return fields

    def _components(self, node: Any) -> tuple[RecordComponent, ...]:
        if node is None:
            return ()
        components: list[RecordComponent] = []
        for param in node.named_children:
            _modifiers, annotations = self._modifiers(param)
            if param.type == "formal_parameter":
                name = _text(param.child_by_field_name("name"))
                type_text = _compact(param.child_by_field_name("type"))
                dims = _compact(param.child_by_field_name("dimensions")).replace(" ", "")
                type_text += dims
            elif param.type == "spread_parameter":
                type_node = next(
                    (
                        c
                        for c in param.named_children
                        if c.type not in ("modifiers", "variable_declarator")
                    ),
                    None,
                )
                declarator = next(
                    (c for c in param.named_children if c.type == "variable_declarator"),
                    None,
                )
                name = _text(declarator.child_by_field_name("name")) if declarator else ""
                type_text = _compact(type_node) + "..."
            else:
                continue
            if name and type_text:
                components.append(
                    RecordComponent(name=name, type_name=type_text, annotations=annotations)
                )
        return tuple(components)


def parse_paths(
    paths: Iterable[Path],
    parser: JavaDeclarationParser | None = None,
) -> tuple[list[CompilationUnit], list[Path]]:
    """Parse every path, skipping files that cannot be read or modelled.

    Returns:
        (units, skipped paths)
    """
    parser = parser or JavaDeclarationParser()
    units: list[CompilationUnit] = []
    skipped: list[Path] = []
    for path in progress(paths, desc="Parsing", unit="files"):
        try:
            unit = parser.parse_file(path)
        except TypePlaneError as e:
            log.warning("source_skipped", path=str(path), error=e.error_name, reason=e.message)
            skipped.append(path)
            continue
        units.append(unit)
    return units, skipped
