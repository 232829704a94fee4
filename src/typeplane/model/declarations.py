"""Type Declaration Model.

The already-parsed view of a source tree that the index consumes: one
``CompilationUnit`` per source file, each holding a tree of
``TypeDeclaration`` values. Type names on declarations are raw strings
exactly as written (possibly unqualified, generic or array-suffixed);
resolving them is the index's job.

``TypeDeclaration`` is a tagged variant: ``kind`` selects which payload
fields may be populated, and ``__post_init__`` rejects payloads the kind
cannot carry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NoReturn

from typeplane.core.errors import ModelError


class TypeKind(str, Enum):
    """Declaration kinds."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    RECORD = "record"
    ANNOTATION = "annotation"


@dataclass(frozen=True, slots=True)
class FieldDecl:
    """One declared field (one per variable declarator)."""

    name: str
    type_name: str
    modifiers: tuple[str, ...] = ()
    annotations: tuple[str, ...] = ()

    @property
    def is_static(self) -> bool:
        return "static" in self.modifiers

    @property
    def is_final(self) -> bool:
        return "final" in self.modifiers


@dataclass(frozen=True, slots=True)
class RecordComponent:
    """A positional record component."""

    name: str
    type_name: str
    annotations: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TypeDeclaration:
    """A declared class, interface, enum, record or annotation type.

    Payload by kind:

    - class: ``supertypes`` (0..1), ``interfaces``, ``fields``
    - interface: ``supertypes`` (extended interfaces), ``fields`` (constants)
    - enum: ``interfaces``, ``fields``, ``constants``
    - record: ``interfaces``, ``components`` (``fields`` may hold statics)
    - annotation: ``fields`` (constants) only
    """

    name: str
    kind: TypeKind
    supertypes: tuple[str, ...] = ()
    interfaces: tuple[str, ...] = ()
    fields: tuple[FieldDecl, ...] = ()
    components: tuple[RecordComponent, ...] = ()
    constants: tuple[str, ...] = ()
    nested: tuple[TypeDeclaration, ...] = ()
    modifiers: tuple[str, ...] = ()
    annotations: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.name or "." in self.name or self.name != self.name.strip():
            raise ModelError.invalid_declaration(self.name, "name must be a simple identifier")

        try:
            kind = TypeKind(self.kind)
        except ValueError:
            self._reject(f"unknown kind {self.kind!r}")
        object.__setattr__(self, "kind", kind)

        if kind is TypeKind.CLASS:
            if len(self.supertypes) > 1:
                self._reject("a class extends at most one type")
        elif kind is TypeKind.INTERFACE:
            if self.interfaces:
                self._reject("an interface extends, it does not implement")
        elif kind is TypeKind.ENUM:
            if self.supertypes:
                self._reject("an enum cannot extend a type")
        elif kind is TypeKind.RECORD:
            if self.supertypes:
                self._reject("a record cannot extend a type")
            if any(not fd.is_static for fd in self.fields):
                self._reject("record state is declared by components, fields must be static")
        elif kind is TypeKind.ANNOTATION:
            if self.supertypes or self.interfaces:
                self._reject("an annotation type has no supertypes")

        if self.components and kind is not TypeKind.RECORD:
            self._reject("only records declare components")
        if self.constants and kind is not TypeKind.ENUM:
            self._reject("only enums declare constants")

    def _reject(self, reason: str) -> NoReturn:
        raise ModelError.invalid_declaration(self.name, reason)

    @property
    def is_abstract(self) -> bool:
        return self.kind is TypeKind.CLASS and "abstract" in self.modifiers


@dataclass(frozen=True, slots=True)
class CompilationUnit:
    """One parsed source file.

    ``package`` is ``""`` for the default package. ``None`` means the
    producer lost the package association, which the index rejects.
    """

    package: str | None
    types: tuple[TypeDeclaration, ...] = ()
    path: str | None = field(default=None, compare=False)
