"""Type Declaration Model exports."""

from typeplane.model.declarations import (
    CompilationUnit,
    FieldDecl,
    RecordComponent,
    TypeDeclaration,
    TypeKind,
)

__all__ = [
    "CompilationUnit",
    "FieldDecl",
    "RecordComponent",
    "TypeDeclaration",
    "TypeKind",
]
