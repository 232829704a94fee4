"""Declared-Type Index.

Builds a global index of every declared type (top-level and nested) keyed
by fully-qualified name, and resolves raw type references against it.

Index shape::

    by_fqn              FQN -> TypeDeclaration
    package_of          FQN -> package of the owning compilation unit
    types_by_package    package -> sorted FQNs (packages sorted by name)
    unique_simple_name  simple name -> FQN, only for non-colliding names

Nested types get ``<owner FQN>.<simple name>``. That is a naming convention
only: ``package_of`` is recorded from the compilation unit, never derived by
splitting the FQN.

Resolution (``resolve_type_name``) is best-effort. It never raises for an
unknown name; it returns ``None`` and the caller drops the edge.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from typeplane.config.constants import NESTED_NAME_SEPARATOR
from typeplane.core.errors import ModelError
from typeplane.core.logging import get_logger

if TYPE_CHECKING:
    from typeplane.index.listener import BuildListener
    from typeplane.model import CompilationUnit, TypeDeclaration

log = get_logger("index")

_ANNOTATION_RE = re.compile(r"@[\w.]+(?:\([^()]*\))?\s*")


def simple_name(name: str) -> str:
    """Last dotted segment of ``name``."""
    return name.rsplit(".", 1)[-1]


def normalize_type_name(raw: str) -> str:
    """Reduce a written type to the name used for index lookups.

    Drops type-use annotations, generic arguments (nested too), array
    brackets, varargs dots and whitespace::

        "java.util.List<Map<K, V>>"  -> "java.util.List"
        "@NonNull Order[]"           -> "Order"
        "Outer . Inner..."           -> "Outer.Inner"
    """
    text = _ANNOTATION_RE.sub("", raw)

    out: list[str] = []
    depth = 0
    for ch in text:
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth = max(depth - 1, 0)
        elif depth == 0:
            out.append(ch)

    name = "".join(out)
    if name.endswith("..."):
        name = name[:-3]
    name = name.replace("[", "").replace("]", "")
    return "".join(name.split())


class DeclaredIndex:
    """Read-only index over a set of compilation units.

    Build with ``build_index``; the mappings are exposed as read-only views.
    """

    def __init__(
        self,
        by_fqn: dict[str, TypeDeclaration],
        package_of: dict[str, str],
        types_by_package: dict[str, tuple[str, ...]],
        unique_simple_name: dict[str, str],
        duplicates: tuple[str, ...] = (),
    ) -> None:
        self._by_fqn = by_fqn
        self._package_of = package_of
        self._types_by_package = types_by_package
        self._unique_simple_name = unique_simple_name
        self._duplicates = duplicates

    @property
    def by_fqn(self) -> Mapping[str, TypeDeclaration]:
        return MappingProxyType(self._by_fqn)

    @property
    def package_of(self) -> Mapping[str, str]:
        return MappingProxyType(self._package_of)

    @property
    def types_by_package(self) -> Mapping[str, tuple[str, ...]]:
        return MappingProxyType(self._types_by_package)

    @property
    def unique_simple_name(self) -> Mapping[str, str]:
        return MappingProxyType(self._unique_simple_name)

    @property
    def duplicates(self) -> tuple[str, ...]:
        """FQNs declared more than once (the last declaration was kept)."""
        return self._duplicates

    def __len__(self) -> int:
        return len(self._by_fqn)

    def __contains__(self, fqn: object) -> bool:
        return fqn in self._by_fqn

    def iter_sorted(self) -> Iterable[tuple[str, str, TypeDeclaration]]:
        """Yield ``(package, fqn, declaration)`` in package order, then FQN order."""
        for package, fqns in self._types_by_package.items():
            for fqn in fqns:
                yield package, fqn, self._by_fqn[fqn]

    def resolve_type_name(self, owner_package: str, raw_name: str | None) -> str | None:
        """Resolve a raw type reference to an indexed FQN.

        Order, first hit wins:

        1. a dotted name that is itself an indexed FQN
        2. ``owner_package + "." + simple name`` (same package shadows the rest)
        3. the unique simple-name table
        """
        if raw_name is None:
            return None
        name = normalize_type_name(raw_name)
        if not name:
            return None

        if "." in name and name in self._by_fqn:
            return name

        simple = simple_name(name)
        same_package = f"{owner_package}.{simple}" if owner_package else simple
        if same_package in self._by_fqn:
            return same_package

        return self._unique_simple_name.get(simple)

    def owner_of(self, fqn: str) -> str | None:
        """Enclosing declared type of ``fqn``, or None for top-level types."""
        prefix, dot, _ = fqn.rpartition(".")
        if not dot:
            return None
        return prefix if prefix in self._by_fqn else None

    def rendered_name(self, fqn: str) -> str:
        """Diagram identifier: ``Outer_Inner`` style for nested types, FQN otherwise."""
        owner = self.owner_of(fqn)
        if owner is None:
            return fqn
        return f"{owner}{NESTED_NAME_SEPARATOR}{simple_name(fqn)}"


def build_index(
    units: Iterable[CompilationUnit],
    listener: BuildListener | None = None,
) -> DeclaredIndex:
    """Index every declaration in ``units``.

    Nested declarations are collected with an explicit worklist, so
    nesting depth is not bounded by the interpreter stack. A repeated FQN
    overwrites the earlier declaration (last write wins) and is reported
    in ``DeclaredIndex.duplicates``.

    Raises:
        ModelError: a unit without a package association.
    """
    by_fqn: dict[str, TypeDeclaration] = {}
    package_of: dict[str, str] = {}
    duplicates: list[str] = []

    for unit in units:
        if unit.package is None:
            raise ModelError.missing_package(unit.path)
        package = unit.package
        if listener is not None:
            listener.on_unit(unit)

        # (owner FQN or None, declaration); reversed so pops follow source order
        worklist: list[tuple[str | None, TypeDeclaration]] = [
            (None, td) for td in reversed(unit.types)
        ]
        while worklist:
            owner_fqn, td = worklist.pop()
            if owner_fqn is not None:
                fqn = f"{owner_fqn}.{td.name}"
            else:
                fqn = f"{package}.{td.name}" if package else td.name

            if fqn in by_fqn:
                duplicates.append(fqn)
                log.warning("duplicate_fqn", fqn=fqn, path=unit.path)
                # re-insert so iteration order reflects the winning declaration
                del by_fqn[fqn]
            by_fqn[fqn] = td
            package_of[fqn] = package
            if listener is not None:
                listener.on_type(fqn)

            worklist.extend((fqn, nested) for nested in reversed(td.nested))

    grouped: dict[str, list[str]] = {}
    for fqn, package in package_of.items():
        grouped.setdefault(package, []).append(fqn)
    types_by_package = {package: tuple(sorted(grouped[package])) for package in sorted(grouped)}

    seen: dict[str, str] = {}
    ambiguous: set[str] = set()
    for fqn in by_fqn:
        simple = simple_name(fqn)
        if simple in seen:
            ambiguous.add(simple)
        else:
            seen[simple] = fqn
    unique = {name: fqn for name, fqn in seen.items() if name not in ambiguous}

    log.debug(
        "index_built",
        types=len(by_fqn),
        packages=len(types_by_package),
        ambiguous=len(ambiguous),
        duplicates=len(duplicates),
    )
    return DeclaredIndex(
        by_fqn=by_fqn,
        package_of=package_of,
        types_by_package=types_by_package,
        unique_simple_name=unique,
        duplicates=tuple(dict.fromkeys(duplicates)),
    )
