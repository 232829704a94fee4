"""Tests for index/listener.py."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from typeplane.index import Dashboard, NullListener, build_index
from typeplane.model import CompilationUnit, TypeDeclaration, TypeKind


class RecordingListener:
    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def on_path(self, path: Path) -> None:
        self.events.append(("path", str(path)))

    def on_unit(self, unit: CompilationUnit) -> None:
        self.events.append(("unit", unit.package or ""))

    def on_type(self, fqn: str) -> None:
        self.events.append(("type", fqn))


def _unit() -> CompilationUnit:
    inner = TypeDeclaration(name="Inner", kind=TypeKind.CLASS)
    outer = TypeDeclaration(name="Outer", kind=TypeKind.CLASS, nested=(inner,))
    other = TypeDeclaration(name="Other", kind=TypeKind.INTERFACE)
    return CompilationUnit(package="p", types=(outer, other))


class TestBuildIndexEvents:
    def test_units_then_types_in_source_order(self) -> None:
        listener = RecordingListener()

        build_index([_unit()], listener=listener)

        assert listener.events == [
            ("unit", "p"),
            ("type", "p.Outer"),
            ("type", "p.Outer.Inner"),
            ("type", "p.Other"),
        ]

    def test_null_listener_accepted(self) -> None:
        assert len(build_index([_unit()], listener=NullListener())) == 3


class TestDashboard:
    """Dashboard is a per-run counter, not a shared singleton."""

    def test_counts(self) -> None:
        dashboard = Dashboard()
        dashboard.on_path(Path("p/Outer.java"))

        build_index([_unit()], listener=dashboard)

        assert (dashboard.file_count, dashboard.unit_count, dashboard.type_count) == (1, 1, 3)
        assert repr(dashboard) == "Dashboard(files=1, units=1, types=3, relationships=0)"

    def test_instances_are_independent(self) -> None:
        first, second = Dashboard(), Dashboard()
        first.on_type("p.A")

        assert second.type_count == 0

    def test_quiet_by_default(self) -> None:
        with patch("typeplane.index.listener.status") as mock_status:
            Dashboard().on_type("p.A")
            mock_status.assert_not_called()

    def test_verbose_echoes(self) -> None:
        with patch("typeplane.index.listener.status") as mock_status:
            Dashboard(verbose=True).on_type("p.A")

            message = mock_status.call_args[0][0]
            assert message == "Discovered type #1: p.A"
