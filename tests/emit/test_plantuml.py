"""Tests for emit/plantuml.py PlantUMLWriter."""

from __future__ import annotations

import io

import pytest

from typeplane.core.errors import EmitError, ErrorCode
from typeplane.emit import PlantUMLWriter
from typeplane.emit.plantuml import q, stereotype_text


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


class TestHelpers:
    def test_quote(self) -> None:
        assert q("p.A") == '"p.A"'

    def test_stereotypes(self) -> None:
        assert stereotype_text(["Entity", "Audited"]) == " <<Entity>> <<Audited>>"

    def test_blank_stereotypes_skipped(self) -> None:
        assert stereotype_text(["", "  "]) == ""


class TestBlocks:
    """Every begin pairs with exactly one end, with markers and indentation."""

    def test_nested_blocks_are_indented_and_marked(self, out: io.StringIO) -> None:
        w = PlantUMLWriter(out)
        w.begin_package("p")
        w.begin_type("class", "p.A")
        w.member("-name : String")
        w.end_type("class", "p.A")
        w.end_package("p")

        assert out.getvalue().splitlines() == [
            "package \"p\" { /' @tpl:begin package \"p\" '/",
            "  class \"p.A\" { /' @tpl:begin class \"p.A\" '/",
            "    -name : String",
            "  } /' @tpl:end class \"p.A\" '/",
            "} /' @tpl:end package \"p\" '/",
        ]
        assert w.depth == 0

    def test_abstract_class_with_stereotypes(self, out: io.StringIO) -> None:
        w = PlantUMLWriter(out)
        w.begin_type("class", "p.Shape", ["Entity"], abstract=True)
        w.end_type("class", "p.Shape", abstract=True)

        first = out.getvalue().splitlines()[0]
        assert first.startswith('abstract class "p.Shape" <<Entity>> {')

    def test_mismatched_end_raises(self, out: io.StringIO) -> None:
        w = PlantUMLWriter(out)
        w.begin_package("p")

        with pytest.raises(EmitError) as exc_info:
            w.end_type("class", "p.A")

        assert exc_info.value.code == ErrorCode.EMIT_UNBALANCED_BLOCK
        assert exc_info.value.details["expected"] == 'package "p"'

    def test_end_without_begin_raises(self, out: io.StringIO) -> None:
        with pytest.raises(EmitError, match="none"):
            PlantUMLWriter(out).end_package("p")

    def test_end_diagram_with_open_block_raises(self, out: io.StringIO) -> None:
        w = PlantUMLWriter(out)
        w.begin_diagram()
        w.begin_package("p")

        with pytest.raises(EmitError) as exc_info:
            w.end_diagram()

        assert exc_info.value.code == ErrorCode.EMIT_UNCLOSED_BLOCKS
        assert "@enduml" not in out.getvalue()


class TestDiagram:
    def test_named_diagram(self, out: io.StringIO) -> None:
        w = PlantUMLWriter(out)
        w.begin_diagram("shop")
        w.end_diagram("shop")

        assert out.getvalue() == '@startuml "shop"\n@enduml\n'

    def test_unnamed_diagram(self, out: io.StringIO) -> None:
        w = PlantUMLWriter(out)
        w.begin_diagram()
        w.end_diagram()

        assert out.getvalue() == "@startuml\n@enduml\n"

    def test_blank_line_has_no_indent(self, out: io.StringIO) -> None:
        w = PlantUMLWriter(out)
        w.begin_package("p")
        w.println()
        w.end_package("p")

        assert out.getvalue().splitlines()[1] == ""

    def test_footer(self, out: io.StringIO) -> None:
        PlantUMLWriter(out).footer(["made here"])
        assert out.getvalue() == "footer\nmade here\nend footer\n"


class TestConnect:
    def test_plain(self, out: io.StringIO) -> None:
        PlantUMLWriter(out).connect("pa.A", "<|..", "pb.B")
        assert out.getvalue() == '"pa.A" <|.. "pb.B"\n'

    def test_label_and_stereotypes(self, out: io.StringIO) -> None:
        PlantUMLWriter(out).connect(
            "p.Order", "-->", "p.Customer", label="customer", stereotypes=["ManyToOne"]
        )
        assert out.getvalue() == '"p.Order" --> "p.Customer" : customer <<ManyToOne>>\n'

    def test_stereotype_without_label(self, out: io.StringIO) -> None:
        PlantUMLWriter(out).connect("p.A", "-->", "p.B", stereotypes=["Lazy"])
        assert out.getvalue() == '"p.A" --> "p.B" : <<Lazy>>\n'


class TestContextManager:
    def test_clean_exit_checks_blocks(self, out: io.StringIO) -> None:
        with pytest.raises(EmitError), PlantUMLWriter(out) as w:
            w.begin_package("p")

    def test_error_exit_propagates_original(self, out: io.StringIO) -> None:
        with pytest.raises(ValueError), PlantUMLWriter(out) as w:
            w.begin_package("p")
            raise ValueError("boom")

    def test_stream_left_open(self, out: io.StringIO) -> None:
        with PlantUMLWriter(out) as w:
            w.begin_diagram()
            w.end_diagram()

        assert not out.closed
