"""PlantUML text sink.

Stateful writer with begin/end block discipline. It owns quoting,
indentation and block boundary comments; it makes no decisions about
what to draw.

Every block line carries a marker comment so other tools can locate
regions in generated files::

    package "p" { /' @tpl:begin package "p" '/
      class "p.A" { /' @tpl:begin class "p.A" '/
      } /' @tpl:end class "p.A" '/
    } /' @tpl:end package "p" '/
"""

from __future__ import annotations

from collections.abc import Iterable
from types import TracebackType
from typing import TextIO

from typeplane.config.constants import BLOCK_MARKER, INDENT_UNIT
from typeplane.core.errors import EmitError


def q(name: str) -> str:
    return f'"{name}"'


def stereotype_text(stereotypes: Iterable[str]) -> str:
    """``("Entity", "Audited")`` -> ``" <<Entity>> <<Audited>>"``."""
    parts = [f"<<{s.strip()}>>" for s in stereotypes if s and s.strip()]
    return " " + " ".join(parts) if parts else ""


class PlantUMLWriter:
    """Writes PlantUML to ``out``.

    Usage::

        with PlantUMLWriter(stream) as w:
            w.begin_diagram("model")
            w.begin_package("p")
            w.begin_type("class", "p.A")
            w.end_type("class", "p.A")
            w.end_package("p")
            w.connect("p.A", "-->", "p.B", label="b")
            w.end_diagram("model")

    Closing with blocks still open raises ``EmitError``.
    """

    def __init__(self, out: TextIO) -> None:
        self._out = out
        self._indent = 0
        self._open: list[tuple[str, str]] = []

    # -- raw output ------------------------------------------------------

    def println(self, line: str = "") -> None:
        if line:
            self._out.write(INDENT_UNIT * self._indent + line + "\n")
        else:
            self._out.write("\n")

    def directive(self, text: str) -> None:
        self.println(text)

    @property
    def depth(self) -> int:
        return len(self._open)

    # -- blocks ----------------------------------------------------------

    def _begin(self, keyword: str, name: str, suffix: str = "") -> None:
        label = f"{keyword} {q(name)}"
        self.println(f"{label}{suffix} {{ /' {BLOCK_MARKER}:begin {label} '/")
        self._open.append((keyword, name))
        self._indent += 1

    def _end(self, keyword: str, name: str) -> None:
        expected = self._open[-1] if self._open else None
        if expected != (keyword, name):
            shown = f"{expected[0]} {q(expected[1])}" if expected else None
            raise EmitError.unbalanced_block(shown, f"{keyword} {q(name)}")
        self._open.pop()
        self._indent -= 1
        self.println(f"}} /' {BLOCK_MARKER}:end {keyword} {q(name)} '/")

    def begin_diagram(self, name: str | None = None) -> None:
        self.println(f"@startuml {q(name)}" if name else "@startuml")

    def end_diagram(self, name: str | None = None) -> None:  # noqa: ARG002
        if self._open:
            raise EmitError.unclosed_blocks([f"{k} {q(n)}" for k, n in self._open])
        self.println("@enduml")

    def begin_package(self, name: str) -> None:
        self._begin("package", name)

    def end_package(self, name: str) -> None:
        self._end("package", name)

    def begin_type(
        self,
        kind: str,
        name: str,
        stereotypes: Iterable[str] = (),
        *,
        abstract: bool = False,
    ) -> None:
        keyword = f"abstract {kind}" if abstract else kind
        self._begin(keyword, name, stereotype_text(stereotypes))

    def end_type(self, kind: str, name: str, *, abstract: bool = False) -> None:
        self._end(f"abstract {kind}" if abstract else kind, name)

    def member(self, text: str) -> None:
        self.println(text)

    # -- relations -------------------------------------------------------

    def connect(
        self,
        left: str,
        arrow: str,
        right: str,
        *,
        label: str | None = None,
        stereotypes: Iterable[str] = (),
    ) -> None:
        line = f"{q(left)} {arrow} {q(right)}"
        annotation = ((label or "") + stereotype_text(stereotypes)).strip()
        if annotation:
            line += f" : {annotation}"
        self.println(line)

    def footer(self, lines: Iterable[str]) -> None:
        self.println("footer")
        for text in lines:
            self.println(text)
        self.println("end footer")

    # -- lifecycle -------------------------------------------------------

    def flush(self) -> None:
        self._out.flush()

    def close(self) -> None:
        """Flush and verify every block was closed. Does not close ``out``."""
        self.flush()
        if self._open:
            raise EmitError.unclosed_blocks([f"{k} {q(n)}" for k, n in self._open])

    def __enter__(self) -> PlantUMLWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            self.close()
        else:
            self.flush()
