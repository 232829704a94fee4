"""End-to-end diagram generation.

discover -> parse -> build index -> resolve -> emit
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from typeplane.config.models import TypePlaneConfig
from typeplane.core.logging import get_logger
from typeplane.emit import DiagramDriver, PlantUMLWriter
from typeplane.index import BuildListener, DeclaredIndex, NullListener, build_index
from typeplane.parsing import JavaDeclarationParser, discover_sources, parse_paths

log = get_logger("ops")


@dataclass
class GenerateResult:
    """Outcome of one generate run."""

    output_path: Path
    files: int = 0
    units: int = 0
    types: int = 0
    packages: int = 0
    relationships: int = 0
    skipped: list[Path] = field(default_factory=list)
    duplicates: tuple[str, ...] = ()


def load_index(
    source_root: Path,
    config: TypePlaneConfig | None = None,
    listener: BuildListener | None = None,
) -> tuple[DeclaredIndex, list[Path], list[Path]]:
    """Discover, parse and index a source tree.

    Returns:
        (index, discovered paths, skipped paths)
    """
    config = config or TypePlaneConfig()
    listener = listener or NullListener()

    paths = discover_sources(
        source_root,
        extensions=config.source.extensions,
        exclude_dirs=config.source.exclude_dirs,
        include_dirs=config.source.include_dirs,
        listener=listener,
    )
    units, skipped = parse_paths(paths, JavaDeclarationParser())
    index = build_index(units, listener=listener)
    return index, paths, skipped


def generate_diagram(
    source_root: Path,
    output_path: Path,
    config: TypePlaneConfig | None = None,
    listener: BuildListener | None = None,
) -> GenerateResult:
    """Write a PlantUML class diagram of ``source_root`` to ``output_path``.

    Parent directories of ``output_path`` are created. Unreadable sources
    are skipped and reported in the result.
    """
    config = config or TypePlaneConfig()
    index, paths, skipped = load_index(source_root, config, listener)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    driver = DiagramDriver(index, config.diagram, listener)
    with output_path.open("w", encoding="utf-8") as out, PlantUMLWriter(out) as writer:
        relationships = driver.write(writer)

    result = GenerateResult(
        output_path=output_path,
        files=len(paths),
        units=len(paths) - len(skipped),
        types=len(index),
        packages=len(index.types_by_package),
        relationships=relationships,
        skipped=skipped,
        duplicates=index.duplicates,
    )
    log.info(
        "diagram_generated",
        output=str(output_path),
        types=result.types,
        relationships=result.relationships,
        skipped=len(skipped),
    )
    return result
