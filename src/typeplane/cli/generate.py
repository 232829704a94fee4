"""tpl generate command - write the class diagram."""

from pathlib import Path

import click

from typeplane.cli.utils import fail, load_cli_config, resolve_source_root
from typeplane.core.errors import TypePlaneError
from typeplane.core.progress import pluralize, status, task
from typeplane.index import Dashboard
from typeplane.ops import generate_diagram


@click.command()
@click.argument("source", required=False, type=click.Path(path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output .puml file (default: diagram.output from config)",
)
@click.option("--title", help="Diagram name written after @startuml")
@click.pass_context
def generate_command(
    ctx: click.Context, source: Path | None, output: Path | None, title: str | None
) -> None:
    """Generate a PlantUML class diagram from Java sources.

    SOURCE is the source root (default: source.root from config,
    src/main/java unless configured).
    """
    repo_root = Path.cwd()
    config = load_cli_config(ctx, repo_root)
    if title:
        config.diagram.title = title

    source_root = resolve_source_root(source, config, repo_root)
    output_path = output or Path(config.diagram.output)
    if not output_path.is_absolute():
        output_path = repo_root / output_path

    dashboard = Dashboard(verbose=bool(ctx.obj and ctx.obj.get("verbose")))
    try:
        with task("Generating diagram"):
            result = generate_diagram(source_root, output_path, config, dashboard)
    except TypePlaneError as e:
        raise fail(e) from e

    if not result.files:
        status(f"No sources found under {source_root}", style="warning")
    for path in result.skipped:
        status(f"Skipped unreadable source: {path}", style="warning")
    for fqn in result.duplicates:
        status(f"Duplicate declaration kept last: {fqn}", style="warning")

    status(
        f"{pluralize(result.types, 'type')} in {pluralize(result.packages, 'package')}, "
        f"{pluralize(result.relationships, 'relationship')}",
        style="success",
    )
    click.echo(f"Diagram at: {result.output_path.resolve()}")
