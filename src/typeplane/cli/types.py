"""tpl types command - list the declared-type index."""

import json
from pathlib import Path

import click
from rich.table import Table

from typeplane.cli.utils import fail, load_cli_config, resolve_source_root
from typeplane.core.errors import TypePlaneError
from typeplane.core.progress import get_console
from typeplane.ops import load_index


@click.command()
@click.argument("source", required=False, type=click.Path(path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def types_command(ctx: click.Context, source: Path | None, as_json: bool) -> None:
    """List declared types grouped by package.

    SOURCE is the source root (default: source.root from config).
    """
    repo_root = Path.cwd()
    config = load_cli_config(ctx, repo_root)
    source_root = resolve_source_root(source, config, repo_root)

    try:
        index, _paths, _skipped = load_index(source_root, config)
    except TypePlaneError as e:
        raise fail(e) from e

    if as_json:
        payload = {
            package: [
                {
                    "fqn": fqn,
                    "kind": index.by_fqn[fqn].kind.value,
                    "rendered_name": index.rendered_name(fqn),
                }
                for fqn in fqns
            ]
            for package, fqns in index.types_by_package.items()
        }
        click.echo(json.dumps(payload, indent=2))
        return

    table = Table(show_header=True, box=None, padding=(0, 2))
    table.add_column("package", style="cyan")
    table.add_column("type")
    table.add_column("kind", style="dim")
    for package, fqn, td in index.iter_sorted():
        table.add_row(package or "(default)", fqn, td.kind.value)
    get_console().print(table)
