"""TypePlane CLI - tpl command."""

import click

from typeplane import __version__
from typeplane.cli.generate import generate_command
from typeplane.cli.types import types_command


@click.group()
@click.version_option(version=__version__, prog_name="tpl")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """TypePlane - class diagrams from Java source trees."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


cli.add_command(generate_command, name="generate")
cli.add_command(types_command, name="types")


if __name__ == "__main__":
    cli()
