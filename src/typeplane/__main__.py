"""Entry point for ``python -m typeplane``."""

from typeplane.cli.main import cli

if __name__ == "__main__":
    cli()
