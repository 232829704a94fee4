"""CLI utilities."""

from pathlib import Path

import click

from typeplane.config import TypePlaneConfig, load_config
from typeplane.core.errors import TypePlaneError
from typeplane.core.logging import configure_logging, get_log_file_path, set_run_id


def fail(error: TypePlaneError) -> click.ClickException:
    """ClickException for a TypePlaneError, pointing at the log file when one is configured."""
    message = str(error)
    log_path = get_log_file_path()
    if log_path is not None:
        message += f"\nSee log file: {log_path}"
    return click.ClickException(message)


def load_cli_config(ctx: click.Context, repo_root: Path | None = None) -> TypePlaneConfig:
    """Load config for a command and configure logging from it.

    ``-v`` on the group forces DEBUG regardless of configured level.

    Raises:
        click.ClickException: config file or values are invalid
    """
    try:
        config = load_config(repo_root)
    except TypePlaneError as e:
        raise fail(e) from e

    if ctx.obj and ctx.obj.get("verbose"):
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)
    set_run_id()
    return config


def resolve_source_root(source: Path | None, config: TypePlaneConfig, repo_root: Path) -> Path:
    """Explicit SOURCE argument, else the configured root relative to the repo."""
    if source is not None:
        return source.resolve()
    root = Path(config.source.root).expanduser()
    return root if root.is_absolute() else (repo_root / root).resolve()
