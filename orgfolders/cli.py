"""
Command-line interface for orgfolders.

Resolves configuration once, then dispatches to the folder query commands.
"""
from pathlib import Path
from typing import Optional

import click

from orgfolders.commands.config import config
from orgfolders.commands.folders import list_folders, show_page, walk_pages
from orgfolders.constants import ConfigManager, get_config_manager
from orgfolders.exceptions import ConfigurationError
from orgfolders.log import setup_logging
from orgfolders.models.config import ConfigFile


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to config.json (default: .orgfolders/config.json).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool):
    """Query the folders owned by an organization."""
    manager = ConfigManager(config_path=config_path) if config_path else get_config_manager()
    try:
        settings = ConfigFile.from_manager(manager)
    except ConfigurationError as e:
        raise click.ClickException(str(e))

    setup_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


cli.add_command(list_folders)
cli.add_command(show_page)
cli.add_command(walk_pages)
cli.add_command(config)


if __name__ == '__main__':
    cli()
