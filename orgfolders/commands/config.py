"""
Config command group for the orgfolders CLI.

Shows the effective configuration (config.json merged with defaults).
"""
import json

import click

from orgfolders.models.config import ConfigFile


@click.group()
def config():
    """View configuration.

    Configuration is stored in .orgfolders/config.json unless --config is given.
    """
    pass


@config.command(name="show")
@click.option("-j", "--json", "json_output", is_flag=True, help="Output in JSON format.")
@click.pass_obj
def show_config(settings: ConfigFile, json_output: bool):
    """Show the effective configuration."""
    values = settings.model_dump(mode="json")
    if json_output:
        click.echo(json.dumps(values, indent=2))
        return

    for key, value in values.items():
        click.echo(f"{key}: {value if value is not None else '-'}")
