"""
Folder query commands for the orgfolders CLI.

Thin wrappers over FolderService with text and JSON output.
"""
import json
import uuid
from pathlib import Path
from typing import List, Optional

import click

from orgfolders.exceptions import FolderError, InvalidArgumentError
from orgfolders.managers.data_provider import FolderProvider, get_sample_data
from orgfolders.managers.folder_service import FolderService
from orgfolders.models.config import ConfigFile
from orgfolders.models.folder import Folder
from orgfolders.models.requests import FetchFolderRequest, PaginatedFetchRequest


def build_service(settings: ConfigFile) -> FolderService:
    """Create a FolderService for the configured data source."""
    if settings.data_path:
        provider = FolderProvider(Path(settings.data_path)).get_folders
    else:
        provider = get_sample_data
    return FolderService(provider, strict_cursor_tag=settings.strict_cursor_tag)


def _display_folders(folders: List[Folder]) -> None:
    """Print folders one per line."""
    if not folders:
        click.echo("No folders.")
        return
    for folder in folders:
        click.echo(f"- {folder.name} ({folder.id})")


org_id_option = click.option(
    "-o", "--org-id", type=click.UUID, help="Organization UUID (defaults to the configured org)."
)
json_option = click.option(
    "-j", "--json", "json_output", is_flag=True, help="Output in JSON format."
)


@click.command(name="list")
@org_id_option
@json_option
@click.pass_obj
def list_folders(settings: ConfigFile, org_id: Optional[uuid.UUID], json_output: bool):
    """List every folder of an organization."""
    org_id = org_id or settings.default_org_id
    try:
        response = build_service(settings).get_all_folders(FetchFolderRequest(org_id=org_id))
    except InvalidArgumentError as e:
        raise click.ClickException(f"Invalid argument: {e}")
    except FolderError as e:
        raise click.ClickException(f"Error: {e}")

    if json_output:
        click.echo(json.dumps(response.model_dump(mode="json", by_alias=True), indent=2))
        return

    click.echo(f"Folders for org {org_id}: {len(response.folders)}")
    _display_folders(response.folders)


@click.command(name="page")
@org_id_option
@click.option("-l", "--limit", type=int, help="Page size, 1 to 100 (defaults to the configured limit).")
@click.option("-c", "--cursor", default="", help="Cursor returned by a previous page.")
@json_option
@click.pass_obj
def show_page(settings: ConfigFile, org_id: Optional[uuid.UUID], limit: Optional[int],
              cursor: str, json_output: bool):
    """Show one page of an organization's folders."""
    request = PaginatedFetchRequest(
        org_id=org_id or settings.default_org_id,
        limit=settings.default_page_limit if limit is None else limit,
        cursor=cursor,
    )
    try:
        response = build_service(settings).get_folders_page(request)
    except InvalidArgumentError as e:
        raise click.ClickException(f"Invalid argument: {e}")
    except FolderError as e:
        raise click.ClickException(f"Error: {e}")

    if json_output:
        click.echo(json.dumps(response.model_dump(mode="json", by_alias=True), indent=2))
        return

    _display_folders(response.folders)
    if response.next_cursor:
        click.echo(f"Next cursor: {response.next_cursor}")
    else:
        click.echo("No more pages.")


@click.command(name="pages")
@org_id_option
@click.option("-l", "--limit", type=int, help="Page size, 1 to 100 (defaults to the configured limit).")
@json_option
@click.pass_obj
def walk_pages(settings: ConfigFile, org_id: Optional[uuid.UUID], limit: Optional[int],
               json_output: bool):
    """Walk through every page of an organization's folders."""
    org_id = org_id or settings.default_org_id
    limit = settings.default_page_limit if limit is None else limit
    service = build_service(settings)

    try:
        pages = list(service.iter_pages(org_id, limit))
    except InvalidArgumentError as e:
        raise click.ClickException(f"Invalid argument: {e}")
    except FolderError as e:
        raise click.ClickException(f"Error: {e}")

    if json_output:
        click.echo(json.dumps(
            [page.model_dump(mode="json", by_alias=True) for page in pages], indent=2
        ))
        return

    for number, page in enumerate(pages, start=1):
        click.echo(f"Page {number}:")
        _display_folders(page.folders)
