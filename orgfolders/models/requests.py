"""
Request and response models for the folder query surface.

Only shape and type coercion live here. Value checks (nil organization,
page limit bounds) are made by FolderService so they surface as
orgfolders exceptions in a fixed order.
"""

import uuid
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .folder import Folder


class FetchFolderRequest(BaseModel):
    """Request every folder of one organization."""

    model_config = ConfigDict(populate_by_name=True)

    org_id: uuid.UUID = Field(alias="OrgId")


class FetchFolderResponse(BaseModel):
    """All folders of the requested organization, in provider order."""

    model_config = ConfigDict(populate_by_name=True)

    folders: List[Folder] = Field(default_factory=list, alias="Folders")


class PaginatedFetchRequest(BaseModel):
    """Request one page of an organization's folders.

    ``cursor`` is the opaque ``next_cursor`` of a previous response, or an
    empty string for the first page.
    """

    model_config = ConfigDict(populate_by_name=True)

    org_id: uuid.UUID = Field(alias="OrgId")
    limit: int = Field(alias="Limit")
    cursor: str = Field(default="", alias="Cursor")


class PaginatedFetchResponse(BaseModel):
    """One page of folders plus the cursor to resume from.

    An empty ``next_cursor`` means there are no further pages.
    """

    model_config = ConfigDict(populate_by_name=True)

    folders: List[Folder] = Field(default_factory=list, alias="Folders")
    next_cursor: str = Field(default="", alias="NextCursor")
