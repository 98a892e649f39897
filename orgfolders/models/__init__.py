"""
Data models for orgfolders.

Import models explicitly from their modules:
    from orgfolders.models.folder import Folder
    from orgfolders.models.requests import FetchFolderRequest, PaginatedFetchRequest
    from orgfolders.models.config import ConfigFile
"""

from .folder import Folder
from .requests import (
    FetchFolderRequest,
    FetchFolderResponse,
    PaginatedFetchRequest,
    PaginatedFetchResponse,
)

__all__ = [
    "Folder",
    "FetchFolderRequest",
    "FetchFolderResponse",
    "PaginatedFetchRequest",
    "PaginatedFetchResponse",
]
