"""
Managers for orgfolders.

This package contains focused classes that handle specific aspects of folder queries:
- FolderProvider: Load folder records from a JSON fixture
- OrgFilter: Narrow folders to one organization
- cursor: Encode and decode pagination cursors
- FolderService: Validated fetch-all and paginated queries
"""

from orgfolders.managers.data_provider import FolderProvider, Provider, get_sample_data
from orgfolders.managers.org_filter import OrgFilter, filter_by_org
from orgfolders.managers.cursor import decode_cursor, encode_cursor
from orgfolders.managers.folder_service import FolderService

__all__ = [
    "FolderProvider",
    "Provider",
    "get_sample_data",
    "OrgFilter",
    "filter_by_org",
    "decode_cursor",
    "encode_cursor",
    "FolderService",
]
