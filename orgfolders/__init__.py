"""
orgfolders - read-only query layer over organization-owned folder records.

Import from the submodules directly:
    from orgfolders.managers.folder_service import FolderService
    from orgfolders.models.requests import FetchFolderRequest, PaginatedFetchRequest
"""

__version__ = "0.1.0"
