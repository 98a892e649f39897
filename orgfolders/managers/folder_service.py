"""
FolderService - query surface over organization folders.

Validates requests, filters by organization and slices pages. Responses
reference the provider's folder objects directly; nothing is mutated.
"""

import uuid
from typing import Iterator, Optional

from orgfolders.constants import MAX_PAGE_LIMIT, NIL_UUID
from orgfolders.exceptions import InvalidArgumentError, InvalidRequestError
from orgfolders.log import get_logger
from orgfolders.managers.cursor import decode_cursor, encode_cursor
from orgfolders.managers.data_provider import Provider, get_sample_data
from orgfolders.managers.org_filter import OrgFilter
from orgfolders.models.requests import (
    FetchFolderRequest,
    FetchFolderResponse,
    PaginatedFetchRequest,
    PaginatedFetchResponse,
)

logger = get_logger(__name__)


class FolderService:
    """
    Read-only folder queries for one data provider.

    Handles:
    - Fetching every folder of an organization
    - Fetching folders a page at a time with an opaque cursor
    - Walking all pages of an organization

    Usage:
        service = FolderService()

        response = service.get_all_folders(FetchFolderRequest(org_id=org_id))

        page = service.get_folders_page(
            PaginatedFetchRequest(org_id=org_id, limit=10)
        )
        next_page = service.get_folders_page(
            PaginatedFetchRequest(org_id=org_id, limit=10, cursor=page.next_cursor)
        )
    """

    def __init__(self, provider: Optional[Provider] = None, strict_cursor_tag: bool = False) -> None:
        """
        Initialize FolderService.

        Args:
            provider: Callable returning all folders. Defaults to the bundled sample data.
            strict_cursor_tag: Reject cursors whose tag is not ``next_cursor``.
        """
        self.provider = provider if provider is not None else get_sample_data
        self.org_filter = OrgFilter(self.provider)
        self.strict_cursor_tag = strict_cursor_tag

    def _validate_org_id(self, org_id: uuid.UUID) -> None:
        if org_id == NIL_UUID:
            logger.info("Rejected request with nil org_id")
            raise InvalidArgumentError("org_id cannot be the nil UUID", field="org_id")

    def get_all_folders(self, request: Optional[FetchFolderRequest]) -> FetchFolderResponse:
        """
        Fetch every folder owned by the requested organization.

        Raises:
            InvalidRequestError: If request is None.
            InvalidArgumentError: If org_id is the nil UUID.
        """
        if request is None:
            raise InvalidRequestError("request cannot be None")
        self._validate_org_id(request.org_id)

        folders = self.org_filter.by_org(request.org_id)
        logger.debug("Fetched %d folders for org %s", len(folders), request.org_id)
        return FetchFolderResponse(folders=folders)

    def get_folders_page(self, request: Optional[PaginatedFetchRequest]) -> PaginatedFetchResponse:
        """
        Fetch one page of the requested organization's folders.

        The page starts at the position encoded in ``request.cursor`` (0 when
        empty) and holds at most ``request.limit`` folders. ``next_cursor`` is
        empty once the last folder has been returned.

        Raises:
            InvalidRequestError: If request is None.
            InvalidArgumentError: If org_id is nil or limit is outside 1..100.
            CursorDecodeError: If the cursor cannot be decoded.
        """
        if request is None:
            raise InvalidRequestError("request cannot be None")
        self._validate_org_id(request.org_id)

        if request.limit <= 0:
            logger.info("Rejected page request with limit %d", request.limit)
            raise InvalidArgumentError("limit must be positive", field="limit")
        if request.limit > MAX_PAGE_LIMIT:
            logger.info("Rejected page request with limit %d", request.limit)
            raise InvalidArgumentError(f"limit exceeds {MAX_PAGE_LIMIT}", field="limit")

        start = decode_cursor(request.cursor, strict=self.strict_cursor_tag)

        folders = self.org_filter.by_org(request.org_id)
        end = min(start + request.limit, len(folders))
        page = folders[start:end]

        next_cursor = encode_cursor(end) if end < len(folders) else ""
        logger.debug(
            "Fetched page [%d:%d] of %d folders for org %s",
            start, end, len(folders), request.org_id,
        )
        return PaginatedFetchResponse(folders=page, next_cursor=next_cursor)

    def iter_pages(self, org_id: uuid.UUID, limit: int) -> Iterator[PaginatedFetchResponse]:
        """
        Yield every page of an organization's folders, following cursors.

        The first page is always yielded, even when it is empty.

        Args:
            org_id: Owning organization UUID.
            limit: Page size (1..100).
        """
        request = PaginatedFetchRequest(org_id=org_id, limit=limit, cursor="")
        while True:
            response = self.get_folders_page(request)
            yield response
            if not response.next_cursor:
                break
            request = PaginatedFetchRequest(
                org_id=org_id, limit=limit, cursor=response.next_cursor
            )
