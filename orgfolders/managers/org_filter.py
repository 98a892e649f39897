"""
Organization filter for orgfolders.

Narrows the provider's folder collection to one organization.
"""

import uuid
from typing import Iterable, List

from orgfolders.managers.data_provider import Provider
from orgfolders.models.folder import Folder


def filter_by_org(folders: Iterable[Folder], org_id: uuid.UUID) -> List[Folder]:
    """Return the folders owned by ``org_id``, preserving input order."""
    return [folder for folder in folders if folder.org_id == org_id]


class OrgFilter:
    """
    Filters the folders of a provider by owning organization.

    A nil org id is not rejected here; it simply matches nothing.
    """

    def __init__(self, provider: Provider) -> None:
        self.provider = provider

    def by_org(self, org_id: uuid.UUID) -> List[Folder]:
        """
        Fetch all folders belonging to an organization.

        Args:
            org_id: Owning organization UUID.

        Returns:
            Matching folders in provider order (possibly empty).
        """
        return filter_by_org(self.provider(), org_id)
