"""
Data provider for orgfolders.

Loads folder records from a JSON document once and hands out the same
ordered list on every call.
"""

import json
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from orgfolders.constants import SAMPLE_DATA_PATH
from orgfolders.exceptions import ProviderError
from orgfolders.log import get_logger
from orgfolders.models.folder import Folder

logger = get_logger(__name__)

# Anything that returns the full, ordered folder collection
Provider = Callable[[], Sequence[Folder]]

_folder_list_adapter = TypeAdapter(List[Folder])


class FolderProvider:
    """
    Reads folder records from a JSON array file.

    The file is parsed on first access and cached; enumeration order is
    the order of the array.

    Usage:
        provider = FolderProvider(Path("folders.json"))
        folders = provider.get_folders()

        # As an injectable provider
        service = FolderService(provider.get_folders)
    """

    def __init__(self, data_path: Optional[Path] = None) -> None:
        """
        Initialize the FolderProvider.

        Args:
            data_path: Path to the JSON fixture. Defaults to the bundled sample data.
        """
        self.data_path = Path(data_path) if data_path else SAMPLE_DATA_PATH
        self._folders: Optional[List[Folder]] = None

    def _load(self) -> List[Folder]:
        """Parse and validate the fixture file.

        Raises:
            ProviderError: If the file is missing, not a JSON array, or holds an invalid record.
        """
        if not self.data_path.exists():
            raise ProviderError(f"Folder data not found: {self.data_path}")

        try:
            with open(self.data_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ProviderError(f"Failed to read {self.data_path}: {e}")

        if not isinstance(data, list):
            raise ProviderError(f"Failed to load {self.data_path}: expected a JSON array of folders")

        try:
            folders = _folder_list_adapter.validate_python(data)
        except ValidationError as e:
            raise ProviderError(f"Failed to load {self.data_path}: {e}")

        logger.info("Loaded %d folders from %s", len(folders), self.data_path)
        return folders

    def get_folders(self) -> List[Folder]:
        """Return every folder record in fixture order.

        The returned list is shared; callers must not mutate it.
        """
        if self._folders is None:
            self._folders = self._load()
        return self._folders

    def __call__(self) -> List[Folder]:
        return self.get_folders()


_sample_provider: Optional[FolderProvider] = None


def get_sample_data() -> List[Folder]:
    """Return the bundled sample folders, loading them once per process."""
    global _sample_provider
    if _sample_provider is None:
        _sample_provider = FolderProvider()
    return _sample_provider.get_folders()
