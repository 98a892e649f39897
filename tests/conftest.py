"""
Test fixtures for the orgfolders test suite.

Provides:
- Temporary directory fixtures (isolated from any local .orgfolders/)
- Mock data builders for creating folder records
- A small in-memory dataset with interleaved organizations
"""

import json
import logging
import shutil
import tempfile
import uuid
from pathlib import Path
from typing import Generator, List, Optional

import pytest

from orgfolders.constants import DEFAULT_ORG_ID, reset_config_manager
from orgfolders.log import ROOT_LOGGER_NAME
from orgfolders.managers.folder_service import FolderService
from orgfolders.models.folder import Folder

ORG_A = uuid.UUID("11111111-1111-4111-8111-111111111111")
ORG_B = uuid.UUID("22222222-2222-4222-8222-222222222222")


# =============================================================================
# Temporary Directory Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test isolation."""
    temp_path = Path(tempfile.mkdtemp(prefix="orgfolders_test_"))
    yield temp_path
    # Cleanup
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def config_dir(temp_dir: Path) -> Path:
    """Create a temporary .orgfolders/ directory."""
    path = temp_dir / ".orgfolders"
    path.mkdir(parents=True)
    return path


@pytest.fixture(autouse=True)
def _reset_config_singleton() -> Generator[None, None, None]:
    """Keep the process-wide ConfigManager from leaking between tests."""
    reset_config_manager()
    yield
    reset_config_manager()


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging (CliRunner closes their streams)."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


# =============================================================================
# Mock Data Builders
# =============================================================================


class MockDataBuilder:
    """Helper class for building folder records for testing."""

    @staticmethod
    def create_folder(
        name: str = "test-folder",
        org_id: uuid.UUID = ORG_A,
        folder_id: Optional[uuid.UUID] = None,
        **extra,
    ) -> Folder:
        """Create a Folder for testing."""
        return Folder(id=folder_id or uuid.uuid4(), name=name, org_id=org_id, **extra)

    @staticmethod
    def write_fixture(path: Path, records: list) -> Path:
        """Write raw folder records to a JSON fixture file."""
        path.write_text(json.dumps(records, indent=2), encoding="utf-8")
        return path


@pytest.fixture
def mock_data() -> MockDataBuilder:
    """Provide the MockDataBuilder."""
    return MockDataBuilder()


@pytest.fixture
def folders(mock_data: MockDataBuilder) -> List[Folder]:
    """Twelve folders: seven owned by ORG_A, five by ORG_B, interleaved."""
    owners = [ORG_A, ORG_B, ORG_A, ORG_A, ORG_B, ORG_A, ORG_B, ORG_A, ORG_B, ORG_A, ORG_B, ORG_A]
    return [
        mock_data.create_folder(name=f"folder-{i}", org_id=owner, Deleted=(i % 4 == 0))
        for i, owner in enumerate(owners)
    ]


@pytest.fixture
def service(folders: List[Folder]) -> FolderService:
    """FolderService over the in-memory dataset."""
    return FolderService(lambda: folders)


@pytest.fixture
def sample_service() -> FolderService:
    """FolderService over the bundled sample data."""
    return FolderService()


@pytest.fixture
def default_org_id() -> uuid.UUID:
    return uuid.UUID(DEFAULT_ORG_ID)


@pytest.fixture
def org_a() -> uuid.UUID:
    """Organization owning seven of the in-memory folders."""
    return ORG_A


@pytest.fixture
def org_b() -> uuid.UUID:
    """Organization owning five of the in-memory folders."""
    return ORG_B
