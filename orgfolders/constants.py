"""
Constants for the orgfolders query layer.

Note: Most of these constants serve as default fallback values.
Actual values are loaded from .orgfolders/config.json at runtime via ConfigManager.
"""
from pathlib import Path
from typing import Any, Optional
import json
import uuid

from orgfolders.log import get_logger

logger = get_logger(__name__)

# =============================================================================
# Fixed Values (not configurable)
# =============================================================================

# The all-zero UUID is never a valid organization identifier
NIL_UUID = uuid.UUID(int=0)

# Hard ceiling for a single page
MAX_PAGE_LIMIT = 100

# Cursor wire format: base64("next_cursor:<index>")
CURSOR_TAG = "next_cursor"
CURSOR_SEPARATOR = ":"
CURSOR_ERROR_MESSAGE = "invalid cursor"

# Bundled sample dataset
SAMPLE_DATA_PATH = Path(__file__).parent / "data" / "sample_folders.json"

# =============================================================================
# Default Fallback Values
# These are used if config.json doesn't exist or doesn't specify a value.
# =============================================================================

DEFAULT_ORG_ID = "c1556e17-b7c0-45a3-a6ae-9546248fb17a"
DEFAULT_PAGE_LIMIT = 20
DEFAULT_STRICT_CURSOR_TAG = False
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_CONFIG_DIR = Path(".orgfolders")


# =============================================================================
# Config Loader
# Load values from .orgfolders/config.json at runtime.
# =============================================================================

_config_manager_instance: Optional['ConfigManager'] = None


class ConfigManager:
    """
    Manages loading configuration from a config.json file with fallback to defaults.

    Usage:
        # With default path (.orgfolders/config.json)
        config = ConfigManager()
        limit = config.get_int('default_page_limit', DEFAULT_PAGE_LIMIT)

        # With custom path
        config = ConfigManager(config_path=Path("/custom/path/config.json"))
        org_id = config.get_str('default_org_id', DEFAULT_ORG_ID)
    """

    def __init__(self, config_path: Optional[Path] = None, config_dir: Optional[Path] = None) -> None:
        """
        Initialize ConfigManager.

        Args:
            config_path: Direct path to config.json file. Takes precedence over config_dir.
            config_dir: Path to a config directory. Config path will be config_dir/config.json.
        """
        self._config: Optional[dict] = None

        if config_path is not None:
            self._config_path = config_path
        elif config_dir is not None:
            self._config_path = config_dir / "config.json"
        else:
            self._config_path = DEFAULT_CONFIG_DIR / "config.json"

    def _load_config(self) -> dict:
        """Load config from config.json file."""
        if self._config is not None:
            return self._config

        if self._config_path.exists():
            try:
                with open(self._config_path, "r") as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    logger.warning("Ignoring config %s: expected a JSON object", self._config_path)
                    loaded = {}
                self._config = loaded
            except (json.JSONDecodeError, IOError) as e:
                logger.warning("Ignoring unreadable config %s: %s", self._config_path, e)
                self._config = {}
        else:
            self._config = {}

        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a config value with fallback to default.

        Args:
            key: Configuration key name.
            default: Default value if key not found.

        Returns:
            Config value or default.
        """
        config = self._load_config()
        return config.get(key, default)

    def get_int(self, key: str, default: int) -> int:
        """Get an integer config value with fallback."""
        value = self.get(key, default)
        return int(value) if value is not None else default

    def get_bool(self, key: str, default: bool) -> bool:
        """Get a boolean config value with fallback."""
        value = self.get(key, default)
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes", "on")
        return bool(value) if value is not None else default

    def get_str(self, key: str, default: str) -> str:
        """Get a string config value with fallback."""
        value = self.get(key, default)
        return str(value) if value is not None else default

    def get_path(self, key: str) -> Optional[Path]:
        """Get a path config value, resolved relative to the config file."""
        value = self.get(key)
        if not value:
            return None
        path = Path(value)
        if not path.is_absolute():
            path = self._config_path.parent / path
        return path

    def reload(self) -> dict:
        """Force reload of config from disk."""
        self._config = None
        return self._load_config()

    @property
    def config_path(self) -> Path:
        """Get the config file path."""
        return self._config_path


def get_config_manager(reset: bool = False) -> ConfigManager:
    """
    Get the singleton ConfigManager instance with default path.

    Args:
        reset: If True, reset the singleton and create a new instance.

    Returns:
        ConfigManager singleton instance.
    """
    global _config_manager_instance
    if _config_manager_instance is None or reset:
        _config_manager_instance = ConfigManager()
    return _config_manager_instance


def reset_config_manager() -> None:
    """Reset the singleton ConfigManager instance (useful for testing)."""
    global _config_manager_instance
    _config_manager_instance = None

