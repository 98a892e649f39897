"""
Config model for orgfolders.

Effective settings resolved from a ConfigManager with defaults applied.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from orgfolders.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_ORG_ID,
    DEFAULT_PAGE_LIMIT,
    DEFAULT_STRICT_CURSOR_TAG,
    MAX_PAGE_LIMIT,
    ConfigManager,
)
from orgfolders.exceptions import ConfigurationError


class ConfigFile(BaseModel):
    """Model for config.json file.

    Every key is optional in the file; missing keys take the defaults.
    """

    data_path: Optional[str] = None
    default_org_id: uuid.UUID = uuid.UUID(DEFAULT_ORG_ID)
    default_page_limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT)
    strict_cursor_tag: bool = DEFAULT_STRICT_CURSOR_TAG
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_manager(cls, config: ConfigManager) -> "ConfigFile":
        """Build the effective configuration from a ConfigManager.

        Raises:
            ConfigurationError: If a configured value is invalid.
        """
        try:
            data_path = config.get_path("data_path")
            return cls(
                data_path=str(data_path) if data_path else None,
                default_org_id=config.get_str("default_org_id", DEFAULT_ORG_ID),
                default_page_limit=config.get_int("default_page_limit", DEFAULT_PAGE_LIMIT),
                strict_cursor_tag=config.get_bool("strict_cursor_tag", DEFAULT_STRICT_CURSOR_TAG),
                log_level=config.get_str("log_level", DEFAULT_LOG_LEVEL),
            )
        except (ValueError, TypeError, ValidationError) as e:
            raise ConfigurationError(f"Invalid configuration in {config.config_path}: {e}")
