"""
Folder model for orgfolders.

A folder is owned by exactly one organization. Attributes beyond the
identifying ones (deleted flag, timestamps, ...) are kept verbatim.
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Folder(BaseModel):
    """Folder record as read from the data provider.

    Serialized field names follow the fixture format (``Id``, ``Name``,
    ``OrgId``); the snake_case attribute names are accepted on input too.
    Instances are frozen and shared between responses.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    id: uuid.UUID = Field(alias="Id")
    name: str = Field(alias="Name")
    org_id: uuid.UUID = Field(alias="OrgId")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not empty."""
        if not v or not v.strip():
            raise ValueError("Name is required and cannot be empty")
        return v
