"""
Record Domain Model

Fields shared by every resource read schema.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from crudmount.common.time import ensure_utc


class RecordRead(BaseModel):
    """Server-assigned fields of a stored record"""

    uuid: UUID = Field(..., description="Record ID")
    created_at: Optional[datetime] = Field(None, description="Creation Time")
    updated_at: Optional[datetime] = Field(None, description="Update Time")

    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at", "updated_at")
    @classmethod
    def _as_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(v)


def reject_null(v):
    """Update payloads may omit a required column but not clear it"""
    if v is None:
        raise ValueError("must not be null")
    return v
