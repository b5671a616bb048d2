"""
Tag Domain Model

Defines the per-operation request objects and the read schema of organization tags.
"""

from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from crudmount.domain.record import RecordRead, reject_null
from crudmount.domain.request import ResourceRequest


class TagRequest(ResourceRequest):
    """Base of all tag requests"""

    id_param = "tag"
    path_fields = ("org", "tag")


class TagCreateRequest(TagRequest):
    """Request object for the create operation"""

    org: UUID = Field(..., description="Organization ID")
    name: str = Field(..., min_length=1, max_length=200, description="Tag Name")
    type: str = Field(..., min_length=1, max_length=100, description="Tag Type")
    description: Optional[str] = Field(None, description="Tag Description")


class TagGetRequest(TagRequest):
    """Request object for the get operation"""

    org: str = Field(..., description="Organization ID")
    tag: str = Field(..., description="Tag ID")


class TagListRequest(TagRequest):
    """Request object for the list operation, fields double as query filters"""

    org: str = Field(..., description="Organization ID")
    name: Optional[str] = Field(None, description="Filter by name")
    type: Optional[str] = Field(None, description="Filter by type")


class TagUpdateRequest(TagRequest):
    """Request object for the update operation (all body fields optional)"""

    org: UUID = Field(..., description="Organization ID")
    tag: UUID = Field(..., description="Tag ID")
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    type: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None

    check_not_null = field_validator("name", "type")(reject_null)


class TagDeleteRequest(TagRequest):
    """Request object for the delete operation"""

    org: str = Field(..., description="Organization ID")
    tag: str = Field(..., description="Tag ID")


class TagRead(RecordRead):
    """Tag Response Model"""

    name: str
    type: str
    description: Optional[str] = None
    org: UUID = Field(..., validation_alias="org_uuid", description="Organization ID")
