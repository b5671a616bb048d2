"""
Organization Domain Model

Defines the per-operation request objects and the read schema of organizations.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from crudmount.domain.record import RecordRead, reject_null
from crudmount.domain.request import ResourceRequest


class OrganizationPayload(BaseModel):
    """Organization body fields"""

    name: str = Field(..., min_length=1, max_length=200, description="Organization Name")
    email: str = Field(..., min_length=1, max_length=200, description="Contact Email")
    phone: Optional[str] = Field(None, max_length=50, description="Contact Phone")


class OrganizationRequest(ResourceRequest):
    """Base of all organization requests"""

    id_param = "org"
    path_fields = ("org",)


class OrganizationCreateRequest(OrganizationRequest, OrganizationPayload):
    """Request object for the create operation"""


class OrganizationGetRequest(OrganizationRequest):
    """Request object for the get operation"""

    org: str = Field(..., description="Organization ID")


class OrganizationListRequest(OrganizationRequest):
    """Request object for the list operation, fields double as query filters"""

    name: Optional[str] = Field(None, description="Filter by name")
    email: Optional[str] = Field(None, description="Filter by email")


class OrganizationUpdateRequest(OrganizationRequest):
    """Request object for the update operation (all body fields optional)"""

    org: UUID = Field(..., description="Organization ID")
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[str] = Field(None, min_length=1, max_length=200)
    phone: Optional[str] = Field(None, max_length=50)

    check_not_null = field_validator("name", "email")(reject_null)


class OrganizationDeleteRequest(OrganizationRequest):
    """Request object for the delete operation"""

    org: str = Field(..., description="Organization ID")


class OrganizationRead(RecordRead):
    """Organization Response Model"""

    name: str
    email: str
    phone: Optional[str] = None
