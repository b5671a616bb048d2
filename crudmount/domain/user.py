"""
User Domain Model

Defines the per-operation request objects and the read schema of organization users.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from crudmount.domain.record import RecordRead, reject_null
from crudmount.domain.request import ResourceRequest

TYPE_MANAGER = "MANAGER"
TYPE_TEACHER = "TEACHER"
TYPE_STUDENT = "STUDENT"

USER_TYPES = (TYPE_MANAGER, TYPE_TEACHER, TYPE_STUDENT)

PASSWORD_MAX_BYTES = 72


def check_password_length(v: Optional[str]) -> Optional[str]:
    # bcrypt rejects secrets longer than 72 bytes
    if v is not None and len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"password must be at most {PASSWORD_MAX_BYTES} bytes")
    return v


def check_user_type(v: Optional[str]) -> Optional[str]:
    if v is not None and v not in USER_TYPES:
        raise ValueError(f"type must be one of {', '.join(USER_TYPES)}")
    return v


class UserFields(BaseModel):
    """Optional user body fields"""

    password: Optional[str] = Field(None, min_length=1, description="Plain-text password")
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    birth_date: Optional[str] = Field(None, max_length=50)
    birth_place: Optional[str] = Field(None, max_length=200)
    address: Optional[str] = None
    phone: Optional[str] = Field(None, max_length=50)
    type: Optional[str] = Field(None, description="MANAGER / TEACHER / STUDENT")

    check_type = field_validator("type")(check_user_type)
    check_password = field_validator("password")(check_password_length)


class UserRequest(ResourceRequest):
    """Base of all user requests"""

    id_param = "user"
    path_fields = ("org", "user")


class UserCreateRequest(UserRequest, UserFields):
    """Request object for the create operation"""

    org: UUID = Field(..., description="Organization ID")
    email: str = Field(..., min_length=1, max_length=200)


class UserGetRequest(UserRequest):
    """Request object for the get operation"""

    org: str = Field(..., description="Organization ID")
    user: str = Field(..., description="User ID")


class UserListRequest(UserRequest):
    """Request object for the list operation, fields double as query filters"""

    org: str = Field(..., description="Organization ID")
    email: Optional[str] = Field(None, description="Filter by email")
    type: Optional[str] = Field(None, description="Filter by type")
    first_name: Optional[str] = Field(None, description="Filter by first name")
    last_name: Optional[str] = Field(None, description="Filter by last name")


class UserUpdateRequest(UserRequest, UserFields):
    """Request object for the update operation (all body fields optional)"""

    org: UUID = Field(..., description="Organization ID")
    user: UUID = Field(..., description="User ID")
    email: Optional[str] = Field(None, min_length=1, max_length=200)

    check_not_null = field_validator("email", "password")(reject_null)


class UserDeleteRequest(UserRequest):
    """Request object for the delete operation"""

    org: str = Field(..., description="Organization ID")
    user: str = Field(..., description="User ID")


class UserRead(RecordRead):
    """User Response Model, the password hash is never exposed"""

    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    birth_date: Optional[str] = None
    birth_place: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    type: Optional[str] = None
    org: UUID = Field(..., validation_alias="org_uuid", description="Organization ID")
