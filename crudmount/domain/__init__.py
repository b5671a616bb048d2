"""
Domain Model Module Initialization
"""

from crudmount.domain.request import Envelope, Operation, ResourceRequest
from crudmount.domain.record import RecordRead
from crudmount.domain.organization import (
    OrganizationCreateRequest,
    OrganizationGetRequest,
    OrganizationListRequest,
    OrganizationUpdateRequest,
    OrganizationDeleteRequest,
    OrganizationRead,
)
from crudmount.domain.user import (
    USER_TYPES,
    UserCreateRequest,
    UserGetRequest,
    UserListRequest,
    UserUpdateRequest,
    UserDeleteRequest,
    UserRead,
)
from crudmount.domain.tag import (
    TagCreateRequest,
    TagGetRequest,
    TagListRequest,
    TagUpdateRequest,
    TagDeleteRequest,
    TagRead,
)

__all__ = [
    "Envelope",
    "Operation",
    "ResourceRequest",
    "RecordRead",
    # Organization
    "OrganizationCreateRequest",
    "OrganizationGetRequest",
    "OrganizationListRequest",
    "OrganizationUpdateRequest",
    "OrganizationDeleteRequest",
    "OrganizationRead",
    # User
    "USER_TYPES",
    "UserCreateRequest",
    "UserGetRequest",
    "UserListRequest",
    "UserUpdateRequest",
    "UserDeleteRequest",
    "UserRead",
    # Tag
    "TagCreateRequest",
    "TagGetRequest",
    "TagListRequest",
    "TagUpdateRequest",
    "TagDeleteRequest",
    "TagRead",
]
