"""
Service Layer Module Initialization
"""

from crudmount.services.base import NestedResourceService, RecordService, ResourceService
from crudmount.services.organization_service import OrganizationService
from crudmount.services.user_service import UserService
from crudmount.services.tag_service import TagService

__all__ = [
    "ResourceService",
    "RecordService",
    "NestedResourceService",
    "OrganizationService",
    "UserService",
    "TagService",
]
