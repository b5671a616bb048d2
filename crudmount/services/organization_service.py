"""
Organization Service Module

Organizations are top-level resources mounted at /organization.
"""

from crudmount.db.models import Organization
from crudmount.domain.organization import (
    OrganizationCreateRequest,
    OrganizationDeleteRequest,
    OrganizationGetRequest,
    OrganizationListRequest,
    OrganizationRead,
    OrganizationUpdateRequest,
)
from crudmount.domain.request import Operation
from crudmount.services.base import RecordService


class OrganizationService(RecordService[Organization]):
    """Organization Service"""

    name = "organization"
    path_params = ("org",)
    tag = "organization"
    requests = {
        Operation.CREATE: OrganizationCreateRequest,
        Operation.GET: OrganizationGetRequest,
        Operation.LIST: OrganizationListRequest,
        Operation.UPDATE: OrganizationUpdateRequest,
        Operation.DELETE: OrganizationDeleteRequest,
    }

    model = Organization
    schema = OrganizationRead
