"""
Tag Service Module

Tags belong to an organization and are mounted at /organization/{org}/tag.
"""

from crudmount.db.models import Tag
from crudmount.domain.request import Operation
from crudmount.domain.tag import (
    TagCreateRequest,
    TagDeleteRequest,
    TagGetRequest,
    TagListRequest,
    TagRead,
    TagUpdateRequest,
)
from crudmount.services.base import NestedResourceService


class TagService(NestedResourceService[Tag]):
    """Tag Service"""

    name = "organization/{org}/tag"
    path_params = ("tag",)
    tag = "tag"
    requests = {
        Operation.CREATE: TagCreateRequest,
        Operation.GET: TagGetRequest,
        Operation.LIST: TagListRequest,
        Operation.UPDATE: TagUpdateRequest,
        Operation.DELETE: TagDeleteRequest,
    }

    model = Tag
    schema = TagRead

    parent_param = "org"
    parent_field = "org_uuid"
