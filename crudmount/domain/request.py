"""
Request/Response Domain Model

Defines the operation tag, the per-operation request base and the uniform
response envelope shared by the generic mount and every resource service.
"""

from enum import Enum
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict

from crudmount.common.errors import AppError


class Operation(str, Enum):
    """The five operations mounted for every resource"""

    CREATE = "create"
    GET = "get"
    LIST = "list"
    UPDATE = "update"
    DELETE = "delete"


class Envelope(BaseModel):
    """
    Uniform Response Envelope

    status always mirrors the outcome; on error data is None and errors is non-empty.
    """

    status: int
    errors: Optional[list[str]] = None
    data: Any = None

    @classmethod
    def ok(cls, data: Any, status: int = 200) -> "Envelope":
        return cls(status=status, errors=None, data=data)

    @classmethod
    def failure(cls, status: int, *messages: str) -> "Envelope":
        return cls(status=status, errors=list(messages) or ["unknown error"], data=None)

    @classmethod
    def from_error(cls, exc: AppError) -> "Envelope":
        return cls.failure(exc.status_code, exc.message)


class ResourceRequest(BaseModel):
    """
    Per-operation request object

    Subclasses declare the fields bound from the route path, query string and
    JSON body. Unknown input keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    # Path parameter identifying the resource (get/update/delete)
    id_param: ClassVar[Optional[str]] = None
    # Fields bound from the route path, never part of the payload
    path_fields: ClassVar[tuple[str, ...]] = ()

    def get_id(self) -> Optional[str]:
        """Bound value of the identifying path parameter, None when not bound"""
        if not self.id_param:
            return None
        value = getattr(self, self.id_param, None)
        return None if value is None else str(value)

    def payload(self) -> dict[str, Any]:
        """Fields explicitly provided by the client, path fields excluded"""
        return self.model_dump(exclude_unset=True, exclude=set(self.path_fields))
