"""
User Service Module

Users belong to an organization and are mounted at /organization/{org}/user.
Passwords are hashed with bcrypt before they reach storage.
"""

from typing import Any, Optional

from crudmount.common.security import DEFAULT_ROUNDS, hash_password
from crudmount.db.models import User
from crudmount.domain.request import Envelope, Operation, ResourceRequest
from crudmount.domain.user import (
    USER_TYPES,
    UserCreateRequest,
    UserDeleteRequest,
    UserGetRequest,
    UserListRequest,
    UserRead,
    UserUpdateRequest,
)
from crudmount.repositories.base import Storer
from crudmount.services.base import NestedResourceService


class UserService(NestedResourceService[User]):
    """User Service"""

    name = "organization/{org}/user"
    path_params = ("user",)
    tag = "user"
    requests = {
        Operation.CREATE: UserCreateRequest,
        Operation.GET: UserGetRequest,
        Operation.LIST: UserListRequest,
        Operation.UPDATE: UserUpdateRequest,
        Operation.DELETE: UserDeleteRequest,
    }

    model = User
    schema = UserRead

    parent_param = "org"
    parent_field = "org_uuid"

    def __init__(self, store: Storer, password_rounds: Optional[int] = None):
        """
        Initialize Service

        Args:
            store: Storage capability
            password_rounds: bcrypt cost factor for stored passwords
        """
        super().__init__(store)
        self.password_rounds = password_rounds or DEFAULT_ROUNDS

    def build_record(self, request: ResourceRequest) -> User:
        payload = request.payload()
        password = payload.pop("password", None)
        payload[self.parent_field] = self.parent_id(request)
        user = User(**payload)
        if password is not None:
            user.set_password(password, rounds=self.password_rounds)
        return user

    def changes(self, request: ResourceRequest) -> dict[str, Any]:
        values = request.payload()
        if values.get("password") is not None:
            values["password"] = hash_password(values["password"], rounds=self.password_rounds)
        return values

    def types(self) -> Envelope:
        """Known user types"""
        return Envelope.ok(list(USER_TYPES))
