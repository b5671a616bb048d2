"""
API Router Module Initialization
"""

from crudmount.api.deps import get_store, get_user_service
from crudmount.api.docs import setup_openapi
from crudmount.api.generic import bind_request, mount
from crudmount.api.users import router as users_router

__all__ = [
    "get_store",
    "get_user_service",
    "setup_openapi",
    "bind_request",
    "mount",
    "users_router",
]
