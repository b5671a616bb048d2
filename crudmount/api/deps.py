"""
API Dependency Injection Module

Provides dependencies required by FastAPI routes.
"""

from typing import Annotated

from fastapi import Depends, Request

from crudmount.config import get_settings
from crudmount.repositories.base import Storer
from crudmount.services import UserService


# ============ Storage Dependency ============

def get_store(request: Request) -> Storer:
    """
    Get the application store

    The store is built once by create_app and kept on app.state.
    """
    return request.app.state.store


StoreDep = Annotated[Storer, Depends(get_store)]


# ============ Service Dependency ============

def get_user_service(store: StoreDep) -> UserService:
    """Get the user service"""
    return UserService(store, password_rounds=get_settings().PASSWORD_HASH_ROUNDS)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
