"""
Database Module Initialization
"""

from crudmount.db.session import AsyncSessionLocal, engine
from crudmount.db.models import (
    Base,
    RecordMixin,
    Organization,
    User,
    Tag,
    get_models,
)

__all__ = [
    "AsyncSessionLocal",
    "engine",
    "Base",
    "RecordMixin",
    "Organization",
    "User",
    "Tag",
    "get_models",
]
