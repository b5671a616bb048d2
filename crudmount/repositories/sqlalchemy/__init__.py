"""
SQLAlchemy Storage Implementation Module Initialization
"""

from crudmount.repositories.sqlalchemy.store import SQLAlchemyStore

__all__ = [
    "SQLAlchemyStore",
]
