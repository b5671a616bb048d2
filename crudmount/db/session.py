"""
Database Session Management Module

Provides asynchronous database engine and session factory, supporting SQLite and PostgreSQL.
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from crudmount.config import get_settings

# Get configuration
settings = get_settings()

# Create asynchronous database engine
# echo=True prints SQL statements in DEBUG mode
engine = create_async_engine(
    settings.get_database_url(),
    echo=settings.DEBUG,
    # SQLite specific configuration
    connect_args={"check_same_thread": False} if settings.is_sqlite else {},
)

# Enable foreign keys for SQLite
if settings.is_sqlite:
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

# Create asynchronous session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,  # Records stay readable after commit for serialization
    autoflush=False,
)

