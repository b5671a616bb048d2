"""
SQLAlchemy ORM Model Definitions

Defines all database table structures for the system, including:
- organizations: Organizations Table
- users: Organization Users Table
- tags: Organization Tags Table

Every record shares the RecordMixin columns: a UUID primary key assigned by the
store at creation time, creation/update timestamps and a soft-delete marker.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from crudmount.common.security import DEFAULT_ROUNDS, hash_password, verify_password
from crudmount.common.time import utc_naive_now


class Base(DeclarativeBase):
    """SQLAlchemy ORM Base Class"""
    pass


class RecordMixin:
    """Columns shared by every stored resource"""

    # Primary Key, generated by the store on create
    uuid: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    # Creation Time
    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, default=utc_naive_now, nullable=True
    )
    # Update Time
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, default=utc_naive_now, onupdate=utc_naive_now, nullable=True
    )
    # Soft-delete marker, NULL for live rows
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True, index=True
    )


class Organization(RecordMixin, Base):
    """
    Organizations Table

    Top-level tenant owning users and tags.
    """
    __tablename__ = "organizations"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)


class User(RecordMixin, Base):
    """
    Organization Users Table

    Password is stored as a bcrypt hash, see set_password().
    """
    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    password: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    birth_date: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    birth_place: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    # MANAGER / TEACHER / STUDENT
    type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    org_uuid: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("organizations.uuid"), nullable=False, index=True
    )

    def set_password(self, password: str, rounds: int = DEFAULT_ROUNDS) -> None:
        """Hash and store the given plain-text password"""
        self.password = hash_password(password, rounds=rounds)

    def authenticate(self, password: str) -> bool:
        """Check a plain-text password against the stored hash"""
        return verify_password(password, self.password)


class Tag(RecordMixin, Base):
    """
    Organization Tags Table
    """
    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    org_uuid: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("organizations.uuid"), nullable=False, index=True
    )


def get_models() -> list[type[Base]]:
    """Record types handed to the migration step on startup"""
    return [Organization, User, Tag]
