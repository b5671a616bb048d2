"""
Base Repository Interface Module

Defines the resource-agnostic storage capability, decoupling services from the database implementation.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, TypeVar

from crudmount.repositories.filter import Filter

# Generic record type variable
T = TypeVar("T")


class Storer(ABC):
    """
    Storage Capability Interface

    Five primitives every resource's persistence is expressed with. Reads only
    see live records; delete is a soft delete.
    """

    @abstractmethod
    async def create(self, record: Any) -> int:
        """
        Persist a new record

        Assigns a freshly generated identifier to ``record.uuid`` (any caller value is replaced).

        Returns:
            int: Affected row count

        Raises:
            PersistenceError: Constraint violation or connection failure
        """
        pass

    @abstractmethod
    async def get(self, model: type[T], filter: Filter) -> T:
        """
        Get the first live record matching filter

        Raises:
            NotFoundError: No row matched
            PersistenceError: Any other storage failure
        """
        pass

    @abstractmethod
    async def list(self, model: type[T], filter: Filter) -> List[T]:
        """List all live records matching filter, in storage order"""
        pass

    @abstractmethod
    async def update(self, model: type[Any], filter: Filter, values: Mapping[str, Any]) -> int:
        """
        Partially update live records matching filter

        Only keys present in ``values`` are written; an explicit None clears the column.

        Returns:
            int: Affected row count
        """
        pass

    @abstractmethod
    async def delete(self, model: type[Any], filter: Filter) -> int:
        """
        Soft-delete live records matching filter

        Returns:
            int: Affected row count, zero is not an error
        """
        pass

    @abstractmethod
    async def run_migrations(self, *models: type[Any]) -> None:
        """Ensure tables exist for the given record types"""
        pass
