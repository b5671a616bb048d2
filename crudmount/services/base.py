"""
Resource Service Base Module

Defines the contract the generic mount (crudmount.api.generic) is written against,
plus a generic record-backed implementation shared by the concrete resources.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel

from crudmount.common.errors import AppError, NotFoundError
from crudmount.domain.request import Envelope, Operation, ResourceRequest
from crudmount.repositories.base import Storer
from crudmount.repositories.filter import Filter

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class ResourceService(ABC):
    """
    Resource Service Interface

    One implementation per resource. Everything the generic mount needs:
    route name, path parameters, request factory and the five operations.
    """

    # Route group, may embed parent placeholders, e.g. "organization/{org}/tag"
    name: ClassVar[str]
    # Path parameters of a single resource, appended to the group path
    path_params: ClassVar[tuple[str, ...]]
    # OpenAPI tag
    tag: ClassVar[str]
    # Request type for each operation
    requests: ClassVar[Mapping[Operation, type[ResourceRequest]]]

    def __init__(self, store: Storer):
        """
        Initialize Service

        Args:
            store: Storage capability
        """
        self.store = store

    def request_for(self, op: Operation) -> type[ResourceRequest]:
        """
        Request type for an operation

        Raises:
            ValueError: operation has no registered request type
        """
        try:
            return self.requests[Operation(op)]
        except (KeyError, ValueError) as exc:
            raise ValueError(f"{type(self).__name__} has no request for operation {op!r}") from exc

    def filter(self, request: ResourceRequest, base: Optional[Filter] = None, **conditions: Any) -> Filter:
        """Build the storage filter for a request"""
        return (base if base is not None else Filter()).where(**conditions)

    @abstractmethod
    async def create(self, request: ResourceRequest) -> Envelope:
        pass

    @abstractmethod
    async def get(self, request: ResourceRequest) -> Envelope:
        pass

    @abstractmethod
    async def list(self, request: ResourceRequest, filter: Filter) -> Envelope:
        pass

    @abstractmethod
    async def update(self, request: ResourceRequest) -> Envelope:
        pass

    @abstractmethod
    async def delete(self, request: ResourceRequest) -> None:
        """
        Delete a resource

        Raises:
            AppError: storage failure
        """
        pass


class RecordService(ResourceService, Generic[RecordT]):
    """
    Record-backed Resource Service

    Implements the five operations over one ORM model and one read schema.
    Business failures are returned as envelopes: NotFoundError -> 404,
    PersistenceError -> 500.
    """

    model: ClassVar[type]
    schema: ClassVar[type[BaseModel]]

    def build_record(self, request: ResourceRequest) -> RecordT:
        """Build a new record from a create request"""
        return self.model(**request.payload())

    def changes(self, request: ResourceRequest) -> dict[str, Any]:
        """Explicit presence map of the columns an update request sets"""
        return request.payload()

    def serialize(self, record: RecordT) -> BaseModel:
        return self.schema.model_validate(record)

    async def create(self, request: ResourceRequest) -> Envelope:
        """Create a resource"""
        record = self.build_record(request)
        try:
            await self.store.create(record)
        except AppError as exc:
            return Envelope.from_error(exc)
        return Envelope.ok(self.serialize(record))

    async def get(self, request: ResourceRequest) -> Envelope:
        """Get a resource"""
        try:
            record = await self.store.get(self.model, self.filter(request, uuid=request.get_id()))
        except AppError as exc:
            return Envelope.from_error(exc)
        return Envelope.ok(self.serialize(record))

    async def list(self, request: ResourceRequest, filter: Filter) -> Envelope:
        """List resources"""
        scoped = self.filter(request, filter)
        logger.debug("Listing %s with %r", self.model.__tablename__, scoped)
        try:
            records = await self.store.list(self.model, scoped)
        except AppError as exc:
            return Envelope.from_error(exc)
        return Envelope.ok([self.serialize(record) for record in records])

    async def update(self, request: ResourceRequest) -> Envelope:
        """Update a resource"""
        scoped = self.filter(request, uuid=request.get_id())
        try:
            affected = await self.store.update(self.model, scoped, self.changes(request))
            if not affected:
                raise NotFoundError()
            record = await self.store.get(self.model, scoped)
        except AppError as exc:
            return Envelope.from_error(exc)
        return Envelope.ok(self.serialize(record))

    async def delete(self, request: ResourceRequest) -> None:
        """Soft-delete a resource, zero matches is not an error"""
        await self.store.delete(self.model, self.filter(request, uuid=request.get_id()))


class NestedResourceService(RecordService[RecordT]):
    """
    Record Service nested under a parent resource

    Every filter built through filter() carries the parent scope taken from
    the request, and new records are attached to the parent.
    """

    # Path parameter holding the parent identifier
    parent_param: ClassVar[str]
    # Column referencing the parent
    parent_field: ClassVar[str]

    def __init__(self, store: Storer):
        missing = [attr for attr in ("parent_param", "parent_field") if not getattr(self, attr, None)]
        if missing:
            raise TypeError(f"{type(self).__name__} must declare {', '.join(missing)}")
        super().__init__(store)

    def parent_id(self, request: ResourceRequest) -> Any:
        return getattr(request, self.parent_param)

    def filter(self, request: ResourceRequest, base: Optional[Filter] = None, **conditions: Any) -> Filter:
        """Build the storage filter for a request, scoped to the parent"""
        return super().filter(request, base, **conditions).scoped(
            **{self.parent_field: self.parent_id(request)}
        )

    def build_record(self, request: ResourceRequest) -> RecordT:
        payload = request.payload()
        payload[self.parent_field] = self.parent_id(request)
        return self.model(**payload)
