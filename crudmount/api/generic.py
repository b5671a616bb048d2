"""
Generic Resource Mount

Derives the five CRUD routes of a resource service and registers them on the
application. Handlers bind path, query and body input into the request type the
service declares for each operation, call the service and return its envelope.
"""

import json
import logging
from typing import Any, Awaitable, Callable

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from crudmount.common.errors import AppError, BindError
from crudmount.domain.request import Envelope, Operation, ResourceRequest
from crudmount.repositories.filter import Filter
from crudmount.services.base import ResourceService

logger = logging.getLogger(__name__)

Handler = Callable[[Request], Awaitable[Response]]

# Status returned when binding fails, per operation
BIND_ERROR_STATUS = {
    Operation.CREATE: 500,
    Operation.GET: 500,
    Operation.LIST: 500,
    Operation.UPDATE: 400,
    Operation.DELETE: 400,
}

# HTTP method and whether the route addresses a single resource
ROUTES = {
    Operation.CREATE: ("POST", False),
    Operation.LIST: ("GET", False),
    Operation.GET: ("GET", True),
    Operation.UPDATE: ("PATCH", True),
    Operation.DELETE: ("DELETE", True),
}


def child_path(path_params: tuple[str, ...]) -> str:
    """Path of a single resource below the group, e.g. ("org",) -> "/{org}" """
    return "".join(f"/{{{param}}}" for param in path_params)


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


async def bind_request(request: Request, request_cls: type[ResourceRequest], op: Operation) -> ResourceRequest:
    """
    Bind transport input into a request object

    Query parameters are bound for list, the JSON body for create/update and
    route path parameters for every operation. Path parameters are applied last
    so a body cannot override the addressed resource.

    Args:
        request: Incoming HTTP request
        request_cls: Request type declared by the service for the operation
        op: Operation being served

    Returns:
        ResourceRequest: Bound request object

    Raises:
        BindError: Body is not a JSON object or validation failed
    """
    data: dict[str, Any] = {}

    if op == Operation.LIST:
        data.update(request.query_params)

    if op in (Operation.CREATE, Operation.UPDATE):
        raw = await request.body()
        if raw.strip():
            try:
                body = json.loads(raw)
            except ValueError as exc:
                raise BindError(f"invalid JSON body: {exc}") from exc
            if not isinstance(body, dict):
                raise BindError("request body must be a JSON object")
            data.update(body)

    data.update(request.path_params)

    try:
        return request_cls.model_validate(data)
    except ValidationError as exc:
        raise BindError(_validation_message(exc)) from exc


def _envelope_response(envelope: Envelope) -> JSONResponse:
    return JSONResponse(content=envelope.model_dump(mode="json"), status_code=envelope.status)


def _make_handler(service: ResourceService, op: Operation, route_name: str) -> Handler:
    request_cls = service.request_for(op)

    async def handler(request: Request) -> Response:
        try:
            bound = await bind_request(request, request_cls, op)
        except BindError as exc:
            status_code = BIND_ERROR_STATUS[op]
            logger.warning("%s-bind-error: %s", route_name, exc.message)
            return JSONResponse(content=exc.to_envelope(status_code), status_code=status_code)

        if op == Operation.CREATE:
            return _envelope_response(await service.create(bound))
        if op == Operation.GET:
            return _envelope_response(await service.get(bound))
        if op == Operation.LIST:
            return _envelope_response(await service.list(bound, Filter(bound.payload())))
        if op == Operation.UPDATE:
            return _envelope_response(await service.update(bound))

        try:
            await service.delete(bound)
        except AppError as exc:
            logger.error("%s failed: %s", route_name, exc.message)
            return Response(status_code=500)
        except Exception:
            logger.exception("%s failed", route_name)
            return Response(status_code=500)
        return Response(status_code=204)

    handler.__name__ = route_name.replace("-", "_")
    return handler


def _openapi_extra(service: ResourceService, op: Operation, path: str) -> dict[str, Any]:
    """OpenAPI parameters and request body taken from the bound request type"""
    request_cls = service.request_for(op)
    schema = request_cls.model_json_schema()
    properties = schema.get("properties", {})

    path_names = [
        segment[1:-1] for segment in path.split("/")
        if segment.startswith("{") and segment.endswith("}")
    ]
    parameters = [
        {"name": name, "in": "path", "required": True, "schema": {"type": "string"}}
        for name in path_names
    ]

    if op == Operation.LIST:
        for name, prop in properties.items():
            if name in request_cls.path_fields:
                continue
            parameters.append({
                "name": name,
                "in": "query",
                "required": False,
                "description": prop.get("description", ""),
                "schema": {"type": "string"},
            })

    extra: dict[str, Any] = {"parameters": parameters}

    if op in (Operation.CREATE, Operation.UPDATE):
        body = {
            "title": schema.get("title", request_cls.__name__),
            "type": "object",
            "properties": {
                name: prop for name, prop in properties.items()
                if name not in request_cls.path_fields
            },
        }
        required = [name for name in schema.get("required", []) if name not in request_cls.path_fields]
        if required:
            body["required"] = required
        extra["requestBody"] = {
            "required": op == Operation.CREATE,
            "content": {"application/json": {"schema": body}},
        }

    return extra


def mount(app: FastAPI, service: ResourceService) -> APIRouter:
    """
    Mount a resource service

    Registers POST/GET on the group path and GET/PATCH/DELETE on the child path
    derived from service.path_params. Routes are named "<first-path-param>-<op>".

    Args:
        app: Application (or router) to register on
        service: Resource service to expose

    Returns:
        APIRouter: The router holding the five routes
    """
    prefix = "/" + service.name.strip("/")
    router = APIRouter(prefix=prefix, tags=[service.tag])
    item_path = child_path(service.path_params)
    base_name = service.path_params[0]

    for op, (method, single) in ROUTES.items():
        path = item_path if single else ""
        route_name = f"{base_name}-{op.value}"
        router.add_api_route(
            path,
            _make_handler(service, op, route_name),
            methods=[method],
            name=route_name,
            summary=f"{op.value.capitalize()} {service.tag}",
            openapi_extra=_openapi_extra(service, op, prefix + path),
            response_model=None,
        )
        logger.debug("Mounted %s %s%s as %s", method, prefix, path, route_name)

    app.include_router(router)
    return router
