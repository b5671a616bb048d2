"""
OpenAPI Documentation

Registers the API metadata served at /openapi.json and rendered at /swagger.
"""

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from crudmount import __version__

DESCRIPTION = "Organization, user and tag management over generic CRUD routes."
CONTACT = {"name": "API Support", "url": "http://demo.com/support", "email": "support@swagger.io"}
LICENSE = {"name": "MIT", "url": "https://opensource.org/licenses/MIT"}


def setup_openapi(app: FastAPI) -> None:
    """
    Attach the OpenAPI schema builder to an application

    The schema is generated on first access and cached on the app.

    Args:
        app: FastAPI application
    """

    def build_schema() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema
        app.openapi_schema = get_openapi(
            title=app.title,
            version=app.version or __version__,
            description=DESCRIPTION,
            routes=app.routes,
            tags=[
                {"name": "organization", "description": "Organizations"},
                {"name": "user", "description": "Users of an organization"},
                {"name": "tag", "description": "Tags of an organization"},
            ],
            contact=CONTACT,
            license_info=LICENSE,
            terms_of_service="demo.com",
        )
        return app.openapi_schema

    app.openapi = build_schema
