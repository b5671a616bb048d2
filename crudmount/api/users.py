"""
User API

Endpoints for users that are not part of the mounted CRUD group.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from crudmount.api.deps import UserServiceDep

router = APIRouter(prefix="/user", tags=["user"])


@router.get("/types", name="user-types")
async def list_user_types(service: UserServiceDep):
    """
    List known user types
    """
    envelope = service.types()
    return JSONResponse(content=envelope.model_dump(mode="json"), status_code=envelope.status)
