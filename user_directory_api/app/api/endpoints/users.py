"""
User endpoints.

Create, list, update and delete users held by the application's
``UserService``.  Handlers only unwrap the request and wrap the result
in the ``{"success": ..., "message": ..., "data": ...}`` envelope;
validation and lookups happen in the service, whose errors are turned
into 400/404 responses by the handlers in ``core.exceptions``.
"""

from typing import Any, Dict, Optional, Type

from fastapi import APIRouter, Body, Depends, Request, status
from pydantic import BaseModel

from user_directory_api.app.schemas.user import (
    ErrorResponse,
    MessageResponse,
    UserCreate,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from user_directory_api.app.services.user_service import UserService

router = APIRouter()

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


def get_user_service(request: Request) -> UserService:
    """Return the store attached to the running application."""
    return request.app.state.user_service


def json_body(model: Type[BaseModel]) -> Dict[str, Any]:
    """OpenAPI ``requestBody`` for a payload validated inside the service.

    The handlers read the raw JSON so the service can report missing
    fields itself; this keeps the documented schema in the docs.
    """
    schema = model.model_json_schema(ref_template="#/components/schemas/{model}")
    schema.pop("$defs", None)
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema}},
        }
    }


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
    openapi_extra=json_body(UserCreate),
)
def create_user(
    payload: Optional[Any] = Body(None),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a user from ``name``, ``email``, ``role`` and ``status``."""
    user = service.create_user(payload if payload is not None else {})
    return UserResponse(message="User created successfully", data=user)


@router.get("", response_model=UserListResponse)
def list_users(service: UserService = Depends(get_user_service)) -> UserListResponse:
    """Return every user in creation order."""
    return UserListResponse(data=service.list_users())


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses=ERROR_RESPONSES,
    openapi_extra=json_body(UserUpdate),
)
def update_user(
    user_id: str,
    payload: Optional[Any] = Body(None),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Update any subset of a user's fields.

    ``user_id`` is taken as a string so that a non-numeric id is
    reported as ``Invalid user ID`` rather than a generic schema error.
    """
    user = service.update_user(user_id, payload if payload is not None else {})
    return UserResponse(message="User updated successfully", data=user)


@router.delete("/{user_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    service.delete_user(user_id)
    return MessageResponse(message="User deleted successfully")
