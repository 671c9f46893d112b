"""
User endpoints for API v1.

Provide listing, retrieval, creation, deletion and full or partial
update of users.  Request bodies are validated by the schemas in
``schemas.user``; domain errors raised by ``UserService`` are rendered
by the handlers registered in ``core.errors``.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from users_api.app.api.deps import get_user_service
from users_api.app.schemas.error import ErrorResponse
from users_api.app.schemas.user import UserCreate, UserEmailUpdate, UserRead, UserReplace
from users_api.app.services.user_service import UserService


router = APIRouter()

_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_CONFLICT = {status.HTTP_409_CONFLICT: {"model": ErrorResponse}}


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return every stored user."""
    return await service.list_users()


@router.get("/{user_id}", response_model=UserRead, responses={**_BAD_REQUEST, **_NOT_FOUND})
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserRead:
    """Return a single user by id, or 404."""
    return await service.get_user(user_id)


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses={**_BAD_REQUEST, **_CONFLICT},
)
async def create_user(
    user: UserCreate, service: UserService = Depends(get_user_service)
) -> UserRead:
    """Register a new user.

    The email is trimmed and lower-cased before the uniqueness check.
    Responds with 409 if another user already has it.
    """
    return await service.create_user(user)


@router.delete("/{user_id}", response_model=UserRead, responses={**_BAD_REQUEST, **_NOT_FOUND})
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserRead:
    """Delete a user and return the deleted record."""
    return await service.delete_user(user_id)


@router.put(
    "/{user_id}",
    response_model=UserRead,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_CONFLICT},
)
async def replace_user(
    user_id: str,
    body: UserReplace,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Replace the name and email of a user.

    The email is stored as submitted.  A user may resubmit its own
    email; any other user holding it causes a 409.
    """
    return await service.replace_user(user_id, body)


@router.patch(
    "/{user_id}",
    response_model=UserRead,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_CONFLICT},
)
async def update_user_email(
    user_id: str,
    body: UserEmailUpdate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Change only the email of a user; the name is left untouched."""
    return await service.update_user_email(user_id, body)
