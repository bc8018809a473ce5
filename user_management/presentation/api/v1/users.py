"""User API endpoints."""

from fastapi import APIRouter, Depends, status

from user_management.application.dtos.user_dto import CreateUserDTO, UpdateUserDTO, UserDTO
from user_management.application.services.user_service import UserService
from user_management.presentation.dependencies import get_user_service
from user_management.presentation.error_schemas import ErrorResponse

router = APIRouter(prefix="/users", tags=["users"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_INVALID = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.post(
    "",
    response_model=UserDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    description="Register a user with name, email, and password. The email must not be registered yet.",
    responses={**_INVALID, status.HTTP_409_CONFLICT: {"model": ErrorResponse}},
)
async def create_user(
    dto: CreateUserDTO,
    service: UserService = Depends(get_user_service),
) -> UserDTO:
    """
    Create a new user.

    Exception handling is done by global exception handlers.
    The service layer raises domain/application exceptions,
    which are automatically converted to appropriate HTTP responses.
    """
    user = await service.create_user(dto.name, dto.email, dto.password)
    return UserDTO.from_entity(user)


@router.get(
    "",
    response_model=list[UserDTO],
    summary="List users",
    description="Retrieve every user, newest first.",
)
async def list_users(
    service: UserService = Depends(get_user_service),
) -> list[UserDTO]:
    """List all users."""
    users = await service.list_users()
    return [UserDTO.from_entity(user) for user in users]


@router.get(
    "/{user_id}",
    response_model=UserDTO,
    summary="Get user by ID",
    description="Retrieve a user by their ID.",
    responses=_NOT_FOUND,
)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserDTO:
    """Get user by ID."""
    return UserDTO.from_entity(await service.get_user(user_id))


@router.put(
    "/{user_id}",
    response_model=UserDTO,
    summary="Update user",
    description="Replace a user's name and email.",
    responses={**_INVALID, **_NOT_FOUND},
)
async def update_user(
    user_id: str,
    dto: UpdateUserDTO,
    service: UserService = Depends(get_user_service),
) -> UserDTO:
    """Update user."""
    user = await service.update_user(user_id, dto.name, dto.email)
    return UserDTO.from_entity(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user",
    description="Permanently delete a user by their ID.",
    responses=_NOT_FOUND,
)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> None:
    """Delete user."""
    await service.delete_user(user_id)
