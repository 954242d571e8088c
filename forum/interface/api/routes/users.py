"""User profile routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from forum.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)
from forum.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    PersistenceError,
)
from forum.domain.service import JWTService

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for editing the caller's profile."""

    model_config = ConfigDict(str_strip_whitespace=True)

    username: str | None = Field(
        default=None, min_length=3, max_length=30, pattern=r"^[A-Za-z0-9_.-]+$"
    )
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: HttpUrl | None = None


def _require_user(jwt_service: JWTService, auth_token: str | None) -> str:
    """Return the authenticated user's ID or raise 401."""
    user_id = jwt_service.authenticated_user_id(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id


# Declared before /{user_id} so "profile" is not parsed as a UUID
@router.get("/profile", response_model=GetUserProfileResponse)
async def get_own_profile(
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetUserProfileResponse:
    """Get the authenticated user's own profile.

    Args:
        get_user_profile_use_case: Get user profile use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Profile of the caller

    Raises:
        HTTPException: If not authenticated or the user record is missing
    """
    user_id = _require_user(jwt_service, auth_token)

    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(user_id=user_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )


@router.put("/profile", response_model=UpdateUserProfileResponse)
async def update_own_profile(
    request: UpdateProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateUserProfileResponse:
    """Update the authenticated user's username, bio or avatar.

    Args:
        request: Fields to change; omitted fields are left as they are
        update_user_profile_use_case: Update profile use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Updated profile

    Raises:
        HTTPException: If not authenticated, the username is taken, or the
            user store is unavailable
    """
    user_id = _require_user(jwt_service, auth_token)

    try:
        return await update_user_profile_use_case.execute(
            UpdateUserProfileRequest(
                user_id=user_id,
                username=request.username,
                bio=request.bio,
                avatar_url=str(request.avatar_url) if request.avatar_url else None,
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    except BusinessRuleViolationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except PersistenceError as e:
        logfire.error("Profile update failed", user_id=user_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to update profile",
        )


@router.get("/{user_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    user_id: UUID,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a user's public profile.

    Args:
        user_id: User UUID
        get_user_profile_use_case: Get user profile use case from DI

    Returns:
        Profile with reputation, thread and reply counts and the five latest
        threads

    Raises:
        HTTPException: If user not found
    """
    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(user_id=str(user_id))
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User '{user_id}' not found",
        )
