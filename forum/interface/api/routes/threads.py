"""Thread routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from forum.application.usecase.thread import (
    CreateThreadRequest,
    CreateThreadResponse,
    CreateThreadUseCase,
    DeleteThreadRequest,
    DeleteThreadResponse,
    DeleteThreadUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    UpdateThreadRequest,
    UpdateThreadResponse,
    UpdateThreadUseCase,
)
from forum.domain.error import (
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    PersistenceError,
)
from forum.domain.service import JWTService

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class CreateThreadAPIRequest(BaseModel):
    """API request for creating a thread."""

    title: str = Field(min_length=5, max_length=200)
    content: str = Field(min_length=10, max_length=10000)
    category_id: UUID
    tag_ids: list[UUID] = Field(default_factory=list, max_length=5)


class UpdateThreadAPIRequest(BaseModel):
    """API request for editing a thread."""

    title: str | None = Field(default=None, min_length=5, max_length=200)
    content: str | None = Field(default=None, min_length=10, max_length=10000)


def _require_user(jwt_service: JWTService, auth_token: str | None, action: str) -> str:
    """Return the authenticated user's ID or raise 401."""
    user_id = jwt_service.authenticated_user_id(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id


@router.post(
    "", response_model=CreateThreadResponse, status_code=status.HTTP_201_CREATED
)
async def create_thread(
    request: CreateThreadAPIRequest,
    create_thread_use_case: FromDishka[CreateThreadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateThreadResponse:
    """Start a new thread.

    Requires authentication.

    Args:
        request: Thread creation data
        create_thread_use_case: Create thread use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created thread details

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = _require_user(jwt_service, auth_token, "create threads")

    try:
        return await create_thread_use_case.execute(
            CreateThreadRequest(
                author_id=user_id,
                title=request.title,
                content=request.content,
                category_id=str(request.category_id),
                tag_ids=[str(tag_id) for tag_id in request.tag_ids],
            )
        )
    except PersistenceError as e:
        logfire.error("Thread creation failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to create thread",
        )
    except (DomainError, ValueError) as e:
        logfire.warn("Thread creation rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/{thread_id}", response_model=GetThreadResponse)
async def get_thread(
    thread_id: UUID,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetThreadResponse:
    """Read a thread with all of its replies.

    Counts as a view. Authentication is optional; when present, each item
    carries the viewer's own vote.

    Args:
        thread_id: Thread UUID
        get_thread_use_case: Get thread use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie (optional)

    Returns:
        Thread details with replies in tree order

    Raises:
        HTTPException: If thread not found
    """
    user_id = jwt_service.authenticated_user_id(auth_token)

    try:
        return await get_thread_use_case.execute(
            GetThreadRequest(thread_id=str(thread_id), user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except PersistenceError as e:
        logfire.error("Thread read failed", thread_id=str(thread_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to load thread",
        )


@router.patch("/{thread_id}", response_model=UpdateThreadResponse)
async def update_thread(
    thread_id: UUID,
    request: UpdateThreadAPIRequest,
    update_thread_use_case: FromDishka[UpdateThreadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateThreadResponse:
    """Edit a thread's title or content.

    Only the author can edit.

    Args:
        thread_id: Thread UUID
        request: New title and/or content
        update_thread_use_case: Update thread use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Updated thread details

    Raises:
        HTTPException: If not authenticated, not the author, or not found
    """
    user_id = _require_user(jwt_service, auth_token, "edit threads")

    try:
        return await update_thread_use_case.execute(
            UpdateThreadRequest(
                thread_id=str(thread_id),
                user_id=user_id,
                title=request.title,
                content=request.content,
            )
        )
    except NotAuthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except PersistenceError as e:
        logfire.error("Thread update failed", thread_id=str(thread_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to update thread",
        )
    except (DomainError, ValueError) as e:
        logfire.warn("Thread update rejected", thread_id=str(thread_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/{thread_id}", response_model=DeleteThreadResponse)
async def delete_thread(
    thread_id: UUID,
    delete_thread_use_case: FromDishka[DeleteThreadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteThreadResponse:
    """Delete a thread and all of its replies.

    Only the author or an administrator can delete.

    Args:
        thread_id: Thread UUID
        delete_thread_use_case: Delete thread use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Confirmation message

    Raises:
        HTTPException: If not authenticated, not allowed, or not found
    """
    user_id = _require_user(jwt_service, auth_token, "delete threads")

    try:
        return await delete_thread_use_case.execute(
            DeleteThreadRequest(thread_id=str(thread_id), user_id=user_id)
        )
    except NotAuthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except PersistenceError as e:
        logfire.error("Thread delete failed", thread_id=str(thread_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to delete thread",
        )
