"""Reply routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from forum.application.usecase.reply import (
    CreateReplyRequest,
    CreateReplyResponse,
    CreateReplyUseCase,
)
from forum.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    PersistenceError,
)
from forum.domain.service import JWTService

router = APIRouter(prefix="/threads", tags=["replies"], route_class=DishkaRoute)


class CreateReplyAPIRequest(BaseModel):
    """API request for replying."""

    content: str = Field(min_length=1, max_length=10000)
    parent_id: UUID | None = None  # Reply being answered, None for top level


@router.post(
    "/{thread_id}/replies",
    response_model=CreateReplyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    thread_id: UUID,
    request: CreateReplyAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateReplyResponse:
    """Reply to a thread or to one of its replies.

    Requires authentication.

    Args:
        thread_id: Thread UUID
        request: Reply content and optional parent reply
        create_reply_use_case: Create reply use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created reply details

    Raises:
        HTTPException: If not authenticated, thread or parent not found,
            nesting too deep, or storage fails
    """
    user_id = jwt_service.authenticated_user_id(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to reply",
        )

    try:
        return await create_reply_use_case.execute(
            CreateReplyRequest(
                thread_id=str(thread_id),
                author_id=user_id,
                content=request.content,
                parent_id=str(request.parent_id) if request.parent_id else None,
            )
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except BusinessRuleViolationError as e:
        logfire.warn("Reply rejected", thread_id=str(thread_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except PersistenceError as e:
        logfire.error("Reply creation failed", thread_id=str(thread_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to create reply",
        )
