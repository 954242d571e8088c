"""Vote routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from forum.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from forum.domain.error import DomainError, NotFoundError, PersistenceError
from forum.domain.service import JWTService
from forum.domain.value import VoteType

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting."""

    type: VoteType


async def _cast_vote(
    cast_vote_use_case: CastVoteUseCase,
    user_id: str,
    thread_id: UUID,
    vote_type: VoteType,
    reply_id: UUID | None = None,
) -> CastVoteResponse:
    """Run the vote use case and translate domain errors to HTTP errors."""
    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                thread_id=str(thread_id),
                reply_id=str(reply_id) if reply_id else None,
                user_id=user_id,
                vote_type=vote_type,
            )
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except PersistenceError as e:
        logfire.error(
            "Vote could not be stored",
            thread_id=str(thread_id),
            reply_id=str(reply_id) if reply_id else None,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Voting is temporarily unavailable",
        )
    except DomainError as e:
        logfire.warn("Vote rejected", thread_id=str(thread_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post("/thread/{thread_id}", response_model=CastVoteResponse)
async def vote_on_thread(
    thread_id: UUID,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Upvote or downvote a thread.

    Voting again with the same type removes the vote; voting with the other
    type switches it. Requires authentication.

    Args:
        thread_id: Thread UUID
        request: Vote direction
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The thread's new net score and the user's resulting vote

    Raises:
        HTTPException: If not authenticated, thread not found, or storage fails
    """
    user_id = jwt_service.authenticated_user_id(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to vote",
        )

    return await _cast_vote(cast_vote_use_case, user_id, thread_id, request.type)


@router.post("/thread/{thread_id}/reply/{reply_id}", response_model=CastVoteResponse)
async def vote_on_reply(
    thread_id: UUID,
    reply_id: UUID,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Upvote or downvote a reply at any depth of a thread.

    Requires authentication. Reply votes do not change anyone's reputation.

    Args:
        thread_id: Thread UUID
        reply_id: Reply UUID
        request: Vote direction
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The reply's new net score and the user's resulting vote

    Raises:
        HTTPException: If not authenticated, thread or reply not found, or
            storage fails
    """
    user_id = jwt_service.authenticated_user_id(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to vote",
        )

    return await _cast_vote(
        cast_vote_use_case, user_id, thread_id, request.type, reply_id=reply_id
    )
