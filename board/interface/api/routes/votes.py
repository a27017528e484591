"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status

from board.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteStatusRequest,
    GetVoteStatusResponse,
    GetVoteStatusUseCase,
)
from board.config import Settings
from board.domain.error import DomainError
from board.interface.api.context import build_request_context
from board.interface.api.errors import to_http_exception

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


@router.post("/ideas/{idea_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    idea_id: int,
    request: Request,
    response: Response,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    settings: FromDishka[Settings],
) -> CastVoteResponse:
    """Vote for an idea.

    Works for authenticated users and anonymous visitors alike. Voting twice
    is not an error; the second response has accepted=false.

    Args:
        idea_id: Idea ID
        request: Incoming request (token and fingerprint cookies)
        response: Outgoing response (may set the fingerprint cookie)
        cast_vote_use_case: Cast vote use case from DI
        settings: Application settings

    Returns:
        Whether the vote counted and the idea's vote count

    Raises:
        HTTPException: 404 if the idea does not exist
    """
    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                idea_id=idea_id,
                context=build_request_context(request, response, settings),
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error casting vote", idea_id=idea_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to cast vote",
        )


@router.get("/ideas/{idea_id}/vote", response_model=GetVoteStatusResponse)
async def get_vote_status(
    idea_id: int,
    request: Request,
    response: Response,
    vote_status_use_case: FromDishka[GetVoteStatusUseCase],
    settings: FromDishka[Settings],
) -> GetVoteStatusResponse:
    """Whether the caller has voted on an idea.

    Raises:
        HTTPException: 404 if the idea does not exist
    """
    try:
        return await vote_status_use_case.execute(
            GetVoteStatusRequest(
                idea_id=idea_id,
                context=build_request_context(request, response, settings),
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
