"""Idea routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Request, Response, status
from pydantic import BaseModel

from board.application.usecase.idea import (
    DeleteIdeaRequest,
    DeleteIdeaUseCase,
    GetBoardStatisticsResponse,
    GetBoardStatisticsUseCase,
    GetIdeaRequest,
    GetIdeaResponse,
    GetIdeaUseCase,
    ListIdeasRequest,
    ListIdeasResponse,
    ListIdeasUseCase,
    SubmitIdeaRequest,
    SubmitIdeaResponse,
    SubmitIdeaUseCase,
)
from board.config import Settings
from board.domain.error import DomainError
from board.domain.value import RankingMode
from board.interface.api.context import build_request_context
from board.interface.api.errors import to_http_exception

router = APIRouter(prefix="/ideas", tags=["ideas"], route_class=DishkaRoute)


class SubmitIdeaAPIRequest(BaseModel):
    """API request for submitting an idea."""

    title: str
    description: str


def _check_length(field: str, value: str, limit: int) -> None:
    if len(value.strip()) > limit:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Idea {field} must be at most {limit} characters",
        )


@router.post(
    "", response_model=SubmitIdeaResponse, status_code=status.HTTP_201_CREATED
)
async def submit_idea(
    body: SubmitIdeaAPIRequest,
    request: Request,
    response: Response,
    submit_idea_use_case: FromDishka[SubmitIdeaUseCase],
    settings: FromDishka[Settings],
) -> SubmitIdeaResponse:
    """Submit a new idea.

    Requires authentication unless the board allows anonymous ideas.

    Args:
        body: Idea title and description
        request: Incoming request (token and fingerprint cookies)
        response: Outgoing response
        submit_idea_use_case: Submit idea use case from DI
        settings: Application settings

    Returns:
        The created idea

    Raises:
        HTTPException: 400 on invalid input, 401 for anonymous callers
    """
    _check_length("title", body.title, settings.board.title_max_length)
    _check_length(
        "description", body.description, settings.board.description_max_length
    )

    try:
        return await submit_idea_use_case.execute(
            SubmitIdeaRequest(
                title=body.title,
                description=body.description,
                context=build_request_context(request, response, settings),
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error submitting idea", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to submit idea",
        )


@router.get("", response_model=ListIdeasResponse)
async def list_ideas(
    request: Request,
    response: Response,
    list_ideas_use_case: FromDishka[ListIdeasUseCase],
    settings: FromDishka[Settings],
    sort: RankingMode = Query(default=RankingMode.POPULAR),
    q: str | None = Query(default=None, max_length=200),
) -> ListIdeasResponse:
    """List ideas ranked by popularity or recency, optionally filtered.

    Args:
        request: Incoming request
        response: Outgoing response
        list_ideas_use_case: List ideas use case from DI
        settings: Application settings
        sort: Ranking mode (popular or recent)
        q: Search text matched against titles and descriptions

    Returns:
        Ranked ideas with the caller's vote status
    """
    return await list_ideas_use_case.execute(
        ListIdeasRequest(
            sort=sort,
            query=q,
            context=build_request_context(request, response, settings),
        )
    )


@router.get("/stats", response_model=GetBoardStatisticsResponse)
async def get_board_statistics(
    statistics_use_case: FromDishka[GetBoardStatisticsUseCase],
) -> GetBoardStatisticsResponse:
    """Totals of ideas and votes on the board."""
    return await statistics_use_case.execute()


@router.get("/{idea_id}", response_model=GetIdeaResponse)
async def get_idea(
    idea_id: int,
    request: Request,
    response: Response,
    get_idea_use_case: FromDishka[GetIdeaUseCase],
    settings: FromDishka[Settings],
) -> GetIdeaResponse:
    """Get a single idea.

    Raises:
        HTTPException: 404 if the idea does not exist
    """
    try:
        return await get_idea_use_case.execute(
            GetIdeaRequest(
                idea_id=idea_id,
                context=build_request_context(request, response, settings),
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete(
    "/{idea_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def delete_idea(
    idea_id: int,
    request: Request,
    response: Response,
    delete_idea_use_case: FromDishka[DeleteIdeaUseCase],
    settings: FromDishka[Settings],
) -> None:
    """Delete an idea and its votes.

    Admin only.

    Raises:
        HTTPException: 403 for non-admins, 404 if the idea does not exist
    """
    try:
        await delete_idea_use_case.execute(
            DeleteIdeaRequest(
                idea_id=idea_id,
                context=build_request_context(request, response, settings),
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
