"""Get board statistics use case."""

from pydantic import BaseModel

from board.domain.service import IdeaService


class GetBoardStatisticsResponse(BaseModel):
    """Board statistics response."""

    total_ideas: int
    total_votes: int


class GetBoardStatisticsUseCase:
    """Use case for the totals shown on the board's stats panel."""

    def __init__(self, idea_service: IdeaService) -> None:
        self.idea_service = idea_service

    async def execute(self) -> GetBoardStatisticsResponse:
        stats = await self.idea_service.get_statistics()
        return GetBoardStatisticsResponse(
            total_ideas=stats.total_ideas,
            total_votes=stats.total_votes,
        )
