"""Idea use cases."""

from .delete_idea import DeleteIdeaRequest, DeleteIdeaUseCase
from .get_board_statistics import GetBoardStatisticsResponse, GetBoardStatisticsUseCase
from .get_idea import GetIdeaRequest, GetIdeaResponse, GetIdeaUseCase
from .list_ideas import ListIdeasRequest, ListIdeasResponse, ListIdeasUseCase
from .submit_idea import SubmitIdeaRequest, SubmitIdeaResponse, SubmitIdeaUseCase
from .view import IdeaView

__all__ = [
    "DeleteIdeaRequest",
    "DeleteIdeaUseCase",
    "GetBoardStatisticsResponse",
    "GetBoardStatisticsUseCase",
    "GetIdeaRequest",
    "GetIdeaResponse",
    "GetIdeaUseCase",
    "IdeaView",
    "ListIdeasRequest",
    "ListIdeasResponse",
    "ListIdeasUseCase",
    "SubmitIdeaRequest",
    "SubmitIdeaResponse",
    "SubmitIdeaUseCase",
]
