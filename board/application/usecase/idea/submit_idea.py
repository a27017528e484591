"""Submit idea use case."""

import logfire
from pydantic import BaseModel

from board.application.context import RequestContext
from board.config import BoardSettings
from board.domain.error import AuthenticationRequiredError
from board.domain.repository import UnitOfWork
from board.domain.service import IdeaService, IdentityService
from board.domain.value import AnonymousVoter

from .view import IdeaView


class SubmitIdeaRequest(BaseModel):
    """Submit idea request."""

    title: str
    description: str
    context: RequestContext


class SubmitIdeaResponse(BaseModel):
    """Submit idea response."""

    idea: IdeaView


class SubmitIdeaUseCase:
    """Use case for submitting a new idea."""

    def __init__(
        self,
        identity_service: IdentityService,
        idea_service: IdeaService,
        board_settings: BoardSettings,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize submit idea use case.

        Args:
            identity_service: Identity domain service
            idea_service: Idea domain service
            board_settings: Board settings
            unit_of_work: Commit boundary of the request
        """
        self.identity_service = identity_service
        self.idea_service = idea_service
        self.board_settings = board_settings
        self.unit_of_work = unit_of_work

    async def execute(self, request: SubmitIdeaRequest) -> SubmitIdeaResponse:
        """Execute submit idea flow.

        Steps:
        1. Resolve the author from the request context
        2. Reject anonymous authors unless the board allows them
        3. Create the idea (trimming and validation happen in IdeaService)

        Args:
            request: Submit idea request

        Returns:
            Submit idea response with the stored idea

        Raises:
            AuthenticationRequiredError: If the author is anonymous
            ValidationError: If title or description is blank
        """
        author = self.identity_service.resolve(
            request.context.auth_token, request.context.fingerprint_store
        )

        if (
            isinstance(author, AnonymousVoter)
            and not self.board_settings.allow_anonymous_ideas
        ):
            logfire.warn("Anonymous idea submission rejected")
            raise AuthenticationRequiredError("submit ideas")

        with logfire.span("submit_idea.execute", author=str(author)):
            idea = await self.idea_service.create_idea(
                title=request.title,
                description=request.description,
                author=author,
            )

            await self.unit_of_work.commit()
            logfire.info("Idea submitted", idea_id=idea.id)

            return SubmitIdeaResponse(idea=IdeaView.from_idea(idea))
