"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from study.domain.service import CommentService, ProfileService, TopicService
from study.domain.value import CommentId, TopicId, UserId

from .items import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    topic_id: str  # UUID string
    content: str = Field(min_length=1, max_length=10000)
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for creating a comment on a topic or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        topic_service: TopicService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            topic_service: Topic domain service
            profile_service: Profile service for author display fields
        """
        self.comment_service = comment_service
        self.topic_service = topic_service
        self.profile_service = profile_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify topic exists
        2. Create comment via comment service (validates parent if replying)

        Raises:
            NotFoundError: If the topic does not exist
            ValueError: If the parent comment is invalid
        """
        if not request.content.strip():
            raise ValueError("Comment must not be blank")

        topic_id = TopicId(UUID(request.topic_id))
        await self.topic_service.get_topic(topic_id)

        author_id = UserId(UUID(request.author_id))
        profile = await self.profile_service.find_profile(author_id)

        comment = await self.comment_service.create_comment(
            topic_id=topic_id,
            author_id=author_id,
            content=request.content,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
            author_username=profile.username.root if profile else None,
            author_avatar_url=profile.avatar_url if profile else None,
        )
        return CreateCommentResponse(comment=CommentItem.from_domain(comment))
