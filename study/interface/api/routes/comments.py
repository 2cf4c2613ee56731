"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from study.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from study.domain.error import DomainError
from study.interface.api.auth import CurrentUserId
from study.interface.error import to_http_error

router = APIRouter(prefix="/topics", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=10000)
    parent_id: str | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(min_length=1, max_length=10000)


@router.get("/{topic_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    topic_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    user_id: CurrentUserId,
) -> GetCommentsResponse:
    """Get the comment thread of a topic.

    Root comments come first in creation order, with replies nested under
    their parents, also in creation order.
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(topic_id=topic_id)
        )
    except ValueError as e:
        raise to_http_error(e, "Get comments")


@router.post(
    "/{topic_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    topic_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    user_id: CurrentUserId,
) -> CreateCommentResponse:
    """Comment on a topic or reply to another comment.

    Args:
        topic_id: Topic UUID
        request: Comment content and optional parent

    Returns:
        Created comment
    """
    try:
        use_case_request = CreateCommentRequest(
            topic_id=topic_id,
            content=request.content,
            author_id=user_id,
            parent_id=request.parent_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_error(e, "Create comment")


@router.patch(
    "/{topic_id}/comments/{comment_id}", response_model=UpdateCommentResponse
)
async def update_comment(
    topic_id: str,
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    user_id: CurrentUserId,
) -> UpdateCommentResponse:
    """Edit a comment's content. Only the author can edit."""
    try:
        use_case_request = UpdateCommentRequest(
            comment_id=comment_id,
            topic_id=topic_id,
            user_id=user_id,
            content=request.content,
        )
        return await update_comment_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_error(e, "Update comment")


@router.delete(
    "/{topic_id}/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def delete_comment(
    topic_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    user_id: CurrentUserId,
) -> None:
    """Delete a comment and its replies. Only the author can delete."""
    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(
                comment_id=comment_id, topic_id=topic_id, user_id=user_id
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e, "Delete comment")
