"""Attachment routes.

Uploads send the raw file as the request body, the original file name as
the ``filename`` query parameter and the MIME type as ``Content-Type``.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, Request, status

from study.adapter.error import AdapterError
from study.application.usecase.attachment import (
    DeleteAttachmentRequest,
    DeleteAttachmentUseCase,
    ListAttachmentsRequest,
    ListAttachmentsResponse,
    ListAttachmentsUseCase,
    UploadAttachmentRequest,
    UploadAttachmentResponse,
    UploadAttachmentUseCase,
)
from study.domain.error import DomainError
from study.interface.api.auth import CurrentUserId
from study.interface.error import to_http_error

router = APIRouter(tags=["attachments"], route_class=DishkaRoute)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


async def _upload(
    request: Request,
    use_case: UploadAttachmentUseCase,
    user_id: str,
    topic_id: str,
    comment_id: str | None,
    filename: str,
    content_type: str | None,
) -> UploadAttachmentResponse:
    try:
        payload = await request.body()
        return await use_case.execute(
            UploadAttachmentRequest(
                topic_id=topic_id,
                comment_id=comment_id,
                user_id=user_id,
                file_name=filename,
                content_type=content_type or DEFAULT_CONTENT_TYPE,
                payload=payload,
            )
        )
    except (DomainError, AdapterError, ValueError) as e:
        raise to_http_error(e, "Upload attachment")


@router.get("/topics/{topic_id}/attachments", response_model=ListAttachmentsResponse)
async def list_topic_attachments(
    topic_id: str,
    list_attachments_use_case: FromDishka[ListAttachmentsUseCase],
    user_id: CurrentUserId,
) -> ListAttachmentsResponse:
    """Files attached to a topic, newest first."""
    try:
        return await list_attachments_use_case.execute(
            ListAttachmentsRequest(topic_id=topic_id)
        )
    except ValueError as e:
        raise to_http_error(e, "List attachments")


@router.post(
    "/topics/{topic_id}/attachments",
    response_model=UploadAttachmentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_topic_attachment(
    topic_id: str,
    request: Request,
    upload_attachment_use_case: FromDishka[UploadAttachmentUseCase],
    user_id: CurrentUserId,
    filename: str = Query(min_length=1, max_length=255),
    content_type: str | None = Header(default=None),
) -> UploadAttachmentResponse:
    """Upload a file to a topic (images and PDFs, 5 MB by default)."""
    return await _upload(
        request,
        upload_attachment_use_case,
        user_id,
        topic_id,
        None,
        filename,
        content_type,
    )


@router.get(
    "/topics/{topic_id}/comments/{comment_id}/attachments",
    response_model=ListAttachmentsResponse,
)
async def list_comment_attachments(
    topic_id: str,
    comment_id: str,
    list_attachments_use_case: FromDishka[ListAttachmentsUseCase],
    user_id: CurrentUserId,
) -> ListAttachmentsResponse:
    """Files attached to a comment, oldest first."""
    try:
        return await list_attachments_use_case.execute(
            ListAttachmentsRequest(comment_id=comment_id)
        )
    except ValueError as e:
        raise to_http_error(e, "List attachments")


@router.post(
    "/topics/{topic_id}/comments/{comment_id}/attachments",
    response_model=UploadAttachmentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_comment_attachment(
    topic_id: str,
    comment_id: str,
    request: Request,
    upload_attachment_use_case: FromDishka[UploadAttachmentUseCase],
    user_id: CurrentUserId,
    filename: str = Query(min_length=1, max_length=255),
    content_type: str | None = Header(default=None),
) -> UploadAttachmentResponse:
    """Upload a file to a comment of the topic."""
    return await _upload(
        request,
        upload_attachment_use_case,
        user_id,
        topic_id,
        comment_id,
        filename,
        content_type,
    )


@router.delete(
    "/attachments/{attachment_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def delete_attachment(
    attachment_id: str,
    delete_attachment_use_case: FromDishka[DeleteAttachmentUseCase],
    user_id: CurrentUserId,
) -> None:
    """Delete an attachment record. Only the uploader can delete."""
    try:
        await delete_attachment_use_case.execute(
            DeleteAttachmentRequest(attachment_id=attachment_id, user_id=user_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_error(e, "Delete attachment")
