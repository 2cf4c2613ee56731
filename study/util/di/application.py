"""Application layer DI providers."""

from dishka import Scope, provide

from study.application.usecase.attachment import (
    DeleteAttachmentUseCase,
    ListAttachmentsUseCase,
    UploadAttachmentUseCase,
)
from study.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from study.application.usecase.profile import GetProfileUseCase, UpdateProfileUseCase
from study.application.usecase.topic import (
    CreateTopicUseCase,
    DeleteTopicUseCase,
    GetCalendarUseCase,
    GetTopicsForDayUseCase,
    GetTopicUseCase,
    ListTopicsUseCase,
    UpdateTopicStatusUseCase,
    UpdateTopicUseCase,
)
from study.config import CalendarSettings
from study.domain.service import (
    AttachmentService,
    CommentService,
    ProfileService,
    TopicService,
)
from study.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Topic use cases
    @provide(scope=Scope.REQUEST)
    def get_create_topic_use_case(
        self, topic_service: TopicService, profile_service: ProfileService
    ) -> CreateTopicUseCase:
        """Provide create topic use case."""
        return CreateTopicUseCase(
            topic_service=topic_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_topic_use_case(
        self,
        topic_service: TopicService,
        comment_service: CommentService,
        attachment_service: AttachmentService,
    ) -> GetTopicUseCase:
        """Provide get topic use case."""
        return GetTopicUseCase(
            topic_service=topic_service,
            comment_service=comment_service,
            attachment_service=attachment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_topics_use_case(
        self, topic_service: TopicService
    ) -> ListTopicsUseCase:
        """Provide list topics use case."""
        return ListTopicsUseCase(topic_service=topic_service)

    @provide(scope=Scope.REQUEST)
    def get_get_calendar_use_case(
        self, topic_service: TopicService, calendar_settings: CalendarSettings
    ) -> GetCalendarUseCase:
        """Provide calendar use case."""
        return GetCalendarUseCase(
            topic_service=topic_service, calendar_settings=calendar_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_topics_for_day_use_case(
        self, topic_service: TopicService, calendar_settings: CalendarSettings
    ) -> GetTopicsForDayUseCase:
        """Provide topics-for-day use case."""
        return GetTopicsForDayUseCase(
            topic_service=topic_service, calendar_settings=calendar_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_update_topic_use_case(
        self, topic_service: TopicService
    ) -> UpdateTopicUseCase:
        """Provide update topic use case."""
        return UpdateTopicUseCase(topic_service=topic_service)

    @provide(scope=Scope.REQUEST)
    def get_update_topic_status_use_case(
        self, topic_service: TopicService
    ) -> UpdateTopicStatusUseCase:
        """Provide update topic status use case."""
        return UpdateTopicStatusUseCase(topic_service=topic_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_topic_use_case(
        self, topic_service: TopicService
    ) -> DeleteTopicUseCase:
        """Provide delete topic use case."""
        return DeleteTopicUseCase(topic_service=topic_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        topic_service: TopicService,
        profile_service: ProfileService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            topic_service=topic_service,
            profile_service=profile_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Attachment use cases
    @provide(scope=Scope.REQUEST)
    def get_upload_attachment_use_case(
        self,
        attachment_service: AttachmentService,
        topic_service: TopicService,
        comment_service: CommentService,
    ) -> UploadAttachmentUseCase:
        """Provide upload attachment use case."""
        return UploadAttachmentUseCase(
            attachment_service=attachment_service,
            topic_service=topic_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_attachments_use_case(
        self, attachment_service: AttachmentService
    ) -> ListAttachmentsUseCase:
        """Provide list attachments use case."""
        return ListAttachmentsUseCase(attachment_service=attachment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_attachment_use_case(
        self, attachment_service: AttachmentService
    ) -> DeleteAttachmentUseCase:
        """Provide delete attachment use case."""
        return DeleteAttachmentUseCase(attachment_service=attachment_service)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(profile_service=profile_service)
