"""Domain layer DI providers."""

from dishka import Scope, provide

from study.config import AuthSettings, StorageSettings
from study.domain.repository import (
    AttachmentRepository,
    CommentRepository,
    ProfileRepository,
    TopicRepository,
)
from study.domain.service import (
    AttachmentService,
    ChangeFeed,
    ChangeService,
    CommentService,
    JWTService,
    ObjectStorage,
    ProfileService,
    TopicService,
)
from study.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_change_service(self, change_feed: ChangeFeed) -> ChangeService:
        """Provide change signal domain service."""
        return ChangeService(change_feed=change_feed)

    @provide
    def get_topic_service(
        self, topic_repository: TopicRepository, change_service: ChangeService
    ) -> TopicService:
        """Provide topic domain service."""
        return TopicService(
            topic_repository=topic_repository, change_service=change_service
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, change_service: ChangeService
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, change_service=change_service
        )

    @provide
    def get_attachment_service(
        self,
        attachment_repository: AttachmentRepository,
        object_storage: ObjectStorage,
        storage_settings: StorageSettings,
    ) -> AttachmentService:
        """Provide attachment domain service."""
        return AttachmentService(
            attachment_repository=attachment_repository,
            object_storage=object_storage,
            storage_settings=storage_settings,
        )

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)
