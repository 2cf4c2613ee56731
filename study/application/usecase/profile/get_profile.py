"""Get profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from study.domain.model import Profile
from study.domain.service import ProfileService
from study.domain.value import UserId


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: str  # UUID string


class ProfileResponse(BaseModel):
    """Profile response."""

    user_id: str
    username: str
    avatar_url: str | None
    updated_at: datetime

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            user_id=str(profile.id),
            username=profile.username.root,
            avatar_url=profile.avatar_url,
            updated_at=profile.updated_at,
        )


class GetProfileUseCase:
    """Use case for reading a user's public profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize get profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: GetProfileRequest) -> ProfileResponse:
        """Execute get profile flow.

        Raises:
            NotFoundError: If the user has not set up a profile
        """
        profile = await self.profile_service.get_profile(UserId(UUID(request.user_id)))
        return ProfileResponse.from_domain(profile)
