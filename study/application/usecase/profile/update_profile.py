"""Update profile use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from study.domain.service import ProfileService
from study.domain.value import UserId, Username

from .get_profile import ProfileResponse


class UpdateProfileRequest(BaseModel):
    """Update profile request."""

    user_id: str  # From authenticated user
    username: str = Field(min_length=1, max_length=50)
    avatar_url: str | None = Field(default=None, max_length=2048)


class UpdateProfileUseCase:
    """Use case for setting a user's display name and avatar.

    The profile is created on the first update.
    """

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize update profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UpdateProfileRequest) -> ProfileResponse:
        """Execute update profile flow.

        Raises:
            ValueError: If the username is blank
        """
        profile = await self.profile_service.update_profile(
            user_id=UserId(UUID(request.user_id)),
            username=Username(request.username),
            avatar_url=request.avatar_url or None,
        )
        return ProfileResponse.from_domain(profile)
