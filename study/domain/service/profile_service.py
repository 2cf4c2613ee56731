"""Profile domain service."""

import logfire

from study.domain.error import NotFoundError
from study.domain.model.common import utcnow
from study.domain.model.profile import Profile
from study.domain.repository import ProfileRepository
from study.domain.value import UserId, Username

from .base import Service


class ProfileService(Service):
    """Domain service for user profiles."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_profile(self, user_id: UserId) -> Profile:
        """Get a profile by user ID.

        Raises:
            NotFoundError: If the user has no profile yet
        """
        with logfire.span("profile_service.get_profile", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_id(user_id)
            if not profile:
                logfire.warn("Profile not found", user_id=str(user_id))
                raise NotFoundError("Profile", str(user_id))
            return profile

    async def find_profile(self, user_id: UserId) -> Profile | None:
        """Get a profile by user ID, or None."""
        return await self.profile_repository.find_by_id(user_id)

    async def update_profile(
        self,
        user_id: UserId,
        username: Username,
        avatar_url: str | None = None,
    ) -> Profile:
        """Create or update the profile of a user.

        Args:
            user_id: User ID
            username: New display name
            avatar_url: New avatar URL

        Returns:
            Saved profile
        """
        with logfire.span("profile_service.update_profile", user_id=str(user_id)):
            profile = Profile(
                id=user_id,
                username=username,
                avatar_url=avatar_url,
                updated_at=utcnow(),
            )
            saved = await self.profile_repository.save(profile)
            logfire.info(
                "Profile saved", user_id=str(user_id), username=saved.username.root
            )
            return saved

    async def ping(self) -> None:
        """Touch the store so it registers activity."""
        with logfire.span("profile_service.ping"):
            await self.profile_repository.ping()
