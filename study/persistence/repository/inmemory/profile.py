"""In-memory profile repository for testing."""

from typing import Optional

from study.domain.model.profile import Profile
from study.domain.repository.profile import ProfileRepository
from study.domain.value import UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, Profile] = {}
        self.ping_count = 0

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID."""
        return self._profiles.get(user_id)

    async def save(self, profile: Profile) -> Profile:
        """Save or update a profile."""
        self._profiles[profile.id] = profile
        return profile

    async def ping(self) -> None:
        """Record the ping."""
        self.ping_count += 1
