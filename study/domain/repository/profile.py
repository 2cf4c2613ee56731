"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from study.domain.model.profile import Profile
from study.domain.value import UserId


class ProfileRepository(ABC):
    """Repository for Profile entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID.

        Args:
            user_id: Subject of the identity provider token

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update).

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass

    @abstractmethod
    async def ping(self) -> None:
        """Run the lightest possible query against the store.

        Used by the keep-alive endpoint so an idle backend does not pause.

        Raises:
            Exception: Whatever the store raises when unreachable
        """
        pass
