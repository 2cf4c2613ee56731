"""Unit tests for ProfileService."""

from uuid import uuid4

import pytest

from study.domain.error import NotFoundError
from study.domain.repository import ProfileRepository
from study.domain.service import ProfileService
from study.domain.value import UserId, Username
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestProfileService:
    """Tests for ProfileService."""

    @pytest.mark.asyncio
    async def test_get_profile_not_found(self, unit_env):
        """Users without a profile raise NotFoundError."""
        # Arrange
        service = await unit_env.get(ProfileService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.get_profile(UserId(uuid4()))
        assert await service.find_profile(UserId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_update_profile_creates_then_updates(self, unit_env):
        """Saving twice keeps one profile with the latest values."""
        # Arrange
        service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())

        # Act
        await service.update_profile(user_id, Username("ada"))
        updated = await service.update_profile(
            user_id, Username("  ada.l  "), avatar_url="https://img.test/ada.png"
        )

        # Assert
        assert updated.username.root == "ada.l"
        fetched = await service.get_profile(user_id)
        assert fetched.avatar_url == "https://img.test/ada.png"

    @pytest.mark.asyncio
    async def test_ping_touches_store(self, unit_env):
        """Keep-alive pings reach the repository."""
        # Arrange
        service = await unit_env.get(ProfileService)
        repo = await unit_env.get(ProfileRepository)

        # Act
        await service.ping()

        # Assert
        assert repo.ping_count == 1
