"""Fixture factory giving tests a request-scoped DI container."""

import pytest_asyncio

from study.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Build a fixture yielding a request container.

    Every component is mocked unless named in ``unmock``. Services resolved
    from the yielded container share one set of in-memory repositories for
    the whole test.

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_something(unit_env):
            service = await unit_env.get(TopicService)
    """

    @pytest_asyncio.fixture
    async def env():
        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return env
