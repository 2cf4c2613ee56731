"""Change feed infrastructure provider."""

from dishka import Scope, provide

from study.adapter.realtime import InProcessChangeFeed
from study.domain.service import ChangeFeed
from study.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Change feed provider - concrete, the in-process feed serves tests too."""

    @provide(scope=Scope.APP)
    def get_change_feed(self) -> ChangeFeed:
        """Provide the process-wide change feed."""
        return InProcessChangeFeed()
