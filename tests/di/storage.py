"""Mock object storage provider for testing."""

from dishka import Scope, provide

from study.adapter.storage import MockObjectStorage
from study.domain.service import ObjectStorage
from study.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Mock storage provider keeping uploads in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_object_storage(self) -> ObjectStorage:
        """Provide in-memory object storage."""
        return MockObjectStorage()
