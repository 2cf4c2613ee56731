"""Object storage infrastructure providers."""

from dishka import Scope, provide

from study.adapter.storage import HttpObjectStorage
from study.config import StorageSettings
from study.domain.service import ObjectStorage
from study.util.di.base import ProviderBase
from study.util.error import ConfigurationError


class StorageProvider(ProviderBase):
    """Object storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider using the storage REST API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_object_storage(self, storage_settings: StorageSettings) -> ObjectStorage:
        """Provide object storage client.

        Raises:
            ConfigurationError: If the storage URL is not configured
        """
        if not storage_settings.url:
            raise ConfigurationError("storage.url", "must be configured")

        return HttpObjectStorage(
            base_url=storage_settings.url,
            service_key=storage_settings.service_key,
            bucket=storage_settings.bucket,
        )
