"""Object storage port."""

from abc import ABC, abstractmethod


class ObjectStorage(ABC):
    """Port to the external object store.

    The store accepts a binary payload and hands back a publicly resolvable
    URL. Buckets, retention and access rules belong to the store.
    """

    @abstractmethod
    async def upload(self, path: str, payload: bytes, content_type: str) -> str:
        """Store a payload under a path.

        Args:
            path: Object name inside the configured bucket
            payload: File contents
            content_type: MIME type sent with the object

        Returns:
            Public URL of the stored object

        Raises:
            StorageError: If the store rejects the upload
        """
        pass
