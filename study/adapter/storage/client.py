"""Object storage client.

Talks to a Supabase-style storage REST API: objects are uploaded into a
public bucket and served back from a stable public URL.
"""

from urllib.parse import quote

import httpx
import logfire

from study.adapter.error import StorageError
from study.domain.service.storage_service import ObjectStorage


class HttpObjectStorage(ObjectStorage):
    """Object storage over the storage REST API."""

    def __init__(
        self,
        base_url: str,
        service_key: str,
        bucket: str,
        timeout: float = 30.0,
    ) -> None:
        """Initialize storage client.

        Args:
            base_url: Storage backend URL (e.g. https://<project>.supabase.co)
            service_key: Key authorized to write into the bucket
            bucket: Bucket name
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.service_key = service_key
        self.bucket = bucket
        self.timeout = timeout

    def object_url(self, path: str) -> str:
        """Upload endpoint for an object."""
        return f"{self.base_url}/storage/v1/object/{self.bucket}/{quote(path)}"

    def public_url(self, path: str) -> str:
        """Public download URL for an object."""
        return (
            f"{self.base_url}/storage/v1/object/public/{self.bucket}/{quote(path)}"
        )

    async def upload(self, path: str, payload: bytes, content_type: str) -> str:
        """Upload a payload and return its public URL.

        Raises:
            StorageError: If the request fails or the store rejects it
        """
        headers = {
            "Authorization": f"Bearer {self.service_key}",
            "apikey": self.service_key,
            "Content-Type": content_type,
            "x-upsert": "false",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.object_url(path), content=payload, headers=headers
                )
        except httpx.HTTPError as e:
            logfire.error("Storage request failed", path=path, error=str(e))
            raise StorageError(f"Storage request failed: {e}") from e

        if response.status_code not in (200, 201):
            logfire.error(
                "Storage upload rejected",
                path=path,
                status=response.status_code,
                body=response.text,
            )
            raise StorageError(
                f"Storage upload failed: {response.status_code} {response.text}",
                status_code=response.status_code,
            )

        url = self.public_url(path)
        logfire.info(
            "Object uploaded", path=path, size=len(payload), content_type=content_type
        )
        return url


class MockObjectStorage(ObjectStorage):
    """In-memory object storage for tests and local development.

    Stores payloads keyed by path. Set ``fail`` to make every upload raise.
    """

    def __init__(self, base_url: str = "http://storage.test") -> None:
        self.base_url = base_url.rstrip("/")
        self.objects: dict[str, tuple[bytes, str]] = {}
        self.fail = False

    async def upload(self, path: str, payload: bytes, content_type: str) -> str:
        """Keep the payload and return a fake public URL."""
        if self.fail:
            raise StorageError("Mock storage failure")
        self.objects[path] = (payload, content_type)
        return f"{self.base_url}/public/{quote(path)}"
