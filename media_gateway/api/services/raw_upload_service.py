from typing import AsyncIterable, Optional

from loguru import logger as custom_logger
from starlette.requests import ClientDisconnect

from media_gateway.api.exceptions import InputError, UploadAborted
from media_gateway.api.services.blob_store import BlobStoreClient


def parse_content_length(value: Optional[str]) -> Optional[int]:
    """Declared Content-Length, or None for chunked transfers."""
    if value is None or value == "":
        return None
    try:
        length = int(value)
    except ValueError:
        raise InputError(f"Invalid Content-Length: {value}")
    if length < 0:
        raise InputError(f"Invalid Content-Length: {value}")
    return length


class RawUploadService:
    """Pipe a request body straight into the object store.

    No catalog row is written; callers that need one record it themselves.
    """

    def __init__(self, blob_store: BlobStoreClient):
        self.blob_store = blob_store

    async def upload(
        self,
        bucket: str,
        key: str,
        body: AsyncIterable[bytes],
        content_length: Optional[int] = None,
    ) -> None:
        try:
            await self.blob_store.put(bucket, key, body, content_length=content_length)
        except ClientDisconnect as e:
            custom_logger.warning(f"Client disconnected while streaming {bucket}/{key}; upstream write aborted")
            raise UploadAborted(e) from e
