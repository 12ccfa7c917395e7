from typing import AsyncIterable, AsyncIterator, Optional, Union

import httpx
from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger as custom_logger

from media_gateway.api.exceptions import (
    BlobReadFailed,
    BlobTransportFailed,
    BlobWriteFailed,
    ContentLengthMismatch,
    NotFoundError,
)
from media_gateway.api.infra.aws.s3 import new_client
from media_gateway.api.infra.aws.s3.entity.object import S3Object
from media_gateway.api.infra.aws.s3.repository.object import (
    generate_presigned_put_url,
    get_object,
    put_object,
)
from media_gateway.core.config import PRESIGNED_URL_EXPIRES, UPLOAD_TIMEOUT

ByteSource = Union[bytes, AsyncIterable[bytes]]


class BlobStoreClient:
    """Write and read named blobs in the object store.

    Buffers go through the S3 API. Streams are PUT to a presigned URL so the
    body is forwarded chunk by chunk and the credentials live only as long as
    the one request. Exactly one attempt is made; failures are raised as
    BlobWriteFailed (store answered with an error) or BlobTransportFailed
    (store unreachable or the transfer broke off).
    """

    def __init__(
        self,
        s3_client=None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = UPLOAD_TIMEOUT,
        presigned_expires: int = PRESIGNED_URL_EXPIRES,
    ):
        self.s3_client = s3_client or new_client()
        self.transport = transport
        self.timeout = timeout
        self.presigned_expires = presigned_expires

    async def put(
        self,
        bucket: str,
        key: str,
        data: ByteSource,
        content_length: Optional[int] = None,
        content_type: Optional[str] = None,
    ) -> None:
        if isinstance(data, (bytes, bytearray, memoryview)):
            await self.put_bytes(bucket, key, bytes(data), content_length, content_type)
        else:
            await self.put_stream(bucket, key, data, content_length)

    async def put_bytes(
        self,
        bucket: str,
        key: str,
        data: bytes,
        content_length: Optional[int] = None,
        content_type: Optional[str] = None,
    ) -> None:
        if content_length is not None and content_length != len(data):
            raise ContentLengthMismatch(content_length, len(data))

        custom_logger.info(f"Uploading to blob store: {bucket}/{key}, size: {len(data):,} bytes")
        s3_object = S3Object(
            body=data,
            content_length=len(data),
            content_type=content_type or detect_content_type(key),
            key=key,
        )
        try:
            await put_object(s3_object, bucket, client=self.s3_client)
        except ClientError as e:
            status, body = _client_error_details(e)
            custom_logger.error(f"Blob write rejected: {bucket}/{key} -> {status} {body}")
            raise BlobWriteFailed(status, body) from e
        except BotoCoreError as e:
            custom_logger.error(f"Blob store unreachable: {str(e)}")
            raise BlobTransportFailed(e) from e

        custom_logger.info(f"Blob stored: {bucket}/{key}")

    async def put_stream(
        self,
        bucket: str,
        key: str,
        chunks: AsyncIterable[bytes],
        content_length: Optional[int] = None,
    ) -> None:
        url = generate_presigned_put_url(key, bucket, self.presigned_expires, client=self.s3_client)

        headers = {}
        if content_length is not None:
            headers["Content-Length"] = str(content_length)

        custom_logger.info(
            f"Streaming to blob store: {bucket}/{key}, declared length: {content_length}"
        )
        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            try:
                response = await client.put(
                    url,
                    content=_counted(chunks, content_length),
                    headers=headers,
                )
            except httpx.TransportError as e:
                custom_logger.error(f"Error uploading to blob store: {e!r}")
                raise BlobTransportFailed(e) from e

        if not response.is_success:
            body = response.text or "<no response body>"
            custom_logger.error(
                f"Blob store upload failed with status: {response.status_code} and body: {body}"
            )
            raise BlobWriteFailed(response.status_code, body)

        custom_logger.info(f"Blob streamed: {bucket}/{key}")

    async def get(self, bucket: str, key: str) -> bytes:
        try:
            s3_object = await get_object(key, bucket, client=self.s3_client)
        except ClientError as e:
            status, body = _client_error_details(e)
            if status == 404:
                raise NotFoundError(f"Blob not found: {bucket}/{key}") from e
            raise BlobReadFailed(status, body) from e
        except BotoCoreError as e:
            raise BlobTransportFailed(e) from e
        return s3_object.body


async def _counted(chunks: AsyncIterable[bytes], expected: Optional[int]) -> AsyncIterator[bytes]:
    """Pass chunks through, failing as soon as they disagree with `expected`.

    Raising here aborts the outbound request, so the store never sees a
    complete body of the wrong size.
    """
    received = 0
    async for chunk in chunks:
        if not chunk:
            continue
        received += len(chunk)
        if expected is not None and received > expected:
            raise ContentLengthMismatch(expected, received)
        yield chunk

    if expected is not None and received != expected:
        raise ContentLengthMismatch(expected, received)


def _client_error_details(error: ClientError):
    status = error.response.get("ResponseMetadata", {}).get("HTTPStatusCode", 500)
    err = error.response.get("Error", {})
    body = f"{err.get('Code', '')}: {err.get('Message', '')}".strip(": ")
    return status, body


def detect_content_type(filename: str) -> str:
    """Detect content type from filename"""
    if not filename or "." not in filename:
        return 'application/octet-stream'

    ext = filename.lower().rsplit('.', 1)[-1]

    content_types = {
        'mp4': 'video/mp4',
        'mov': 'video/quicktime',
        'webm': 'video/webm',
        'mkv': 'video/x-matroska',
        'avi': 'video/x-msvideo',
    }

    return content_types.get(ext, 'application/octet-stream')
