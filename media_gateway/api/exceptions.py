"""Ingestion error taxonomy.

Each error carries the HTTP status the gateway answers with. Nothing here is
retried: the first failure aborts the rest of the request pipeline.
"""
from typing import Optional

from starlette import status


class IngestError(Exception):
    """Base class for failures surfaced to the caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputError(IngestError):
    """Missing or malformed request data."""

    status_code = status.HTTP_400_BAD_REQUEST


class MissingFileError(InputError):
    def __init__(self, message: str = "No file provided"):
        super().__init__(message)


class RequestBodyTooLarge(InputError):
    status_code = status.HTTP_413_CONTENT_TOO_LARGE

    def __init__(self, limit: int):
        super().__init__(f"Request body exceeds {limit} bytes")
        self.limit = limit


class NotFoundError(IngestError):
    status_code = status.HTTP_404_NOT_FOUND


class BlobWriteFailed(IngestError):
    """The blob store answered the write with a non-success status."""

    def __init__(self, status: int, body: str):
        super().__init__(f"Blob store error: {status} - {body}")
        self.status = status
        self.body = body


class BlobTransportFailed(IngestError):
    """The blob store could not be reached, or the transfer broke off."""

    def __init__(self, cause: Optional[BaseException] = None, message: Optional[str] = None):
        super().__init__(message or f"Failed to upload file {cause}")
        self.cause = cause


class ContentLengthMismatch(BlobTransportFailed):
    """Declared Content-Length disagrees with the bytes actually streamed.

    The outbound write is cut off, so this is a failed blob write, not bad input.
    """

    def __init__(self, declared: int, received: int):
        super().__init__(
            message=f"Failed to upload file: declared content length {declared} "
            f"does not match received {received} bytes"
        )
        self.declared = declared
        self.received = received


class UploadAborted(BlobTransportFailed):
    """The client went away mid-stream; the outbound write was dropped."""

    def __init__(self, cause: Optional[BaseException] = None):
        super().__init__(cause, message="Upload aborted: client disconnected")


class BlobReadFailed(IngestError):
    """The blob store answered a read with a non-success status."""

    def __init__(self, status: int, body: str):
        super().__init__(f"Blob store read error: {status} - {body}")
        self.status = status
        self.body = body


class CatalogWriteFailed(IngestError):
    pass


class CatalogUnavailable(IngestError):
    pass
