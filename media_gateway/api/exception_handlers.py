from fastapi import Request
from fastapi.exceptions import RequestValidationError
from loguru import logger as custom_logger
from starlette import status
from starlette.exceptions import HTTPException

from media_gateway.api.exceptions import BlobWriteFailed, IngestError
from media_gateway.api.responses.base import BaseResponse


async def ingest_exception_handler(request: Request, exc: IngestError):
    """Map pipeline errors to their HTTP status."""
    if exc.status_code >= 500:
        custom_logger.error(f"{type(exc).__name__}: {exc.message} - Path: {request.url.path}")
    else:
        custom_logger.warning(f"{type(exc).__name__}: {exc.message} - Path: {request.url.path}")

    extra = None
    if isinstance(exc, BlobWriteFailed):
        extra = {"upstream_status": exc.status, "upstream_body": exc.body}

    return BaseResponse.error_response(
        message=exc.message,
        status_code=exc.status_code,
        extra=extra,
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions."""
    custom_logger.warning(f"HTTPException: {exc.detail} - Path: {request.url.path}")
    return BaseResponse.error_response(
        message=str(exc.detail),
        status_code=exc.status_code
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed path, query or body parameters are bad input."""
    custom_logger.warning(f"Validation Error: {exc.errors()} - Path: {request.url.path}")
    return BaseResponse.error_response(
        message=f"Validation Error: {exc.errors()}",
        status_code=status.HTTP_400_BAD_REQUEST
    )


async def global_exception_handler(request: Request, exc: Exception):
    """Handle unhandled exceptions."""
    custom_logger.opt(exception=exc).error(f"Unhandled Exception: {str(exc)} - Path: {request.url.path}")
    return BaseResponse.error_response(
        message="Internal Server Error: An unexpected error occurred.",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
