"""Start Application."""
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from media_gateway.api.exception_handlers import (
    global_exception_handler,
    http_exception_handler,
    ingest_exception_handler,
    validation_exception_handler,
)
from media_gateway.api.exceptions import IngestError
from media_gateway.api.middleware import RequestSizeLimitMiddleware
from media_gateway.api.routers.api import app as api_router
from media_gateway.core.config import (
    ALLOWED_HOSTS,
    API_PREFIX,
    DEBUG,
    APP_HOST,
    APP_PORT,
    MAX_REQUEST_SIZE,
    PROJECT_NAME,
    RAW_UPLOAD_MAX_SIZE,
    RAW_UPLOAD_PATH_PREFIX,
    VERSION,
)


def get_application() -> FastAPI:
    """Get application

    Returns:
        FastAPI media gateway application
    """

    application = FastAPI(title=PROJECT_NAME, version=VERSION, debug=DEBUG)
    application.add_middleware(
        RequestSizeLimitMiddleware,
        default_limit=MAX_REQUEST_SIZE,
        route_limits=[(API_PREFIX + RAW_UPLOAD_PATH_PREFIX, RAW_UPLOAD_MAX_SIZE)],
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_HOSTS or ["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    application.add_exception_handler(IngestError, ingest_exception_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, global_exception_handler)

    application.include_router(api_router, prefix=API_PREFIX)

    return application

app = get_application()


def run() -> None:
    uvicorn.run(
        app,
        host=APP_HOST,
        port=APP_PORT,
        limit_concurrency=100,
        timeout_keep_alive=300,
        timeout_graceful_shutdown=300,
    )


if __name__ == "__main__":
    run()
