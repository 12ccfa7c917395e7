from typing import Sequence, Tuple

from loguru import logger as custom_logger
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from media_gateway.api.exceptions import RequestBodyTooLarge
from media_gateway.api.responses.base import BaseResponse


class RequestSizeLimitMiddleware:
    """Per-route ceiling on request body bytes.

    `route_limits` holds (path prefix, limit) pairs checked in order; the
    first matching prefix wins and everything else gets `default_limit`.
    A limit of 0 means unlimited. Bodies announced larger than the limit are
    refused before the handler runs; chunked bodies are counted as they
    arrive and RequestBodyTooLarge is raised from `receive`.
    """

    def __init__(
        self,
        app: ASGIApp,
        default_limit: int,
        route_limits: Sequence[Tuple[str, int]] = (),
    ):
        self.app = app
        self.default_limit = default_limit
        self.route_limits = list(route_limits)

    def limit_for(self, path: str) -> int:
        for prefix, limit in self.route_limits:
            if path.startswith(prefix):
                return limit
        return self.default_limit

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        limit = self.limit_for(scope["path"])
        if not limit:
            await self.app(scope, receive, send)
            return

        declared = _declared_length(scope)
        if declared is not None and declared > limit:
            custom_logger.warning(f"Rejected {scope['path']}: declared {declared} bytes > limit {limit}")
            response = BaseResponse.error_response(
                message=RequestBodyTooLarge(limit).message,
                status_code=RequestBodyTooLarge.status_code,
            )
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > limit:
                    raise RequestBodyTooLarge(limit)
            return message

        await self.app(scope, limited_receive, send)


def _declared_length(scope: Scope):
    for name, value in scope.get("headers", []):
        if name == b"content-length":
            try:
                return int(value)
            except ValueError:
                return None
    return None
