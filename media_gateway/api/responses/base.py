"""Base Response."""

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse, ORJSONResponse
from starlette import status


class BaseResponse:
    """Base Response."""

    @staticmethod
    def success_response(
            content: Dict[str, Any],
            status_code: int = status.HTTP_200_OK,
    ):
        """Success response carrying the route's own JSON document.

        Args:
            content: Response document (rows, ids, status flags).
            status_code: API status code.

        Returns:
            Success response.
        """
        return ORJSONResponse(status_code=status_code, content=content)

    @staticmethod
    def error_response(
            message: str = "API error",
            status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
            extra: Optional[Dict[str, Any]] = None,
    ):
        """Error response with message and status code.

        Args:
            message: API Message.
            status_code: API status code.
            extra: Additional diagnostic fields merged into the body.

        Returns:
            Error response.
        """
        content = {"message": message}
        if extra:
            content.update(extra)
        return JSONResponse(status_code=status_code, content=content)
