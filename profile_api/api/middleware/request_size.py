"""Request body size limiting middleware."""

import logging
from typing import Callable

from fastapi import Request, Response, status

from profile_api.api.middleware.error_handler import create_error_response
from profile_api.core.config import get_settings

logger = logging.getLogger(__name__)


async def request_size_limit_middleware(
    request: Request,
    call_next: Callable[[Request], Response],
) -> Response:
    """Reject requests whose declared body exceeds the configured maximum.

    Multipart uploads are staged to a temporary file by the framework
    before the route runs, so the check has to happen here, ahead of
    parsing.

    Args:
        request: The incoming request.
        call_next: Next middleware or route handler.

    Returns:
        Response: Either the successful response or 413 error.
    """
    max_size = get_settings().max_request_body_size

    content_length = request.headers.get("content-length")
    if content_length:
        try:
            length = int(content_length)
        except ValueError:
            length = None  # Invalid content-length, let the server reject it

        if length is not None and length > max_size:
            logger.warning(
                "Request body too large: %d bytes (max: %d)",
                length,
                max_size,
            )
            return create_error_response(
                error_type="request_too_large",
                message=f"Request body exceeds maximum size of {max_size} bytes",
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                request_id=request.headers.get("X-Request-ID"),
            )

    return await call_next(request)
