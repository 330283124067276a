"""
HTTP error handlers.

Routes match on the exact (method, path) pair, so a known path requested with
the wrong method is answered the same way as an unknown path.
"""

import logging

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = "404 page not found"


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    """Render HTTP errors as plain text, folding 405 into 404."""
    if exc.status_code in (404, 405):
        logger.debug(f"No route for {request.method} {request.url.path}")
        return PlainTextResponse(NOT_FOUND_BODY, status_code=404)

    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=exc.headers,
    )
