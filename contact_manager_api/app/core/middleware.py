"""
Request logging middleware.

Logs the method and path of every request before it is dispatched and
the final status (or the exception that escaped the handler) once it
completes.  The response is passed through untouched.
"""

import logging
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

logger = logging.getLogger(__name__)


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    path = request.url.path
    logger.info("Incoming request: %s %s", request.method, path)
    try:
        response = await call_next(request)
    except Exception as exc:
        logger.error("Request completed with exception: %s", exc, exc_info=exc)
        raise
    logger.info("Request completed successfully: %s %s", response.status_code, path)
    return response


def register_middleware(app: FastAPI) -> None:
    app.middleware("http")(log_requests)
