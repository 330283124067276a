"""
FastAPI application entry point.
My Go App - welcome page, health probe and info API.
"""

import logging
import socket
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from myapp.api.errors import http_exception_handler
from myapp.api.routes import router
from myapp.config import APP_NAME, LISTEN_BACKLOG, LOG_FORMAT, Settings, get_settings
from myapp.core.clock import Clock, SystemClock

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Announces the port and build version once the server is up.
    """
    settings: Settings = app.state.settings
    logger.info(f"Server starting on port {settings.port}...")
    logger.info(f"Version: {settings.app_version}")

    yield

    logger.info(f"Shutting down {APP_NAME}...")


def create_app(
    settings: Optional[Settings] = None,
    clock: Optional[Clock] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration to serve with. Defaults to the cached environment settings.
        clock: Time source for response timestamps. Defaults to the system clock.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or get_settings()

    # Only the three registered routes answer: no docs pages, no slash redirects.
    app = FastAPI(
        title=APP_NAME,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.clock = clock or SystemClock()

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.include_router(router)

    return app


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind and listen on a TCP socket. Raises OSError if the address is taken."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(LISTEN_BACKLOG)
    except OSError:
        sock.close()
        raise
    return sock


def main() -> None:
    """Load settings, bind the port and serve until interrupted."""
    settings = get_settings()

    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)

    try:
        sock = bind_socket(settings.host, settings.port)
    except OSError as e:
        logger.critical(f"Could not listen on {settings.host}:{settings.port}: {e}")
        sys.exit(1)

    config = uvicorn.Config(
        create_app(settings),
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


if __name__ == "__main__":
    main()
