"""
Request handlers for the three public endpoints.

The routing table is fixed: GET /, GET /health and GET /api/info.
"""

import html

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from myapp.api.schemas import HealthResponse, InfoResponse
from myapp.config import APP_NAME, INFO_MESSAGE, Settings
from myapp.core.clock import Clock, format_rfc3339

router = APIRouter()

HOME_PAGE = """
    <html>
    <head><title>{app_name}</title></head>
    <body>
        <h1>Welcome to {app_name}!</h1>
        <p>Version: {version}</p>
        <p><a href="/health">Health Check</a></p>
        <p><a href="/api/info">API Info</a></p>
    </body>
    </html>"""


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_clock(request: Request) -> Clock:
    """Clock the application was created with."""
    return request.app.state.clock


@router.get("/", response_class=HTMLResponse, tags=["home"])
async def home(settings: Settings = Depends(get_app_settings)) -> HTMLResponse:
    """Welcome page with the build version and links to the other endpoints."""
    page = HOME_PAGE.format(
        app_name=APP_NAME,
        version=html.escape(settings.app_version),
    )
    return HTMLResponse(content=page)


@router.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check(clock: Clock = Depends(get_clock)) -> HealthResponse:
    """Liveness probe."""
    return HealthResponse(time=format_rfc3339(clock.now()))


@router.get("/api/info", response_model=InfoResponse, tags=["info"])
async def info(
    settings: Settings = Depends(get_app_settings),
    clock: Clock = Depends(get_clock),
) -> InfoResponse:
    """Greeting with the current server time and build version."""
    return InfoResponse(
        message=INFO_MESSAGE,
        timestamp=clock.now(),
        version=settings.app_version,
    )
