# -*- coding: utf-8 -*-
"""Location: ./testbackend/main.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Test Backend Service - main application.

Builds the FastAPI application: configures logging, creates the per-app
services (mock data facade, allocation registry, system info), installs the
HTTPS redirect and request logging middleware, and mounts the /mock and /util
routers plus the /healthz probe.

Run with ``testbackend`` (see cli.py), ``uvicorn testbackend.main:app`` or
``gunicorn -c gunicorn.config.py testbackend.main:app``.
"""

# Standard
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

# Third-Party
from fastapi import FastAPI
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

# First-Party
from testbackend import __version__
from testbackend.config import get_settings, Settings
from testbackend.middleware.request_logging_middleware import RequestLoggingMiddleware
from testbackend.routers.mock_data import router as mock_data_router
from testbackend.routers.utility import router as utility_router
from testbackend.services.allocation_registry import AllocationRegistry
from testbackend.services.logging_service import LoggingService
from testbackend.services.mock_data_service import MockDataService
from testbackend.services.random_source import RandomSource
from testbackend.services.system_info_service import SystemInfoService

logging_service = LoggingService()
logger = logging_service.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log startup and release scratch allocations on shutdown.

    Args:
        app: The application being served.

    Yields:
        None while the application runs.
    """
    app_settings: Settings = app.state.settings
    logger.info(
        "Starting %s %s (data_root=%s, https_redirect=%s)",
        app_settings.app_name,
        __version__,
        app_settings.data_root,
        not app_settings.disable_https_redirect,
    )
    yield
    freed = app.state.allocation_registry.clear()
    logger.info("Shutdown complete, released %d MB of scratch allocations", freed.freed_mb)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the application.

    Args:
        app_settings: Settings to use; defaults to the cached environment settings.

    Returns:
        FastAPI: The configured application.

    Examples:
        >>> from testbackend.config import Settings
        >>> app = create_app(Settings(_env_file=None, disable_https_redirect=True, log_requests=False))
        >>> sorted(r.path for r in app.routes if r.path.startswith("/mock"))
        ['/mock/company', '/mock/products', '/mock/users']
    """
    app_settings = app_settings or get_settings()
    logging_service.configure(app_settings.log_level, app_settings.log_format)

    docs = app_settings.docs_available
    app = FastAPI(
        title=app_settings.app_name,
        version=__version__,
        docs_url="/swagger" if docs else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs else None,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.mock_data_service = MockDataService(RandomSource(app_settings.mock_locale), max_count=app_settings.mock_max_count)
    app.state.allocation_registry = AllocationRegistry(max_mb=app_settings.allocate_max_mb)
    app.state.system_info_service = SystemInfoService(informational_version=app_settings.build_informational_version)

    if not app_settings.disable_https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)
    if app_settings.log_requests:
        app.add_middleware(RequestLoggingMiddleware, log_detailed_requests=app_settings.log_detailed_requests)

    app.include_router(mock_data_router)
    app.include_router(utility_router)

    @app.get("/healthz", include_in_schema=False)
    async def healthz() -> Dict[str, str]:
        """Orchestrator liveness/readiness probe.

        Returns:
            Fixed healthy status.
        """
        return {"status": "healthy"}

    return app


app = create_app()
