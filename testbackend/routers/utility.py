# -*- coding: utf-8 -*-
"""Location: ./testbackend/routers/utility.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Utility Router.
Diagnostic endpoints for exercising clients, proxies and orchestrators:
liveness/readiness, version, environment and host inspection, echo, timed
delay, error injection, header reflection, sandboxed file browsing and
memory allocation for load testing.
"""

# Standard
import asyncio
from typing import Dict, Optional, Union

# Third-Party
from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse
import orjson

# First-Party
from testbackend.dependencies import get_allocation_registry, get_file_browser, get_system_info_service
from testbackend.schemas import (
    AllocationResult,
    ClearAllocationsResult,
    DelayResponse,
    DirectoryListing,
    EchoResponse,
    FileContent,
    HealthResponse,
    PingResponse,
    ReadyResponse,
    VersionResponse,
    WhoAmIResponse,
)
from testbackend.services.allocation_registry import AllocationRegistry
from testbackend.services.delay_service import delay as run_delay
from testbackend.services.delay_service import DelayCancelledError, InvalidDelayError
from testbackend.services.file_browser import FileBrowser, InvalidPathError, PathNotFoundError, PathOutsideRootError
from testbackend.services.logging_service import LoggingService
from testbackend.services.mock_data_service import clamp
from testbackend.services.system_info_service import SystemInfoService, utc_now
from testbackend.utils.headers import reflect_headers

# Get logger instance
logging_service = LoggingService()
logger = logging_service.get_logger(__name__)

router = APIRouter(prefix="/util", tags=["utility"])

MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 599

# nginx's non-standard "client closed request"
CLIENT_CLOSED_REQUEST = 499

DISCONNECT_POLL_INTERVAL = 0.1


def error_body(message: str) -> Dict[str, str]:
    """Build the ``{"error": ...}`` body used by every client error.

    Args:
        message: Error description.

    Returns:
        Error body.

    Examples:
        >>> error_body("boom")
        {'error': 'boom'}
    """
    return {"error": message}


def status_allows_body(status_code: int) -> bool:
    """Return whether a response with this status may carry a body.

    Args:
        status_code: HTTP status code.

    Returns:
        False for informational (1xx), 204 and 304 responses.

    Examples:
        >>> status_allows_body(503)
        True
        >>> status_allows_body(204)
        False
        >>> status_allows_body(101)
        False
    """
    return status_code >= 200 and status_code not in (204, 304)


async def watch_disconnect(request: Request, cancel_event: asyncio.Event) -> None:
    """Set ``cancel_event`` once the client disconnects.

    Args:
        request: Request to watch.
        cancel_event: Event to set on disconnect.
    """
    while not cancel_event.is_set():
        if await request.is_disconnected():
            logger.info("Client disconnected from %s", request.url.path)
            cancel_event.set()
            return
        await asyncio.sleep(DISCONNECT_POLL_INTERVAL)


@router.get("/ping", response_model=PingResponse)
async def ping() -> PingResponse:
    """Return ``pong`` and the current UTC time.

    Returns:
        PingResponse
    """
    return PingResponse(message="pong", time_utc=utc_now())


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness check.

    Returns:
        HealthResponse
    """
    return HealthResponse(status="Healthy", time_utc=utc_now())


@router.get("/ready", response_model=ReadyResponse)
async def ready() -> ReadyResponse:
    """Readiness check.

    Returns:
        ReadyResponse
    """
    return ReadyResponse(status="Ready")


@router.get("/version", response_model=VersionResponse)
async def version(service: SystemInfoService = Depends(get_system_info_service)) -> VersionResponse:
    """Report the installed package version.

    Args:
        service: System info service.

    Returns:
        VersionResponse
    """
    return service.version()


@router.get("/env", response_model=Dict[str, str])
async def env(service: SystemInfoService = Depends(get_system_info_service)) -> Dict[str, str]:
    """Return all process environment variables.

    Args:
        service: System info service.

    Returns:
        Mapping of variable name to value.
    """
    return service.environment().to_dict()


@router.get("/whoami", response_model=WhoAmIResponse)
def whoami(service: SystemInfoService = Depends(get_system_info_service)) -> WhoAmIResponse:
    """Report host name, addresses and process id.

    DNS failures are not handled here and surface as 500.

    Args:
        service: System info service.

    Returns:
        WhoAmIResponse
    """
    return service.whoami()


@router.post("/echo", response_model=EchoResponse)
async def echo(request: Request) -> Union[EchoResponse, JSONResponse]:
    """Echo a JSON body back with the receipt time.

    Args:
        request: Incoming request carrying any JSON document.

    Returns:
        EchoResponse, or a 400 response for a malformed body.
    """
    received_at = utc_now()
    raw = await request.body()
    try:
        body = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        logger.debug(f"Rejected malformed echo body: {e}")
        return JSONResponse(status_code=400, content=error_body("Request body must be valid JSON"))
    return EchoResponse(received_at_utc=received_at, body=body)


@router.get("/delay/{ms}", response_model=DelayResponse)
async def delay(ms: int, request: Request) -> Union[DelayResponse, JSONResponse]:
    """Wait ``ms`` milliseconds before responding.

    The wait ends early when the client disconnects.

    Args:
        ms: Delay in milliseconds.
        request: Incoming request, watched for disconnects.

    Returns:
        DelayResponse, 400 for a negative delay, 499 when cancelled.
    """
    cancel_event = asyncio.Event()
    watcher = asyncio.create_task(watch_disconnect(request, cancel_event))
    try:
        return await run_delay(ms, cancel_event)
    except InvalidDelayError as e:
        return JSONResponse(status_code=400, content=error_body(str(e)))
    except DelayCancelledError as e:
        return JSONResponse(status_code=CLIENT_CLOSED_REQUEST, content=error_body(str(e)))
    finally:
        watcher.cancel()


@router.get("/error/{code}")
async def error(code: int) -> Response:
    """Respond with the requested status code, clamped to 100-599.

    Statuses that cannot carry a body (1xx, 204, 304) are sent without one.

    Args:
        code: Requested status code.

    Returns:
        Response with the clamped status.
    """
    status_code = clamp(code, MIN_STATUS_CODE, MAX_STATUS_CODE)
    if not status_allows_body(status_code):
        return Response(status_code=status_code)
    return JSONResponse(status_code=status_code, content=error_body(f"Generated error {status_code}"))


@router.get("/headers", response_model=Dict[str, str])
async def headers(request: Request) -> Dict[str, str]:
    """Reflect the request headers.

    Args:
        request: Incoming request.

    Returns:
        Mapping of header name to value; repeated headers joined with ``", "``.
    """
    return reflect_headers(request.headers)


@router.get("/files", response_model=Union[DirectoryListing, FileContent])
def files(
    path: Optional[str] = Query(default=None, description="Path relative to the data root"),
    browser: FileBrowser = Depends(get_file_browser),
) -> Union[DirectoryListing, FileContent, JSONResponse]:
    """List a directory or read a file under the data root.

    Args:
        path: Relative path; empty means the root.
        browser: Root-confined file browser.

    Returns:
        DirectoryListing or FileContent; 400 for invalid or escaping paths; 404 when missing.
    """
    try:
        return browser.browse(path)
    except (PathOutsideRootError, InvalidPathError) as e:
        return JSONResponse(status_code=400, content=error_body(str(e)))
    except PathNotFoundError as e:
        return JSONResponse(status_code=404, content={"error": str(e), "root": e.root, "target": e.target})


@router.post("/allocate/{mb}", response_model=AllocationResult)
def allocate(mb: int, registry: AllocationRegistry = Depends(get_allocation_registry)) -> AllocationResult:
    """Allocate scratch memory for load testing.

    Args:
        mb: Megabytes to allocate (clamped to 1 - configured maximum).
        registry: Application allocation registry.

    Returns:
        AllocationResult
    """
    return registry.allocate(mb)


@router.post("/clearallocations", response_model=ClearAllocationsResult)
def clear_allocations(registry: AllocationRegistry = Depends(get_allocation_registry)) -> ClearAllocationsResult:
    """Release every scratch allocation.

    Args:
        registry: Application allocation registry.

    Returns:
        ClearAllocationsResult
    """
    return registry.clear()
