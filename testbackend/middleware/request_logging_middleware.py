# -*- coding: utf-8 -*-
"""
Location: ./testbackend/middleware/request_logging_middleware.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Request Logging Middleware.

This module provides middleware for FastAPI to log one line per HTTP request
(method, path, status, duration). When detailed logging is enabled the request
headers are included with authorization headers and token cookies masked.
"""

# Standard
import time
from typing import Callable, Dict, Mapping, Tuple

# Third-Party
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

# First-Party
from testbackend.services.logging_service import LoggingService

logging_service = LoggingService()
logger = logging_service.get_logger(__name__)

SENSITIVE_KEYS = {"password", "secret", "token", "apikey", "x-api-key", "access_token", "refresh_token", "client_secret", "authorization", "proxy-authorization"}

# Probe endpoints are polled constantly by orchestrators
REQUEST_LOG_SKIP_PREFIXES: Tuple[str, ...] = ("/healthz", "/util/ready", "/favicon.ico")


def mask_cookie_header(cookie_header: str) -> str:
    """Mask token-like cookies while preserving other cookies.

    Args:
        cookie_header: The cookie header string to process

    Returns:
        Cookie header string with sensitive cookie values masked

    Examples:
        >>> mask_cookie_header("session=abc; theme=dark")
        'session=******; theme=dark'
        >>> mask_cookie_header("")
        ''
    """
    if not cookie_header:
        return cookie_header

    cookies = []
    for cookie in cookie_header.split(";"):
        cookie = cookie.strip()
        if "=" in cookie:
            name, _ = cookie.split("=", 1)
            name = name.strip()
            if any(sensitive in name.lower() for sensitive in ["jwt", "token", "auth", "session"]):
                cookies.append(f"{name}=******")
            else:
                cookies.append(cookie)
        else:
            cookies.append(cookie)

    return "; ".join(cookies)


def mask_sensitive_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Mask sensitive headers like Authorization.

    Args:
        headers: Mapping of HTTP headers to mask

    Returns:
        Dictionary of headers with sensitive values masked

    Examples:
        >>> mask_sensitive_headers({"Authorization": "Bearer x", "Accept": "*/*"})
        {'Authorization': '******', 'Accept': '*/*'}
    """
    masked_headers = {}
    for key, value in headers.items():
        key_lower = key.lower()
        if key_lower in SENSITIVE_KEYS or "auth" in key_lower:
            masked_headers[key] = "******"
        elif key_lower == "cookie":
            masked_headers[key] = mask_cookie_header(value)
        else:
            masked_headers[key] = value
    return masked_headers


def should_skip_request_logging(path: str) -> bool:
    """Return True for paths that are never logged.

    Args:
        path: Request URL path.

    Returns:
        Whether the request should be skipped.

    Examples:
        >>> should_skip_request_logging("/healthz")
        True
        >>> should_skip_request_logging("/mock/users")
        False
    """
    return path.startswith(REQUEST_LOG_SKIP_PREFIXES)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests with sensitive data masking."""

    def __init__(self, app, log_detailed_requests: bool = False):
        """Initialize the request logging middleware.

        Args:
            app: The FastAPI application instance
            log_detailed_requests: Whether to include masked request headers in the log line
        """
        super().__init__(app)
        self.log_detailed_requests = log_detailed_requests

    async def dispatch(self, request: Request, call_next: Callable):
        """Log the request once the downstream handler has produced a response.

        Args:
            request: The incoming HTTP request
            call_next: Function to call the next middleware/handler

        Returns:
            Response: The HTTP response from downstream handlers

        Raises:
            Exception: Any exception from downstream handlers is re-raised
        """
        path = request.url.path
        if should_skip_request_logging(path):
            return await call_next(request)

        start_time = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.exception("%s %s failed after %.1f ms", request.method, path, duration_ms)
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        if self.log_detailed_requests:
            logger.info(
                "%s %s -> %d (%.1f ms) headers=%s",
                request.method,
                path,
                response.status_code,
                duration_ms,
                mask_sensitive_headers(request.headers),
            )
        else:
            logger.info("%s %s -> %d (%.1f ms)", request.method, path, response.status_code, duration_ms)
        return response
