# -*- coding: utf-8 -*-
"""Location: ./testbackend/services/delay_service.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Cancellable delay used by /util/delay/{ms}.

The delay parks only the calling coroutine. It ends early with
DelayCancelledError when the supplied cancel event is set (for example when
the client disconnects) and propagates ``asyncio.CancelledError`` when the
surrounding task is cancelled.
"""

# Future
from __future__ import annotations

# Standard
import asyncio
import logging
import time
from typing import Optional

# First-Party
from testbackend.schemas import DelayResponse

logger = logging.getLogger(__name__)


class DelayError(Exception):
    """Base class for delay errors."""


class InvalidDelayError(DelayError, ValueError):
    """Raised when a negative delay is requested."""


class DelayCancelledError(DelayError):
    """Raised when the delay is cancelled before it completes."""


async def delay(ms: int, cancel_event: Optional[asyncio.Event] = None) -> DelayResponse:
    """Sleep for ``ms`` milliseconds unless cancelled.

    Args:
        ms: Requested delay in milliseconds; must not be negative.
        cancel_event: Optional event signalling cancellation.

    Returns:
        DelayResponse with the requested and measured milliseconds; ``elapsed_ms >= ms``.

    Raises:
        InvalidDelayError: If ``ms`` is negative.
        DelayCancelledError: If ``cancel_event`` is set before or during the wait.

    Examples:
        >>> asyncio.run(delay(0)).requested_ms
        0
        >>> ev = asyncio.Event()
        >>> ev.set()
        >>> try:
        ...     asyncio.run(delay(10_000, ev))
        ... except DelayCancelledError:
        ...     print("cancelled")
        cancelled
    """
    if ms < 0:
        raise InvalidDelayError(f"Delay must be non-negative, got {ms}")

    start = time.monotonic()
    if cancel_event is not None and cancel_event.is_set():
        raise DelayCancelledError("Delay cancelled before it started")

    deadline = start + ms / 1000
    while True:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        if cancel_event is None:
            await asyncio.sleep(remaining)
            continue
        try:
            await asyncio.wait_for(cancel_event.wait(), timeout=remaining)
        except asyncio.TimeoutError:
            continue
        elapsed_ms = round((time.monotonic() - start) * 1000)
        logger.info("Delay of %d ms cancelled after %d ms", ms, elapsed_ms)
        raise DelayCancelledError(f"Delay cancelled after {elapsed_ms} ms")

    elapsed_ms = round((time.monotonic() - start) * 1000)
    return DelayResponse(requested_ms=ms, elapsed_ms=elapsed_ms)
