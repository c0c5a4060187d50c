# -*- coding: utf-8 -*-
"""Location: ./tests/unit/testbackend/services/test_delay_service.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Unit tests for the cancellable delay.
"""

# Standard
import asyncio
import time

# Third-Party
import pytest

# First-Party
from testbackend.services.delay_service import delay, DelayCancelledError, InvalidDelayError


@pytest.mark.asyncio
async def test_zero_delay_returns_immediately():
    result = await delay(0)
    assert result.requested_ms == 0
    assert result.elapsed_ms >= 0


@pytest.mark.asyncio
async def test_elapsed_is_at_least_requested():
    result = await delay(50)
    assert result.requested_ms == 50
    assert result.elapsed_ms >= 50


@pytest.mark.asyncio
async def test_uncancelled_event_waits_full_duration():
    event = asyncio.Event()
    result = await delay(30, event)
    assert result.elapsed_ms >= 30


@pytest.mark.asyncio
async def test_negative_delay_is_rejected():
    with pytest.raises(InvalidDelayError):
        await delay(-1)


def test_invalid_delay_is_a_value_error():
    assert issubclass(InvalidDelayError, ValueError)


@pytest.mark.asyncio
async def test_pre_cancelled_event_fails_fast():
    event = asyncio.Event()
    event.set()
    start = time.monotonic()
    with pytest.raises(DelayCancelledError):
        await delay(10_000, event)
    assert time.monotonic() - start < 1


@pytest.mark.asyncio
async def test_event_set_during_wait_cancels():
    event = asyncio.Event()
    loop = asyncio.get_running_loop()
    loop.call_later(0.05, event.set)
    start = time.monotonic()
    with pytest.raises(DelayCancelledError):
        await delay(10_000, event)
    assert time.monotonic() - start < 5


@pytest.mark.asyncio
async def test_task_cancellation_propagates():
    task = asyncio.create_task(delay(10_000))
    await asyncio.sleep(0.01)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task


@pytest.mark.asyncio
async def test_concurrent_delays_do_not_serialize():
    start = time.monotonic()
    results = await asyncio.gather(*(delay(100) for _ in range(5)))
    assert all(r.elapsed_ms >= 100 for r in results)
    assert time.monotonic() - start < 0.45
