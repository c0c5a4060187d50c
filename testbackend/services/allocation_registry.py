# -*- coding: utf-8 -*-
"""Location: ./testbackend/services/allocation_registry.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Allocation Registry for memory stress testing.

Holds scratch buffers allocated through /util/allocate until they are released
through /util/clearallocations. The registry is owned by the application (one
per app instance) rather than being a module global, so tests and multiple
app instances never share allocations.

Examples:
    >>> registry = AllocationRegistry(max_mb=4)
    >>> registry.allocate(2).total_mb
    2
    >>> registry.allocate(99).allocated_mb
    4
    >>> registry.clear().freed_mb
    6
    >>> registry.clear().freed_mb
    0
"""

# Standard
import gc
import threading
from typing import List

# First-Party
from testbackend.schemas import AllocationResult, ClearAllocationsResult
from testbackend.services.logging_service import LoggingService
from testbackend.services.mock_data_service import clamp

# Initialize logging service first
logging_service = LoggingService()
logger = logging_service.get_logger(__name__)

BYTES_PER_MB = 1024 * 1024
PAGE_SIZE = 4096
DEFAULT_MAX_MB = 1024


class AllocationRegistry:
    """Thread-safe ordered list of scratch byte buffers.

    Args:
        max_mb: Upper clamp for a single allocation in megabytes.
    """

    def __init__(self, max_mb: int = DEFAULT_MAX_MB) -> None:
        self.max_mb = max_mb
        self._buffers: List[bytearray] = []
        self._lock = threading.Lock()

    @staticmethod
    def _touch(buffer: bytearray) -> None:
        """Write one byte per page so the memory is actually committed.

        Args:
            buffer: Buffer to touch.
        """
        pages = len(range(0, len(buffer), PAGE_SIZE))
        buffer[::PAGE_SIZE] = b"\x01" * pages

    def _total_bytes(self) -> int:
        return sum(len(b) for b in self._buffers)

    def allocate(self, mb: int) -> AllocationResult:
        """Allocate, touch and register a buffer.

        Args:
            mb: Requested size in megabytes, clamped to [1, max_mb].

        Returns:
            AllocationResult with the allocated size, chunk count and running total.
        """
        mb = clamp(mb, 1, self.max_mb)
        buffer = bytearray(mb * BYTES_PER_MB)
        self._touch(buffer)

        with self._lock:
            self._buffers.append(buffer)
            chunks = len(self._buffers)
            total_mb = self._total_bytes() // BYTES_PER_MB

        logger.info("Allocated %d MB, total chunks: %d", mb, chunks)
        return AllocationResult(allocated_mb=mb, chunks=chunks, total_mb=total_mb)

    def clear(self) -> ClearAllocationsResult:
        """Release every registered buffer.

        Returns:
            ClearAllocationsResult with the megabytes held before clearing.
        """
        with self._lock:
            freed_mb = self._total_bytes() // BYTES_PER_MB
            self._buffers.clear()

        gc.collect()
        logger.info("Cleared allocations, freed %d MB", freed_mb)
        return ClearAllocationsResult(cleared=True, freed_mb=freed_mb)

    @property
    def chunks(self) -> int:
        """Number of registered buffers.

        Returns:
            Buffer count.
        """
        with self._lock:
            return len(self._buffers)

    @property
    def total_mb(self) -> int:
        """Megabytes currently registered.

        Returns:
            Total size in megabytes.
        """
        with self._lock:
            return self._total_bytes() // BYTES_PER_MB
