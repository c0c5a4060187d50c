# -*- coding: utf-8 -*-
"""Location: ./testbackend/services/system_info_service.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

System Information Service Implementation.
This module reports facts about the running process for diagnostics:
- Package version and informational build version
- Process environment (case-insensitive keys)
- Host name, resolved addresses and process id

Examples:
    >>> service = SystemInfoService(distribution="not-installed-dist")
    >>> service.version().version
    'unknown'
    >>> env = service.environment({"Home": "/root"})
    >>> env["HOME"]
    '/root'
"""

# Standard
from datetime import datetime, timezone
from importlib import metadata
import os
import socket
from typing import List, Mapping, Optional

# First-Party
from testbackend import __version__
from testbackend.schemas import VersionResponse, WhoAmIResponse
from testbackend.services.logging_service import LoggingService
from testbackend.utils.case_insensitive import CaseInsensitiveDict

# Initialize logging service first
logging_service = LoggingService()
logger = logging_service.get_logger(__name__)

DISTRIBUTION_NAME = "testbackend"
UNKNOWN_VERSION = "unknown"


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime.

    Returns:
        Current UTC time.

    Examples:
        >>> utc_now().tzinfo is timezone.utc
        True
    """
    return datetime.now(timezone.utc)


def resolve_host_addresses(host: str) -> List[str]:
    """Resolve every IP address of a host name.

    Args:
        host: Host name to resolve.

    Returns:
        Unique addresses in resolver order.

    Raises:
        socket.gaierror: If the name cannot be resolved.
    """
    addresses: List[str] = []
    for _family, _type, _proto, _canon, sockaddr in socket.getaddrinfo(host, None):
        address = sockaddr[0]
        if address not in addresses:
            addresses.append(address)
    return addresses


class SystemInfoService:
    """Read-only view of the running process.

    Args:
        distribution: Installed distribution name used to look up the version.
        informational_version: Extra build information (for example a commit hash).
    """

    def __init__(self, distribution: str = DISTRIBUTION_NAME, informational_version: Optional[str] = None) -> None:
        self.distribution = distribution
        self.informational_version = informational_version

    def version(self) -> VersionResponse:
        """Report the installed version.

        Returns:
            VersionResponse; ``version`` is ``"unknown"`` when the distribution is not installed.
        """
        informational = f"{__version__}+{self.informational_version}" if self.informational_version else __version__
        try:
            version = metadata.version(self.distribution)
        except metadata.PackageNotFoundError:
            logger.debug("Distribution %s not installed; version unknown", self.distribution)
            version = UNKNOWN_VERSION
        return VersionResponse(version=version, informational=informational)

    def environment(self, environ: Optional[Mapping[str, str]] = None) -> CaseInsensitiveDict:
        """Snapshot the process environment.

        Args:
            environ: Source mapping (defaults to ``os.environ``).

        Returns:
            CaseInsensitiveDict of variable name to value.
        """
        source = os.environ if environ is None else environ
        return CaseInsensitiveDict({key: value or "" for key, value in source.items()})

    def whoami(self) -> WhoAmIResponse:
        """Report host name, resolved addresses and process id.

        Returns:
            WhoAmIResponse

        Raises:
            socket.gaierror: If the local host name cannot be resolved.
        """
        host = socket.gethostname()
        try:
            addresses = resolve_host_addresses(host)
        except socket.gaierror as e:
            logger.error(f"Failed to resolve host name {host}: {e}")
            raise
        return WhoAmIResponse(host=host, addresses=addresses, process_id=os.getpid())
