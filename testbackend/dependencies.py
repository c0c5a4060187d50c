# -*- coding: utf-8 -*-
"""Location: ./testbackend/dependencies.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

FastAPI dependency providers.

Long-lived services (the mock data facade, the allocation registry and the
system info service) are created once per application in ``create_app`` and
stored on ``app.state``; these providers hand them to the routers. Tests can
replace any of them through ``app.dependency_overrides``.
"""

# Third-Party
from fastapi import Depends, Request

# First-Party
from testbackend.config import Settings
from testbackend.services.allocation_registry import AllocationRegistry
from testbackend.services.file_browser import FileBrowser
from testbackend.services.mock_data_service import MockDataService
from testbackend.services.system_info_service import SystemInfoService


def get_app_settings(request: Request) -> Settings:
    """Return the settings the application was created with.

    Args:
        request: Current request.

    Returns:
        Settings
    """
    return request.app.state.settings


def get_mock_data_service(request: Request) -> MockDataService:
    """Return the application's mock data service.

    Args:
        request: Current request.

    Returns:
        MockDataService
    """
    return request.app.state.mock_data_service


def get_allocation_registry(request: Request) -> AllocationRegistry:
    """Return the application's allocation registry.

    Args:
        request: Current request.

    Returns:
        AllocationRegistry
    """
    return request.app.state.allocation_registry


def get_system_info_service(request: Request) -> SystemInfoService:
    """Return the application's system info service.

    Args:
        request: Current request.

    Returns:
        SystemInfoService
    """
    return request.app.state.system_info_service


def get_file_browser(settings: Settings = Depends(get_app_settings)) -> FileBrowser:
    """Build a file browser rooted at the configured data root.

    Args:
        settings: Application settings.

    Returns:
        FileBrowser
    """
    return FileBrowser(settings.data_root, max_content_chars=settings.files_max_content_chars)
