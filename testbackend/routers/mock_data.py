# -*- coding: utf-8 -*-
"""Location: ./testbackend/routers/mock_data.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Mock Data Router.
Exposes deterministic fake data generation:

- GET /mock/users?count=&seed=
- GET /mock/products?count=&seed=
- GET /mock/company?seed=

The same ``seed`` and ``count`` always produce the same records.
"""

# Standard
from typing import List, Optional

# Third-Party
from fastapi import APIRouter, Depends, Query

# First-Party
from testbackend.config import Settings
from testbackend.dependencies import get_app_settings, get_mock_data_service
from testbackend.schemas import CompanyDto, ProductDto, UserDto
from testbackend.services.mock_data_service import MockDataService
from testbackend.utils.orjson_response import ORJSONResponse

router = APIRouter(prefix="/mock", tags=["mock"])


@router.get("/users", response_model=List[UserDto])
def get_users(
    count: Optional[int] = Query(default=None, description="Number of users (clamped to the allowed range)"),
    seed: Optional[int] = Query(default=None, description="Seed for reproducible output"),
    service: MockDataService = Depends(get_mock_data_service),
    settings: Settings = Depends(get_app_settings),
) -> List[UserDto]:
    """Generate fake users.

    Args:
        count: Requested number of records.
        seed: Optional seed.
        service: Mock data service.
        settings: Application settings (default count).

    Returns:
        List of users.
    """
    return service.get_users(settings.mock_default_count if count is None else count, seed)


@router.get("/products", response_model=List[ProductDto])
def get_products(
    count: Optional[int] = Query(default=None, description="Number of products (clamped to the allowed range)"),
    seed: Optional[int] = Query(default=None, description="Seed for reproducible output"),
    service: MockDataService = Depends(get_mock_data_service),
    settings: Settings = Depends(get_app_settings),
) -> ORJSONResponse:
    """Generate fake products.

    The body is rendered directly with orjson so prices keep both decimal
    places on the wire (``12.50``, not ``12.5``).

    Args:
        count: Requested number of records.
        seed: Optional seed.
        service: Mock data service.
        settings: Application settings (default count).

    Returns:
        List of products as an ORJSONResponse.
    """
    products = service.get_products(settings.mock_default_count if count is None else count, seed)
    return ORJSONResponse(content=[product.model_dump(by_alias=True) for product in products])


@router.get("/company", response_model=CompanyDto)
def get_company(
    seed: Optional[int] = Query(default=None, description="Seed for reproducible output"),
    service: MockDataService = Depends(get_mock_data_service),
) -> CompanyDto:
    """Generate a fake company.

    Args:
        seed: Optional seed.
        service: Mock data service.

    Returns:
        CompanyDto
    """
    return service.get_company(seed)
