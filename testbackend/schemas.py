# -*- coding: utf-8 -*-
"""Location: ./testbackend/schemas.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Test Backend Pydantic Schemas.
Response models for the /mock and /util endpoints. Field names are snake_case
in Python and camelCase on the wire; nullability follows the HTTP contract
(for example ``size`` is null for directory entries).
"""

# Standard
from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any, List, Literal, Optional, Union
from uuid import UUID

# Third-Party
from pydantic import BaseModel, ConfigDict, WithJsonSchema
from pydantic.alias_generators import to_camel

# Rendered by ORJSONResponse as a JSON number that keeps its two decimal places
Money = Annotated[Decimal, WithJsonSchema({"type": "number", "multipleOf": 0.01})]


class BaseModelWithConfigDict(BaseModel):
    """Base model emitting camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ---------------------------------------------------------------------------
# Mock data
# ---------------------------------------------------------------------------


class AddressDto(BaseModelWithConfigDict):
    """Postal address embedded in users and companies."""

    street: str
    city: str
    state: str
    postal_code: str
    country: str


class UserDto(BaseModelWithConfigDict):
    """Synthetic user record."""

    id: UUID
    first_name: str
    last_name: str
    email: str
    phone: str
    birth_date: date
    address: AddressDto


class ProductDto(BaseModelWithConfigDict):
    """Synthetic product record."""

    id: UUID
    sku: str
    name: str
    category: str
    price: Money
    description: str
    color: str


class CompanyDto(BaseModelWithConfigDict):
    """Synthetic company record."""

    name: str
    catch_phrase: str
    bs: str
    phone: str
    address: AddressDto


# ---------------------------------------------------------------------------
# Utility responses
# ---------------------------------------------------------------------------


class PingResponse(BaseModelWithConfigDict):
    """Response for /util/ping."""

    message: str = "pong"
    time_utc: datetime


class HealthResponse(BaseModelWithConfigDict):
    """Response for /util/health."""

    status: str = "Healthy"
    time_utc: datetime


class ReadyResponse(BaseModelWithConfigDict):
    """Response for /util/ready."""

    status: str = "Ready"


class VersionResponse(BaseModelWithConfigDict):
    """Response for /util/version."""

    version: str
    informational: Optional[str] = None


class WhoAmIResponse(BaseModelWithConfigDict):
    """Response for /util/whoami."""

    host: str
    addresses: List[str]
    process_id: int


class EchoResponse(BaseModelWithConfigDict):
    """Response for /util/echo."""

    received_at_utc: datetime
    body: Any = None


class DelayResponse(BaseModelWithConfigDict):
    """Response for /util/delay/{ms}."""

    requested_ms: int
    elapsed_ms: int


class ErrorResponse(BaseModelWithConfigDict):
    """Generic error body."""

    error: str


class FileEntry(BaseModelWithConfigDict):
    """One entry of a directory listing."""

    name: str
    path: str
    type: Literal["file", "dir"]
    size: Optional[int] = None


class DirectoryListing(BaseModelWithConfigDict):
    """Directory listing returned by /util/files."""

    root: str
    target: str
    entries: List[FileEntry]


class FileContent(BaseModelWithConfigDict):
    """File content returned by /util/files."""

    root: str
    target: str
    size: int
    content: str


class PathNotFoundResponse(BaseModelWithConfigDict):
    """Body returned when /util/files cannot find the requested path."""

    error: str = "Path not found"
    root: str
    target: str


FilesResponse = Union[DirectoryListing, FileContent]


class AllocationResult(BaseModelWithConfigDict):
    """Response for /util/allocate/{mb}."""

    allocated_mb: int
    chunks: int
    total_mb: int


class ClearAllocationsResult(BaseModelWithConfigDict):
    """Response for /util/clearallocations."""

    cleared: bool
    freed_mb: int
