# -*- coding: utf-8 -*-
"""Location: ./testbackend/services/mock_data_service.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Mock Data Service Implementation.
This module generates synthetic users, products and companies for client and
load testing. It includes:
- Field-level generation rules for each record type
- Count clamping to the configured batch range
- Seed handling through an injected RandomSource

Examples:
    >>> from testbackend.services.random_source import RandomSource
    >>> service = MockDataService(RandomSource())
    >>> len(service.get_users(3, seed=1))
    3
    >>> len(service.get_users(0))
    1
    >>> service.get_company(seed=5) == service.get_company(seed=5)
    True
"""

# Standard
from datetime import date, datetime, timezone
from decimal import Decimal
import logging
import re
from typing import List, Optional

# Third-Party
from faker import Faker

# First-Party
from testbackend.schemas import AddressDto, CompanyDto, ProductDto, UserDto
from testbackend.services.random_source import RandomSource

logger = logging.getLogger(__name__)

MIN_COUNT = 1
DEFAULT_MAX_COUNT = 1000

MIN_AGE_YEARS = 18
MAX_AGE_YEARS = 50

# Prices are drawn in cents so the Decimal always carries two fractional digits
MIN_PRICE_CENTS = 100
MAX_PRICE_CENTS = 99_900

_EMAIL_PART_RE = re.compile(r"[^a-z0-9]")


def clamp(value: int, low: int, high: int) -> int:
    """Constrain a value to the closed range [low, high].

    Args:
        value: Value to clamp.
        low: Lower bound.
        high: Upper bound.

    Returns:
        The clamped value.

    Examples:
        >>> clamp(0, 1, 1000)
        1
        >>> clamp(5000, 1, 1000)
        1000
        >>> clamp(42, 1, 1000)
        42
    """
    return max(low, min(high, value))


def years_before(reference: date, years: int) -> date:
    """Return the same calendar day ``years`` years before ``reference``.

    February 29th maps to February 28th in non-leap target years.

    Args:
        reference: Reference date.
        years: Number of years to go back.

    Returns:
        The shifted date.

    Examples:
        >>> years_before(date(2024, 2, 29), 1)
        datetime.date(2023, 2, 28)
        >>> years_before(date(2025, 6, 1), 18)
        datetime.date(2007, 6, 1)
    """
    try:
        return reference.replace(year=reference.year - years)
    except ValueError:
        return reference.replace(year=reference.year - years, day=28)


def build_email(first_name: str, last_name: str, domain: str) -> str:
    """Derive an email address from a person's name.

    Args:
        first_name: Given name.
        last_name: Family name.
        domain: Mail domain.

    Returns:
        ``first.last@domain`` with the name parts lowercased and reduced to ASCII letters and digits.

    Examples:
        >>> build_email("Mary-Ann", "O'Neil", "example.com")
        'maryann.oneil@example.com'
    """
    local = ".".join(part for part in (_EMAIL_PART_RE.sub("", first_name.lower()), _EMAIL_PART_RE.sub("", last_name.lower())) if part)
    return f"{local or 'user'}@{domain}"


def generate_address(faker: Faker) -> AddressDto:
    """Generate a postal address.

    Args:
        faker: Faker instance to draw from.

    Returns:
        AddressDto
    """
    return AddressDto(
        street=faker.street_address(),
        city=faker.city(),
        state=faker.state(),
        postal_code=faker.postcode(),
        country=faker.country(),
    )


def _generate_user(faker: Faker, oldest: date, youngest: date) -> UserDto:
    user_id = faker.uuid4(cast_to=None)
    first_name = faker.first_name()
    last_name = faker.last_name()
    return UserDto(
        id=user_id,
        first_name=first_name,
        last_name=last_name,
        email=build_email(first_name, last_name, faker.free_email_domain()),
        phone=faker.phone_number(),
        birth_date=faker.date_between(start_date=oldest, end_date=youngest),
        address=generate_address(faker),
    )


def generate_users(faker: Faker, count: int, today: Optional[date] = None) -> List[UserDto]:
    """Generate ``count`` users.

    Birth dates fall between 50 and 18 years before ``today``.

    Args:
        faker: Faker instance to draw from.
        count: Number of records; the caller is responsible for clamping.
        today: Reference date (defaults to the current UTC date).

    Returns:
        List of users in generation order.
    """
    today = today or datetime.now(timezone.utc).date()
    oldest = years_before(today, MAX_AGE_YEARS)
    youngest = years_before(today, MIN_AGE_YEARS)
    return [_generate_user(faker, oldest, youngest) for _ in range(count)]


def generate_products(faker: Faker, count: int) -> List[ProductDto]:
    """Generate ``count`` products.

    Args:
        faker: Faker instance to draw from; must carry the commerce provider.
        count: Number of records; the caller is responsible for clamping.

    Returns:
        List of products in generation order.
    """
    products = []
    for _ in range(count):
        products.append(
            ProductDto(
                id=faker.uuid4(cast_to=None),
                sku=faker.ean13(),
                name=faker.product_name(),
                category=faker.product_category(),
                price=Decimal(faker.random_int(min=MIN_PRICE_CENTS, max=MAX_PRICE_CENTS)).scaleb(-2),
                description=faker.product_description(),
                color=faker.safe_color_name(),
            )
        )
    return products


def generate_company(faker: Faker) -> CompanyDto:
    """Generate a single company.

    Args:
        faker: Faker instance to draw from.

    Returns:
        CompanyDto
    """
    return CompanyDto(
        name=faker.company(),
        catch_phrase=faker.catch_phrase(),
        bs=faker.bs(),
        phone=faker.phone_number(),
        address=generate_address(faker),
    )


class MockDataService:
    """Facade over the record generators.

    Clamps batch sizes and resolves a private Faker instance per call, so
    seeded requests are reproducible and isolated from each other.

    Args:
        random_source: Factory for seeded Faker instances.
        max_count: Upper bound for batch sizes.
    """

    def __init__(self, random_source: RandomSource, max_count: int = DEFAULT_MAX_COUNT) -> None:
        self.random_source = random_source
        self.max_count = max_count

    def clamp_count(self, count: int) -> int:
        """Clamp a requested batch size.

        Args:
            count: Requested number of records.

        Returns:
            Count within [1, max_count].

        Examples:
            >>> MockDataService(RandomSource(), max_count=1000).clamp_count(-5)
            1
        """
        return clamp(count, MIN_COUNT, self.max_count)

    def get_users(self, count: int, seed: Optional[int] = None) -> List[UserDto]:
        """Generate a batch of users.

        Args:
            count: Requested number of records (clamped).
            seed: Optional seed for reproducible output.

        Returns:
            List of users.
        """
        count = self.clamp_count(count)
        logger.debug("Generating %d users (seed=%s)", count, seed)
        return generate_users(self.random_source.faker(seed), count)

    def get_products(self, count: int, seed: Optional[int] = None) -> List[ProductDto]:
        """Generate a batch of products.

        Args:
            count: Requested number of records (clamped).
            seed: Optional seed for reproducible output.

        Returns:
            List of products.
        """
        count = self.clamp_count(count)
        logger.debug("Generating %d products (seed=%s)", count, seed)
        return generate_products(self.random_source.faker(seed), count)

    def get_company(self, seed: Optional[int] = None) -> CompanyDto:
        """Generate one company.

        Args:
            seed: Optional seed for reproducible output.

        Returns:
            CompanyDto
        """
        logger.debug("Generating company (seed=%s)", seed)
        return generate_company(self.random_source.faker(seed))
