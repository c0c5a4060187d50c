# -*- coding: utf-8 -*-
"""Location: ./testbackend/services/random_source.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Seeded random source for fake data generation.

Every generation call gets its own Faker instance. An explicit seed makes the
instance reproducible; without a seed the instance draws from OS entropy. No
process-wide generator is ever reseeded, so concurrent seeded requests cannot
interfere with each other.

Examples:
    >>> source = RandomSource()
    >>> a = source.faker(seed=42).first_name()
    >>> b = source.faker(seed=42).first_name()
    >>> a == b
    True
"""

# Standard
import logging
from typing import Optional

# Third-Party
from faker import Faker

# First-Party
from testbackend.services.commerce_provider import CommerceProvider

logger = logging.getLogger(__name__)


def apply_seed(faker: Faker, seed: Optional[int]) -> Faker:
    """Reseed a Faker instance when a seed is given.

    Args:
        faker: Instance to reseed.
        seed: Seed value; ``None`` leaves the instance's random state untouched.

    Returns:
        The same Faker instance, for chaining.

    Examples:
        >>> f = Faker("en_US")
        >>> apply_seed(f, 7) is f
        True
        >>> apply_seed(f, 7).uuid4() == apply_seed(f, 7).uuid4()
        True
    """
    if seed is not None:
        faker.seed_instance(seed)
    return faker


class RandomSource:
    """Factory for per-call Faker instances.

    Args:
        locale: Faker locale for generated text.
    """

    def __init__(self, locale: str = "en_US") -> None:
        self.locale = locale

    def faker(self, seed: Optional[int] = None) -> Faker:
        """Build a fresh Faker instance with the commerce provider attached.

        Args:
            seed: Optional seed for reproducible output.

        Returns:
            A Faker instance private to the caller.
        """
        faker = Faker(self.locale)
        faker.add_provider(CommerceProvider)
        if seed is None:
            # Detach from the module-level random shared by unseeded Faker instances
            faker.seed_instance()
        else:
            logger.debug("Seeding Faker instance with %d", seed)
            apply_seed(faker, seed)
        return faker
