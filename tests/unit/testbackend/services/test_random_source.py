# -*- coding: utf-8 -*-
"""Location: ./tests/unit/testbackend/services/test_random_source.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Unit tests for RandomSource and the commerce Faker provider.
"""

# Third-Party
from faker import Faker

# First-Party
from testbackend.services.commerce_provider import CommerceProvider
from testbackend.services.random_source import apply_seed, RandomSource


def test_faker_has_commerce_provider():
    faker = RandomSource().faker(seed=1)
    assert faker.product_category() in CommerceProvider.departments
    assert faker.product_description() in CommerceProvider.product_descriptions


def test_product_name_parts():
    faker = RandomSource().faker(seed=2)
    for _ in range(50):
        adjective, material, product = faker.product_name().split()
        assert adjective in CommerceProvider.product_adjectives
        assert material in CommerceProvider.product_materials
        assert product in CommerceProvider.products


def test_each_call_gets_a_new_instance():
    source = RandomSource()
    assert source.faker(seed=1) is not source.faker(seed=1)


def test_seeded_instances_agree():
    source = RandomSource()
    a, b = source.faker(seed=77), source.faker(seed=77)
    assert [a.name() for _ in range(5)] == [b.name() for _ in range(5)]


def test_unseeded_instances_are_independent_of_global_seed():
    Faker.seed(0)
    first = RandomSource().faker().uuid4()
    Faker.seed(0)
    second = RandomSource().faker().uuid4()
    assert first != second


def test_locale_is_applied():
    faker = RandomSource(locale="de_DE").faker(seed=1)
    assert faker.locales == ["de_DE"]


def test_apply_seed_returns_same_instance():
    faker = Faker()
    assert apply_seed(faker, 3) is faker
    assert apply_seed(faker, None) is faker
