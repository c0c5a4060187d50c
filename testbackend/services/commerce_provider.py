# -*- coding: utf-8 -*-
"""Location: ./testbackend/services/commerce_provider.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Faker provider for e-commerce style product data.

Faker ships no product catalogue for ``en_US``, so product names, categories
and descriptions are assembled here from fixed word lists using the owning
generator's random state (which keeps seeded output reproducible).

Examples:
    >>> from faker import Faker
    >>> fake = Faker("en_US")
    >>> fake.add_provider(CommerceProvider)
    >>> fake.seed_instance(1)
    >>> name = fake.product_name()
    >>> len(name.split()) == 3
    True
    >>> fake.product_category() in CommerceProvider.departments
    True
"""

# Third-Party
from faker.providers import BaseProvider


class CommerceProvider(BaseProvider):
    """Product names, departments and marketing copy."""

    product_adjectives = (
        "Small",
        "Ergonomic",
        "Rustic",
        "Intelligent",
        "Gorgeous",
        "Incredible",
        "Fantastic",
        "Practical",
        "Sleek",
        "Awesome",
        "Generic",
        "Handcrafted",
        "Handmade",
        "Licensed",
        "Refined",
        "Unbranded",
        "Tasty",
    )

    product_materials = (
        "Steel",
        "Wooden",
        "Concrete",
        "Plastic",
        "Cotton",
        "Granite",
        "Rubber",
        "Metal",
        "Soft",
        "Fresh",
        "Frozen",
    )

    products = (
        "Chair",
        "Car",
        "Computer",
        "Keyboard",
        "Mouse",
        "Bike",
        "Ball",
        "Gloves",
        "Pants",
        "Shirt",
        "Table",
        "Shoes",
        "Hat",
        "Towels",
        "Soap",
        "Tuna",
        "Chicken",
        "Fish",
        "Cheese",
        "Bacon",
        "Pizza",
        "Salad",
        "Sausages",
        "Chips",
    )

    departments = (
        "Books",
        "Movies",
        "Music",
        "Games",
        "Electronics",
        "Computers",
        "Home",
        "Garden",
        "Tools",
        "Grocery",
        "Health",
        "Beauty",
        "Toys",
        "Kids",
        "Baby",
        "Clothing",
        "Shoes",
        "Jewelery",
        "Sports",
        "Outdoors",
        "Automotive",
        "Industrial",
    )

    product_descriptions = (
        "Ergonomic executive chair upholstered in bonded black leather and PVC padded seat and back for all-day comfort and support",
        "The automobile layout consists of a front-engine design, with transaxle-type transmissions mounted at the rear of the engine and four wheel drive",
        "New ABC 13 9370, 13.3, 5th Gen CoreA5-8250U, 8GB RAM, 256GB SSD, power UHD Graphics, OS 10 Home, OS Office A & J 2016",
        "The slim & simple Maple Gaming Keyboard from Dev Byte comes with a sleek body and 7- Color RGB LED Back-lighting for smart functionality",
        "The Apollotech B340 is an affordable wireless mouse with reliable connectivity, 12 months battery life and modern design",
        "The Nagasaki Lander is the trademarked name of several series of Nagasaki sport bikes, that started with the 1984 ABC800J",
        "The Football Is Good For Training And Recreational Purposes",
        "Carbonite web goalkeeper gloves are ergonomically designed to give easy fit",
        "Boston's most advanced compression wear technology increases muscle oxygenation, stabilizes active muscles",
        "New range of formal shirts are designed keeping you in mind. With fits and styling that will make you stand apart",
        "The beautiful range of Apple Naturale that has an exciting mix of natural ingredients. With the Goodness of 100% Natural Ingredients",
        "Andy shoes are designed to keeping in mind durability as well as trends, the most stylish range of shoes & sandals",
    )

    def product_name(self) -> str:
        """Return an ``<adjective> <material> <product>`` name.

        Returns:
            Product name.
        """
        return f"{self.random_element(self.product_adjectives)} {self.random_element(self.product_materials)} {self.random_element(self.products)}"

    def product_category(self) -> str:
        """Return a store department name.

        Returns:
            Department name.
        """
        return self.random_element(self.departments)

    def product_description(self) -> str:
        """Return a marketing blurb.

        Returns:
            Product description.
        """
        return self.random_element(self.product_descriptions)
