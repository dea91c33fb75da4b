"""
client.py

Responsibility: demonstrate the three ways of using a builder.

1) Director, minimum recipe
2) Director, full featured recipe
3) Direct step calls without a Director (A then C, skipping B)
"""

from __future__ import annotations

from creational_builder.builders import Builder, ConcreteBuilder1
from creational_builder.director import Director
from creational_builder.product import Product


def run_client(builder: Builder | None = None) -> list[tuple[str, Product]]:
    builder = builder or ConcreteBuilder1()
    director = Director()
    director.set_builder(builder)

    results: list[tuple[str, Product]] = []

    director.build_minimum()
    results.append(("Standard basic product", builder.product))

    director.build_full_featured()
    results.append(("Standard full featured product", builder.product))

    # The Director is optional; steps can be driven by hand.
    builder.produce_part_a()
    builder.produce_part_c()
    results.append(("Custom product", builder.product))

    return results
