"""
creational_builder package

This package implements the Builder creational pattern as a small library
with a CLI front-end.

Key responsibilities are split across modules:
- `product.py`: the Product, an ordered log of constructed parts
- `builders.py`: the Builder interface and its concrete variants
- `director.py`: recipe orchestration over a configured builder
- `recipes.py`: built-in recipes and YAML recipe loading
- `client.py`: the three usage modes of the pattern
- `renderer.py`: Jinja2 rendering of products and demo reports
- `cli.py`: CLI entrypoint (demo / build / recipes)
"""

from __future__ import annotations

from creational_builder.builders import (
    BUILDERS,
    Builder,
    ConcreteBuilder1,
    ConcreteBuilder2,
    UnknownBuilderError,
    create_builder,
)
from creational_builder.director import Director, DirectorError, UnconfiguredBuilderError
from creational_builder.product import Product
from creational_builder.recipes import Recipe, RecipeError

__all__ = [
    "BUILDERS",
    "Builder",
    "ConcreteBuilder1",
    "ConcreteBuilder2",
    "Director",
    "DirectorError",
    "Product",
    "Recipe",
    "RecipeError",
    "UnconfiguredBuilderError",
    "UnknownBuilderError",
    "create_builder",
    "__version__",
]

__version__ = "0.1.0"
