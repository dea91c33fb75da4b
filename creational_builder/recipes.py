"""
recipes.py

Responsibility: named step sequences the Director can run.

Two recipes are built in. More can be declared in a YAML file:

    recipes:
      custom: [a, c]
      doubled: [a, a, b]

Steps are the letters `a`, `b` and `c`, one per builder step method.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from creational_builder.log_helper import get_logger

_LOG = get_logger(__name__)

STEPS = ("a", "b", "c")
RECIPES_ENV = "CREATIONAL_BUILDER_RECIPES"


class RecipeError(ValueError):
    pass


def _check_step(step: Any, *, recipe: str) -> str:
    if step not in STEPS:
        raise RecipeError(f"Recipe {recipe!r}: unknown step {step!r} (expected one of {', '.join(STEPS)})")
    return step


@dataclass(frozen=True)
class Recipe:
    """A named, fixed sequence of builder steps."""

    name: str
    steps: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise RecipeError("Recipe name must not be empty.")
        if not self.steps:
            raise RecipeError(f"Recipe {self.name!r}: at least one step is required.")
        for step in self.steps:
            _check_step(step, recipe=self.name)


MINIMUM = Recipe(name="minimum", steps=("a",))
FULL_FEATURED = Recipe(name="full_featured", steps=("a", "b", "c"))

DEFAULT_RECIPES: dict[str, Recipe] = {
    MINIMUM.name: MINIMUM,
    FULL_FEATURED.name: FULL_FEATURED,
}


def parse_steps(text: str) -> tuple[str, ...]:
    """
    Parse a comma separated step list such as "a,c" into a tuple.
    """
    steps = tuple(s.strip().lower() for s in text.split(",") if s.strip())
    if not steps:
        raise RecipeError("At least one step is required.")
    for step in steps:
        _check_step(step, recipe="<steps>")
    return steps


def load_recipes(path: str | Path | None = None) -> dict[str, Recipe]:
    """
    Return the built-in recipes merged with those declared in `path`.

    Recipes from the file replace built-ins of the same name. With no path
    the built-ins are returned as they are.
    """
    recipes = dict(DEFAULT_RECIPES)
    if path is None:
        return recipes

    file_path = Path(path)
    if not file_path.exists():
        raise RecipeError(f"Recipes file does not exist: {file_path}")

    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise RecipeError(f"Recipes file is not valid YAML: {file_path}") from e
    if not isinstance(data, dict):
        raise RecipeError("Recipes file must be a mapping at the top level.")

    raw = data.get("recipes")
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise RecipeError("`recipes` must be a mapping of name to step list.")

    for name, steps in raw.items():
        if not isinstance(steps, list):
            raise RecipeError(f"Recipe {name!r}: steps must be a list.")
        recipes[str(name)] = Recipe(name=str(name), steps=tuple(str(s).strip().lower() for s in steps))

    _LOG.debug("Loaded %d recipe(s) from %s", len(raw), file_path)
    return recipes
