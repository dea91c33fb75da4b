from pathlib import Path

import pytest

from creational_builder.recipes import (
    DEFAULT_RECIPES,
    FULL_FEATURED,
    MINIMUM,
    Recipe,
    RecipeError,
    load_recipes,
    parse_steps,
)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "recipes.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_builtin_recipes() -> None:
    assert MINIMUM.steps == ("a",)
    assert FULL_FEATURED.steps == ("a", "b", "c")
    assert load_recipes() == DEFAULT_RECIPES


def test_recipe_rejects_unknown_step() -> None:
    with pytest.raises(RecipeError, match="unknown step"):
        Recipe(name="bad", steps=("a", "d"))


def test_recipe_rejects_empty_name() -> None:
    with pytest.raises(RecipeError):
        Recipe(name="  ", steps=("a",))


def test_recipe_rejects_empty_steps() -> None:
    with pytest.raises(RecipeError, match="at least one step"):
        Recipe(name="empty", steps=())


def test_parse_steps() -> None:
    assert parse_steps("a, C ,a") == ("a", "c", "a")


@pytest.mark.parametrize("text", ["", " , ", "a,x"])
def test_parse_steps_invalid(text: str) -> None:
    with pytest.raises(RecipeError):
        parse_steps(text)


def test_load_recipes_merges_file(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "recipes:\n"
        "  custom: [a, c]\n"
        "  minimum: [b]\n",
    )
    recipes = load_recipes(path)
    assert recipes["custom"] == Recipe(name="custom", steps=("a", "c"))
    assert recipes["minimum"].steps == ("b",)
    assert recipes["full_featured"] == FULL_FEATURED


def test_load_recipes_empty_file(tmp_path: Path) -> None:
    assert load_recipes(_write(tmp_path, "")) == DEFAULT_RECIPES


def test_load_recipes_missing_file(tmp_path: Path) -> None:
    with pytest.raises(RecipeError, match="does not exist"):
        load_recipes(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "- a\n- b\n",
        "recipes: [a, b]\n",
        "recipes:\n  custom: a\n",
        "recipes:\n  custom: [a, z]\n",
        "recipes: {custom: [a\n",
        "recipes: []\n",
        "recipes:\n  empty: []\n",
    ],
)
def test_load_recipes_invalid(tmp_path: Path, text: str) -> None:
    with pytest.raises(RecipeError):
        load_recipes(_write(tmp_path, text))
