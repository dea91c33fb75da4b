"""
cli.py

Responsibility: CLI entrypoint for creational-builder.

Commands:
- `demo`: run the three client usage modes and print the report
- `build`: run one recipe (or an explicit step list) and print the product
- `recipes`: list the available recipes

This module orchestrates; construction lives in `builders.py` and
`director.py`, recipe loading in `recipes.py`, output in `renderer.py`.
"""

from __future__ import annotations

import argparse
import os

from creational_builder.builders import BUILDERS, UnknownBuilderError, create_builder
from creational_builder.client import run_client
from creational_builder.director import Director
from creational_builder.log_helper import get_logger
from creational_builder.recipes import FULL_FEATURED, RECIPES_ENV, Recipe, RecipeError, load_recipes, parse_steps
from creational_builder.renderer import DEFAULT_TEMPLATE, RenderError, render_product, render_report

_LOG = get_logger(__name__)

USER_ERROR_EXIT_CODE = 2


class CLIError(RuntimeError):
    pass


def _recipes_path(args: argparse.Namespace) -> str | None:
    return args.recipes or os.environ.get(RECIPES_ENV) or None


def _resolve_recipe(args: argparse.Namespace) -> Recipe:
    if args.steps:
        if args.recipe:
            raise CLIError("Give either a recipe name or --steps, not both.")
        return Recipe(name="custom", steps=parse_steps(args.steps))

    recipes = load_recipes(_recipes_path(args))
    name = args.recipe or FULL_FEATURED.name
    try:
        return recipes[name]
    except KeyError:
        known = ", ".join(sorted(recipes))
        raise CLIError(f"Unknown recipe: {name!r} (known: {known})") from None


def demo_cmd(args: argparse.Namespace) -> int:
    results = run_client(create_builder(args.builder))
    print(render_report(results), end="")
    return 0


def build_cmd(args: argparse.Namespace) -> int:
    recipe = _resolve_recipe(args)
    builder = create_builder(args.builder)
    Director(builder).build(recipe)
    print(render_product(builder.product, args.template, recipe=recipe.name))
    return 0


def recipes_cmd(args: argparse.Namespace) -> int:
    recipes = load_recipes(_recipes_path(args))
    for name in sorted(recipes):
        print(f"{name}: {', '.join(recipes[name].steps)}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="creational-builder", description="Builder pattern demonstration")
    sub = p.add_subparsers(dest="command", required=True)

    builder_opts = argparse.ArgumentParser(add_help=False)
    builder_opts.add_argument(
        "--builder",
        default="1",
        choices=sorted(BUILDERS),
        help="Concrete builder variant (default: 1)",
    )

    recipes_opts = argparse.ArgumentParser(add_help=False)
    recipes_opts.add_argument(
        "--recipes",
        default=None,
        help=f"YAML file with extra recipes (or set env {RECIPES_ENV})",
    )

    d = sub.add_parser("demo", parents=[builder_opts], help="Run the three client usage modes")
    d.set_defaults(func=demo_cmd)

    b = sub.add_parser("build", parents=[builder_opts, recipes_opts], help="Build one product and print it")
    b.add_argument("recipe", nargs="?", default=None, help=f"Recipe name (default: {FULL_FEATURED.name})")
    b.add_argument("--steps", default=None, help="Comma separated steps to run instead of a recipe, e.g. a,c")
    b.add_argument(
        "--template",
        default=DEFAULT_TEMPLATE,
        help="Jinja2 template for the output (default: %(default)r)",
    )
    b.set_defaults(func=build_cmd)

    r = sub.add_parser("recipes", parents=[recipes_opts], help="List available recipes")
    r.set_defaults(func=recipes_cmd)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except (CLIError, RecipeError, RenderError, UnknownBuilderError) as e:
        _LOG.error("%s", e)
        return USER_ERROR_EXIT_CODE


if __name__ == "__main__":
    raise SystemExit(main())
