"""
renderer.py

Responsibility: turn products into text with Jinja2.

Templates see:
- `parts`: the product's labels, in order
- `description`: `Product.describe()`
- `listing`: `Product.list_parts()`
plus any extra context passed by the caller. Undefined names are errors.

This module does not know about builders, directors or CLI parsing.
"""

from __future__ import annotations

from typing import Any, Iterable

from jinja2 import Environment, StrictUndefined

from creational_builder.product import Product


class RenderError(RuntimeError):
    pass


DEFAULT_TEMPLATE = "{{ description }}"

REPORT_TEMPLATE = """\
{% for title, product in results -%}
{{ title }}:
{{ product.list_parts() }}

{% endfor -%}
"""

_env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


def _render(source: str, context: dict[str, Any]) -> str:
    try:
        return _env.from_string(source).render(**context)
    except Exception as e:  # noqa: BLE001 - surface as RenderError
        raise RenderError(f"Failed rendering template: {e}") from e


def render_product(product: Product, template: str = DEFAULT_TEMPLATE, **context: Any) -> str:
    return _render(
        template,
        {
            **context,
            "parts": list(product.parts),
            "description": product.describe(),
            "listing": product.list_parts(),
        },
    )


def render_report(results: Iterable[tuple[str, Product]]) -> str:
    """
    Render the client demo: a titled listing per product, blank line after each.
    """
    return _render(REPORT_TEMPLATE, {"results": list(results)})
