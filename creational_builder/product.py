"""
product.py

Responsibility: the object under construction.

A Product is nothing more than an ordered log of part labels. It carries no
meaning of its own; builders decide which labels go in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

SEPARATOR = ", "
LISTING_PREFIX = "Product parts: "


@dataclass
class Product:
    parts: list[str] = field(default_factory=list)

    def add_part(self, label: str) -> None:
        self.parts.append(label)

    def describe(self) -> str:
        """
        Return all parts joined by `SEPARATOR`, in construction order.
        An empty product describes as an empty string.
        """
        return SEPARATOR.join(self.parts)

    def list_parts(self) -> str:
        return f"{LISTING_PREFIX}{self.describe()}"

    def __len__(self) -> int:
        return len(self.parts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.parts)
