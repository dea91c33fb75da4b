"""
builders.py

Responsibility: the Builder interface and its concrete variants.

Every concrete builder owns exactly one Product at a time. Reading the
`product` property hands that Product to the caller and resets the builder,
so steps called afterwards start a new Product instead of mutating the one
already handed out. Use `peek()` to inspect the product in progress.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from creational_builder.log_helper import get_logger
from creational_builder.product import Product

_LOG = get_logger(__name__)


class UnknownBuilderError(ValueError):
    pass


class Builder(ABC):
    """Step operations for constructing a Product, plus its retrieval."""

    @abstractmethod
    def reset(self) -> None:
        ...

    @abstractmethod
    def produce_part_a(self) -> None:
        ...

    @abstractmethod
    def produce_part_b(self) -> None:
        ...

    @abstractmethod
    def produce_part_c(self) -> None:
        ...

    @property
    @abstractmethod
    def product(self) -> Product:
        ...


class AbstractBuilder(Builder):
    """
    Product ownership shared by the concrete builders. A variant only
    supplies the label each step appends.
    """

    label_a: str
    label_b: str
    label_c: str

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._product = Product()

    def produce_part_a(self) -> None:
        self._append(self.label_a)

    def produce_part_b(self) -> None:
        self._append(self.label_b)

    def produce_part_c(self) -> None:
        self._append(self.label_c)

    def peek(self) -> Product:
        return self._product

    @property
    def product(self) -> Product:
        """
        Return the product built so far and start a fresh one.
        :returns: Product
        """
        product = self._product
        self.reset()
        _LOG.debug("Retrieved product with %d part(s)", len(product))
        return product

    def _append(self, label: str) -> None:
        _LOG.debug("%s: adding %s", type(self).__name__, label)
        self._product.add_part(label)


class ConcreteBuilder1(AbstractBuilder):
    label_a = "PartA1"
    label_b = "PartB1"
    label_c = "PartC1"


class ConcreteBuilder2(AbstractBuilder):
    """
    A second variant built from the same steps. Its labels differ from
    ConcreteBuilder1's; only the step signatures are shared.
    """

    label_a = "PartA2"
    label_b = "PartB2"
    label_c = "PartC2"


BUILDERS: dict[str, type[Builder]] = {
    "1": ConcreteBuilder1,
    "2": ConcreteBuilder2,
}


def create_builder(name: str = "1") -> Builder:
    """
    Instantiate a registered builder variant by name.
    """
    try:
        builder_cls = BUILDERS[name]
    except KeyError:
        known = ", ".join(sorted(BUILDERS))
        raise UnknownBuilderError(f"Unknown builder variant: {name!r} (known: {known})") from None
    return builder_cls()
