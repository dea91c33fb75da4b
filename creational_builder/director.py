"""
director.py

Responsibility: run builder steps in a predefined order.

The Director holds a reference to a Builder and nothing else; all product
state lives in the builder. It is optional: clients can call builder steps
directly.
"""

from __future__ import annotations

from typing import Callable

from creational_builder.builders import Builder
from creational_builder.log_helper import get_logger
from creational_builder.recipes import FULL_FEATURED, MINIMUM, Recipe

_LOG = get_logger(__name__)


class DirectorError(RuntimeError):
    pass


class UnconfiguredBuilderError(DirectorError):
    def __init__(self) -> None:
        super().__init__("Director has no builder configured; call set_builder() first.")


class Director:
    def __init__(self, builder: Builder | None = None) -> None:
        self.builder = builder

    def set_builder(self, builder: Builder | None) -> None:
        self.builder = builder

    def build_minimum(self) -> None:
        self.build(MINIMUM)

    def build_full_featured(self) -> None:
        self.build(FULL_FEATURED)

    def build(self, recipe: Recipe) -> None:
        """
        Invoke the recipe's steps, in order, on the configured builder.

        Parts are appended to whatever the builder already holds.
        :raises: UnconfiguredBuilderError
        """
        builder = self._require_builder()
        _LOG.debug("Running recipe %r on %s", recipe.name, type(builder).__name__)
        for step in recipe.steps:
            self._step(builder, step)()

    def _require_builder(self) -> Builder:
        if self.builder is None:
            raise UnconfiguredBuilderError()
        return self.builder

    @staticmethod
    def _step(builder: Builder, step: str) -> Callable[[], None]:
        return getattr(builder, f"produce_part_{step}")
