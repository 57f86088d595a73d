"""Result builder base class.

A result builder reduces a sequence of statements into one intermediate
component and then finalizes it. Every instantiation shares the same six
combinators:

- build_block: concatenate the components of sequential statements
- build_expression: turn a single leaf into a component
- build_optional: an if without else, or a binding that may be absent
- build_either_first / build_either_second: the two arms of an if/else
- build_array: one component per loop iteration, concatenated in order

plus build_final_result, which runs once on the outermost component.
Subclasses only describe their component shape (empty, join) and their
leaves (accepts, normalize, finalize).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, ClassVar, Generic, TypeVar

from weave.exceptions import ExpressionError

logger = logging.getLogger(__name__)

E = TypeVar("E")
C = TypeVar("C")
R = TypeVar("R")


class ResultBuilder(ABC, Generic[E, C, R]):
    """Combinator set shared by every builder.

    Type parameters:
        E: leaf expression type accepted by build_expression
        C: intermediate component type
        R: final result type produced by build_final_result

    Components are treated as values: every combinator returns a new
    component and never mutates its inputs.
    """

    name: ClassVar[str] = "ResultBuilder"

    # Instantiation hooks

    @abstractmethod
    def empty(self) -> C:
        """Component contributed by nothing (empty block, absent optional)."""

    @abstractmethod
    def join(self, components: Iterable[C]) -> C:
        """Concatenate components in the given order."""

    @abstractmethod
    def accepts(self, expression: Any) -> bool:
        """Whether the value can be used as a leaf by this builder."""

    @abstractmethod
    def normalize(self, expression: E) -> C:
        """Component holding exactly one accepted leaf."""

    @abstractmethod
    def finalize(self, component: C, **options: Any) -> R:
        """Turn the outermost component into the final result."""

    # Combinators

    def build_block(self, *components: C) -> C:
        """Concatenate the components of sequential statements."""
        return self.join(components)

    def build_expression(self, expression: E) -> C:
        """Normalize a single leaf.

        Raises:
            ExpressionError: If the leaf does not satisfy this builder's capability
        """
        if not self.accepts(expression):
            raise ExpressionError(expression, self.name)
        return self.normalize(expression)

    def build_optional(self, component: C | None) -> C:
        """Pass a present component through; absent contributes nothing."""
        if component is None:
            return self.empty()
        return component

    def build_either_first(self, component: C) -> C:
        return component

    def build_either_second(self, component: C) -> C:
        return component

    def build_array(self, components: Iterable[C]) -> C:
        """Concatenate per-iteration components in iteration order."""
        return self.join(list(components))

    def build_final_result(self, component: C, **options: Any) -> R:
        """Finalize the outermost component."""
        logger.debug("%s: finalizing component with options %s", self.name, options)
        return self.finalize(component, **options)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
