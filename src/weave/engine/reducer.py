"""Statement reducer - fold a statement tree through a result builder.

Maps each node kind to the combinator the host language would call:

    leaf        -> build_expression
    Block/list  -> build_block over the reduced children
    Either      -> build_either_first / build_either_second of the taken branch
    When, Maybe -> build_optional
    ForEach     -> build_array, one reduced body per item
    Partial     -> the nested component, unchanged
"""

import logging
from collections.abc import Iterable
from types import GeneratorType
from typing import Any, Generic, TypeVar

from weave.engine.builder import ResultBuilder
from weave.engine.nodes import Block, Either, ForEach, Maybe, Partial, When, evaluate_body
from weave.exceptions import IncompatibleComponentError

logger = logging.getLogger(__name__)

C = TypeVar("C")


def is_sequence(statement: Any) -> bool:
    """Whether a statement is a plain sequence of statements."""
    return isinstance(statement, (list, tuple, GeneratorType))


class StatementReducer(Generic[C]):
    """Reduces statements to a single component.

    The reducer holds no state between calls; the same instance can
    reduce any number of statement trees.

    Usage:
        reducer = StatementReducer(TextBuilder())
        component = reducer.reduce_all(["hello", Space(), 42])
    """

    def __init__(self, builder: ResultBuilder[Any, C, Any]) -> None:
        self.builder = builder

    def reduce_all(self, statements: Iterable[Any]) -> C:
        """Reduce a sequence of statements as one block."""
        return self.builder.build_block(*(self.reduce(s) for s in statements))

    def reduce(self, statement: Any) -> C:
        """Reduce one statement to a component."""
        if isinstance(statement, Partial):
            return self._splice(statement)

        if isinstance(statement, Block):
            return self.reduce_all(statement.statements)

        if is_sequence(statement):
            return self.reduce_all(statement)

        if isinstance(statement, Either):
            return self._reduce_either(statement)

        if isinstance(statement, When):
            if not statement.condition:
                return self.builder.build_optional(None)
            return self.builder.build_optional(self.reduce(evaluate_body(statement.body)))

        if isinstance(statement, Maybe):
            if statement.value is None:
                return self.builder.build_optional(None)
            body = evaluate_body(statement.then, statement.value)
            return self.builder.build_optional(self.reduce(body))

        if isinstance(statement, ForEach):
            return self._reduce_loop(statement)

        return self.builder.build_expression(statement)

    def _reduce_either(self, statement: Either) -> C:
        component = self.reduce(statement.taken())
        if statement.condition:
            return self.builder.build_either_first(component)
        return self.builder.build_either_second(component)

    def _reduce_loop(self, statement: ForEach) -> C:
        components = [self.reduce(evaluate_body(statement.body, item)) for item in statement.items]
        logger.debug("%s: loop produced %d iterations", self.builder.name, len(components))
        return self.builder.build_array(components)

    def _splice(self, partial: Partial[Any]) -> C:
        if not isinstance(partial.builder, type(self.builder)):
            raise IncompatibleComponentError(self.builder.name, partial.builder.name)
        component: C = partial.component
        return component
