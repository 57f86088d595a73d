"""Builder DSL for caller code.

Statements can be written two ways, and both may be mixed:

1. Native control flow inside a generator function; every yielded value
   is a statement:

    @build(TextBuilder())
    def greeting(name, excited):
        yield "hello"
        yield Space()
        yield name
        if excited:
            yield "!"

2. Explicit statement nodes, useful inside expressions and lambdas:

    @build(TextBuilder())
    def listing(items):
        return [
            "items:",
            for_each(items, lambda item: [Space(), item]),
            when(not items, " none"),
        ]

Calling the decorated function runs the builder and finalizes the result.
Calling .component() instead returns an unfinalized Partial that another
builder of the same kind splices into its own block.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from weave.engine.builder import ResultBuilder
from weave.engine.nodes import Block, Either, ForEach, Maybe, Partial, When
from weave.engine.reducer import StatementReducer, is_sequence

R = TypeVar("R")


def block(*statements: Any) -> Block:
    """Group statements into a nested block."""
    return Block(statements)


def either(condition: Any, first: Any, second: Any) -> Either:
    """if/else: only the taken branch is evaluated.

    A callable branch is called with no arguments and its result used as
    the branch's statements. To use a callable value (a built function,
    a class) as a leaf, wrap it: either(ok, lambda: leaf, "fallback").
    """
    return Either(bool(condition), first, second)


def when(condition: Any, body: Any) -> When:
    """if without else.

    As with either, a callable body is called; wrap callable leaves
    in a lambda.
    """
    return When(bool(condition), body)


def maybe(value: Any, then: Any) -> Maybe:
    """Optional binding: then(value) unless value is None."""
    return Maybe(value, then)


def for_each(items: Iterable[Any], body: Callable[[Any], Any] | Any) -> ForEach:
    """Loop: body(item) for each item, concatenated in order."""
    return ForEach(items, body)


def _as_statements(result: Any) -> Iterable[Any]:
    if result is None:
        return ()
    if isinstance(result, Block):
        return result.statements
    if is_sequence(result):
        return result
    return (result,)


def compose(builder: ResultBuilder[Any, Any, R], *statements: Any, **options: Any) -> R:
    """Reduce statements with a builder and finalize the result.

    Example:
        text = compose(TextBuilder(), "hello", Space(), 42)
    """
    component = StatementReducer(builder).reduce_all(statements)
    return builder.build_final_result(component, **options)


class BuiltFunction(Generic[R]):
    """A function whose returned or yielded statements are built into R."""

    def __init__(
        self,
        func: Callable[..., Any],
        builder: ResultBuilder[Any, Any, R],
        options: dict[str, Any],
    ) -> None:
        functools.update_wrapper(self, func)
        self._func = func
        self.builder = builder
        self.options = options

    def component(self, *args: Any, **kwargs: Any) -> Partial[Any]:
        """Build without finalizing, for use inside a parent builder."""
        statements = _as_statements(self._func(*args, **kwargs))
        component = StatementReducer(self.builder).reduce_all(statements)
        return Partial(component, self.builder)

    def using(self, builder: ResultBuilder[Any, Any, R]) -> BuiltFunction[R]:
        """Same statements and finalize options, built with another builder.

        Example:
            greeting.using(TextBuilder(TextConfig(true_literal="yes")))
        """
        return BuiltFunction(self._func, builder, self.options)

    def __call__(self, *args: Any, **kwargs: Any) -> R:
        partial = self.component(*args, **kwargs)
        return self.builder.build_final_result(partial.component, **self.options)

    def __repr__(self) -> str:
        return f"<built function {self.__name__} with {self.builder!r}>"


def build(
    builder: ResultBuilder[Any, Any, R] | type[ResultBuilder[Any, Any, R]],
    **options: Any,
) -> Callable[[Callable[..., Any]], BuiltFunction[R]]:
    """Decorator turning a statement function into a builder function.

    Args:
        builder: Builder instance, or a builder class to instantiate
        **options: Finalize options (e.g. axis, spacing for stacks)
    """
    instance = builder() if isinstance(builder, type) else builder

    def decorator(func: Callable[..., Any]) -> BuiltFunction[R]:
        return BuiltFunction(func, instance, options)

    return decorator
