"""Statement tree nodes.

Any value that is not one of these nodes (and not a list, tuple or
generator of statements) is a leaf and goes through build_expression.

Bodies of conditional and loop nodes are evaluated lazily: a callable
body is only called when its branch is taken (or once per item), so
statements of branches that are not visited are never built.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from weave.engine.builder import ResultBuilder

C = TypeVar("C")


def evaluate_body(body: Any, *args: Any) -> Any:
    """Resolve a body to statements, calling it if it is callable."""
    if callable(body):
        return body(*args)
    return body


@dataclass(frozen=True)
class Block:
    """Statements evaluated in sequence."""

    statements: tuple[Any, ...]


@dataclass(frozen=True)
class Either:
    """An if/else: exactly one of first or second is visited."""

    condition: bool
    first: Any
    second: Any

    def taken(self) -> Any:
        """Statements of the branch selected by the condition."""
        if self.condition:
            return evaluate_body(self.first)
        return evaluate_body(self.second)


@dataclass(frozen=True)
class When:
    """An if without else."""

    condition: bool
    body: Any


@dataclass(frozen=True)
class Maybe:
    """An optional binding: body receives the value unless it is None."""

    value: Any
    then: Any


@dataclass(frozen=True)
class ForEach:
    """A loop: body is evaluated once per item, in iteration order."""

    items: Iterable[Any]
    body: Callable[[Any], Any] | Any


@dataclass(frozen=True)
class Partial(Generic[C]):
    """Component built by a nested builder call, not yet finalized."""

    component: C
    builder: ResultBuilder[Any, C, Any]
