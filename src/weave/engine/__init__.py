"""Builder engine: combinators, statement nodes, reducer and DSL."""

from weave.engine.builder import ResultBuilder
from weave.engine.dsl import (
    BuiltFunction,
    block,
    build,
    compose,
    either,
    for_each,
    maybe,
    when,
)
from weave.engine.nodes import Block, Either, ForEach, Maybe, Partial, When
from weave.engine.reducer import StatementReducer

__all__ = [
    # Builder
    "ResultBuilder",
    "StatementReducer",
    # Nodes
    "Block",
    "Either",
    "When",
    "Maybe",
    "ForEach",
    "Partial",
    # DSL
    "BuiltFunction",
    "build",
    "compose",
    "block",
    "either",
    "when",
    "maybe",
    "for_each",
]
