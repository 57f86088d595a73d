"""Weave exception hierarchy.

The builder combinators themselves never fail on accepted input. Errors
only surface at the edges:
- a leaf the chosen builder cannot describe (ExpressionError)
- invalid configuration or finalize options (ConfigurationError)

Usage:
    from weave.exceptions import ExpressionError, WeaveError

    try:
        greeting()
    except ExpressionError as e:
        print(f"{e.builder} cannot build {e.expression!r}")
    except WeaveError as e:
        print(f"Weave error: {e}")
"""

from typing import Any


class WeaveError(Exception):
    """Base exception for all Weave errors.

    All Weave-specific exceptions inherit from this class, allowing
    callers to catch all Weave errors with a single except clause.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# Configuration Errors


class ConfigurationError(WeaveError):
    """Error in Weave configuration.

    Raised when config.yaml is invalid, or when finalize options
    (axis, alignment, spacing, distribution) fail validation.
    """

    pass


# Builder Errors


class BuilderError(WeaveError):
    """Base class for builder-related errors."""

    pass


class ExpressionError(BuilderError):
    """Leaf expression rejected by a builder.

    Raised when a statement does not satisfy the capability the builder
    requires of its leaves (e.g. None for text, a plain string for views).
    """

    def __init__(self, expression: Any, builder: str) -> None:
        self.expression = expression
        self.builder = builder
        super().__init__(
            f"{builder} cannot build a leaf from {type(expression).__name__}: {expression!r}"
        )


class IncompatibleComponentError(BuilderError):
    """Nested component produced by a different builder.

    Raised when a partial result from one builder is spliced into
    another builder whose components have a different shape.
    """

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Cannot splice a {actual} component into a {expected} block")
