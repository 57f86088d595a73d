"""Weave - declarative composition builders.

Describe a tree of text or view fragments with ordinary control flow and
have it reduced into a single result.
"""

from weave.exceptions import (
    BuilderError,
    ConfigurationError,
    ExpressionError,
    IncompatibleComponentError,
    WeaveError,
)

__version__ = "0.1.0"

__all__ = [
    # Base exception
    "WeaveError",
    # Configuration
    "ConfigurationError",
    # Builder
    "BuilderError",
    "ExpressionError",
    "IncompatibleComponentError",
]
