"""Text instantiation of the builder engine."""

from weave.text.builder import TextBuilder, attributed_string, text_builder
from weave.text.leaves import LineBreak, Space

__all__ = [
    "TextBuilder",
    "attributed_string",
    "text_builder",
    "Space",
    "LineBreak",
]
