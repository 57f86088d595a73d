"""Marker leaves for text builders."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Space:
    """A single space."""

    def __str__(self) -> str:
        return " "


@dataclass(frozen=True)
class LineBreak:
    """A newline."""

    def __str__(self) -> str:
        return "\n"
