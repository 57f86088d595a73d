"""In-memory view handles produced and consumed by stack builders.

These are opaque handles as far as the builder is concerned: it only
reads and reorders them. Rendering them into a real widget toolkit is
the job of whoever consumes the finished StackView.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from weave.layout import Alignment, Axis, Distribution


@runtime_checkable
class ViewComponent(Protocol):
    """Anything exposing a displayable view handle."""

    @property
    def view(self) -> View:
        """The handle placed into the stack."""
        ...


class View:
    """A plain view handle.

    A view is its own component, so finished stacks can be nested
    directly as leaves of a parent stack.
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name or type(self).__name__

    @property
    def view(self) -> View:
        return self

    def describe(self) -> str:
        """One-line description for tree displays."""
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()}>"


class LabelView(View):
    """A view displaying a line of text."""

    def __init__(self, text: str) -> None:
        super().__init__("Label")
        self.text = text

    def describe(self) -> str:
        return f"Label {self.text!r}"


class ImageView(View):
    """A view displaying a named image or system symbol."""

    def __init__(self, image_name: str) -> None:
        super().__init__("Image")
        self.image_name = image_name

    def describe(self) -> str:
        return f"Image {self.image_name}"


class StackView(View):
    """A container laying out its arranged subviews along one axis."""

    def __init__(self, arranged_subviews: Iterable[View] = ()) -> None:
        super().__init__("Stack")
        self.arranged_subviews: list[View] = list(arranged_subviews)
        self.axis = Axis.HORIZONTAL
        self.alignment = Alignment.FILL
        self.distribution = Distribution.FILL
        self.spacing: float = 0
        self.translates_autoresizing_mask = True

    def describe(self) -> str:
        return (
            f"{self.axis.value.capitalize()} stack "
            f"(alignment={self.alignment.value}, spacing={self.spacing:g}, "
            f"distribution={self.distribution.value})"
        )
