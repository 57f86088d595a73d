"""View components usable as stack builder leaves."""

from typing import Any

from weave.layout import Alignment, Axis
from weave.views.builder import stack
from weave.views.models import ImageView, LabelView, StackView, View


class WrapperView:
    """Wraps an existing view handle as a component."""

    def __init__(self, view: View) -> None:
        self._view = view

    @property
    def view(self) -> View:
        return self._view


class Label:
    """A text label."""

    def __init__(self, text: str) -> None:
        self._label = LabelView(text)

    @property
    def view(self) -> LabelView:
        return self._label

    @property
    def text(self) -> str:
        return self._label.text


class Image:
    """An image, by asset name or by system symbol name."""

    def __init__(self, name: str | None = None, *, system_name: str | None = None) -> None:
        if (name is None) == (system_name is None):
            raise ValueError("Image needs exactly one of name or system_name")
        self._image = ImageView(name or system_name or "")
        self.is_system = system_name is not None

    @property
    def view(self) -> ImageView:
        return self._image


class _Stack:
    axis = Axis.HORIZONTAL

    def __init__(
        self,
        *statements: Any,
        alignment: Alignment | str = Alignment.CENTER,
        spacing: float = 0,
    ) -> None:
        self._stack = stack(*statements, axis=self.axis, alignment=alignment, spacing=spacing)

    @property
    def view(self) -> StackView:
        return self._stack


class HStack(_Stack):
    """Children laid out left to right.

    Example:
        row = HStack(Image(system_name="star"), Label("Favourites"), spacing=8)
    """

    axis = Axis.HORIZONTAL


class VStack(_Stack):
    """Children laid out top to bottom."""

    axis = Axis.VERTICAL
