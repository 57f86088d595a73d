"""View-tree instantiation of the builder engine."""

from weave.views.builder import StackViewBuilder, stack, stack_builder
from weave.views.components import HStack, Image, Label, VStack, WrapperView
from weave.views.models import ImageView, LabelView, StackView, View, ViewComponent

__all__ = [
    # Builder
    "StackViewBuilder",
    "stack",
    "stack_builder",
    # Components
    "Label",
    "Image",
    "WrapperView",
    "HStack",
    "VStack",
    # Views
    "View",
    "ViewComponent",
    "LabelView",
    "ImageView",
    "StackView",
]
