"""Stack view builder: view components arranged into a StackView.

Components are tuples of view handles. Finalizing creates a StackView
whose arranged subviews are exactly those handles, then applies the
layout options (axis, alignment, spacing, distribution) resolved
against the configured defaults.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from weave.config import StackConfig, get_config, resolve_stack_config
from weave.engine import BuiltFunction, ResultBuilder, build, compose
from weave.layout import Alignment, Axis, Distribution
from weave.views.models import StackView, View, ViewComponent

logger = logging.getLogger(__name__)


class StackViewBuilder(ResultBuilder[ViewComponent, tuple[View, ...], StackView]):
    """Builds a StackView from anything exposing a view handle."""

    name = "StackViewBuilder"

    def __init__(self, config: StackConfig | None = None) -> None:
        self._config = config

    @property
    def config(self) -> StackConfig:
        if self._config is not None:
            return self._config
        return get_config().stack

    def empty(self) -> tuple[View, ...]:
        return ()

    def join(self, components: Iterable[tuple[View, ...]]) -> tuple[View, ...]:
        return tuple(view for component in components for view in component)

    def accepts(self, expression: Any) -> bool:
        return isinstance(expression, ViewComponent) and isinstance(expression.view, View)

    def normalize(self, expression: ViewComponent) -> tuple[View, ...]:
        return (expression.view,)

    def finalize(self, component: tuple[View, ...], **options: Any) -> StackView:
        layout = resolve_stack_config(self.config, **options)
        stack = StackView(arranged_subviews=component)
        stack.translates_autoresizing_mask = False
        stack.axis = layout.axis
        stack.alignment = layout.alignment
        stack.spacing = layout.spacing
        stack.distribution = layout.distribution
        logger.debug(
            "StackViewBuilder: %s stack with %d arranged subviews",
            layout.axis.value,
            len(component),
        )
        return stack


def stack(
    *statements: Any,
    axis: Axis | str | None = None,
    alignment: Alignment | str | None = None,
    spacing: float | None = None,
    distribution: Distribution | str | None = None,
) -> StackView:
    """Build a StackView directly from statements.

    Options left as None fall back to the configured stack defaults.

    Raises:
        ConfigurationError: If an option is invalid (e.g. negative spacing)

    Example:
        view = stack(Label("Title"), Image(system_name="star"), axis="vertical")
    """
    return compose(
        StackViewBuilder(),
        *statements,
        axis=axis,
        alignment=alignment,
        spacing=spacing,
        distribution=distribution,
    )


def stack_builder(**options: Any) -> Callable[[Callable[..., Any]], BuiltFunction[StackView]]:
    """Decorator shorthand for @build(StackViewBuilder(), **options)."""
    return build(StackViewBuilder(), **options)
