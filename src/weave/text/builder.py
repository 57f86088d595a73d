"""Text builder: describable leaves concatenated into rich text.

Components are plain strings. The final result is a rich Text object
holding the concatenated string verbatim; styling is left to callers
(Text.stylize, Text.highlight_words, ...).
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from rich.text import Text

from weave.config import TextConfig, get_config
from weave.engine import BuiltFunction, ResultBuilder, build, compose

logger = logging.getLogger(__name__)


class TextBuilder(ResultBuilder[Any, str, Text]):
    """Builds rich Text from anything with a textual description.

    Booleans are described with the configured literals ("true"/"false"
    by default). None and classes are rejected: they are almost always
    a missing value or a forgotten call (Space instead of Space()).
    """

    name = "TextBuilder"

    def __init__(self, config: TextConfig | None = None) -> None:
        self._config = config

    @property
    def config(self) -> TextConfig:
        if self._config is not None:
            return self._config
        return get_config().text

    def empty(self) -> str:
        return ""

    def join(self, components: Iterable[str]) -> str:
        return "".join(components)

    def accepts(self, expression: Any) -> bool:
        return expression is not None and not isinstance(expression, type)

    def normalize(self, expression: Any) -> str:
        if isinstance(expression, bool):
            return self.config.true_literal if expression else self.config.false_literal
        if isinstance(expression, Text):
            return expression.plain
        return str(expression)

    def finalize(self, component: str, **options: Any) -> Text:
        logger.debug("TextBuilder: finalizing %d characters", len(component))
        return Text(component, **options)


def attributed_string(*statements: Any, **options: Any) -> Text:
    """Build rich Text directly from statements.

    Options are passed to the Text constructor (e.g. style="bold").

    Example:
        text = attributed_string("hello", Space(), 42, LineBreak())
    """
    return compose(TextBuilder(), *statements, **options)


def text_builder(func: Callable[..., Any]) -> BuiltFunction[Text]:
    """Decorator shorthand for @build(TextBuilder())."""
    return build(TextBuilder())(func)
