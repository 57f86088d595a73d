"""Demo scenes built with the text and stack builders.

Used by the CLI and handy as worked examples of the DSL.
"""

from typing import Any

from rich.text import Text

from weave.config import StackConfig, TextConfig
from weave.engine import compose, either, for_each, maybe
from weave.text import LineBreak, Space, TextBuilder, text_builder
from weave.views import HStack, Image, Label, StackView, StackViewBuilder

SYMBOLS = [
    "thermometer.snowflake",
    "gift.circle.fill",
    "star.circle.fill",
    "message.circle.fill",
    "folder.circle.fill",
    "link.circle.fill",
]


@text_builder
def greeting(is_even: bool, value: int | None, numbers: list[int]) -> Any:
    """Greeting mixing literals, a branch, an optional and a loop."""
    yield "hello"
    yield Space()
    yield 42
    yield LineBreak()
    yield "I am a String"
    yield LineBreak()
    yield either(is_even, "the date is even:", "the date is odd:")
    yield Space()
    yield is_even
    yield LineBreak()
    yield maybe(value, "C has a value")
    yield LineBreak()
    yield for_each(numbers, lambda item: [item, Space()])


def symbol_row(symbol: str) -> HStack:
    return HStack(Image(system_name=symbol), Label(symbol), spacing=8)


def symbol_list(
    heading: str, symbols: list[str], config: StackConfig | None = None, **layout: Any
) -> StackView:
    """Heading label followed by one row per symbol.

    Layout options (axis, alignment, spacing, distribution) default to
    config, or to the process-wide stack settings when config is None.
    """
    return compose(
        StackViewBuilder(config), Label(heading), for_each(symbols, symbol_row), **layout
    )


def render_greeting(
    is_even: bool, value: int | None, count: int, config: TextConfig | None = None
) -> Text:
    build_greeting = greeting if config is None else greeting.using(TextBuilder(config))
    return build_greeting(is_even, value, list(range(1, count + 1)))
