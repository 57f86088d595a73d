"""Shared pytest fixtures for Weave tests."""

import pytest

from weave.config import set_config
from weave.engine import StatementReducer
from weave.text import TextBuilder
from weave.views import Label, StackViewBuilder


@pytest.fixture(autouse=True)
def reset_config():
    """Ensure every test starts from the default configuration."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def text_builder() -> TextBuilder:
    return TextBuilder()


@pytest.fixture
def stack_builder() -> StackViewBuilder:
    return StackViewBuilder()


@pytest.fixture
def text_reducer(text_builder: TextBuilder) -> StatementReducer[str]:
    return StatementReducer(text_builder)


@pytest.fixture
def labels() -> list[Label]:
    """Three distinct labels A, B and C."""
    return [Label("A"), Label("B"), Label("C")]
