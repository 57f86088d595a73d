"""Tests for the stack view builder and view components."""

import pytest

from weave.config import StackConfig, WeaveConfig, get_config, set_config
from weave.demos import SYMBOLS, symbol_list
from weave.engine import build, either, for_each, maybe
from weave.exceptions import ConfigurationError, ExpressionError
from weave.layout import Alignment, Axis, Distribution
from weave.views import (
    HStack,
    Image,
    ImageView,
    Label,
    LabelView,
    StackView,
    StackViewBuilder,
    View,
    VStack,
    WrapperView,
    stack,
    stack_builder,
)


class TestStackFinalize:
    """Tests for finalizing a stack."""

    def test_children_match_component(self, labels: list[Label]) -> None:
        result = stack(*labels)
        assert result.arranged_subviews == [label.view for label in labels]

    def test_zero_leaf_finalize(self) -> None:
        result = stack()
        assert isinstance(result, StackView)
        assert result.arranged_subviews == []

    def test_defaults_from_config(self) -> None:
        result = stack()
        assert result.axis == Axis.HORIZONTAL
        assert result.alignment == Alignment.CENTER
        assert result.spacing == 0
        assert result.distribution == Distribution.EQUAL_SPACING
        assert result.translates_autoresizing_mask is False

    def test_options_override_config(self) -> None:
        set_config(WeaveConfig(stack=StackConfig(spacing=4, alignment=Alignment.TRAILING)))
        result = stack(axis="vertical", spacing=10)
        assert result.axis == Axis.VERTICAL
        assert result.spacing == 10
        assert result.alignment == Alignment.TRAILING

    def test_builder_with_explicit_config(self, labels: list[Label]) -> None:
        builder = StackViewBuilder(StackConfig(axis=Axis.VERTICAL))
        result = builder.build_final_result(builder.build_expression(labels[0]))
        assert result.axis == Axis.VERTICAL

    def test_negative_spacing_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="spacing"):
            stack(spacing=-1)

    def test_unknown_axis_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            stack(axis="diagonal")

    def test_unknown_option_rejected(self) -> None:
        @stack_builder(padding=4)
        def padded():
            return []

        with pytest.raises(ConfigurationError, match="padding"):
            padded()

    def test_rejects_non_view_leaf(self) -> None:
        with pytest.raises(ExpressionError):
            stack(Label("ok"), "not a view")

    def test_component_is_not_aliased(self, labels: list[Label]) -> None:
        first = stack(*labels)
        second = stack(*labels)
        first.arranged_subviews.pop()
        assert len(second.arranged_subviews) == 3


class TestStackControlFlow:
    """Tests for conditionals and loops producing views."""

    @pytest.mark.parametrize("condition, expected", [(True, "A"), (False, "B")])
    def test_branch_exclusivity(self, labels: list[Label], condition: bool, expected: str) -> None:
        a, b, _ = labels
        result = stack(either(condition, a, b))
        assert [view.text for view in result.arranged_subviews] == [expected]

    def test_loop_and_optional(self) -> None:
        result = stack(
            for_each(["x", "y"], Label),
            maybe(None, Label),
            maybe("z", Label),
        )
        assert [view.text for view in result.arranged_subviews] == ["x", "y", "z"]

    def test_nested_builder_composition(self, labels: list[Label]) -> None:
        a, b, c = labels

        @build(StackViewBuilder())
        def pair():
            return [b, c]

        @build(StackViewBuilder())
        def nested():
            return [a, pair.component()]

        assert nested().arranged_subviews == stack(a, b, c).arranged_subviews

    def test_stack_builder_decorator(self, labels: list[Label]) -> None:
        @stack_builder(axis=Axis.VERTICAL, spacing=2)
        def column():
            yield from labels

        result = column()
        assert result.axis == Axis.VERTICAL
        assert result.spacing == 2
        assert len(result.arranged_subviews) == 3


class TestViewComponents:
    """Tests for leaf view components."""

    def test_label(self) -> None:
        label = Label("hello")
        assert isinstance(label.view, LabelView)
        assert label.text == "hello"

    def test_image_names(self) -> None:
        assert Image(system_name="star").view.image_name == "star"
        assert Image(system_name="star").is_system is True
        assert Image("photo").is_system is False
        assert isinstance(Image("photo").view, ImageView)

    def test_image_requires_exactly_one_name(self) -> None:
        with pytest.raises(ValueError, match="exactly one"):
            Image()
        with pytest.raises(ValueError, match="exactly one"):
            Image("a", system_name="b")

    def test_wrapper_view(self) -> None:
        handle = View("custom")
        assert stack(WrapperView(handle)).arranged_subviews == [handle]

    def test_finished_stack_is_a_leaf(self, labels: list[Label]) -> None:
        inner = stack(*labels)
        outer = stack(inner, Label("after"))
        assert outer.arranged_subviews[0] is inner

    def test_hstack_and_vstack(self) -> None:
        row = HStack(Label("a"), Label("b"), spacing=8)
        column = VStack(row, alignment="leading")
        assert row.view.axis == Axis.HORIZONTAL
        assert row.view.spacing == 8
        assert column.view.axis == Axis.VERTICAL
        assert column.view.alignment == Alignment.LEADING
        assert column.view.arranged_subviews == [row.view]


class TestSymbolListDemo:
    """Tests for the symbol list scene."""

    def test_structure(self) -> None:
        view = symbol_list("Heading", SYMBOLS[:2], axis="vertical", spacing=10)
        heading, *rows = view.arranged_subviews
        assert heading.text == "Heading"
        assert len(rows) == 2
        image, label = rows[0].arranged_subviews
        assert image.image_name == SYMBOLS[0]
        assert label.text == SYMBOLS[0]

    def test_explicit_config_wins_over_default(self) -> None:
        set_config(WeaveConfig(stack=StackConfig(spacing=4)))
        view = symbol_list("Heading", SYMBOLS[:1], config=StackConfig(spacing=20))
        assert view.spacing == 20
        assert get_config().stack.spacing == 4
