"""Layout options understood by the stack finalize step."""

from enum import Enum


class Axis(str, Enum):
    """Direction in which a stack arranges its children."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Alignment(str, Enum):
    """Cross-axis alignment of a stack's children."""

    FILL = "fill"
    LEADING = "leading"
    TOP = "top"
    FIRST_BASELINE = "first_baseline"
    CENTER = "center"
    TRAILING = "trailing"
    BOTTOM = "bottom"
    LAST_BASELINE = "last_baseline"


class Distribution(str, Enum):
    """Main-axis distribution of a stack's children."""

    FILL = "fill"
    FILL_EQUALLY = "fill_equally"
    FILL_PROPORTIONALLY = "fill_proportionally"
    EQUAL_SPACING = "equal_spacing"
    EQUAL_CENTERING = "equal_centering"
