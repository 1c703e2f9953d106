"""Slicing along one axis.

- positional: Range, SteppedRange, FullRange and the PositionalSlice variant
- labels: LabelRange, LabelSteppedRange, the LabelSlice variant and make_range
"""

from axisframe.slicing.positional import (
    FullRange,
    PositionalSlice,
    Range,
    SteppedRange,
)
from axisframe.slicing.labels import (
    LabelRange,
    LabelSlice,
    LabelSteppedRange,
    make_range,
)

__all__ = [
    "Range",
    "SteppedRange",
    "FullRange",
    "PositionalSlice",
    "LabelRange",
    "LabelSteppedRange",
    "LabelSlice",
    "make_range",
]
