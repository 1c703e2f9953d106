"""Label-space slice builders.

A label slice is a slice request written with axis labels instead of
positions. It holds labels only and is resolved into a PositionalSlice
once an axis is available. Both boundary labels are inclusive: the upper
bound becomes an exclusive positional end by adding 1 to the resolved
position of the last label.

Resolution performs no existence check of its own; a boundary label
missing from the axis raises LabelNotFoundError from the axis lookup.
"""

from dataclasses import dataclass
from typing import Any, Hashable, Union

from axisframe.contracts import assert_positive_step
from axisframe.slicing.positional import PositionalSlice, Range, SteppedRange

__all__ = ["LabelRange", "LabelSteppedRange", "LabelSlice", "make_range"]


@dataclass(frozen=True)
class LabelRange:
    """Inclusive label range [first, last]."""

    first: Hashable
    last: Hashable

    def resolve(self, axis: Any) -> Range:
        """Resolve against `axis` into Range(p_first, p_last + 1 - p_first)."""
        return Range.from_bounds(axis[self.first], axis[self.last] + 1)


@dataclass(frozen=True)
class LabelSteppedRange:
    """Inclusive label range [first, last] taking every `step`-th position."""

    first: Hashable
    last: Hashable
    step: int

    def __post_init__(self):
        assert_positive_step(self.step)

    def resolve(self, axis: Any) -> SteppedRange:
        """Resolve against `axis` into a SteppedRange.

        The number of terms is ceil((p_last + 1 - p_first) / step).
        """
        return SteppedRange.from_bounds(axis[self.first], axis[self.last] + 1, self.step)


_LABEL_SHAPES = (LabelRange, LabelSteppedRange)


class LabelSlice:
    """Closed variant over LabelRange and LabelSteppedRange."""

    __slots__ = ("_shape",)

    def __init__(self, shape: Union[LabelRange, LabelSteppedRange]):
        if isinstance(shape, LabelSlice):
            shape = shape.shape
        if not isinstance(shape, _LABEL_SHAPES):
            raise TypeError(
                f"LabelSlice expects LabelRange or LabelSteppedRange, got {type(shape).__name__}"
            )
        self._shape = shape

    @property
    def shape(self) -> Union[LabelRange, LabelSteppedRange]:
        return self._shape

    def resolve(self, axis: Any) -> PositionalSlice:
        """Resolve the boundary labels through `axis` into a PositionalSlice."""
        return PositionalSlice(self._shape.resolve(axis))

    def __eq__(self, other) -> bool:
        if isinstance(other, LabelSlice):
            return self._shape == other._shape
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._shape)

    def __repr__(self) -> str:
        return f"LabelSlice({self._shape!r})"


def make_range(first: Hashable, last: Hashable, step: int = None) -> LabelSlice:
    """Build a label slice from inclusive boundary labels.

    No axis is consulted until the returned slice is resolved.

    Parameters
    ----------
    first, last : hashable
        Inclusive boundary labels.

    step : int, optional
        Take every `step`-th position. Without it the range is contiguous.

    Returns
    -------
    LabelSlice

    Examples
    --------
    >>> axis = Axis(["x", "y", "z", "w"])
    >>> make_range("y", "w").resolve(axis)
    PositionalSlice(Range(start=1, length=3))
    >>> make_range("x", "w", 2).resolve(axis)
    PositionalSlice(SteppedRange(start=0, step=2, length=2))
    """
    if step is None:
        return LabelSlice(LabelRange(first, last))
    return LabelSlice(LabelSteppedRange(first, last, step))
