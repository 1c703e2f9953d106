"""Positional slice descriptors.

A positional slice describes a subset of positions along one axis without
any knowledge of labels. Three shapes exist and the set is closed:

- Range(start, size): positions [start, start + size)
- SteppedRange(start, step, size): start, start + step, ... (size terms)
- FullRange(size): positions [0, size)

All three expose the same algebra:

- size(): number of selected positions
- contains(i): whether absolute position i is selected
- apply(i): absolute position of the i-th selected position
- step_size(i, n=1): absolute stride covering n selected positions from i
- revert(i): slice-relative index of absolute position i (inverse of apply)

PositionalSlice wraps exactly one shape and forwards every operation to it.
apply() and revert() are not bounds-checked; callers pass i < size() to
apply() and positions satisfying contains() to revert().
"""

from dataclasses import dataclass
from typing import Iterator, Union

from axisframe.contracts import assert_positive_step

__all__ = ["Range", "SteppedRange", "FullRange", "PositionalSlice", "SliceShape"]


@dataclass(frozen=True)
class Range:
    """Contiguous positions [start, start + size)."""

    start: int
    length: int

    @classmethod
    def from_bounds(cls, start: int, stop: int) -> "Range":
        """Build from a half-open [start, stop) request."""
        return cls(start, max(stop - start, 0))

    def size(self) -> int:
        return self.length

    def contains(self, i: int) -> bool:
        return self.start <= i < self.start + self.length

    def apply(self, i: int) -> int:
        return self.start + i

    def step_size(self, i: int, n: int = 1) -> int:
        return n

    def revert(self, i: int) -> int:
        return i - self.start

    def to_builtin(self) -> slice:
        return slice(self.start, self.start + self.length)


@dataclass(frozen=True)
class SteppedRange:
    """Positions start, start + step, ... for size terms."""

    start: int
    step: int
    length: int

    def __post_init__(self):
        assert_positive_step(self.step)

    @classmethod
    def from_bounds(cls, start: int, stop: int, step: int) -> "SteppedRange":
        """Build from a half-open [start, stop) request.

        The number of terms is ceil((stop - start) / step), computed in
        integer arithmetic.
        """
        assert_positive_step(step)
        span = max(stop - start, 0)
        return cls(start, step, -(-span // step))

    def size(self) -> int:
        return self.length

    def contains(self, i: int) -> bool:
        return (
            self.start <= i < self.start + self.length * self.step
            and (i - self.start) % self.step == 0
        )

    def apply(self, i: int) -> int:
        return self.start + i * self.step

    def step_size(self, i: int, n: int = 1) -> int:
        return self.step * n

    def revert(self, i: int) -> int:
        return (i - self.start) // self.step

    def to_builtin(self) -> slice:
        return slice(self.start, self.start + self.length * self.step, self.step)


@dataclass(frozen=True)
class FullRange:
    """Every position [0, size) of an axis."""

    length: int

    def size(self) -> int:
        return self.length

    def contains(self, i: int) -> bool:
        # Positions are non-negative; a negative value is never selected.
        return 0 <= i < self.length

    def apply(self, i: int) -> int:
        return i

    def step_size(self, i: int, n: int = 1) -> int:
        return n

    def revert(self, i: int) -> int:
        return i

    def to_builtin(self) -> slice:
        return slice(0, self.length)


SliceShape = Union[Range, SteppedRange, FullRange]
_SHAPES = (Range, SteppedRange, FullRange)


class PositionalSlice:
    """Closed variant over Range, SteppedRange and FullRange.

    Adds no behavior of its own: every operation is forwarded to the
    active shape.

    Examples
    --------
    >>> s = PositionalSlice(SteppedRange(0, 2, 3))
    >>> [s.apply(i) for i in range(s.size())]
    [0, 2, 4]
    >>> s.revert(4)
    2
    """

    __slots__ = ("_shape",)

    def __init__(self, shape: SliceShape):
        if isinstance(shape, PositionalSlice):
            shape = shape.shape
        if not isinstance(shape, _SHAPES):
            raise TypeError(
                f"PositionalSlice expects Range, SteppedRange or FullRange, got {type(shape).__name__}"
            )
        self._shape = shape

    @property
    def shape(self) -> SliceShape:
        """The wrapped slice shape."""
        return self._shape

    def size(self) -> int:
        return self._shape.size()

    def contains(self, i: int) -> bool:
        return self._shape.contains(i)

    def apply(self, i: int) -> int:
        return self._shape.apply(i)

    def step_size(self, i: int, n: int = 1) -> int:
        return self._shape.step_size(i, n)

    def revert(self, i: int) -> int:
        return self._shape.revert(i)

    def to_builtin(self) -> slice:
        """Equivalent Python slice, usable to take numpy views."""
        return self._shape.to_builtin()

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[int]:
        for i in range(self.size()):
            yield self.apply(i)

    def __eq__(self, other) -> bool:
        if isinstance(other, PositionalSlice):
            return self._shape == other._shape
        if isinstance(other, _SHAPES):
            return self._shape == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._shape)

    def __repr__(self) -> str:
        return f"PositionalSlice({self._shape!r})"
