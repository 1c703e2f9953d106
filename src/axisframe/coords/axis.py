"""Axis: bidirectional label <-> position map along one dimension.

Axis is backed by a pandas.Index, which already provides hashed label
lookup for strings, integers and timestamps. AxisView restricts an axis
through a PositionalSlice without copying its labels.
"""

from typing import Hashable, Iterable, Iterator, List, Optional

import numpy as np
import pandas as pd
from pandas.errors import InvalidIndexError

from axisframe.contracts import LabelNotFoundError, assert_unique_labels, require
from axisframe.slicing.positional import FullRange, PositionalSlice

__all__ = ["Axis", "AxisView", "as_axis"]


class Axis:
    """Unique labels mapped to dense zero-based positions.

    Parameters
    ----------
    labels : iterable or pandas.Index
        Axis labels, in order. Must be unique.

    name : str, optional
        Dimension name, only used in error messages.

    Raises
    ------
    ContractViolation
        If labels contain duplicates.

    Examples
    --------
    >>> axis = Axis(["a", "c", "d"])
    >>> axis["c"]
    1
    >>> axis.size()
    3
    """

    def __init__(self, labels: Iterable[Hashable], name: Optional[str] = None):
        index = labels if isinstance(labels, pd.Index) else pd.Index(list(labels))
        assert_unique_labels(index, what=f"axis '{name}'" if name else "axis")
        self._index = index
        self.name = name

    @property
    def index(self) -> pd.Index:
        """Underlying pandas.Index."""
        return self._index

    @property
    def labels(self) -> List[Hashable]:
        return self._index.tolist()

    def size(self) -> int:
        return len(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __getitem__(self, label: Hashable) -> int:
        """Position of `label`; LabelNotFoundError if absent.

        Only exact matches count. Partial datetime strings (e.g. "2020-01"
        on a daily axis) make pandas return a slice or mask rather than a
        position; those are treated as absent, as are unhashable labels.
        """
        try:
            loc = self._index.get_loc(label)
        except (KeyError, TypeError, InvalidIndexError):
            raise LabelNotFoundError(label, self.name) from None
        if not isinstance(loc, (int, np.integer)):
            raise LabelNotFoundError(label, self.name)
        return int(loc)

    def get(self, label: Hashable) -> Optional[int]:
        """Position of `label`, or None if absent."""
        try:
            return self[label]
        except LabelNotFoundError:
            return None

    def label(self, position: int) -> Hashable:
        """Label stored at `position`."""
        return self._index[position]

    def __contains__(self, label: Hashable) -> bool:
        return self.get(label) is not None

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._index)

    def sub_axis(self, islice: PositionalSlice) -> "Axis":
        """New Axis holding the labels selected by `islice`, in slice order."""
        return Axis(self._index[islice.to_builtin()], name=self.name)

    def __eq__(self, other) -> bool:
        if not isinstance(other, (Axis, AxisView)):
            return NotImplemented
        return self.labels == other.labels

    def __hash__(self):
        return hash(tuple(self.labels))

    def __repr__(self) -> str:
        return f"Axis({self.labels!r})"


class AxisView:
    """Zero-copy view of an axis restricted to a positional slice.

    Lookups answer in the underlying axis' positions: `view[label]` is
    `axis[label]` when that position is selected by the slice, and raises
    LabelNotFoundError otherwise. `index_of()` gives the view-relative
    index instead.

    Parameters
    ----------
    axis : Axis
        Underlying axis.

    islice : PositionalSlice
        Positions of `axis` visible through the view.
    """

    def __init__(self, axis: Axis, islice: PositionalSlice = None):
        if islice is None:
            islice = PositionalSlice(FullRange(axis.size()))
        islice = PositionalSlice(islice)
        require(
            islice.size() == 0 or islice.apply(islice.size() - 1) < axis.size(),
            f"Axis view contract violated: slice {islice!r} exceeds axis of size {axis.size()}"
        )
        self._axis = axis
        self._slice = islice
        self.name = axis.name

    @property
    def axis(self) -> Axis:
        return self._axis

    @property
    def islice(self) -> PositionalSlice:
        return self._slice

    @property
    def labels(self) -> List[Hashable]:
        return [self._axis.label(p) for p in self._slice]

    def size(self) -> int:
        return self._slice.size()

    def __len__(self) -> int:
        return self._slice.size()

    def __getitem__(self, label: Hashable) -> int:
        position = self._axis[label]
        if not self._slice.contains(position):
            raise LabelNotFoundError(label, self.name)
        return position

    def get(self, label: Hashable) -> Optional[int]:
        try:
            return self[label]
        except LabelNotFoundError:
            return None

    def index_of(self, label: Hashable) -> int:
        """View-relative index of `label`."""
        return self._slice.revert(self[label])

    def position(self, i: int) -> int:
        """Underlying axis position of the i-th label of the view."""
        return self._slice.apply(i)

    def label(self, i: int) -> Hashable:
        """Label of the i-th entry of the view."""
        return self._axis.label(self._slice.apply(i))

    def __contains__(self, label: Hashable) -> bool:
        return self.get(label) is not None

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.labels)

    def materialize(self) -> Axis:
        """Copy the visible labels into a standalone Axis."""
        return self._axis.sub_axis(self._slice)

    def __eq__(self, other) -> bool:
        if not isinstance(other, (Axis, AxisView)):
            return NotImplemented
        return self.labels == other.labels

    def __hash__(self):
        return hash(tuple(self.labels))

    def __repr__(self) -> str:
        return f"AxisView({self.labels!r}, {self._slice!r})"


def as_axis(obj, name: Optional[str] = None):
    """Return `obj` if it already is an axis, otherwise build an Axis from it."""
    if isinstance(obj, (Axis, AxisView)):
        if name is not None and obj.name is None:
            obj.name = name
        return obj
    return Axis(obj, name=name)
