"""Coordinate and dimension mapping.

A Coordinate maps dimension names to axes, in a stable insertion order.
A DimensionMapping gives the rank (storage axis order) of each dimension
name. A variable needs both: the coordinate to turn labels into
positions, the mapping to know where each position goes in the storage
index tuple.
"""

from typing import Dict, Iterable, Iterator, List, Mapping, Tuple, Union

from axisframe.contracts import DimensionNotFoundError, assert_unique_labels
from axisframe.coords.axis import Axis, AxisView, as_axis

__all__ = ["Coordinate", "DimensionMapping", "coordinate_view"]

AxisLike = Union[Axis, AxisView]


class Coordinate:
    """Ordered mapping from dimension name to axis.

    Values that are not already axes are wrapped into `Axis`.

    Examples
    --------
    >>> coord = Coordinate({"abscissa": ["a", "c", "d"], "ordinate": [1, 2, 4]})
    >>> coord["ordinate"][4]
    2
    >>> coord[("abscissa", "c")]
    1
    """

    def __init__(self, axes: Union[Mapping[str, object], Iterable[Tuple[str, object]]] = ()):
        items = axes.items() if isinstance(axes, Mapping) else axes
        self._axes: Dict[str, AxisLike] = {}
        for name, axis in items:
            self._axes[name] = as_axis(axis, name=name)

    def __getitem__(self, key) -> Union[AxisLike, int]:
        """Axis of a dimension, or position of a (dimension, label) pair."""
        if isinstance(key, tuple):
            name, label = key
            return self[name][label]
        try:
            return self._axes[key]
        except (KeyError, TypeError):
            raise DimensionNotFoundError(key) from None

    def get(self, name: str):
        return self._axes.get(name)

    def contains(self, name: str) -> bool:
        return name in self._axes

    def __contains__(self, name) -> bool:
        return self.contains(name)

    def __len__(self) -> int:
        return len(self._axes)

    def size(self) -> int:
        return len(self._axes)

    def empty(self) -> bool:
        return not self._axes

    def __iter__(self) -> Iterator[str]:
        return iter(self._axes)

    def keys(self) -> List[str]:
        return list(self._axes)

    def items(self) -> Iterator[Tuple[str, AxisLike]]:
        return iter(self._axes.items())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return list(self._axes) == list(other._axes) and all(
            self._axes[k] == other._axes[k] for k in self._axes
        )

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self._axes.items())
        return f"Coordinate({{{body}}})"


class DimensionMapping:
    """Ordered dimension names; a name's rank is its position.

    Examples
    --------
    >>> dims = DimensionMapping(["abscissa", "ordinate"])
    >>> dims["ordinate"]
    1
    >>> dims.labels
    ['abscissa', 'ordinate']
    """

    def __init__(self, names: Iterable[str]):
        names = list(names)
        assert_unique_labels(names, what="dimension mapping")
        self._names = names
        self._ranks = {name: rank for rank, name in enumerate(names)}

    @property
    def labels(self) -> List[str]:
        return list(self._names)

    def __getitem__(self, name: str) -> int:
        try:
            return self._ranks[name]
        except (KeyError, TypeError):
            raise DimensionNotFoundError(name) from None

    def get(self, name: str):
        return self._ranks.get(name)

    def __contains__(self, name) -> bool:
        return name in self._ranks

    def size(self) -> int:
        return len(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __eq__(self, other) -> bool:
        if isinstance(other, DimensionMapping):
            return self._names == other._names
        return NotImplemented

    def __repr__(self) -> str:
        return f"DimensionMapping({self._names!r})"


def coordinate_view(axes: Mapping[str, AxisView]) -> Coordinate:
    """Coordinate over axis views.

    Parameters
    ----------
    axes : mapping of str to AxisView
        Restricted axes, e.g. built with ``AxisView(axis, make_range(...).resolve(axis))``.
    """
    return Coordinate({name: view for name, view in axes.items()})


def as_coordinate(coords) -> Coordinate:
    return coords if isinstance(coords, Coordinate) else Coordinate(coords)


def as_dimension_mapping(dims, coords: Coordinate) -> DimensionMapping:
    """DimensionMapping from `dims`, defaulting to the coordinate order."""
    if dims is None:
        return DimensionMapping(coords.keys())
    if isinstance(dims, DimensionMapping):
        return dims
    return DimensionMapping(dims)
