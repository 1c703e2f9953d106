"""Selectors: resolve a {dimension: label-or-position} map into a storage index.

Entries are processed in the selector's own enumeration order, looked up
in the coordinate by dimension name, and written into the index tuple at
the dimension's rank. Dimensions of the variable that the selector does
not name stay at position 0.
"""

import logging
from typing import Hashable, Mapping, Optional, Tuple

from axisframe.contracts import DimensionNotFoundError, LabelNotFoundError
from axisframe.coords.coordinate import Coordinate, DimensionMapping

__all__ = ["Selector", "ISelector"]

logger = logging.getLogger(__name__)

IndexTuple = Tuple[int, ...]


class Selector:
    """Label selector.

    Parameters
    ----------
    selection : mapping of str to label
        One label per selected dimension.

    Examples
    --------
    >>> sel = Selector({"ordinate": 4, "abscissa": "c"})
    >>> sel.get_index(coord, dims)
    (1, 2)
    """

    def __init__(self, selection: Mapping[str, Hashable]):
        self._selection = dict(selection)

    @property
    def selection(self) -> dict:
        return dict(self._selection)

    def get_index(self, coords: Coordinate, dims: DimensionMapping) -> IndexTuple:
        """Strict resolution.

        Raises
        ------
        DimensionNotFoundError
            If an entry names a dimension absent from the coordinate.
        LabelNotFoundError
            If a label is absent from its axis.
        """
        index = [0] * dims.size()
        for name, label in self._selection.items():
            index[dims[name]] = coords[name][label]
        return tuple(index)

    def get_outer_index(
        self, coords: Coordinate, dims: DimensionMapping
    ) -> Tuple[Optional[IndexTuple], bool]:
        """Missing-tolerant resolution.

        Entries naming an unknown dimension are ignored. The first label
        absent from its axis stops resolution.

        Returns
        -------
        tuple
            (index, True) when every label resolved, (None, False) otherwise.
        """
        index = [0] * dims.size()
        for name, label in self._selection.items():
            axis = coords.get(name)
            rank = dims.get(name)
            if axis is None or rank is None:
                logger.debug("Outer join: ignoring unknown dimension %r", name)
                continue
            try:
                index[rank] = axis[label]
            except LabelNotFoundError:
                logger.debug("Outer join: label %r missing on '%s'", label, name)
                return None, False
        return tuple(index), True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._selection!r})"


class ISelector(Selector):
    """Position selector.

    Positions are checked against the axis' reported size; there is no
    outer resolution since a position never depends on label alignment.
    """

    def get_index(self, coords: Coordinate, dims: DimensionMapping) -> IndexTuple:
        """Resolve positions, checking each against its axis size.

        Raises
        ------
        DimensionNotFoundError
            If an entry names a dimension absent from the coordinate.
        IndexError
            If a position is outside [0, axis.size()).
        """
        index = [0] * dims.size()
        for name, position in self._selection.items():
            axis = coords[name]
            if not 0 <= position < axis.size():
                raise IndexError(
                    f"position {position} out of bounds for dimension '{name}' of size {axis.size()}"
                )
            index[dims[name]] = int(position)
        return tuple(index)

    def get_unchecked_index(self, coords: Coordinate, dims: DimensionMapping) -> IndexTuple:
        """Resolve positions without bounds checks (dimension names still checked)."""
        index = [0] * dims.size()
        for name, position in self._selection.items():
            if name not in coords:
                raise DimensionNotFoundError(name)
            index[dims[name]] = int(position)
        return tuple(index)

    def get_outer_index(self, coords, dims):
        raise TypeError("position selectors support inner resolution only")
