"""Variable: a dense N-d array addressed by named dimensions and labels.

A Variable composes three collaborators:

- a Coordinate (dimension name -> Axis),
- a DimensionMapping (dimension name -> storage rank),
- a DenseStorage (positional values).

Invariant: storage.shape()[dims[name]] == coords[name].size() for every
dimension name. resize() and reshape() are the only operations that change
the coordinate, and both re-establish the invariant before returning.

Access paths, fastest first:

- at(*positions) / element(positions): positional, no label machinery
- locate(*labels): one label per dimension in rank order, strict
- select(selector, join): {dimension: label}, inner (strict) or outer
  (missing-tolerant)
- iselect(selector): {dimension: position}, always inner

Writes go through set_element / assign / iassign, which use the strict
(inner) resolution only: a write needs an unambiguous target.
"""

import logging
from typing import Hashable, Iterable, Mapping, Optional, Tuple, Union

import numpy as np
import xarray as xr

from axisframe.contracts import (
    Join,
    assert_arity,
    assert_shape_consistent,
    require,
)
from axisframe.coords.axis import Axis, AxisView
from axisframe.coords.coordinate import (
    Coordinate,
    DimensionMapping,
    as_coordinate,
    as_dimension_mapping,
)
from axisframe.coords.selector import ISelector, Selector
from axisframe.missing import missing_value
from axisframe.schemas import InternalConfig, default_config
from axisframe.slicing.labels import LabelRange, LabelSlice, LabelSteppedRange
from axisframe.slicing.positional import FullRange, PositionalSlice
from axisframe.storage import DenseStorage

__all__ = ["Variable"]

logger = logging.getLogger(__name__)

SelectorLike = Union[Selector, Mapping[str, Hashable]]


def _as_selector(selector: SelectorLike, cls=Selector) -> Selector:
    if isinstance(selector, Selector):
        return selector
    return cls(selector)


class Variable:
    """Labeled dense array.

    Parameters
    ----------
    data : array-like or DenseStorage, optional
        Values. If None, storage is allocated with the coordinate-derived
        shape and filled according to config.storage.fill_value.

    coords : Coordinate or mapping of str to labels
        Axis of every dimension.

    dims : DimensionMapping or sequence of str, optional
        Storage order of the dimensions. Defaults to the coordinate order.

    dtype : numpy dtype, optional
        Element type for newly allocated or converted data.

    config : InternalConfig, optional
        Runtime configuration. Expert defaults if None.

    name : str, optional

    Raises
    ------
    ContractViolation
        If dims and coords name different dimensions, or the data shape
        does not match the coordinate.

    Examples
    --------
    >>> v = Variable(
    ...     np.arange(9.0).reshape(3, 3),
    ...     {"abscissa": ["a", "c", "d"], "ordinate": [1, 2, 4]},
    ... )
    >>> v.locate("c", 4)
    5.0
    >>> v.select({"abscissa": "e", "ordinate": 1}, join="outer")
    <NA>
    """

    def __init__(
        self,
        data=None,
        coords=None,
        dims=None,
        dtype=None,
        config: Optional[InternalConfig] = None,
        name: Optional[str] = None,
    ):
        self.config = config if config is not None else default_config()
        self.default_join = Join(self.config.selection.default_join)
        self.check_bounds = self.config.selection.check_bounds
        self.name = name

        self._coords, self._dims = self._validate_coordinate_system(coords, dims)

        if isinstance(data, DenseStorage):
            self._storage = data
        elif data is None:
            self._storage = DenseStorage(shape=self.compute_shape(), dtype=dtype, config=self.config)
        else:
            self._storage = DenseStorage(data, dtype=dtype, config=self.config)

        assert_shape_consistent(self._storage.shape(), self.compute_shape())

    # ------------------------------------------------------------------
    # Coordinate system
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_coordinate_system(coords, dims) -> Tuple[Coordinate, DimensionMapping]:
        coords = as_coordinate(coords if coords is not None else {})
        if any(isinstance(axis, AxisView) for _, axis in coords.items()):
            # storage positions are relative to the view, not the underlying axis
            coords = Coordinate({
                name: axis.materialize() if isinstance(axis, AxisView) else axis
                for name, axis in coords.items()
            })
        dims = as_dimension_mapping(dims, coords)
        require(
            set(dims.labels) == set(coords.keys()),
            f"Variable contract violated: dimensions {dims.labels} do not match "
            f"coordinate dimensions {coords.keys()}"
        )
        return coords, dims

    @property
    def coordinates(self) -> Coordinate:
        return self._coords

    @property
    def dimension_mapping(self) -> DimensionMapping:
        return self._dims

    @property
    def dimension_labels(self):
        return self._dims.labels

    def dimension(self) -> int:
        """Number of dimensions."""
        return self._dims.size()

    @property
    def data(self) -> DenseStorage:
        return self._storage

    @property
    def values(self) -> np.ndarray:
        return self._storage.values

    @property
    def dtype(self) -> np.dtype:
        return self._storage.dtype

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._storage.shape()

    def size(self) -> int:
        """Total number of elements."""
        return int(self._storage.values.size)

    def compute_shape(self) -> Tuple[int, ...]:
        """Axis sizes ordered by dimension rank."""
        shape = [0] * self._dims.size()
        for name, axis in self._coords.items():
            shape[self._dims[name]] = axis.size()
        return tuple(shape)

    def resize(self, coords, dims=None) -> None:
        """Replace the coordinate system and reallocate storage.

        Prior values are discarded.
        """
        self._coords, self._dims = self._validate_coordinate_system(coords, dims)
        shape = self.compute_shape()
        logger.debug("Variable %s resize to %s", self.name or "", shape)
        self._storage.resize(shape)
        assert_shape_consistent(self._storage.shape(), shape)

    def reshape(self, coords, dims=None) -> None:
        """Replace the coordinate system and reshape storage in place.

        Whether values survive is decided by the storage's reshape policy
        (config.storage.reshape_policy).
        """
        self._coords, self._dims = self._validate_coordinate_system(coords, dims)
        shape = self.compute_shape()
        logger.debug("Variable %s reshape to %s", self.name or "", shape)
        self._storage.reshape(shape)
        assert_shape_consistent(self._storage.shape(), shape)

    @staticmethod
    def missing(dtype=None):
        """Missing sentinel returned by outer-join selection.

        Callable on the class or an instance; the sentinel is the same
        object for every value type.
        """
        return missing_value(dtype)

    # ------------------------------------------------------------------
    # Positional access
    # ------------------------------------------------------------------

    def at(self, *positions: int):
        """Value at one position per dimension, in rank order."""
        return self._storage.element(positions)

    __call__ = at

    def element(self, positions: Iterable[int]):
        """Value at an iterable of positions, in rank order."""
        return self._storage.element(positions)

    def set_element(self, positions: Iterable[int], value) -> None:
        self._storage.set_element(positions, value)

    def __getitem__(self, positions):
        if not isinstance(positions, tuple):
            positions = (positions,)
        return self._storage.element(positions)

    def __setitem__(self, positions, value) -> None:
        if not isinstance(positions, tuple):
            positions = (positions,)
        self._storage.set_element(positions, value)

    # ------------------------------------------------------------------
    # Label access
    # ------------------------------------------------------------------

    def _locate_index(self, labels: Tuple[Hashable, ...]) -> Tuple[int, ...]:
        assert_arity(labels, self._dims.size())
        names = self._dims.labels
        return tuple(self._coords[names[i]][label] for i, label in enumerate(labels))

    def locate(self, *labels: Hashable):
        """Value at one label per dimension, in rank order.

        Raises
        ------
        LabelNotFoundError
            If any label is absent from its axis.
        """
        return self._storage.element(self._locate_index(labels))

    def locate_assign(self, labels: Iterable[Hashable], value) -> None:
        """Write `value` at one label per dimension, in rank order."""
        self._storage.set_element(self._locate_index(tuple(labels)), value)

    def select(self, selector: SelectorLike, join: Optional[Union[Join, str]] = None):
        """Value selected by a {dimension: label} map.

        Parameters
        ----------
        selector : Selector or mapping of str to label
            Dimensions not named resolve to position 0.

        join : Join or str, optional
            "inner" raises on an unresolvable entry; "outer" returns
            missing() when a label is absent and ignores unknown
            dimensions. Defaults to config.selection.default_join.

        Raises
        ------
        LabelNotFoundError, DimensionNotFoundError
            Inner join only.
        """
        join = self.default_join if join is None else Join(join)
        selector = _as_selector(selector)
        if join is Join.INNER:
            return self._storage.element(selector.get_index(self._coords, self._dims))
        return self._select_outer(selector)

    def _select_outer(self, selector: Selector):
        index, found = selector.get_outer_index(self._coords, self._dims)
        if not found:
            return self.missing()
        return self._storage.element(index)

    def assign(self, selector: SelectorLike, value) -> None:
        """Write `value` at a {dimension: label} selection (inner only)."""
        selector = _as_selector(selector)
        self._storage.set_element(selector.get_index(self._coords, self._dims), value)

    def _iselect_index(self, selector: SelectorLike) -> Tuple[int, ...]:
        selector = _as_selector(selector, ISelector)
        require(
            isinstance(selector, ISelector),
            "Variable contract violated: iselect needs a position selector"
        )
        if self.check_bounds:
            return selector.get_index(self._coords, self._dims)
        return selector.get_unchecked_index(self._coords, self._dims)

    def iselect(self, selector: Union[ISelector, Mapping[str, int]]):
        """Value selected by a {dimension: position} map.

        Raises
        ------
        IndexError
            If a position is out of its axis' bounds.
        DimensionNotFoundError
            If a dimension is absent from the coordinate.
        """
        return self._storage.element(self._iselect_index(selector))

    def iassign(self, selector: Union[ISelector, Mapping[str, int]], value) -> None:
        """Write `value` at a {dimension: position} selection."""
        self._storage.set_element(self._iselect_index(selector), value)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def view(self, slices: Mapping[str, object]) -> "Variable":
        """Restricted variable sharing this variable's values.

        Parameters
        ----------
        slices : mapping of str to LabelSlice or PositionalSlice
            Per-dimension restriction. Label slices are resolved against
            the dimension's axis. Unnamed dimensions are kept whole.

        Returns
        -------
        Variable
            Writes through the returned variable modify this one.

        Examples
        --------
        >>> sub = v.view({"abscissa": make_range("c", "d")})
        >>> sub.coordinates["abscissa"].labels
        ['c', 'd']
        """
        islices = {}
        for name, s in slices.items():
            axis = self._coords[name]
            if isinstance(s, (LabelSlice, LabelRange, LabelSteppedRange)):
                islices[name] = LabelSlice(s).resolve(axis)
            else:
                islices[name] = PositionalSlice(s)

        new_coords = {}
        for name, axis in self._coords.items():
            islice = islices.get(name, PositionalSlice(FullRange(axis.size())))
            new_coords[name] = axis.sub_axis(islice)

        index = [slice(None)] * self._dims.size()
        for name, islice in islices.items():
            index[self._dims[name]] = islice.to_builtin()

        sub = self._storage.values[tuple(index)]
        return Variable(
            DenseStorage(sub, config=self.config),
            Coordinate(new_coords),
            DimensionMapping(self._dims.labels),
            config=self.config,
            name=self.name,
        )

    # ------------------------------------------------------------------
    # xarray interop
    # ------------------------------------------------------------------

    @classmethod
    def from_dataarray(cls, da: xr.DataArray, config: Optional[InternalConfig] = None) -> "Variable":
        """Build a Variable from an xarray.DataArray.

        Dimensions without an index get positional labels 0..n-1.
        """
        coords = {}
        for dim, size in zip(da.dims, da.shape):
            if dim in da.indexes:
                coords[dim] = Axis(da.indexes[dim], name=dim)
            else:
                coords[dim] = Axis(range(size), name=dim)
        return cls(da.values, coords, list(da.dims), config=config, name=da.name)

    def to_dataarray(self) -> xr.DataArray:
        """Copy-free xarray.DataArray over the same values."""
        names = self._dims.labels
        coords = {name: self._coords[name].index for name in names}
        return xr.DataArray(self._storage.values, coords=coords, dims=names, name=self.name)

    def __repr__(self) -> str:
        dims = ", ".join(f"{n}: {self._coords[n].size()}" for n in self._dims.labels)
        return f"<Variable {self.name or ''}({dims}) dtype={self.dtype}>"
