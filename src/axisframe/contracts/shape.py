"""Shape and arity contracts.

Enforces the guarantee that a variable's storage shape matches, per
dimension, the size of the corresponding axis indexed through the
dimension mapping, and that positional access supplies exactly one
position per dimension.
"""

from typing import Sequence

import numpy as np

from axisframe.contracts.base import require


def assert_shape_consistent(storage_shape: Sequence[int], expected_shape: Sequence[int]) -> None:
    """Enforce the storage/coordinate shape invariant.

    Called after construction, resize and reshape. The expected shape is
    the one recomputed from the coordinate and dimension mapping.

    Parameters
    ----------
    storage_shape : sequence of int
        Shape reported by the storage collaborator.

    expected_shape : sequence of int
        Axis sizes ordered by dimension rank.

    Raises
    ------
    ContractViolation
        If the rank or any extent differs.
    """
    storage_shape = tuple(storage_shape)
    expected_shape = tuple(expected_shape)
    require(
        len(storage_shape) == len(expected_shape),
        f"Shape contract violated: storage has {len(storage_shape)} dims, "
        f"coordinate has {len(expected_shape)}"
    )
    require(
        storage_shape == expected_shape,
        f"Shape contract violated: storage shape {storage_shape} != coordinate shape {expected_shape}"
    )


def assert_arity(positions: Sequence, ndim: int) -> None:
    """Enforce one position or label per dimension."""
    require(
        len(positions) == ndim,
        f"Arity contract violated: got {len(positions)} indices for {ndim} dimensions"
    )


def assert_fill_representable(fill_value: float, dtype) -> None:
    """Enforce that `fill_value` survives conversion to `dtype` unchanged.

    numpy casts NaN or out-of-range floats into integer arrays with only a
    RuntimeWarning; this turns that into a ContractViolation.

    Raises
    ------
    ContractViolation
        If `dtype` is an integer or boolean type and `fill_value` is not
        an integral value within its range.
    """
    dtype = np.dtype(dtype)
    if dtype.kind in "iu":
        info = np.iinfo(dtype)
        require(
            np.isfinite(fill_value) and float(fill_value).is_integer()
            and info.min <= fill_value <= info.max,
            f"Storage contract violated: fill value {fill_value} cannot be stored as {dtype}"
        )
    elif dtype.kind == "b":
        require(
            fill_value in (0.0, 1.0),
            f"Storage contract violated: fill value {fill_value} cannot be stored as {dtype}"
        )
