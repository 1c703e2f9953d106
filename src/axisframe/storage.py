"""Dense positional storage backed by numpy.

DenseStorage knows nothing about labels: it holds an ndarray and answers
positional reads and writes, plus the two shape updates a variable needs
(destructive resize and value-preserving reshape).
"""

import logging
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from axisframe.contracts import assert_arity, assert_fill_representable
from axisframe.schemas import InternalConfig, default_config

__all__ = ["DenseStorage"]

logger = logging.getLogger(__name__)


class DenseStorage:
    """Dense N-d container addressed by positions.

    Parameters
    ----------
    data : array-like, optional
        Initial contents. Converted with numpy.asarray (no copy when
        already an ndarray of the requested dtype).

    shape : sequence of int, optional
        Shape to allocate when `data` is None.

    dtype : numpy dtype, optional
        Element type. Defaults to the dtype of `data`, or float64.

    config : InternalConfig, optional
        Supplies storage.reshape_policy and storage.fill_value.
    """

    def __init__(
        self,
        data=None,
        shape: Optional[Sequence[int]] = None,
        dtype=None,
        config: Optional[InternalConfig] = None,
    ):
        self.config = config if config is not None else default_config()
        self.reshape_policy = self.config.storage.reshape_policy
        self.fill_value = self.config.storage.fill_value

        if data is None:
            self._data = self._allocate(tuple(shape or ()), np.dtype(np.float64 if dtype is None else dtype))
        else:
            self._data = np.asarray(data, dtype=dtype)

    def _allocate(self, shape: Tuple[int, ...], dtype: np.dtype) -> np.ndarray:
        if self.fill_value is None:
            return np.zeros(shape, dtype=dtype)
        assert_fill_representable(self.fill_value, dtype)
        return np.full(shape, self.fill_value, dtype=dtype)

    @property
    def values(self) -> np.ndarray:
        """The underlying ndarray."""
        return self._data

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def ndim(self) -> int:
        return self._data.ndim

    def shape(self) -> Tuple[int, ...]:
        return tuple(self._data.shape)

    def resize(self, shape: Sequence[int]) -> None:
        """Reallocate to `shape`. Prior contents are discarded."""
        shape = tuple(int(s) for s in shape)
        logger.debug("Storage resize: %s -> %s", self.shape(), shape)
        self._data = self._allocate(shape, self._data.dtype)

    def reshape(self, shape: Sequence[int]) -> None:
        """Change shape according to the configured reshape policy.

        With "preserve", values are kept element-for-element (C order)
        when the total element count is unchanged; any other change falls
        back to resize. With "reset", reshape always behaves like resize.
        """
        shape = tuple(int(s) for s in shape)
        if self.reshape_policy == "preserve" and int(np.prod(shape, dtype=np.int64)) == self._data.size:
            logger.debug("Storage reshape (preserving): %s -> %s", self.shape(), shape)
            self._data = self._data.reshape(shape)
        else:
            self.resize(shape)

    def element(self, positions: Iterable[int]):
        """Value at `positions` (one position per dimension)."""
        positions = tuple(positions)
        assert_arity(positions, self._data.ndim)
        return self._data[positions]

    def set_element(self, positions: Iterable[int], value) -> None:
        """Write `value` at `positions` (one position per dimension)."""
        positions = tuple(positions)
        assert_arity(positions, self._data.ndim)
        self._data[positions] = value

    def __call__(self, *positions: int):
        return self.element(positions)

    def __repr__(self) -> str:
        return f"DenseStorage(shape={self.shape()}, dtype={self.dtype})"
