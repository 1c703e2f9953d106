"""Missing-value sentinel.

Outer-join selection returns MISSING (pandas.NA) when a label cannot be
resolved, whatever the value type of the storage. NaN and NaT are valid
stored values, so they never stand for "missing" here: a variable may hold
a NaN and still tell it apart from a failed lookup.

MISSING is a process-wide constant. It is never written into storage.
"""

import pandas as pd

__all__ = ["MISSING", "missing_value", "is_missing"]

MISSING = pd.NA


def missing_value(dtype=None) -> object:
    """Missing sentinel for `dtype`.

    The same object is returned for every dtype, so a stored NaN or NaT
    can never be mistaken for it.

    Parameters
    ----------
    dtype : numpy dtype or dtype-like, optional
        Accepted for symmetry with typed storages; does not change the result.

    Examples
    --------
    >>> missing_value(np.float64) is MISSING
    True
    """
    return MISSING


def is_missing(value) -> bool:
    """Whether `value` is the missing sentinel (identity check)."""
    return value is MISSING
