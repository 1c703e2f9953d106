"""Label contracts.

Axes and dimension mappings are bijections: every label (or dimension
name) must appear exactly once.
"""

from typing import Iterable

import pandas as pd

from axisframe.contracts.base import require


def assert_unique_labels(labels: Iterable, what: str = "axis") -> None:
    """Enforce label uniqueness.

    Parameters
    ----------
    labels : iterable
        Labels of an axis or names of a dimension mapping.

    what : str, optional
        Name used in the error message (default "axis").

    Raises
    ------
    ContractViolation
        If any label occurs more than once.
    """
    index = labels if isinstance(labels, pd.Index) else pd.Index(list(labels))
    if index.is_unique:
        return
    duplicates = list(index[index.duplicated()].unique())
    require(False, f"Label contract violated: {what} has duplicate labels {duplicates}")


def assert_positive_step(step: int) -> None:
    """Enforce a strictly positive slice step."""
    require(step > 0, f"Slice contract violated: step must be positive, got {step}")
