"""Contracts: fail-fast enforcement of structural invariants.

This package holds the exception taxonomy and the invariant checks shared
by axes, coordinates, storages and variables. Contracts fail immediately
and loudly when a caller breaks an invariant.

Key principle:
- Pydantic validates config correctness
- Contracts validate structural correctness
- Join policy decides what a lookup miss means
"""

from axisframe.contracts.failure import (
    ContractViolation,
    DimensionNotFoundError,
    Join,
    LabelNotFoundError,
)
from axisframe.contracts.base import require
from axisframe.contracts.shape import (
    assert_shape_consistent,
    assert_arity,
    assert_fill_representable,
)
from axisframe.contracts.labels import assert_unique_labels, assert_positive_step

__all__ = [
    "ContractViolation",
    "DimensionNotFoundError",
    "Join",
    "LabelNotFoundError",
    "require",
    "assert_shape_consistent",
    "assert_arity",
    "assert_fill_representable",
    "assert_unique_labels",
    "assert_positive_step",
]
