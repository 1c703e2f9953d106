"""Centralized failure policy for label-based selection.

Every lookup failure in axisframe surfaces as one of the exception types
defined here. Which of them reaches the caller is decided by the join
policy of the selection call, not by the collaborator that failed.
"""

from enum import Enum


class Join(str, Enum):
    """Join policy for multi-dimension label selection.

    INNER (default): a label or dimension that cannot be resolved raises.
    OUTER: an unresolved label yields the missing sentinel instead of a
    stored value; selector entries naming an unknown dimension are ignored.
    """
    INNER = "inner"
    OUTER = "outer"


class ContractViolation(RuntimeError):
    """Raised when a structural invariant of a variable is violated.

    This indicates a programming error, not bad user input or a label that
    happens to be absent. Wrong positional arity, a storage shape that no
    longer matches the coordinate, duplicate axis labels and non-positive
    slice steps all end up here.

    Key distinction:
    - ValueError: configuration error (handled by Pydantic)
    - ContractViolation: caller bug (programmer error)
    - LabelNotFoundError / DimensionNotFoundError: lookup misses, which
      outer joins are allowed to recover from
    """
    pass


class LabelNotFoundError(KeyError):
    """A requested label does not exist on its axis."""

    def __init__(self, label, axis_name=None):
        self.label = label
        self.axis_name = axis_name
        if axis_name is None:
            msg = f"label {label!r} not found on axis"
        else:
            msg = f"label {label!r} not found on axis '{axis_name}'"
        super().__init__(msg)

    def __str__(self):
        return self.args[0]


class DimensionNotFoundError(KeyError):
    """A selector or lookup names a dimension absent from the coordinate."""

    def __init__(self, dimension):
        self.dimension = dimension
        super().__init__(f"dimension {dimension!r} not found")

    def __str__(self):
        return self.args[0]
