"""`axisframe` - labeled-axis indexing and selection for dense N-d arrays.

Subpackages:
- slicing: positional slices and label-space slice builders
- coords: axes, coordinates, dimension mappings and selectors
- contracts: invariants and the exception taxonomy
- schemas: Pydantic configuration

Modules:
- variable: the Variable selection engine (inner/outer join)
- storage: numpy-backed dense storage
- missing: missing-value sentinels
- dynamic: uniform value facade
"""

from axisframe.contracts import (
    ContractViolation,
    DimensionNotFoundError,
    Join,
    LabelNotFoundError,
)
from axisframe.coords import (
    Axis,
    AxisView,
    Coordinate,
    DimensionMapping,
    ISelector,
    Selector,
    coordinate_view,
)
from axisframe.slicing import (
    FullRange,
    LabelRange,
    LabelSlice,
    LabelSteppedRange,
    PositionalSlice,
    Range,
    SteppedRange,
    make_range,
)
from axisframe.missing import MISSING, is_missing, missing_value
from axisframe.storage import DenseStorage
from axisframe.variable import Variable
from axisframe.dynamic import DynamicVariable, make_dynamic

__version__ = "0.1.0"

__all__ = [
    "Axis",
    "AxisView",
    "Coordinate",
    "ContractViolation",
    "DenseStorage",
    "DimensionMapping",
    "DimensionNotFoundError",
    "DynamicVariable",
    "FullRange",
    "ISelector",
    "Join",
    "LabelNotFoundError",
    "LabelRange",
    "LabelSlice",
    "LabelSteppedRange",
    "MISSING",
    "PositionalSlice",
    "Range",
    "Selector",
    "SteppedRange",
    "Variable",
    "coordinate_view",
    "is_missing",
    "make_dynamic",
    "make_range",
    "missing_value",
]
