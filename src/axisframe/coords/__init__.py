"""Coordinate system collaborators.

- axis: Axis (label <-> position) and AxisView (sliced axis)
- coordinate: Coordinate (name -> axis) and DimensionMapping (name -> rank)
- selector: Selector (labels) and ISelector (positions)
"""

from axisframe.coords.axis import Axis, AxisView
from axisframe.coords.coordinate import Coordinate, DimensionMapping, coordinate_view
from axisframe.coords.selector import ISelector, Selector

__all__ = [
    "Axis",
    "AxisView",
    "Coordinate",
    "DimensionMapping",
    "coordinate_view",
    "Selector",
    "ISelector",
]
