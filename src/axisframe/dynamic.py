"""Uniform value facade over variables of any dtype.

DynamicVariable exposes the access paths of a Variable with index
collections instead of varargs, and converts every returned value through
a single callable. Code that walks several variables of different dtypes
(float, int, datetime) can then treat all results alike.
"""

from typing import Callable, Hashable, Iterable, Mapping, Optional, Union

from axisframe.contracts import Join
from axisframe.missing import is_missing
from axisframe.variable import Variable

__all__ = ["DynamicVariable", "make_dynamic"]


class DynamicVariable:
    """Type-erased view of a Variable.

    Parameters
    ----------
    variable : Variable
        Wrapped variable (not copied).

    value_type : callable, optional
        Applied to every returned value, e.g. float. Missing sentinels are
        returned unconverted. Without it values are returned as stored.
    """

    def __init__(self, variable: Variable, value_type: Optional[Callable] = None):
        self.variable = variable
        self.value_type = value_type

    def _convert(self, value):
        if self.value_type is None or is_missing(value):
            return value
        return self.value_type(value)

    def missing(self):
        return self.variable.missing()

    def element(self, positions: Iterable[int]):
        return self._convert(self.variable.element(positions))

    def locate_element(self, labels: Iterable[Hashable]):
        return self._convert(self.variable.locate(*labels))

    def select(self, selector: Mapping[str, Hashable], join: Optional[Union[Join, str]] = None):
        return self._convert(self.variable.select(selector, join=join))

    def iselect(self, selector: Mapping[str, int]):
        return self._convert(self.variable.iselect(selector))

    def __repr__(self) -> str:
        type_name = getattr(self.value_type, "__name__", None)
        return f"DynamicVariable({self.variable!r}, value_type={type_name})"


def make_dynamic(variable: Variable, value_type: Optional[Callable] = None) -> DynamicVariable:
    """Wrap `variable` in a DynamicVariable."""
    return DynamicVariable(variable, value_type)
