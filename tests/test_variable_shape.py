"""Tests for Variable construction, resize, reshape and views."""

import numpy as np
import pytest

from axisframe import (
    Axis,
    AxisView,
    Coordinate,
    DenseStorage,
    DimensionMapping,
    PositionalSlice,
    Range,
    SteppedRange,
    Variable,
    coordinate_view,
    make_range,
)
from axisframe.contracts import ContractViolation

pytestmark = [pytest.mark.unit, pytest.mark.variable]


class TestConstruction:

    def test_shape_follows_dimension_mapping(self, test_coordinate):
        v = Variable(coords=test_coordinate, dims=["ordinate", "abscissa"])
        assert v.shape == (3, 3)
        assert v.dimension_labels == ["ordinate", "abscissa"]

    def test_allocates_when_no_data(self):
        v = Variable(coords={"x": [10, 20], "y": ["p", "q", "r"]})
        assert v.shape == (2, 3)
        assert v.dtype == np.float64
        assert not v.values.any()

    def test_dims_default_to_coordinate_order(self):
        v = Variable(coords={"y": [0, 1, 2], "x": [0, 1]})
        assert v.dimension_labels == ["y", "x"]
        assert v.compute_shape() == (3, 2)

    def test_non_square_shape_checked(self):
        with pytest.raises(ContractViolation, match="Shape contract"):
            Variable(np.zeros((2, 3)), {"x": [0, 1, 2], "y": [0, 1]})

    def test_transposed_dims(self):
        values = np.arange(6.0).reshape(3, 2)
        v = Variable(values, {"x": [0, 1], "y": ["a", "b", "c"]}, ["y", "x"])
        assert v.select({"x": 1, "y": "c"}) == 5.0

    def test_dims_must_match_coordinate(self, test_coordinate):
        with pytest.raises(ContractViolation, match="do not match"):
            Variable(coords=test_coordinate, dims=["abscissa", "altitude"])

    def test_accepts_dense_storage(self, test_coordinate, test_dims):
        storage = DenseStorage(np.ones((3, 3)))
        v = Variable(storage, test_coordinate, test_dims)
        assert v.data is storage

    def test_size_and_dimension(self, test_variable):
        assert test_variable.size() == 9
        assert test_variable.dimension() == 2

    def test_fill_value_for_new_storage(self, test_coordinate, make_config):
        v = Variable(coords=test_coordinate, config=make_config(FILL_VALUE=np.nan))
        assert np.isnan(v.values).all()

    def test_dimension_mapping_object(self, test_variable, test_dims):
        assert test_variable.dimension_mapping == test_dims
        assert test_variable.coordinates["abscissa"].labels == ["a", "c", "d"]


class TestResize:

    def test_resize_changes_coordinate_and_shape(self, test_variable):
        test_variable.resize({"abscissa": ["a", "b"], "ordinate": [1, 2, 3, 4]})
        assert test_variable.shape == (2, 4)
        assert test_variable.coordinates["abscissa"].labels == ["a", "b"]
        assert not test_variable.values.any()

    def test_resize_with_new_dims(self, test_variable):
        test_variable.resize({"t": [0, 1], "abscissa": ["a"]}, ["t", "abscissa"])
        assert test_variable.dimension_labels == ["t", "abscissa"]
        assert test_variable.shape == (2, 1)

    def test_resize_rejects_mismatched_dims(self, test_variable):
        with pytest.raises(ContractViolation):
            test_variable.resize({"x": [0]}, ["y"])


class TestReshape:

    def test_reshape_preserves_values(self, test_variable):
        before = test_variable.values.ravel().copy()
        test_variable.reshape({"abscissa": ["a", "c", "d"], "ordinate": [7, 8, 9]})
        np.testing.assert_array_equal(test_variable.values.ravel(), before)
        assert test_variable.locate("c", 8) == 11.0

    def test_reshape_new_extent_falls_back_to_resize(self, test_variable):
        test_variable.reshape({"abscissa": ["a"], "ordinate": [1, 2]})
        assert test_variable.shape == (1, 2)
        assert not test_variable.values.any()

    def test_reshape_reset_policy(self, test_values, test_coordinate, test_dims, make_config):
        v = Variable(test_values.copy(), test_coordinate, test_dims, config=make_config(RESHAPE_POLICY="reset"))
        v.reshape({"abscissa": ["x", "y", "z"], "ordinate": [1, 2, 4]})
        assert v.shape == (3, 3)
        assert not v.values.any()


class TestView:

    def test_label_view(self, test_variable):
        sub = test_variable.view({"abscissa": make_range("c", "d")})
        assert sub.shape == (2, 3)
        assert sub.coordinates["abscissa"].labels == ["c", "d"]
        assert sub.locate("c", 1) == 10.0

    def test_view_shares_values(self, test_variable):
        sub = test_variable.view({"ordinate": make_range(2, 4)})
        sub.locate_assign(("a", 4), -1.0)
        assert test_variable.locate("a", 4) == -1.0
        assert np.shares_memory(sub.values, test_variable.values)

    def test_stepped_view(self):
        v = Variable(np.arange(8.0), {"x": ["a", "b", "c", "f", "g", "h", "m", "n"]})
        sub = v.view({"x": make_range("a", "g", 2)})
        assert sub.coordinates["x"].labels == ["a", "c", "g"]
        assert list(sub.values) == [0.0, 2.0, 4.0]

    def test_positional_view(self, test_variable):
        sub = test_variable.view({"abscissa": Range(1, 2), "ordinate": PositionalSlice(SteppedRange(0, 2, 2))})
        assert sub.coordinates["ordinate"].labels == [1, 4]
        assert sub.at(0, 1) == 12.0

    def test_view_over_coordinate_view(self):
        base = Coordinate({"x": ["a", "b", "c", "f", "g"]})
        axis = base["x"]
        coords = coordinate_view({"x": AxisView(axis, make_range("b", "f").resolve(axis))})
        v = Variable(np.arange(3.0), coords)
        sub = v.view({"x": make_range("c", "f")})
        assert isinstance(sub.coordinates["x"], Axis)
        assert sub.coordinates["x"].labels == ["c", "f"]

    def test_view_unknown_dimension(self, test_variable):
        with pytest.raises(KeyError):
            test_variable.view({"altitude": Range(0, 1)})

    def test_view_missing_boundary_label(self, test_variable):
        with pytest.raises(KeyError):
            test_variable.view({"abscissa": make_range("a", "q")})


def test_repr(test_variable):
    test_variable.name = "temperature"
    assert repr(test_variable) == "<Variable temperature(abscissa: 3, ordinate: 3) dtype=float64>"
