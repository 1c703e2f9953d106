"""Tests for Axis and AxisView."""

import pandas as pd
import pytest

from axisframe import Axis, AxisView, LabelNotFoundError, make_range
from axisframe.contracts import ContractViolation
from axisframe.slicing import FullRange, PositionalSlice, Range

pytestmark = pytest.mark.unit


class TestAxis:
    """Label <-> position map."""

    def test_lookup(self):
        axis = Axis(["a", "c", "d"])
        assert axis["a"] == 0
        assert axis["d"] == 2

    def test_lookup_returns_python_int(self):
        assert type(Axis([1, 2, 4])[4]) is int

    def test_size(self):
        axis = Axis(["a", "c", "d"])
        assert axis.size() == 3
        assert len(axis) == 3

    def test_missing_label_raises(self):
        axis = Axis(["a", "c", "d"], name="abscissa")
        with pytest.raises(LabelNotFoundError, match="abscissa"):
            axis["e"]

    def test_missing_label_is_key_error(self):
        with pytest.raises(KeyError):
            Axis([1, 2, 4])[3]

    def test_get_returns_none_when_absent(self):
        axis = Axis(["a", "c"])
        assert axis.get("c") == 1
        assert axis.get("z") is None

    def test_contains(self):
        axis = Axis(["a", "c"])
        assert "a" in axis
        assert "b" not in axis
        assert ["unhashable"] not in axis

    def test_duplicate_labels_rejected(self):
        with pytest.raises(ContractViolation, match="duplicate"):
            Axis(["a", "b", "a"])

    def test_label_by_position(self):
        assert Axis(["a", "c", "d"]).label(1) == "c"

    def test_accepts_pandas_index(self):
        index = pd.date_range("2025-01-01", periods=3, freq="D")
        axis = Axis(index)
        assert axis[pd.Timestamp("2025-01-02")] == 1
        assert axis.index is index

    def test_partial_datetime_string_is_absent(self):
        axis = Axis(pd.date_range("2020-01-01", periods=3), name="t")
        with pytest.raises(LabelNotFoundError, match="'t'"):
            axis["2020-01"]
        assert "2020-01" not in axis
        assert axis.get("2020-01") is None

    def test_unhashable_label_is_absent(self):
        axis = Axis(["a", "c"])
        with pytest.raises(LabelNotFoundError):
            axis[["a"]]
        assert axis.get(["a"]) is None

    def test_equality_by_labels(self):
        assert Axis(["a", "b"]) == Axis(["a", "b"])
        assert Axis(["a", "b"]) != Axis(["b", "a"])

    def test_sub_axis(self):
        axis = Axis(["f", "g", "h", "m", "n"])
        sub = axis.sub_axis(make_range("g", "m").resolve(axis))
        assert sub.labels == ["g", "h", "m"]


class TestAxisView:
    """Axis restricted through a positional slice."""

    @pytest.fixture
    def abscissa(self):
        return Axis(["a", "b", "c", "f", "g", "h", "m", "n"], name="abscissa")

    @pytest.fixture
    def ordinate(self):
        return Axis([1, 2, 4, 5, 6, 8, 12, 13], name="ordinate")

    def test_range_view_answers_underlying_positions(self, abscissa):
        view = AxisView(abscissa, make_range("f", "n").resolve(abscissa))
        assert view["f"] == 3
        assert view["g"] == 4
        assert view["n"] == 7
        assert view.size() == 5

    def test_stepped_view(self, ordinate):
        view = AxisView(ordinate, make_range(1, 6, 2).resolve(ordinate))
        assert view.labels == [1, 4, 6]
        assert view[1] == 0
        assert view[4] == 2
        assert view[6] == 4

    def test_label_outside_view_raises(self, ordinate):
        view = AxisView(ordinate, make_range(1, 6, 2).resolve(ordinate))
        with pytest.raises(LabelNotFoundError):
            view[2]
        assert 2 not in view
        assert view.get(2) is None

    def test_index_of_reverts_into_view(self, ordinate):
        view = AxisView(ordinate, make_range(1, 6, 2).resolve(ordinate))
        assert [view.index_of(label) for label in view.labels] == [0, 1, 2]

    def test_position_applies_slice(self, abscissa):
        view = AxisView(abscissa, PositionalSlice(Range(3, 5)))
        assert [view.position(i) for i in range(view.size())] == [3, 4, 5, 6, 7]
        assert view.label(0) == "f"

    def test_default_view_is_full(self, abscissa):
        view = AxisView(abscissa)
        assert view.islice == FullRange(abscissa.size())
        assert view == abscissa

    def test_view_beyond_axis_rejected(self, abscissa):
        with pytest.raises(ContractViolation):
            AxisView(abscissa, PositionalSlice(Range(6, 5)))

    def test_materialize(self, abscissa):
        view = AxisView(abscissa, make_range("f", "h").resolve(abscissa))
        axis = view.materialize()
        assert isinstance(axis, Axis)
        assert axis.labels == ["f", "g", "h"]
        assert axis["f"] == 0
