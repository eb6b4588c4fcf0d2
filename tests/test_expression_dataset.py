"""Tests for figcomposer.fig.expression and figcomposer.fig.dataset."""

import numpy as np
import pytest

from figcomposer.fig.dataset import DataSet, DataSetFormat, is_valid_id
from figcomposer.fig.errors import ExpressionError, ParseError, ValidationError
from figcomposer.fig.expression import evaluate, parse


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

class TestParse:

    def test_caret_is_power(self):
        y = evaluate(parse("x^2"), [1.0, 2.0, 3.0])
        np.testing.assert_allclose(y, [1.0, 4.0, 9.0])

    def test_functions_and_constants(self):
        y = evaluate(parse("2*sin(pi*x) + pow(x, 2)"), [0.5])
        np.testing.assert_allclose(y, [2.25])

    def test_empty(self):
        with pytest.raises(ParseError):
            parse("   ")

    def test_syntax_error(self):
        with pytest.raises(ParseError):
            parse("sin(")

    @pytest.mark.parametrize("expr", [
        "y + 1",
        "__import__('os')",
        "x.real",
        "sin(x, 2)",
        "'a'",
        "x if x else 1",
        "[x]",
    ])
    def test_rejected_constructs(self, expr):
        with pytest.raises(ValidationError):
            parse(expr)

    def test_oversized_integer_literal(self):
        with pytest.raises(ValidationError):
            parse("1" + "0" * 400)

    def test_errors_share_base(self):
        assert issubclass(ParseError, ExpressionError)
        assert issubclass(ValidationError, ExpressionError)


class TestEvaluate:

    def test_constant_broadcasts(self):
        y = evaluate(parse("3"), np.arange(4.0))
        np.testing.assert_array_equal(y, [3.0, 3.0, 3.0, 3.0])

    def test_invalid_points_are_nan(self):
        y = evaluate(parse("sqrt(x)"), [-1.0, 4.0])
        assert np.isnan(y[0])
        assert y[1] == 2.0

    def test_scalar(self):
        assert float(evaluate(parse("x + 1"), 2.0)) == 3.0

    def test_negative_integer_power(self):
        y = evaluate(parse("2^-1*x"), [1.0, 4.0])
        np.testing.assert_allclose(y, [0.5, 2.0])


# ---------------------------------------------------------------------------
# Data sets
# ---------------------------------------------------------------------------

class TestDataSet:

    def test_ids(self):
        assert is_valid_id("trial_1")
        assert not is_valid_id("")
        assert not is_valid_id("has space")
        assert not is_valid_id("x" * 41)

    def test_invalid_id_raises(self):
        with pytest.raises(ValueError):
            DataSet("bad id", DataSetFormat.PTSET)

    def test_breadth_checked_against_format(self):
        with pytest.raises(ValueError):
            DataSet("d", DataSetFormat.XYZSET, [[1, 2]])
        with pytest.raises(ValueError):
            DataSet("d", DataSetFormat.PTSET, np.zeros((2, 7)))

    def test_one_dimensional_is_single_column(self):
        ds = DataSet("s", DataSetFormat.SERIES, [1, 2, 3])
        assert (ds.length, ds.breadth) == (3, 1)

    def test_empty_default(self):
        ds = DataSet("e", DataSetFormat.MSET)
        assert ds.length == 0
        assert ds.breadth == 2

    @pytest.mark.parametrize("fmt, shape, groups", [
        (DataSetFormat.MSET, (4, 3), 2),
        (DataSetFormat.MSERIES, (4, 3), 3),
        (DataSetFormat.PTSET, (4, 2), 1),
    ])
    def test_num_data_groups(self, fmt, shape, groups):
        assert DataSet("d", fmt, np.zeros(shape)).num_data_groups() == groups

    def test_with_id_copies(self):
        ds = DataSet("a", DataSetFormat.PTSET, [[1, 2]])
        other = ds.with_id("b")
        other.data[0, 0] = 9
        assert other.id == "b"
        assert ds.data[0, 0] == 1

    def test_summary(self):
        ds = DataSet("a", DataSetFormat.MSET, np.zeros((3, 3)))
        assert ds.summary() == "mset 3x3"
