"""
Tests for table access and calculation helpers.
"""

import numpy as np
import pandas as pd
import pytest

from survey_design import (
    ColumnNotFoundError,
    DesignError,
    DimensionMismatchError,
    InconsistentDesignError,
    MissingParametersError,
)
from survey_design.scripts.calc_utils import (
    common_value,
    is_equal_weighted,
    reciprocal,
    round_population_size,
)
from survey_design.scripts.table_utils import (
    get_column,
    row_count,
    set_column,
    to_numeric_vector,
)


class TestTableUtils:
    def test_row_count(self, make_table):
        assert row_count(make_table(7)) == 7
        assert row_count(pd.DataFrame()) == 0

    def test_get_column(self, make_table):
        values = get_column(make_table(3, w=[1, 2, 3]), "w")
        assert values.dtype == float
        np.testing.assert_array_equal(values, [1.0, 2.0, 3.0])

    def test_get_missing_column(self, make_table):
        with pytest.raises(ColumnNotFoundError, match="Available columns"):
            get_column(make_table(3), "w")

    def test_set_column(self, make_table):
        table = make_table(3)
        set_column(table, "weights", [4.0, 4.0, 4.0])
        np.testing.assert_array_equal(table["weights"], [4.0, 4.0, 4.0])

    def test_set_column_length_mismatch(self, make_table):
        table = make_table(3)
        with pytest.raises(DimensionMismatchError, match="has 3 rows"):
            set_column(table, "weights", [1.0, 1.0])
        assert "weights" not in table.columns

    def test_to_numeric_vector(self):
        np.testing.assert_array_equal(to_numeric_vector(pd.Series([1, 2]), "x"), [1.0, 2.0])
        np.testing.assert_array_equal(to_numeric_vector(5, "x"), [5.0])

    def test_to_numeric_vector_rejects_matrix(self):
        with pytest.raises(DesignError, match="one-dimensional"):
            to_numeric_vector([[1, 2], [3, 4]], "weights")


class TestCalcUtils:
    @pytest.mark.parametrize(
        "values,expected",
        [([2, 2, 2], True), ([1, 1, 2], False), ([], True), ([np.nan], False)],
    )
    def test_is_equal_weighted(self, values, expected):
        assert is_equal_weighted(np.asarray(values, dtype=float)) is expected

    def test_common_value(self):
        assert common_value(np.array([4.0, 4.0]), "weights", "sampling weights") == 4.0

    def test_common_value_names_argument(self):
        with pytest.raises(InconsistentDesignError, match="sampling weights detected in weights"):
            common_value(np.array([1.0, 3.0]), "weights", "sampling weights")

    def test_common_value_empty(self):
        with pytest.raises(MissingParametersError, match="empty probs"):
            common_value(np.array([]), "probs", "sampling probabilities")

    def test_reciprocal(self):
        np.testing.assert_array_equal(reciprocal([2, 4, 0]), [0.5, 0.25, np.inf])

    @pytest.mark.parametrize("value,expected", [(19.6, 20), (20.5, 20), (21.5, 22), (1, 1)])
    def test_round_population_size(self, value, expected):
        assert round_population_size(value) == expected

    @pytest.mark.parametrize("value", [0.2, 0, -3, np.inf, np.nan])
    def test_round_population_size_invalid(self, value):
        with pytest.raises(InconsistentDesignError):
            round_population_size(value)
