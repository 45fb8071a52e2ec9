"""
Unit tests for engine independent translation.

Test Coverage:
    - Bound kind classification
    - Numbering in key order, objective excluded
    - Numbering independent of declaration order
    - Matrix flattening into triples and objective pairs
"""

import pytest

from linopt import ColumnType, Direction, Problem
from linopt.solvers import (
    BoundKind,
    assign_numbers,
    classify_bounds,
    flatten_matrix,
)


class TestClassifyBounds:
    """Tests for classify_bounds()."""

    @pytest.mark.parametrize(
        "lower, upper, kind",
        [
            (None, None, BoundKind.FREE),
            (0.0, None, BoundKind.LOWER),
            (None, 5.0, BoundKind.UPPER),
            (3.0, 3.0, BoundKind.FIXED),
            (2.0, 3.0, BoundKind.RANGED),
            (-1.0, 0.0, BoundKind.RANGED),
        ],
    )
    def test_classification(self, lower, upper, kind):
        """Test each bound combination maps to its kind."""
        assert classify_bounds(lower, upper) is kind

    def test_round_trip_through_column(self):
        """Test bounds stored on a column classify as given."""
        p = Problem()
        cases = {
            "free": ((None, None), BoundKind.FREE),
            "lower": ((1.0, None), BoundKind.LOWER),
            "upper": ((None, 4.0), BoundKind.UPPER),
            "fixed": ((2.0, 2.0), BoundKind.FIXED),
        }
        for name, ((lower, upper), kind) in cases.items():
            column = p.column(name).bounds(lower, upper)
            assert (column.lower_bound, column.upper_bound) == (lower, upper)
            assert classify_bounds(column.lower_bound, column.upper_bound) is kind


class TestAssignNumbers:
    """Tests for assign_numbers()."""

    def test_columns_numbered_in_key_order(self):
        """Test columns are numbered from 1 in key order."""
        p = Problem()
        for name in ["c", "a", "b"]:
            p.column(name)
        columns, _ = assign_numbers(p)
        assert [(c.key, c.number) for c in columns] == [("a", 1), ("b", 2), ("c", 3)]

    def test_objective_excluded_from_rows(self):
        """Test the objective gets no row number."""
        p = Problem()
        p.row("z")
        objective = p.objective("m", Direction.MINIMIZE)
        p.row("a")
        _, rows = assign_numbers(p)
        assert [(r.key, r.number) for r in rows] == [("a", 1), ("z", 2)]
        assert objective not in rows

    def test_numbering_is_independent_of_declaration_order(self):
        """Test numbering ignores declaration order."""
        entries = [("x", (1, 0)), ("x", (0, 1)), ("u", (1,)), ("u", (0,)), ("y", ())]
        rows = [("stock", (1,)), ("demand", (0,)), ("stock", (0,))]

        forward = Problem()
        for name, indices in entries:
            forward.column(name, *indices)
        for name, indices in rows:
            forward.row(name, *indices)

        backward = Problem()
        for name, indices in reversed(rows):
            backward.row(name, *indices)
        for name, indices in reversed(entries):
            backward.column(name, *indices)

        f_columns, f_rows = assign_numbers(forward)
        b_columns, b_rows = assign_numbers(backward)
        assert [(c.key, c.number) for c in f_columns] == [(c.key, c.number) for c in b_columns]
        assert [(r.key, r.number) for r in f_rows] == [(r.key, r.number) for r in b_rows]

    def test_renumbering_is_stable(self, cutting_stock_problem):
        """Test numbering twice gives the same result."""
        first = [(c.key, c.number) for c in assign_numbers(cutting_stock_problem)[0]]
        second = [(c.key, c.number) for c in assign_numbers(cutting_stock_problem)[0]]
        assert first == second


class TestFlattenMatrix:
    """Tests for flatten_matrix()."""

    @pytest.fixture
    def small_problem(self):
        p = Problem()
        p.column("a").type(ColumnType.FLOAT)
        p.column("b").type(ColumnType.FLOAT)
        p.objective("obj", Direction.MAXIMIZE).add(2.0, "a").add(3.0, "b")
        p.row("r2").bounds(None, 4.0).add(1.0, "b")
        p.row("r1").bounds(1.0, None).add(1.0, "a").add(-1.0, "b")
        p.row("free")
        return p

    def test_triples(self, small_problem):
        """Test constraint coefficients become row, column, value triples."""
        assign_numbers(small_problem)
        triples = flatten_matrix(small_problem)
        # rows: free=1, r1=2, r2=3; columns: a=1, b=2
        assert triples.row_numbers.tolist() == [2, 2, 3]
        assert triples.column_numbers.tolist() == [1, 2, 2]
        assert triples.values.tolist() == [1.0, -1.0, 1.0]
        assert triples.size == 3

    def test_objective_pairs(self, small_problem):
        """Test objective coefficients become column, value pairs."""
        assign_numbers(small_problem)
        triples = flatten_matrix(small_problem)
        assert triples.objective == [(1, 2.0), (2, 3.0)]

    def test_row_entries(self, small_problem):
        """Test looking up the entries of one row."""
        _, rows = assign_numbers(small_problem)
        triples = flatten_matrix(small_problem)
        columns, values = triples.row_entries(2)
        assert columns.tolist() == [1, 2]
        assert values.tolist() == [1.0, -1.0]
        columns, values = triples.row_entries(1)
        assert columns.size == 0
        assert values.size == 0

    def test_empty_problem(self):
        """Test flattening a problem without rows."""
        p = Problem()
        assign_numbers(p)
        triples = flatten_matrix(p)
        assert triples.size == 0
        assert triples.objective == []

    def test_cutting_stock_nonzeros(self, cutting_stock_problem):
        """Test the nonzero count of the cutting stock fixture."""
        assign_numbers(cutting_stock_problem)
        triples = flatten_matrix(cutting_stock_problem)
        # stock rows: 7 * (1 + 3), demand rows: 3 * 7
        assert triples.size == 28 + 21
        assert len(triples.objective) == 28
