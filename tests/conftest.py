"""
Pytest configuration and fixtures for linopt tests.
"""

import pytest
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from linopt import ColumnType, Direction, Problem  # noqa: E402


def build_cutting_stock(stock, product, demand):
    """Cutting stock problem minimizing total waste."""
    p = Problem("CuttingStock")

    for i in range(len(stock)):
        # u(i) : stock element i is used
        p.column("u", i).type(ColumnType.BINARY)
        for j in range(len(product)):
            # x(i,j) : pieces of product j cut from stock i
            p.column("x", i, j).type(ColumnType.INTEGER).bounds(0.0, None)

    p.objective("waste", Direction.MINIMIZE)
    for i in range(len(stock)):
        p.objective().add(stock[i], "u", i)
        for j in range(len(product)):
            p.objective().add(-product[j], "x", i, j)

    for i in range(len(stock)):
        p.row("stock", i).bounds(0.0, None).add(stock[i], "u", i)
        for j in range(len(product)):
            p.row("stock", i).add(-product[j], "x", i, j)

    for j in range(len(product)):
        p.row("demand", j).bounds(demand[j], demand[j])
        for i in range(len(stock)):
            p.row("demand", j).add(1.0, "x", i, j)

    return p


@pytest.fixture
def trivial_problem():
    """Minimize C subject to 2 <= C <= 3."""
    p = Problem("Trivial")
    p.column("C").type(ColumnType.FLOAT)
    p.objective("obj", Direction.MINIMIZE).add(1.0, "C")
    p.row("R").bounds(2.0, 3.0).add(1.0, "C")
    return p


@pytest.fixture
def cutting_stock_problem():
    """Small cutting stock instance with a minimal waste of 32."""
    return build_cutting_stock(
        stock=[50, 50, 100, 100, 100, 200, 200],
        product=[6, 10, 16],
        demand=[20, 10, 3],
    )
