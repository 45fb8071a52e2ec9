#!/usr/bin/env python3
"""
Cutting Stock Demo

Solves a small cutting stock problem: cut products of given lengths from
stock items so that demand is met and the total waste is minimal. For
problems of realistic size column generation should be used instead.

Model:
    u(i)    binary, stock item i is used
    x(i,j)  integer >= 0, pieces of product j cut from stock item i
    minimize  sum( stock(i) * u(i) ) - sum( product(j) * x(i,j) )
    s.t.      stock(i) * u(i) - sum( product(j) * x(i,j) ) >= 0
              sum( x(i,j) over i ) = demand(j)

Usage:
    python demo/cutting_stock.py
"""

import logging

from linopt import ColumnType, Direction, Problem
from linopt.solvers import GurobiSolver
from linopt.utils import SolverConfigLoader

COLUMN_USE = "u"
COLUMN_CUT = "x"
OBJECTIVE = "waste"
PROBLEM = "CuttingStock"
ROW_DEMAND = "demand"
ROW_STOCK = "stock"

# lengths of stock items
STOCK = [50, 50, 100, 100, 100, 200, 200]
# lengths of sales products
PRODUCT = [6, 10, 16, 25, 40, 63]
# demand per sales product
DEMAND = [20, 10, 3, 7, 2, 1]


def create_problem(stock, product, demand):
    """Build the cutting stock problem."""
    p = Problem(PROBLEM)

    # Columns
    for i in range(len(stock)):
        p.column(COLUMN_USE, i).type(ColumnType.BINARY)
        for j in range(len(product)):
            p.column(COLUMN_CUT, i, j).type(ColumnType.INTEGER).bounds(0.0, None)

    # Objective: minimize waste
    objective = p.objective(OBJECTIVE, Direction.MINIMIZE)
    for i in range(len(stock)):
        objective.add(stock[i], COLUMN_USE, i)
        for j in range(len(product)):
            objective.add(-product[j], COLUMN_CUT, i, j)

    # Stock capacity
    for i in range(len(stock)):
        row = p.row(ROW_STOCK, i).bounds(0.0, None).add(stock[i], COLUMN_USE, i)
        for j in range(len(product)):
            row.add(-product[j], COLUMN_CUT, i, j)

    # Demand
    for j in range(len(product)):
        row = p.row(ROW_DEMAND, j).bounds(demand[j], demand[j])
        for i in range(len(stock)):
            row.add(1.0, COLUMN_CUT, i, j)

    return p


def print_plan(p, stock, product):
    """Print which products are cut from which stock item."""
    print("Production plan")
    for i in range(len(stock)):
        terms = [
            f"{p.column(COLUMN_CUT, i, j).value:g} * {product[j]}"
            for j in range(len(product))
            if p.column(COLUMN_CUT, i, j).value > 0.5
        ]
        if terms:
            print(f"{stock[i]} >= " + " + ".join(terms))
    print(f"Waste = {p.objective().value:g}")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    p = create_problem(STOCK, PRODUCT, DEMAND)
    print(p.to_string())
    print()

    solver = GurobiSolver.from_config(SolverConfigLoader().get_solver_config())
    if not solver.solve(p):
        print(f"No solution found ({solver.state.status.value}).")
        return
    print_plan(p, STOCK, PRODUCT)


if __name__ == "__main__":
    main()
