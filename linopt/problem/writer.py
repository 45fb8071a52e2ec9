"""
Human readable listing of a Problem.

One declaration per column, the objective, then one line per constraint,
each in key order. The output is meant for inspection only and cannot be
read back.

Example:
    >>> from linopt import Problem, ColumnType, Direction
    >>> p = Problem("Trivial")
    >>> _ = p.column("C").type(ColumnType.FLOAT)
    >>> _ = p.objective("obj", Direction.MINIMIZE).add(1.0, "C")
    >>> _ = p.row("R").bounds(2.0, 3.0).add(1.0, "C")
    >>> print(problem_to_string(p))
    \\* Trivial *\\
    var C;
    minimize obj: + 1 * C;
    s.t. R: 2 <= + 1 * C <= 3;
    end;
"""

from typing import Dict, List, Optional

from .problem import Column, ColumnType, Problem, Row

_TYPE_SUFFIX = {
    ColumnType.INTEGER: ", integer",
    ColumnType.BINARY: ", binary",
}


def format_number(value: float) -> str:
    """Format a number, dropping the decimal part of integral values."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_terms(coefficients: Dict[Column, float]) -> str:
    """Format a linear expression as ``+ c * key - c * key ...``."""
    if not coefficients:
        return "0"
    terms = []
    for column, value in coefficients.items():
        sign = "-" if value < 0 else "+"
        terms.append(f"{sign} {format_number(abs(value))} * {column.key}")
    return " ".join(terms)


def _bound_clauses(lower: Optional[float], upper: Optional[float]) -> List[str]:
    if lower is not None and upper is not None and lower == upper:
        return [f"= {format_number(lower)}"]
    clauses = []
    if lower is not None:
        clauses.append(f">= {format_number(lower)}")
    if upper is not None:
        clauses.append(f"<= {format_number(upper)}")
    return clauses


def format_column(column: Column) -> str:
    parts = [f"var {column.key}"]
    suffix = _TYPE_SUFFIX.get(column.column_type)
    if suffix:
        parts.append(suffix)
    for clause in _bound_clauses(column.lower_bound, column.upper_bound):
        parts.append(f", {clause}")
    return "".join(parts) + ";"


def format_row(row: Row, coefficients: Dict[Column, float]) -> str:
    terms = format_terms(coefficients)
    lower, upper = row.lower_bound, row.upper_bound
    if lower is not None and upper is not None and lower != upper:
        return f"s.t. {row.key}: {format_number(lower)} <= {terms} <= {format_number(upper)};"
    clauses = _bound_clauses(lower, upper)
    if clauses:
        return f"s.t. {row.key}: {terms} {' '.join(clauses)};"
    return f"s.t. {row.key}: {terms};"


def problem_to_string(problem: Problem) -> str:
    """
    Render the whole problem.

    Args:
        problem: Problem to render.

    Returns:
        Newline separated listing terminated by ``end;``.
    """
    lines = []
    if problem.name:
        lines.append(f"\\* {problem.name} *\\")

    for column in problem.columns:
        lines.append(format_column(column))

    matrix = problem.matrix
    objective = problem.objective()
    if objective is not None:
        direction = getattr(objective.direction, "value", objective.direction)
        lines.append(
            f"{direction} {objective.key}: "
            f"{format_terms(matrix[objective])};"
        )

    for row, coefficients in matrix.items():
        if row is objective:
            continue
        lines.append(format_row(row, coefficients))

    lines.append("end;")
    return "\n".join(lines)
