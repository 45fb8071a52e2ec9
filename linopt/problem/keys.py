"""
Key construction for named, indexed rows and columns.

A key is the base name followed by the indices in parentheses, separated
by commas: ``key("x", 2, 3) == "x(2,3)"``. Without indices the key is the
bare name. Index values are rendered with ``str()``.

The key is the sole identity of a row or column, so names and index
values should not contain parentheses or commas themselves.
"""

from typing import Any


def key(name: str, *indices: Any) -> str:
    """
    Build the key for a row or column.

    Args:
        name: Base name.
        *indices: Index values, each rendered with str().

    Returns:
        The textual key.
    """
    if not indices:
        return str(name)
    return f"{name}({','.join(str(i) for i in indices)})"
