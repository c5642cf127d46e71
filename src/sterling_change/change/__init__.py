"""Change-making package.

Computes minimal-count decompositions of an integer amount into a set of
denomination values.
"""

from sterling_change.change.change_solver import (
    ChangeSolution,
    InvalidDenominationsError,
    NoExactChangeError,
    find_change,
    solve,
)

__all__ = ["ChangeSolution", "InvalidDenominationsError", "NoExactChangeError", "find_change", "solve"]
