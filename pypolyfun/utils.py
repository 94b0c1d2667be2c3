"""
Utility functions for PyPolyFun.

This module provides value lookup and numeric evaluation helpers used
across the library.
"""

import numpy as np
from typing import Any, Dict, List, Sequence

from pypolyfun.atom import Atom


def lookup_value(values: Dict[Any, complex], atom: Atom) -> complex:
    """Find the value assigned to an atom, ignoring its power.

    Keys are tried in this order: the ``(letter, subscript)`` tuple, a
    first-power Atom with the same letter and subscript, and the rendered
    name (``"a"`` or ``"a_1"``).

    Args:
        values: Dict mapping atoms to their values
        atom: Atom whose value is needed

    Returns:
        The value for the atom

    Raises:
        KeyError: If no value is given for the atom
    """
    base = Atom(atom.letter, atom.subscript)
    for key in (atom.key, base, str(base)):
        if key in values:
            return values[key]
    raise KeyError(f"No value given for atom {base}")


def point_to_values(keys: Sequence[Any], point: Sequence[complex]) -> Dict[Any, complex]:
    """Zip a list of atom keys with the coordinates of a point."""
    if len(keys) != len(point):
        raise ValueError(f"Expected {len(keys)} coordinates, got {len(point)}")
    return {key: val for key, val in zip(keys, point)}


def evaluate_at_points(expr: Any,
                       keys: Sequence[Any],
                       points: Sequence[Sequence[complex]],
                       dtype: Any = complex,
                       verbose: bool = False) -> np.ndarray:
    """Evaluate a term or polynomial at many points.

    Args:
        expr: Term or Polynomial to evaluate
        keys: Atom keys naming the coordinates of each point
        points: Points to evaluate at, one coordinate per key
        dtype: Numpy dtype of the result (default: complex)
        verbose: Whether to print progress information

    Returns:
        Array with one value per point
    """
    results: List[complex] = []
    for point in points:
        results.append(expr.evaluate(point_to_values(keys, point)))

    if verbose:
        print(f"Evaluated {expr} at {len(results)} points")

    return np.array(results, dtype=dtype)
