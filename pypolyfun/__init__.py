"""
PyPolyFun: A pure Python kernel for polynomial terms over symbolic atoms.

This library provides canonical atoms (``letter_subscript^power``) and terms
(a coefficient times a product of atoms), with the merging, multiplication,
equality and ordering rules a polynomial type needs to combine and sort its
terms.
"""

__version__ = "1.1.0"

# Import from atom module
from pypolyfun.atom import (
    atomvar,
    Atom
)

# Import from term module
from pypolyfun.term import (
    Term,
    insert_atom,
    canonicalize,
    is_canonical
)

# Import from other modules as needed
from pypolyfun.polynomial import Polynomial, ZERO_TOLERANCE
from pypolyfun.utils import evaluate_at_points

__all__ = [
    "atomvar",
    "Atom",
    "Term",
    "insert_atom",
    "canonicalize",
    "is_canonical",
    "Polynomial",
    "ZERO_TOLERANCE",
    "evaluate_at_points",
]
