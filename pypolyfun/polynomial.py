"""
Polynomial representation module for PyPolyFun.

This module provides a polynomial type built as a sum of canonical terms.
"""

import logging
from typing import Any, Dict, List, Set, Tuple, Union

from pypolyfun.atom import Atom
from pypolyfun.term import Term

_logger = logging.getLogger(__name__)

# Combined coefficients at or below this magnitude count as cancelled
ZERO_TOLERANCE = 1e-15


class Polynomial:
    """Representation of a sum of terms."""

    def __init__(self, terms: List[Union[Term, Atom, int, float]], tol: float = ZERO_TOLERANCE):
        """Initialize a polynomial from a list of terms.

        Args:
            terms: Terms, atoms or plain numbers to add up
            tol: Magnitude below which a combined coefficient is dropped
        """
        processed_terms = []
        for term in terms:
            if isinstance(term, Term):
                processed_terms.append(term)
            elif isinstance(term, Atom):
                processed_terms.append(Term.from_atom(term))
            elif isinstance(term, (int, float)) and not isinstance(term, bool):
                processed_terms.append(Term.constant(term))
            else:
                raise TypeError(f"Unsupported term type: {type(term)}")

        self.tol = tol
        # Combine like terms immediately upon initialization
        self.terms = self._combine_like_terms(processed_terms)

    def _combine_like_terms(self, terms: List[Term]) -> List[Term]:
        """Combine terms with the same canonical atoms."""
        term_dict: Dict[Tuple[Atom, ...], float] = {}

        for term in terms:
            atom_key = tuple(term.atoms)
            term_dict[atom_key] = term_dict.get(atom_key, 0.0) + term.coefficient

        combined_terms = []
        for atom_key, coef in term_dict.items():
            if abs(coef) > self.tol:
                combined_terms.append(Term(coef, atom_key))
            else:
                _logger.debug("Dropped cancelled term in %s",
                              "".join(str(atom) for atom in atom_key) or "constant")

        combined_terms.sort(key=Term.sort_key)
        return combined_terms

    def __repr__(self) -> str:
        if not self.terms:
            return "0"

        term_strs: List[str] = []
        for i, term in enumerate(self.terms):
            if i == 0:
                term_strs.append(str(term))
            elif term.coefficient > 0:
                term_strs.append(f"+ {term}")
            else:
                # "-2.0ab" becomes "- 2.0ab"
                s = str(term)
                assert s.startswith("-"), "unexpected repr for negative term"
                term_strs.append(f"- {s[1:]}")

        return " ".join(term_strs)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.terms == other.terms

    def __hash__(self):
        return hash(tuple(self.terms))

    def is_zero(self) -> bool:
        return not self.terms

    def degree(self) -> int:
        """Get the maximum degree of any term in the polynomial."""
        if not self.terms:
            return 0
        return max(term.degree() for term in self.terms)

    def atoms(self) -> Set[Atom]:
        """Get the set of first-power atoms appearing in the polynomial."""
        atom_set = set()
        for term in self.terms:
            atom_set.update(Atom(a.letter, a.subscript) for a in term.atoms)
        return atom_set

    def constant_term(self) -> float:
        """Get the coefficient of the constant term, or 0.0."""
        for term in self.terms:
            if term.is_constant():
                return term.coefficient
        return 0.0

    def evaluate(self, values: Dict[Any, complex]) -> complex:
        """Evaluate the polynomial at specific atom values.

        Args:
            values: Dict mapping atoms to their values (see Term.evaluate)

        Returns:
            The evaluated value of the polynomial
        """
        return sum(term.evaluate(values) for term in self.terms)

    def _as_terms(self, other: Any) -> List[Term]:
        if isinstance(other, Polynomial):
            return list(other.terms)
        if isinstance(other, Term):
            return [other]
        if isinstance(other, Atom):
            return [Term.from_atom(other)]
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return [Term.constant(other)]
        return None

    def __add__(self, other: Any) -> "Polynomial":
        """Add another object to the polynomial."""
        terms = self._as_terms(other)
        if terms is None:
            return NotImplemented
        return Polynomial(self.terms + terms, tol=self.tol)

    def __radd__(self, other: Any) -> "Polynomial":
        """Handle addition when the polynomial is on the right."""
        return self + other

    def __neg__(self) -> "Polynomial":
        return Polynomial([-term for term in self.terms], tol=self.tol)

    def __sub__(self, other: Any) -> "Polynomial":
        """Subtract another object from the polynomial."""
        terms = self._as_terms(other)
        if terms is None:
            return NotImplemented
        return Polynomial(self.terms + [-term for term in terms], tol=self.tol)

    def __rsub__(self, other: Any) -> "Polynomial":
        """Handle subtraction when the polynomial is on the right."""
        terms = self._as_terms(other)
        if terms is None:
            return NotImplemented
        return Polynomial(terms + [-term for term in self.terms], tol=self.tol)

    def __mul__(self, other: Any) -> "Polynomial":
        """Multiply the polynomial by another object."""
        terms = self._as_terms(other)
        if terms is None:
            return NotImplemented
        result_terms = []
        for term1 in self.terms:
            for term2 in terms:
                result_terms.append(term1.multiply(term2))
        return Polynomial(result_terms, tol=self.tol)

    def __rmul__(self, other: Any) -> "Polynomial":
        """Handle multiplication when the polynomial is on the right."""
        return self * other

    def __pow__(self, exponent: int) -> "Polynomial":
        """Raise the polynomial to a power.

        Args:
            exponent: Non-negative integer exponent

        Returns:
            The polynomial raised to the given power
        """
        if not isinstance(exponent, int) or isinstance(exponent, bool) or exponent < 0:
            raise ValueError("Exponent must be a non-negative integer")

        result = Polynomial([1], tol=self.tol)
        base = Polynomial(self.terms, tol=self.tol)
        # Binary exponentiation
        while exponent > 0:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1

        return result
