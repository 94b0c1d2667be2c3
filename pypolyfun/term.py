"""
Term representation module for PyPolyFun.

A term is a floating-point coefficient times a product of atoms, for example
``2.0a_1^3b``. The atoms of a term are always kept in canonical form:

* sorted ascending by ``(letter, subscript)``,
* no two atoms with the same letter and subscript (like atoms are merged by
  adding their powers),
* no atom with power 0.

Terms are read-only once constructed, so every Term is canonical.
"""

import bisect
import logging
import numbers
from typing import Any, Dict, Iterable, List, Tuple

from pypolyfun.atom import Atom
from pypolyfun.utils import lookup_value

_logger = logging.getLogger(__name__)


def is_canonical(atoms: Iterable[Atom]) -> bool:
    """Check whether an atom sequence is in canonical form.

    Args:
        atoms: Sequence of atoms to check

    Returns:
        True if the atoms are strictly increasing by key and none has power 0
    """
    previous = None
    for atom in atoms:
        if not isinstance(atom, Atom) or atom.is_zero_power():
            return False
        if previous is not None and not previous.is_less(atom):
            return False
        previous = atom
    return True


def _insert(atoms: List[Atom], atom: Atom) -> None:
    # atoms must already be canonical
    keys = [a.key for a in atoms]
    i = bisect.bisect_left(keys, atom.key)
    if i < len(atoms) and atoms[i].is_like(atom):
        merged = atoms[i].times_like(atom)
        if merged.is_zero_power():
            _logger.debug("Atoms %s and %s cancel", atoms[i], atom)
            del atoms[i]
        else:
            _logger.debug("Merged %s and %s into %s", atoms[i], atom, merged)
            atoms[i] = merged
    else:
        atoms.insert(i, atom)


def insert_atom(atoms: List[Atom], atom: Atom) -> List[Atom]:
    """Insert an atom into a canonical list of atoms, in place.

    The atom is placed by binary search on its ``(letter, subscript)`` key.
    If a like atom is already present the two are merged, and the merged
    atom is removed when its power comes out as 0. Inserting a power-0
    atom leaves the list unchanged.

    Example: inserting ``b^2`` into ``[a, b, d]`` gives ``[a, b^3, d]``;
    inserting ``c_1`` gives ``[a, b, c_1, d]``.

    Args:
        atoms: Canonical list of atoms, owned by the caller
        atom: Atom to insert

    Returns:
        The same list, still canonical

    Raises:
        TypeError: If ``atom`` is not an Atom
        ValueError: If ``atoms`` is not canonical
    """
    if not isinstance(atom, Atom):
        raise TypeError(f"Can only insert Atom objects, got {type(atom)}")
    if not is_canonical(atoms):
        raise ValueError(f"Cannot insert into non-canonical atom list {atoms!r}")
    if not atom.is_zero_power():
        _insert(atoms, atom)
    return atoms


def canonicalize(atoms: Iterable[Atom]) -> List[Atom]:
    """Build the canonical form of an arbitrary atom sequence.

    Zero-power atoms are discarded; every other atom is inserted in turn
    into an initially empty list.

    Args:
        atoms: Atoms in any order, possibly with duplicates

    Returns:
        A new canonical list of atoms

    Raises:
        TypeError: If ``atoms`` is None or contains something other than Atoms
    """
    if atoms is None:
        raise TypeError("Atom sequence must not be None")
    result: List[Atom] = []
    for atom in atoms:
        if not isinstance(atom, Atom):
            raise TypeError(f"Terms are built from Atom objects, got {type(atom)}")
        if not atom.is_zero_power():
            _insert(result, atom)
    return result


class Term:
    """A coefficient times a canonical product of atoms."""

    __slots__ = ("_coefficient", "_atoms")

    def __init__(self, coefficient: float = 1.0, atoms: Iterable[Atom] = ()):
        """Initialize a term.

        The atom sequence may be in any order and may contain like or
        zero-power atoms; it is copied and canonicalized here.

        Args:
            coefficient: Real coefficient of the term (default: 1.0)
            atoms: Atoms to multiply together (default: none, a constant)
        """
        if isinstance(coefficient, bool) or not isinstance(coefficient, numbers.Real):
            raise TypeError(f"Term coefficient must be a real number, got {type(coefficient)}")
        self._coefficient = float(coefficient)
        self._atoms: Tuple[Atom, ...] = tuple(canonicalize(atoms))

    @classmethod
    def _from_canonical(cls, coefficient: float, atoms: Tuple[Atom, ...]) -> "Term":
        term = cls.__new__(cls)
        term._coefficient = float(coefficient)
        term._atoms = atoms
        return term

    @classmethod
    def constant(cls, value: float) -> "Term":
        """Create a constant term (no atoms)."""
        return cls(value)

    @classmethod
    def from_atom(cls, atom: Atom) -> "Term":
        """Create a term with coefficient 1 and a single atom."""
        return cls(1.0, [atom])

    @classmethod
    def from_letter(cls, letter: str) -> "Term":
        return cls(1.0, [Atom(letter)])

    @property
    def coefficient(self) -> float:
        return self._coefficient

    @property
    def atoms(self) -> List[Atom]:
        """Copy of the canonical atom list."""
        return list(self._atoms)

    def reduce(self) -> "Term":
        """Return the canonical form of this term.

        Terms are canonicalized on construction, so this is the identity on
        values and ``t.reduce().reduce() == t.reduce()``.
        """
        return Term(self._coefficient, self._atoms)

    def place(self, atom: Atom) -> "Term":
        """Return a new term with one more atom multiplied in.

        Args:
            atom: Atom to place among this term's atoms

        Returns:
            New canonical Term with the same coefficient
        """
        atoms = insert_atom(list(self._atoms), atom)
        return Term._from_canonical(self._coefficient, tuple(atoms))

    def scale(self, scalar: float) -> "Term":
        """Multiply the coefficient by a scalar, leaving the atoms alone."""
        if isinstance(scalar, bool) or not isinstance(scalar, numbers.Real):
            raise TypeError(f"Can only scale a Term by a real number, got {type(scalar)}")
        return Term._from_canonical(self._coefficient * scalar, self._atoms)

    def multiply(self, other: "Term") -> "Term":
        """Multiply two terms.

        The atom sequences are concatenated and canonicalized again, which
        merges like atoms coming from either side.

        Args:
            other: Term to multiply by

        Returns:
            The canonical product

        Raises:
            TypeError: If ``other`` is not a Term
        """
        if not isinstance(other, Term):
            raise TypeError(f"Can only multiply a Term by a Term, got {type(other)}")
        return Term(self._coefficient * other._coefficient, self._atoms + other._atoms)

    def is_like(self, other: "Term") -> bool:
        """Check whether two terms have pairwise like atoms.

        Coefficients and powers are ignored: only the letters and subscripts
        of the canonical atoms are compared position by position.
        """
        if len(self._atoms) != len(other._atoms):
            return False
        return all(a.is_like(b) for a, b in zip(self._atoms, other._atoms))

    def has_same_atoms(self, other: "Term") -> bool:
        """Check whether two terms differ at most in their coefficient."""
        return self._atoms == other._atoms

    def equals(self, other: "Term") -> bool:
        """Check that coefficients and canonical atoms are identical."""
        if not isinstance(other, Term):
            return False
        return self._coefficient == other._coefficient and self._atoms == other._atoms

    def is_constant(self) -> bool:
        return not self._atoms

    def is_zero(self) -> bool:
        return self._coefficient == 0.0

    def degree(self) -> int:
        """Get the total degree of the term (sum of atom powers)."""
        return sum(atom.power for atom in self._atoms)

    def sort_key(self) -> Tuple[int, float, str, str]:
        """Key realizing the order of :meth:`compare`."""
        if self.is_constant():
            return (1, self._coefficient, "", "")
        rendered = self._render_atoms()
        return (0, 0.0, rendered.casefold(), rendered)

    def compare(self, other: "Term") -> int:
        """Compare two terms for display order.

        Constants compare by value and come after every term with atoms.
        Terms with atoms compare by the rendering of their atoms, ignoring
        case first and the coefficient entirely.

        Args:
            other: Term to compare with

        Returns:
            -1, 0 or 1
        """
        mine, theirs = self.sort_key(), other.sort_key()
        return (mine > theirs) - (mine < theirs)

    def evaluate(self, values: Dict[Any, complex]) -> complex:
        """Evaluate the term at specific atom values.

        Args:
            values: Dict mapping atoms to their values. Keys may be Atom
                objects, ``(letter, subscript)`` tuples or rendered names
                such as ``"a_1"``.

        Returns:
            The evaluated value of the term
        """
        result = self._coefficient
        for atom in self._atoms:
            result *= lookup_value(values, atom) ** atom.power
        return result

    def _render_atoms(self) -> str:
        return "".join(str(atom) for atom in self._atoms)

    def __str__(self) -> str:
        if self._coefficient == 0:
            return ""
        if not self._atoms:
            return str(self._coefficient)
        if self._coefficient == 1:
            coef_str = ""
        elif self._coefficient == -1:
            coef_str = "-"
        else:
            coef_str = str(self._coefficient)
        return f"{coef_str}{self._render_atoms()}"

    def __repr__(self) -> str:
        return f"Term({self._coefficient!r}, {list(self._atoms)!r})"

    def __eq__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return self.equals(other)

    def __hash__(self):
        return hash((self._coefficient, self._atoms))

    def __lt__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return self.compare(other) < 0

    def __mul__(self, other: Any):
        """Multiply the term by a term, an atom or a number."""
        if isinstance(other, Term):
            return self.multiply(other)
        elif isinstance(other, Atom):
            return self.place(other)
        elif isinstance(other, (int, float)) and not isinstance(other, bool):
            return self.scale(other)
        else:
            return NotImplemented

    def __rmul__(self, other: Any):
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __neg__(self) -> "Term":
        return self.scale(-1)

    def __add__(self, other: Any):
        """Add the term to another object, giving a polynomial."""
        from pypolyfun.polynomial import Polynomial

        if isinstance(other, (Term, Atom, int, float)):
            return Polynomial([self, other])
        return NotImplemented

    def __radd__(self, other: Any):
        from pypolyfun.polynomial import Polynomial

        if isinstance(other, (Atom, int, float)):
            return Polynomial([other, self])
        return NotImplemented

    def __sub__(self, other: Any):
        """Subtract another object from the term, giving a polynomial."""
        from pypolyfun.polynomial import Polynomial

        if isinstance(other, (Term, Atom, int, float)):
            return Polynomial([self]) - other
        return NotImplemented

    def __rsub__(self, other: Any):
        from pypolyfun.polynomial import Polynomial

        if isinstance(other, (Atom, int, float)):
            return Polynomial([other, -self])
        return NotImplemented
