"""
Atom representation module for PyPolyFun.

An atom is a single symbolic factor such as ``a``, ``b_2`` or ``x_1^3``:
a letter, a non-negative subscript and an integer power.
"""

import numbers
from typing import Any, Tuple, Union


class Atom:
    """A single symbolic factor ``letter_subscript^power``."""

    __slots__ = ("_letter", "_subscript", "_power")

    def __init__(self, letter: str, subscript: int = 0, power: int = 1):
        """Initialize an atom.

        Args:
            letter: Single alphabetic character naming the atom
            subscript: Non-negative discriminator, 0 means no subscript
            power: Integer exponent (default: 1)

        Raises:
            TypeError: If a field has the wrong type
            ValueError: If the letter is not a single alphabetic character
                or the subscript is negative
        """
        if not isinstance(letter, str):
            raise TypeError(f"Atom letter must be a str, got {type(letter)}")
        if len(letter) != 1 or not letter.isalpha():
            raise ValueError(f"Atom letter must be a single alphabetic character, got {letter!r}")
        if isinstance(subscript, bool) or not isinstance(subscript, numbers.Integral):
            raise TypeError(f"Atom subscript must be an integer, got {type(subscript)}")
        if subscript < 0:
            raise ValueError(f"Atom subscript must be non-negative, got {subscript}")
        if isinstance(power, bool) or not isinstance(power, numbers.Integral):
            raise TypeError(f"Atom power must be an integer, got {type(power)}")

        self._letter = letter
        self._subscript = int(subscript)
        self._power = int(power)

    @property
    def letter(self) -> str:
        return self._letter

    @property
    def subscript(self) -> int:
        return self._subscript

    @property
    def power(self) -> int:
        return self._power

    @property
    def key(self) -> Tuple[str, int]:
        """Ordering key ``(letter, subscript)``; the power is not part of it."""
        return (self._letter, self._subscript)

    def is_less(self, other: "Atom") -> bool:
        """Check whether this atom sorts strictly before another one."""
        return self.key < other.key

    def is_like(self, other: "Atom") -> bool:
        """Check whether two atoms share letter and subscript.

        Powers are ignored, so ``a^2`` is like ``a^5`` but not like ``a_1``.
        """
        return self._letter == other._letter and self._subscript == other._subscript

    def times_like(self, other: "Atom") -> "Atom":
        """Multiply two like atoms by adding their powers.

        Args:
            other: An atom like this one

        Returns:
            A new Atom with the same letter and subscript

        Raises:
            ValueError: If the atoms are not like each other
        """
        if not self.is_like(other):
            raise ValueError(f"Cannot merge unlike atoms {self} and {other}")
        return Atom(self._letter, self._subscript, self._power + other._power)

    def is_zero_power(self) -> bool:
        return self._power == 0

    def __eq__(self, other):
        if not isinstance(other, Atom):
            return NotImplemented
        return (self._letter, self._subscript, self._power) == \
            (other._letter, other._subscript, other._power)

    def __hash__(self):
        return hash((self._letter, self._subscript, self._power))

    def __lt__(self, other):
        # Key order only, so sorted() yields canonical atom order
        if not isinstance(other, Atom):
            return NotImplemented
        return self.is_less(other)

    def __str__(self) -> str:
        s = self._letter
        if self._subscript != 0:
            s += f"_{self._subscript}"
        if self._power != 1:
            s += f"^{self._power}"
        return s

    def __repr__(self) -> str:
        return f"Atom({self._letter!r}, {self._subscript}, {self._power})"

    def __mul__(self, other: Any):
        """Multiply the atom by another atom, a term or a number."""
        from pypolyfun.term import Term

        if isinstance(other, (Atom, Term, int, float)):
            return Term.from_atom(self) * other
        return NotImplemented

    def __rmul__(self, other: Any):
        """Handle multiplication when the atom is on the right."""
        from pypolyfun.term import Term

        if isinstance(other, (int, float)):
            return Term.from_atom(self).scale(other)
        return NotImplemented

    def __neg__(self):
        from pypolyfun.term import Term

        return Term(-1.0, [self])

    def __add__(self, other: Any):
        """Add the atom to another object, giving a polynomial."""
        from pypolyfun.polynomial import Polynomial
        from pypolyfun.term import Term

        if isinstance(other, (Atom, Term, Polynomial, int, float)):
            return Term.from_atom(self) + other
        return NotImplemented

    def __radd__(self, other: Any):
        from pypolyfun.term import Term

        if isinstance(other, (int, float)):
            return other + Term.from_atom(self)
        return NotImplemented

    def __sub__(self, other: Any):
        """Subtract another object from the atom, giving a polynomial."""
        from pypolyfun.polynomial import Polynomial
        from pypolyfun.term import Term

        if isinstance(other, (Atom, Term, Polynomial, int, float)):
            return Term.from_atom(self) - other
        return NotImplemented

    def __rsub__(self, other: Any):
        from pypolyfun.term import Term

        if isinstance(other, (int, float)):
            return other - Term.from_atom(self)
        return NotImplemented


def atomvar(*letters: str) -> Union[Atom, Tuple[Atom, ...]]:
    """Create first-power, unsubscripted atoms for the given letters.

    Args:
        *letters: Atom letters

    Returns:
        A single Atom or a tuple of Atoms
    """
    atoms = tuple(Atom(letter) for letter in letters)
    return atoms[0] if len(atoms) == 1 else atoms
