"""
Test edge cases and error handling for PyPolyFun.

This ensures the library rejects misuse immediately and normalizes
degenerate but valid input deterministically.
"""

import pytest


class TestInputValidation:
    """Test validation of inputs to constructors."""

    def test_atomvar_edge_cases(self):
        """Test edge cases for atomvar function."""
        from pypolyfun import atomvar

        # Upper case and non-ASCII letters are fine
        assert str(atomvar('X')) == 'X'
        assert str(atomvar('λ')) == 'λ'

        # Multi-character names, digits and empty strings are rejected
        for bad in ['xy', '1', '_', '']:
            with pytest.raises(ValueError):
                atomvar(bad)

    def test_atom_field_validation(self):
        """Test validation of subscripts and powers."""
        from pypolyfun import Atom

        with pytest.raises(TypeError):
            Atom(5)
        with pytest.raises(ValueError):
            Atom('a', -1)
        with pytest.raises(TypeError):
            Atom('a', 1.5)
        with pytest.raises(TypeError):
            Atom('a', 0, 2.0)
        with pytest.raises(TypeError):
            Atom('a', True)

        # Negative powers are valid
        assert Atom('a', 0, -3).power == -3

    def test_operators_reject_unsupported_types(self):
        """Test that unsupported operands raise TypeError."""
        from pypolyfun import Atom, Polynomial, Term

        x = Atom('x')
        with pytest.raises(TypeError):
            x * "y"
        with pytest.raises(TypeError):
            Term(1, [x]) * "y"
        with pytest.raises(TypeError):
            Term(1, [x]) + [1]
        with pytest.raises(TypeError):
            Polynomial([x]) * None
        with pytest.raises(TypeError):
            Polynomial(["x"])
        with pytest.raises(TypeError):
            Term(1, [x]).scale("2")


class TestDegenerateInput:
    """Test degenerate input that is valid and must be normalized."""

    def test_zero_coefficient(self):
        from pypolyfun import Atom, Polynomial, Term

        zero = Term(0, [Atom('x')])
        assert zero.is_zero()
        assert str(zero) == ""

        # A zero term times anything is still a zero term
        assert zero.multiply(Term(5, [Atom('y')])).is_zero()

        # Zero terms vanish from sums
        assert Polynomial([zero, 1]).terms == [Term(1)]

    def test_only_zero_powers(self):
        from pypolyfun import Atom, Term

        term = Term(2, [Atom('a', 0, 0), Atom('b', 3, 0)])
        assert term.is_constant()
        assert term == Term(2)

    def test_empty_product(self):
        from pypolyfun import Term

        assert Term(1, []).multiply(Term(1, [])) == Term(1)
        assert Term().coefficient == 1.0
        assert Term().is_constant()

    def test_negative_zero_equals_zero(self):
        from pypolyfun import Term

        assert Term(-0.0) == Term(0.0)
        assert hash(Term(-0.0)) == hash(Term(0.0))
        assert Term(-0.0).compare(Term(0.0)) == 0

    def test_long_atom_sequences(self):
        """Canonicalization handles long sequences without recursion limits."""
        from pypolyfun import Atom, Term, is_canonical

        atoms = [Atom('x', i % 500) for i in range(5000)]
        term = Term(1, reversed(atoms))

        assert len(term.atoms) == 500
        assert all(atom.power == 10 for atom in term.atoms)
        assert is_canonical(term.atoms)

    def test_numpy_scalars(self):
        """Numpy scalars behave like Python numbers."""
        import numpy as np
        from pypolyfun import Atom, Term

        term = Term(np.float64(2.5), [Atom('a', np.int64(3), np.int32(2))])
        assert term == Term(2.5, [Atom('a', 3, 2)])
        assert term.scale(np.float64(2)).coefficient == 5.0


class TestConstructors:
    """Test the convenience constructors."""

    def test_constant(self):
        from pypolyfun import Term

        assert Term.constant(4) == Term(4, [])

    def test_from_atom_and_letter(self):
        from pypolyfun import Atom, Term

        assert Term.from_atom(Atom('b', 2, 3)) == Term(1, [Atom('b', 2, 3)])
        assert Term.from_letter('q') == Term(1, [Atom('q')])
        with pytest.raises(ValueError):
            Term.from_letter('qq')
