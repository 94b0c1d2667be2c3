# tests/test_atom.py
import pytest

from pypolyfun import Atom, Term, atomvar


def test_atom_defaults():
    """An atom built from a letter has no subscript and power 1."""
    a = Atom('a')
    assert a.letter == 'a'
    assert a.subscript == 0
    assert a.power == 1
    assert a.key == ('a', 0)


def test_atom_ordering_by_letter_then_subscript():
    assert Atom('a').is_less(Atom('b'))
    assert Atom('a', 1).is_less(Atom('b'))
    assert Atom('a', 2).is_less(Atom('a', 10))
    assert not Atom('b').is_less(Atom('a', 5))
    # Power is not part of the ordering key
    assert not Atom('a', 0, 1).is_less(Atom('a', 0, 7))
    assert not Atom('a', 0, 7).is_less(Atom('a', 0, 1))


def test_sorted_atoms_follow_key_order():
    atoms = [Atom('c'), Atom('a', 2), Atom('b', 0, 3), Atom('a', 1)]
    assert sorted(atoms) == [Atom('a', 1), Atom('a', 2), Atom('b', 0, 3), Atom('c')]


def test_likeness_ignores_power():
    assert Atom('x', 0, 2).is_like(Atom('x', 0, 5))
    assert not Atom('x').is_like(Atom('x', 1))
    assert not Atom('x').is_like(Atom('y'))


def test_times_like_adds_powers():
    merged = Atom('x', 3, 2).times_like(Atom('x', 3, -5))
    assert merged == Atom('x', 3, -3)

    cancelled = Atom('x', 0, 2).times_like(Atom('x', 0, -2))
    assert cancelled.is_zero_power()


def test_times_like_rejects_unlike_atoms():
    with pytest.raises(ValueError):
        Atom('x').times_like(Atom('y'))
    with pytest.raises(ValueError):
        Atom('x', 1).times_like(Atom('x', 2))


def test_equality_is_structural():
    assert Atom('a', 1, 2) == Atom('a', 1, 2)
    assert Atom('a', 1, 2) != Atom('a', 1, 3)
    assert hash(Atom('a', 1, 2)) == hash(Atom('a', 1, 2))
    assert len({Atom('a'), Atom('a'), Atom('a', 0, 2)}) == 2
    assert Atom('a') != 'a'


@pytest.mark.parametrize("atom, expected", [
    (Atom('x'), "x"),
    (Atom('x', 2), "x_2"),
    (Atom('x', 0, 3), "x^3"),
    (Atom('x', 1, -2), "x_1^-2"),
    (Atom('b', 1, 2), "b_1^2"),
])
def test_atom_rendering(atom, expected):
    assert str(atom) == expected


def test_atom_repr():
    assert repr(Atom('q', 4, -1)) == "Atom('q', 4, -1)"


def test_atomvar():
    x = atomvar('x')
    assert x == Atom('x')

    a, b, c = atomvar('a', 'b', 'c')
    assert (a, b, c) == (Atom('a'), Atom('b'), Atom('c'))


def test_atom_arithmetic_builds_terms():
    x, y = atomvar('x', 'y')

    assert y * x == Term(1, [x, y])
    assert x * x == Term(1, [Atom('x', 0, 2)])
    assert 3 * x == Term(3, [x])
    assert x * 2.5 == Term(2.5, [x])
    assert -x == Term(-1, [x])
