"""Tests for coxgroups.groups.symmetric module."""
import math

import pytest

from coxgroups.errors import MismatchedParentError, OutOfRangeGeneratorError
from coxgroups.groups import generic
from coxgroups.groups.minroots import build_group
from coxgroups.groups.symmetric import Permutation, SymmetricGroup, short_lex_array, symmetric_group
from coxgroups.matrices.types import coxeter_matrix_from_type


def _all_elements(W):
    seen = {W.identity()}
    frontier = [W.identity()]
    while frontier:
        nxt = []
        for w in frontier:
            for s in range(1, W.rank + 1):
                ws = w.right_multiply(s)
                if ws not in seen:
                    seen.add(ws)
                    nxt.append(ws)
        frontier = nxt
    return seen


# --- construction ---

@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 5])
def test_order(n):
    G, gens = symmetric_group(n)
    assert G.rank == max(0, n - 1)
    assert len(gens) == G.rank
    assert len(_all_elements(G)) == math.factorial(n)


def test_negative_n_rejected():
    with pytest.raises(ValueError):
        SymmetricGroup(-1)


def test_coxeter_matrix_is_type_a():
    G, _ = symmetric_group(4)
    assert G.coxeter_matrix() == coxeter_matrix_from_type("A3")
    assert G.is_finite()


def test_generators_are_transpositions():
    G, (s1, s2, s3) = symmetric_group(4)
    assert s1.fwd == (2, 1, 3, 4)
    assert s3.fwd == (1, 2, 4, 3)
    assert isinstance(s1, Permutation)


# --- element operations ---

def test_composition():
    G, (s1, s2) = symmetric_group(3)
    # (s1 s2)(i) = s1(s2(i))
    p = s1 * s2
    assert p.fwd == (2, 3, 1)
    assert p.inv == (3, 1, 2)
    assert (p * p * p).is_identity()


def test_length_is_inversion_count():
    G, _ = symmetric_group(4)
    w0 = G.longest_element()
    assert w0.fwd == (4, 3, 2, 1)
    assert w0.length() == 6
    assert generic.longest_element(G) == w0


def test_short_lex_array():
    assert short_lex_array((1, 2, 3)) == []
    assert short_lex_array((2, 1, 3)) == [1]


def test_native_methods_agree_with_generic():
    G, _ = symmetric_group(4)
    for w in _all_elements(G):
        assert w.length() == generic.length(w)
        assert w.short_lex() == generic.short_lex(w)
        assert w.inverse_short_lex() == generic.inverse_short_lex(w)
        assert w.inverse() == generic.inverse(w)
        assert G.element(w.short_lex()) == w


def test_descents_agree_with_length():
    G, _ = symmetric_group(4)
    for w in _all_elements(G):
        for s in range(1, 4):
            assert w.is_left_descent(s) == (w.left_multiply(s).length() < w.length())
            assert w.is_right_descent(s) == (w.right_multiply(s).length() < w.length())


def test_matches_minimal_root_representation():
    G, _ = symmetric_group(4)
    W, _ = build_group(coxeter_matrix_from_type("A3"))
    words = sorted(tuple(w.short_lex()) for w in _all_elements(G))
    expected = sorted(tuple(w.short_lex()) for w in _all_elements(W))
    assert words == expected


def test_power_and_sign():
    G, (s1, s2, s3) = symmetric_group(4)
    c = s1 * s2 * s3
    assert (c ** 4).is_identity()
    assert c ** -1 == c.inverse()
    assert c.sign() == -1


def test_errors():
    G, (s1,) = symmetric_group(2)
    H, (t1,) = symmetric_group(2)
    with pytest.raises(OutOfRangeGeneratorError):
        s1.right_multiply(2)
    with pytest.raises(MismatchedParentError):
        s1 * t1


def test_repr():
    G, (s1, _) = symmetric_group(3)
    assert repr(s1) == "Permutation([2, 1, 3])"
