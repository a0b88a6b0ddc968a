"""Tests for coxgroups.groups.recursive module."""
import pytest

from coxgroups.errors import InvalidMatrixError, MismatchedParentError, OutOfRangeGeneratorError
from coxgroups.groups import generic
from coxgroups.groups.minroots import build_group
from coxgroups.groups.recursive import RecursiveGroup, coxeter_group_recursive
from coxgroups.matrices.types import cartan_matrix, coxeter_matrix_from_type


def _all_elements(W):
    seen = {W.identity()}
    frontier = [W.identity()]
    while frontier:
        nxt = []
        for w in frontier:
            for s in range(1, W.rank + 1):
                ws = w.left_multiply(s)
                if ws not in seen:
                    seen.add(ws)
                    nxt.append(ws)
        frontier = nxt
    return seen


# --- construction ---

def test_accepts_gcm_and_coxeter_matrix():
    W1, _ = coxeter_group_recursive(cartan_matrix("A", 2))
    W2, _ = coxeter_group_recursive([[1, 3], [3, 1]])
    assert W1.coxeter_matrix() == W2.coxeter_matrix() == [[1, 3], [3, 1]]


def test_rejects_invalid():
    with pytest.raises(InvalidMatrixError):
        RecursiveGroup([[1, 2], [3, 1]])


def test_generators():
    W, (s, t) = coxeter_group_recursive([[1, 3], [3, 1]])
    assert s.word == (1,)
    assert t.word == (2,)
    assert W.rank == 2


# --- type A, cross-checked against the minimal root representation ---

@pytest.mark.parametrize("rank,order", [(1, 2), (2, 6), (3, 24)])
def test_type_a_orders(rank, order):
    W, _ = coxeter_group_recursive(cartan_matrix("A", rank))
    assert len(_all_elements(W)) == order


def test_a2_normal_forms():
    W, (s, t) = coxeter_group_recursive([[1, 3], [3, 1]])
    # InverseShortLex: the reversed word is lexicographically least
    assert (s * t * s).word == (1, 2, 1)
    assert (t * s * t).word == (1, 2, 1)
    assert (s * t).word == (1, 2)
    assert (t * s).word == (2, 1)
    assert (s * s).is_identity()


def test_a3_agrees_with_minimal_roots():
    R, _ = coxeter_group_recursive(cartan_matrix("A", 3))
    W, _ = build_group(cartan_matrix("A", 3))
    for x in _all_elements(R):
        w = W.element(x.word)
        assert x.length() == w.length()
        assert x.inverse_short_lex() == w.inverse_short_lex()
        assert x.short_lex() == w.short_lex()


def test_a3_descents_and_inverse():
    R, _ = coxeter_group_recursive(cartan_matrix("A", 3))
    for x in _all_elements(R):
        for s in range(1, 4):
            assert x.is_right_descent(s) == (x.right_multiply(s).length() < x.length())
        assert (x * x.inverse()).is_identity()
        assert generic.multiply(x, x.inverse()).is_identity()


def test_a3_longest_element():
    R, _ = coxeter_group_recursive(coxeter_matrix_from_type("A3"))
    assert R.is_finite()
    w0 = R.longest_element()
    assert w0.length() == 6
    assert w0.inverse() == w0


def test_element_from_word():
    R, (s, t) = coxeter_group_recursive([[1, 3], [3, 1]])
    assert R.element([1, 2, 1]) == s * t * s
    assert R.element([1, 1]).is_identity()


def test_errors():
    R1, (s1,) = coxeter_group_recursive([[1]])
    R2, (s2,) = coxeter_group_recursive([[1]])
    with pytest.raises(OutOfRangeGeneratorError):
        s1.left_multiply(2)
    with pytest.raises(MismatchedParentError):
        s1 * s2
