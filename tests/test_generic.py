"""Tests for coxgroups.groups.generic module."""
import pytest

from coxgroups.errors import MismatchedParentError, NonFiniteGroupError
from coxgroups.groups import generic
from coxgroups.groups.base import CoxeterElement, CoxeterGroup
from coxgroups.groups.minroots import build_group
from coxgroups.matrices.types import coxeter_matrix_from_type


class BareGroup(CoxeterGroup):
    """A representation supplying only the primitives, wrapping a MinRootGroup."""

    def __init__(self, inner):
        self.inner = inner

    @property
    def rank(self):
        return self.inner.rank

    def identity(self):
        return BareElement(self, self.inner.identity())

    def is_finite(self):
        return self.inner.is_finite()

    def coxeter_matrix(self):
        return self.inner.coxeter_matrix()


class BareElement(CoxeterElement):
    def __init__(self, group, inner):
        self._group = group
        self.inner = inner

    @property
    def parent(self):
        return self._group

    def is_identity(self):
        return self.inner.is_identity()

    def is_left_descent(self, s):
        return self.inner.is_left_descent(s)

    def is_right_descent(self, s):
        return self.inner.is_right_descent(s)

    def left_multiply(self, s):
        return BareElement(self._group, self.inner.left_multiply(s))

    def right_multiply(self, s):
        return BareElement(self._group, self.inner.right_multiply(s))

    def __eq__(self, other):
        return isinstance(other, BareElement) and self.inner == other.inner

    def __hash__(self):
        return hash(self.inner)


def _sample(W, max_length):
    level = [W.identity()]
    out = list(level)
    for _ in range(max_length):
        nxt = []
        for w in level:
            for s in range(1, W.rank + 1):
                if not w.is_right_descent(s):
                    ws = w.right_multiply(s)
                    if ws not in nxt:
                        nxt.append(ws)
        out.extend(nxt)
        level = nxt
    return out


@pytest.fixture
def b3():
    W, _ = build_group(coxeter_matrix_from_type("B3"))
    return W


# --- descents ---

def test_first_descents(b3):
    e = b3.identity()
    assert generic.first_left_descent(e) is None
    assert generic.first_right_descent(e) is None
    w = b3.element([2, 3])
    assert generic.first_left_descent(w) == 2
    assert generic.first_right_descent(w) == 3


# --- agreement with the native fast paths ---

def test_generic_agrees_with_native(b3):
    for w in _sample(b3, 5):
        assert generic.length(w) == w.length()
        assert generic.short_lex(w) == w.short_lex()
        assert generic.inverse_short_lex(w) == w.inverse_short_lex()
        assert generic.inverse(w) == w.inverse()
        assert generic.sign(w) == (-1) ** w.length()


def test_generic_multiply_agrees(b3):
    xs = _sample(b3, 3)
    for x in xs:
        for y in xs:
            assert generic.multiply(x, y) == x * y


def test_generic_power():
    W, (s, t) = build_group([[1, 5], [5, 1]])
    st = s * t
    assert generic.power(st, 5).is_identity()
    assert generic.power(st, 0) == W.identity()
    assert generic.power(st, -1) == t * s
    assert generic.power(st, 7) == st * st


def test_generic_multiply_mismatched_parents():
    _, (s1,) = build_group([[1]])
    _, (s2,) = build_group([[1]])
    with pytest.raises(MismatchedParentError):
        generic.multiply(s1, s2)


# --- a representation with only the primitives ---

def test_bare_representation_uses_generic_defaults(b3):
    B = BareGroup(b3)
    gens = B.generators()
    assert len(gens) == 3
    a, b, c = gens
    w = a * b * c * b
    assert w.short_lex() == w.inner.short_lex()
    assert w.length() == 4
    assert (w * w.inverse()).is_identity()
    assert w ** 4 == w * w * w * w
    assert w ** -1 == w.inverse()
    assert repr(b) == "BareElement([2])"


def test_bare_longest_element(b3):
    B = BareGroup(b3)
    w0 = B.longest_element()
    assert w0.length() == 9
    assert w0.inner == b3.longest_element()


def test_bare_element_from_word(b3):
    B = BareGroup(b3)
    assert B.element([1, 1, 2]).inner == b3.element([2])


def test_longest_element_requires_finite():
    W, _ = build_group(coxeter_matrix_from_type("A~2"))
    with pytest.raises(NonFiniteGroupError):
        generic.longest_element(BareGroup(W))
