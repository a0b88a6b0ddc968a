"""Coxeter groups with elements in InverseShortLex form, multiplied recursively.

Left multiplication by a generator scans the normal form for the point where
the exchange condition applies, calling itself on shorter words to find it.
Only the Coxeter matrix is needed, no root system. This is much slower than
the minimal root automaton and is kept as an independent cross-check.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from coxgroups.errors import MismatchedParentError
from coxgroups.groups.base import CoxeterElement, CoxeterGroup, check_generator
from coxgroups.matrices.predicates import Matrix, as_coxeter_matrix
from coxgroups.tables.coxeter import reflection_table_coxeter

CoxMat = Tuple[Tuple[int, ...], ...]


def _nf_left_inplace(M: CoxMat, s: int, w: List[int]) -> None:
    """Replace the normal form w by the normal form of s*w.

    l marks the start of the segment still to be examined, r (both 1-based)
    the next letter to read; sigma is the largest letter seen in the segment.
    """
    n = len(w)
    l = 1
    r = 1
    sigma = s
    while r <= n:
        c = w[r - 1]
        r += 1
        if c >= sigma:
            sigma = c
            t = _exchange(M, s, w[l - 1 : r - 1])
            if t is not None:
                if s == w[l - 1]:
                    del w[l - 1]
                    return
                s = t
                l = r
                sigma = t
    w.insert(l - 1, s)


def _nf_word(M: CoxMat, x: Sequence[int], y: Sequence[int]) -> List[int]:
    """Normal form of x*y, where y is already a normal form."""
    result = list(y)
    for s in reversed(x):
        _nf_left_inplace(M, s, result)
    return result


def _exchange(M: CoxMat, s: int, w: List[int]) -> Optional[int]:
    """Letter exchanged when s is pushed through the normal-form segment w, if any."""
    n = len(w)
    first = w[0]
    if n == 1:
        if first == s:
            return s
        if first < s or M[first - 1][s - 1] != 2:
            return None
        return s

    if n == M[first - 1][s - 1] - 1:
        # w alternates s and first: a braid relation may apply at the end.
        i = 2
        while i <= n and (w[i - 1] == s or w[i - 1] == first):
            i += 1
        if i == n + 1 and w[n - 1] > w[n - 2]:
            return w[n - 2]
        return None

    sy = [s] + w[: n - 1]
    z = _nf_word(M, [first], sy)
    if len(z) < n:
        m = 1
        while m < len(z) and z[m] == sy[m]:
            m += 1
        omega = _nf_word(M, [first, s] + w[: m - 1], w[m:n])
        last = omega[-1]
        if any(t > last for t in omega):
            return last
    return None


class RecursiveGroup(CoxeterGroup):
    """A Coxeter group whose elements are InverseShortLex words."""

    def __init__(self, coxeter_matrix: Matrix):
        self._M: CoxMat = tuple(tuple(row) for row in as_coxeter_matrix(coxeter_matrix))
        self._is_finite: Optional[bool] = None

    @property
    def rank(self) -> int:
        return len(self._M)

    def coxeter_matrix(self) -> List[List[int]]:
        return [list(row) for row in self._M]

    def is_finite(self) -> bool:
        # Decided by the minimal root table, built on first use.
        if self._is_finite is None:
            self._is_finite = reflection_table_coxeter(self._M).is_finite()
        return self._is_finite

    def identity(self) -> "RecursiveElement":
        return RecursiveElement(self, ())

    def element(self, word: Iterable[int]) -> "RecursiveElement":
        letters = [check_generator(s, self.rank) for s in word]
        return RecursiveElement(self, tuple(_nf_word(self._M, letters, [])))

    def __repr__(self) -> str:
        return f"RecursiveGroup(rank={self.rank})"


class RecursiveElement(CoxeterElement):
    """An element of a RecursiveGroup, stored in InverseShortLex normal form."""

    def __init__(self, group: RecursiveGroup, word: Tuple[int, ...]):
        self._group = group
        self._word = word

    @property
    def parent(self) -> RecursiveGroup:
        return self._group

    @property
    def word(self) -> Tuple[int, ...]:
        return self._word

    def is_identity(self) -> bool:
        return not self._word

    def length(self) -> int:
        return len(self._word)

    def inverse_short_lex(self) -> List[int]:
        return list(self._word)

    def left_multiply(self, s: int) -> "RecursiveElement":
        s = check_generator(s, self._group.rank)
        w = list(self._word)
        _nf_left_inplace(self._group._M, s, w)
        return RecursiveElement(self._group, tuple(w))

    def right_multiply(self, s: int) -> "RecursiveElement":
        s = check_generator(s, self._group.rank)
        return RecursiveElement(self._group, tuple(_nf_word(self._group._M, self._word, [s])))

    def is_left_descent(self, s: int) -> bool:
        return self.left_multiply(s).length() < self.length()

    def is_right_descent(self, s: int) -> bool:
        return self.right_multiply(s).length() < self.length()

    def __mul__(self, other: CoxeterElement) -> CoxeterElement:
        if not isinstance(other, RecursiveElement):
            return super().__mul__(other)
        if other._group is not self._group:
            raise MismatchedParentError("The elements come from different Coxeter groups")
        return RecursiveElement(self._group, tuple(_nf_word(self._group._M, self._word, other._word)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecursiveElement):
            return NotImplemented
        return self._group is other._group and self._word == other._word

    def __hash__(self) -> int:
        return hash(self._word)


def coxeter_group_recursive(mat: Matrix) -> Tuple[RecursiveGroup, List[RecursiveElement]]:
    """Create a RecursiveGroup from a Coxeter matrix or GCM, with its generators."""
    W = RecursiveGroup(mat)
    return W, W.generators()
