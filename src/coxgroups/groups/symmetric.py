"""Symmetric groups as Coxeter groups of type A, backed by permutations.

A permutation p of {1..n} is stored as the pair of tuples
fwd = (p(1), ..., p(n)) and inv = (p^-1(1), ..., p^-1(n)); keeping both
makes inversion and descent tests O(1). Multiplication is composition,
(p * r)(i) = p(r(i)), so right multiplication by the transposition
s_i = (i, i+1) swaps fwd[i] and fwd[i+1].
"""
from __future__ import annotations

from typing import List, Tuple

from coxgroups.errors import MismatchedParentError
from coxgroups.groups.base import CoxeterElement, CoxeterGroup, check_generator


def _swap(seq: Tuple[int, ...], i: int, j: int) -> Tuple[int, ...]:
    """Copy of seq with 0-based positions i and j exchanged."""
    out = list(seq)
    out[i], out[j] = out[j], out[i]
    return tuple(out)


def short_lex_array(inv: Tuple[int, ...]) -> List[int]:
    """ShortLex word of the permutation whose inverse array is inv.

    Bubble sort, always swapping the leftmost descent; O(length) swaps.
    """
    arr = list(inv)
    word: List[int] = []
    i = 0
    while i < len(arr) - 1:
        if arr[i] > arr[i + 1]:
            word.append(i + 1)
            arr[i], arr[i + 1] = arr[i + 1], arr[i]
            i = max(i - 1, 0)
        else:
            i += 1
    return word


class SymmetricGroup(CoxeterGroup):
    """The symmetric group S_n, a Coxeter system of type A_{n-1}."""

    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"Negative argument {n} to SymmetricGroup.")
        self.n = n

    @property
    def rank(self) -> int:
        # S0 and S1 are both trivial.
        return max(0, self.n - 1)

    def is_finite(self) -> bool:
        return True

    def coxeter_matrix(self) -> List[List[int]]:
        r = self.rank
        return [[1 if i == j else 3 if abs(i - j) == 1 else 2 for j in range(r)] for i in range(r)]

    def identity(self) -> "Permutation":
        ident = tuple(range(1, self.n + 1))
        return Permutation(self, ident, ident)

    def longest_element(self) -> "Permutation":
        rev = tuple(range(self.n, 0, -1))
        return Permutation(self, rev, rev)

    def __repr__(self) -> str:
        return f"SymmetricGroup({self.n})"


class Permutation(CoxeterElement):
    """An element of SymmetricGroup."""

    def __init__(self, group: SymmetricGroup, fwd: Tuple[int, ...], inv: Tuple[int, ...]):
        self._group = group
        self.fwd = fwd
        self.inv = inv

    @property
    def parent(self) -> SymmetricGroup:
        return self._group

    def is_identity(self) -> bool:
        return all(x == i for i, x in enumerate(self.fwd, start=1))

    def is_right_descent(self, t: int) -> bool:
        t = check_generator(t, self._group.rank)
        return self.fwd[t - 1] > self.fwd[t]

    def is_left_descent(self, t: int) -> bool:
        t = check_generator(t, self._group.rank)
        return self.inv[t - 1] > self.inv[t]

    def right_multiply(self, t: int) -> "Permutation":
        t = check_generator(t, self._group.rank)
        a, b = self.fwd[t - 1], self.fwd[t]
        return Permutation(self._group, _swap(self.fwd, t - 1, t), _swap(self.inv, a - 1, b - 1))

    def left_multiply(self, t: int) -> "Permutation":
        t = check_generator(t, self._group.rank)
        a, b = self.inv[t - 1], self.inv[t]
        return Permutation(self._group, _swap(self.fwd, a - 1, b - 1), _swap(self.inv, t - 1, t))

    def length(self) -> int:
        # Number of inversions, O(n^2).
        f = self.fwd
        return sum(1 for i in range(len(f)) for j in range(i + 1, len(f)) if f[i] > f[j])

    def short_lex(self) -> List[int]:
        return short_lex_array(self.inv)

    def inverse_short_lex(self) -> List[int]:
        word = short_lex_array(self.fwd)
        word.reverse()
        return word

    def inverse(self) -> "Permutation":
        return Permutation(self._group, self.inv, self.fwd)

    def __mul__(self, other: CoxeterElement) -> CoxeterElement:
        if not isinstance(other, Permutation):
            return super().__mul__(other)
        if other._group is not self._group:
            raise MismatchedParentError("Incompatible parent groups")
        fwd = tuple(self.fwd[i - 1] for i in other.fwd)
        inv = tuple(other.inv[i - 1] for i in self.inv)
        return Permutation(self._group, fwd, inv)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return self._group is other._group and self.fwd == other.fwd

    def __hash__(self) -> int:
        return hash(self.fwd)

    def __repr__(self) -> str:
        return f"Permutation({list(self.fwd)})"


def symmetric_group(n: int) -> Tuple[SymmetricGroup, List[Permutation]]:
    """The symmetric group on n letters and its simple generators."""
    G = SymmetricGroup(n)
    return G, G.generators()
