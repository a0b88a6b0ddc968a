"""Coxeter groups implemented with the minimal root reflection table.

Elements are stored as ShortLex normal forms: the lexicographically least
reduced word. Since every element has exactly one such word, equality and
hashing are plain comparisons of words. Words are bytes, so ranks up to 255
are supported.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from coxgroups.errors import InvalidMatrixError, MismatchedParentError
from coxgroups.groups.base import CoxeterElement, CoxeterGroup, check_generator
from coxgroups.matrices.predicates import Matrix, gcm_to_coxeter_matrix, is_coxeter_matrix, is_gcm
from coxgroups.tables.coxeter import reflection_table_coxeter
from coxgroups.tables.gcm import reflection_table_gcm
from coxgroups.tables.table import ReflectionTable

_logger = logging.getLogger(__name__)

MAX_RANK = 255

# refl[s][root] with a dummy row/column 0, so generator and root indices are used as-is.
Refl = Tuple[Tuple[Optional[int], ...], ...]


def right_multiply_step(refl: Refl, word: bytearray, t: int) -> None:
    """Multiply a reduced word on the right by the generator t, in place.

    If word is a ShortLex normal form, so is the result.

    Walk the word right to left, carrying the root a = s(i+1)...s(n) t, which
    stays minimal (and positive) by induction. At each letter s(i):

    1. a is the simple root of s(i): then s(i+1)...s(n) t = s(i)...s(n), so
       deleting s(i) gives the product. This is the only deletion point.
    2. s(i) a is the simple root of some r: then s(i)...s(n) t = r s(i)...s(n),
       another place to insert r. If r < s(i) this gives a lexicographically
       smaller word than any insertion found so far.
    3. s(i) a is no longer minimal: since the word is reduced it never comes
       back, so insert at the best point found so far.

    Reaching the front of the word also means an insertion.
    """
    insertion_point = len(word)
    insertion_letter = t
    root: Optional[int] = t
    for i in range(len(word) - 1, -1, -1):
        s = word[i]
        if s == root:
            del word[i]
            return

        root = refl[s][root]
        if root is None:
            break

        # s is simple, so root < s forces root to be simple too.
        if root < s:
            insertion_point = i
            insertion_letter = root

    word.insert(insertion_point, insertion_letter)


class MinRootGroup(CoxeterGroup):
    """A Coxeter group backed by its minimal root reflection table."""

    def __init__(self, coxeter_matrix: Matrix, table: ReflectionTable):
        self._coxeter_matrix = tuple(tuple(int(x) for x in row) for row in coxeter_matrix)
        self._table = table
        self._refl: Refl = ((),) + tuple((None,) + row for row in table.rows)
        self._is_finite = table.is_finite()

    @property
    def rank(self) -> int:
        return len(self._coxeter_matrix)

    @property
    def table(self) -> ReflectionTable:
        return self._table

    def coxeter_matrix(self) -> List[List[int]]:
        return [list(row) for row in self._coxeter_matrix]

    def is_finite(self) -> bool:
        return self._is_finite

    def identity(self) -> "MinRootElement":
        return MinRootElement(self, b"")

    def generators(self) -> List["MinRootElement"]:
        return [MinRootElement(self, bytes([s])) for s in range(1, self.rank + 1)]

    def __repr__(self) -> str:
        return f"MinRootGroup(rank={self.rank}, minimal_roots={self._table.num_roots})"


class MinRootElement(CoxeterElement):
    """An element of a MinRootGroup, stored as its ShortLex normal form."""

    __slots__ = ("_group", "_word")

    def __init__(self, group: MinRootGroup, word: bytes):
        self._group = group
        self._word = word

    @property
    def parent(self) -> MinRootGroup:
        return self._group

    @property
    def word(self) -> bytes:
        """The ShortLex normal form."""
        return self._word

    def is_identity(self) -> bool:
        return not self._word

    def length(self) -> int:
        return len(self._word)

    def short_lex(self) -> List[int]:
        return list(self._word)

    def is_right_descent(self, t: int) -> bool:
        # l(wt) < l(w) iff w(a_t) < 0. Push a_t through the reduced word from
        # the right; reaching a non-minimal root means it stays positive.
        t = check_generator(t, self._group.rank)
        refl = self._group._refl
        root: Optional[int] = t
        for s in reversed(self._word):
            if s == root:
                return True
            root = refl[s][root]
            if root is None:
                return False
        return False

    def is_left_descent(self, t: int) -> bool:
        t = check_generator(t, self._group.rank)
        refl = self._group._refl
        root: Optional[int] = t
        for s in self._word:
            if s == root:
                return True
            root = refl[s][root]
            if root is None:
                return False
        return False

    def right_multiply(self, s: int) -> "MinRootElement":
        s = check_generator(s, self._group.rank)
        word = bytearray(self._word)
        right_multiply_step(self._group._refl, word, s)
        return MinRootElement(self._group, bytes(word))

    def left_multiply(self, s: int) -> "MinRootElement":
        s = check_generator(s, self._group.rank)
        refl = self._group._refl
        word = bytearray([s])
        for t in self._word:
            right_multiply_step(refl, word, t)
        return MinRootElement(self._group, bytes(word))

    def inverse(self) -> "MinRootElement":
        refl = self._group._refl
        word = bytearray()
        for s in reversed(self._word):
            right_multiply_step(refl, word, s)
        return MinRootElement(self._group, bytes(word))

    def __mul__(self, other: CoxeterElement) -> CoxeterElement:
        if not isinstance(other, MinRootElement):
            return super().__mul__(other)
        if other._group is not self._group:
            raise MismatchedParentError("The elements come from different Coxeter groups")
        refl = self._group._refl
        word = bytearray(self._word)
        for s in other._word:
            right_multiply_step(refl, word, s)
        return MinRootElement(self._group, bytes(word))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MinRootElement):
            return NotImplemented
        return self._group is other._group and self._word == other._word

    def __hash__(self) -> int:
        return hash(self._word)

    def _shortlex_key(self, other: "MinRootElement") -> Tuple[Tuple[int, bytes], Tuple[int, bytes]]:
        if not isinstance(other, MinRootElement) or other._group is not self._group:
            raise MismatchedParentError("Cannot compare elements of different Coxeter groups")
        return (len(self._word), self._word), (len(other._word), other._word)

    def __lt__(self, other: "MinRootElement") -> bool:
        a, b = self._shortlex_key(other)
        return a < b

    def __le__(self, other: "MinRootElement") -> bool:
        a, b = self._shortlex_key(other)
        return a <= b

    def __gt__(self, other: "MinRootElement") -> bool:
        a, b = self._shortlex_key(other)
        return a > b

    def __ge__(self, other: "MinRootElement") -> bool:
        a, b = self._shortlex_key(other)
        return a >= b


def build_group(
    mat: Matrix,
    *,
    max_roots: Optional[int] = None,
) -> Tuple[MinRootGroup, List[MinRootElement]]:
    """Create a Coxeter group from a Coxeter matrix or a GCM.

    A GCM goes through the integer table builder, any other Coxeter matrix
    through the general one. Returns the group and its simple generators.
    """
    if is_gcm(mat):
        n = len(mat)
        if n > MAX_RANK:
            raise InvalidMatrixError(f"Rank {n} exceeds the supported maximum {MAX_RANK}")
        table = reflection_table_gcm(mat, max_roots=max_roots)
        coxeter_mat: Sequence[Sequence[int]] = gcm_to_coxeter_matrix(mat)
    elif is_coxeter_matrix(mat):
        n = len(mat)
        if n > MAX_RANK:
            raise InvalidMatrixError(f"Rank {n} exceeds the supported maximum {MAX_RANK}")
        table = reflection_table_coxeter(mat, max_roots=max_roots)
        coxeter_mat = mat
    else:
        raise InvalidMatrixError(f"Neither a Coxeter matrix nor a GCM: {mat!r}")

    W = MinRootGroup(coxeter_mat, table)
    _logger.debug(
        "Built MinRootGroup: rank=%d minimal_roots=%d finite=%s",
        W.rank,
        table.num_roots,
        W.is_finite(),
    )
    return W, W.generators()


coxeter_group_min = build_group
