"""Standard Cartan and Coxeter matrices, indexed by Cartan-Killing type.

Type names follow Kac's conventions: "A4" is the symmetric group S5,
"C~3" is an affine type, "H4" and "I2(m)" are the non-crystallographic
finite types. I-types are written "I<m>" when parsed from a string.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from coxgroups.errors import InvalidMatrixError
from coxgroups.matrices.predicates import gcm_to_coxeter_matrix

_TYPE_RE = re.compile(r"([A-I])(~?)([0-9]+)")

_EXCEPTIONAL_ORDERS = {
    ("E", 6): 51840,
    ("E", 7): 2903040,
    ("E", 8): 696729600,
    ("F", 4): 1152,
    ("G", 2): 12,
    ("H", 2): 10,
    ("H", 3): 120,
    ("H", 4): 14400,
}


def _set_bond(M: List[List[int]], i: int, j: int, value: int) -> None:
    """Set the symmetric pair of entries for generators i, j (1-based)."""
    M[i - 1][j - 1] = value
    M[j - 1][i - 1] = value


def cartan_A(rank: int) -> List[List[int]]:
    """The type A GCM, for rank >= 0."""
    return [[2 if i == j else -1 if abs(i - j) == 1 else 0 for j in range(rank)] for i in range(rank)]


def cartan_B(rank: int) -> List[List[int]]:
    """The type B GCM, for rank >= 2. The double bond sits between 1 and 2."""
    if rank < 2:
        raise InvalidMatrixError(f"The rank {rank} must be at least 2 to construct type B.")
    gcm = cartan_A(rank)
    gcm[0][1] = -2
    return gcm


def cartan_C(rank: int) -> List[List[int]]:
    """The type C GCM (transpose of type B), for rank >= 2."""
    gcm = cartan_B(rank)
    return [list(col) for col in zip(*gcm)]


def cartan_D(rank: int) -> List[List[int]]:
    """The type D GCM, for rank >= 2. Generators 1 and 2 are the fork."""
    if rank < 2:
        raise InvalidMatrixError(f"The rank {rank} must be at least 2 to construct type D.")
    gcm = [[2 if i == j else 0 for j in range(rank)] for i in range(rank)]
    if rank >= 3:
        gcm[0][2] = gcm[2][0] = -1
        gcm[1][2] = gcm[2][1] = -1
    for i in range(2, rank - 1):
        gcm[i][i + 1] = gcm[i + 1][i] = -1
    return gcm


def cartan_E(rank: int) -> List[List[int]]:
    """The type E GCM, for 6 <= rank <= 8. The last generator hangs off generator 3."""
    if not 6 <= rank <= 8:
        raise InvalidMatrixError(f"The rank {rank} must be between 6 and 8 inclusive for type E")
    gcm = [[0] * rank for _ in range(rank)]
    for i, row in enumerate(cartan_A(rank - 1)):
        gcm[i][: rank - 1] = row
    gcm[2][rank - 1] = gcm[rank - 1][2] = -1
    gcm[rank - 1][rank - 1] = 2
    return gcm


def cartan_F4() -> List[List[int]]:
    """The type F4 GCM."""
    gcm = cartan_A(4)
    gcm[1][2] = -2
    return gcm


def cartan_G2() -> List[List[int]]:
    """The type G2 GCM."""
    return [[2, -3], [-1, 2]]


def cartan_matrix(letter: str, rank: int) -> List[List[int]]:
    """The finite-type GCM of the given letter and rank."""
    if letter == "A":
        if rank < 0:
            raise InvalidMatrixError(f"The rank {rank} must be nonnegative for type A.")
        return cartan_A(rank)
    if letter == "B":
        return cartan_B(rank)
    if letter == "C":
        return cartan_C(rank)
    if letter == "D":
        return cartan_D(rank)
    if letter == "E":
        return cartan_E(rank)
    if letter == "F" and rank == 4:
        return cartan_F4()
    if letter == "G" and rank == 2:
        return cartan_G2()
    raise InvalidMatrixError(f"No crystallographic type {letter}{rank}")


def _coxeter_path(rank: int) -> List[List[int]]:
    return gcm_to_coxeter_matrix(cartan_A(rank))


def _affine_coxeter_matrix(letter: str, n: int) -> List[List[int]]:
    """Coxeter matrix of the affine type letter~n, which has rank n + 1."""
    if letter == "A":
        if n < 1:
            raise InvalidMatrixError("A~n needs n >= 1")
        M = _coxeter_path(n + 1)
        _set_bond(M, 1, n + 1, 0 if n == 1 else 3)
    elif letter == "B":
        if n < 3:
            raise InvalidMatrixError("B~n needs n >= 3")
        M = _coxeter_path(n + 1)
        _set_bond(M, n, n + 1, 4)
        _set_bond(M, 1, 2, 2)
        _set_bond(M, 1, 3, 3)
    elif letter == "C":
        if n < 2:
            raise InvalidMatrixError("C~n needs n >= 2")
        M = _coxeter_path(n + 1)
        _set_bond(M, n, n + 1, 4)
        _set_bond(M, 1, 2, 4)
    elif letter == "D":
        if n < 4:
            raise InvalidMatrixError("D~n needs n >= 4")
        M = _coxeter_path(n + 1)
        _set_bond(M, n, n + 1, 2)
        _set_bond(M, n - 1, n + 1, 3)
        _set_bond(M, 1, 2, 2)
        _set_bond(M, 1, 3, 3)
    elif letter == "E":
        # Cut the path 1..n+1 at one edge and reattach the loose arm at the branch point.
        if n not in (6, 7, 8):
            raise InvalidMatrixError("E~n needs n in {6, 7, 8}")
        cut = {6: (5, 6), 7: (7, 8), 8: (8, 9)}[n]
        join = {6: (3, 6), 7: (4, 8), 8: (6, 9)}[n]
        M = _coxeter_path(n + 1)
        _set_bond(M, *cut, 2)
        _set_bond(M, *join, 3)
    elif letter == "F" and n == 4:
        M = _coxeter_path(5)
        _set_bond(M, 3, 4, 4)
    elif letter == "G" and n == 2:
        M = _coxeter_path(3)
        _set_bond(M, 2, 3, 6)
    else:
        raise InvalidMatrixError(f"No affine type {letter}~{n}")
    return M


def _finite_coxeter_matrix(letter: str, n: int) -> List[List[int]]:
    if letter == "H":
        if n < 2:
            raise InvalidMatrixError("H_n needs n >= 2")
        M = _coxeter_path(n)
        _set_bond(M, 1, 2, 5)
        return M
    if letter == "I":
        # "I<m>" is the dihedral group of order 2m, a rank 2 system.
        if n < 2:
            raise InvalidMatrixError("I2(m) needs m >= 2")
        return [[1, n], [n, 1]]
    return gcm_to_coxeter_matrix(cartan_matrix(letter, n))


def parse_coxeter_type(name: str) -> Tuple[str, int, bool]:
    """Split a type name like "B~3" into ("B", 3, True)."""
    m = _TYPE_RE.fullmatch(name.strip())
    if m is None:
        raise InvalidMatrixError(f"Unrecognized group type {name!r}")
    return m.group(1), int(m.group(3)), m.group(2) == "~"


def coxeter_matrix_from_type(name: str) -> List[List[int]]:
    """Coxeter matrix for a type name such as "A3", "E8", "H4", "I7" or "C~2"."""
    letter, n, affine = parse_coxeter_type(name)
    if affine:
        return _affine_coxeter_matrix(letter, n)
    return _finite_coxeter_matrix(letter, n)


@dataclass(frozen=True)
class CoxeterType:
    """
    Metadata for an irreducible finite Coxeter type.

    name:           e.g. "B4" or "I2(7)"
    rank:           number of generators
    gcm:            generalised Cartan matrix, None for H and I types
    coxeter_matrix: Coxeter matrix (rows as tuples)
    order:          number of elements of the group
    """

    name: str
    rank: int
    gcm: Optional[Tuple[Tuple[int, ...], ...]]
    coxeter_matrix: Tuple[Tuple[int, ...], ...]
    order: int


def _freeze(M: List[List[int]]) -> Tuple[Tuple[int, ...], ...]:
    return tuple(tuple(row) for row in M)


def _finite_order(letter: str, rank: int) -> int:
    if letter == "A":
        return math.factorial(rank + 1)
    if letter in ("B", "C"):
        return 2**rank * math.factorial(rank)
    if letter == "D":
        return 2 ** (rank - 1) * math.factorial(rank)
    if (letter, rank) in _EXCEPTIONAL_ORDERS:
        return _EXCEPTIONAL_ORDERS[(letter, rank)]
    raise InvalidMatrixError(f"No finite type {letter}{rank}")


def coxeter_type(letter: str, rank: int) -> CoxeterType:
    """Construct a CoxeterType from a letter and rank, like ("A", 4) for S5.

    For letter "I" the second argument is the bond m, giving I2(m) of rank 2.
    """
    if letter == "I":
        M = _finite_coxeter_matrix("I", rank)
        return CoxeterType(f"I2({rank})", 2, None, _freeze(M), 2 * rank)
    if letter == "H":
        if not 2 <= rank <= 4:
            raise InvalidMatrixError(f"No finite type H{rank}")
        M = _finite_coxeter_matrix("H", rank)
        return CoxeterType(f"H{rank}", rank, None, _freeze(M), _finite_order("H", rank))

    gcm = cartan_matrix(letter, rank)
    return CoxeterType(
        name=f"{letter}{rank}",
        rank=rank,
        gcm=_freeze(gcm),
        coxeter_matrix=_freeze(gcm_to_coxeter_matrix(gcm)),
        order=_finite_order(letter, rank),
    )
