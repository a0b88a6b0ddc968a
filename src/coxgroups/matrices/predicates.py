"""Coxeter matrices and generalised Cartan matrices.

Matrices are accepted as any sequence of integer rows (lists, tuples,
numpy arrays) and returned as lists of lists. Anything else, including
float or boolean entries, is neither a Coxeter matrix nor a GCM.
Generators are numbered 1..n in the mathematical sense, so row/column i-1
belongs to generator i.
"""
from __future__ import annotations

import numbers
from typing import List, Optional, Sequence, Tuple

from coxgroups.errors import InvalidMatrixError

Matrix = Sequence[Sequence[int]]

# Product a_ij * a_ji of a GCM -> Coxeter bond m_ij. Anything else is infinite (0).
_GCM_PRODUCT_TO_M = {0: 2, 1: 3, 2: 4, 3: 6}


def _is_integer(x: object) -> bool:
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


def _square_rows(mat: Matrix) -> Optional[Tuple[Tuple[int, ...], ...]]:
    """Rows of mat as int tuples, or None unless it is a square matrix of integers."""
    try:
        rows = tuple(tuple(row) for row in mat)
    except TypeError:
        # mat or one of its rows is not iterable
        return None
    n = len(rows)
    for row in rows:
        if len(row) != n or not all(_is_integer(x) for x in row):
            return None
    return tuple(tuple(int(x) for x in row) for row in rows)


def is_coxeter_matrix(mat: Matrix) -> bool:
    """Check if an integer matrix is a Coxeter matrix.

    Square, symmetric, ones on the diagonal, and off-diagonal entries in
    {0} u {2, 3, 4, ...}. Zero stands for an infinite bond.
    """
    rows = _square_rows(mat)
    if rows is None:
        return False
    n = len(rows)
    for i in range(n):
        if rows[i][i] != 1:
            return False
        for j in range(n):
            if i == j:
                continue
            m = rows[i][j]
            if m != rows[j][i]:
                return False
            if m != 0 and m < 2:
                return False
    return True


def is_gcm(mat: Matrix) -> bool:
    """Check if an integer matrix is a generalised Cartan matrix.

    1. All diagonal entries are 2,
    2. all off-diagonal entries are 0 or negative, and
    3. a_ij = 0 if and only if a_ji = 0.
    """
    rows = _square_rows(mat)
    if rows is None:
        return False
    n = len(rows)
    for i in range(n):
        if rows[i][i] != 2:
            return False
        for j in range(n):
            if i == j:
                continue
            if rows[i][j] > 0:
                return False
            if (rows[i][j] == 0) != (rows[j][i] == 0):
                return False
    return True


def gcm_to_coxeter_matrix(gcm: Matrix) -> List[List[int]]:
    """Convert a generalised Cartan matrix to its Coxeter matrix.

    Each entry becomes a_ij * a_ji, which is then mapped 0, 1, 2, 3 -> 2, 3, 4, 6
    and anything larger -> 0 (infinite). The diagonal is set to 1.
    """
    if not is_gcm(gcm):
        raise InvalidMatrixError(f"Not a generalised Cartan matrix: {gcm!r}")
    rows = _square_rows(gcm)
    assert rows is not None
    n = len(rows)
    return [
        [1 if i == j else _GCM_PRODUCT_TO_M.get(rows[i][j] * rows[j][i], 0) for j in range(n)]
        for i in range(n)
    ]


def as_coxeter_matrix(mat: Matrix) -> List[List[int]]:
    """Return mat as a Coxeter matrix, converting a GCM if necessary."""
    if is_gcm(mat):
        return gcm_to_coxeter_matrix(mat)
    rows = _square_rows(mat)
    if rows is not None and is_coxeter_matrix(rows):
        return [list(row) for row in rows]
    raise InvalidMatrixError(f"Neither a Coxeter matrix nor a GCM: {mat!r}")
