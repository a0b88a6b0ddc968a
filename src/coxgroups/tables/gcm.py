"""Minimal root reflection table for a crystallographic root system.

When the root system is given by a GCM every root has integer coordinates,
so the breadth-first generation needs no algebraic numbers at all.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from coxgroups.errors import InvalidMatrixError
from coxgroups.matrices.predicates import Matrix, is_gcm
from coxgroups.tables.table import ReflectionTable, check_root_limit

_logger = logging.getLogger(__name__)


def reflection_table_gcm(gcm: Matrix, *, max_roots: Optional[int] = None) -> ReflectionTable:
    """Build the minimal root reflection table of a generalised Cartan matrix.

    The convention is gcm[s][t] = <a_s^, a_t>. Roots are kept in the simple root
    basis and coroots in the simple coroot basis, both starting as coordinate
    vectors. For a root b, s(b) is not minimal exactly when {s, r_b} generate an
    infinite dihedral group, i.e. when <b^, a_s><a_s^, b> >= 4.
    """
    if not is_gcm(gcm):
        raise InvalidMatrixError(f"Not a generalised Cartan matrix: {gcm!r}")

    A = [[int(x) for x in row] for row in gcm]
    n = len(A)
    roots: List[Tuple[int, ...]] = [tuple(1 if i == s else 0 for i in range(n)) for s in range(n)]
    coroots: List[Tuple[int, ...]] = list(roots)
    depths: List[int] = [1] * n
    rootidx: Dict[Tuple[int, ...], int] = {root: s + 1 for s, root in enumerate(roots)}

    # refl[(s, i)] is the index of s(roots[i-1]), None if negative or not minimal.
    refl: Dict[Tuple[int, int], Optional[int]] = {(s, s): None for s in range(1, n + 1)}

    i = 1
    while i <= len(roots):
        root = roots[i - 1]
        coroot = coroots[i - 1]
        for s in range(1, n + 1):
            # Already known from the lower root that first produced this one.
            if (s, i) in refl:
                continue

            pairing = sum(A[s - 1][t] * root[t] for t in range(n))
            copairing = sum(coroot[t] * A[t][s - 1] for t in range(n))
            if pairing * copairing >= 4:
                refl[(s, i)] = None
                continue

            new_root = list(root)
            new_root[s - 1] -= pairing
            key = tuple(new_root)

            if key not in rootidx:
                new_coroot = list(coroot)
                new_coroot[s - 1] -= copairing
                roots.append(key)
                coroots.append(tuple(new_coroot))
                depths.append(depths[i - 1] + 1)
                rootidx[key] = len(roots)
                check_root_limit(len(roots), max_roots)

            si = rootidx[key]
            refl[(s, i)] = si
            refl[(s, si)] = i
        i += 1

    table = ReflectionTable.from_mapping(n, len(roots), refl, depths)
    _logger.debug("GCM reflection table: rank=%d minimal_roots=%d", n, table.num_roots)
    return table
