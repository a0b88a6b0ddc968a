"""Minimal root reflection table for an arbitrary Coxeter matrix.

Follows Casselman, "Computation in Coxeter groups II: Constructing minimal
roots". The Coxeter matrix is turned into a symmetric Cartan matrix with
QuantumInteger entries (2 on the diagonal, -2 for an infinite bond, -[2]_2m
for a bond of order m), and roots are generated breadth first. For each new
(root, generator) pair a case analysis on the shape of the root's support
decides whether the reflection stays minimal.
"""
from __future__ import annotations

import enum
import logging
from typing import Dict, List, Optional, Set, Tuple

from coxgroups.errors import InvalidMatrixError, UnsupportedFormError
from coxgroups.matrices.predicates import Matrix, is_coxeter_matrix
from coxgroups.quantum import QuantumInteger, in_open_interval_two
from coxgroups.tables.table import ReflectionTable, check_root_limit

_logger = logging.getLogger(__name__)

Root = Tuple[QuantumInteger, ...]

ZERO = QuantumInteger.integer(0)
ONE = QuantumInteger.integer(1)
TWO = QuantumInteger.integer(2)

# Coefficient sets {root[t], root[u]} allowing a reflection at a vertex with two simple bonds.
_ALLOWED_SIMPLE_PAIRS = (
    frozenset([ONE]),
    frozenset([ONE, TWO]),
    frozenset([ONE, ONE + QuantumInteger.bracket(10, 2)]),
)


class Action(enum.Enum):
    """Outcome of examining the pair (s, root)."""

    SKIP = "skip"
    LOCK = "lock"
    REFLECT = "reflect"


def cartan_entry(m: int) -> QuantumInteger:
    """Symmetric Cartan matrix entry for a Coxeter matrix entry m."""
    if m == 0:
        return QuantumInteger.integer(-2)
    if m == 1:
        return TWO
    return QuantumInteger.bracket(2 * m, -2)


def _pairing(cartan_row: List[QuantumInteger], root: Root) -> QuantumInteger:
    return sum((a * x for a, x in zip(cartan_row, root)), ZERO)


class _MinimalRootBuilder:
    """Breadth-first state for one run of the general table construction."""

    def __init__(self, coxeter_mat: List[List[int]], max_roots: Optional[int]):
        self.M = coxeter_mat
        self.rank = len(coxeter_mat)
        self.cartan = [[cartan_entry(m) for m in row] for row in coxeter_mat]
        self.max_roots = max_roots

        n = self.rank
        # roots: discovery order. depth doubles as the set of roots seen so far.
        # refl[(s, root)]: None if s(root) is negative or not minimal, else s(root).
        # locks[root]: generators known to take root out of the minimal roots.
        self.roots: List[Root] = [tuple(ONE if i == j else ZERO for i in range(n)) for j in range(n)]
        self.depth: Dict[Root, int] = {root: 1 for root in self.roots}
        self.refl: Dict[Tuple[int, Root], Optional[Root]] = {
            (s + 1, root): None for s, root in enumerate(self.roots)
        }
        self.locks: Dict[Root, Set[int]] = {root: set() for root in self.roots}

    def reflect(self, s: int, root: Root) -> Root:
        """s(root) = root - <a_s, root> a_s; the Cartan matrix is symmetric."""
        pairing = _pairing(self.cartan[s - 1], root)
        simple = self.roots[s - 1]
        return tuple(x - pairing * a for x, a in zip(root, simple))

    def install_reflection(self, s: int, root: Root) -> None:
        reflected = self.reflect(s, root)
        if reflected not in self.depth:
            self.roots.append(reflected)
            self.depth[reflected] = self.depth[root] + 1
            self.locks[reflected] = set()
            check_root_limit(len(self.roots), self.max_roots)
        self.refl[(s, root)] = reflected
        self.refl[(s, reflected)] = root
        self.locks[reflected] |= self.locks[root]

    def install_lock(self, s: int, root: Root) -> None:
        self.refl[(s, root)] = None
        self.locks[root].add(s)

    def decide(self, s: int, root: Root) -> Action:
        """Decide what to do with the pair (s, root).

        The checks run in a fixed order; each later branch assumes every
        earlier one failed.
        """
        if (s, root) in self.refl:
            return Action.SKIP

        M = self.M
        supp = [t for t in range(1, self.rank + 1) if root[t - 1] != ZERO]
        # Vertices of the support joined to s by a bond (finite > 2 or infinite).
        link = [
            t for t in range(1, self.rank + 1)
            if t != s and root[t - 1] != ZERO and M[s - 1][t - 1] != 2
        ]

        # Dihedral roots: reflecting within the support wraps around correctly.
        if len(supp) == 2 and s in supp:
            return Action.REFLECT

        if s not in supp:
            # s commutes with the whole support, so s(root) = root.
            if not link:
                return Action.REFLECT

            # The support of a minimal root is a tree without infinite bonds
            # (Casselman, Corollary 8.3).
            if any(M[s - 1][t - 1] == 0 for t in link):
                return Action.LOCK
            if len(link) >= 2:
                return Action.LOCK

            # Single neighbour t. A simple bond pairs to -root[t]; a multiple
            # bond needs root[t] = 1, since otherwise [2] root[t] >= 2.
            t = link[0]
            if M[s - 1][t - 1] == 3:
                return Action.REFLECT if in_open_interval_two(root[t - 1]) else Action.LOCK
            return Action.REFLECT if root[t - 1] == ONE else Action.LOCK

        if len(supp) < 3:
            raise UnsupportedFormError(f"Length of support is {len(supp)}, it should be >= 3.")

        if root[s - 1] == ONE:
            # Four or more neighbours already pair to <= -2.
            if len(link) >= 4:
                return Action.LOCK

            # Three neighbours: only all-simple bonds with coefficient 1 survive.
            if len(link) == 3:
                ok = all(M[s - 1][t - 1] == 3 and root[t - 1] == ONE for t in link)
                return Action.REFLECT if ok else Action.LOCK

            # Two neighbours t, u with m_st <= m_su (Casselman 11.3, 11.4).
            if len(link) == 2:
                t, u = sorted(link, key=lambda x: M[s - 1][x - 1])
                m_st, m_su = M[s - 1][t - 1], M[s - 1][u - 1]

                # Two multiple bonds: both coefficients are already >= sqrt 2.
                if m_st != 3:
                    if root[t - 1] == ONE or root[u - 1] == ONE:
                        raise UnsupportedFormError("Unexpected root coefficients at a double multiple bond")
                    return Action.LOCK

                # One simple, one multiple: only m_su in {4, 5}, root[t] = 1, root[u] = [2].
                if m_su != 3:
                    if (
                        root[t - 1] == ONE
                        and 4 <= m_su <= 5
                        and root[u - 1] == QuantumInteger.bracket(2 * m_su, 2)
                    ):
                        return Action.REFLECT
                    return Action.LOCK

                # Two simple bonds.
                actual = {root[t - 1], root[u - 1]}
                if any(actual <= allowed for allowed in _ALLOWED_SIMPLE_PAIRS):
                    return Action.REFLECT
                return Action.LOCK

            if len(link) == 1:
                t = link[0]
                m_st = M[s - 1][t - 1]
                # Simple bonds fall through to the general pairing test.
                if m_st > 3:
                    if root[t - 1] == ONE:
                        raise UnsupportedFormError("Encountered unexpected root with coefficient 1")
                    # 2 - [2][2] = 1 - [3] > -2 always; 2 - [2][3] > -2 only for m <= 6.
                    if root[t - 1] == QuantumInteger.bracket(2 * m_st, 2) or (
                        root[t - 1] == QuantumInteger.bracket(2 * m_st, 3) and m_st <= 6
                    ):
                        return Action.REFLECT

        pairing = _pairing(self.cartan[s - 1], root)
        return Action.REFLECT if in_open_interval_two(pairing) else Action.LOCK

    def run(self) -> ReflectionTable:
        pos = 0
        while pos < len(self.roots):
            root = self.roots[pos]
            pos += 1

            # Locks inherited from the root that produced this one.
            for s in list(self.locks[root]):
                self.install_lock(s, root)

            for s in range(1, self.rank + 1):
                if s in self.locks[root]:
                    continue
                action = self.decide(s, root)
                if action is Action.LOCK:
                    self.install_lock(s, root)
                elif action is Action.REFLECT:
                    self.install_reflection(s, root)

        rootidx = {root: i for i, root in enumerate(self.roots, start=1)}
        refl: Dict[Tuple[int, int], Optional[int]] = {}
        for (s, root), image in self.refl.items():
            refl[(s, rootidx[root])] = None if image is None else rootidx[image]
        depths = [self.depth[root] for root in self.roots]
        return ReflectionTable.from_mapping(self.rank, len(self.roots), refl, depths)


def reflection_table_coxeter(coxeter_mat: Matrix, *, max_roots: Optional[int] = None) -> ReflectionTable:
    """Build the minimal root reflection table of an arbitrary Coxeter matrix."""
    if not is_coxeter_matrix(coxeter_mat):
        raise InvalidMatrixError(f"Not a Coxeter matrix: {coxeter_mat!r}")
    M = [[int(x) for x in row] for row in coxeter_mat]
    table = _MinimalRootBuilder(M, max_roots).run()
    _logger.debug(
        "Coxeter reflection table: rank=%d minimal_roots=%d finite=%s",
        table.rank,
        table.num_roots,
        table.is_finite(),
    )
    return table
