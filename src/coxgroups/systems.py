"""Classification of Coxeter matrices into finite and affine types.

Each connected component of the Coxeter diagram is matched against the
finite and affine Coxeter graphs by its shape: a path, a cycle, or a tree
with branch points, together with the multiset of bonds other than 2 and 3.
Anything else is indefinite and reported as unknown. Each component comes
with its vertices in Kac's reading order.

A Coxeter matrix only determines its Coxeter graph, so type B is reported
as C there; a GCM is further split by bond directions (classify_gcm).
I2(m) is only used for m >= 7 (I2(3), I2(4), I2(5),
I2(6) are A2, C2, H2, G2).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import networkx as nx
import sympy
from sympy import Poly, Symbol

from coxgroups.errors import InvalidMatrixError, NonFiniteGroupError
from coxgroups.matrices.diagram import coxeter_diagram
from coxgroups.matrices.predicates import Matrix, as_coxeter_matrix, gcm_to_coxeter_matrix, is_gcm

_E_DEGREES = {
    6: [2, 5, 6, 8, 9, 12],
    7: [2, 6, 8, 10, 12, 14, 18],
    8: [2, 8, 12, 14, 18, 20, 24, 30],
}
_H_DEGREES = {2: [2, 5], 3: [2, 6, 10], 4: [2, 12, 20, 30]}


@dataclass(frozen=True)
class ComponentType:
    """
    Type of an irreducible Coxeter graph.

    letter: "A" .. "I", "BC", or "?" for an indefinite component
    rank:   the n in X_n; an affine X~n has n + 1 generators
    affine: True for the affine types, including the duals
    m:      the bond of I2(m), None otherwise
    dual:   True for the dual affine types B@n, C@n, F@4, G@2
    """

    letter: str
    rank: int
    affine: bool = False
    m: Optional[int] = None
    dual: bool = False

    @property
    def name(self) -> str:
        if self.letter == "?":
            return f"?{self.rank}"
        if self.m is not None:
            return f"I2({self.m})"
        suffix = "@" if self.dual else "~" if self.affine else ""
        return f"{self.letter}{suffix}{self.rank}"

    @property
    def is_finite(self) -> bool:
        return self.letter != "?" and not self.affine

    def degrees(self) -> List[int]:
        """Degrees of the basic invariants, in increasing order.

        Humphreys, "Reflection groups and Coxeter groups", Table 3.1.
        """
        if not self.is_finite:
            raise NonFiniteGroupError(f"{self.name} is not of finite type")
        n = self.rank
        if self.letter == "A":
            return list(range(2, n + 2))
        if self.letter in ("B", "C"):
            return list(range(2, 2 * n + 1, 2))
        if self.letter == "D":
            return sorted(list(range(2, 2 * n - 1, 2)) + [n])
        if self.letter == "E":
            return list(_E_DEGREES[n])
        if self.letter == "F":
            return [2, 6, 8, 12]
        if self.letter == "G":
            return [2, 6]
        if self.letter == "H":
            return list(_H_DEGREES[n])
        if self.letter == "I":
            return sorted([2, self.m])
        raise NonFiniteGroupError(f"No degrees known for {self.name}")


Classified = Tuple[ComponentType, List[int]]


def _unknown(H: nx.Graph) -> Classified:
    return ComponentType("?", H.number_of_nodes()), sorted(H.nodes)


def _bfs(H: nx.Graph, start: int) -> Tuple[List[int], Dict[int, int], Dict[int, int]]:
    """Breadth-first order, distances and predecessors, visiting neighbours in increasing order."""
    order = [start]
    dist = {start: 0}
    pred = {start: start}
    pos = 0
    while pos < len(order):
        v = order[pos]
        pos += 1
        for t in sorted(H[v]):
            if t not in dist:
                dist[t] = dist[v] + 1
                pred[t] = v
                order.append(t)
    return order, dist, pred


def _path_to_root(pred: Dict[int, int], v: int) -> List[int]:
    """[v, ..., source] along the predecessors of a breadth-first search."""
    path = [v]
    while pred[path[-1]] != path[-1]:
        path.append(pred[path[-1]])
    return path


def _cycle_order(H: nx.Graph) -> List[int]:
    start = min(H.nodes)
    order = [start]
    prev, nxt = start, min(H[start])
    while nxt != start:
        order.append(nxt)
        prev, nxt = nxt, next(t for t in H[nxt] if t != prev)
    return order


def _classify_path(H: nx.Graph, leaves: List[int], multbonds: List[int], leaf_bond: Dict[int, int]) -> Classified:
    n = H.number_of_nodes()
    # Put the leaf with the smaller bond on the left, and read the path from it.
    left, right = sorted(leaves, key=lambda v: (leaf_bond[v], v))
    mleft, mright = leaf_bond[left], leaf_bond[right]
    comp, _, _ = _bfs(H, left)

    # Finite types.
    if not multbonds:
        return ComponentType("A", n), comp
    if multbonds == [4] and mright == 4:
        return ComponentType("C", n), comp
    if multbonds == [4] and n == 4 and mleft == mright == 3:
        return ComponentType("F", 4), comp
    if multbonds == [6] and n == 2:
        return ComponentType("G", 2), comp
    if multbonds == [5] and mright == 5 and 2 <= n <= 4:
        return ComponentType("H", n), comp
    if n == 2 and len(multbonds) == 1 and multbonds[0] >= 7:
        return ComponentType("I", 2, m=multbonds[0]), comp

    # Affine types. The affine vertex is read last.
    if n == 2 and multbonds == [0]:
        return ComponentType("A", 1, affine=True), comp
    if multbonds == [4, 4] and mleft == mright == 4:
        # aff == 1 -- 2 -- ... -- (n-1) == n
        return ComponentType("C", n - 1, affine=True), comp[1:] + comp[:1]
    if multbonds == [4] and n == 5 and mleft == mright == 3:
        # aff -- 1 -- 2 == 3 -- 4
        if H.edges[comp[2], comp[3]]["m"] != 4:
            comp.reverse()
        return ComponentType("F", 4, affine=True), comp[1:] + comp[:1]
    if multbonds == [6] and n == 3 and mright == 6:
        # aff -- 1 =6= 2
        return ComponentType("G", 2, affine=True), comp[1:] + comp[:1]
    return _unknown(H)


def _classify_star(H: nx.Graph, leaves: List[int], multbonds: List[int], leaf_bond: Dict[int, int]) -> Classified:
    """A tree with a single vertex of degree 3: three arms joined at a star point."""
    n = H.number_of_nodes()
    star = next(v for v, d in H.degree() if d == 3)
    _, dist, pred = _bfs(H, star)
    leaves = sorted(leaves, key=lambda v: (dist[v], leaf_bond[v], v))
    arms = [dist[v] for v in leaves]
    bonds = [leaf_bond[v] for v in leaves]

    def arm(v: int) -> List[int]:
        # From the neighbour of the star out to the leaf v.
        return _path_to_root(pred, v)[-2::-1]

    if not multbonds and arms[:2] == [1, 1]:
        if n == 4:
            # The star vertex is the second one.
            return ComponentType("D", 4), [leaves[0], star, leaves[1], leaves[2]]
        order, _, _ = _bfs(H, leaves[2])
        return ComponentType("D", n), order
    if not multbonds and 6 <= n <= 8 and arms[:2] == [1, 2]:
        # E6, E7: 1 -- 2 -- 3* -- 4 -- ..., E8: 1 -- 2 -- 3 -- 4 -- 5* -- 6 -- 7,
        # with the leaf next to the star read last.
        first, second = (leaves[1], leaves[2]) if n < 8 else (leaves[2], leaves[1])
        return ComponentType("E", n), _path_to_root(pred, first) + arm(second) + [leaves[0]]

    if multbonds == [4] and arms[:2] == [1, 1] and bonds[2] == 4:
        # 1 and aff on the star 2, then 2 -- ... -- (n-1) == n
        order = [leaves[0], star] + arm(leaves[2]) + [leaves[1]]
        return ComponentType("B", n - 1, affine=True), order
    if not multbonds and arms == [2, 2, 2]:
        # 1 -- 2 -- 3* -- 4 -- 5, with 6 on the star and aff on 6
        order = _path_to_root(pred, leaves[0]) + arm(leaves[1]) + arm(leaves[2])
        return ComponentType("E", 6, affine=True), order
    if not multbonds and arms == [1, 3, 3]:
        # aff -- 1 -- 2 -- 3* -- 4 -- 5 -- 6, with 7 on the star
        aff, *left = _path_to_root(pred, leaves[1])
        return ComponentType("E", 7, affine=True), left + arm(leaves[2]) + [leaves[0], aff]
    if not multbonds and arms == [1, 2, 5]:
        # aff -- 1 -- 2 -- 3 -- 4 -- 5* -- 6 -- 7, with 8 on the star
        aff, *left = _path_to_root(pred, leaves[2])
        return ComponentType("E", 8, affine=True), left + arm(leaves[1]) + [leaves[0], aff]
    return _unknown(H)


def classify_component(H: nx.Graph) -> Classified:
    """
    Type of a connected Coxeter diagram with edge attribute "m", together
    with its vertices in Kac's reading order.
    """
    n = H.number_of_nodes()
    multbonds = sorted(d["m"] for _, _, d in H.edges(data=True) if d["m"] != 3)
    deg = dict(H.degree())

    if n == 1:
        return ComponentType("A", 1), list(H.nodes)

    # The only non-tree accepted is the cycle of simple bonds, A~n.
    if not nx.is_tree(H):
        if not multbonds and all(d == 2 for d in deg.values()):
            return ComponentType("A", n - 1, affine=True), _cycle_order(H)
        return _unknown(H)

    leaves = sorted(v for v, d in deg.items() if d == 1)
    leaf_bond = {v: H.edges[v, next(iter(H[v]))]["m"] for v in leaves}
    big = sorted(d for d in deg.values() if d >= 3)

    if not big:
        return _classify_path(H, leaves, multbonds, leaf_bond)
    if big == [3]:
        return _classify_star(H, leaves, multbonds, leaf_bond)
    if big == [4] and not multbonds and n == 5:
        star = next(v for v, d in deg.items() if d == 4)
        return ComponentType("D", 4, affine=True), [leaves[0], star] + leaves[1:]
    if big == [3, 3] and not multbonds and all(deg[next(iter(H[v]))] == 3 for v in leaves):
        # 1 -- 2 -- ... -- (n-2) -- (n-1), with aff on 2 and n on n-2
        order, _, _ = _bfs(H, leaves[0])
        branch = next(iter(H[leaves[0]]))
        aff = next(v for v in leaves if v != leaves[0] and branch in H[v])
        return ComponentType("D", n - 1, affine=True), [v for v in order if v != aff] + [aff]
    return _unknown(H)


def classify_coxeter_matrix(mat: Matrix) -> List[Classified]:
    """
    Classify each connected component of a Coxeter matrix (or GCM).

    Returns (type, generators) pairs, the generators of each component in
    Kac's reading order, components ordered by their smallest generator.
    Type B is reported as C since both have the same Coxeter graph; use
    classify_gcm to tell them apart.
    """
    G = coxeter_diagram(mat)
    comps = sorted(sorted(c) for c in nx.connected_components(G))
    return [classify_component(G.subgraph(c)) for c in comps]


def _orient(t: ComponentType, comp: List[int], a: Callable[[int, int], int]) -> Classified:
    """Refine a Coxeter graph type by the bond directions of the GCM a(i, j)."""
    n = t.rank
    if t.letter == "C" and not t.affine:
        return (ComponentType("B", n) if a(comp[n - 1], comp[n - 2]) == -2 else t), comp
    if t.letter == "F" and not t.affine:
        return t, comp if a(comp[2], comp[1]) == -2 else comp[::-1]
    if t.letter == "G" and not t.affine:
        return t, comp if a(comp[1], comp[0]) == -3 else comp[::-1]
    if not t.affine:
        return t, comp

    if t.letter == "A" and n == 1:
        if a(comp[0], comp[1]) == -2:
            return t, comp
        # (-1, -4): the affine vertex is the one with -1 in its row.
        return ComponentType("BC", 1, affine=True), comp if a(comp[1], comp[0]) == -1 else comp[::-1]
    if t.letter == "B":
        dual = a(comp[n - 1], comp[n - 2]) != -2
        return ComponentType("B", n, affine=True, dual=dual), comp
    if t.letter == "C":
        # aff == 1 -- 2 -- ... -- (n-1) == n
        into_first = a(comp[0], comp[n]) == -2
        into_last = a(comp[n - 2], comp[n - 1]) == -2
        if into_first and into_last:
            return t, comp
        if a(comp[0], comp[n]) == -1 and a(comp[n - 2], comp[n - 1]) == -1:
            return ComponentType("C", n, affine=True, dual=True), comp
        bc = ComponentType("BC", n, affine=True)
        if into_first:
            return bc, comp
        # Both bonds point the other way: read the path backwards.
        return bc, comp[n - 2::-1] + [comp[n], comp[n - 1]]
    if t.letter == "F":
        return ComponentType("F", 4, affine=True, dual=a(comp[2], comp[1]) != -2), comp
    if t.letter == "G":
        return ComponentType("G", 2, affine=True, dual=a(comp[1], comp[0]) != -3), comp
    return t, comp


def classify_gcm(gcm: Matrix) -> List[Classified]:
    """
    Classify each connected component of a GCM, using bond directions.

    On top of classify_coxeter_matrix this separates B from C, the affine
    types from their duals (B@n, C@n, F@4, G@2), and names BC~n.
    """
    if not is_gcm(gcm):
        raise InvalidMatrixError(f"Not a generalised Cartan matrix: {gcm!r}")

    def a(i: int, j: int) -> int:
        return gcm[i - 1][j - 1]

    return [_orient(t, comp, a) for t, comp in classify_coxeter_matrix(gcm_to_coxeter_matrix(gcm))]


@dataclass(frozen=True)
class CoxeterSystem:
    """A Coxeter matrix together with the classification of its components."""

    coxeter_matrix: Tuple[Tuple[int, ...], ...]
    components: Tuple[Tuple[ComponentType, Tuple[int, ...]], ...]

    @property
    def rank(self) -> int:
        return len(self.coxeter_matrix)

    @property
    def name(self) -> str:
        """Type of the system, like "H3 x A2"."""
        return " x ".join(t.name for t, _ in self.components)

    def is_irreducible(self) -> bool:
        return len(self.components) == 1

    def is_finite_type(self) -> bool:
        return all(t.is_finite for t, _ in self.components)

    def is_affine_type(self) -> bool:
        """Irreducible, with its single component of affine type."""
        return self.is_irreducible() and self.components[0][0].affine

    def _require_finite(self) -> None:
        if not self.is_finite_type():
            raise NonFiniteGroupError(f"Coxeter system {self.name} has infinite order")

    def degrees(self) -> List[int]:
        self._require_finite()
        return sorted(d for t, _ in self.components for d in t.degrees())

    def exponents(self) -> List[int]:
        return [d - 1 for d in self.degrees()]

    def order(self) -> int:
        """Order of the group, the product of the degrees."""
        result = 1
        for d in self.degrees():
            result *= d
        return result

    def number_of_reflections(self) -> int:
        return sum(self.degrees()) - self.rank

    def poincare_polynomial(self, q: Optional[Symbol] = None) -> Poly:
        """
        Poincare polynomial sum_w q^length(w) as a sympy Poly.

        For a finite group it factors as the product over the degrees d of
        1 + q + ... + q^(d-1).
        """
        self._require_finite()
        q = Symbol("q") if q is None else q
        result = sympy.Integer(1)
        for d in self.degrees():
            result *= sum(q**k for k in range(d))
        return Poly(sympy.expand(result), q)

    def coxeter_number(self) -> int:
        """The largest degree; only defined for irreducible finite systems."""
        self._require_finite()
        if not self.is_irreducible():
            raise NonFiniteGroupError(f"Coxeter system {self.name} is reducible")
        return self.degrees()[-1]

    def __str__(self) -> str:
        adjectives = [
            f"rank {self.rank}",
            "irreducible" if self.is_irreducible() else "reducible",
            "finite type" if self.is_finite_type()
            else "affine type" if self.is_affine_type()
            else "indefinite type",
        ]
        return f"Coxeter system ({', '.join(adjectives)}) of type {self.name}"


def coxeter_system(mat: Matrix) -> CoxeterSystem:
    """Classify a Coxeter matrix or GCM into a CoxeterSystem.

    A GCM is classified with its bond directions, so B3 and C3 differ.
    """
    M = as_coxeter_matrix(mat)
    classified = classify_gcm(mat) if is_gcm(mat) else classify_coxeter_matrix(M)
    components = tuple((t, tuple(c)) for t, c in classified)
    return CoxeterSystem(tuple(tuple(row) for row in M), components)
