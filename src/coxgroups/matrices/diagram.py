from __future__ import annotations

from typing import List

import networkx as nx

from coxgroups.matrices.predicates import Matrix, as_coxeter_matrix


def coxeter_diagram(mat: Matrix) -> nx.Graph:
    """
    Coxeter diagram of a Coxeter matrix (or GCM).

    Nodes are the generators 1..n. Each pair s != t with m_st != 2 is an
    edge with attribute "m" (0 for an infinite bond).
    """
    M = as_coxeter_matrix(mat)
    n = len(M)
    G = nx.Graph()
    G.add_nodes_from(range(1, n + 1))
    for s in range(n):
        for t in range(s + 1, n):
            if M[s][t] != 2:
                G.add_edge(s + 1, t + 1, m=M[s][t])
    return G


def diagram_components(mat: Matrix) -> List[List[int]]:
    """Connected components of the Coxeter diagram, as sorted generator lists."""
    G = coxeter_diagram(mat)
    comps = [sorted(c) for c in nx.connected_components(G)]
    comps.sort()
    return comps
