from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from coxgroups.matrices.diagram import coxeter_diagram
from coxgroups.matrices.predicates import Matrix


def diagram_layout(G: nx.Graph, seed: int = 7):
    """
    Choose a layout for a Coxeter diagram:
      - planar_layout if planar (every finite or affine diagram is)
      - otherwise spring_layout
    """
    is_planar, _ = nx.check_planarity(G)
    if is_planar and G.number_of_nodes() > 2:
        return nx.planar_layout(G)
    return nx.spring_layout(G, seed=seed, iterations=300)


def bond_label(m: int) -> str:
    """Edge label for a bond: blank for m = 3, "∞" for m = 0, otherwise m."""
    if m == 0:
        return "∞"
    if m == 3:
        return ""
    return str(m)


def draw_coxeter_diagram(
    mat: Matrix,
    *,
    ax=None,
    seed: int = 7,
    node_size: int = 300,
    title: str | None = None,
    save_path: str | None = None,
):
    """
    Draw the Coxeter diagram of a Coxeter matrix or GCM.

    Bonds with m >= 4 or m = ∞ are labelled. If save_path is set the figure
    is written there and closed; otherwise it is left open for the caller.
    Returns the axes drawn on.
    """
    G = coxeter_diagram(mat)
    pos = diagram_layout(G, seed=seed)

    fig = None
    if ax is None:
        fig, ax = plt.subplots(figsize=(max(4, G.number_of_nodes()), 3))
    ax.set_axis_off()
    if title:
        ax.set_title(title)

    nx.draw_networkx(G, pos=pos, ax=ax, with_labels=True, node_size=node_size)
    labels = {(u, v): bond_label(d["m"]) for u, v, d in G.edges(data=True) if d["m"] != 3}
    if labels:
        nx.draw_networkx_edge_labels(G, pos=pos, edge_labels=labels, ax=ax)

    if save_path:
        fig = fig if fig is not None else ax.figure
        plt.tight_layout()
        fig.savefig(save_path, dpi=200)
        plt.close(fig)

    return ax
