"""Breadth-first enumeration of Coxeter group elements by length."""
from __future__ import annotations

import logging
import os
from typing import Iterator, List, Optional

import networkx as nx
from sympy import Poly, Symbol

from coxgroups.groups.base import CoxeterElement, CoxeterGroup

_logger = logging.getLogger(__name__)

# Default cap on the number of elements visited in an infinite group with no length bound.
ENUMERATION_LIMIT = int(os.environ.get("COXGROUPS_ENUMERATION_LIMIT", "1000000"))


def iter_levels(W: CoxeterGroup, max_length: Optional[int] = None) -> Iterator[List[CoxeterElement]]:
    """
    Yield the elements of W of length 0, 1, 2, ... as lists.

    Level k+1 is obtained by right-multiplying level k by every generator
    that is not a right descent. Each list is sorted in ShortLex order.
    Stops after max_length, or when a level comes out empty (finite W).
    """
    level: List[CoxeterElement] = [W.identity()]
    k = 0
    while level:
        yield level
        if max_length is not None and k >= max_length:
            return
        seen = set()
        nxt: List[CoxeterElement] = []
        for w in level:
            for s in range(1, W.rank + 1):
                if w.is_right_descent(s):
                    continue
                ws = w.right_multiply(s)
                if ws not in seen:
                    seen.add(ws)
                    nxt.append(ws)
        nxt.sort(key=lambda x: x.short_lex())
        level = nxt
        k += 1


def enumerate_group(
    W: CoxeterGroup,
    max_length: Optional[int] = None,
    limit: Optional[int] = None,
) -> List[CoxeterElement]:
    """
    Elements of W ordered by length, then ShortLex.

    For an infinite W with no max_length, at most ENUMERATION_LIMIT elements
    are returned unless an explicit limit is given.
    """
    if limit is None and max_length is None and not W.is_finite():
        limit = ENUMERATION_LIMIT

    out: List[CoxeterElement] = []
    for level in iter_levels(W, max_length):
        if limit is not None and len(out) + len(level) >= limit:
            out.extend(level[: limit - len(out)])
            _logger.debug("Enumeration of %r stopped at limit %d", W, limit)
            break
        out.extend(level)
    _logger.debug("Enumerated %d elements of %r", len(out), W)
    return out


def growth_series(W: CoxeterGroup, max_length: Optional[int] = None) -> List[int]:
    """
    counts[k] = number of elements of length k, for k = 0..max_length.

    max_length may be omitted for a finite group; the series then runs up to
    the length of the longest element.
    """
    if max_length is None and not W.is_finite():
        raise ValueError("max_length is required for an infinite Coxeter group")
    return [len(level) for level in iter_levels(W, max_length)]


def growth_polynomial(W: CoxeterGroup, max_length: Optional[int] = None, q: Optional[Symbol] = None) -> Poly:
    """Growth series truncated at max_length, as a sympy Poly in q."""
    q = Symbol("q") if q is None else q
    counts = growth_series(W, max_length)
    return Poly(sum(c * q**k for k, c in enumerate(counts)), q)


def cayley_graph(W: CoxeterGroup, max_length: Optional[int] = None) -> nx.DiGraph:
    """
    Right Cayley graph of W restricted to elements of length <= max_length.

    Nodes are elements with attribute "length"; there is an edge w -> ws with
    attribute "generator" = s whenever both ends are present.
    """
    if max_length is None and not W.is_finite():
        raise ValueError("max_length is required for an infinite Coxeter group")

    G = nx.DiGraph()
    for k, level in enumerate(iter_levels(W, max_length)):
        for w in level:
            G.add_node(w, length=k)

    for w in list(G.nodes):
        for s in range(1, W.rank + 1):
            ws = w.right_multiply(s)
            if ws in G:
                G.add_edge(w, ws, generator=s)
    return G
