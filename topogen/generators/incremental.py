"""Edge-by-edge constructors for cycles and rings of cliques.

These builders allocate an empty graph of the final vertex count and insert
edges in ascending source-then-target order. Every insertion is valid by
construction, so a failed insertion is an internal error and asserted.
"""

import logging
from typing import Any

from topogen.graph.simple import EdgeInsertion, SimpleDiGraph, SimpleGraph
from topogen.sizes import checked_product, index_dtype, narrow

log = logging.getLogger(__name__)


def add_new_edge(g: SimpleGraph | SimpleDiGraph, u: int, v: int) -> None:
    """Insert an edge that is valid by construction."""
    result = g.add_edge(u, v)
    assert result is EdgeInsertion.ADDED, f"add_edge({u}, {v}) returned {result}"


def cycle_graph(n: int, dtype: Any = None) -> SimpleGraph:
    """Undirected cycle 1 - 2 - ... - n - 1.

    n <= 0 gives the empty graph. The closing edge (n, 1) is only added for
    n >= 3: for n = 1 it would be a self-loop and for n = 2 a repeat of
    (1, 2), so cycle_graph(1) is one vertex and cycle_graph(2) one edge.
    """
    dtype = index_dtype(n, dtype=dtype)
    n = int(n)
    if n <= 0:
        return SimpleGraph.empty(0, dtype=dtype)
    g = SimpleGraph.empty(narrow(n, dtype), dtype=dtype)
    for i in range(1, n):
        add_new_edge(g, i, i + 1)
    if n >= 3:
        add_new_edge(g, n, 1)
    log.debug("cycle_graph: nv=%d, ne=%d", g.nv, g.ne)
    return g


def cycle_digraph(n: int, dtype: Any = None) -> SimpleDiGraph:
    """Directed cycle 1 -> 2 -> ... -> n -> 1.

    n <= 0 gives the empty digraph. n = 1 gives two vertices joined by the
    single arc 1 -> 2.
    """
    dtype = index_dtype(n, dtype=dtype)
    n = int(n)
    if n <= 0:
        return SimpleDiGraph.empty(0, dtype=dtype)
    if n == 1:
        return SimpleDiGraph.from_edges([(1, 2)], dtype=dtype)
    g = SimpleDiGraph.empty(narrow(n, dtype), dtype=dtype)
    for i in range(1, n):
        add_new_edge(g, i, i + 1)
    add_new_edge(g, n, 1)
    log.debug("cycle_digraph: nv=%d, ne=%d", g.nv, g.ne)
    return g


def clique_graph(k: int, n: int, dtype: Any = None) -> SimpleGraph:
    """Ring of n disjoint k-cliques.

    Clique c (1-based) occupies vertices (c-1)k + 1 .. ck. After the
    intra-clique edges, the first vertices of consecutive cliques are
    bridged, and the last clique's first vertex is bridged back to vertex 1.
    The closing bridge is only added for n >= 3, where it is distinct from
    the other bridges.

    Args:
        k: Clique size.
        n: Number of cliques.
        dtype: Optional index dtype; inferred from ``k``/``n`` otherwise.

    Returns:
        SimpleGraph on k * n vertices. k <= 0 or n <= 0 gives the empty graph.

    Raises:
        SizeOverflow: If k * n does not fit in the index dtype.
    """
    dtype = index_dtype(k, n, dtype=dtype)
    k, n = int(k), int(n)
    if k <= 0 or n <= 0:
        return SimpleGraph.empty(0, dtype=dtype)
    kn = checked_product(k, n, dtype=dtype)

    g = SimpleGraph.empty(kn, dtype=dtype)
    for c in range(1, n + 1):
        for i in range((c - 1) * k + 1, c * k):
            for j in range(i + 1, c * k + 1):
                add_new_edge(g, i, j)
    for i in range(1, n):
        add_new_edge(g, (i - 1) * k + 1, i * k + 1)
    if n >= 3:
        add_new_edge(g, 1, (n - 1) * k + 1)
    log.debug("clique_graph: k=%d, n=%d, nv=%d, ne=%d", k, n, g.nv, g.ne)
    return g
