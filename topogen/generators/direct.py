"""Closed-form constructors for complete, bipartite, star, path, wheel and tree graphs.

Each builder validates its sizes, allocates every adjacency list once at its
final length, fills it by an index formula, and wraps the lists with the
bulk SimpleGraph / SimpleDiGraph constructor. No edge insertion calls are
made. Vertices are 1-based and every list is ascending.
"""

import logging
from typing import Any

import numpy as np

from topogen.generators.incremental import cycle_graph
from topogen.graph.simple import SimpleDiGraph, SimpleGraph
from topogen.sizes import (
    checked_edge_count,
    checked_pow,
    checked_sum,
    index_dtype,
    narrow,
)

log = logging.getLogger(__name__)


def _all_but(u: int, n: int, dtype: np.dtype) -> np.ndarray:
    """Fresh array [1, ..., u-1, u+1, ..., n]."""
    listu = np.empty(n - 1, dtype=dtype)
    listu[: u - 1] = np.arange(1, u)
    listu[u - 1 :] = np.arange(u + 1, n + 1)
    return listu


def _indices(*values: int, dtype: np.dtype) -> np.ndarray:
    return np.array(values, dtype=dtype)


def complete_graph(n: int, dtype: Any = None) -> SimpleGraph:
    """Undirected complete graph K_n.

    Every vertex u lists 1..u-1 followed by u+1..n.

    Args:
        n: Number of vertices. n <= 0 gives the empty graph.
        dtype: Optional index dtype; inferred from ``n`` otherwise.

    Returns:
        SimpleGraph with n(n-1)/2 edges.

    Raises:
        SizeOverflow: If n or the edge count does not fit.
    """
    dtype = index_dtype(n, dtype=dtype)
    n = int(n)
    if n <= 0:
        return SimpleGraph.empty(0, dtype=dtype)
    n = narrow(n, dtype)
    ne = checked_edge_count(n * (n - 1) // 2)

    fadjlist = [_all_but(u, n, dtype) for u in range(1, n + 1)]
    log.debug("complete_graph: nv=%d, ne=%d", n, ne)
    return SimpleGraph(ne, fadjlist, dtype=dtype)


def complete_bipartite_graph(n1: int, n2: int, dtype: Any = None) -> SimpleGraph:
    """Undirected complete bipartite graph K_{n1,n2}.

    Vertices 1..n1 form the first block and n1+1..n1+n2 the second; each
    vertex lists the whole opposite block.

    Args:
        n1: Size of the first block.
        n2: Size of the second block.
        dtype: Optional index dtype; inferred from ``n1``/``n2`` otherwise.

    Returns:
        SimpleGraph on n1 + n2 vertices with n1 * n2 edges. A negative block
        size gives the empty graph.

    Raises:
        SizeOverflow: If n1 + n2 or n1 * n2 does not fit.
    """
    dtype = index_dtype(n1, n2, dtype=dtype)
    n1, n2 = int(n1), int(n2)
    if n1 < 0 or n2 < 0:
        return SimpleGraph.empty(0, dtype=dtype)
    n = checked_sum(n1, n2, dtype=dtype)
    ne = checked_edge_count(n1 * n2)

    range1 = np.arange(1, n1 + 1).astype(dtype)
    range2 = np.arange(n1 + 1, n + 1).astype(dtype)
    fadjlist = [range2.copy() for _ in range(n1)]
    fadjlist += [range1.copy() for _ in range(n2)]
    log.debug("complete_bipartite_graph: nv=%d, ne=%d", n, ne)
    return SimpleGraph(ne, fadjlist, dtype=dtype)


def complete_digraph(n: int, dtype: Any = None) -> SimpleDiGraph:
    """Directed complete graph: an arc in each direction between every pair."""
    dtype = index_dtype(n, dtype=dtype)
    n = int(n)
    if n <= 0:
        return SimpleDiGraph.empty(0, dtype=dtype)
    n = narrow(n, dtype)
    ne = checked_edge_count(n * (n - 1))

    fadjlist = []
    badjlist = []
    for u in range(1, n + 1):
        listu = _all_but(u, n, dtype)
        fadjlist.append(listu)
        badjlist.append(listu.copy())
    log.debug("complete_digraph: nv=%d, ne=%d", n, ne)
    return SimpleDiGraph(ne, fadjlist, badjlist, dtype=dtype)


def star_graph(n: int, dtype: Any = None) -> SimpleGraph:
    """Undirected star: hub 1 adjacent to every other vertex."""
    dtype = index_dtype(n, dtype=dtype)
    n = int(n)
    if n <= 0:
        return SimpleGraph.empty(0, dtype=dtype)
    n = narrow(n, dtype)
    ne = checked_edge_count(n - 1)

    fadjlist = [np.arange(2, n + 1).astype(dtype)]
    fadjlist += [_indices(1, dtype=dtype) for _ in range(2, n + 1)]
    log.debug("star_graph: nv=%d, ne=%d", n, ne)
    return SimpleGraph(ne, fadjlist, dtype=dtype)


def star_digraph(n: int, dtype: Any = None) -> SimpleDiGraph:
    """Directed star with arcs from hub 1 out to every other vertex."""
    dtype = index_dtype(n, dtype=dtype)
    n = int(n)
    if n <= 0:
        return SimpleDiGraph.empty(0, dtype=dtype)
    n = narrow(n, dtype)
    ne = checked_edge_count(n - 1)

    fadjlist = [np.arange(2, n + 1).astype(dtype)]
    badjlist = [np.zeros(0, dtype=dtype)]
    for _ in range(2, n + 1):
        fadjlist.append(np.zeros(0, dtype=dtype))
        badjlist.append(_indices(1, dtype=dtype))
    log.debug("star_digraph: nv=%d, ne=%d", n, ne)
    return SimpleDiGraph(ne, fadjlist, badjlist, dtype=dtype)


def path_graph(n: int, dtype: Any = None) -> SimpleGraph:
    """Undirected path 1 - 2 - ... - n.

    n <= 1 gives max(n, 0) isolated vertices.
    """
    dtype = index_dtype(n, dtype=dtype)
    n = int(n)
    if n <= 1:
        return SimpleGraph.empty(max(n, 0), dtype=dtype)
    n = narrow(n, dtype)
    ne = checked_edge_count(n - 1)

    fadjlist = [_indices(2, dtype=dtype)]
    for u in range(2, n):
        fadjlist.append(_indices(u - 1, u + 1, dtype=dtype))
    fadjlist.append(_indices(n - 1, dtype=dtype))
    log.debug("path_graph: nv=%d, ne=%d", n, ne)
    return SimpleGraph(ne, fadjlist, dtype=dtype)


def path_digraph(n: int, dtype: Any = None) -> SimpleDiGraph:
    """Directed path 1 -> 2 -> ... -> n."""
    dtype = index_dtype(n, dtype=dtype)
    n = int(n)
    if n <= 1:
        return SimpleDiGraph.empty(max(n, 0), dtype=dtype)
    n = narrow(n, dtype)
    ne = checked_edge_count(n - 1)

    fadjlist = [_indices(2, dtype=dtype)]
    badjlist = [np.zeros(0, dtype=dtype)]
    for u in range(2, n):
        fadjlist.append(_indices(u + 1, dtype=dtype))
        badjlist.append(_indices(u - 1, dtype=dtype))
    fadjlist.append(np.zeros(0, dtype=dtype))
    badjlist.append(_indices(n - 1, dtype=dtype))
    log.debug("path_digraph: nv=%d, ne=%d", n, ne)
    return SimpleDiGraph(ne, fadjlist, badjlist, dtype=dtype)


def wheel_graph(n: int, dtype: Any = None) -> SimpleGraph:
    """Undirected wheel: hub 1 joined to every vertex of the rim cycle 2..n.

    Small sizes follow the boundary policy: n <= 1 gives max(n, 0) isolated
    vertices and n = 2, 3 give cycle_graph(n) (an edge and a triangle).

    Args:
        n: Number of vertices, hub included.
        dtype: Optional index dtype; inferred from ``n`` otherwise.

    Returns:
        SimpleGraph with 2(n-1) edges for n >= 4.
    """
    dtype = index_dtype(n, dtype=dtype)
    n = int(n)
    if n <= 1:
        return SimpleGraph.empty(max(n, 0), dtype=dtype)
    if n <= 3:
        return cycle_graph(n, dtype=dtype)
    n = narrow(n, dtype)
    ne = checked_edge_count(2 * (n - 1))

    fadjlist = [np.arange(2, n + 1).astype(dtype), _indices(1, 3, n, dtype=dtype)]
    for u in range(3, n):
        fadjlist.append(_indices(1, u - 1, u + 1, dtype=dtype))
    fadjlist.append(_indices(1, 2, n - 1, dtype=dtype))
    log.debug("wheel_graph: nv=%d, ne=%d", n, ne)
    return SimpleGraph(ne, fadjlist, dtype=dtype)


def wheel_digraph(n: int, dtype: Any = None) -> SimpleDiGraph:
    """Directed wheel: hub 1 points at every rim vertex, rim runs 2 -> 3 -> ... -> n -> 2.

    n <= 2 gives path_digraph(n); n = 3 gives the hand-built digraph with
    arcs 1->2, 1->3, 2->3, 3->2.
    """
    dtype = index_dtype(n, dtype=dtype)
    n = int(n)
    if n <= 2:
        return path_digraph(n, dtype=dtype)
    if n == 3:
        return SimpleDiGraph.from_edges([(1, 2), (1, 3), (2, 3), (3, 2)], dtype=dtype)
    n = narrow(n, dtype)
    ne = checked_edge_count(2 * (n - 1))

    fadjlist = [np.arange(2, n + 1).astype(dtype), _indices(3, dtype=dtype)]
    badjlist = [np.zeros(0, dtype=dtype), _indices(1, n, dtype=dtype)]
    for u in range(3, n):
        fadjlist.append(_indices(u + 1, dtype=dtype))
        badjlist.append(_indices(1, u - 1, dtype=dtype))
    fadjlist.append(_indices(2, dtype=dtype))
    badjlist.append(_indices(1, n - 1, dtype=dtype))
    log.debug("wheel_digraph: nv=%d, ne=%d", n, ne)
    return SimpleDiGraph(ne, fadjlist, badjlist, dtype=dtype)


def binary_tree(k: int, dtype: Any = None) -> SimpleGraph:
    """Complete binary tree of depth k on 2^k - 1 vertices.

    Heap numbering: vertex j has parent j // 2 and children 2j, 2j + 1.
    Level i holds vertices 2^i .. 2^(i+1) - 1; vertices on the deepest
    level (i = k - 1) list only their parent.

    Args:
        k: Depth (number of levels). k <= 0 gives the empty graph and
            k = 1 a single vertex.
        dtype: Optional index dtype; inferred from ``k`` otherwise.

    Returns:
        SimpleGraph tree with 2^k - 2 edges.

    Raises:
        SizeOverflow: If 2^k - 1 does not fit in the index dtype.
    """
    dtype = index_dtype(k, dtype=dtype)
    k = int(k)
    if k <= 0:
        return SimpleGraph.empty(0, dtype=dtype)
    if k == 1:
        return SimpleGraph.empty(1, dtype=dtype)
    n = checked_pow(2, k, dtype=dtype, offset=-1)
    ne = checked_edge_count(n - 1)

    fadjlist = [_indices(2, 3, dtype=dtype)]
    for i in range(1, k - 1):
        for j in range(2**i, 2 ** (i + 1)):
            fadjlist.append(_indices(j // 2, 2 * j, 2 * j + 1, dtype=dtype))
    i = k - 1
    for j in range(2**i, 2 ** (i + 1)):
        fadjlist.append(_indices(j // 2, dtype=dtype))
    log.debug("binary_tree: depth=%d, nv=%d, ne=%d", k, n, ne)
    return SimpleGraph(ne, fadjlist, dtype=dtype)
