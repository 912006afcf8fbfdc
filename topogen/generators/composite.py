"""Composite constructors: lattices, double binary trees, roach graphs.

These build smaller graphs with the direct and incremental builders and
combine them with the composition primitives in topogen.graph.ops.
"""

import logging
from collections.abc import Sequence
from typing import Any

from topogen.generators.direct import binary_tree, complete_graph, path_graph
from topogen.generators.incremental import add_new_edge, cycle_graph
from topogen.graph.ops import blockdiag, cartesian_product, crosspath
from topogen.graph.simple import SimpleGraph
from topogen.sizes import checked_product, index_dtype

log = logging.getLogger(__name__)


def grid(dims: Sequence[int], periodic: bool = False, dtype: Any = None) -> SimpleGraph:
    """|dims|-dimensional cubic lattice with length dims[i] along dimension i.

    The lattice is folded up as base(dims[-1]) x ... x base(dims[1]) x
    base(dims[0]), where base is path_graph, or cycle_graph when
    ``periodic`` is set. The first dimension therefore varies fastest:
    lattice point (x_1, ..., x_d) is vertex
    1 + sum_i (x_i - 1) * prod(dims[:i]).

    Args:
        dims: Length along each dimension.
        periodic: Close every dimension into a cycle.
        dtype: Optional index dtype; inferred from ``dims`` otherwise.

    Returns:
        SimpleGraph on prod(dims) vertices. Empty ``dims`` or any
        dims[i] <= 0 gives the empty graph.

    Raises:
        SizeOverflow: If prod(dims) does not fit in the index dtype.
    """
    dims = list(dims)
    dtype = index_dtype(*dims, dtype=dtype)
    if not dims or any(d <= 0 for d in dims):
        return SimpleGraph.empty(0, dtype=dtype)
    n = checked_product(*dims, dtype=dtype)

    base = cycle_graph if periodic else path_graph
    g = base(dims[0], dtype=dtype)
    for d in dims[1:]:
        g = cartesian_product(base(d, dtype=dtype), g)
    log.debug(
        "grid: dims=%s, periodic=%s, nv=%d, ne=%d",
        [int(d) for d in dims], periodic, n, g.ne,
    )
    return g


def double_binary_tree(k: int, dtype: Any = None) -> SimpleGraph:
    """Two binary trees of depth k with their roots joined by an edge.

    Used as a hard example for spectral partitioning (Guattery and Miller
    1998). k <= 0 gives the empty graph.
    """
    dtype = index_dtype(k, dtype=dtype)
    if int(k) <= 0:
        return SimpleGraph.empty(0, dtype=dtype)
    left = binary_tree(k, dtype=dtype)
    right = binary_tree(k, dtype=dtype)
    g = blockdiag(left, right)
    add_new_edge(g, 1, left.nv + 1)
    log.debug("double_binary_tree: depth=%d, nv=%d, ne=%d", int(k), g.nv, g.ne)
    return g


def roach_graph(k: int, dtype: Any = None) -> SimpleGraph:
    """Roach graph of size k (Guattery and Miller 1998).

    Two ladders of length k: the "antennae" are k chained copies of two
    isolated vertices (two parallel paths), the "body" k chained copies of
    a single edge (a ladder). The last rung of the antennae is joined to
    the first rung of the body by two edges. k <= 0 gives the empty graph.
    """
    dtype = index_dtype(k, dtype=dtype)
    if int(k) <= 0:
        return SimpleGraph.empty(0, dtype=dtype)
    nopole = SimpleGraph.empty(2, dtype=dtype)
    dipole = complete_graph(2, dtype=dtype)
    antennae = crosspath(k, nopole)
    body = crosspath(k, dipole)
    g = blockdiag(antennae, body)
    add_new_edge(g, antennae.nv - 1, antennae.nv + 1)
    add_new_edge(g, antennae.nv, antennae.nv + 2)
    log.debug("roach_graph: k=%d, nv=%d, ne=%d", int(k), g.nv, g.ne)
    return g
