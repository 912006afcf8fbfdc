"""Graph composition primitives: disjoint union, cartesian product, crosspath.

The product and crosspath are computed on CSR adjacency matrices with
Kronecker products and converted back, so that vertex numbering follows the
standard row-major layout: the product vertex (i, j) of G x H is
(i - 1) * nv(H) + j.
"""

import logging

import numpy as np
import scipy.sparse

from topogen.graph.simple import SimpleDiGraph, SimpleGraph
from topogen.sizes import checked_product, checked_sum, narrow

log = logging.getLogger(__name__)

Graph = SimpleGraph | SimpleDiGraph


def _check_same_kind(g: Graph, h: Graph) -> None:
    if g.is_directed != h.is_directed:
        raise TypeError(
            f"Cannot combine {type(g).__name__} with {type(h).__name__}"
        )


def blockdiag(g: Graph, h: Graph) -> Graph:
    """Disjoint union of g and h; vertex v of h becomes nv(g) + v.

    The result uses g's index dtype; the combined vertex count is checked
    against it.
    """
    _check_same_kind(g, h)
    dtype = g.dtype
    offset = g.nv
    checked_sum(g.nv, h.nv, dtype=dtype)

    fadjlist = [a.astype(dtype, copy=True) for a in g.fadjlist]
    fadjlist += [(a.astype(np.int64) + offset).astype(dtype) for a in h.fadjlist]
    if not g.is_directed:
        return SimpleGraph(g.ne + h.ne, fadjlist, dtype=dtype)

    badjlist = [a.astype(dtype, copy=True) for a in g.badjlist]
    badjlist += [(a.astype(np.int64) + offset).astype(dtype) for a in h.badjlist]
    return SimpleDiGraph(g.ne + h.ne, fadjlist, badjlist, dtype=dtype)


def cartesian_product(g: Graph, h: Graph) -> Graph:
    """Cartesian product G x H on nv(G) * nv(H) vertices.

    (i1, j1) and (i2, j2) are adjacent iff i1 == i2 and j1 ~ j2 in H, or
    j1 == j2 and i1 ~ i2 in G. The result uses g's index dtype.
    """
    _check_same_kind(g, h)
    dtype = g.dtype
    n = checked_product(g.nv, h.nv, dtype=dtype)
    cls = type(g)
    if n == 0:
        return cls.empty(0, dtype=dtype)

    eye_g = scipy.sparse.identity(g.nv, dtype=np.int64, format="csr")
    eye_h = scipy.sparse.identity(h.nv, dtype=np.int64, format="csr")
    adj = scipy.sparse.kron(g.to_csr(), eye_h, format="csr") + scipy.sparse.kron(
        eye_g, h.to_csr(), format="csr"
    )
    product = cls.from_csr(adj, dtype=dtype)
    log.debug(
        "cartesian_product: (%d, %d) x (%d, %d) -> (%d, %d)",
        g.nv, g.ne, h.nv, h.ne, product.nv, product.ne,
    )
    return product


def _path_csr(k: int, directed: bool) -> scipy.sparse.csr_matrix:
    rows = np.arange(k - 1, dtype=np.int64)
    data = np.ones(k - 1, dtype=np.int64)
    forward = scipy.sparse.coo_matrix((data, (rows, rows + 1)), shape=(k, k))
    if directed:
        return forward.tocsr()
    return (forward + forward.T).tocsr()


def crosspath(k: int, g: Graph) -> Graph:
    """k copies of g, with each vertex linked to its twin in the next copy.

    Equivalent to the cartesian product of a k-vertex path with g: copy c
    occupies vertices (c - 1) * nv(g) + 1 .. c * nv(g). k <= 0 gives the
    empty graph.
    """
    k = int(k)
    cls = type(g)
    if k <= 0:
        return cls.empty(0, dtype=g.dtype)
    narrow(k, g.dtype)
    path = cls.from_csr(_path_csr(k, g.is_directed), dtype=g.dtype)
    return cartesian_product(path, g)
