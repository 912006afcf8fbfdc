"""Adjacency-list graph containers with 1-based contiguous vertices.

Vertices are the integers 1..nv. Each vertex owns a sorted numpy array of
neighbor indices in the graph's index dtype. The undirected SimpleGraph keeps
one list per vertex; SimpleDiGraph keeps forward (out) and backward (in)
lists. Both convert to and from scipy CSR adjacency matrices.
"""

import enum
from collections.abc import Iterable, Iterator
from typing import Any, ClassVar

import numpy as np
import scipy.sparse

from topogen.sizes import DEFAULT_INDEX_DTYPE, narrow


class EdgeInsertion(enum.Enum):
    """Outcome of an add_edge call."""

    ADDED = "added"
    DUPLICATE = "duplicate"
    SELF_LOOP = "self_loop"
    OUT_OF_RANGE = "out_of_range"


def _sorted_insert(arr: np.ndarray, v: int) -> np.ndarray:
    return np.insert(arr, np.searchsorted(arr, v), v)


def _contains(arr: np.ndarray, v: int) -> bool:
    i = np.searchsorted(arr, v)
    return bool(i < len(arr) and arr[i] == v)


def _lists_to_csr(adjlist: list[np.ndarray], n: int) -> scipy.sparse.csr_matrix:
    """Pack 1-based adjacency lists into an n x n 0/1 CSR matrix."""
    indptr = np.zeros(n + 1, dtype=np.int64)
    if n > 0:
        np.cumsum([len(a) for a in adjlist], out=indptr[1:])
        indices = np.concatenate(adjlist).astype(np.int64) - 1
    else:
        indices = np.zeros(0, dtype=np.int64)
    data = np.ones(len(indices), dtype=np.int64)
    return scipy.sparse.csr_matrix((data, indices, indptr), shape=(n, n))


def _csr_to_lists(adj: scipy.sparse.csr_matrix, dtype: np.dtype) -> list[np.ndarray]:
    """Unpack a CSR matrix into fresh, sorted, 1-based adjacency lists."""
    adj = scipy.sparse.csr_matrix(adj)
    adj.sum_duplicates()
    adj.eliminate_zeros()
    adj.sort_indices()
    return [
        (adj.indices[adj.indptr[u]:adj.indptr[u + 1]] + 1).astype(dtype)
        for u in range(adj.shape[0])
    ]


class _AdjacencyGraph:
    """Shared behavior for the undirected and directed containers."""

    is_directed: ClassVar[bool]

    ne: int
    fadjlist: list[np.ndarray]
    dtype: np.dtype

    @property
    def nv(self) -> int:
        return len(self.fadjlist)

    def vertices(self) -> range:
        return range(1, self.nv + 1)

    def has_vertex(self, v: int) -> bool:
        return 1 <= v <= self.nv

    def outneighbors(self, v: int) -> np.ndarray:
        return self.fadjlist[v - 1]

    def has_edge(self, u: int, v: int) -> bool:
        if not (self.has_vertex(u) and self.has_vertex(v)):
            return False
        return _contains(self.fadjlist[u - 1], v)

    def to_csr(self) -> scipy.sparse.csr_matrix:
        """Forward adjacency as an nv x nv CSR matrix (0-based)."""
        return _lists_to_csr(self.fadjlist, self.nv)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.ne == other.ne
            and self.nv == other.nv
            and all(
                np.array_equal(a, b) for a, b in zip(self.fadjlist, other.fadjlist)
            )
        )

    def __repr__(self) -> str:
        kind = "directed" if self.is_directed else "undirected"
        return (
            f"{type(self).__name__}(nv={self.nv}, ne={self.ne}, "
            f"{kind}, dtype={self.dtype.name})"
        )


class SimpleGraph(_AdjacencyGraph):
    """Undirected simple graph: no self-loops, no parallel edges.

    Built in bulk from a ready adjacency structure (no validation), from an
    empty vertex set via ``empty`` + ``add_edge``, from an edge list, or
    from a symmetric sparse matrix.
    """

    is_directed = False

    def __init__(
        self, ne: int, fadjlist: list[np.ndarray], dtype: Any = DEFAULT_INDEX_DTYPE
    ) -> None:
        self.ne = int(ne)
        self.fadjlist = fadjlist
        self.dtype = np.dtype(dtype)

    @classmethod
    def empty(cls, n: int, dtype: Any = DEFAULT_INDEX_DTYPE) -> "SimpleGraph":
        """Graph on ``n`` vertices with no edges."""
        dtype = np.dtype(dtype)
        n = narrow(n, dtype)
        return cls(0, [np.zeros(0, dtype=dtype) for _ in range(n)], dtype=dtype)

    @classmethod
    def from_edges(
        cls, edges: Iterable[tuple[int, int]], dtype: Any = DEFAULT_INDEX_DTYPE
    ) -> "SimpleGraph":
        """Graph whose vertex count is the largest endpoint in ``edges``."""
        edges = list(edges)
        n = max((max(e) for e in edges), default=0)
        g = cls.empty(n, dtype=dtype)
        for u, v in edges:
            g.add_edge(u, v)
        return g

    @classmethod
    def from_csr(
        cls, adj: scipy.sparse.spmatrix, dtype: Any = DEFAULT_INDEX_DTYPE
    ) -> "SimpleGraph":
        """Graph from a symmetric adjacency matrix with an empty diagonal."""
        dtype = np.dtype(dtype)
        fadjlist = _csr_to_lists(adj, dtype)
        ne = sum(len(a) for a in fadjlist) // 2
        return cls(ne, fadjlist, dtype=dtype)

    def neighbors(self, v: int) -> np.ndarray:
        return self.fadjlist[v - 1]

    inneighbors = neighbors

    def degree(self, v: int) -> int:
        return len(self.fadjlist[v - 1])

    def edges(self) -> Iterator[tuple[int, int]]:
        """Each edge once, as (u, v) with u < v, in ascending order."""
        for u, adj in enumerate(self.fadjlist, start=1):
            for v in adj:
                if v > u:
                    yield u, int(v)

    def add_edge(self, u: int, v: int) -> EdgeInsertion:
        """Insert edge {u, v}, keeping both neighbor lists sorted."""
        if not (self.has_vertex(u) and self.has_vertex(v)):
            return EdgeInsertion.OUT_OF_RANGE
        if u == v:
            return EdgeInsertion.SELF_LOOP
        if _contains(self.fadjlist[u - 1], v):
            return EdgeInsertion.DUPLICATE
        self.fadjlist[u - 1] = _sorted_insert(self.fadjlist[u - 1], v)
        self.fadjlist[v - 1] = _sorted_insert(self.fadjlist[v - 1], u)
        self.ne += 1
        return EdgeInsertion.ADDED


class SimpleDiGraph(_AdjacencyGraph):
    """Directed simple graph with forward and backward adjacency lists.

    Self-loops are representable in a directed graph but none of the
    generated families produce one.
    """

    is_directed = True

    def __init__(
        self,
        ne: int,
        fadjlist: list[np.ndarray],
        badjlist: list[np.ndarray],
        dtype: Any = DEFAULT_INDEX_DTYPE,
    ) -> None:
        self.ne = int(ne)
        self.fadjlist = fadjlist
        self.badjlist = badjlist
        self.dtype = np.dtype(dtype)

    @classmethod
    def empty(cls, n: int, dtype: Any = DEFAULT_INDEX_DTYPE) -> "SimpleDiGraph":
        """Digraph on ``n`` vertices with no edges."""
        dtype = np.dtype(dtype)
        n = narrow(n, dtype)
        return cls(
            0,
            [np.zeros(0, dtype=dtype) for _ in range(n)],
            [np.zeros(0, dtype=dtype) for _ in range(n)],
            dtype=dtype,
        )

    @classmethod
    def from_edges(
        cls, edges: Iterable[tuple[int, int]], dtype: Any = DEFAULT_INDEX_DTYPE
    ) -> "SimpleDiGraph":
        """Digraph whose vertex count is the largest endpoint in ``edges``."""
        edges = list(edges)
        n = max((max(e) for e in edges), default=0)
        g = cls.empty(n, dtype=dtype)
        for u, v in edges:
            g.add_edge(u, v)
        return g

    @classmethod
    def from_csr(
        cls, adj: scipy.sparse.spmatrix, dtype: Any = DEFAULT_INDEX_DTYPE
    ) -> "SimpleDiGraph":
        """Digraph from a (not necessarily symmetric) adjacency matrix."""
        dtype = np.dtype(dtype)
        adj = scipy.sparse.csr_matrix(adj)
        fadjlist = _csr_to_lists(adj, dtype)
        badjlist = _csr_to_lists(adj.T.tocsr(), dtype)
        ne = sum(len(a) for a in fadjlist)
        return cls(ne, fadjlist, badjlist, dtype=dtype)

    def inneighbors(self, v: int) -> np.ndarray:
        return self.badjlist[v - 1]

    def outdegree(self, v: int) -> int:
        return len(self.fadjlist[v - 1])

    def indegree(self, v: int) -> int:
        return len(self.badjlist[v - 1])

    def degree(self, v: int) -> int:
        return self.outdegree(v) + self.indegree(v)

    def edges(self) -> Iterator[tuple[int, int]]:
        """Each arc (u, v) in ascending source-then-target order."""
        for u, adj in enumerate(self.fadjlist, start=1):
            for v in adj:
                yield u, int(v)

    def add_edge(self, u: int, v: int) -> EdgeInsertion:
        """Insert arc u -> v into both the forward and backward lists."""
        if not (self.has_vertex(u) and self.has_vertex(v)):
            return EdgeInsertion.OUT_OF_RANGE
        if _contains(self.fadjlist[u - 1], v):
            return EdgeInsertion.DUPLICATE
        self.fadjlist[u - 1] = _sorted_insert(self.fadjlist[u - 1], v)
        self.badjlist[v - 1] = _sorted_insert(self.badjlist[v - 1], u)
        self.ne += 1
        return EdgeInsertion.ADDED

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is NotImplemented or not result:
            return result
        return all(
            np.array_equal(a, b) for a, b in zip(self.badjlist, other.badjlist)
        )
