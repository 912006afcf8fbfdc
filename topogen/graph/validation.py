"""Structural invariant checks for generated graphs.

A well-formed graph satisfies:
1. Every adjacency entry lies in 1..nv
2. Every adjacency list is strictly ascending (sorted, no repeats)
3. No self-loops
4. Undirected: v in adj[u] iff u in adj[v];
   directed: v in fadj[u] iff u in badj[v]
5. Declared edge count matches the adjacency lists
"""

import logging

import numpy as np

from topogen.graph.simple import SimpleDiGraph, SimpleGraph, _lists_to_csr

log = logging.getLogger(__name__)


def _check_lists(adjlist: list[np.ndarray], n: int, label: str) -> list[str]:
    errors: list[str] = []
    for u, adj in enumerate(adjlist, start=1):
        if len(adj) == 0:
            continue
        if adj.min() < 1 or adj.max() > n:
            errors.append(
                f"{label}[{u}] has index outside 1..{n}: {adj.tolist()}"
            )
            continue
        if np.any(np.diff(adj.astype(np.int64)) <= 0):
            errors.append(
                f"{label}[{u}] is not strictly ascending: {adj.tolist()}"
            )
        if np.any(adj == u):
            errors.append(f"{label}[{u}] contains a self-loop")
    return errors


def validate_graph(g: SimpleGraph | SimpleDiGraph) -> list[str]:
    """Validate a graph against the container invariants.

    Cheap per-list checks run first; the symmetry / consistency check
    compares sparse adjacency matrices and only runs once every index
    is known to be in range.

    Args:
        g: Graph to check.

    Returns:
        List of error strings (empty = valid graph).
    """
    n = g.nv
    errors = _check_lists(g.fadjlist, n, "fadjlist")
    if g.is_directed:
        if len(g.badjlist) != n:
            errors.append(
                f"badjlist has {len(g.badjlist)} entries for {n} vertices"
            )
            return errors
        errors += _check_lists(g.badjlist, n, "badjlist")

    if errors:
        log.debug("Skipping consistency checks after %d list errors", len(errors))
        return errors

    degree_sum = sum(len(a) for a in g.fadjlist)
    forward = _lists_to_csr(g.fadjlist, n)
    if g.is_directed:
        backward = _lists_to_csr(g.badjlist, n)
        mismatched = (forward != backward.T).nnz
        if mismatched:
            errors.append(
                f"Forward and backward adjacency disagree on {mismatched} entries"
            )
        expected_ne = degree_sum
    else:
        mismatched = (forward != forward.T).nnz
        if mismatched:
            errors.append(f"Adjacency is not symmetric: {mismatched} entries")
        expected_ne = degree_sum // 2
        if degree_sum % 2:
            errors.append(f"Odd degree sum {degree_sum} in an undirected graph")

    if g.ne != expected_ne:
        errors.append(
            f"Declared edge count {g.ne} != {expected_ne} from adjacency"
        )

    log.debug(
        "Validated %s: nv=%d, ne=%d, errors=%d",
        type(g).__name__, n, g.ne, len(errors),
    )
    return errors
