"""Deterministic constructors for canonical graph topologies."""

from topogen.generators.composite import double_binary_tree, grid, roach_graph
from topogen.generators.direct import (
    binary_tree,
    complete_bipartite_graph,
    complete_digraph,
    complete_graph,
    path_digraph,
    path_graph,
    star_digraph,
    star_graph,
    wheel_digraph,
    wheel_graph,
)
from topogen.generators.incremental import clique_graph, cycle_digraph, cycle_graph
from topogen.generators.registry import FAMILIES, FamilyInfo

__all__ = [
    "FAMILIES",
    "FamilyInfo",
    "binary_tree",
    "clique_graph",
    "complete_bipartite_graph",
    "complete_digraph",
    "complete_graph",
    "cycle_digraph",
    "cycle_graph",
    "double_binary_tree",
    "grid",
    "path_digraph",
    "path_graph",
    "roach_graph",
    "star_digraph",
    "star_graph",
    "wheel_digraph",
    "wheel_graph",
]
