"""Name -> constructor table for config-driven graph building."""

from collections.abc import Callable
from dataclasses import dataclass

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


@dataclass(frozen=True, slots=True)
class FamilyInfo:
    """Constructor and call signature for one graph family.

    ``arity`` is the number of positional integer parameters, or None for
    the lattice, whose parameters are the variable-length ``dims``.
    """

    builder: Callable
    arity: int | None
    directed: bool = False
    periodic: bool = False  # accepts the periodic flag


FAMILIES: dict[str, FamilyInfo] = {
    "complete": FamilyInfo(complete_graph, 1),
    "complete_bipartite": FamilyInfo(complete_bipartite_graph, 2),
    "complete_digraph": FamilyInfo(complete_digraph, 1, directed=True),
    "star": FamilyInfo(star_graph, 1),
    "star_digraph": FamilyInfo(star_digraph, 1, directed=True),
    "path": FamilyInfo(path_graph, 1),
    "path_digraph": FamilyInfo(path_digraph, 1, directed=True),
    "cycle": FamilyInfo(cycle_graph, 1),
    "cycle_digraph": FamilyInfo(cycle_digraph, 1, directed=True),
    "wheel": FamilyInfo(wheel_graph, 1),
    "wheel_digraph": FamilyInfo(wheel_digraph, 1, directed=True),
    "binary_tree": FamilyInfo(binary_tree, 1),
    "double_binary_tree": FamilyInfo(double_binary_tree, 1),
    "roach": FamilyInfo(roach_graph, 1),
    "clique": FamilyInfo(clique_graph, 2),
    "grid": FamilyInfo(grid, None, periodic=True),
}
