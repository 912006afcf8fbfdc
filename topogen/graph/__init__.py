"""Graph containers, composition primitives, and invariant validation."""

from topogen.graph.ops import blockdiag, cartesian_product, crosspath
from topogen.graph.simple import EdgeInsertion, SimpleDiGraph, SimpleGraph
from topogen.graph.validation import validate_graph

__all__ = [
    "EdgeInsertion",
    "SimpleDiGraph",
    "SimpleGraph",
    "blockdiag",
    "cartesian_product",
    "crosspath",
    "validate_graph",
]
